"""
special/routes.py - Special Pages Blueprint Routes

Routes for Special:MobileLanguages.
"""

from __future__ import annotations

from flask import current_app

from extensions import limiter
from main_app.skin import build_context, render_page
from main_app.special import bp
from mobileops import Title
from mobileops.special_languages import execute


SPECIAL_PAGE = "Special:MobileLanguages"


def special_page_name(pagename: str) -> str:
    """Prefixed title of the languages page for ``pagename``, e.g. "Special:MobileLanguages/Dog"."""
    title = Title.new_from_text(pagename)
    if title is None:
        return SPECIAL_PAGE
    return f"{SPECIAL_PAGE}/{title.prefixed_text}"


def _special_page_limit() -> str:
    return current_app.config.get("SPECIAL_PAGE_RATE_LIMIT", "30 per minute")


@bp.route("/Special:MobileLanguages", defaults={"pagename": ""})
@bp.route("/Special:MobileLanguages/<path:pagename>")
@limiter.limit(_special_page_limit)
def mobile_languages(pagename: str) -> str:
    """
    List the languages and variants the given page is available in.

    An empty page name raises NotFoundInput, which the application renders as
    a 404 page.
    """
    # The skin (footer toggles, blacklist) works on the special page itself
    ctx = build_context(Title(special_page_name(pagename)))
    page = execute(pagename, ctx)
    current_app.logger.debug("Rendered languages page for %r", pagename)
    return render_page("special_page.html", ctx, page=page)
