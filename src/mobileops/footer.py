# mobileops/footer.py
# Footer construction for the mobile and desktop sites

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Optional, Protocol, Tuple

from markupsafe import Markup

from .context import TOGGLE_VIEW_DESKTOP, TOGGLE_VIEW_MOBILE, MobileContext
from .html import element
from .messages import Messages
from .models import FooterState, LicenseInfo, Title
from .utils import append_query, expand_url

logger = logging.getLogger(__name__)

# Shorter text for some common licensing strings
COMMON_LICENSES = {
    "Creative Commons Attribution-Share Alike 3.0": "CC BY-SA 3.0",
    "Creative Commons Attribution Share Alike": "CC BY-SA",
    "Creative Commons Attribution 3.0": "CC BY 3.0",
    "Creative Commons Attribution 2.5": "CC BY 2.5",
    "Creative Commons Attribution": "CC BY",
    "Creative Commons Attribution Non-Commercial Share Alike": "CC BY-NC-SA",
    "Creative Commons Zero (Public Domain)": "CC0 (Public Domain)",
    "GNU Free Documentation License 1.3 or later": "GFDL 1.3 or later",
}

MOBILE_FOOTER_PLACES = ["terms-use", "privacy", "desktop-toggle"]


class LicenseLinkDecorator(Protocol):
    """Rewrites the license link and/or message key before the footer uses them."""

    def __call__(self, link: str, context: str, attribs: Dict[str, str], msg: str) -> Tuple[str, str]:
        ...


class FooterDecorator(Protocol):
    """Receives the mobile footer state and returns it, possibly changed."""

    def __call__(self, state: FooterState, ctx: MobileContext) -> FooterState:
        ...


def make_internal_or_external_url(target: str, config: Any) -> Optional[str]:
    """Return ``target`` if it is a URL, else the local URL of the page it names."""
    if target.startswith(("http://", "https://", "//")):
        return target
    title = Title.new_from_text(target)
    if title is None:
        return None
    return title.local_url(config)


def get_terms_link(ctx: MobileContext, url_msg_key: str = "mobile-frontend-terms-url") -> Optional[Markup]:
    """
    Returns HTML of the terms of use link, or None if it shouldn't be displayed.
    """
    messages = ctx.messages
    if messages.is_disabled(url_msg_key):
        return None
    url = make_internal_or_external_url(messages.plain(url_msg_key), ctx.config)
    if url is None:
        return None
    return element("a", {"href": url}, messages.text("mobile-frontend-terms-text"))


def footer_link(ctx: MobileContext, desc_key: str, page_key: str) -> Markup:
    """Link to the page named by the ``page_key`` message, or empty markup."""
    messages = ctx.messages
    if messages.is_disabled(page_key) or messages.is_disabled(desc_key):
        return Markup("")
    title = Title.new_from_text(messages.plain(page_key))
    if title is None:
        return Markup("")
    return element("a", {"href": title.local_url(ctx.config), "title": title.prefixed_text},
                   messages.text(desc_key))


def get_plural_license_info(license_text: str, messages: Messages, delimiter_key: str = "and") -> int:
    """
    Returns 2 if the license text holds several licenses, 1 otherwise.

    Several licenses are assumed to be joined by the localized "and".
    """
    if messages.is_disabled(delimiter_key):
        return 1
    if messages.text(delimiter_key) not in license_text:
        return 1
    return 2


def get_license(
    ctx: MobileContext,
    context: str,
    attribs: Optional[Dict[str, str]] = None,
    decorators: Iterable[LicenseLinkDecorator] = (),
) -> LicenseInfo:
    """
    Returns the license link for ``context`` (footer, editor, talk, upload).

    For example:
        <a title="Wikipedia:Copyright" href="/wiki/Wikipedia:Copyright">CC BY</a>
    """
    config = ctx.config
    attribs = dict(attribs or {})
    rights_text = config.rights_text

    if rights_text:
        rights_text = COMMON_LICENSES.get(rights_text, rights_text)
        title = Title.new_from_text(config.rights_page) if config.rights_page else None
        if title is not None:
            link = element("a", {"href": title.local_url(config), "title": title.prefixed_text, **attribs},
                           rights_text)
        elif config.rights_url:
            link = element("a", {"rel": "nofollow", "class": "external", "href": config.rights_url, **attribs},
                           rights_text)
        else:
            link = Markup.escape(rights_text)
    else:
        link = Markup("")

    msg = "mobile-frontend-copyright"
    for decorate in decorators:
        link, msg = decorate(link, context, attribs, msg)

    return LicenseInfo(msg=msg, link=str(link), plural=get_plural_license_info(str(link), ctx.messages))


def get_sitename(ctx: MobileContext, with_possible_trademark: bool = False) -> Markup:
    """
    Returns the site name for the footer, either as text or an <img> tag.

    With ``with_possible_trademark`` a configured trademark symbol is
    appended.
    """
    config = ctx.config
    custom_logos = config.custom_logos
    trademark = config.trademark_sitename
    footer_sitename = ctx.messages.text("mobile-frontend-footer-sitename")

    suffix = Markup("")
    if with_possible_trademark:
        if trademark == "registered":
            suffix = element("sup", {}, "®")
        elif trademark:
            suffix = element("sup", {}, "™")

    if custom_logos.get("copyright"):
        attributes = {
            "src": custom_logos["copyright"],
            "alt": footer_sitename,
        }
        if custom_logos.get("copyright-height") is not None:
            attributes["height"] = custom_logos["copyright-height"]
        if custom_logos.get("copyright-width") is not None:
            attributes["width"] = custom_logos["copyright-width"]
        sitename = element("img", attributes)
    else:
        sitename = Markup.escape(footer_sitename)

    return sitename + suffix


def desktop_footer(ctx: MobileContext, state: FooterState) -> FooterState:
    """Appends a mobile view link to the desktop footer."""
    footerlinks = dict(state.get("footerlinks") or {})
    args = {key: value for key, value in ctx.query.items() if key not in ("title", "useformat")}
    args["mobileaction"] = TOGGLE_VIEW_MOBILE

    mobile_view_url = ctx.get_mobile_url(ctx.page_title.full_url(ctx.config, args))
    state["mobileview"] = element(
        "a",
        {"href": mobile_view_url, "class": "noprint stopMobileRedirectToggle"},
        ctx.messages.text("mobile-frontend-view"),
    )
    footerlinks["places"] = list(footerlinks.get("places") or []) + ["mobileview"]
    state["footerlinks"] = footerlinks
    return state


def mobile_footer(
    ctx: MobileContext,
    state: FooterState,
    decorators: Iterable[FooterDecorator] = (),
    license_decorators: Iterable[LicenseLinkDecorator] = (),
) -> FooterState:
    """Replaces the footer links with the mobile set and fills the footer slots."""
    config = ctx.config
    messages = ctx.messages

    if ctx.desktop_url:
        url = append_query(ctx.desktop_url, "mobileaction=" + TOGGLE_VIEW_DESKTOP)
    else:
        url = ctx.page_title.local_url(config, {**ctx.query, "mobileaction": TOGGLE_VIEW_DESKTOP})
    desktop_url = ctx.get_desktop_url(expand_url(url, config.server))

    desktop_toggler = element("a", {"id": "mw-mf-display-toggle", "href": desktop_url},
                              messages.text("mobile-frontend-view-desktop"))

    # Licensing text displayed in the footer of each page
    license_info = get_license(ctx, "footer", decorators=license_decorators)
    if license_info.link:
        license_text = messages.raw(license_info.msg, Markup(license_info.link), license_info.plural)
    else:
        license_text = Markup("")

    state["footer-site-heading-html"] = get_sitename(ctx, True)
    state["desktop-toggle"] = desktop_toggler
    state["mobile-license"] = license_text
    state["privacy"] = footer_link(ctx, "mobile-frontend-privacy-link-text", "privacypage")
    state["terms-use"] = get_terms_link(ctx)
    state["footerlinks"] = {"places": list(MOBILE_FOOTER_PLACES)}

    for decorate in decorators:
        state = decorate(state, ctx)
    return state


def prepare_footer(
    ctx: MobileContext,
    state: Optional[FooterState] = None,
    decorators: Iterable[FooterDecorator] = (),
    license_decorators: Iterable[LicenseLinkDecorator] = (),
) -> FooterState:
    """
    Prepares the footer for the desktop or mobile site. Pages without a
    mobile equivalent keep their footer untouched.
    """
    state = state if state is not None else {"footerlinks": {"places": []}}
    if ctx.is_blacklisted_page:
        logger.debug("Leaving footer untouched for %s", ctx.page_title.prefixed_text)
        return state

    if ctx.is_mobile_view:
        return mobile_footer(ctx, state, decorators, license_decorators)
    return desktop_footer(ctx, state)
