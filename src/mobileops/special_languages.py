"""
special_languages.py - Special:MobileLanguages

Lists the languages and language variants a page is available in.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Sequence, Tuple

from markupsafe import Markup

from .context import MobileContext
from .exceptions import NotFoundInput
from .html import close_element, element, open_element
from .languages import fetch_language_names, get_language_variants, process_languages
from .messages import Messages
from .models import LanguageLink, PageLanguageData, RenderedPage, Title, VariantLink
from .query import fetch_language_links

logger = logging.getLogger(__name__)

Fetcher = Callable[..., Tuple[Optional[PageLanguageData], Optional[str]]]


def make_lang_list_item(url: str, lang: str, name: str, label: Optional[str] = None) -> Markup:
    """Build the <li> element for one language or variant link."""
    return (
        open_element("li")
        + element("a", {
            "href": url,
            "hreflang": lang,
            "lang": lang,
            "title": label or name,
        }, name)
        + close_element("li")
    )


def _language_items(languages: Sequence[LanguageLink]) -> Markup:
    return Markup("").join(
        make_lang_list_item(language.url, language.code, language.language_name, language.label)
        for language in languages
    )


def _variant_items(variants: Sequence[VariantLink]) -> Markup:
    return Markup("").join(
        make_lang_list_item(variant.url, variant.code, variant.variant_name)
        for variant in variants
    )


def content_element(html: str) -> Markup:
    return element("div", {"class": "content"}, Markup(html))


def check_page_name(pagename: Any, messages: Messages) -> None:
    """Raise NotFoundInput unless the page name is a non-empty string."""
    if not isinstance(pagename, str) or pagename == "":
        raise NotFoundInput(
            messages.text("mobile-frontend-languages-404-title"),
            messages.text("mobile-frontend-languages-404-desc"),
        )


def render_languages_page(
    pagename: Any,
    title: Optional[Title],
    languages: Sequence[LanguageLink],
    variants: Sequence[VariantLink],
    messages: Messages,
    config: Any,
) -> RenderedPage:
    """
    Render the language list of a page.

    Raises NotFoundInput when no page name was given. A page that does not
    exist renders a short notice instead of the lists.
    """
    check_page_name(pagename, messages)

    html = Markup("")
    if title is not None and title.exists:
        titlename = title.prefixed_text
        page_title = messages.text("mobile-frontend-languages-header-page", titlename)
        languages_count = len(languages)
        variants_count = len(variants)

        html += element("p", {}, messages.text("mobile-frontend-languages-text", titlename, languages_count))
        html += open_element("p")
        html += element("a", {"href": title.local_url(config)}, messages.text("returnto", titlename))
        html += close_element("p")

        # Variants first, then other languages
        if variants_count > 1:
            html += element("h2", {"id": "mw-mf-language-variant-header"},
                            messages.text("mobile-frontend-languages-variant-header"))
            html += open_element("ul", {"id": "mw-mf-language-variant-selection"})
            html += _variant_items(variants)
            html += close_element("ul")

        if languages_count > 0:
            html += element("h2", {"id": "mw-mf-language-header"},
                            messages.text("mobile-frontend-languages-header"))
            html += open_element("ul", {"id": "mw-mf-language-selection"})
            html += _language_items(languages)
            html += close_element("ul")
    else:
        page_title = messages.text("mobile-frontend-languages-header")
        html += element("p", {}, messages.text("mobile-frontend-languages-nonexistent-title", pagename))

    return RenderedPage(page_title=page_title, html=str(content_element(html)))


def execute(pagename: Any, ctx: MobileContext, fetch: Fetcher = fetch_language_links) -> RenderedPage:
    """
    Fetch, process and render the language list for ``pagename``.

    A failed fetch is logged and rendered as a page without language links.
    """
    check_page_name(pagename, ctx.messages)

    config = ctx.config
    title = Title.new_from_text(pagename)
    languages = []
    variants = []

    if title is not None:
        data, error = fetch(title.prefixed_text, api_url=config.api_url, timeout=config.api_timeout)
        if error:
            logger.warning("Could not fetch language links for %r: %s", title.prefixed_text, error)
            data = None

        if data is not None:
            title.exists = data.exists
            languages = process_languages(data.links, fetch_language_names(), ctx.get_mobile_url)

        if title.exists:
            page_language = (data.page_language if data is not None else None) or config.content_language
            variants = get_language_variants(title, page_language, config)

    return render_languages_page(pagename, title, languages, variants, ctx.messages, config)
