"""
mobileops - Mobile Presentation Operations

This package provides the mobile skin logic of MobileFrontend:

Modules:
    languages: Language names, link normalization and variant listing
    query: Wiki API integration for cross-language links
    special_languages: Special:MobileLanguages rendering
    footer: Desktop and mobile footer construction, licensing text
    search: Search API parameter extension for Wikibase descriptions
    context: Typed skin configuration and per-request viewing context
    messages: Localized interface messages
    models: Dataclasses shared by the modules above
    utils: Title normalization and mobile/desktop URL rewriting

Typical Usage:
    >>> from mobileops import SkinConfig, Messages, MobileContext
    >>> from mobileops.special_languages import execute
    >>>
    >>> ctx = MobileContext(config=SkinConfig(), messages=Messages(), is_mobile_view=True)
    >>> page = execute("Dog", ctx)
    >>> page.page_title
    'Languages: Dog'

Nothing here keeps state between requests; every function takes what it
needs as arguments.
"""

from __future__ import annotations

# Re-export commonly used names for convenience.
from .context import MobileContext, SkinConfig
from .exceptions import InvalidFeature, MobileFrontendError, NotFoundInput
from .footer import get_license, get_sitename, get_terms_link, prepare_footer
from .languages import get_language_variants, process_languages, to_bcp47
from .messages import Messages
from .models import LanguageLink, LicenseInfo, RenderedPage, Title, VariantLink
from .search import extend_search_params
from .special_languages import render_languages_page

__all__ = [
    # context module
    "MobileContext",
    "SkinConfig",
    # exceptions module
    "InvalidFeature",
    "MobileFrontendError",
    "NotFoundInput",
    # footer module
    "get_license",
    "get_sitename",
    "get_terms_link",
    "prepare_footer",
    # languages module
    "get_language_variants",
    "process_languages",
    "to_bcp47",
    # messages module
    "Messages",
    # models module
    "LanguageLink",
    "LicenseInfo",
    "RenderedPage",
    "Title",
    "VariantLink",
    # search module
    "extend_search_params",
    # special_languages module
    "render_languages_page",
]

__version__ = "1.0.0"
