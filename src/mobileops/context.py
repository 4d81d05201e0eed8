# mobileops/context.py
# Typed skin configuration and the per-request viewing context

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from .messages import Messages
from .models import Title
from .utils import is_mobile_host, make_desktop_url, make_mobile_url

# Query values of "mobileaction" that switch the view
TOGGLE_VIEW_MOBILE = "toggle_view_mobile"
TOGGLE_VIEW_DESKTOP = "toggle_view_desktop"

# Cookie remembering the chosen view
USEFORMAT_COOKIE = "mf_useformat"


@dataclass(frozen=True)
class SkinConfig:
    """
    Configuration consumed by the mobile skin, built once per application
    from the Flask config mapping.
    """
    sitename: str = "Wiki"
    server: str = "https://en.wikipedia.org"
    article_path: str = "/wiki/$1"
    script_path: str = "/w/index.php"
    api_url: str = "https://en.wikipedia.org/w/api.php"
    api_timeout: int = 10
    content_language: str = "en"
    main_page: str = "Main Page"
    mobile_url_template: str = "%h0.m.%h1.%h2"
    # License link target page, external fallback and display text
    rights_page: Optional[str] = None
    rights_url: Optional[str] = None
    rights_text: Optional[str] = None
    # {"copyright": url, "copyright-width": .., "copyright-height": ..}
    custom_logos: Dict[str, Any] = field(default_factory=dict)
    # None, "registered" or any other truthy value for an unregistered mark
    trademark_sitename: Optional[str] = None
    display_wikibase_descriptions: Dict[str, bool] = field(default_factory=dict)
    search_api_params: Dict[str, Any] = field(default_factory=dict)
    query_prop_modules: List[str] = field(default_factory=list)
    no_mobile_pages: List[str] = field(default_factory=list)

    @classmethod
    def from_mapping(cls, config: Mapping[str, Any]) -> "SkinConfig":
        defaults = cls()
        return cls(
            sitename=config.get("SITENAME", defaults.sitename),
            server=config.get("SERVER", defaults.server),
            article_path=config.get("ARTICLE_PATH", defaults.article_path),
            script_path=config.get("SCRIPT_PATH", defaults.script_path),
            api_url=config.get("API_URL", defaults.api_url),
            api_timeout=int(config.get("API_TIMEOUT", defaults.api_timeout)),
            content_language=config.get("CONTENT_LANGUAGE", defaults.content_language),
            main_page=config.get("MAIN_PAGE", defaults.main_page),
            mobile_url_template=config.get("MOBILE_URL_TEMPLATE", defaults.mobile_url_template),
            rights_page=config.get("RIGHTS_PAGE") or None,
            rights_url=config.get("RIGHTS_URL") or None,
            rights_text=config.get("RIGHTS_TEXT") or None,
            custom_logos=dict(config.get("CUSTOM_LOGOS") or {}),
            trademark_sitename=config.get("TRADEMARK_SITENAME") or None,
            display_wikibase_descriptions=dict(config.get("DISPLAY_WIKIBASE_DESCRIPTIONS") or {}),
            search_api_params=dict(config.get("SEARCH_API_PARAMS") or {}),
            query_prop_modules=list(config.get("QUERY_PROP_MODULES") or []),
            no_mobile_pages=list(config.get("NO_MOBILE_PAGES") or []),
        )


@dataclass
class MobileContext:
    """
    Everything the skin needs to know about the current request. Built once
    per request and passed explicitly to the footer and special pages.
    """
    config: SkinConfig
    messages: Messages
    is_mobile_view: bool = False
    title: Optional[Title] = None
    query: Dict[str, str] = field(default_factory=dict)
    # Desktop URL of the current output, when the page knows it
    desktop_url: Optional[str] = None

    @classmethod
    def from_request(cls, request: Any, config: SkinConfig, messages: Messages,
                     title: Optional[Title] = None) -> "MobileContext":
        """
        Derive the viewing context from a request object exposing ``args``,
        ``cookies`` and ``host``.
        """
        query = request.args.to_dict() if hasattr(request.args, "to_dict") else dict(request.args)
        return cls(
            config=config,
            messages=messages,
            is_mobile_view=should_display_mobile_view(query, request.cookies, request.host, config),
            title=title,
            query=query,
        )

    @property
    def is_blacklisted_page(self) -> bool:
        if self.title is None:
            return False
        return self.title.prefixed_text in self.config.no_mobile_pages

    @property
    def page_title(self) -> Title:
        return self.title or Title(self.config.main_page)

    def get_mobile_url(self, url: str) -> str:
        return make_mobile_url(url, self.config.mobile_url_template)

    def get_desktop_url(self, url: str) -> str:
        return make_desktop_url(url, self.config.mobile_url_template)


def should_display_mobile_view(query: Mapping[str, str], cookies: Mapping[str, str],
                               host: str, config: SkinConfig) -> bool:
    """
    Decide between the mobile and desktop view: an explicit toggle wins,
    then the useformat query value, then the remembered cookie, then the host.
    """
    action = query.get("mobileaction")
    if action == TOGGLE_VIEW_MOBILE:
        return True
    if action == TOGGLE_VIEW_DESKTOP:
        return False

    useformat = query.get("useformat") or cookies.get(USEFORMAT_COOKIE)
    if useformat in ("mobile", "mobile-wap"):
        return True
    if useformat == "desktop":
        return False

    hostname = (host or "").split(":", 1)[0]
    return is_mobile_host(hostname, config.mobile_url_template)
