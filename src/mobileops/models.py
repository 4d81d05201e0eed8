# mobileops/models.py
# Dataclasses for language links, variants, licenses and titles

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional
from urllib.parse import quote, urlencode

from .utils import normalize_title

# Footer slot name -> markup (or a nested structure for "footerlinks")
FooterState = Dict[str, Any]


@dataclass(frozen=True)
class RawLanguageLink:
    """One cross-language link as returned by the query API."""
    lang: str
    url: str
    title: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Optional["RawLanguageLink"]:
        """
        Parse an API entry. Returns None for entries that lack a string
        language code or URL.
        """
        lang = data.get("lang")
        url = data.get("url")
        if not isinstance(lang, str) or not lang or not isinstance(url, str) or not url:
            return None
        # formatversion=1 keeps the label under "*"
        title = data.get("title", data.get("*"))
        return cls(lang=lang, url=url, title=title if isinstance(title, str) else None)


@dataclass(frozen=True)
class LanguageLink:
    """A cross-language link with a resolved display name and mobile URL."""
    code: str
    url: str
    language_name: str
    raw_label: Optional[str] = None

    @property
    def label(self) -> str:
        return self.raw_label or self.language_name


@dataclass(frozen=True)
class VariantLink:
    """A link to the same article rendered in another script/orthography."""
    code: str
    variant_name: str
    url: str


@dataclass
class PageLanguageData:
    """Language-related facts about one page, parsed from the query API."""
    title: str
    exists: bool
    page_language: Optional[str] = None
    links: List[RawLanguageLink] = field(default_factory=list)


@dataclass(frozen=True)
class LicenseInfo:
    msg: str
    link: str
    plural: int = 1


@dataclass(frozen=True)
class RenderedPage:
    page_title: str
    html: str


@dataclass
class Title:
    """A wiki page title and the URLs pointing at it."""
    text: str
    exists: bool = True

    @classmethod
    def new_from_text(cls, text: Any) -> Optional["Title"]:
        normalized = normalize_title(text)
        if normalized is None:
            return None
        return cls(text=normalized)

    @property
    def prefixed_text(self) -> str:
        return self.text

    @property
    def db_key(self) -> str:
        return self.text.replace(" ", "_")

    def local_url(self, config: Any, query: Optional[Mapping[str, Any]] = None) -> str:
        """
        Server-relative URL of the page. Without query values this is the
        pretty article path, otherwise the script path with a title parameter.
        """
        if not query:
            return config.article_path.replace("$1", quote(self.db_key, safe="/:~!*,;@$'()"))
        values = [("title", self.db_key)]
        values.extend((key, str(value)) for key, value in query.items() if key != "title")
        return f"{config.script_path}?{urlencode(values)}"

    def full_url(self, config: Any, query: Optional[Mapping[str, Any]] = None) -> str:
        return config.server.rstrip("/") + self.local_url(config, query)
