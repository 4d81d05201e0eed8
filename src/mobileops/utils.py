from __future__ import annotations

import re
from typing import Mapping, Optional, Union
from urllib.parse import urlencode, urlsplit, urlunsplit

# Characters MediaWiki refuses in page titles
INVALID_TITLE_CHARS = ("#", "<", ">", "[", "]", "|", "{", "}")

_HOST_TOKEN_RE = re.compile(r"%h(\d+)")

Query = Union[str, Mapping[str, object]]


def normalize_title(text: str) -> Optional[str]:
    """
    Normalize a page title the way the wiki does.

    - Replace underscores with spaces
    - Collapse runs of whitespace
    - Strip leading/trailing whitespace
    - Upper-case the first character

    Returns None for empty titles and titles containing invalid characters.
    """
    if not isinstance(text, str):
        return None

    title = re.sub(r"[\s_]+", " ", text).strip()
    if not title:
        return None

    for char in INVALID_TITLE_CHARS:
        if char in title:
            return None

    return title[0].upper() + title[1:]


def append_query(url: str, query: Query) -> str:
    """
    Append query values to a URL, keeping any values already present.
    """
    if not isinstance(query, str):
        query = urlencode([(key, str(value)) for key, value in query.items()])
    if not query:
        return url

    fragment = ""
    if "#" in url:
        url, fragment = url.split("#", 1)
        fragment = "#" + fragment

    separator = "&" if "?" in url else "?"
    return url + separator + query + fragment


def expand_url(url: str, server: str) -> str:
    """
    Turn a server-relative path into an absolute URL. Protocol-relative and
    absolute URLs are returned unchanged.
    """
    if url.startswith("/") and not url.startswith("//"):
        return server.rstrip("/") + url
    return url


def _mobile_host_pattern(template: str) -> Optional[re.Pattern]:
    """
    Compile the template into a pattern matching whole mobile host names,
    with one named group per host token. Templates that only rearrange the
    host parts cannot tell mobile hosts apart and give None.
    """
    if not _HOST_TOKEN_RE.sub("", template).strip("."):
        return None

    pattern = ""
    seen = set()
    position = 0
    for match in _HOST_TOKEN_RE.finditer(template):
        pattern += re.escape(template[position:match.start()])
        name = "h" + match.group(1)
        pattern += f"(?P={name})" if name in seen else f"(?P<{name}>[^.]+)"
        seen.add(name)
        position = match.end()
    pattern += re.escape(template[position:])
    return re.compile(pattern, re.IGNORECASE)


def is_mobile_host(host: str, template: str) -> bool:
    """Check whether a host name already points at the mobile site."""
    pattern = _mobile_host_pattern(template) if template else None
    if not host or pattern is None:
        return False
    return pattern.fullmatch(host) is not None


def make_mobile_host(host: str, template: str) -> str:
    """
    Build the mobile host name from a desktop host using a template such as
    "%h0.m.%h1.%h2", where %hN is the N-th dot-separated part of the host.
    """
    tokens = host.split(".")

    def token(match: re.Match) -> str:
        index = int(match.group(1))
        return tokens[index] if index < len(tokens) else ""

    mobile = _HOST_TOKEN_RE.sub(token, template)
    # Missing tokens leave empty labels behind
    return re.sub(r"\.{2,}", ".", mobile).strip(".")


def make_desktop_host(host: str, template: str) -> str:
    """Rebuild the desktop host from the parts captured by the template."""
    match = _mobile_host_pattern(template).fullmatch(host)
    parts = sorted(match.groupdict().items(), key=lambda item: int(item[0][1:]))
    return ".".join(value for _, value in parts)


def make_mobile_url(url: str, template: str) -> str:
    """
    Rewrite a desktop URL to its mobile equivalent. URLs without a host, URLs
    already on the mobile site and an empty template leave the URL unchanged.
    """
    if not template:
        return url

    parts = urlsplit(url)
    host = parts.hostname
    if not host or is_mobile_host(host, template):
        return url

    netloc = make_mobile_host(host, template)
    if parts.port:
        netloc = f"{netloc}:{parts.port}"
    return urlunsplit(parts._replace(netloc=netloc))


def make_desktop_url(url: str, template: str) -> str:
    """Rewrite a mobile URL back to the desktop site."""
    if not template:
        return url

    parts = urlsplit(url)
    host = parts.hostname
    if not host or not is_mobile_host(host, template):
        return url

    netloc = make_desktop_host(host, template)
    if parts.port:
        netloc = f"{netloc}:{parts.port}"
    return urlunsplit(parts._replace(netloc=netloc))
