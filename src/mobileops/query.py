# mobileops/query.py
# Fetch cross-language links of a page from the wiki query API

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Tuple

import requests

from .models import PageLanguageData, RawLanguageLink

logger = logging.getLogger(__name__)

# Default API endpoint (overridden by the API_URL setting)
API_URL = "https://en.wikipedia.org/w/api.php"

# User-Agent header for API requests
# Following Wikimedia's User-Agent policy: https://meta.wikimedia.org/wiki/User-Agent_policy
USER_AGENT = "MobileFrontend-py/1.0 (mobile presentation layer; language links)"


def parse_language_links(data: Mapping[str, Any], title: str) -> PageLanguageData:
    """
    Turn a formatversion=2 query response into PageLanguageData.

    Malformed langlinks entries are dropped. A response without pages is
    treated as a missing page.
    """
    pages = (data.get("query") or {}).get("pages") or []
    # formatversion=1 keys pages by page id
    if isinstance(pages, Mapping):
        pages = list(pages.values())
    if not pages or not isinstance(pages[0], Mapping):
        return PageLanguageData(title=title, exists=False)

    page = pages[0]
    exists = "missing" not in page and "invalid" not in page

    links = []
    for entry in page.get("langlinks") or []:
        if not isinstance(entry, Mapping):
            continue
        link = RawLanguageLink.from_dict(entry)
        if link is not None:
            links.append(link)

    page_language = page.get("pagelanguage")
    return PageLanguageData(
        title=page.get("title") or title,
        exists=exists,
        page_language=page_language if isinstance(page_language, str) else None,
        links=links,
    )


def fetch_language_links(
    title: str,
    api_url: str = API_URL,
    timeout: int = 10,
) -> Tuple[Optional[PageLanguageData], Optional[str]]:
    """
    Fetch the cross-language links and page language of a page.

    Args:
        title: The prefixed title of the page
        api_url: The query API endpoint
        timeout: Request timeout in seconds (default: 10)

    Returns:
        Tuple of (data, error_message):
        - On success: (PageLanguageData, None)
        - On failure: (None, error_message)
    """
    if not title or not title.strip():
        return None, "Page title is required"

    title = title.strip()

    params = {
        "action": "query",
        "prop": "langlinks|info",
        "llprop": "url",
        "lllimit": "max",
        "titles": title,
        "format": "json",
        "formatversion": "2",
    }
    headers = {
        "User-Agent": USER_AGENT
    }

    try:
        logger.debug("Fetching language links for %r from %s", title, api_url)
        response = requests.get(api_url, params=params, headers=headers, timeout=timeout)
        response.raise_for_status()

        data = response.json()

        if not isinstance(data, Mapping):
            logger.warning("API returned a non-object response for %r", title)
            return None, "Received invalid response from the wiki API."

        if "error" in data:
            error = data["error"]
            info = error.get("info") if isinstance(error, Mapping) else None
            return None, f"API error: {info or 'Unknown error'}"

        return parse_language_links(data, title), None

    except requests.exceptions.Timeout:
        logger.warning("Timed out fetching language links for %r", title)
        return None, "Request timed out. Please try again."
    except requests.exceptions.ConnectionError:
        logger.warning("Could not connect to %s", api_url)
        return None, "Failed to connect to the wiki API."
    except requests.exceptions.HTTPError as e:
        status_code = e.response.status_code if e.response is not None else "unknown"
        logger.warning("API returned HTTP %s for %r", status_code, title)
        if status_code == 429:
            return None, "Too many requests. Please wait a moment and try again."
        return None, f"The wiki API returned an error (HTTP {status_code})."
    # Also a RequestException, so it must come first
    except requests.exceptions.JSONDecodeError:
        logger.warning("API returned invalid JSON for %r", title)
        return None, "Received invalid response from the wiki API."
    except requests.exceptions.RequestException:
        logger.exception("Request for language links of %r failed", title)
        return None, "Failed to retrieve language links."
    except ValueError:
        return None, "Received invalid response from the wiki API."
