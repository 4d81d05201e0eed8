# mobileops/messages.py
# Localized interface messages

from __future__ import annotations

import re
from typing import Any, Callable, Mapping, Optional

from markupsafe import Markup, escape

_PLURAL_RE = re.compile(r"\{\{PLURAL:\$(\d+)\|([^}]*)\}\}")
_PARAM_RE = re.compile(r"\$(\d+)")

# English interface messages
DEFAULT_MESSAGES = {
    "and": " and",
    "returnto": "Return to $1.",
    "privacypage": "Project:Privacy policy",
    "mobile-frontend-languages-404-title": "Page not found",
    "mobile-frontend-languages-404-desc": "Please specify the page you want to see the languages of.",
    "mobile-frontend-languages-header": "Languages",
    "mobile-frontend-languages-header-page": "Languages: $1",
    "mobile-frontend-languages-text": (
        "This page is available in {{PLURAL:$2|$2 other language|$2 other languages}}."
    ),
    "mobile-frontend-languages-variant-header": "Variants of this language",
    "mobile-frontend-languages-nonexistent-title": "This page does not exist: $1",
    "mobile-frontend-footer-sitename": "{{SITENAME}}",
    "mobile-frontend-copyright": "Content is available under $1 unless otherwise noted.",
    "mobile-frontend-terms-url": "Project:Terms of Use",
    "mobile-frontend-terms-text": "Terms of Use",
    "mobile-frontend-privacy-link-text": "Privacy",
    "mobile-frontend-view": "Mobile view",
    "mobile-frontend-view-desktop": "Desktop",
}


def _format_param(value: Any) -> str:
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, int):
        return f"{value:,}"
    return str(value)


class Messages:
    """
    Message lookup by key.

    Messages support "$N" parameters, "{{PLURAL:$N|one|other}}" and
    "{{SITENAME}}". A message is disabled when it is missing, empty or "-".
    """

    def __init__(self, overrides: Optional[Mapping[str, str]] = None, sitename: str = "Wiki"):
        self._messages = dict(DEFAULT_MESSAGES)
        if overrides:
            self._messages.update(overrides)
        self.sitename = sitename

    def exists(self, key: str) -> bool:
        return key in self._messages

    def is_disabled(self, key: str) -> bool:
        value = self._messages.get(key)
        return value is None or value in ("", "-")

    def plain(self, key: str) -> str:
        """Return the message without any expansion."""
        return self._messages.get(key, f"⧼{key}⧽")

    def text(self, key: str, *params: Any) -> str:
        """Expand a message into plain text. The result still needs escaping."""
        return self._expand(self.plain(key), params, _format_param, self.sitename)

    def raw(self, key: str, *params: Any) -> Markup:
        """
        Expand a message into markup. Markup parameters are inserted as-is,
        everything else is escaped.
        """
        template = str(escape(self.plain(key)))

        def quote(value: Any) -> str:
            if isinstance(value, Markup):
                return str(value)
            return str(escape(_format_param(value)))

        return Markup(self._expand(template, params, quote, str(escape(self.sitename))))

    @staticmethod
    def _expand(template: str, params: tuple, quote: Callable[[Any], str], sitename: str) -> str:
        def plural(match: re.Match) -> str:
            index = int(match.group(1)) - 1
            forms = match.group(2).split("|")
            try:
                count = int(params[index])
            except (IndexError, TypeError, ValueError):
                count = 0
            if count == 1 or len(forms) == 1:
                return forms[0]
            return forms[1]

        def param(match: re.Match) -> str:
            index = int(match.group(1)) - 1
            if index >= len(params):
                return match.group(0)
            return quote(params[index])

        template = _PLURAL_RE.sub(plural, template)
        template = template.replace("{{SITENAME}}", sitename)
        return _PARAM_RE.sub(param, template)
