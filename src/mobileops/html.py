# mobileops/html.py
# Minimal HTML builders on top of markupsafe

from __future__ import annotations

from typing import Mapping, Optional

from markupsafe import Markup, escape

# Elements that never get a closing tag
VOID_ELEMENTS = frozenset({"br", "hr", "img", "input", "link", "meta"})

Attribs = Mapping[str, object]


def open_element(name: str, attribs: Optional[Attribs] = None) -> Markup:
    """
    Build an opening tag. Attributes are emitted in mapping order and
    attributes whose value is None are skipped.
    """
    parts = [name]
    for key, value in (attribs or {}).items():
        if value is None:
            continue
        parts.append(f'{key}="{escape(value)}"')
    return Markup("<" + " ".join(parts) + ">")


def close_element(name: str) -> Markup:
    return Markup(f"</{name}>")


def element(name: str, attribs: Optional[Attribs] = None, contents: object = "") -> Markup:
    """
    Build a complete element. Plain string contents are escaped, Markup
    contents are inserted as-is.
    """
    html = open_element(name, attribs)
    if name in VOID_ELEMENTS:
        return html
    return html + escape(contents) + close_element(name)


def inline_script(js: str) -> Markup:
    return Markup("<script>") + Markup(js) + Markup("</script>")
