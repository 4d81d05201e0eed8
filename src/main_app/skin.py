"""
skin.py - Request helpers shared by the blueprints

Builds the per-request MobileContext and renders templates inside the skin
(footer, inline scripts).
"""

from __future__ import annotations

from typing import Any, Optional

from flask import current_app, render_template, request

from mobileops import Messages, MobileContext, SkinConfig, Title
from mobileops.footer import prepare_footer
from mobileops.scripts import grade_c_image_support, interim_toggling_support


def get_skin_config() -> SkinConfig:
    return current_app.extensions["skin_config"]


def get_messages() -> Messages:
    return current_app.extensions["messages"]


def build_context(title: Optional[Title] = None) -> MobileContext:
    """Create the viewing context of the current request."""
    return MobileContext.from_request(request, get_skin_config(), get_messages(), title=title)


def render_page(template: str, ctx: MobileContext, **context: Any) -> str:
    """
    Render ``template`` with the footer slots and skin scripts for ``ctx``.
    """
    footer = prepare_footer(ctx)
    return render_template(
        template,
        ctx=ctx,
        footer=footer,
        sitename=ctx.config.sitename,
        interim_toggling_script=interim_toggling_support() if ctx.is_mobile_view else None,
        grade_c_image_script=grade_c_image_support() if ctx.is_mobile_view else None,
        **context
    )
