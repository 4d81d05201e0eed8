"""
main/routes.py - Main Blueprint Routes

Routes for the landing page and health check.
"""

from __future__ import annotations

from flask import jsonify, Response

from main_app.main import bp
from main_app.skin import build_context, get_skin_config, render_page
from mobileops import Title, __version__


@bp.route("/health")
def health() -> Response:
    """
    Health check endpoint returning service status and metadata.

    Returns:
        Response: JSON object with keys:
            - "status": service health string (e.g., "healthy").
            - "service": service name.
            - "version": service version.
    """
    return jsonify({
        "status": "healthy",
        "service": "mobilefrontend",
        "version": __version__
    })


@bp.route("/")
def index() -> str:
    """
    Render the landing page for the main page, with the skin footer for the current view.
    """
    main_page = Title(get_skin_config().main_page)
    ctx = build_context(main_page)
    return render_page("index.html", ctx, main_page=main_page)
