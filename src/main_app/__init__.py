"""
main_app - Flask Application Package

This package contains the MobileFrontend Flask application using the factory
pattern. The create_app() function is the entry point for creating
application instances.

Usage:
    # Development
    from main_app import create_app
    app = create_app()

    # Production
    from main_app import create_app
    from config import ProductionConfig
    app = create_app(ProductionConfig)

    # Testing
    from main_app import create_app
    from config import TestingConfig
    app = create_app(TestingConfig)
"""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from flask import Flask, Response, render_template, request

from config import Config, DevelopmentConfig
from extensions import limiter
from mobileops import Messages, NotFoundInput, SkinConfig
from mobileops.context import TOGGLE_VIEW_DESKTOP, TOGGLE_VIEW_MOBILE, USEFORMAT_COOKIE


def create_app(config_class: Optional[type] = None) -> Flask:
    """
    Create and configure a Flask application with extensions, blueprints, error handlers, and request hooks registered.

    Parameters:
        config_class (type, optional): Configuration class to apply to the app. If omitted, uses DevelopmentConfig when the environment variable FLASK_DEBUG is "1", otherwise uses Config.

    Returns:
        Flask: The configured Flask application instance.
    """
    if config_class is None:
        if os.environ.get("FLASK_DEBUG") == "1":
            config_class = DevelopmentConfig
        else:
            config_class = Config

    # __file__ is in main_app/, so parent is src/
    src_dir = Path(__file__).parent.parent
    app = Flask(
        __name__,
        template_folder=str(src_dir / "templates"),
        static_folder=str(src_dir / "static")
    )
    app.config.from_object(config_class)

    limiter.init_app(app)

    # Skin configuration and messages are built once per application
    skin_config = SkinConfig.from_mapping(app.config)
    app.extensions["skin_config"] = skin_config
    app.extensions["messages"] = Messages(sitename=skin_config.sitename)

    from main_app.main import bp as main_bp
    from main_app.special import bp as special_bp
    from main_app.api import bp as api_bp

    app.register_blueprint(main_bp)
    app.register_blueprint(special_bp, url_prefix="/wiki")
    app.register_blueprint(api_bp, url_prefix="/api")

    app.register_error_handler(NotFoundInput, _handle_not_found_input)

    app.after_request(_remember_view_toggle)
    app.after_request(_add_security_headers)

    if not app.debug and not app.testing:
        _configure_logging(app)

    return app


def _handle_not_found_input(e: NotFoundInput) -> tuple[str, int]:
    """
    Render the localized error page for a special page requested without a page name.

    Returns:
        tuple[str, int]: The rendered error page and the HTTP status code 404.
    """
    return render_template("error.html", title=e.title, description=e.description), e.status_code


def _remember_view_toggle(response: Response) -> Response:
    """
    Persist an explicit mobile/desktop switch in the view preference cookie.

    A request carrying ``mobileaction=toggle_view_mobile`` or
    ``mobileaction=toggle_view_desktop`` sets ``mf_useformat`` to "mobile"
    or "desktop" so later requests keep the chosen view.
    """
    from flask import current_app

    action = request.args.get("mobileaction")
    if action not in (TOGGLE_VIEW_MOBILE, TOGGLE_VIEW_DESKTOP):
        return response

    useformat = "mobile" if action == TOGGLE_VIEW_MOBILE else "desktop"
    response.set_cookie(
        USEFORMAT_COOKIE,
        useformat,
        max_age=current_app.config.get("USEFORMAT_COOKIE_MAX_AGE"),
        secure=current_app.config.get("SESSION_COOKIE_SECURE", False),
        httponly=current_app.config.get("SESSION_COOKIE_HTTPONLY", True),
        samesite=current_app.config.get("SESSION_COOKIE_SAMESITE", "Lax"),
    )
    return response


def _add_security_headers(response: Response) -> Response:
    """
    Attach common security-related HTTP headers to the given response.

    Adds the following headers to mitigate common web vulnerabilities:
    - X-Content-Type-Options: nosniff
    - X-Frame-Options: SAMEORIGIN
    - X-XSS-Protection: 1; mode=block

    If the application's SESSION_COOKIE_SECURE config is enabled, also adds
    Strict-Transport-Security set to "max-age=31536000; includeSubDomains".
    """
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "SAMEORIGIN"
    response.headers["X-XSS-Protection"] = "1; mode=block"

    # Only add HSTS in production with HTTPS
    from flask import current_app
    if current_app.config.get("SESSION_COOKIE_SECURE"):
        response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"

    return response


def _configure_logging(app: Flask) -> None:
    """
    Set up rotating file logging for production.

    Creates a "logs" directory if it does not exist, attaches a RotatingFileHandler writing to "logs/mobilefrontend.log" (max 10240 bytes per file, 10 backup files), sets the handler and application logger level to INFO, and logs a startup message.
    """
    if not os.path.exists("logs"):
        os.mkdir("logs")

    file_handler = RotatingFileHandler(
        "logs/mobilefrontend.log",
        maxBytes=10240,  # 10KB per file
        backupCount=10
    )
    file_handler.setFormatter(logging.Formatter(
        "%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]"
    ))
    file_handler.setLevel(logging.INFO)

    app.logger.addHandler(file_handler)
    app.logger.setLevel(logging.INFO)
    # Library modules log under the "mobileops" logger
    logging.getLogger("mobileops").addHandler(file_handler)
    app.logger.info("MobileFrontend startup")
