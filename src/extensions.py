"""
extensions.py - Flask Extensions Module

This module initializes Flask extensions without binding them to a specific
application instance. This allows the extensions to be imported anywhere in
the application without creating circular import issues.

The extensions are bound to the Flask app in the application factory function
(create_app) using the init_app pattern.

Example:
    from extensions import limiter

    def create_app(config_class=Config):
        app = Flask(__name__)
        app.config.from_object(config_class)

        limiter.init_app(app)

        return app
"""

from __future__ import annotations

from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

# Rate limiter with default limits
# Pages that query the wiki API get a tighter per-route limit via @limiter.limit()
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=["2000 per day", "200 per hour"],
    storage_uri="memory://",  # Use Redis in production: "redis://localhost:6379"
    strategy="fixed-window",
)
