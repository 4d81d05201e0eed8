"""
api - JSON API Blueprint

This blueprint exposes helpers for client-side code:
- Search API parameters extended for Wikibase descriptions
"""

from flask import Blueprint

bp = Blueprint("api", __name__)

from main_app.api import routes  # Import routes after bp is created
