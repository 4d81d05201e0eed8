"""
special - Special Pages Blueprint

This blueprint serves the special pages of the mobile skin:
- Special:MobileLanguages
"""

from flask import Blueprint

bp = Blueprint("special", __name__)

from main_app.special import routes  # Import routes after bp is created
