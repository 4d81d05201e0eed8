"""
api/routes.py - JSON API Blueprint Routes
"""

from __future__ import annotations

from flask import Response, current_app, jsonify, request

from main_app.api import bp
from main_app.skin import get_skin_config
from mobileops import InvalidFeature, extend_search_params


@bp.errorhandler(InvalidFeature)
def _handle_invalid_feature(e: InvalidFeature) -> tuple[Response, int]:
    """
    Return a 400 JSON response for a feature missing from DISPLAY_WIKIBASE_DESCRIPTIONS.
    """
    current_app.logger.warning("Search parameters requested for unknown feature %r", e.feature)
    return jsonify({
        "error": "Invalid feature",
        "message": str(e)
    }), 400


@bp.route("/search-params/<feature>")
def search_params(feature: str) -> Response:
    """
    Return the search API parameters for ``feature`` as JSON.

    Query string values are merged in as the caller's fragment; ``prop`` may
    be given pipe-separated.
    """
    fragment = request.args.to_dict()
    if "prop" in fragment:
        fragment["prop"] = [module for module in fragment["prop"].split("|") if module]
    return jsonify(extend_search_params(feature, fragment, config=get_skin_config()))
