"""
tests/test_api_routes.py - Tests for the JSON API blueprint
"""

from __future__ import annotations


class TestSearchParamsRoute:
    """Tests for /api/search-params/<feature>."""

    def test_search_feature(self, client):
        response = client.get("/api/search-params/search?generator=prefixsearch&prop=pageimages")

        assert response.status_code == 200
        data = response.get_json()
        assert data["generator"] == "prefixsearch"
        assert data["prop"] == ["pageimages", "pageprops", "pageterms"]
        assert data["wbptterms"] == "description"
        assert data["ppprop"] == "displaytitle"

    def test_feature_without_descriptions(self, client):
        data = client.get("/api/search-params/tagline").get_json()

        assert data["prop"] == ["pageprops"]
        assert "wbptterms" not in data

    def test_unknown_feature(self, client):
        response = client.get("/api/search-params/unknownFeature")

        assert response.status_code == 400
        data = response.get_json()
        assert data["error"] == "Invalid feature"
        assert "unknownFeature" in data["message"]
