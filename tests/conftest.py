# tests/conftest.py
# Shared pytest fixtures for MobileFrontend tests

from unittest.mock import Mock

import pytest

from config import TestingConfig
from main_app import create_app
from mobileops import Messages, MobileContext, SkinConfig, Title


@pytest.fixture
def skin_config():
    return SkinConfig(
        sitename="Wikipedia",
        server="https://en.wikipedia.org",
        rights_url="https://creativecommons.org/licenses/by-sa/4.0/",
        rights_text="Creative Commons Attribution Share Alike",
        display_wikibase_descriptions={"search": True, "nearby": True, "tagline": False},
        search_api_params={"ppprop": "displaytitle"},
        query_prop_modules=["pageprops"],
        no_mobile_pages=["Special:Blank"],
    )


@pytest.fixture
def messages():
    return Messages(sitename="Wikipedia")


@pytest.fixture
def make_context(skin_config, messages):
    """Build a MobileContext; keyword arguments override the defaults."""
    def _make(config=None, title="Dog", **kwargs):
        return MobileContext(
            config=config or skin_config,
            messages=kwargs.pop("messages", messages),
            title=Title(title) if isinstance(title, str) else title,
            **kwargs
        )
    return _make


@pytest.fixture
def app():
    return create_app(TestingConfig)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def dog_response():
    """formatversion=2 query response for "Dog" with one bogus language code."""
    return {
        "batchcomplete": True,
        "query": {
            "pages": [
                {
                    "pageid": 4269567,
                    "ns": 0,
                    "title": "Dog",
                    "pagelanguage": "en",
                    "langlinks": [
                        {"lang": "xyz", "url": "https://xyz.wikipedia.org/wiki/Dog", "title": "Dog"},
                        {"lang": "de", "url": "https://de.wikipedia.org/wiki/Hund", "title": "Hund"},
                    ],
                }
            ]
        },
    }


@pytest.fixture
def mock_api_response():
    """Build a mock requests response returning ``data`` from .json()."""
    def _make(data):
        response = Mock()
        response.json.return_value = data
        response.raise_for_status = Mock()
        return response
    return _make
