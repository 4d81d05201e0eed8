# config.py
# Flask application configuration

import json
import os
import warnings

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _json_env(name, default):
    """Read a JSON-encoded environment variable, falling back to ``default``."""
    raw = os.environ.get(name)
    if not raw:
        return default
    try:
        return json.loads(raw)
    except ValueError:
        warnings.warn(f"{name} is not valid JSON, using the default.", UserWarning, stacklevel=2)
        return default


def _list_env(name, default):
    """Read a comma-separated environment variable."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    return [item.strip() for item in raw.split(",") if item.strip()]


class Config:
    """Flask configuration class."""

    # Secret key for session security
    _secret_key = os.environ.get("FLASK_SECRET_KEY")
    if not _secret_key:
        warnings.warn(
            "FLASK_SECRET_KEY not set. Using default key which is insecure for production!",
            UserWarning,
            stacklevel=2
        )
        _secret_key = "change-me-in-production"
    SECRET_KEY = _secret_key

    # Debug mode
    DEBUG = os.environ.get("FLASK_DEBUG", "0") == "1"

    # Cookie settings (also applied to the view preference cookie)
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = "Lax"
    SESSION_COOKIE_SECURE = False

    # Lifetime of the remembered mobile/desktop choice (30 days)
    USEFORMAT_COOKIE_MAX_AGE = 30 * 24 * 60 * 60

    # Rate limit for pages that query the wiki API
    SPECIAL_PAGE_RATE_LIMIT = os.environ.get("MF_SPECIAL_PAGE_RATE_LIMIT", "30 per minute")

    # Wiki site
    SITENAME = os.environ.get("MF_SITENAME", "Wikipedia")
    SERVER = os.environ.get("MF_SERVER", "https://en.wikipedia.org")
    ARTICLE_PATH = os.environ.get("MF_ARTICLE_PATH", "/wiki/$1")
    SCRIPT_PATH = os.environ.get("MF_SCRIPT_PATH", "/w/index.php")
    MAIN_PAGE = os.environ.get("MF_MAIN_PAGE", "Main Page")
    CONTENT_LANGUAGE = os.environ.get("MF_CONTENT_LANGUAGE", "en")

    # Query API
    API_URL = os.environ.get("MF_API_URL", "https://en.wikipedia.org/w/api.php")
    API_TIMEOUT = int(os.environ.get("MF_API_TIMEOUT", 10))

    # Mobile site host, %hN is the N-th part of the desktop host
    MOBILE_URL_TEMPLATE = os.environ.get("MF_MOBILE_URL_TEMPLATE", "%h0.m.%h1.%h2")

    # Licensing
    RIGHTS_PAGE = os.environ.get("MF_RIGHTS_PAGE")
    RIGHTS_URL = os.environ.get("MF_RIGHTS_URL", "https://creativecommons.org/licenses/by-sa/4.0/")
    RIGHTS_TEXT = os.environ.get("MF_RIGHTS_TEXT", "Creative Commons Attribution Share Alike")

    # {"copyright": url, "copyright-width": int, "copyright-height": int}
    CUSTOM_LOGOS = _json_env("MF_CUSTOM_LOGOS", {})

    # Unset, "registered" or "unregistered"
    TRADEMARK_SITENAME = os.environ.get("MF_TRADEMARK_SITENAME")

    # Features that show Wikibase descriptions
    DISPLAY_WIKIBASE_DESCRIPTIONS = _json_env("MF_DISPLAY_WIKIBASE_DESCRIPTIONS", {
        "search": True,
        "nearby": True,
        "watchlist": True,
        "tagline": False,
    })
    SEARCH_API_PARAMS = _json_env("MF_SEARCH_API_PARAMS", {"ppprop": "displaytitle"})
    QUERY_PROP_MODULES = _list_env("MF_QUERY_PROP_MODULES", ["pageprops"])

    # Pages without a mobile equivalent
    NO_MOBILE_PAGES = _list_env("MF_NO_MOBILE_PAGES", [])


class DevelopmentConfig(Config):
    """Development configuration."""

    DEBUG = True
    SESSION_COOKIE_SECURE = False


class TestingConfig(Config):
    """Testing configuration with fixed, network-independent values."""

    TESTING = True
    DEBUG = True
    SESSION_COOKIE_SECURE = False
    RATELIMIT_ENABLED = False

    SITENAME = "Wikipedia"
    SERVER = "https://en.wikipedia.org"
    API_URL = "https://en.wikipedia.org/w/api.php"
    MOBILE_URL_TEMPLATE = "%h0.m.%h1.%h2"
    RIGHTS_PAGE = None
    RIGHTS_URL = "https://creativecommons.org/licenses/by-sa/4.0/"
    RIGHTS_TEXT = "Creative Commons Attribution Share Alike"
    CUSTOM_LOGOS = {}
    TRADEMARK_SITENAME = None
    DISPLAY_WIKIBASE_DESCRIPTIONS = {"search": True, "nearby": True, "watchlist": True, "tagline": False}
    SEARCH_API_PARAMS = {"ppprop": "displaytitle"}
    QUERY_PROP_MODULES = ["pageprops"]
    NO_MOBILE_PAGES = ["Special:Blank"]


class ProductionConfig(Config):
    """Production configuration."""

    DEBUG = False
    SESSION_COOKIE_SECURE = True
