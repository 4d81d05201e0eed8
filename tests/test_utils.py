# tests/test_utils.py
# Tests for title normalization and URL rewriting

import pytest

from mobileops.models import Title
from mobileops.utils import (
    append_query,
    expand_url,
    is_mobile_host,
    make_desktop_url,
    make_mobile_host,
    make_mobile_url,
    normalize_title,
)

TEMPLATE = "%h0.m.%h1.%h2"


class TestNormalizeTitle:
    def test_basic(self):
        assert normalize_title("dog") == "Dog"

    def test_underscores_and_spaces(self):
        assert normalize_title("  Main__Page ") == "Main Page"

    @pytest.mark.parametrize("title", ["", "   ", None, 5, "A#B", "A[B]", "{x}"])
    def test_invalid(self, title):
        assert normalize_title(title) is None


class TestTitle:
    def test_local_url(self, skin_config):
        assert Title("Main Page").local_url(skin_config) == "/wiki/Main_Page"

    def test_local_url_quotes(self, skin_config):
        assert Title("C++ & more").local_url(skin_config) == "/wiki/C%2B%2B_%26_more"

    def test_local_url_with_query(self, skin_config):
        url = Title("Main Page").local_url(skin_config, {"variant": "zh-hans", "title": "ignored"})
        assert url == "/w/index.php?title=Main_Page&variant=zh-hans"

    def test_full_url(self, skin_config):
        assert Title("Dog").full_url(skin_config) == "https://en.wikipedia.org/wiki/Dog"

    def test_new_from_text(self):
        assert Title.new_from_text("some_page").text == "Some page"
        assert Title.new_from_text("") is None


class TestAppendQuery:
    def test_append(self):
        assert append_query("/wiki/Dog", {"a": 1}) == "/wiki/Dog?a=1"

    def test_existing_query(self):
        assert append_query("/w/index.php?title=Dog", "action=raw") == "/w/index.php?title=Dog&action=raw"

    def test_fragment_kept_last(self):
        assert append_query("/wiki/Dog#History", "a=1") == "/wiki/Dog?a=1#History"

    def test_empty(self):
        assert append_query("/wiki/Dog", {}) == "/wiki/Dog"


class TestExpandUrl:
    def test_relative(self):
        assert expand_url("/wiki/Dog", "https://en.wikipedia.org/") == "https://en.wikipedia.org/wiki/Dog"

    def test_protocol_relative(self):
        assert expand_url("//en.wikipedia.org/wiki/Dog", "https://x.org") == "//en.wikipedia.org/wiki/Dog"


class TestMobileUrls:
    """Tests for mobile and desktop URL rewriting."""

    def test_mobile_host(self):
        assert make_mobile_host("en.wikipedia.org", TEMPLATE) == "en.m.wikipedia.org"

    def test_mobile_host_short(self):
        assert make_mobile_host("localhost", TEMPLATE) == "localhost.m"

    def test_is_mobile_host(self):
        assert is_mobile_host("en.m.wikipedia.org", TEMPLATE) is True
        assert is_mobile_host("en.wikipedia.org", TEMPLATE) is False
        assert is_mobile_host("en.m.wikipedia.org", "") is False

    def test_make_mobile_url(self):
        assert make_mobile_url("https://de.wikipedia.org/wiki/Hund?x=1", TEMPLATE) == \
            "https://de.m.wikipedia.org/wiki/Hund?x=1"

    def test_make_mobile_url_keeps_port(self):
        assert make_mobile_url("http://en.wiki.local:8080/wiki/Dog", TEMPLATE) == \
            "http://en.m.wiki.local:8080/wiki/Dog"

    def test_make_mobile_url_protocol_relative(self):
        assert make_mobile_url("//fr.wikipedia.org/wiki/Chien", TEMPLATE) == "//fr.m.wikipedia.org/wiki/Chien"

    def test_already_mobile(self):
        url = "https://de.m.wikipedia.org/wiki/Hund"
        assert make_mobile_url(url, TEMPLATE) == url

    def test_no_template(self):
        assert make_mobile_url("https://de.wikipedia.org/", "") == "https://de.wikipedia.org/"

    def test_relative_url_unchanged(self):
        assert make_mobile_url("/wiki/Dog", TEMPLATE) == "/wiki/Dog"

    def test_make_desktop_url(self):
        assert make_desktop_url("https://en.m.wikipedia.org/wiki/Dog", TEMPLATE) == \
            "https://en.wikipedia.org/wiki/Dog"

    def test_desktop_url_unchanged(self):
        url = "https://en.wikipedia.org/wiki/Dog"
        assert make_desktop_url(url, TEMPLATE) == url

    def test_prefix_template(self):
        """Test a template that puts the mobile marker in front of the host."""
        template = "m.%h0.%h1"

        assert is_mobile_host("m.example.org", template) is True
        assert is_mobile_host("example.org", template) is False
        assert make_mobile_url("https://example.org/wiki/Dog", template) == "https://m.example.org/wiki/Dog"
        assert make_desktop_url("https://m.example.org/wiki/Dog", template) == "https://example.org/wiki/Dog"

    def test_prefix_template_is_stable(self):
        url = make_mobile_url("https://example.org/wiki/Dog", "m.%h0.%h1")
        assert make_mobile_url(url, "m.%h0.%h1") == "https://m.example.org/wiki/Dog"

    def test_host_case_ignored(self):
        assert is_mobile_host("EN.M.Wikipedia.org", TEMPLATE) is True

    def test_rearranging_template_never_mobile(self):
        assert is_mobile_host("en.wikipedia.org", "%h0.%h1.%h2") is False
