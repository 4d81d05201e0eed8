# tests/test_special_languages.py
# Tests for Special:MobileLanguages rendering

from unittest.mock import patch

import pytest

from mobileops.exceptions import NotFoundInput
from mobileops.models import LanguageLink, Title, VariantLink
from mobileops.special_languages import execute, make_lang_list_item, render_languages_page

GERMAN = LanguageLink(code="de", url="https://de.m.wikipedia.org/wiki/Hund", language_name="Deutsch",
                      raw_label="Hund")
FRENCH = LanguageLink(code="fr", url="https://fr.m.wikipedia.org/wiki/Chien", language_name="français")
VARIANTS = [
    VariantLink(code="sr-EC", variant_name="српски (ћирилица)", url="/w/index.php?title=Dog&variant=sr-ec"),
    VariantLink(code="sr-EL", variant_name="srpski (latinica)", url="/w/index.php?title=Dog&variant=sr-el"),
]


class TestRenderLanguagesPage:
    """Tests for render_languages_page."""

    @pytest.mark.parametrize("pagename", ["", None, 42])
    def test_missing_page_name(self, pagename, messages, skin_config):
        """Test that an empty or non-string page name raises NotFoundInput."""
        with pytest.raises(NotFoundInput) as excinfo:
            render_languages_page(pagename, None, [], [], messages, skin_config)

        assert excinfo.value.status_code == 404
        assert excinfo.value.title == "Page not found"
        assert excinfo.value.description

    def test_nonexistent_title(self, messages, skin_config):
        """Test that a missing page renders a notice instead of lists."""
        page = render_languages_page("Nope", Title("Nope", exists=False), [GERMAN], [], messages, skin_config)

        assert page.page_title == "Languages"
        assert page.html == '<div class="content"><p>This page does not exist: Nope</p></div>'

    def test_invalid_title(self, messages, skin_config):
        """Test that an unparseable title renders the nonexistent notice."""
        page = render_languages_page("A|B", None, [], [], messages, skin_config)

        assert "This page does not exist: A|B" in page.html

    def test_one_language(self, messages, skin_config):
        """Test the summary for a single language."""
        page = render_languages_page("Dog", Title("Dog"), [GERMAN], [], messages, skin_config)

        assert page.page_title == "Languages: Dog"
        assert "<p>This page is available in 1 other language.</p>" in page.html
        assert '<p><a href="/wiki/Dog">Return to Dog.</a></p>' in page.html
        assert '<h2 id="mw-mf-language-header">Languages</h2>' in page.html
        assert (
            '<ul id="mw-mf-language-selection"><li><a href="https://de.m.wikipedia.org/wiki/Hund" '
            'hreflang="de" lang="de" title="Hund">Deutsch</a></li></ul>'
        ) in page.html
        assert "mw-mf-language-variant-header" not in page.html

    def test_title_attribute_falls_back_to_name(self, messages, skin_config):
        """Test that links without a label use the display name as title."""
        page = render_languages_page("Dog", Title("Dog"), [FRENCH], [], messages, skin_config)

        assert 'title="français">français</a>' in page.html

    def test_plural_summary(self, messages, skin_config):
        page = render_languages_page("Dog", Title("Dog"), [GERMAN, FRENCH], [], messages, skin_config)
        assert "This page is available in 2 other languages." in page.html

    def test_no_languages(self, messages, skin_config):
        """Test that no links leave out the language section."""
        page = render_languages_page("Dog", Title("Dog"), [], [], messages, skin_config)

        assert "This page is available in 0 other languages." in page.html
        assert "<h2" not in page.html
        assert "<ul" not in page.html

    def test_variants_before_languages(self, messages, skin_config):
        """Test that the variant section comes first."""
        page = render_languages_page("Dog", Title("Dog"), [GERMAN], VARIANTS, messages, skin_config)

        variant_pos = page.html.index('<h2 id="mw-mf-language-variant-header">Variants of this language</h2>')
        language_pos = page.html.index('<h2 id="mw-mf-language-header">')
        assert variant_pos < language_pos
        assert 'hreflang="sr-EL" lang="sr-EL" title="srpski (latinica)"' in page.html
        assert "title=Dog&amp;variant=sr-ec" in page.html

    def test_single_variant_is_not_listed(self, messages, skin_config):
        """Test that one variant link alone does not render the section."""
        page = render_languages_page("Dog", Title("Dog"), [], VARIANTS[:1], messages, skin_config)
        assert "mw-mf-language-variant-header" not in page.html

    def test_markup_is_escaped(self, messages, skin_config):
        """Test that names and labels are HTML-escaped."""
        link = LanguageLink(code="x", url="https://x.org/?a=1&b=2", language_name="<b>", raw_label='"q"')
        page = render_languages_page("Dog", Title("Dog"), [link], [], messages, skin_config)

        assert 'href="https://x.org/?a=1&amp;b=2"' in page.html
        assert 'title="&#34;q&#34;">&lt;b&gt;</a>' in page.html

    def test_rendering_is_idempotent(self, messages, skin_config):
        """Test that identical inputs give byte-identical markup."""
        first = render_languages_page("Dog", Title("Dog"), [GERMAN, FRENCH], VARIANTS, messages, skin_config)
        second = render_languages_page("Dog", Title("Dog"), [GERMAN, FRENCH], VARIANTS, messages, skin_config)
        assert first == second


class TestMakeLangListItem:
    def test_item(self):
        html = make_lang_list_item("/u", "fr", "français", "Chien")
        assert html == '<li><a href="/u" hreflang="fr" lang="fr" title="Chien">français</a></li>'


class TestExecute:
    """Tests for the fetch-process-render pipeline."""

    @patch("mobileops.query.requests.get")
    def test_dog_example(self, mock_get, make_context, dog_response, mock_api_response):
        """Test that the bogus code is dropped and the URL made mobile."""
        mock_get.return_value = mock_api_response(dog_response)

        page = execute("Dog", make_context())

        assert "This page is available in 1 other language." in page.html
        assert 'href="https://de.m.wikipedia.org/wiki/Hund"' in page.html
        assert "xyz" not in page.html
        assert mock_get.call_args.kwargs["params"]["titles"] == "Dog"

    @patch("mobileops.query.requests.get")
    def test_missing_page(self, mock_get, make_context, mock_api_response):
        mock_get.return_value = mock_api_response({
            "query": {"pages": [{"ns": 0, "title": "Nope", "missing": True}]}
        })

        page = execute("Nope", make_context(title="Nope"))

        assert page.page_title == "Languages"
        assert "This page does not exist: Nope" in page.html

    @patch("mobileops.query.requests.get")
    def test_page_language_variants(self, mock_get, make_context, mock_api_response):
        """Test that variants come from the page language."""
        mock_get.return_value = mock_api_response({
            "query": {"pages": [{"title": "Beograd", "pagelanguage": "sr", "langlinks": []}]}
        })

        page = execute("Beograd", make_context(title="Beograd"))

        assert 'id="mw-mf-language-variant-selection"' in page.html
        assert "variant=sr-ec" in page.html
        assert "variant=sr&" not in page.html

    @patch("mobileops.query.requests.get")
    def test_fetch_failure_renders_without_links(self, mock_get, make_context):
        import requests
        mock_get.side_effect = requests.exceptions.ConnectionError()

        page = execute("Dog", make_context())

        assert "This page is available in 0 other languages." in page.html

    def test_empty_page_name(self, make_context):
        def fetch(*args, **kwargs):
            raise AssertionError("must not fetch")

        with pytest.raises(NotFoundInput):
            execute("", make_context(), fetch=fetch)

    def test_custom_fetcher(self, make_context):
        """Test injecting a fetcher."""
        from mobileops.models import PageLanguageData, RawLanguageLink

        def fetch(title, api_url, timeout):
            return PageLanguageData(title=title, exists=True, page_language="en", links=[
                RawLanguageLink("ja", "https://ja.wikipedia.org/wiki/イヌ", "イヌ"),
            ]), None

        page = execute("dog", make_context(), fetch=fetch)

        assert page.page_title == "Languages: Dog"
        assert 'href="https://ja.m.wikipedia.org/wiki/イヌ"' in page.html
