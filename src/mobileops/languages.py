"""
The :py:mod:`mobileops.languages` module resolves language codes to display
names, normalizes and sorts cross-language links, and lists the script and
orthography variants of a page language.
"""

from __future__ import annotations

import re
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Sequence

from .models import LanguageLink, RawLanguageLink, Title, VariantLink

# code -> autonym, as the wiki platform reports them
LANGUAGE_NAMES = {
    "ar": "العربية",
    "bg": "български",
    "bs": "bosanski",
    "ca": "català",
    "cs": "čeština",
    "da": "dansk",
    "de": "Deutsch",
    "el": "Ελληνικά",
    "en": "English",
    "eo": "Esperanto",
    "es": "español",
    "et": "eesti",
    "fa": "فارسی",
    "fi": "suomi",
    "fr": "français",
    "gan": "贛語",
    "he": "עברית",
    "hi": "हिन्दी",
    "hr": "hrvatski",
    "hu": "magyar",
    "id": "Bahasa Indonesia",
    "it": "italiano",
    "ja": "日本語",
    "kk": "қазақша",
    "ko": "한국어",
    "ku": "kurdî",
    "lt": "lietuvių",
    "nb": "norsk bokmål",
    "nl": "Nederlands",
    "pl": "polski",
    "pt": "português",
    "ro": "română",
    "ru": "русский",
    "sk": "slovenčina",
    "sr": "српски / srpski",
    "sv": "svenska",
    "th": "ไทย",
    "tr": "Türkçe",
    "uk": "українська",
    "vi": "Tiếng Việt",
    "yue": "粵語",
    "zh": "中文",
}

# base language code -> all of its variants, including the base itself
LANGUAGE_VARIANTS = {
    "gan": ["gan", "gan-hans", "gan-hant"],
    "kk": ["kk", "kk-cyrl", "kk-latn", "kk-arab", "kk-kz", "kk-tr", "kk-cn"],
    "ku": ["ku", "ku-arab", "ku-latn"],
    "sr": ["sr", "sr-ec", "sr-el"],
    "zh": ["zh", "zh-hans", "zh-hant", "zh-cn", "zh-hk", "zh-mo", "zh-my", "zh-sg", "zh-tw"],
}

VARIANT_NAMES = {
    "gan-hans": "赣语（简体）",
    "gan-hant": "贛語（繁體）",
    "kk-arab": "قازاقشا (تٴوتە)",
    "kk-cn": "قازاقشا (جۇنگو)",
    "kk-cyrl": "қазақша (кирил)",
    "kk-kz": "қазақша (Қазақстан)",
    "kk-latn": "qazaqşa (latın)",
    "kk-tr": "qazaqşa (Türkïya)",
    "ku-arab": "كوردي (عەرەبی)",
    "ku-latn": "kurdî (latînî)",
    "sr-ec": "српски (ћирилица)",
    "sr-el": "srpski (latinica)",
    "zh-cn": "中文（中国大陆）",
    "zh-hans": "中文（简体）",
    "zh-hant": "中文（繁體）",
    "zh-hk": "中文（香港）",
    "zh-mo": "中文（澳門）",
    "zh-my": "中文（马来西亚）",
    "zh-sg": "中文（新加坡）",
    "zh-tw": "中文（臺灣）",
}


def fetch_language_names() -> Dict[str, str]:
    """Return a copy of the code -> display name table."""
    return dict(LANGUAGE_NAMES)


def get_variants(code: str) -> List[str]:
    """All variants of a language; a language without variants has just itself."""
    return list(LANGUAGE_VARIANTS.get(code, [code]))


def get_variant_name(code: str) -> str:
    return VARIANT_NAMES.get(code) or LANGUAGE_NAMES.get(code) or code


def to_bcp47(code: str) -> str:
    """
    Convert a wiki language code to a BCP-47 tag.

    The primary subtag stays lower case, two-letter region subtags are
    upper-cased and four-letter script subtags are title-cased. Subtags after
    a single-letter (extension/private-use) subtag are left lower case.
    """
    subtags = [part for part in re.split(r"[-_]", code.lower()) if part]
    result = []
    in_extension = False
    for index, subtag in enumerate(subtags):
        if index == 0 or in_extension:
            result.append(subtag)
        elif len(subtag) == 1:
            in_extension = True
            result.append(subtag)
        elif len(subtag) == 2:
            result.append(subtag.upper())
        elif len(subtag) == 4:
            result.append(subtag.title())
        else:
            result.append(subtag)
    return "-".join(result)


def process_languages(
    links: Iterable[RawLanguageLink],
    language_names: Mapping[str, str],
    make_mobile_url: Callable[[str], str],
) -> List[LanguageLink]:
    """
    Attach display names and mobile URLs to raw language links and sort them
    case-insensitively by display name.

    Links whose code has no known name are dropped; the database may still
    hold rows with bogus language codes. The sort is stable so links with
    equal names keep their input order.
    """
    languages = []
    for link in links:
        name = language_names.get(link.lang)
        if not name:
            continue
        languages.append(LanguageLink(
            code=link.lang,
            url=make_mobile_url(link.url),
            language_name=name,
            raw_label=link.title,
        ))
    return sorted(languages, key=lambda language: language.language_name.casefold())


def get_language_variants(
    title: Title,
    page_language: str,
    config,
    variants: Optional[Sequence[str]] = None,
    variant_name: Callable[[str], str] = get_variant_name,
) -> List[VariantLink]:
    """
    List links to the page in every variant of its language except the base
    language itself. Languages with a single variant have no variant links.
    """
    if variants is None:
        variants = get_variants(page_language)
    if len(variants) <= 1:
        return []

    output = []
    for code in variants:
        if code == page_language:
            continue
        output.append(VariantLink(
            code=to_bcp47(code),
            variant_name=variant_name(code),
            url=title.local_url(config, {"variant": code}),
        ))
    return output
