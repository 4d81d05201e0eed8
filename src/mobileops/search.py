# mobileops/search.py
# Query parameters for search API requests that also fetch descriptions

from __future__ import annotations

import copy
from typing import Any, Dict, List, Mapping, Optional

from .context import SkinConfig
from .exceptions import InvalidFeature


def _as_list(value: Any) -> List[str]:
    if not value:
        return []
    if isinstance(value, str):
        return value.split("|")
    return list(value)


def extend_search_params(feature: str, *params: Optional[Mapping[str, Any]], config: SkinConfig) -> Dict[str, Any]:
    """
    Merge search API parameter fragments and add what is needed to also fetch
    Wikibase descriptions.

    Fragments are merged left to right on top of ``{"prop": []}``, followed by
    the configured SEARCH_API_PARAMS; later keys win. The configured
    QUERY_PROP_MODULES are then added to ``prop``. When the feature shows
    Wikibase descriptions, ``pageterms`` is added to ``prop`` and
    ``description`` to the pipe-separated ``wbptterms``.

    Example:
        params = extend_search_params("nearby", base_params, specialized_params, config=config)

    Raises:
        InvalidFeature: if ``feature`` is not a key of DISPLAY_WIKIBASE_DESCRIPTIONS
    """
    display_wikibase_descriptions = config.display_wikibase_descriptions
    if feature not in display_wikibase_descriptions:
        raise InvalidFeature(feature)

    result: Dict[str, Any] = {"prop": []}
    for fragment in (*params, config.search_api_params):
        if fragment:
            result.update(copy.deepcopy(dict(fragment)))

    prop = _as_list(result.get("prop"))
    for module in config.query_prop_modules:
        if module not in prop:
            prop.append(module)

    if display_wikibase_descriptions[feature]:
        if "pageterms" not in prop:
            prop.append("pageterms")

        # Add "description" to the wbptterms terms parameter, if needed
        terms = result.get("wbptterms")
        if terms:
            if "description" not in terms.split("|"):
                result["wbptterms"] = terms + "|description"
        else:
            result["wbptterms"] = "description"

    result["prop"] = prop
    return result
