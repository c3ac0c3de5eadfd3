"""Shipped message catalogs.

Catalogs are authored as nested dicts (namespace -> key -> template) and
flattened to dotted keys (``"taiwan.business_id.invalid"``) for lookup.
"""

from collections.abc import Mapping
from typing import Any

from validkit.i18n.catalogs.en_us import EN_US
from validkit.i18n.catalogs.zh_tw import ZH_TW


def flatten_catalog(tree: Mapping[str, Any], prefix: str = "") -> dict[str, str]:
    """Flatten a nested catalog into ``{"a.b.c": template}``.

    Example:
        >>> flatten_catalog({"common": {"required": "Required"}})
        {'common.required': 'Required'}
    """
    flat: dict[str, str] = {}
    for name, node in tree.items():
        key = f"{prefix}{name}"
        if isinstance(node, Mapping):
            flat.update(flatten_catalog(node, f"{key}."))
        else:
            flat[key] = node
    return flat


CATALOGS: dict[str, dict[str, str]] = {
    "en-US": flatten_catalog(EN_US),
    "zh-TW": flatten_catalog(ZH_TW),
}

__all__ = ["CATALOGS", "flatten_catalog"]
