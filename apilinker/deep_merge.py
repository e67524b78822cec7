"""Merging of user configuration over the built-in defaults."""

from collections.abc import Collection
from typing import Any

# Lists that extend the defaults rather than replace them
ADDITIVE_KEYS = frozenset({"ignore"})


def deep_merge(
    base: dict[str, Any],
    update: dict[str, Any],
    *,
    additive: Collection[str] = ADDITIVE_KEYS,
) -> dict[str, Any]:
    """Return ``base`` overlaid with ``update``; neither input is modified.

    Nested sections merge key by key. A list under one of the ``additive``
    keys is unioned with the default list (sorted, no duplicates); any other
    value in ``update`` wins outright.
    """
    merged = dict(base)
    for key, value in update.items():
        merged[key] = _merge_value(key, merged.get(key), value, additive)
    return merged


def _merge_value(key: str, current: Any, value: Any, additive: Collection[str]) -> Any:
    if isinstance(current, dict) and isinstance(value, dict):
        return deep_merge(current, value, additive=additive)
    if key in additive and isinstance(current, list) and isinstance(value, list):
        return sorted({*current, *value})
    return value
