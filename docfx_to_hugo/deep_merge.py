"""Logic for deep merging configuration dictionaries."""

from typing import Any

KEYED_LISTS = {"authorities": "prefix"}


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries.

    - Objects are merged recursively.
    - Arrays in 'update' replace 'base' arrays, EXCEPT for keyed lists.
    - 'authorities' is merged by 'prefix': an entry replaces the base entry with
      the same prefix, or is appended.
    """
    result = base.copy()
    for key, value in update.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        elif (
            key in KEYED_LISTS
            and isinstance(value, list)
            and isinstance(result.get(key), list)
        ):
            result[key] = _merge_keyed_list(result[key], value, KEYED_LISTS[key])
        else:
            # Default: Replacement (scalars and other arrays)
            result[key] = value
    return result


def _merge_keyed_list(
    base: list[dict[str, Any]],
    update: list[dict[str, Any]],
    id_key: str,
) -> list[dict[str, Any]]:
    merged = list(base)
    for entry in update:
        positions = [
            i
            for i, existing in enumerate(merged)
            if existing.get(id_key) == entry.get(id_key)
        ]
        if positions:
            merged[positions[0]] = entry
        else:
            merged.append(entry)
    return merged
