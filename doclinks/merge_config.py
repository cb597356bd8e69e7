"""Logic for merging configuration dictionaries."""

from typing import Any

ADDITIVE_KEYS = {"exclude"}


def merge_config(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Merge user settings over a base configuration.

    - Values in 'update' replace 'base' values, except for additive keys.
    - 'exclude' is additive: new globs are appended, duplicates dropped.
    """
    result = base.copy()
    for key, value in update.items():
        if (
            key in ADDITIVE_KEYS
            and isinstance(value, list)
            and isinstance(result.get(key), list)
        ):
            merged = list(result[key])
            merged.extend(v for v in value if v not in merged)
            result[key] = merged
        else:
            result[key] = value
    return result
