"""Logic for layering user configuration over the defaults."""

from typing import Any

ADDITIVE_KEYS = {"strip_tokens"}


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Return ``base`` overlaid with ``update``.

    Nested mappings such as ``primary`` merge key by key. Lists replace
    the default list, except ``strip_tokens``, where user tokens are added
    to the built-in ``js`` and ``min``.
    """
    result = base.copy()
    for key, value in update.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        elif (
            key in ADDITIVE_KEYS
            and isinstance(value, list)
            and isinstance(result.get(key), list)
        ):
            result[key] = sorted(set(result[key]) | set(value))
        else:
            result[key] = value
    return result
