"""Deep merge of nested configuration mappings.

"""

from __future__ import annotations

import logging
from copy import deepcopy
from typing import Any, Dict

from sharedconf.errors import InvalidArgumentError

LOGGER = logging.getLogger("sharedconf.merge")


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge ``override`` on top of ``base`` and return a new mapping.

    Nested dicts present on both sides are merged recursively. Any other
    override value (scalar, list, ``None`` or a dict replacing a non-dict)
    replaces the base value wholesale. Keys only present in ``base`` are kept.

    Args:
        base (Dict[str, Any]): Mapping providing the starting values.
        override (Dict[str, Any]): Mapping whose values take precedence.

    Returns:
        Dict[str, Any]: Merged mapping. It shares no mutable values with either input.
    """
    merged: Dict[str, Any] = {key: deepcopy(value) for key, value in base.items()}
    for key, value in override.items():
        base_value = base.get(key)
        if isinstance(base_value, dict) and isinstance(value, dict):
            merged[key] = deep_merge(base_value, value)
        else:
            merged[key] = deepcopy(value)
    return merged


def merge_configs(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Validate both arguments and deep merge them.

    Args:
        base (Dict[str, Any]): Default configuration.
        override (Dict[str, Any]): Configuration overriding the defaults. A value
            of ``None`` is an explicit replacement, not an absent override.

    Returns:
        Dict[str, Any]: Merged configuration.

    Raises:
        InvalidArgumentError: If either argument is not a mapping.
    """
    if not isinstance(base, dict):
        raise InvalidArgumentError(f"Merge base must be a mapping, got {type(base).__name__}.")
    if not isinstance(override, dict):
        raise InvalidArgumentError(f"Merge override must be a mapping, got {type(override).__name__}.")

    merged = deep_merge(base, override)
    LOGGER.debug(
        "Merged %d base keys with %d override keys into %d keys",
        len(base),
        len(override),
        len(merged),
    )
    return merged
