"""Public package entrypoints for sharedconf.

This module defines the stable, top-level APIs intended for external callers.
"""

from __future__ import annotations

from sharedconf.core import ResolutionKind, ResolutionResult, deep_merge, merge_configs, resolve
from sharedconf.errors import ConfigLoadError, InvalidArgumentError
from sharedconf.pipeline import LoadedItem, load_item, load_items

__all__ = [
    "resolve",
    "merge_configs",
    "deep_merge",
    "load_item",
    "load_items",
    "ResolutionKind",
    "ResolutionResult",
    "LoadedItem",
    "InvalidArgumentError",
    "ConfigLoadError",
]
__version__ = "0.1.0"
