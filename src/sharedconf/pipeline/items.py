"""Load configuration items from machine-specific or shared backup roots.

"""

from __future__ import annotations

import logging
from copy import deepcopy
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional

from sharedconf.config.defaults import FALLBACK_STRATEGIES, INHERITANCE_MODES
from sharedconf.core import ResolutionKind, ResolutionResult, merge_configs, resolve
from sharedconf.core.resolver import PathArg
from sharedconf.errors import InvalidArgumentError
from sharedconf.utils.json import load_json_object

LOGGER = logging.getLogger("sharedconf.items")


@dataclass(frozen=True)
class LoadedItem:
    item: str
    resolution: ResolutionResult
    config: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"item": self.item}
        payload.update(self.resolution.to_dict())
        payload["config"] = self.config
        return payload


def load_item(
    item: str,
    machine_root: PathArg,
    shared_root: PathArg,
    defaults: Optional[Dict[str, Any]] = None,
    *,
    inheritance_mode: str = "merge",
    fallback_strategy: str = "use_shared",
) -> LoadedItem:
    """Resolve one item and load its configuration.

    Args:
        item (str): Item path relative to the backup roots.
        machine_root (PathArg): Machine-specific backup root.
        shared_root (PathArg): Shared backup root.
        defaults (Optional[Dict[str, Any]]): Configuration the loaded document is merged over.
        inheritance_mode (str): ``merge`` deep-merges the document over ``defaults``;
            ``override`` uses the document as-is.
        fallback_strategy (str): ``use_shared`` falls back to the shared root;
            ``none`` only accepts a machine-specific copy.

    Returns:
        LoadedItem: Resolution and configuration. Directory items and missing
        items carry a copy of ``defaults`` (or ``None``).

    Raises:
        InvalidArgumentError: For invalid paths, defaults, mode or strategy.
        ConfigLoadError: If the resolved document is unreadable or not a JSON object.
    """
    if inheritance_mode not in INHERITANCE_MODES:
        raise InvalidArgumentError(f"Unsupported inheritance mode: {inheritance_mode!r}.")
    if fallback_strategy not in FALLBACK_STRATEGIES:
        raise InvalidArgumentError(f"Unsupported fallback strategy: {fallback_strategy!r}.")
    if defaults is not None and not isinstance(defaults, dict):
        raise InvalidArgumentError("defaults must be a mapping.")

    resolution = resolve(item, machine_root, shared_root)
    if resolution.kind is ResolutionKind.SHARED and fallback_strategy == "none":
        LOGGER.info("Ignoring shared configuration for %s (fallback disabled)", item)
        resolution = ResolutionResult(ResolutionKind.NOT_FOUND)

    fallback_config = deepcopy(defaults) if defaults is not None else None
    path = resolution.path
    if path is None:
        LOGGER.info("No configuration found for item %s", item)
        return LoadedItem(str(item), resolution, fallback_config)

    if path.is_dir():
        LOGGER.info("Resolved %s to %s directory %s", item, resolution.kind.value, path)
        return LoadedItem(str(item), resolution, fallback_config)

    loaded = load_json_object(path)
    if inheritance_mode == "override":
        config = loaded
    else:
        config = merge_configs(defaults or {}, loaded)
    LOGGER.info("Loaded %s configuration for %s from %s", resolution.kind.value, item, path)
    return LoadedItem(str(item), resolution, config)


def load_items(
    items: Iterable[str],
    machine_root: PathArg,
    shared_root: PathArg,
    defaults: Optional[Dict[str, Any]] = None,
    **options: str,
) -> Dict[str, LoadedItem]:
    results: Dict[str, LoadedItem] = {}
    for item in items:
        results[str(item)] = load_item(item, machine_root, shared_root, defaults, **options)
    return results
