"""Machine-specific vs. shared configuration path resolution.

A configuration item is addressed by a path relative to a backup root. The
machine-scoped root always wins: any entry there shadows the whole shared item.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Union

from sharedconf.errors import InvalidArgumentError

LOGGER = logging.getLogger("sharedconf.resolver")

PathArg = Union[str, "os.PathLike[str]"]


class ResolutionKind(str, Enum):
    MACHINE = "machine"
    SHARED = "shared"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class ResolutionResult:
    """Outcome of a single resolution.

    Args:
        kind (ResolutionKind): Which root held the item, if any.
        path (Optional[Path]): Resolved path; ``None`` when nothing was found.
    """

    kind: ResolutionKind
    path: Optional[Path] = None

    @property
    def found(self) -> bool:
        return self.kind is not ResolutionKind.NOT_FOUND

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "path": str(self.path) if self.path is not None else None,
        }


def resolve(
    relative_path: PathArg,
    machine_root: PathArg,
    shared_root: PathArg,
    *,
    exists: Optional[Callable[[Path], bool]] = None,
) -> ResolutionResult:
    """Resolve a configuration item against the machine and shared roots.

    The machine candidate is probed first and returned on a hit without looking
    at the shared root. Each root is probed at most once.

    Args:
        relative_path (PathArg): Item path relative to either root, e.g. ``registry/app.json``.
        machine_root (PathArg): Machine-specific backup root.
        shared_root (PathArg): Shared backup root used as fallback.
        exists (Optional[Callable[[Path], bool]]): Existence probe. Defaults to
            :meth:`pathlib.Path.exists`, which accepts files and directories.

    Returns:
        ResolutionResult: ``MACHINE`` or ``SHARED`` with the resolved path, or ``NOT_FOUND``.

    Raises:
        InvalidArgumentError: If an argument is missing, empty, or the relative
            path is absolute or climbs out of the roots with ``..``.

    Side Effects / I/O:
        - Performs read-only existence checks; never opens the item.
    """
    item = _require_path("relative_path", relative_path)
    machine = _require_path("machine_root", machine_root)
    shared = _require_path("shared_root", shared_root)
    if item.is_absolute() or item.anchor:
        raise InvalidArgumentError(f"relative_path must be relative to the backup roots, got {item}.")
    if ".." in item.parts:
        raise InvalidArgumentError(f"relative_path must stay inside the backup roots, got {item}.")

    probe = exists or Path.exists

    candidate_machine = machine / item
    if probe(candidate_machine):
        LOGGER.debug("Resolved %s to machine-specific %s", item, candidate_machine)
        return ResolutionResult(ResolutionKind.MACHINE, candidate_machine)

    candidate_shared = shared / item
    if probe(candidate_shared):
        LOGGER.debug("Resolved %s to shared %s", item, candidate_shared)
        return ResolutionResult(ResolutionKind.SHARED, candidate_shared)

    LOGGER.debug("No configuration for %s under %s or %s", item, machine, shared)
    return ResolutionResult(ResolutionKind.NOT_FOUND)


def _require_path(name: str, value: Any) -> Path:
    if value is None:
        raise InvalidArgumentError(f"{name} is required.")
    if not isinstance(value, (str, os.PathLike)):
        raise InvalidArgumentError(f"{name} must be a path, got {type(value).__name__}.")
    raw = os.fspath(value)
    if not isinstance(raw, str) or not raw.strip():
        raise InvalidArgumentError(f"{name} must be a non-empty path.")
    return Path(raw)
