"""Exception types raised by sharedconf."""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class InvalidArgumentError(ValueError):
    """Raised when a required path or mapping argument is missing or malformed."""


class ConfigLoadError(ValueError):
    """Raised when a resolved configuration document cannot be read or parsed."""

    def __init__(self, message: str, path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.path = path
