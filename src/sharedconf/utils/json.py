from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from sharedconf.errors import ConfigLoadError

_BOM = "\ufeff"


def load_json_document(path: Path) -> Any:
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as err:
        raise ConfigLoadError(f"Could not read configuration {path}: {err}", path) from err
    # PowerShell's Out-File writes a BOM by default.
    if text.startswith(_BOM):
        text = text[len(_BOM) :]
    try:
        return json.loads(text)
    except json.JSONDecodeError as err:
        raise ConfigLoadError(f"Invalid JSON in {path}: {err}", path) from err


def load_json_object(path: Path) -> Dict[str, Any]:
    loaded = load_json_document(path)
    if not isinstance(loaded, dict):
        raise ConfigLoadError(
            f"Configuration {path} must hold a JSON object, got {type(loaded).__name__}.",
            path,
        )
    return loaded


def dump_json_document(value: Any) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False)
