"""Settings loading and resolver helpers.

"""

from __future__ import annotations

import logging
from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from sharedconf.config.defaults import DEFAULT_SETTINGS, FALLBACK_STRATEGIES, INHERITANCE_MODES
from sharedconf.core import deep_merge
from sharedconf.errors import InvalidArgumentError
from sharedconf.utils.env import env_str

_ENV_OVERRIDES: Dict[str, Tuple[str, str]] = {
    "SHAREDCONF_MACHINE_ROOT": ("roots", "machine"),
    "SHAREDCONF_SHARED_ROOT": ("roots", "shared"),
    "SHAREDCONF_INHERITANCE_MODE": ("inheritance", "mode"),
    "SHAREDCONF_FALLBACK_STRATEGY": ("inheritance", "fallback_strategy"),
    "SHAREDCONF_LOG_LEVEL": ("logging", "level"),
    "SHAREDCONF_LOG_DIR": ("logging", "dir"),
}
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOGGER = logging.getLogger("sharedconf.config")


def load_settings(settings_path: Optional[str | Path] = None) -> Tuple[Dict[str, Any], Optional[Path]]:
    """Load settings from defaults, an optional YAML file and the environment.

    Layers are applied in that order, later layers winning. Relative root and
    log directories are anchored at the settings file's directory.

    Args:
        settings_path (Optional[str | Path]): Path to a YAML settings file.

    Returns:
        Tuple[Dict[str, Any], Optional[Path]]: Normalized settings and the
        resolved settings path (``None`` when no file was given).

    Raises:
        FileNotFoundError: If ``settings_path`` does not exist.
        ValueError: If the file is not valid YAML, is not a mapping, or a setting has
            an unsupported value.

    Side Effects / I/O:
        - Reads the settings file and environment variables.
    """
    loaded: Dict[str, Any] = {}
    path: Optional[Path] = None
    if settings_path is not None and str(settings_path).strip():
        path = Path(settings_path).expanduser().resolve()
        if not path.exists():
            raise FileNotFoundError(f"Settings file not found: {path}")
        with path.open("r", encoding="utf-8") as handle:
            try:
                loaded = yaml.safe_load(handle) or {}
            except yaml.YAMLError as err:
                raise ValueError(f"Settings file {path} is not valid YAML: {err}") from err
        if not isinstance(loaded, dict):
            raise ValueError("Settings must be a YAML object.")

    settings = deep_merge(deepcopy(DEFAULT_SETTINGS), loaded)
    _apply_env_overrides(settings)
    _normalize_settings(settings, path.parent if path is not None else None)
    return settings, path


def _apply_env_overrides(settings: Dict[str, Any]) -> None:
    for env_name, (section, key) in _ENV_OVERRIDES.items():
        value = env_str(env_name)
        if not value:
            continue
        section_cfg = settings.get(section)
        if not isinstance(section_cfg, dict):
            section_cfg = {}
            settings[section] = section_cfg
        section_cfg[key] = value
        LOGGER.debug("Applied %s override to %s.%s", env_name, section, key)


def _normalize_settings(settings: Dict[str, Any], base_dir: Optional[Path]) -> None:
    for section in ("roots", "inheritance", "logging"):
        if not isinstance(settings.get(section), dict):
            raise ValueError(f"`{section}` must be a mapping.")

    roots_cfg = settings["roots"]
    for key in ("machine", "shared"):
        roots_cfg[key] = _anchor_dir(roots_cfg.get(key), base_dir)

    inheritance_cfg = settings["inheritance"]
    mode = _setting_text(inheritance_cfg.get("mode"), "merge").lower()
    if mode not in INHERITANCE_MODES:
        raise ValueError(f"inheritance.mode must be one of {', '.join(INHERITANCE_MODES)}; got {mode!r}.")
    inheritance_cfg["mode"] = mode
    strategy = _setting_text(inheritance_cfg.get("fallback_strategy"), "use_shared").lower()
    if strategy not in FALLBACK_STRATEGIES:
        raise ValueError(
            f"inheritance.fallback_strategy must be one of {', '.join(FALLBACK_STRATEGIES)}; got {strategy!r}."
        )
    inheritance_cfg["fallback_strategy"] = strategy

    logging_cfg = settings["logging"]
    level = _setting_text(logging_cfg.get("level"), "INFO").upper()
    if level not in _LOG_LEVELS:
        raise ValueError(f"logging.level must be one of {', '.join(_LOG_LEVELS)}; got {level!r}.")
    logging_cfg["level"] = level
    logging_cfg["dir"] = _anchor_dir(logging_cfg.get("dir"), base_dir)


def _setting_text(raw: Any, default: str) -> str:
    if raw is None:
        return default
    return str(raw).strip() or default


def _anchor_dir(raw: Any, base_dir: Optional[Path]) -> str:
    value = str(raw or "").strip()
    if not value:
        return ""
    path = Path(value).expanduser()
    if not path.is_absolute() and base_dir is not None:
        path = base_dir / path
    return str(path)


def resolve_roots(settings: Dict[str, Any]) -> Tuple[Path, Path]:
    roots_cfg = settings.get("roots", {}) or {}
    machine = str(roots_cfg.get("machine") or "").strip()
    shared = str(roots_cfg.get("shared") or "").strip()
    if not machine:
        raise InvalidArgumentError("roots.machine is not configured (set it or SHAREDCONF_MACHINE_ROOT).")
    if not shared:
        raise InvalidArgumentError("roots.shared is not configured (set it or SHAREDCONF_SHARED_ROOT).")
    return Path(machine), Path(shared)


def resolve_inheritance(settings: Dict[str, Any]) -> Tuple[str, str]:
    inheritance_cfg = settings.get("inheritance", {}) or {}
    return (
        str(inheritance_cfg.get("mode") or "merge"),
        str(inheritance_cfg.get("fallback_strategy") or "use_shared"),
    )


def resolve_log_level(settings: Dict[str, Any]) -> int:
    level_name = str((settings.get("logging", {}) or {}).get("level") or "INFO").upper()
    return getattr(logging, level_name, logging.INFO)


def resolve_log_dir(settings: Dict[str, Any]) -> Optional[Path]:
    raw = str((settings.get("logging", {}) or {}).get("dir") or "").strip()
    return Path(raw) if raw else None
