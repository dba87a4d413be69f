from sharedconf.config.defaults import DEFAULT_SETTINGS
from sharedconf.config.loader import (
    load_settings,
    resolve_inheritance,
    resolve_log_dir,
    resolve_log_level,
    resolve_roots,
)

__all__ = [
    "DEFAULT_SETTINGS",
    "load_settings",
    "resolve_inheritance",
    "resolve_log_dir",
    "resolve_log_level",
    "resolve_roots",
]
