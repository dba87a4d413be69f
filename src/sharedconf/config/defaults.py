"""Default settings schema for sharedconf.

"""

from __future__ import annotations

from typing import Any, Dict

DEFAULT_SETTINGS: Dict[str, Any] = {
    "roots": {
        "machine": "",
        "shared": "",
    },
    "inheritance": {
        "mode": "merge",
        "fallback_strategy": "use_shared",
    },
    "logging": {
        "level": "INFO",
        "dir": "",
    },
}

INHERITANCE_MODES = ("merge", "override")
FALLBACK_STRATEGIES = ("use_shared", "none")
