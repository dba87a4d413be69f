"""Environment variable parsing and dotenv loading helpers.

"""

from __future__ import annotations

import os
from pathlib import Path

ENV_PREFIX = "SHAREDCONF_"


def env_str(name: str, default: str = "") -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip()


def load_dotenv_files(project_root: Path) -> None:
    """Load ``SHAREDCONF_*`` variables from ``.env`` files under ``project_root``.

    Variables already present in the process environment are left untouched.

    Side Effects / I/O:
        - Reads ``.env`` files and mutates ``os.environ``.
    """
    for path in [project_root / ".env", project_root / ".sharedconf.env"]:
        _load_dotenv_file(path)


def _is_allowed_dotenv_key(key: str) -> bool:
    return key.startswith(ENV_PREFIX) and len(key) > len(ENV_PREFIX)


def _load_dotenv_file(path: Path) -> None:
    if not path.exists():
        return
    for raw_line in path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if line.startswith("export "):
            line = line[len("export ") :].strip()
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip("\"'")
        if _is_allowed_dotenv_key(key) and key not in os.environ:
            os.environ[key] = value
