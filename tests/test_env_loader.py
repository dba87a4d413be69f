"""Tests for dotenv loading policy."""

from __future__ import annotations

import os
from pathlib import Path

from sharedconf.utils.env import _is_allowed_dotenv_key, load_dotenv_files


def test_is_allowed_dotenv_key_requires_prefix() -> None:
    assert _is_allowed_dotenv_key("SHAREDCONF_MACHINE_ROOT")
    assert _is_allowed_dotenv_key("SHAREDCONF_LOG_LEVEL")
    assert not _is_allowed_dotenv_key("SHAREDCONF_")
    assert not _is_allowed_dotenv_key("PATH")
    assert not _is_allowed_dotenv_key("ONEDRIVE_TOKEN")


def test_load_dotenv_files_loads_only_prefixed_keys(tmp_path: Path, monkeypatch) -> None:
    dotenv_path = tmp_path / ".env"
    dotenv_path.write_text(
        "\n".join(
            [
                "# backup roots",
                "export SHAREDCONF_MACHINE_ROOT='C:/Backups/PC-01'",
                'SHAREDCONF_SHARED_ROOT="C:/Backups/shared"',
                "SHAREDCONF_LOG_LEVEL=DEBUG",
                "ONEDRIVE_TOKEN=secret",
                "not a pair",
            ]
        ),
        encoding="utf-8",
    )
    for key in ["SHAREDCONF_MACHINE_ROOT", "SHAREDCONF_SHARED_ROOT", "ONEDRIVE_TOKEN"]:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("SHAREDCONF_LOG_LEVEL", "WARNING")

    load_dotenv_files(tmp_path)

    assert os.getenv("SHAREDCONF_MACHINE_ROOT") == "C:/Backups/PC-01"
    assert os.getenv("SHAREDCONF_SHARED_ROOT") == "C:/Backups/shared"
    assert os.getenv("SHAREDCONF_LOG_LEVEL") == "WARNING"
    assert os.getenv("ONEDRIVE_TOKEN") is None
