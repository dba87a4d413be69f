from __future__ import annotations

from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]


def test_pyproject_declares_console_script_and_test_extra() -> None:
    pyproject = (ROOT / "pyproject.toml").read_text(encoding="utf-8")
    assert "[project.optional-dependencies]" in pyproject
    assert "pytest" in pyproject
    assert 'sharedconf = "sharedconf.cli:main"' in pyproject
    assert "PyYAML" in pyproject
