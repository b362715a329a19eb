"""Pytest configuration for the `tests/` suite.

The suite runs against an editable install in CI; the repository root is
prepended to `sys.path` so a plain checkout works too.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def _prepend_sys_path(path: Path) -> None:
    if not path.exists() or not path.is_dir():
        return

    path_str = str(path.resolve())
    if path_str not in sys.path:
        sys.path.insert(0, path_str)


_REPO_ROOT = Path(__file__).resolve().parents[1]

_prepend_sys_path(_REPO_ROOT)


@pytest.fixture(autouse=True)
def _fresh_registry(monkeypatch):
    """Give every test its own process-wide registry and a clean environment."""
    from plurality.registry import reset_registry

    for name in ("PLURALITY_RULES_FILE", "PLURALITY_LANGUAGE", "PLURALITY_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    reset_registry()
    yield
    reset_registry()
