"""Shared pytest fixtures for test modules."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

from optres.config import configure

if TYPE_CHECKING:
    from collections.abc import Generator
    from pathlib import Path


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Generator[None]:
    """Keep tests independent of OPTRES__ env vars, optres.yaml, and cached settings."""
    for key in list(os.environ):
        if key.startswith("OPTRES__"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    configure(None)
    yield
    configure(None)
