"""Shared pytest fixtures for gwapi tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from gwapi import Registry, default_registry

FIXTURE_DIR = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture
def registry() -> Registry:
    return default_registry()


@pytest.fixture
def manifest() -> Callable[[str], str]:
    """Read a YAML manifest from tests/fixtures by file name."""

    def _read(name: str) -> str:
        return (FIXTURE_DIR / name).read_text()

    return _read
