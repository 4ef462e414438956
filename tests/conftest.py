"""Shared fixtures for lanedesk tests."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from tests.helpers import FakeRunner


@pytest.fixture
def fake_runner() -> FakeRunner:
    """A fresh ``FakeRunner`` with no scripted responses."""
    return FakeRunner()


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[..., Path]:
    """Create directories under ``tmp_path/project`` and return the root.

    Usage: ``make_tree("ios/MyApp.xcworkspace", "MyApp.xcodeproj")``.
    """
    def _make(*dirs: str) -> Path:
        root = tmp_path / "project"
        root.mkdir(exist_ok=True)
        for rel in dirs:
            (root / rel).mkdir(parents=True, exist_ok=True)
        return root

    return _make
