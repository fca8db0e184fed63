from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

import pytest

from roots import RootStore, Tree, grow
from roots.settings import DEFAULT_SETTINGS, GrowthSettings

PLANTED = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)


def grow_grid(
    seed: int,
    steps: int,
    width: int = 20,
    height: int = 20,
    settings: GrowthSettings = DEFAULT_SETTINGS,
) -> Tree:
    tree = Tree(width=width, height=height)
    grow(tree, seed, steps, settings)
    return tree


@pytest.fixture
def planted() -> datetime:
    return PLANTED


@pytest.fixture
def roots_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    home = tmp_path / "roots-home"
    monkeypatch.setenv("ROOTS_HOME", str(home))
    for key in ("ROOTS_WIDTH", "ROOTS_HEIGHT", "ROOTS_GROWTH_RATE"):
        monkeypatch.delenv(key, raising=False)
    return home


@pytest.fixture
def store(roots_home: Path) -> RootStore:
    return RootStore(roots_home / "root_0")


@pytest.fixture
def grown():
    return grow_grid
