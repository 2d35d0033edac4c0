from __future__ import annotations

import os
from pathlib import Path

import pytest

from shapekit._config import CONFIG_ENV_VAR

PROJECT_ROOT = Path(__file__).resolve().parents[1]


def pytest_configure():
    os.environ.setdefault("PYVISTA_OFF_SCREEN", "true")


@pytest.fixture(autouse=True)
def shapekit_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep every test away from the real ~/.shapekit directory."""
    home = tmp_path / "shapekit-home"
    monkeypatch.setenv(CONFIG_ENV_VAR, str(home))
    return home


@pytest.fixture
def project_root() -> Path:
    return PROJECT_ROOT


@pytest.fixture
def examples_dir(project_root: Path) -> Path:
    return project_root / "docs" / "examples" / "shapes"
