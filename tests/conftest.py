"""Shared fixtures for play-cli tests."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, Dict, Iterator

import pytest

from playcli.config import ENTRY_POINT_ENV, PROJECTS_DIR_ENV, RUNTIME_ENV
from playcli.web.app import app as web_app


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's own configuration out of the tests."""
    for name in (PROJECTS_DIR_ENV, RUNTIME_ENV, ENTRY_POINT_ENV):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def make_projects(tmp_path: Path) -> Callable[[Dict[str, float]], Path]:
    """Create project directories with fixed modification times."""
    root = tmp_path / "Projects"
    root.mkdir()

    def _make(projects: Dict[str, float]) -> Path:
        for name, mtime in projects.items():
            project = root / name
            project.mkdir()
            (project / "index.ts").write_text("console.log('hello');\n")
            os.utime(project, (mtime, mtime))
        return root

    return _make


@pytest.fixture
def sample_root(make_projects: Callable[[Dict[str, float]], Path]) -> Path:
    return make_projects({"Sample": 100, "My Test Algorithm": 200, "Another": 50})


@pytest.fixture(autouse=True)
def reset_web_state() -> Iterator[None]:
    """Forget any projects root a previous test handed to the web app."""
    yield
    web_app.state.projects_dir = None
