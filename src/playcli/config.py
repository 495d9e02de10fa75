"""Application configuration defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

PROJECTS_DIR_ENV = "PLAYCLI_PROJECTS_DIR"
RUNTIME_ENV = "PLAYCLI_RUNTIME"
ENTRY_POINT_ENV = "PLAYCLI_ENTRY_POINT"

DEFAULT_RUNTIME = "bun"
DEFAULT_ENTRY_POINT = "index.ts"
DEFAULT_PAGE_SIZE = 10
DEFAULT_MATCH_THRESHOLD = 0.3
DEFAULT_SUBSTRING_SCORE = 0.8


def _get_default_projects_dir() -> Path | None:
    value = os.environ.get(PROJECTS_DIR_ENV, "").strip()
    return Path(value) if value else None


def _env_or(name: str, default: str) -> str:
    return os.environ.get(name, "").strip() or default


@dataclass(slots=True)
class AppConfig:
    projects_dir: Path | None = field(default_factory=_get_default_projects_dir)
    runtime: str = field(default_factory=lambda: _env_or(RUNTIME_ENV, DEFAULT_RUNTIME))
    entry_point: str = field(
        default_factory=lambda: _env_or(ENTRY_POINT_ENV, DEFAULT_ENTRY_POINT)
    )
    page_size: int = DEFAULT_PAGE_SIZE
    match_threshold: float = DEFAULT_MATCH_THRESHOLD
    substring_score: float = DEFAULT_SUBSTRING_SCORE
    max_alternatives: int = 5

    def resolve_projects_dir(self, base_dir: Path | None = None) -> Path | None:
        """Return the projects root as an absolute path, or ``None`` when unset."""
        if self.projects_dir is None or not str(self.projects_dir).strip():
            return None
        path = Path(self.projects_dir).expanduser()
        if path.is_absolute():
            return path
        return (base_dir or Path.cwd()) / path
