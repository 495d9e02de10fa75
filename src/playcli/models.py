"""Core play-cli data models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Generic, Tuple, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class ProjectRecord:
    """A project directory discovered under the projects root."""

    name: str
    path: Path
    modified_at: float

    @property
    def modified_date(self) -> str:
        return datetime.fromtimestamp(self.modified_at, tz=timezone.utc).date().isoformat()

    def entry_point(self, filename: str) -> Path:
        """Path of the file launched when the project runs."""
        return self.path / filename


@dataclass(frozen=True, slots=True)
class ScoredMatch:
    """Project paired with its similarity to a query."""

    project: ProjectRecord
    score: float


@dataclass(frozen=True, slots=True)
class Page(Generic[T]):
    """One page of an ordered sequence plus its position in the whole."""

    items: Tuple[T, ...]
    total_pages: int
    current_page: int
    total_items: int
    page_size: int

    @property
    def start_index(self) -> int:
        return (self.current_page - 1) * self.page_size

    @property
    def is_paginated(self) -> bool:
        return self.total_pages > 1
