"""Recency ordering of projects."""

from __future__ import annotations

from typing import Iterable, List, Optional

from playcli.models import ProjectRecord


def sort_by_recency(projects: Iterable[ProjectRecord]) -> List[ProjectRecord]:
    """Return projects most recently modified first.

    ``sorted`` is stable, so projects sharing a timestamp keep their input order.
    """
    return sorted(projects, key=lambda project: project.modified_at, reverse=True)


def latest_project(projects: Iterable[ProjectRecord]) -> Optional[ProjectRecord]:
    ordered = sort_by_recency(projects)
    return ordered[0] if ordered else None
