"""Fuzzy resolution of a query against a set of projects."""

from __future__ import annotations

from typing import Iterable, List

from playcli.config import DEFAULT_MATCH_THRESHOLD, DEFAULT_SUBSTRING_SCORE
from playcli.matching.similarity import similarity
from playcli.models import ProjectRecord, ScoredMatch


def fuzzy_match(
    projects: Iterable[ProjectRecord],
    query: str,
    *,
    threshold: float = DEFAULT_MATCH_THRESHOLD,
    substring_score: float = DEFAULT_SUBSTRING_SCORE,
) -> List[ScoredMatch]:
    """Rank projects whose name scores strictly above ``threshold``.

    Ties keep the input order, so a recency-ordered input breaks ties by recency.
    A blank query matches nothing.
    """
    if not query.strip():
        return []

    matches = [
        ScoredMatch(
            project=project,
            score=similarity(project.name, query, substring_score=substring_score),
        )
        for project in projects
    ]
    ranked = [match for match in matches if match.score > threshold]
    ranked.sort(key=lambda match: match.score, reverse=True)
    return ranked
