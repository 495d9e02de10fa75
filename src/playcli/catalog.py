"""Project catalog: the entry point for listing and resolving projects."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from playcli.config import DEFAULT_MATCH_THRESHOLD, DEFAULT_PAGE_SIZE, DEFAULT_SUBSTRING_SCORE
from playcli.discovery.ordering import sort_by_recency
from playcli.discovery.scanner import scan_projects
from playcli.errors import (
    ConfigurationError,
    EmptyResultError,
    NoMatchError,
    PlayCliError,
    ScanError,
)
from playcli.matching.resolver import fuzzy_match
from playcli.models import Page, ProjectRecord, ScoredMatch
from playcli.utils.pagination import paginate

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class ScanOutcome:
    projects: List[ProjectRecord] = field(default_factory=list)
    error: Optional[PlayCliError] = None


@dataclass(slots=True)
class ListingOutcome:
    page: Page[ProjectRecord]
    error: Optional[PlayCliError] = None


@dataclass(slots=True)
class Resolution:
    project: Optional[ProjectRecord] = None
    alternatives: List[ScoredMatch] = field(default_factory=list)
    error: Optional[PlayCliError] = None

    @property
    def ok(self) -> bool:
        return self.project is not None


class ProjectCatalog:
    """Scans a projects root and answers listing and lookup requests.

    Configuration and scan problems never raise from here; they come back as
    the ``error`` of the returned outcome alongside an empty result.
    """

    def __init__(
        self,
        root: Path | None,
        *,
        threshold: float = DEFAULT_MATCH_THRESHOLD,
        substring_score: float = DEFAULT_SUBSTRING_SCORE,
    ) -> None:
        self.root = root
        self.threshold = threshold
        self.substring_score = substring_score

    def scan(self) -> ScanOutcome:
        """Return the projects under the root, most recent first."""
        try:
            report = scan_projects(self.root)
        except (ConfigurationError, ScanError) as exc:
            LOGGER.debug("Scan of %s failed: %s", self.root, exc)
            return ScanOutcome(error=exc)

        projects = sort_by_recency(report.projects)
        if not projects:
            return ScanOutcome(error=EmptyResultError(f"No projects found in {self.root}"))
        return ScanOutcome(projects=projects)

    def list_page(self, page: int = 1, page_size: int = DEFAULT_PAGE_SIZE) -> ListingOutcome:
        outcome = self.scan()
        return ListingOutcome(page=paginate(outcome.projects, page, page_size), error=outcome.error)

    def latest(self) -> Resolution:
        outcome = self.scan()
        if not outcome.projects:
            return Resolution(error=outcome.error)
        return Resolution(project=outcome.projects[0])

    def resolve(self, query: str) -> Resolution:
        """Pick the best fuzzy match for ``query``; all ranked matches are kept as alternatives."""
        outcome = self.scan()
        if not outcome.projects:
            return Resolution(error=outcome.error)

        matches = fuzzy_match(
            outcome.projects,
            query,
            threshold=self.threshold,
            substring_score=self.substring_score,
        )
        if not matches:
            LOGGER.debug("No project matched %r", query)
            return Resolution(error=NoMatchError(f'No project found matching "{query}".'))
        return Resolution(project=matches[0].project, alternatives=matches)

    def project_names(self) -> List[str]:
        return [project.name for project in self.scan().projects]
