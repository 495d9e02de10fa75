"""Tests for the project catalog."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, Dict

import pytest

from playcli.catalog import ProjectCatalog, Resolution
from playcli.errors import ConfigurationError, EmptyResultError, NoMatchError, ScanError


class TestScan:
    """Test ProjectCatalog.scan."""

    def test_scan_orders_by_recency(self, sample_root: Path) -> None:
        """Should return projects most recent first."""
        outcome = ProjectCatalog(sample_root).scan()

        assert outcome.error is None
        assert [p.name for p in outcome.projects] == ["My Test Algorithm", "Sample", "Another"]

    def test_scan_unconfigured(self) -> None:
        """Should report a configuration error instead of raising."""
        outcome = ProjectCatalog(None).scan()

        assert outcome.projects == []
        assert isinstance(outcome.error, ConfigurationError)

    def test_scan_missing_root(self, tmp_path: Path) -> None:
        """Should report a scan error instead of raising."""
        outcome = ProjectCatalog(tmp_path / "missing").scan()

        assert outcome.projects == []
        assert isinstance(outcome.error, ScanError)

    def test_scan_empty_root(self, tmp_path: Path) -> None:
        """Should report an empty result for a root without projects."""
        outcome = ProjectCatalog(tmp_path).scan()

        assert outcome.projects == []
        assert isinstance(outcome.error, EmptyResultError)

    def test_scan_is_repeatable(self, sample_root: Path) -> None:
        """Should give equal results for an unchanged directory."""
        catalog = ProjectCatalog(sample_root)

        assert catalog.scan() == catalog.scan()


class TestListPage:
    """Test ProjectCatalog.list_page."""

    def test_first_page(self, sample_root: Path) -> None:
        """Should list every project on a single page."""
        listing = ProjectCatalog(sample_root).list_page(1, 10)

        assert [p.name for p in listing.page.items] == ["My Test Algorithm", "Sample", "Another"]
        assert listing.page.total_pages == 1
        assert listing.page.total_items == 3

    def test_matches_latest_order(self, sample_root: Path) -> None:
        """Should share its ordering with the latest lookup."""
        catalog = ProjectCatalog(sample_root)

        assert catalog.list_page(1, 1).page.items[0] == catalog.latest().project

    def test_unconfigured_still_pages(self) -> None:
        """Should return an empty page 1 of 1 with the error attached."""
        listing = ProjectCatalog(None).list_page(3, 10)

        assert listing.page.items == ()
        assert listing.page.current_page == 1
        assert listing.page.total_pages == 1
        assert isinstance(listing.error, ConfigurationError)

    def test_clamps_page(
        self, make_projects: Callable[[Dict[str, float]], Path]
    ) -> None:
        """Should clamp the requested page to the last one."""
        root = make_projects({f"project-{i:02d}": 1000 - i for i in range(25)})

        listing = ProjectCatalog(root).list_page(1000, 10)

        assert listing.page.current_page == 3
        assert [p.name for p in listing.page.items] == [f"project-{i:02d}" for i in range(20, 25)]


class TestLatest:
    """Test ProjectCatalog.latest."""

    def test_latest(self, sample_root: Path) -> None:
        """Should resolve the most recently modified project."""
        resolution = ProjectCatalog(sample_root).latest()

        assert isinstance(resolution, Resolution)
        assert resolution.ok
        assert resolution.project.name == "My Test Algorithm"
        assert resolution.error is None

    def test_latest_empty(self, tmp_path: Path) -> None:
        """Should resolve nothing in an empty root."""
        resolution = ProjectCatalog(tmp_path).latest()

        assert not resolution.ok
        assert isinstance(resolution.error, EmptyResultError)


class TestResolve:
    """Test ProjectCatalog.resolve."""

    def test_resolve_exact(self, sample_root: Path) -> None:
        """Should resolve an exact name case-insensitively."""
        resolution = ProjectCatalog(sample_root).resolve("sample")

        assert resolution.project.name == "Sample"
        assert [m.project.name for m in resolution.alternatives] == ["Sample"]

    def test_resolve_partial(self, sample_root: Path) -> None:
        """Should resolve a partial name to the best match."""
        resolution = ProjectCatalog(sample_root).resolve("alg")

        assert resolution.project.name == "My Test Algorithm"
        assert resolution.alternatives[0].score == 0.8

    def test_resolve_no_match(self, sample_root: Path) -> None:
        """Should report NoMatchError when nothing clears the threshold."""
        resolution = ProjectCatalog(sample_root).resolve("zzzzqqqq")

        assert not resolution.ok
        assert resolution.alternatives == []
        assert isinstance(resolution.error, NoMatchError)

    def test_resolve_blank_query(self, sample_root: Path) -> None:
        """Should treat a blank query as no match."""
        resolution = ProjectCatalog(sample_root).resolve("  ")

        assert not resolution.ok
        assert isinstance(resolution.error, NoMatchError)

    def test_resolve_unconfigured(self) -> None:
        """Should pass the configuration error through."""
        resolution = ProjectCatalog(None).resolve("sample")

        assert not resolution.ok
        assert isinstance(resolution.error, ConfigurationError)

    def test_custom_threshold(self, sample_root: Path) -> None:
        """Should honour a configured threshold."""
        resolution = ProjectCatalog(sample_root, threshold=0.5).resolve("alg")

        assert [m.project.name for m in resolution.alternatives] == ["My Test Algorithm"]


class TestProjectNames:
    """Test ProjectCatalog.project_names."""

    def test_names_in_recency_order(self, sample_root: Path) -> None:
        """Should list names most recent first."""
        assert ProjectCatalog(sample_root).project_names() == [
            "My Test Algorithm",
            "Sample",
            "Another",
        ]

    def test_names_when_unconfigured(self) -> None:
        """Should return an empty list instead of failing."""
        assert ProjectCatalog(None).project_names() == []


class TestUnreadableRoot:
    """Test the catalog when the root cannot be inspected."""

    @pytest.fixture
    def denied_root(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
        root = tmp_path / "locked" / "inner"
        root.mkdir(parents=True)
        original_stat = Path.stat

        def _denied_stat(self: Path, *args: object, **kwargs: object) -> os.stat_result:
            if self == root:
                raise PermissionError(13, "Permission denied", str(self))
            return original_stat(self, *args, **kwargs)

        monkeypatch.setattr(Path, "stat", _denied_stat)
        return root

    def test_list_page(self, denied_root: Path) -> None:
        """Should return an empty page with a ScanError instead of raising."""
        listing = ProjectCatalog(denied_root).list_page()

        assert listing.page.items == ()
        assert listing.page.total_pages == 1
        assert isinstance(listing.error, ScanError)

    def test_latest_and_resolve(self, denied_root: Path) -> None:
        """Should report the ScanError on resolutions."""
        catalog = ProjectCatalog(denied_root)

        assert isinstance(catalog.latest().error, ScanError)
        assert isinstance(catalog.resolve("sample").error, ScanError)

    def test_project_names(self, denied_root: Path) -> None:
        """Should return no names instead of raising."""
        assert ProjectCatalog(denied_root).project_names() == []
