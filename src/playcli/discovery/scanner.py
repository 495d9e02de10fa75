"""Directory scanning for candidate projects."""

from __future__ import annotations

import logging
import os
import stat
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from playcli.errors import ConfigurationError, ScanError
from playcli.models import ProjectRecord

LOGGER = logging.getLogger(__name__)

MAX_STAT_WORKERS = 8


@dataclass(slots=True)
class ScanReport:
    projects: List[ProjectRecord] = field(default_factory=list)
    skipped: List[Path] = field(default_factory=list)


def _is_directory(entry: os.DirEntry, report: ScanReport) -> bool:
    try:
        return entry.is_dir()
    except OSError as exc:
        LOGGER.warning("Skipping %s: %s", entry.path, exc)
        report.skipped.append(Path(entry.path))
        return False


def _list_directories(root: Path, report: ScanReport) -> List[Path]:
    try:
        with os.scandir(root) as entries:
            return [Path(entry.path) for entry in entries if _is_directory(entry, report)]
    except OSError as exc:
        raise ScanError(f"Unable to read projects directory {root}: {exc}") from exc


def _stat_directory(path: Path) -> ProjectRecord | None:
    try:
        path_stat = path.stat()
    except OSError as exc:
        LOGGER.warning("Skipping %s: %s", path, exc)
        return None
    return ProjectRecord(name=path.name, path=path, modified_at=path_stat.st_mtime)


def scan_projects(root: Path | None) -> ScanReport:
    """Collect every immediate subdirectory of ``root`` as a project.

    Entries keep the order in which the filesystem enumerates them. Entries
    that cannot be inspected or stat'd are reported in ``ScanReport.skipped``
    instead of failing the whole scan. Only a root that cannot be read at all
    raises ``ScanError``.
    """
    if root is None or not str(root).strip():
        raise ConfigurationError("Projects directory is not configured")

    root = Path(root)
    try:
        root_stat = root.stat()
    except FileNotFoundError as exc:
        raise ScanError(f"Projects directory not found: {root}") from exc
    except OSError as exc:
        raise ScanError(f"Unable to read projects directory {root}: {exc}") from exc
    if not stat.S_ISDIR(root_stat.st_mode):
        raise ScanError(f"Projects directory is not a directory: {root}")

    LOGGER.debug("Scanning projects in %s", root)
    report = ScanReport()
    directories = _list_directories(root, report)
    if not directories:
        return report

    workers = min(MAX_STAT_WORKERS, len(directories))
    with ThreadPoolExecutor(max_workers=workers) as pool:
        records = list(pool.map(_stat_directory, directories))

    for path, record in zip(directories, records):
        if record is None:
            report.skipped.append(path)
        else:
            report.projects.append(record)

    LOGGER.debug(
        "Found %d projects in %s (%d skipped)", len(report.projects), root, len(report.skipped)
    )
    return report
