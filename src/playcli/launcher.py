"""Launching a resolved project with its runtime."""

from __future__ import annotations

import logging
import subprocess
from typing import List, Sequence

from playcli.config import DEFAULT_ENTRY_POINT, DEFAULT_RUNTIME
from playcli.errors import LaunchError
from playcli.models import ProjectRecord

LOGGER = logging.getLogger(__name__)


def build_project_args(entry_point: str, project_args: Sequence[str]) -> List[str]:
    """Arguments passed to the runtime: the entry point followed by the forwarded tokens."""
    return [entry_point, *project_args]


def launch_project(
    project: ProjectRecord,
    project_args: Sequence[str] = (),
    *,
    runtime: str = DEFAULT_RUNTIME,
    entry_point: str = DEFAULT_ENTRY_POINT,
) -> int:
    """Run ``project`` in its own directory and return the child's exit code."""
    command = [runtime, *build_project_args(str(project.entry_point(entry_point)), project_args)]
    LOGGER.debug("Running %s in %s", command, project.path)
    try:
        completed = subprocess.run(command, cwd=project.path, check=False)
    except OSError as exc:
        raise LaunchError(f"Error running {project.name}: {exc}") from exc
    return completed.returncode
