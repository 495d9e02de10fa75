"""Error conditions reported by the project resolution engine."""

from __future__ import annotations


class PlayCliError(Exception):
    """Base class for play-cli errors."""


class ConfigurationError(PlayCliError):
    """The projects root is not configured."""


class ScanError(PlayCliError):
    """The projects root exists in configuration but cannot be listed."""


class EmptyResultError(PlayCliError):
    """No projects were found. A legitimate empty state, not a failure."""


class NoMatchError(PlayCliError):
    """A fuzzy query matched no project above the threshold."""


class LaunchError(PlayCliError):
    """The runtime used to execute a project could not be started."""
