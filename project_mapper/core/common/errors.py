# File: project_mapper/core/common/errors.py


class ProjectMapperError(Exception):
    """Base class for every error raised by project-mapper."""


class NotFoundError(ProjectMapperError, FileNotFoundError):
    """The walk root (or a traversed directory) does not exist."""


class WalkPermissionError(ProjectMapperError, PermissionError):
    """Reading the walk root was denied."""


class StatError(ProjectMapperError, OSError):
    """
    File metadata could not be read.
    Non-fatal: the walker reports it as an issue and moves on.
    """


class MalformedPatternError(ProjectMapperError, ValueError):
    """An ignore or description pattern is not a valid expression."""

    def __init__(self, pattern: str, reason: str):
        super().__init__(f"Invalid pattern {pattern!r}: {reason}")
        self.pattern = pattern
        self.reason = reason


class ConfigError(ProjectMapperError, ValueError):
    """The project config file is missing, unreadable or invalid."""
