"""Exceptions raised by the initializer."""

from __future__ import annotations

from pathlib import Path


class InitError(Exception):
    """Base class for failures that abort initialization."""


class StagingError(InitError):
    """Raised when a template file cannot be copied into the project."""

    def __init__(self, message: str, source: Path | None = None, destination: Path | None = None):
        self.source = source
        self.destination = destination
        super().__init__(message)


class ManifestError(InitError):
    """Raised when ``package.json`` cannot be loaded, rewritten or saved."""

    def __init__(self, message: str, path: Path | None = None):
        self.path = path
        super().__init__(message)
