"""Exception hierarchy for port status evaluation."""

from __future__ import annotations

from pathlib import Path


class PortStatusError(Exception):
    """Base exception for all port status errors."""


class SnapshotError(PortStatusError):
    """State snapshot could not be read or validated."""

    def __init__(self, message: str, path: Path | None = None):
        self.path = path
        super().__init__(message)
