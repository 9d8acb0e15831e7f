"""Exceptions raised while acquiring input for a scan."""

from __future__ import annotations

from pathlib import Path


class ScanError(Exception):
    """Base class for failures that abort the scan of one file."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"{message}: {path}")
        self.path = path


class PathNotFound(ScanError):
    def __init__(self, path: Path) -> None:
        super().__init__(path, "Path not found or not a regular file")


class AccessDenied(ScanError):
    def __init__(self, path: Path) -> None:
        super().__init__(path, "Access denied")


class ReadFailed(ScanError):
    def __init__(self, path: Path) -> None:
        super().__init__(path, "Read failed")
