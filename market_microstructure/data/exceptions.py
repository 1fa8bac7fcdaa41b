"""Typed exceptions for the data layer."""

from pathlib import Path


class SnapshotLoadError(Exception):
    """Snapshot or trade file could not be read or did not validate."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(f"Failed to load {path}: {message}")
