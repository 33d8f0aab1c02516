"""
Storage backends for exported files.

Writers report failure by returning False instead of raising, so a single
bad file never aborts a batch export.
"""

from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path
from typing import Protocol


class FileStore(Protocol):
    def ensure_directory(self, path: Path) -> bool: ...

    def write(self, path: Path, data: bytes) -> bool: ...


class LocalFileStore:
    """Writes to the local filesystem. Each write goes through a temp file + rename."""

    def ensure_directory(self, path: Path) -> bool:
        try:
            Path(path).mkdir(parents=True, exist_ok=True)
            return True
        except OSError as e:
            print(f"[ContextCore] Failed to create directory {path}: {e}", file=sys.stderr)
            return False

    def write(self, path: Path, data: bytes) -> bool:
        path = Path(path)
        tmp_name = None
        try:
            fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
            with os.fdopen(fd, "wb") as f:
                f.write(data)
            os.replace(tmp_name, path)
            return True
        except OSError as e:
            print(f"[ContextCore] Failed to write {path}: {e}", file=sys.stderr)
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            return False


class MemoryFileStore:
    """Keeps written files in a dict. Used for dry runs and previews."""

    def __init__(self) -> None:
        self.files: dict[Path, bytes] = {}
        self.directories: set[Path] = set()

    def ensure_directory(self, path: Path) -> bool:
        self.directories.add(Path(path))
        return True

    def write(self, path: Path, data: bytes) -> bool:
        self.files[Path(path)] = data
        return True

    def read_text(self, path: Path) -> str:
        return self.files[Path(path)].decode("utf-8")
