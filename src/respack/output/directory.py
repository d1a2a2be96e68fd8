"""Loose directory output (one file per entry)."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from ..utils.paths import safe_file_path
from .base import TreeOutput

__all__ = ["DirectoryOutput"]


class DirectoryOutput(TreeOutput):
    """Writes each committed entry as a file below ``root``.

    Files are written to a temporary sibling and renamed into place, so a
    reader never observes a truncated entry. Files already present on disk
    count as existing paths unless ``force`` is set.
    """

    def __init__(self, root: str | Path, *, force: bool = False) -> None:
        super().__init__()
        self.root = Path(root)
        self.force = force
        self.root.mkdir(parents=True, exist_ok=True)

    def _target(self, path: str) -> Path:
        return safe_file_path(self.root, path)

    def _exists(self, path: str) -> bool:
        return not self.force and self._target(path).exists()

    def _commit(self, path: str, data: bytes) -> None:
        target = self._target(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=target.parent, prefix=f".{target.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(data)
            os.replace(tmp_name, target)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
