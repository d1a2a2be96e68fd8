from __future__ import annotations

from typing import Dict, Iterator

from .base import TreeOutput

__all__ = ["MemoryOutput"]


class MemoryOutput(TreeOutput):
    """Keeps committed entries in memory, in commit order."""

    def __init__(self) -> None:
        super().__init__()
        self.entries: Dict[str, bytes] = {}

    def _commit(self, path: str, data: bytes) -> None:
        self.entries[path] = data

    def __getitem__(self, path: str) -> bytes:
        return self.entries[path]

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def read_text(self, path: str) -> str:
        return self.entries[path].decode("utf-8")
