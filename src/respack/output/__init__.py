from .base import EntryHandle, SinkState, TreeOutput
from .memory import MemoryOutput
from .directory import DirectoryOutput
from .archive import ZipOutput

__all__ = [
    "EntryHandle",
    "SinkState",
    "TreeOutput",
    "MemoryOutput",
    "DirectoryOutput",
    "ZipOutput",
]
