"""Entry-multiplexed output containers.

A :class:`TreeOutput` is a hierarchical destination (directory, archive,
memory) that receives named byte entries one at a time. Entries are opened,
buffered fully in memory and only handed to the backend on close, so an
entry that fails half way never shows up in the container.

State machine::

    IDLE --open--> ENTRY_OPEN --close/discard--> IDLE
    IDLE --finish--> FINISHED
    any  --abort--> ABORTED
"""

from __future__ import annotations

import hashlib
import threading
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional

from ..errors import (
    E_DUP_PATH,
    E_ENTRY_OPEN,
    E_ENTRY_STATE,
    E_OUTPUT_CLOSED,
    E_WRITE_IO,
    DuplicatePathError,
    EntryAlreadyOpenError,
    IOFailure,
    OutputClosedError,
)
from ..logging import get_logger
from ..reporting import get_reporter
from ..utils.paths import validate_entry_path
from ..writer import JsonWriter

__all__ = ["SinkState", "EntryHandle", "EntryRecord", "TreeOutput"]


class SinkState(Enum):
    IDLE = "idle"
    ENTRY_OPEN = "entry_open"
    FINISHED = "finished"
    ABORTED = "aborted"


@dataclass(frozen=True, slots=True)
class EntryRecord:
    path: str
    size: int
    sha256: str


class EntryHandle:
    """Write side of a single open entry."""

    __slots__ = ("path", "_buffer", "_closed")

    def __init__(self, path: str) -> None:
        self.path = path
        self._buffer = bytearray()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def size(self) -> int:
        return len(self._buffer)

    def write(self, data: bytes | bytearray | memoryview) -> int:
        if self._closed:
            raise OutputClosedError(
                E_ENTRY_STATE, "Write to a closed entry", {"path": self.path}
            )
        self._buffer += data
        return len(data)

    def getvalue(self) -> bytes:
        return bytes(self._buffer)

    def _release(self) -> None:
        self._closed = True
        self._buffer = bytearray()

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"EntryHandle({self.path!r}, {state}, {self.size} bytes)"


class TreeOutput:
    """Base container; backends implement :meth:`_commit`."""

    def __init__(self) -> None:
        self._state = SinkState.IDLE
        self._lock = threading.Lock()
        self._paths: set[str] = set()
        self._open: Optional[EntryHandle] = None
        self.records: List[EntryRecord] = []
        self.discarded: List[str] = []
        self.bytes_written = 0

    # State --------------------------------------------------------------------
    @property
    def state(self) -> SinkState:
        return self._state

    @property
    def complete(self) -> bool:
        return self._state is SinkState.FINISHED

    @property
    def committed(self) -> List[str]:
        return [r.path for r in self.records]

    def __contains__(self, path: str) -> bool:
        return path in self._paths

    def _check_usable(self) -> None:
        if self._state in (SinkState.FINISHED, SinkState.ABORTED):
            raise OutputClosedError(
                E_OUTPUT_CLOSED,
                f"Output is {self._state.value}",
                {"state": self._state.value},
            )

    def _check_current(self, handle: EntryHandle) -> None:
        if handle is not self._open or handle.closed:
            raise OutputClosedError(
                E_ENTRY_STATE,
                "Handle is not the open entry",
                {"path": handle.path},
            )

    # Entry lifecycle ----------------------------------------------------------
    def open(self, path: str) -> EntryHandle:
        validate_entry_path(path)
        with self._lock:
            self._check_usable()
            if path in self._paths or self._exists(path):
                raise DuplicatePathError(
                    E_DUP_PATH, f"Duplicate entry path: {path}", {"path": path}
                )
            if self._open is not None:
                raise EntryAlreadyOpenError(
                    E_ENTRY_OPEN,
                    f"Cannot open '{path}' while '{self._open.path}' is open",
                    {"path": path, "open": self._open.path},
                )
            handle = EntryHandle(path)
            self._paths.add(path)
            self._open = handle
            self._state = SinkState.ENTRY_OPEN
        return handle

    def close(self, handle: EntryHandle) -> None:
        """Commit the entry's bytes to the container."""
        with self._lock:
            self._check_current(handle)
            data = handle.getvalue()
            try:
                self._commit(handle.path, data)
            except OSError as e:
                self._drop(handle)
                raise IOFailure(
                    E_WRITE_IO,
                    f"Failed to write entry '{handle.path}': {e}",
                    {"path": handle.path},
                ) from e
            except BaseException:
                self._drop(handle)
                raise
            handle._release()
            self._open = None
            self._state = SinkState.IDLE
            self.records.append(
                EntryRecord(
                    handle.path, len(data), hashlib.sha256(data).hexdigest()
                )
            )
            self.bytes_written += len(data)
        get_reporter().verbose(
            f"committed {handle.path} ({len(data)} bytes)", level=2
        )

    def discard(self, handle: EntryHandle) -> None:
        """Drop an open entry without committing anything."""
        with self._lock:
            self._check_current(handle)
            self._drop(handle)

    def _drop(self, handle: EntryHandle) -> None:
        handle._release()
        # The path is released so a caller-level retry can reuse it.
        self._paths.discard(handle.path)
        self._open = None
        if self._state is SinkState.ENTRY_OPEN:
            self._state = SinkState.IDLE
        self.discarded.append(handle.path)
        get_logger().debug("discarded entry %s", handle.path)

    @contextmanager
    def entry(self, path: str) -> Iterator[EntryHandle]:
        """Open ``path``; commit on normal exit, discard on any error."""
        handle = self.open(path)
        try:
            yield handle
        except BaseException:
            if not handle.closed:
                self.discard(handle)
            raise
        self.close(handle)

    @contextmanager
    def json_entry(
        self, path: str, *, indent: Optional[int] = None
    ) -> Iterator[JsonWriter]:
        """Yield a writer whose finished document becomes entry ``path``."""
        with self.entry(path) as handle:
            writer = JsonWriter(handle.write, indent=indent)
            yield writer
            if not writer.closed:
                writer.close()

    def write_entry(self, path: str, data: bytes) -> None:
        with self.entry(path) as handle:
            handle.write(data)

    # Container lifecycle ------------------------------------------------------
    def finish(self) -> None:
        """Seal the container; no further entries can be added."""
        with self._lock:
            self._check_usable()
            if self._open is not None:
                raise EntryAlreadyOpenError(
                    E_ENTRY_OPEN,
                    f"Cannot finish while '{self._open.path}' is open",
                    {"open": self._open.path},
                )
            try:
                self._seal()
            except OSError as e:
                self._state = SinkState.ABORTED
                self._cleanup()
                raise IOFailure(
                    E_WRITE_IO, f"Failed to finalize output: {e}"
                ) from e
            self._state = SinkState.FINISHED

    def abort(self) -> None:
        """Discard any open entry and mark the container incomplete."""
        with self._lock:
            if self._state in (SinkState.FINISHED, SinkState.ABORTED):
                return
            if self._open is not None:
                self._drop(self._open)
            self._state = SinkState.ABORTED
            self._cleanup()
        get_logger().warning(
            "Output aborted after %d committed entries", len(self.committed)
        )

    def __enter__(self) -> "TreeOutput":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            self.finish()
        else:
            self.abort()

    # Backend hooks ------------------------------------------------------------
    def _exists(self, path: str) -> bool:
        return False

    def _commit(self, path: str, data: bytes) -> None:
        raise NotImplementedError

    def _seal(self) -> None:
        pass

    def _cleanup(self) -> None:
        pass
