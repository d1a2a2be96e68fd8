from __future__ import annotations

from typing import Protocol, Union, runtime_checkable

__all__ = ["Writable", "Payload", "ByteSink"]


class ByteSink(Protocol):
    def write(self, data: bytes) -> int: ...


@runtime_checkable
class Writable(Protocol):
    """Raw payload that streams itself into an entry (e.g. PNG or OGG data)."""

    def write_to(self, sink: ByteSink) -> None: ...


Payload = Union[bytes, bytearray, memoryview, Writable]
