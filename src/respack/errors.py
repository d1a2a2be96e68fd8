"""Error definitions for respack."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional

E_STRUCTURE = "E_STRUCTURE"
E_DUP_PATH = "E_DUP_PATH"
E_ENTRY_OPEN = "E_ENTRY_OPEN"
E_ENTRY_STATE = "E_ENTRY_STATE"
E_PATH = "E_PATH"
E_VARIANT = "E_VARIANT"
E_WRITE_IO = "E_WRITE_IO"
E_OUTPUT_CLOSED = "E_OUTPUT_CLOSED"


@dataclass
class PackError(Exception):
    code: str
    message: str
    context: Optional[Dict[str, Any]] = None

    def __str__(self) -> str:
        return f"{self.code}: {self.message}" + (
            f" | ctx={self.context}" if self.context else ""
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "context": self.context or {},
        }


class StructuralViolation(PackError):
    pass


class DuplicatePathError(PackError):
    pass


class EntryAlreadyOpenError(PackError):
    pass


class InvalidPathError(PackError):
    pass


class UnsupportedVariantError(PackError):
    pass


class IOFailure(PackError):
    pass


class OutputClosedError(PackError):
    pass


def structural(
    message: str, context: Optional[Dict[str, Any]] = None
) -> StructuralViolation:
    return StructuralViolation(code=E_STRUCTURE, message=message, context=context)


def unsupported_variant(kind: str, value: Any) -> UnsupportedVariantError:
    return UnsupportedVariantError(
        code=E_VARIANT,
        message=f"Unsupported {kind} variant: {type(value).__name__}",
        context={"kind": kind, "type": type(value).__name__},
    )


__all__ = [
    "PackError",
    "StructuralViolation",
    "DuplicatePathError",
    "EntryAlreadyOpenError",
    "InvalidPathError",
    "UnsupportedVariantError",
    "IOFailure",
    "OutputClosedError",
    "structural",
    "unsupported_variant",
    "E_STRUCTURE",
    "E_DUP_PATH",
    "E_ENTRY_OPEN",
    "E_ENTRY_STATE",
    "E_PATH",
    "E_VARIANT",
    "E_WRITE_IO",
    "E_OUTPUT_CLOSED",
]
