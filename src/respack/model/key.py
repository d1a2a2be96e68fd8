"""Namespaced identifiers (``namespace:value``)."""

from __future__ import annotations

import re
from dataclasses import dataclass

from ..errors import E_PATH, InvalidPathError

__all__ = ["Key", "DEFAULT_NAMESPACE"]

DEFAULT_NAMESPACE = "minecraft"

_NAMESPACE_RE = re.compile(r"[a-z0-9_.-]+")
_VALUE_RE = re.compile(r"[a-z0-9_.\-/]+")


@dataclass(frozen=True, slots=True, order=True)
class Key:
    namespace: str
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.namespace, str) or not _NAMESPACE_RE.fullmatch(
            self.namespace
        ):
            raise InvalidPathError(
                E_PATH,
                f"Invalid namespace: {self.namespace!r}",
                {"namespace": self.namespace},
            )
        if not isinstance(self.value, str) or not _VALUE_RE.fullmatch(
            self.value
        ):
            raise InvalidPathError(
                E_PATH, f"Invalid key value: {self.value!r}", {"value": self.value}
            )

    @classmethod
    def parse(cls, text: str, default_namespace: str = DEFAULT_NAMESPACE) -> Key:
        namespace, sep, value = text.partition(":")
        if not sep:
            return cls(default_namespace, text)
        return cls(namespace, value)

    def as_string(self) -> str:
        return f"{self.namespace}:{self.value}"

    def __str__(self) -> str:
        return self.as_string()
