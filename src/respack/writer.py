"""Nesting-aware JSON document writer.

``JsonWriter`` turns a sequence of ``key``/``value``/``start_*``/``end_*``
calls into canonical JSON text for a single document. The writer keeps a
stack of open scopes plus an optional pending key and rejects any call that
would produce structurally invalid output.

Text is accumulated internally and only handed to the bound sink by
:meth:`JsonWriter.close` once the document is known to be balanced, so a
rejected call sequence never emits a partial document.

Canonical form:
- object keys in call order (never sorted)
- standard JSON string escaping, UTF-8 output
- integers without a decimal point or exponent
- floats in their shortest round-trip representation
- no whitespace unless ``indent`` is given (cosmetic only)
"""

from __future__ import annotations

import json
import math
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, List, Optional, Sequence

from .errors import structural

__all__ = ["Scope", "JsonWriter", "format_number"]


class Scope(Enum):
    OBJECT = "object"
    ARRAY = "array"


def format_number(value: int | float) -> str:
    """Render a number the way the canonical form requires."""
    if isinstance(value, bool):  # bool is an int subclass
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if not math.isfinite(value):
        raise structural(f"Non-finite number cannot be encoded: {value!r}")
    text = repr(value)
    if "e" in text or "E" in text:
        # repr switches to exponent form outside [1e-4, 1e16); expand it.
        text = format(Decimal(text), "f")
        if "." not in text:
            text += ".0"
    return text


def _quote(text: str) -> str:
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as e:
        # Lone surrogates have no UTF-8 form.
        raise structural(
            f"String is not encodable as UTF-8: {text!r}", {"reason": e.reason}
        ) from e
    return json.dumps(text, ensure_ascii=False)


def _format_scalar(value: Any) -> str:
    if isinstance(value, str):
        return _quote(value)
    if isinstance(value, (bool, int, float)):
        return format_number(value)
    # Namespaced identifiers and enum tags render through their string form.
    as_string = getattr(value, "as_string", None)
    if callable(as_string):
        return _quote(as_string())
    raise structural(
        f"Unsupported value type: {type(value).__name__}",
        {"type": type(value).__name__},
    )


class JsonWriter:
    """Builds one JSON document; every mutating call returns the writer."""

    def __init__(
        self,
        sink: Optional[Callable[[bytes], Any]] = None,
        *,
        indent: Optional[int] = None,
    ) -> None:
        self._sink = sink
        self._indent = indent
        self._chunks: List[str] = []
        self._scopes: List[Scope] = []
        # Element count per open scope, used for separators and indentation.
        self._counts: List[int] = []
        self._pending_key: Optional[str] = None
        self._started = False
        self._closed = False

    # State --------------------------------------------------------------------
    @property
    def depth(self) -> int:
        return len(self._scopes)

    @property
    def complete(self) -> bool:
        return self._started and not self._scopes

    @property
    def closed(self) -> bool:
        return self._closed

    def getvalue(self) -> str:
        """Text produced so far (may be an unfinished document)."""
        return "".join(self._chunks)

    # Internal -----------------------------------------------------------------
    def _check_open(self) -> None:
        if self._closed:
            raise structural("Writer is already closed")

    def _newline(self, depth: int) -> None:
        if self._indent is not None:
            self._chunks.append("\n" + " " * (self._indent * depth))

    def _begin_value(self) -> None:
        """Validate and place a value (scalar or nested start) in the document."""
        self._check_open()
        if not self._scopes:
            if self._started:
                raise structural("Document already has a root value")
            self._started = True
            return
        top = self._scopes[-1]
        if top is Scope.OBJECT:
            if self._pending_key is None:
                raise structural("Value in object scope requires a pending key")
            # The key's separator and text were emitted by key(); consume it.
            self._pending_key = None
            return
        if self._counts[-1]:
            self._chunks.append(",")
        self._newline(len(self._scopes))
        self._counts[-1] += 1

    def _push(self, scope: Scope, opener: str) -> "JsonWriter":
        self._begin_value()
        self._chunks.append(opener)
        self._scopes.append(scope)
        self._counts.append(0)
        return self

    def _pop(self, scope: Scope, closer: str) -> "JsonWriter":
        self._check_open()
        if not self._scopes:
            raise structural(f"end_{scope.value} without a matching start")
        if self._scopes[-1] is not scope:
            raise structural(
                f"end_{scope.value} while inside {self._scopes[-1].value}",
                {"expected": self._scopes[-1].value, "got": scope.value},
            )
        if self._pending_key is not None:
            raise structural(
                f"Key '{self._pending_key}' has no value",
                {"key": self._pending_key},
            )
        self._scopes.pop()
        if self._counts.pop():
            self._newline(len(self._scopes))
        self._chunks.append(closer)
        return self

    # Public API ---------------------------------------------------------------
    def start_object(self) -> "JsonWriter":
        return self._push(Scope.OBJECT, "{")

    def end_object(self) -> "JsonWriter":
        return self._pop(Scope.OBJECT, "}")

    def start_array(self) -> "JsonWriter":
        return self._push(Scope.ARRAY, "[")

    def end_array(self) -> "JsonWriter":
        return self._pop(Scope.ARRAY, "]")

    def key(self, name: str) -> "JsonWriter":
        self._check_open()
        if not self._scopes or self._scopes[-1] is not Scope.OBJECT:
            raise structural(f"Key '{name}' outside of an object scope")
        if self._pending_key is not None:
            raise structural(
                f"Key '{name}' while key '{self._pending_key}' is pending",
                {"pending": self._pending_key, "key": name},
            )
        if not isinstance(name, str):
            raise structural(f"Key must be a string, got {type(name).__name__}")
        quoted = _quote(name)
        if self._counts[-1]:
            self._chunks.append(",")
        self._newline(len(self._scopes))
        self._counts[-1] += 1
        self._chunks.append(quoted)
        self._chunks.append(": " if self._indent is not None else ":")
        self._pending_key = name
        return self

    def value(self, value: Any) -> "JsonWriter":
        """Write a primitive or a homogeneous inline array of primitives."""
        if isinstance(value, (list, tuple)):
            return self._inline_array(value)
        text = _format_scalar(value)
        self._begin_value()
        self._chunks.append(text)
        return self

    def _inline_array(self, values: Sequence[Any]) -> "JsonWriter":
        items = [_format_scalar(v) for v in values]
        kinds = {_kind(v) for v in values}
        if len(kinds) > 1:
            raise structural(
                "Inline array values must share one type",
                {"types": sorted(kinds)},
            )
        self._begin_value()
        # Inline arrays stay on one line even in pretty mode.
        sep = ", " if self._indent is not None else ","
        self._chunks.append("[" + sep.join(items) + "]")
        return self

    def close(self) -> str:
        """Finish the document and hand its bytes to the sink.

        Returns the document text. Fails when scopes are still open, a key is
        pending or nothing was written.
        """
        self._check_open()
        if self._scopes:
            raise structural(
                "Unbalanced document",
                {"open_scopes": [s.value for s in self._scopes]},
            )
        if not self._started:
            raise structural("Empty document")
        self._closed = True
        text = self.getvalue()
        if self._sink is not None:
            self._sink(text.encode("utf-8"))
        return text


def _kind(value: Any) -> str:
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    return "string"
