"""Font provider variants."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

from ..encoding import rules
from .key import Key

__all__ = ["BitMapFont", "LegacyUnicodeFont", "TrueTypeFont", "Font"]


@dataclass(frozen=True, slots=True)
class BitMapFont:
    file: Key
    ascent: int
    characters: Tuple[str, ...]
    height: int = rules.default("BitMapFont", "height")


@dataclass(frozen=True, slots=True)
class LegacyUnicodeFont:
    sizes: Key
    template: str


@dataclass(frozen=True, slots=True)
class TrueTypeFont:
    file: Key
    shift: Tuple[float, float] = (0.0, 0.0)
    size: float = 11.0
    oversample: float = 1.0
    skip: Tuple[str, ...] = ()


Font = Union[BitMapFont, LegacyUnicodeFont, TrueTypeFont]
