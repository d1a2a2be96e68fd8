from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

__all__ = ["Language", "LanguageEntry"]


@dataclass(slots=True)
class Language:
    """Translation table for one locale; keys keep insertion order."""

    translations: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class LanguageEntry:
    """Locale declaration listed in ``pack.mcmeta``."""

    name: str
    region: str
    bidirectional: bool = False
