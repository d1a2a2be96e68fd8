"""Pack metadata and the whole-pack aggregate."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

from .font import Font
from .key import Key
from .lang import Language, LanguageEntry
from .models import BlockState, Model
from .sound import SoundRegistry
from .texture import Texture
from .writable import Payload

__all__ = ["PackFormat", "PackMeta", "ResourcePack"]


@dataclass(frozen=True, slots=True)
class PackFormat:
    """Supported pack format range (inclusive)."""

    min: int
    max: int

    def __post_init__(self) -> None:
        if self.min > self.max:
            raise ValueError(f"Invalid pack format range [{self.min},{self.max}]")

    @classmethod
    def of(cls, value: int) -> PackFormat:
        return cls(value, value)

    @property
    def single(self) -> bool:
        return self.min == self.max


@dataclass(slots=True)
class PackMeta:
    format: PackFormat
    description: str
    languages: Dict[str, LanguageEntry] = field(default_factory=dict)


@dataclass(slots=True)
class ResourcePack:
    """Everything that goes into one resource pack."""

    meta: Optional[PackMeta] = None
    files: Dict[str, Payload] = field(default_factory=dict)
    languages: Dict[Key, Language] = field(default_factory=dict)
    fonts: Dict[Key, Font] = field(default_factory=dict)
    models: Dict[Key, Model] = field(default_factory=dict)
    block_states: Dict[Key, BlockState] = field(default_factory=dict)
    sounds: Dict[str, SoundRegistry] = field(default_factory=dict)
    sound_files: Dict[Key, Payload] = field(default_factory=dict)
    textures: Dict[Key, Texture] = field(default_factory=dict)
