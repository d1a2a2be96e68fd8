from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .writable import Payload

__all__ = [
    "TextureMeta",
    "AnimationFrame",
    "AnimationMeta",
    "VillagerMeta",
    "Texture",
]


@dataclass(frozen=True, slots=True)
class TextureMeta:
    blur: bool = False
    clamp: bool = False
    mipmaps: Tuple[int, ...] = ()


@dataclass(frozen=True, slots=True)
class AnimationFrame:
    index: int
    time: int


@dataclass(slots=True)
class AnimationMeta:
    frames: List[AnimationFrame] = field(default_factory=list)
    frametime: int = 1
    interpolate: bool = False
    width: Optional[int] = None
    height: Optional[int] = None


@dataclass(frozen=True, slots=True)
class VillagerMeta:
    hat: Optional[str] = None


@dataclass(slots=True)
class Texture:
    """PNG image data plus optional ``.png.mcmeta`` sections."""

    data: Payload
    meta: Optional[TextureMeta] = None
    animation: Optional[AnimationMeta] = None
    villager: Optional[VillagerMeta] = None

    def has_metadata(self) -> bool:
        return (
            self.meta is not None
            or self.animation is not None
            or self.villager is not None
        )
