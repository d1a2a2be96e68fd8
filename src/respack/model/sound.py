from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..encoding import rules
from ..enums import SoundType
from .key import Key

__all__ = ["Sound", "SoundEvent", "SoundRegistry"]


@dataclass(frozen=True, slots=True)
class Sound:
    """One playable sound of an event; ``name`` locates the OGG file."""

    name: Key
    volume: float = rules.default("Sound", "volume")
    pitch: float = rules.default("Sound", "pitch")
    weight: int = rules.default("Sound", "weight")
    stream: bool = rules.default("Sound", "stream")
    attenuation_distance: int = rules.default("Sound", "attenuation_distance")
    preload: bool = rules.default("Sound", "preload")
    type: SoundType = rules.default("Sound", "type")

    def all_default(self) -> bool:
        return rules.all_default("Sound", self)


@dataclass(slots=True)
class SoundEvent:
    replace: bool = False
    subtitle: Optional[str] = None
    sounds: Optional[List[Sound]] = None


@dataclass(slots=True)
class SoundRegistry:
    """Sound events of one namespace, keyed by event name."""

    sounds: Dict[str, SoundEvent] = field(default_factory=dict)
