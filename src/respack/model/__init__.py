"""Data-only domain types for resource pack assets."""

from ..enums import Axis, CubeFace, DisplayType, GuiLight, SoundType
from .key import Key
from .writable import Payload, Writable
from .font import BitMapFont, Font, LegacyUnicodeFont, TrueTypeFont
from .lang import Language, LanguageEntry
from .models import (
    BlockModel,
    BlockState,
    BlockTexture,
    Element,
    ElementFace,
    ElementRotation,
    ItemModel,
    ItemOverride,
    ItemPredicate,
    ItemTexture,
    Model,
    ModelDisplay,
)
from .sound import Sound, SoundEvent, SoundRegistry
from .texture import AnimationFrame, AnimationMeta, Texture, TextureMeta, VillagerMeta
from .pack import PackFormat, PackMeta, ResourcePack

__all__ = [
    "Axis",
    "CubeFace",
    "DisplayType",
    "GuiLight",
    "SoundType",
    "Key",
    "Payload",
    "Writable",
    "BitMapFont",
    "Font",
    "LegacyUnicodeFont",
    "TrueTypeFont",
    "Language",
    "LanguageEntry",
    "BlockModel",
    "BlockState",
    "BlockTexture",
    "Element",
    "ElementFace",
    "ElementRotation",
    "ItemModel",
    "ItemOverride",
    "ItemPredicate",
    "ItemTexture",
    "Model",
    "ModelDisplay",
    "Sound",
    "SoundEvent",
    "SoundRegistry",
    "AnimationFrame",
    "AnimationMeta",
    "Texture",
    "TextureMeta",
    "VillagerMeta",
    "PackFormat",
    "PackMeta",
    "ResourcePack",
]
