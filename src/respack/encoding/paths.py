"""Container path derivation.

Paths are a pure function of the asset kind and its namespaced identifier.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from ..errors import E_PATH, InvalidPathError
from ..model.key import Key
from ..utils.paths import validate_entry_path

__all__ = [
    "AssetKind",
    "PACK_META_PATH",
    "derive_path",
    "font_path",
    "language_path",
    "model_path",
    "sounds_path",
    "sound_file_path",
    "texture_path",
    "texture_meta_path",
]

ASSETS = "assets/"
JSON_EXT = ".json"
PNG_EXT = ".png"
OGG_EXT = ".ogg"
MCMETA_EXT = ".mcmeta"

PACK_META_PATH = "pack.mcmeta"


class AssetKind(Enum):
    PACK_META = "pack_meta"
    FONT = "font"
    LANGUAGE = "language"
    MODEL = "model"
    SOUNDS = "sounds"
    SOUND_FILE = "sound_file"
    TEXTURE = "texture"
    TEXTURE_META = "texture_meta"


def font_path(key: Key) -> str:
    return validate_entry_path(f"{ASSETS}{key.namespace}/font/{key.value}")


def language_path(key: Key) -> str:
    return validate_entry_path(
        f"{ASSETS}{key.namespace}/lang/{key.value}{JSON_EXT}"
    )


def model_path(key: Key) -> str:
    if not key.value.startswith("/"):
        raise InvalidPathError(
            E_PATH,
            f"Model key value must start with '/': {key.as_string()}",
            {"key": key.as_string()},
        )
    return validate_entry_path(f"{ASSETS}{key.namespace}/models{key.value}{JSON_EXT}")


def sounds_path(namespace: str) -> str:
    # Validates the namespace through the identifier rules.
    Key(namespace, "sounds")
    return f"{ASSETS}{namespace}/sounds{JSON_EXT}"


def sound_file_path(key: Key) -> str:
    return validate_entry_path(
        f"{ASSETS}{key.namespace}/sounds/{key.value}{OGG_EXT}"
    )


def texture_path(key: Key) -> str:
    return validate_entry_path(
        f"{ASSETS}{key.namespace}/textures/{key.value}{PNG_EXT}"
    )


def texture_meta_path(key: Key) -> str:
    return texture_path(key) + MCMETA_EXT


def derive_path(kind: AssetKind, key: Optional[Key] = None) -> str:
    """Dispatch on ``kind``; ``key`` is ignored for the fixed pack metadata path."""
    if kind is AssetKind.PACK_META:
        return PACK_META_PATH
    if key is None:
        raise InvalidPathError(E_PATH, f"{kind.value} path requires a key")
    if kind is AssetKind.SOUNDS:
        return sounds_path(key.namespace)
    return _BY_KIND[kind](key)


_BY_KIND = {
    AssetKind.FONT: font_path,
    AssetKind.LANGUAGE: language_path,
    AssetKind.MODEL: model_path,
    AssetKind.SOUND_FILE: sound_file_path,
    AssetKind.TEXTURE: texture_path,
    AssetKind.TEXTURE_META: texture_meta_path,
}
