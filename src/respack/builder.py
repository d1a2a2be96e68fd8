"""Fluent resource pack builder.

Derives the container path for each asset, opens a single entry, drives a
:class:`~respack.writer.JsonWriter` through the matching encoder and commits
the result. Raw payloads (PNG, OGG, arbitrary files) bypass the writer and go
straight to the entry.
"""

from __future__ import annotations

from typing import Callable, Optional, TypeVar

from .encoding import encoders, paths
from .logging import get_logger
from .model.font import Font
from .model.key import Key
from .model.lang import Language
from .model.models import BlockState, Model
from .model.pack import PackMeta
from .model.sound import SoundRegistry
from .model.texture import Texture
from .model.writable import Payload, Writable
from .output.base import EntryHandle, TreeOutput
from .utils.paths import validate_entry_path
from .writer import JsonWriter

__all__ = ["ResourcePackBuilder", "write_payload"]

T = TypeVar("T")


def write_payload(payload: Payload, handle: EntryHandle) -> None:
    if isinstance(payload, (bytes, bytearray, memoryview)):
        handle.write(payload)
    elif isinstance(payload, Writable):
        payload.write_to(handle)
    else:
        raise TypeError(
            f"Payload must be bytes-like or writable, got {type(payload).__name__}"
        )


class ResourcePackBuilder:
    def __init__(self, output: TreeOutput, *, indent: Optional[int] = None):
        self.output = output
        self.indent = indent

    def _document(
        self, path: str, encode: Callable[[T, JsonWriter], None], obj: T
    ) -> "ResourcePackBuilder":
        with self.output.json_entry(path, indent=self.indent) as writer:
            encode(obj, writer)
        return self

    def _raw(self, path: str, payload: Payload) -> "ResourcePackBuilder":
        with self.output.entry(path) as handle:
            write_payload(payload, handle)
        return self

    # Documents ----------------------------------------------------------------
    def meta(self, meta: PackMeta) -> "ResourcePackBuilder":
        return self._document(
            paths.PACK_META_PATH, encoders.encode_pack_meta, meta
        )

    def font(self, key: Key, font: Font) -> "ResourcePackBuilder":
        return self._document(paths.font_path(key), encoders.encode_font, font)

    def language(self, key: Key, language: Language) -> "ResourcePackBuilder":
        return self._document(
            paths.language_path(key), encoders.encode_language, language
        )

    def model(self, key: Key, model: Model) -> "ResourcePackBuilder":
        return self._document(
            paths.model_path(key), encoders.encode_model, model
        )

    def block_state(self, key: Key, state: BlockState) -> "ResourcePackBuilder":
        # TODO: encode variants/multipart once the target format is settled;
        # until then block states produce no entry.
        get_logger().warning(
            "Block state %s skipped: block state encoding is not supported",
            key.as_string(),
        )
        return self

    def sounds(
        self, namespace: str, registry: SoundRegistry
    ) -> "ResourcePackBuilder":
        return self._document(
            paths.sounds_path(namespace),
            encoders.encode_sound_registry,
            registry,
        )

    # Raw payloads -------------------------------------------------------------
    def sound_file(self, key: Key, data: Payload) -> "ResourcePackBuilder":
        return self._raw(paths.sound_file_path(key), data)

    def texture(self, key: Key, texture: Texture) -> "ResourcePackBuilder":
        self._raw(paths.texture_path(key), texture.data)
        if texture.has_metadata():
            self._document(
                paths.texture_meta_path(key),
                encoders.encode_texture_meta,
                texture,
            )
        return self

    def file(self, path: str, data: Payload) -> "ResourcePackBuilder":
        return self._raw(validate_entry_path(path), data)
