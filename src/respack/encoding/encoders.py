"""Pure asset encoders.

Each encoder maps one domain object onto :class:`~respack.writer.JsonWriter`
calls and writes a complete document (root object included). Fields covered
by the rule table are skipped when they hold their default value.
"""

from __future__ import annotations

from typing import Callable, Dict, Type

from ..errors import unsupported_variant
from ..model.font import BitMapFont, Font, LegacyUnicodeFont, TrueTypeFont
from ..model.lang import Language
from ..model.models import (
    BlockModel,
    Element,
    ElementFace,
    ItemModel,
    Model,
)
from ..model.pack import PackMeta
from ..model.sound import Sound, SoundRegistry
from ..model.texture import AnimationMeta, Texture
from ..writer import JsonWriter
from . import rules

__all__ = [
    "encode_pack_meta",
    "encode_font",
    "encode_language",
    "encode_model",
    "encode_sound",
    "encode_sound_registry",
    "encode_texture_meta",
]


# Pack metadata ----------------------------------------------------------------
def encode_pack_meta(meta: PackMeta, w: JsonWriter) -> None:
    fmt = meta.format
    w.start_object().key("pack").start_object()
    w.key("format").value(fmt.min if fmt.single else [fmt.min, fmt.max])
    w.key("description").value(meta.description).end_object()

    if meta.languages:
        w.key("language").start_object()
        for code, entry in meta.languages.items():
            (
                w.key(code)
                .start_object()
                .key("name").value(entry.name)
                .key("region").value(entry.region)
                .key("bidirectional").value(entry.bidirectional)
                .end_object()
            )
        w.end_object()
    w.end_object()


# Fonts ------------------------------------------------------------------------
def _bitmap_font(font: BitMapFont, w: JsonWriter) -> None:
    w.key("type").value("bitmap").key("file").value(font.file)
    if rules.should_write("BitMapFont", "height", font.height):
        w.key("height").value(font.height)
    w.key("ascent").value(font.ascent).key("chars").start_array()
    for row in font.characters:
        w.value(row)
    w.end_array()


def _legacy_unicode_font(font: LegacyUnicodeFont, w: JsonWriter) -> None:
    (
        w.key("type").value("legacy_unicode")
        .key("sizes").value(font.sizes)
        .key("template").value(font.template)
    )


def _ttf_font(font: TrueTypeFont, w: JsonWriter) -> None:
    (
        w.key("type").value("ttf")
        .key("file").value(font.file)
        .key("shift").value(list(font.shift))
        .key("size").value(font.size)
        .key("oversample").value(font.oversample)
        .key("skip").start_array()
    )
    for chars in font.skip:
        w.value(chars)
    w.end_array()


_FONT_ENCODERS: Dict[Type, Callable[..., None]] = {
    BitMapFont: _bitmap_font,
    LegacyUnicodeFont: _legacy_unicode_font,
    TrueTypeFont: _ttf_font,
}


def encode_font(font: Font, w: JsonWriter) -> None:
    encoder = _FONT_ENCODERS.get(type(font))
    if encoder is None:
        raise unsupported_variant("font", font)
    w.start_object()
    encoder(font, w)
    w.end_object()


# Languages --------------------------------------------------------------------
def encode_language(language: Language, w: JsonWriter) -> None:
    w.start_object()
    for key, text in language.translations.items():
        w.key(key).value(text)
    w.end_object()


# Models -----------------------------------------------------------------------
def _face(face: ElementFace, w: JsonWriter) -> None:
    w.start_object()
    if face.uv is not None:
        w.key("uv").value(list(face.uv))
    w.key("texture").value(face.texture)
    if face.cull_face is not None:
        w.key("cullface").value(face.cull_face.value)
    if rules.should_write("ElementFace", "rotation", face.rotation):
        w.key("rotation").value(face.rotation)
    if face.tint_index is not None:
        w.key("tintindex").value(face.tint_index)
    w.end_object()


def _element(element: Element, w: JsonWriter) -> None:
    w.start_object()
    w.key("from").value(list(element.from_))
    w.key("to").value(list(element.to))

    rotation = element.rotation
    if rotation is not None:
        (
            w.key("rotation").start_object()
            .key("origin").value(list(rotation.origin))
            .key("axis").value(rotation.axis.value)
            .key("angle").value(rotation.angle)
        )
        if rules.should_write("ElementRotation", "rescale", rotation.rescale):
            w.key("rescale").value(rotation.rescale)
        w.end_object()

    if rules.should_write("Element", "shade", element.shade):
        w.key("shade").value(element.shade)

    w.key("faces").start_object()
    for cube_face, face in element.faces.items():
        w.key(cube_face.value)
        _face(face, w)
    w.end_object()
    w.end_object()


def _model_properties(model: Model, w: JsonWriter) -> None:
    if model.parent is not None:
        w.key("parent").value(model.parent)

    w.key("display").start_object()
    for slot, display in model.display.items():
        (
            w.key(slot.value).start_object()
            .key("rotation").value(list(display.rotation))
            .key("translation").value(list(display.translation))
            .key("scale").value(list(display.scale))
            .end_object()
        )
    w.end_object()

    w.key("elements").start_array()
    for element in model.elements:
        _element(element, w)
    w.end_array()


def _item_model(model: ItemModel, w: JsonWriter) -> None:
    _model_properties(model, w)

    textures = model.textures
    w.key("textures").start_object()
    if textures.particle is not None:
        w.key("particle").value(textures.particle)
    for i, layer in enumerate(textures.layers):
        w.key(f"layer{i}").value(layer)
    for name, ref in textures.variables.items():
        w.key(name).value(ref)
    w.end_object()

    if rules.should_write("ItemModel", "gui_light", model.gui_light):
        w.key("gui_light").value(model.gui_light.value)

    w.key("overrides").start_array()
    for override in model.overrides:
        w.start_object().key("predicate").start_object()
        for predicate in override.predicate:
            w.key(predicate.name).value(predicate.value)
        w.end_object().key("model").value(override.model).end_object()
    w.end_array()


def _block_model(model: BlockModel, w: JsonWriter) -> None:
    _model_properties(model, w)
    if rules.should_write(
        "BlockModel", "ambient_occlusion", model.ambient_occlusion
    ):
        w.key("ambientocclusion").value(model.ambient_occlusion)

    textures = model.textures
    w.key("textures").start_object()
    if textures.particle is not None:
        w.key("particle").value(textures.particle)
    for name, ref in textures.variables.items():
        w.key(name).value(ref)
    w.end_object()


_MODEL_ENCODERS: Dict[Type, Callable[..., None]] = {
    ItemModel: _item_model,
    BlockModel: _block_model,
}


def encode_model(model: Model, w: JsonWriter) -> None:
    encoder = _MODEL_ENCODERS.get(type(model))
    if encoder is None:
        raise unsupported_variant("model", model)
    w.start_object()
    encoder(model, w)
    w.end_object()


# Sounds -----------------------------------------------------------------------
def encode_sound(sound: Sound, w: JsonWriter) -> None:
    """Write one sound entry; a sound with only defaults is its bare name."""
    if sound.all_default():
        w.value(sound.name)
        return
    w.start_object().key("name").value(sound.name)
    if rules.should_write("Sound", "volume", sound.volume):
        w.key("volume").value(sound.volume)
    if rules.should_write("Sound", "pitch", sound.pitch):
        w.key("pitch").value(sound.pitch)
    if rules.should_write("Sound", "weight", sound.weight):
        w.key("weight").value(sound.weight)
    if rules.should_write("Sound", "stream", sound.stream):
        w.key("stream").value(sound.stream)
    if rules.should_write(
        "Sound", "attenuation_distance", sound.attenuation_distance
    ):
        w.key("attenuation_distance").value(sound.attenuation_distance)
    if rules.should_write("Sound", "preload", sound.preload):
        w.key("preload").value(sound.preload)
    if rules.should_write("Sound", "type", sound.type):
        w.key("type").value(sound.type.value)
    w.end_object()


def encode_sound_registry(registry: SoundRegistry, w: JsonWriter) -> None:
    w.start_object()
    for name, event in registry.sounds.items():
        w.key(name).start_object().key("replace").value(event.replace)
        if event.subtitle is not None:
            w.key("subtitle").value(event.subtitle)
        if event.sounds is not None:
            w.key("sounds").start_array()
            for sound in event.sounds:
                encode_sound(sound, w)
            w.end_array()
        w.end_object()
    w.end_object()


# Textures ---------------------------------------------------------------------
def _animation(animation: AnimationMeta, w: JsonWriter) -> None:
    frametime = animation.frametime
    w.key("animation").start_object()
    w.key("interpolate").value(animation.interpolate)
    if animation.width is not None:
        w.key("width").value(animation.width)
    if animation.height is not None:
        w.key("height").value(animation.height)
    w.key("frametime").value(frametime).key("frames").start_array()
    for frame in animation.frames:
        if frame.time == frametime:
            # Frames on the default frametime collapse to their index.
            w.value(frame.index)
        else:
            (
                w.start_object()
                .key("index").value(frame.index)
                .key("time").value(frame.time)
                .end_object()
            )
    w.end_array().end_object()


def encode_texture_meta(texture: Texture, w: JsonWriter) -> None:
    """Write the ``.png.mcmeta`` sidecar document for ``texture``."""
    w.start_object()
    meta = texture.meta
    if meta is not None:
        (
            w.key("texture").start_object()
            .key("blur").value(meta.blur)
            .key("clamp").value(meta.clamp)
            .key("mipmaps").start_array()
        )
        for level in meta.mipmaps:
            w.value(level)
        w.end_array().end_object()

    if texture.animation is not None:
        _animation(texture.animation, w)

    villager = texture.villager
    if villager is not None:
        w.key("villager").start_object()
        if villager.hat is not None:
            w.key("hat").value(villager.hat)
        w.end_object()
    w.end_object()
