import json
import logging

import pytest

from respack.builder import ResourcePackBuilder
from respack.errors import (
    DuplicatePathError,
    InvalidPathError,
    StructuralViolation,
    UnsupportedVariantError,
)
from respack.model import (
    AnimationFrame,
    AnimationMeta,
    BlockModel,
    BlockState,
    Key,
    Language,
    PackFormat,
    PackMeta,
    Sound,
    SoundEvent,
    SoundRegistry,
    Texture,
)
from respack.output import MemoryOutput, SinkState


class ChunkedPayload:
    """Streams its data in small pieces, like a decoder would."""

    def __init__(self, data: bytes, chunk: int = 2):
        self.data = data
        self.chunk = chunk

    def write_to(self, sink) -> None:
        for i in range(0, len(self.data), self.chunk):
            sink.write(self.data[i : i + self.chunk])


@pytest.fixture
def out():
    return MemoryOutput()


def test_meta_document(out):
    ResourcePackBuilder(out).meta(PackMeta(PackFormat(7, 9), "Hello"))
    assert out.committed == ["pack.mcmeta"]
    assert out.read_text("pack.mcmeta") == (
        '{"pack":{"format":[7,9],"description":"Hello"}}'
    )


def test_indent_is_cosmetic(out):
    ResourcePackBuilder(out, indent=2).language(
        Key("custom", "en_us"), Language({"a": "b"})
    )
    text = out.read_text("assets/custom/lang/en_us.json")
    assert text == '{\n  "a": "b"\n}'


def test_texture_without_metadata_writes_png_only(out):
    ResourcePackBuilder(out).texture(
        Key("custom", "block/stone"), Texture(b"\x89PNG")
    )
    assert out.committed == ["assets/custom/textures/block/stone.png"]
    assert out["assets/custom/textures/block/stone.png"] == b"\x89PNG"


def test_texture_with_animation_writes_sidecar(out):
    texture = Texture(
        ChunkedPayload(b"\x89PNG-data"),
        animation=AnimationMeta(frames=[AnimationFrame(0, 1)]),
    )
    ResourcePackBuilder(out).texture(Key("custom", "block/lava"), texture)
    assert out.committed == [
        "assets/custom/textures/block/lava.png",
        "assets/custom/textures/block/lava.png.mcmeta",
    ]
    assert out["assets/custom/textures/block/lava.png"] == b"\x89PNG-data"
    meta = json.loads(out.read_text("assets/custom/textures/block/lava.png.mcmeta"))
    assert meta["animation"]["frames"] == [0]


def test_sounds_and_sound_files(out):
    registry = SoundRegistry(
        {"wind": SoundEvent(sounds=[Sound(Key("custom", "ambient/wind"))])}
    )
    (
        ResourcePackBuilder(out)
        .sounds("custom", registry)
        .sound_file(Key("custom", "ambient/wind"), b"OggS")
    )
    assert out.committed == [
        "assets/custom/sounds.json",
        "assets/custom/sounds/ambient/wind.ogg",
    ]
    assert out.read_text("assets/custom/sounds.json") == (
        '{"wind":{"replace":false,"sounds":["custom:ambient/wind"]}}'
    )


def test_model_path(out):
    ResourcePackBuilder(out).model(Key("custom", "/block/stone"), BlockModel())
    assert out.committed == ["assets/custom/models/block/stone.json"]


def test_duplicate_asset_rejected(out):
    builder = ResourcePackBuilder(out)
    builder.model(Key("custom", "/block/stone"), BlockModel())
    with pytest.raises(DuplicatePathError):
        builder.model(Key("custom", "/block/stone"), BlockModel())
    assert len(out) == 1


def test_raw_file(out):
    ResourcePackBuilder(out).file("credits.txt", b"thanks")
    assert out["credits.txt"] == b"thanks"
    with pytest.raises(InvalidPathError):
        ResourcePackBuilder(out).file("../escape.txt", b"x")


def test_bad_payload_type(out):
    with pytest.raises(TypeError):
        ResourcePackBuilder(out).file("a.bin", "not bytes")
    assert "a.bin" not in out.entries
    assert out.state is SinkState.IDLE


def test_encoder_failure_leaves_container_usable(out):
    builder = ResourcePackBuilder(out)
    with pytest.raises(UnsupportedVariantError):
        builder.font(Key("custom", "default.json"), object())
    assert out.committed == []
    assert out.discarded == ["assets/custom/font/default.json"]
    builder.language(Key("custom", "en_us"), Language())
    assert out.committed == ["assets/custom/lang/en_us.json"]


def test_block_state_is_skipped(out, caplog):
    with caplog.at_level(logging.WARNING, logger="respack"):
        ResourcePackBuilder(out).block_state(
            Key("custom", "stone"), BlockState(variants={"": {}})
        )
    assert out.committed == []
    assert "custom:stone" in caplog.text


def test_unencodable_translation_commits_nothing(out):
    with pytest.raises(StructuralViolation):
        ResourcePackBuilder(out).language(
            Key("custom", "en_us"), Language({"k": "\ud800"})
        )
    assert out.committed == []
    assert out.state is SinkState.IDLE
