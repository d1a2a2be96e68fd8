import pytest

from respack.encoding.paths import (
    PACK_META_PATH,
    AssetKind,
    derive_path,
    font_path,
    language_path,
    model_path,
    sound_file_path,
    sounds_path,
    texture_meta_path,
    texture_path,
)
from respack.errors import E_PATH, InvalidPathError
from respack.model import Key


def test_path_templates():
    assert PACK_META_PATH == "pack.mcmeta"
    assert font_path(Key("custom", "default.json")) == (
        "assets/custom/font/default.json"
    )
    assert language_path(Key("custom", "en_us")) == "assets/custom/lang/en_us.json"
    assert model_path(Key("custom", "/item/sword")) == (
        "assets/custom/models/item/sword.json"
    )
    assert sounds_path("custom") == "assets/custom/sounds.json"
    assert sound_file_path(Key("custom", "ambient/wind")) == (
        "assets/custom/sounds/ambient/wind.ogg"
    )
    assert texture_path(Key("custom", "block/stone")) == (
        "assets/custom/textures/block/stone.png"
    )
    assert texture_meta_path(Key("custom", "block/stone")) == (
        "assets/custom/textures/block/stone.png.mcmeta"
    )


def test_derive_path_dispatch():
    key = Key("custom", "block/stone")
    assert derive_path(AssetKind.PACK_META) == "pack.mcmeta"
    assert derive_path(AssetKind.TEXTURE, key) == texture_path(key)
    assert derive_path(AssetKind.SOUNDS, key) == "assets/custom/sounds.json"
    assert derive_path(AssetKind.MODEL, Key("custom", "/block/stone")) == (
        "assets/custom/models/block/stone.json"
    )
    with pytest.raises(InvalidPathError):
        derive_path(AssetKind.FONT)


def test_paths_are_pure():
    key = Key("custom", "block/stone")
    assert texture_path(key) == texture_path(Key("custom", "block/stone"))


def test_distinct_kinds_give_distinct_paths():
    key = Key("custom", "x")
    produced = {
        derive_path(kind, key)
        for kind in AssetKind
        if kind is not AssetKind.MODEL
    }
    produced.add(model_path(Key("custom", "/x")))
    assert len(produced) == len(AssetKind)


def test_model_key_needs_leading_slash():
    with pytest.raises(InvalidPathError) as exc:
        model_path(Key("custom", "item/sword"))
    assert exc.value.code == E_PATH


def test_invalid_sounds_namespace():
    with pytest.raises(InvalidPathError):
        sounds_path("Bad Namespace")


class TestKey:
    def test_parse(self):
        assert Key.parse("custom:block/stone") == Key("custom", "block/stone")
        assert Key.parse("stone") == Key("minecraft", "stone")
        assert str(Key("custom", "a")) == "custom:a"

    @pytest.mark.parametrize(
        "namespace, value",
        [("Custom", "a"), ("custom", "A"), ("", "a"), ("custom", ""), ("a b", "c")],
    )
    def test_invalid(self, namespace, value):
        with pytest.raises(InvalidPathError):
            Key(namespace, value)

    def test_traversal_segments_rejected_in_paths(self):
        with pytest.raises(InvalidPathError):
            texture_path(Key("custom", "../escape"))
