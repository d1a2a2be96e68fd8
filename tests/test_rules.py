import pytest

from respack.encoding import rules
from respack.enums import Axis, GuiLight, SoundType
from respack.model import (
    BitMapFont,
    BlockModel,
    Element,
    ElementFace,
    ElementRotation,
    ItemModel,
    Key,
    Sound,
)


def test_declared_defaults():
    assert rules.default("Sound", "volume") == 1.0
    assert rules.default("Sound", "weight") == 1
    assert rules.default("Sound", "attenuation_distance") == 0
    assert rules.default("Sound", "type") is SoundType.SOUND
    assert rules.default("ItemModel", "gui_light") is GuiLight.SIDE
    assert rules.default("BitMapFont", "height") == 8


def test_unknown_rule():
    assert rules.rule("Sound", "name") is None
    with pytest.raises(KeyError):
        rules.default("Sound", "name")
    # Fields without a rule are always written.
    assert rules.should_write("Sound", "name", "anything")
    assert not rules.is_default("Sound", "name", "anything")


def test_is_default_compares_exactly():
    assert rules.is_default("Sound", "volume", 1.0)
    assert rules.is_default("Sound", "volume", 1)
    assert not rules.is_default("Sound", "volume", 0.5)
    assert not rules.is_default("Sound", "weight", True)
    assert not rules.is_default("Sound", "stream", 0)
    assert rules.is_default("Sound", "stream", False)


def test_rules_for_kind():
    fields = [r.field for r in rules.rules_for("Sound")]
    assert fields == [
        "volume",
        "pitch",
        "weight",
        "stream",
        "attenuation_distance",
        "preload",
        "type",
    ]
    assert rules.rules_for("Nothing") == ()


@pytest.mark.parametrize(
    "kind, obj",
    [
        ("Sound", Sound(Key("minecraft", "a"))),
        ("Element", Element((0, 0, 0), (16, 16, 16))),
        ("ElementRotation", ElementRotation((8, 8, 8), Axis.Y, 0.0)),
        ("ElementFace", ElementFace("#all")),
        ("BlockModel", BlockModel()),
        ("ItemModel", ItemModel()),
        ("BitMapFont", BitMapFont(Key("minecraft", "font/a.png"), 7, ())),
    ],
)
def test_model_defaults_match_table(kind, obj):
    assert rules.rules_for(kind)
    assert rules.all_default(kind, obj)


def test_all_default_subset():
    sound = Sound(Key("minecraft", "a"), volume=0.5)
    assert not sound.all_default()
    assert rules.all_default("Sound", sound, fields=["pitch", "weight"])
    assert not rules.all_default("Sound", sound, fields=["volume"])
