"""Encoding rule table.

Every field that encoders may elide is declared here together with its
default. A field is omitted from output only when its value equals the
declared default; fields without a rule are always written. Absence in the
output means "use the engine default", so these values must match what the
engine assumes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Tuple

from ..enums import GuiLight, SoundType

__all__ = [
    "EncodingRule",
    "RULES",
    "rule",
    "rules_for",
    "default",
    "is_default",
    "should_write",
    "all_default",
]


def exact(value: Any, default: Any) -> bool:
    """Equality that does not conflate booleans with the numbers 0 and 1."""
    if isinstance(value, bool) or isinstance(default, bool):
        return type(value) is type(default) and value == default
    return value == default


@dataclass(frozen=True, slots=True)
class EncodingRule:
    asset_kind: str
    field: str
    default: Any
    compare: Callable[[Any, Any], bool] = exact

    def matches(self, value: Any) -> bool:
        return self.compare(value, self.default)


RULES: Tuple[EncodingRule, ...] = (
    EncodingRule("Sound", "volume", 1.0),
    EncodingRule("Sound", "pitch", 1.0),
    EncodingRule("Sound", "weight", 1),
    EncodingRule("Sound", "stream", False),
    EncodingRule("Sound", "attenuation_distance", 0),
    EncodingRule("Sound", "preload", False),
    EncodingRule("Sound", "type", SoundType.SOUND),
    EncodingRule("Element", "shade", True),
    EncodingRule("ElementRotation", "rescale", False),
    EncodingRule("ElementFace", "rotation", 0),
    EncodingRule("BlockModel", "ambient_occlusion", True),
    EncodingRule("ItemModel", "gui_light", GuiLight.SIDE),
    EncodingRule("BitMapFont", "height", 8),
)

_INDEX: Dict[Tuple[str, str], EncodingRule] = {
    (r.asset_kind, r.field): r for r in RULES
}


def rule(asset_kind: str, field: str) -> EncodingRule | None:
    return _INDEX.get((asset_kind, field))


def rules_for(asset_kind: str) -> Tuple[EncodingRule, ...]:
    return tuple(r for r in RULES if r.asset_kind == asset_kind)


def default(asset_kind: str, field: str) -> Any:
    """Declared default for a field; KeyError when none is declared."""
    r = rule(asset_kind, field)
    if r is None:
        raise KeyError(f"No default declared for {asset_kind}.{field}")
    return r.default


def is_default(asset_kind: str, field: str, value: Any) -> bool:
    r = rule(asset_kind, field)
    return r is not None and r.matches(value)


def should_write(asset_kind: str, field: str, value: Any) -> bool:
    return not is_default(asset_kind, field, value)


def all_default(
    asset_kind: str, obj: Any, fields: Iterable[str] | None = None
) -> bool:
    """True when every ruled field of ``obj`` holds its default."""
    selected = rules_for(asset_kind)
    if fields is not None:
        wanted = set(fields)
        selected = tuple(r for r in selected if r.field in wanted)
    return all(r.matches(getattr(obj, r.field)) for r in selected)
