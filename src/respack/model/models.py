"""Item and block model types."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union

from ..encoding import rules
from ..enums import Axis, CubeFace, DisplayType, GuiLight
from .key import Key

__all__ = [
    "Vector3",
    "TextureRef",
    "ModelDisplay",
    "ElementRotation",
    "ElementFace",
    "Element",
    "ItemPredicate",
    "ItemOverride",
    "ItemTexture",
    "BlockTexture",
    "ItemModel",
    "BlockModel",
    "Model",
    "BlockState",
]

Vector3 = Tuple[float, float, float]
# Either a full texture key or a "#variable" reference.
TextureRef = Union[Key, str]


@dataclass(frozen=True, slots=True)
class ModelDisplay:
    rotation: Vector3 = (0.0, 0.0, 0.0)
    translation: Vector3 = (0.0, 0.0, 0.0)
    scale: Vector3 = (1.0, 1.0, 1.0)


@dataclass(frozen=True, slots=True)
class ElementRotation:
    origin: Vector3
    axis: Axis
    angle: float
    rescale: bool = rules.default("ElementRotation", "rescale")


@dataclass(frozen=True, slots=True)
class ElementFace:
    texture: TextureRef
    uv: Optional[Tuple[float, float, float, float]] = None
    cull_face: Optional[CubeFace] = None
    rotation: int = rules.default("ElementFace", "rotation")
    tint_index: Optional[int] = None


@dataclass(slots=True)
class Element:
    from_: Vector3
    to: Vector3
    rotation: Optional[ElementRotation] = None
    shade: bool = rules.default("Element", "shade")
    faces: Dict[CubeFace, ElementFace] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class ItemPredicate:
    name: str
    value: float


@dataclass(slots=True)
class ItemOverride:
    predicate: List[ItemPredicate]
    model: Key


@dataclass(slots=True)
class ItemTexture:
    layers: List[TextureRef] = field(default_factory=list)
    particle: Optional[TextureRef] = None
    variables: Dict[str, TextureRef] = field(default_factory=dict)


@dataclass(slots=True)
class BlockTexture:
    particle: Optional[TextureRef] = None
    variables: Dict[str, TextureRef] = field(default_factory=dict)


@dataclass(slots=True)
class ItemModel:
    parent: Optional[Key] = None
    display: Dict[DisplayType, ModelDisplay] = field(default_factory=dict)
    elements: List[Element] = field(default_factory=list)
    textures: ItemTexture = field(default_factory=ItemTexture)
    gui_light: GuiLight = rules.default("ItemModel", "gui_light")
    overrides: List[ItemOverride] = field(default_factory=list)


@dataclass(slots=True)
class BlockModel:
    parent: Optional[Key] = None
    display: Dict[DisplayType, ModelDisplay] = field(default_factory=dict)
    elements: List[Element] = field(default_factory=list)
    ambient_occlusion: bool = rules.default("BlockModel", "ambient_occlusion")
    textures: BlockTexture = field(default_factory=BlockTexture)


Model = Union[ItemModel, BlockModel]


@dataclass(slots=True)
class BlockState:
    """Block state definition (variants or multipart); not encoded yet."""

    variants: Dict[str, Any] = field(default_factory=dict)
    multipart: List[Any] = field(default_factory=list)
