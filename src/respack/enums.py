"""Enumerated tags shared by the domain types.

Values are the lowercase names the engine expects in JSON.
"""

from __future__ import annotations

from enum import Enum

__all__ = ["Axis", "CubeFace", "DisplayType", "GuiLight", "SoundType"]


class Axis(Enum):
    X = "x"
    Y = "y"
    Z = "z"


class CubeFace(Enum):
    DOWN = "down"
    UP = "up"
    NORTH = "north"
    SOUTH = "south"
    WEST = "west"
    EAST = "east"


class DisplayType(Enum):
    THIRDPERSON_RIGHTHAND = "thirdperson_righthand"
    THIRDPERSON_LEFTHAND = "thirdperson_lefthand"
    FIRSTPERSON_RIGHTHAND = "firstperson_righthand"
    FIRSTPERSON_LEFTHAND = "firstperson_lefthand"
    GUI = "gui"
    HEAD = "head"
    GROUND = "ground"
    FIXED = "fixed"


class GuiLight(Enum):
    FRONT = "front"
    SIDE = "side"


class SoundType(Enum):
    SOUND = "sound"
    EVENT = "event"
