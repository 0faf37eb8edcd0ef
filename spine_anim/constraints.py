"""IK, transform and path constraints."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .colour import _Fields, _list_of, _to_bool, _to_float, _to_int, _to_str


@dataclass
class IKConstraint:
    """An inverse-kinematics constraint."""

    name: str
    order: int
    skin: bool
    bones: list[str]
    target: str
    mix: float
    softness: float
    bend_positive: bool
    compress: bool
    stretch: bool
    uniform: bool

    @classmethod
    def from_dict(cls, data: Any) -> IKConstraint:
        f = _Fields(data, "IKConstraint")
        return cls(
            name=f.get("name", _to_str),
            order=f.get("order", _to_int),
            skin=f.get("skin", _to_bool),
            bones=f.get("bones", _list_of(_to_str)),
            target=f.get("target", _to_str),
            mix=f.get("mix", _to_float),
            softness=f.get("softness", _to_float),
            bend_positive=f.get("bend_positive", _to_bool),
            compress=f.get("compress", _to_bool),
            stretch=f.get("stretch", _to_bool),
            uniform=f.get("uniform", _to_bool),
        )


@dataclass
class TransformConstraint:
    """A constraint copying a target bone's transform onto other bones."""

    name: str
    order: int
    skin: bool
    bones: list[str]
    target: str
    rotation: float
    x: float
    y: float
    scale_x: float
    scale_y: float
    shear_y: float
    rotate_mix: float
    translate_mix: float
    scale_mix: float
    shear_mix: float
    local: bool
    relative: bool

    @classmethod
    def from_dict(cls, data: Any) -> TransformConstraint:
        f = _Fields(data, "TransformConstraint")
        numbers = (
            "rotation",
            "x",
            "y",
            "scale_x",
            "scale_y",
            "shear_y",
            "rotate_mix",
            "translate_mix",
            "scale_mix",
            "shear_mix",
        )
        return cls(
            name=f.get("name", _to_str),
            order=f.get("order", _to_int),
            skin=f.get("skin", _to_bool),
            bones=f.get("bones", _list_of(_to_str)),
            target=f.get("target", _to_str),
            local=f.get("local", _to_bool),
            relative=f.get("relative", _to_bool),
            **{name: f.get(name, _to_float) for name in numbers},
        )


class PathConstraintPositionMode(Enum):
    """How a path position is measured. Percent is the usual choice."""

    FIXED = "Fixed"
    PERCENT = "Percent"


class PathConstraintRotateMode(Enum):
    """How bones on a path are rotated. Tangent is the usual choice."""

    TANGENT = "Tangent"
    CHAIN = "Chain"
    CHAIN_SCALE = "ChainScale"


class PathConstraintSpacingMode(Enum):
    """How bones on a path are spaced. Length is the usual choice."""

    LENGTH = "Length"
    FIXED = "Fixed"
    PERCENT = "Percent"


@dataclass
class PathConstraint:
    """A constraint placing bones along a path attachment."""

    name: str
    order: int
    bones: list[str]
    target: str
    position_mode: PathConstraintPositionMode
    spacing_mode: PathConstraintSpacingMode
    rotate_mode: PathConstraintRotateMode
    skin: bool = False
    rotation: float = 0.0
    position: float = 0.0
    spacing: float = 0.0
    rotate_mix: float = 0.0
    translate_mix: float = 0.0

    @classmethod
    def from_dict(cls, data: Any) -> PathConstraint:
        f = _Fields(data, "PathConstraint")
        return cls(
            name=f.get("name", _to_str),
            order=f.get("order", _to_int),
            skin=f.get("skin", _to_bool, default=False),
            bones=f.get("bones", _list_of(_to_str)),
            target=f.get("target", _to_str),
            position_mode=f.get("position_mode", PathConstraintPositionMode),
            spacing_mode=f.get("spacing_mode", PathConstraintSpacingMode),
            rotate_mode=f.get("rotate_mode", PathConstraintRotateMode),
            rotation=f.get("rotation", _to_float, default=0.0),
            position=f.get("position", _to_float, default=0.0),
            spacing=f.get("spacing", _to_float, default=0.0),
            rotate_mix=f.get("rotate_mix", _to_float, default=0.0),
            translate_mix=f.get("translate_mix", _to_float, default=0.0),
        )