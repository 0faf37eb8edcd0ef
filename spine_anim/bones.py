"""Bones and their animation keyframes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

import numpy as np

from .colour import _Fields, _list_of, _optional, _to_bool, _to_float, _to_str


class BoneTransform(Enum):
    """How a bone inherits its parent's transform."""

    NORMAL = "Normal"
    ONLY_TRANSLATION = "OnlyTranslation"
    NO_ROTATION_OR_REFLECTION = "NoRotationOrReflection"
    NO_SCALE = "NoScale"
    NO_SCALE_OR_REFLECTION = "NoScaleOrReflection"

    @classmethod
    def parse(cls, value: Any) -> BoneTransform:
        """Return the member whose name in the data is ``value``."""
        if isinstance(value, str):
            for member in cls:
                if member.value == value:
                    return member
        expected = ", ".join(member.value for member in cls)
        raise ValueError(f"unknown bone transform {value!r}, expected one of {expected}")


@dataclass
class Bone:
    """A bone in its setup pose."""

    name: str
    parent: str | None = None
    length: float = 0.0
    transform: BoneTransform = BoneTransform.NORMAL
    skin: bool = False
    x: float = 0.0
    y: float = 0.0
    rotation: float = 0.0
    scale_x: float = 1.0
    scale_y: float = 1.0
    shear_x: float = 0.0
    shear_y: float = 0.0

    @classmethod
    def from_dict(cls, data: Any) -> Bone:
        f = _Fields(data, "Bone")
        return cls(
            name=f.get("name", _to_str),
            parent=f.get("parent", _optional(_to_str), default=None),
            length=f.get("length", _to_float, default=0.0),
            transform=f.get("transform", BoneTransform.parse, default=BoneTransform.NORMAL),
            skin=f.get("skin", _to_bool, default=False),
            x=f.get("x", _to_float, default=0.0),
            y=f.get("y", _to_float, default=0.0),
            rotation=f.get("rotation", _to_float, default=0.0),
            scale_x=f.get("scale_x", _to_float, default=1.0, aliases=("scaleX",)),
            scale_y=f.get("scale_y", _to_float, default=1.0, aliases=("scaleY",)),
            shear_x=f.get("shear_x", _to_float, default=0.0),
            shear_y=f.get("shear_y", _to_float, default=0.0),
        )


@dataclass
class BoneTranslateKeyFrame:
    """A translation offset at a point in time."""

    time: float = 0.0
    x: float = 0.0
    y: float = 0.0

    @classmethod
    def from_dict(cls, data: Any) -> BoneTranslateKeyFrame:
        f = _Fields(data, "BoneTranslateKeyFrame")
        return cls(
            time=f.get("time", _to_float, default=0.0),
            x=f.get("x", _to_float, default=0.0),
            y=f.get("y", _to_float, default=0.0),
        )

    def value(self) -> np.ndarray:
        """The offset as a three-component vector with a z of one."""
        return np.array([self.x, self.y, 1.0])


@dataclass
class BoneRotateKeyFrame:
    """A rotation offset, in degrees, at a point in time."""

    time: float = 0.0
    angle: float = 0.0

    @classmethod
    def from_dict(cls, data: Any) -> BoneRotateKeyFrame:
        f = _Fields(data, "BoneRotateKeyFrame")
        return cls(
            time=f.get("time", _to_float, default=0.0),
            angle=f.get("angle", _to_float, default=0.0, aliases=("value",)),
        )

    def value(self) -> float:
        """The angle in degrees."""
        return self.angle


@dataclass
class BoneScaleKeyFrame:
    """A scale factor at a point in time."""

    time: float = 0.0
    x: float = 1.0
    y: float = 1.0

    @classmethod
    def from_dict(cls, data: Any) -> BoneScaleKeyFrame:
        f = _Fields(data, "BoneScaleKeyFrame")
        return cls(
            time=f.get("time", _to_float, default=0.0),
            x=f.get("x", _to_float, default=1.0),
            y=f.get("y", _to_float, default=1.0),
        )

    def value(self) -> np.ndarray:
        """The scale as a two-component vector."""
        return np.array([self.x, self.y])


@dataclass
class BoneShearKeyFrame:
    """A shear at a point in time."""

    time: float = 0.0
    x: float = 0.0
    y: float = 0.0

    @classmethod
    def from_dict(cls, data: Any) -> BoneShearKeyFrame:
        f = _Fields(data, "BoneShearKeyFrame")
        return cls(
            time=f.get("time", _to_float, default=0.0),
            x=f.get("x", _to_float, default=0.0),
            y=f.get("y", _to_float, default=0.0),
        )


@dataclass
class BoneKeyFrame:
    """All timelines an animation holds for one bone."""

    rotate: list[BoneRotateKeyFrame] = field(default_factory=list)
    translate: list[BoneTranslateKeyFrame] = field(default_factory=list)
    scale: list[BoneScaleKeyFrame] = field(default_factory=list)
    shear: list[BoneShearKeyFrame] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> BoneKeyFrame:
        f = _Fields(data, "BoneKeyFrame")
        return cls(
            rotate=f.get("rotate", _list_of(BoneRotateKeyFrame.from_dict), factory=list),
            translate=f.get("translate", _list_of(BoneTranslateKeyFrame.from_dict), factory=list),
            scale=f.get("scale", _list_of(BoneScaleKeyFrame.from_dict), factory=list),
            shear=f.get("shear", _list_of(BoneShearKeyFrame.from_dict), factory=list),
        )