"""The skeleton model as a whole and the parser that loads it from JSON."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from .attachments import AttachmentType, parse_attachment
from .bones import Bone, BoneKeyFrame
from .colour import _Fields, _list_of, _map_of, _optional, _to_float, _to_str
from .slots import Slot, SlotKeyFrame


class SpineParseError(ValueError):
    """Raised when skeleton data cannot be read."""


@dataclass(frozen=True)
class AnimationInterpolation:
    """A keyframe curve: "linear", "stepped" or "control_points"."""

    kind: str = "linear"
    control_points: tuple[float, ...] = ()


def parse_animation_interpolation(value: Any) -> AnimationInterpolation:
    """Read a curve name; every curve is currently treated as linear."""
    if not isinstance(value, str):
        raise SpineParseError(f"curve must be a string, got {value!r}")
    return AnimationInterpolation()


@dataclass
class Skeleton:
    """Skeleton metadata."""

    hash: str
    version: str | None = None
    x: float = 0.0
    y: float = 0.0
    width: float | None = None
    height: float | None = None

    @classmethod
    def from_dict(cls, data: Any) -> Skeleton:
        f = _Fields(data, "Skeleton")
        return cls(
            hash=f.get("hash", _to_str),
            version=f.get("version", _optional(_to_str), default=None),
            x=f.get("x", _to_float, default=0.0),
            y=f.get("y", _to_float, default=0.0),
            width=f.get("width", _optional(_to_float), default=None),
            height=f.get("height", _optional(_to_float), default=None),
        )


@dataclass
class Skin:
    """Attachments by slot name, then by attachment name."""

    name: str = "default"
    attachments: dict[str, dict[str, AttachmentType]] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> Skin:
        f = _Fields(data, "Skin")
        return cls(
            name=f.get("name", _to_str, default="default"),
            attachments=f.get(
                "attachments", _map_of(_map_of(parse_attachment)), factory=dict
            ),
        )


@dataclass
class Animation:
    """Bone and slot timelines by name."""

    bones: dict[str, BoneKeyFrame] = field(default_factory=dict)
    slots: dict[str, SlotKeyFrame] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> Animation:
        f = _Fields(data, "Animation")
        return cls(
            bones=f.get("bones", _map_of(BoneKeyFrame.from_dict), factory=dict),
            slots=f.get("slots", _map_of(SlotKeyFrame.from_dict), factory=dict),
        )


@dataclass
class SpineModel:
    """A complete skeleton with its slots, skins and animations."""

    skeleton: Skeleton
    bones: list[Bone]
    slots: list[Slot] = field(default_factory=list)
    skins: list[Skin] = field(default_factory=list)
    animations: dict[str, Animation] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> SpineModel:
        f = _Fields(data, "SpineModel")
        return cls(
            skeleton=f.get("skeleton", Skeleton.from_dict),
            bones=f.get("bones", _list_of(Bone.from_dict)),
            slots=f.get("slots", _list_of(Slot.from_dict), factory=list),
            skins=f.get("skins", _list_of(Skin.from_dict), factory=list),
            animations=f.get("animations", _map_of(Animation.from_dict), factory=dict),
        )


class SpineParser(ABC):
    """Turns serialised skeleton data into a model."""

    @abstractmethod
    def parse(self, data: str) -> SpineModel:
        """Parse ``data`` into a model, raising SpineParseError on failure."""


class ConcreteSpineParser(SpineParser):
    """Reads skeleton data in JSON form."""

    def parse(self, data: str) -> SpineModel:
        try:
            return SpineModel.from_dict(json.loads(data))
        except ValueError as exc:
            raise SpineParseError(str(exc)) from exc