"""Slots and their animation keyframes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .colour import (
    DEFAULT_COLOUR,
    _Fields,
    _list_of,
    _optional,
    _to_float,
    _to_str,
    _to_u32,
    parse_colour,
)


class SlotBlendType(Enum):
    """How a slot's attachment is blended when drawn."""

    NORMAL = "Normal"
    ADDITIVE = "Additive"
    MULTIPLY = "Multiply"
    SCREEN = "Screen"

    @classmethod
    def parse(cls, value: Any) -> SlotBlendType:
        """Return the member whose name in the data is ``value``."""
        if isinstance(value, str):
            for member in cls:
                if member.value == value:
                    return member
        expected = ", ".join(member.value for member in cls)
        raise ValueError(f"unknown blend type {value!r}, expected one of {expected}")


@dataclass
class Slot:
    """A slot attached to a bone, holding at most one visible attachment."""

    name: str
    bone: str
    color: int = DEFAULT_COLOUR
    dark: int | None = None
    attachment: str | None = None
    blend: SlotBlendType = SlotBlendType.NORMAL

    @classmethod
    def from_dict(cls, data: Any) -> Slot:
        f = _Fields(data, "Slot")
        return cls(
            name=f.get("name", _to_str),
            bone=f.get("bone", _to_str),
            color=f.get("color", parse_colour, default=DEFAULT_COLOUR),
            dark=f.get("dark", _optional(_to_u32), default=None),
            attachment=f.get("attachment", _optional(_to_str), default=None),
            blend=f.get("blend", SlotBlendType.parse, default=SlotBlendType.NORMAL),
        )


@dataclass
class SlotAttachmentKeyFrame:
    """A change of a slot's attachment at a point in time."""

    time: float = 0.0
    attachment_name: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> SlotAttachmentKeyFrame:
        f = _Fields(data, "SlotAttachmentKeyFrame")
        return cls(
            time=f.get("time", _to_float, default=0.0),
            attachment_name=f.get(
                "attachment_name", _optional(_to_str), default=None, aliases=("name",)
            ),
        )


@dataclass
class SlotColourKeyFrame:
    """A colour change of a slot at a point in time."""

    time: float = 0.0
    c2: float = 0.0
    c3: float = 1.0
    c4: float = 1.0

    @classmethod
    def from_dict(cls, data: Any) -> SlotColourKeyFrame:
        f = _Fields(data, "SlotColourKeyFrame")
        return cls(
            time=f.get("time", _to_float, default=0.0),
            c2=f.get("c2", _to_float, default=0.0),
            c3=f.get("c3", _to_float, default=1.0),
            c4=f.get("c4", _to_float, default=1.0),
        )


@dataclass
class SlotKeyFrame:
    """All timelines an animation holds for one slot."""

    attachment: list[SlotAttachmentKeyFrame] = field(default_factory=list)
    colour: list[SlotColourKeyFrame] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> SlotKeyFrame:
        f = _Fields(data, "SlotKeyFrame")
        return cls(
            attachment=f.get(
                "attachment", _list_of(SlotAttachmentKeyFrame.from_dict), factory=list
            ),
            colour=f.get("colour", _list_of(SlotColourKeyFrame.from_dict), factory=list),
        )