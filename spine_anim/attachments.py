"""The kinds of attachment a skin can place in a slot."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from .colour import (
    DEFAULT_COLOUR,
    _Fields,
    _list_of,
    _optional,
    _to_bool,
    _to_float,
    _to_int,
    _to_str,
    parse_colour,
)


@dataclass
class RegionAttachment:
    """A textured rectangle placed relative to its bone."""

    width: float
    height: float
    path: str | None = None
    x: float = 0.0
    y: float = 0.0
    scale_x: float = 1.0
    scale_y: float = 1.0
    rotation: float = 0.0
    color: int = DEFAULT_COLOUR

    @classmethod
    def from_dict(cls, data: Any) -> RegionAttachment:
        f = _Fields(data, "RegionAttachment")
        return cls(
            path=f.get("path", _optional(_to_str), default=None),
            x=f.get("x", _to_float, default=0.0),
            y=f.get("y", _to_float, default=0.0),
            scale_x=f.get("scale_x", _to_float, default=1.0, aliases=("scaleX",)),
            scale_y=f.get("scale_y", _to_float, default=1.0, aliases=("scaleY",)),
            rotation=f.get("rotation", _to_float, default=0.0),
            width=f.get("width", _to_float),
            height=f.get("height", _to_float),
            color=f.get("color", parse_colour, default=DEFAULT_COLOUR),
        )


@dataclass
class MeshAttachment:
    """A deformable textured mesh."""

    path: str
    uvs: str
    triangles: str
    vertices: str
    hull: str
    edges: str
    color: int = DEFAULT_COLOUR

    @classmethod
    def from_dict(cls, data: Any) -> MeshAttachment:
        f = _Fields(data, "MeshAttachment")
        return cls(
            path=f.get("path", _to_str),
            uvs=f.get("uvs", _to_str),
            triangles=f.get("triangles", _to_str),
            vertices=f.get("vertices", _to_str),
            hull=f.get("hull", _to_str),
            edges=f.get("edges", _to_str),
            color=f.get("color", parse_colour, default=DEFAULT_COLOUR),
        )


@dataclass
class LinkedMeshAttachment:
    """A mesh that shares its geometry with another mesh."""

    path: str
    skin: str
    parent: str
    deform: str
    color: int = DEFAULT_COLOUR

    @classmethod
    def from_dict(cls, data: Any) -> LinkedMeshAttachment:
        f = _Fields(data, "LinkedMeshAttachment")
        return cls(
            path=f.get("path", _to_str),
            skin=f.get("skin", _to_str),
            parent=f.get("parent", _to_str),
            deform=f.get("deform", _to_str),
            color=f.get("color", parse_colour, default=DEFAULT_COLOUR),
        )


@dataclass
class BoundingBoxAttachment:
    """A polygon used for hit detection."""

    vertex_count: int
    vertices: list[float]
    color: int = DEFAULT_COLOUR

    @classmethod
    def from_dict(cls, data: Any) -> BoundingBoxAttachment:
        f = _Fields(data, "BoundingBoxAttachment")
        return cls(
            vertex_count=f.get("vertex_count", _to_int, aliases=("vertexCount",)),
            vertices=f.get("vertices", _list_of(_to_float)),
            color=f.get("color", parse_colour, default=DEFAULT_COLOUR),
        )


@dataclass
class PathAttachment:
    """A curve that path constraints follow."""

    lengths: bool
    vertex_count: bool
    vertices: bool
    closed: bool = False
    constant_speed: bool = True

    @classmethod
    def from_dict(cls, data: Any) -> PathAttachment:
        f = _Fields(data, "PathAttachment")
        return cls(
            closed=f.get("closed", _to_bool, default=False),
            constant_speed=f.get("constant_speed", _to_bool, default=True),
            lengths=f.get("lengths", _to_bool),
            vertex_count=f.get("vertex_count", _to_bool),
            vertices=f.get("vertices", _to_bool),
        )


@dataclass
class PointAttachment:
    """A single point with a rotation."""

    x: float
    y: float
    rotation: float

    @classmethod
    def from_dict(cls, data: Any) -> PointAttachment:
        f = _Fields(data, "PointAttachment")
        return cls(
            x=f.get("x", _to_float),
            y=f.get("y", _to_float),
            rotation=f.get("rotation", _to_float),
        )


@dataclass
class ClippingAttachment:
    """A polygon that clips drawing up to a given slot."""

    end: str
    vertex_count: int
    vertices: list[float]

    @classmethod
    def from_dict(cls, data: Any) -> ClippingAttachment:
        f = _Fields(data, "ClippingAttachment")
        return cls(
            end=f.get("end", _to_str),
            vertex_count=f.get("vertex_count", _to_int),
            vertices=f.get("vertices", _list_of(_to_float)),
        )


AttachmentType = Union[
    RegionAttachment,
    MeshAttachment,
    LinkedMeshAttachment,
    BoundingBoxAttachment,
    PathAttachment,
    PointAttachment,
    ClippingAttachment,
]

_VARIANTS = (
    RegionAttachment,
    MeshAttachment,
    LinkedMeshAttachment,
    BoundingBoxAttachment,
    PathAttachment,
    PointAttachment,
    ClippingAttachment,
)


def parse_attachment(data: Any) -> AttachmentType:
    """Read an attachment as the first kind whose fields the data satisfies."""
    for variant in _VARIANTS:
        try:
            return variant.from_dict(data)
        except ValueError:
            continue
    raise ValueError("data did not match any attachment type")


@dataclass
class Attachment:
    """A named attachment."""

    name: str
    attachment_type: AttachmentType

    @classmethod
    def from_dict(cls, data: Any) -> Attachment:
        f = _Fields(data, "Attachment")
        return cls(
            name=f.get("name", _to_str),
            attachment_type=f.get("attachment_type", parse_attachment, aliases=("type",)),
        )