"""Homogeneous 4x4 transforms for bones and region attachments."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from .attachments import RegionAttachment


def rotation_z(degrees: float) -> np.ndarray:
    """A rotation about the z axis by ``degrees``, counter-clockwise."""
    radians = math.radians(degrees)
    c, s = math.cos(radians), math.sin(radians)
    return np.array(
        [
            [c, -s, 0.0, 0.0],
            [s, c, 0.0, 0.0],
            [0.0, 0.0, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def nonuniform_scale(x: float, y: float, z: float) -> np.ndarray:
    """A scale by a separate factor along each axis."""
    return np.diag([float(x), float(y), float(z), 1.0])


def translation(x: float, y: float, z: float) -> np.ndarray:
    """A translation by the given offset."""
    matrix = np.identity(4)
    matrix[:3, 3] = (x, y, z)
    return matrix


def create_transform(
    rotation: float, translation_vector: Sequence[float], scale: Sequence[float]
) -> np.ndarray:
    """Rotate, then scale, then translate: the local transform of a bone.

    The matrices are composed as rotation * scale * translation, so the
    translation is applied to a point first.
    """
    tx, ty, tz = (float(v) for v in translation_vector)
    return (
        rotation_z(rotation)
        @ nonuniform_scale(scale[0], scale[1], 1.0)
        @ translation(tx, ty, tz)
    )


def region_attachment_transform(
    attachment: RegionAttachment, base_transform: np.ndarray
) -> np.ndarray:
    """The transform of a region attachment placed under ``base_transform``."""
    return (
        np.asarray(base_transform, dtype=float)
        @ rotation_z(attachment.rotation)
        @ nonuniform_scale(attachment.scale_x, attachment.scale_y, 1.0)
        @ translation(attachment.x, attachment.y, 0.0)
    )