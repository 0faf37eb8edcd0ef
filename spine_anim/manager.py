"""Turning an animated skeleton into textured quads ready for drawing."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field
from itertools import chain

import numpy as np

from .animator import SpineAnimationHelper
from .attachments import AttachmentType, RegionAttachment
from .model import Animation, SpineModel
from .transform import region_attachment_transform

INDICES = (0, 1, 4, 1, 3, 4)

Position = tuple[float, float, float]
UV = tuple[float, float]


@dataclass
class BoundingBox:
    """A named polygon."""

    name: str
    vertices: list[tuple[float, float]] = field(default_factory=list)


@dataclass
class SpineVertex:
    """A vertex of an image quad: a position and a texture coordinate."""

    position: Position
    uv: UV


@dataclass
class ModelImage:
    """One textured quad of a posed model.

    ``transform`` is stored column by column, the layout a GPU expects.
    """

    transform: tuple[tuple[float, float, float, float], ...]
    dimensions: tuple[float, float]
    texture_name: str
    vertices: list[SpineVertex]
    indices: list[int]


def dimensions_as_vertices(
    dimensions: Sequence[float], padding: Sequence[float]
) -> list[tuple[Position, UV]]:
    """Two triangles covering a centred rectangle, shrunk by ``padding``.

    ``padding`` is given as left, top, right, bottom.
    """
    width, height = dimensions
    half_width, half_height = width / 2.0, height / 2.0
    left_padding, top_padding, right_padding, bottom_padding = padding

    left, right = -half_width + left_padding, half_width - right_padding
    top, bottom = half_height - top_padding, -half_height + bottom_padding

    u_left, u_right, v_top, v_bottom = 0.0, 1.0, 0.0, 1.0
    return [
        ((left, top, 0.0), (u_left, v_top)),
        ((left, bottom, 0.0), (u_left, v_bottom)),
        ((right, bottom, 0.0), (u_right, v_bottom)),
        ((right, bottom, 0.0), (u_right, v_bottom)),
        ((right, top, 0.0), (u_right, v_top)),
        ((left, top, 0.0), (u_left, v_top)),
    ]


def dimensions_as_vertices_bottom_left_aligned(
    dimensions: Sequence[float], padding: Sequence[float]
) -> list[Position]:
    """The corners of a rectangle centred horizontally and standing on y = 0.

    ``padding`` is accepted for symmetry with :func:`dimensions_as_vertices`
    and is not applied.
    """
    width, height = dimensions
    half_width = width / 2.0
    left, right = -half_width, half_width
    top, bottom = float(height), 0.0
    return [
        (left, top, 1.0),
        (right, top, 1.0),
        (right, bottom, 1.0),
        (left, bottom, 1.0),
    ]


class SpineManager(ABC):
    """Produces the drawable images of a model at a point in an animation."""

    @abstractmethod
    def get_attachments_at(
        self, time: float, model: SpineModel, animation_name: str, skin_name: str
    ) -> list[ModelImage]:
        """Images of ``model`` in the named animation at ``time``."""

    @abstractmethod
    def get_animation_id_attachments_at(
        self, time: float, model: SpineModel, animation_id: int, skin_name: str
    ) -> list[ModelImage]:
        """Images of ``model`` in its ``animation_id``-th animation at ``time``."""

    @abstractmethod
    def mix_animations(self, animations: Sequence[Animation]) -> Animation:
        """Combine animations into one."""

    @abstractmethod
    def get_attachments_for_animation(
        self, time: float, model: SpineModel, animation: Animation, skin_name: str
    ) -> list[ModelImage]:
        """Images of ``model`` in ``animation`` at ``time``."""


def _column_major(matrix: np.ndarray) -> tuple[tuple[float, float, float, float], ...]:
    return tuple(tuple(float(v) for v in column) for column in matrix.T)


class ConcreteSpineManager(SpineManager):
    """Poses bones with an animation helper and emits region attachments as quads.

    ``time`` is a fraction of the animation: bone timelines are evaluated at
    ``time`` times the time of the animation's last bone keyframe, while slot
    timelines see ``time`` unchanged.
    """

    def __init__(self, animator: SpineAnimationHelper) -> None:
        self.animator = animator

    def _bone_transforms(
        self, time: float, model: SpineModel, animation: Animation
    ) -> dict[str, np.ndarray]:
        length = max(
            (
                frame.time
                for timelines in animation.bones.values()
                for frame in chain(
                    timelines.rotate, timelines.translate, timelines.scale, timelines.shear
                )
            ),
            default=0.0,
        )
        scaled_time = time * length

        transforms: dict[str, np.ndarray] = {}
        for bone in model.bones:
            local = self.animator.get_bone_transform(bone, animation, scaled_time)
            if bone.parent is None:
                transforms[bone.name] = local
                continue
            try:
                parent = transforms[bone.parent]
            except KeyError:
                raise KeyError(
                    f"bone {bone.name!r} has parent {bone.parent!r}, "
                    "which is not defined before it"
                ) from None
            transforms[bone.name] = parent @ local
        return transforms

    def _active_attachments(
        self, time: float, model: SpineModel, animation: Animation, skin_name: str
    ) -> list[tuple[str, str, AttachmentType]]:
        skin = next((s for s in model.skins if s.name == skin_name), None)
        if skin is None:
            raise ValueError(f"model has no skin named {skin_name!r}")

        active = []
        for slot in model.slots:
            name = self.animator.get_slot_attachment(slot, animation, time)
            if name is None:
                continue
            try:
                attachment = skin.attachments[slot.name][name]
            except KeyError:
                raise KeyError(
                    f"skin {skin_name!r} has no attachment {name!r} in slot {slot.name!r}"
                ) from None
            active.append((slot.bone, name, attachment))
        return active

    def get_attachments_at(
        self, time: float, model: SpineModel, animation_name: str, skin_name: str
    ) -> list[ModelImage]:
        try:
            animation = model.animations[animation_name]
        except KeyError:
            raise KeyError(f"model has no animation named {animation_name!r}") from None
        return self.get_attachments_for_animation(time, model, animation, skin_name)

    def get_animation_id_attachments_at(
        self, time: float, model: SpineModel, animation_id: int, skin_name: str
    ) -> list[ModelImage]:
        names = list(model.animations)
        if not 0 <= animation_id < len(names):
            raise IndexError(
                f"animation index {animation_id} out of range for {len(names)} animations"
            )
        return self.get_attachments_at(time, model, names[animation_id], skin_name)

    def mix_animations(self, animations: Sequence[Animation]) -> Animation:
        """Merge timelines; the first animation holding a bone or slot wins."""
        mixed = Animation()
        for animation in animations:
            for name, timelines in animation.bones.items():
                mixed.bones.setdefault(name, copy.deepcopy(timelines))
            for name, timelines in animation.slots.items():
                mixed.slots.setdefault(name, copy.deepcopy(timelines))
        return mixed

    def get_attachments_for_animation(
        self, time: float, model: SpineModel, animation: Animation, skin_name: str
    ) -> list[ModelImage]:
        bone_transforms = self._bone_transforms(time, model, animation)
        images = []
        for bone_name, attachment_name, attachment in self._active_attachments(
            time, model, animation, skin_name
        ):
            if not isinstance(attachment, RegionAttachment):
                continue
            matrix = region_attachment_transform(attachment, bone_transforms[bone_name])
            dimensions = (attachment.width, attachment.height)
            images.append(
                ModelImage(
                    transform=_column_major(matrix),
                    dimensions=dimensions,
                    texture_name=attachment.path or attachment_name,
                    vertices=[
                        SpineVertex(position=position, uv=uv)
                        for position, uv in dimensions_as_vertices(
                            dimensions, (0.0, 0.0, 0.0, 0.0)
                        )
                    ],
                    indices=list(INDICES),
                )
            )
        return images