"""Posing bones and choosing slot attachments at a point in an animation."""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

from .bones import Bone
from .interpolation import interpolate
from .model import Animation
from .slots import Slot
from .transform import create_transform


class SpineAnimationHelper(ABC):
    """Evaluates an animation for single bones and slots."""

    @abstractmethod
    def get_bone_transform(self, bone: Bone, animation: Animation, time: float) -> np.ndarray:
        """The local transform of ``bone`` at ``time``."""

    @abstractmethod
    def get_slot_attachment(self, slot: Slot, animation: Animation, time: float) -> str | None:
        """The name of the attachment shown in ``slot`` at ``time``, if any."""


class ConcreteSpineAnimationHelper(SpineAnimationHelper):
    """Applies keyframe offsets on top of the setup pose."""

    def get_bone_transform(self, bone: Bone, animation: Animation, time: float) -> np.ndarray:
        rotation = bone.rotation
        position = np.array([bone.x, bone.y, 0.0])
        scale = np.array([bone.scale_x, bone.scale_y])

        timelines = animation.bones.get(bone.name)
        if timelines is not None:
            if timelines.rotate:
                rotation = interpolate(time, timelines.rotate) + bone.rotation
            if timelines.translate:
                position = interpolate(time, timelines.translate) + position
            if timelines.scale:
                scale = interpolate(time, timelines.scale) * scale

        return create_transform(rotation, position, scale)

    def get_slot_attachment(self, slot: Slot, animation: Animation, time: float) -> str | None:
        timeline = animation.slots.get(slot.name)
        if timeline is None:
            return slot.attachment
        reached = [frame for frame in timeline.attachment if frame.time <= time]
        if not reached:
            return slot.attachment
        return reached[-1].attachment_name