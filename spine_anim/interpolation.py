"""Linear interpolation between keyframes."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol


class Interpolatable(Protocol):
    """A keyframe with a time and a value that can be weighted and summed."""

    time: float

    def value(self) -> Any: ...


def interpolate(time: float, keyframes: Sequence[Interpolatable]) -> Any:
    """The value of a timeline at ``time``.

    Before the first keyframe the first value is held. Between keyframes the
    two neighbours are blended linearly; past the last keyframe the last two
    are extrapolated along the same line.
    """
    if not keyframes:
        raise ValueError("cannot interpolate an empty timeline")

    far_index = sum(1 for frame in keyframes if frame.time <= time)
    if far_index == len(keyframes):
        far_index -= 1
    near_index = max(far_index - 1, 0)

    near, far = keyframes[near_index], keyframes[far_index]
    if near_index == far_index:
        return near.value()

    interval = far.time - near.time
    if interval == 0:
        return far.value()
    far_weight = (time - near.time) / interval
    near_weight = 1.0 - far_weight
    return near.value() * near_weight + far.value() * far_weight