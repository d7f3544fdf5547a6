"""Wrap-around animation state of a single curve parameter."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


def wrap(value: float, maximum: float) -> float:
    """
    Floored modulo of ``value`` into ``[0, maximum)``.

    Python's ``%`` already takes the sign of the divisor, so negative values
    wrap from the top. A tiny negative value can round up to exactly
    ``maximum``; that case is folded back to 0.
    """
    wrapped = value % maximum
    if wrapped >= maximum:
        return 0.0
    return wrapped


@dataclass
class AnimationState:
    """Current value, rate per unit of animation time and wrap bound of an animated parameter."""
    value: float = 0.0
    increment: float = 0.0
    maximum: float = 1.0

    def advance(self, delta_seconds: float) -> float:
        self.value = wrap(self.value + self.increment * delta_seconds, self.maximum)
        return self.value


def frame_delta(elapsed_ms: float, seconds_per_frame: Optional[float]) -> float:
    """
    Animation time step for one frame.

    With a fixed ``seconds_per_frame`` every frame advances by that amount
    regardless of how long it took. ``None`` uses the real elapsed time.
    """
    if seconds_per_frame is None:
        return elapsed_ms / 1000.0
    return seconds_per_frame
