"""
Configuration & Parameter Ranges
================================
This module serves as the central registry for parameter ranges and global
view constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents slider limits and camera constants from being
   scattered throughout the panel and viewport code.
2. Animation: The maximum of each range is also the wrap bound of the
   animated parameters, and presets are expressed as fractions of these
   ranges.

Exports:
    SHAPE_LIMITS (ShapeLimits): Ranges of the curve parameters.
    MATERIAL_LIMITS (MaterialLimits): Range of the line opacity.
    ANIMATION_LIMITS (AnimationLimits): Ranges of the animation increments.
    VIEW_SETTINGS (ViewSettings): Camera, colors and frame timing.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional


def decimals_for_step(step: float) -> int:
    """Number of decimals needed to display multiples of ``step``."""
    if step >= 1.0:
        return 0
    return int(math.ceil(-math.log10(step) - 1e-9))


@dataclass(frozen=True)
class ParameterRange:
    """
    Slider range of a single parameter.

    ``decimals`` overrides the displayed precision when values finer than
    ``step`` can be set programmatically (e.g. by presets).
    """
    minimum: float
    maximum: float
    step: float
    decimals: Optional[int] = None

    def __post_init__(self) -> None:
        if self.maximum <= self.minimum:
            raise ValueError(
                f"Range maximum ({self.maximum}) must be greater than minimum ({self.minimum})."
            )
        if self.step <= 0.0:
            raise ValueError(f"Range step must be positive, got {self.step}.")

    @property
    def display_decimals(self) -> int:
        if self.decimals is not None:
            return self.decimals
        return decimals_for_step(self.step)


@dataclass(frozen=True)
class ShapeLimits:
    radius_one: ParameterRange = field(default_factory=lambda: ParameterRange(0.10, 10.00, 0.01))
    radius_two: ParameterRange = field(default_factory=lambda: ParameterRange(0.10, 10.00, 0.01))
    distance: ParameterRange = field(default_factory=lambda: ParameterRange(0.10, 10.00, 0.01))
    segments: ParameterRange = field(default_factory=lambda: ParameterRange(100, 10000, 10))
    segment_multiplier: ParameterRange = field(default_factory=lambda: ParameterRange(1.00, 10.00, 1.00, decimals=1))
    stretch: ParameterRange = field(default_factory=lambda: ParameterRange(0.00, 10.00, 0.01))
    scale: ParameterRange = field(default_factory=lambda: ParameterRange(0.01, 0.50, 0.01))


@dataclass(frozen=True)
class MaterialLimits:
    opacity: ParameterRange = field(default_factory=lambda: ParameterRange(0.00, 1.00, 0.01))


@dataclass(frozen=True)
class AnimationLimits:
    radius_one_increment: ParameterRange = field(default_factory=lambda: ParameterRange(0.00, 1.00, 0.01))
    radius_two_increment: ParameterRange = field(default_factory=lambda: ParameterRange(0.00, 1.00, 0.01))
    distance_increment: ParameterRange = field(default_factory=lambda: ParameterRange(0.00, 1.00, 0.01))
    stretch_increment: ParameterRange = field(default_factory=lambda: ParameterRange(0.00, 1.00, 0.01))


@dataclass(frozen=True)
class ViewSettings:
    """Camera and rendering constants of the 3D viewport."""
    view_angle: float = 45.0
    near: float = 0.1
    far: float = 500.0
    camera_distance: float = 2.0
    background_color: str = "#101018"
    line_color: str = "white"
    line_width: float = 1.0
    frame_interval_ms: int = 16
    # Animation time step per frame; None advances by the real elapsed time
    seconds_per_frame: Optional[float] = 0.0001


# Global Constants
SHAPE_LIMITS: ShapeLimits = ShapeLimits()
MATERIAL_LIMITS: MaterialLimits = MaterialLimits()
ANIMATION_LIMITS: AnimationLimits = AnimationLimits()
VIEW_SETTINGS: ViewSettings = ViewSettings()
