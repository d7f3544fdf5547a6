"""
Predefined Shapes (Presets)
===========================
Named parameter bundles that reset the displayed shape and its animation.

Values are stored as fractions of the configured parameter ranges rather than
as absolute numbers, so a preset stays meaningful when the ranges in
``roulettecurves.config`` change.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Dict, List, Optional

from roulettecurves.config import (
    ANIMATION_LIMITS, MATERIAL_LIMITS, SHAPE_LIMITS,
    AnimationLimits, MaterialLimits, ParameterRange, ShapeLimits,
)
from roulettecurves.model.curves import CurveFamily


class Bound(StrEnum):
    """Which end of a range a fraction refers to."""
    MINIMUM = "minimum"
    MAXIMUM = "maximum"


@dataclass(frozen=True)
class RangeFraction:
    fraction: float
    bound: Bound = Bound.MAXIMUM

    def resolve(self, parameter_range: ParameterRange) -> float:
        if self.bound == Bound.MINIMUM:
            return parameter_range.minimum * self.fraction
        return parameter_range.maximum * self.fraction


def of_max(fraction: float) -> RangeFraction:
    return RangeFraction(fraction, Bound.MAXIMUM)


def of_min(fraction: float) -> RangeFraction:
    return RangeFraction(fraction, Bound.MINIMUM)


@dataclass(frozen=True)
class Preset:
    """
    A preset as fractions of the configured ranges.

    ``stretch_increment`` is None when the preset leaves the current stretch
    increment untouched.
    """
    key: str
    label: str
    family: CurveFamily
    radius_one: RangeFraction
    radius_two: RangeFraction
    distance: RangeFraction
    segments: RangeFraction
    segment_multiplier: RangeFraction
    stretch: RangeFraction
    scale: RangeFraction
    opacity: RangeFraction
    radius_one_increment: RangeFraction
    radius_two_increment: RangeFraction
    distance_increment: RangeFraction
    stretch_increment: Optional[RangeFraction] = None

    def resolve(
        self,
        shape_limits: ShapeLimits = SHAPE_LIMITS,
        material_limits: MaterialLimits = MATERIAL_LIMITS,
        animation_limits: AnimationLimits = ANIMATION_LIMITS,
    ) -> ResolvedPreset:
        """Turn the fractions into absolute values for the given ranges."""
        stretch_increment = None
        if self.stretch_increment is not None:
            stretch_increment = self.stretch_increment.resolve(animation_limits.stretch_increment)

        return ResolvedPreset(
            key=self.key,
            family=self.family,
            radius_one=self.radius_one.resolve(shape_limits.radius_one),
            radius_two=self.radius_two.resolve(shape_limits.radius_two),
            distance=self.distance.resolve(shape_limits.distance),
            segments=self.segments.resolve(shape_limits.segments),
            segment_multiplier=self.segment_multiplier.resolve(shape_limits.segment_multiplier),
            stretch=self.stretch.resolve(shape_limits.stretch),
            scale=self.scale.resolve(shape_limits.scale),
            opacity=self.opacity.resolve(material_limits.opacity),
            radius_one_increment=self.radius_one_increment.resolve(animation_limits.radius_one_increment),
            radius_two_increment=self.radius_two_increment.resolve(animation_limits.radius_two_increment),
            distance_increment=self.distance_increment.resolve(animation_limits.distance_increment),
            stretch_increment=stretch_increment,
        )


@dataclass(frozen=True)
class ResolvedPreset:
    """Absolute values of a preset, ready to be fed to the Shape Controller."""
    key: str
    family: CurveFamily
    radius_one: float
    radius_two: float
    distance: float
    segments: float
    segment_multiplier: float
    stretch: float
    scale: float
    opacity: float
    radius_one_increment: float
    radius_two_increment: float
    distance_increment: float
    stretch_increment: Optional[float] = None


# ------------------------------------------------------------------------------
# Catalog
# ------------------------------------------------------------------------------

PRESETS: Dict[str, Preset] = {
    "preset01": Preset(
        key="preset01",
        label="Preset 01",
        family=CurveFamily.HYPOTROCHOID,
        radius_one=of_max(0.3305),
        radius_two=of_max(0.66),
        distance=of_max(0.75),
        segments=of_min(1.00),
        segment_multiplier=of_max(0.75),
        stretch=of_max(0.20),
        scale=of_max(0.20),
        opacity=of_max(0.25),
        radius_one_increment=of_max(0.05),
        radius_two_increment=of_max(0.0),
        distance_increment=of_max(0.05),
    ),
    "preset02": Preset(
        key="preset02",
        label="Preset 02",
        family=CurveFamily.EPITROCHOID,
        radius_one=of_max(0.166),
        radius_two=of_max(0.133),
        distance=of_max(0.50),
        segments=of_max(0.20),
        segment_multiplier=of_max(0.75),
        stretch=of_max(0.25),
        scale=of_max(0.20),
        opacity=of_max(0.25),
        radius_one_increment=of_max(0.05),
        radius_two_increment=of_max(0.0),
        distance_increment=of_max(0.0),
    ),
    "preset03": Preset(
        key="preset03",
        label="Preset 03",
        family=CurveFamily.HYPOTROCHOID,
        radius_one=of_max(0.2222),
        radius_two=of_max(0.4444),
        distance=of_max(0.50),
        segments=of_max(0.20),
        segment_multiplier=of_max(0.75),
        stretch=of_max(0.25),
        scale=of_max(0.10),
        opacity=of_max(0.25),
        radius_one_increment=of_max(0.05),
        radius_two_increment=of_max(0.0),
        distance_increment=of_max(0.0),
        stretch_increment=of_max(0.05),
    ),
}

DEFAULT_PRESET = "preset01"


def get_preset(key: str) -> Preset:
    preset = PRESETS.get(key)
    if preset is None:
        raise KeyError(f"No preset registered for key '{key}'")
    return preset


def list_keys() -> List[str]:
    return list(PRESETS.keys())
