"""
Roulette Curve Generator
========================
Closed-form point generation for the two supported roulette families.

Why is this file needed?
------------------------
1. Mathematics: It maps the curve parameter ``t`` to a 3D point for a
   hypotrochoid (circle rolling inside a fixed circle) or an epitrochoid
   (circle rolling outside a fixed circle).
2. Discretization: It samples the curve into the polyline that the Shape
   Controller turns into renderable geometry.

Angle unit
----------
The angle is ``t * 360`` and, by default, goes into ``cos``/``sin`` as is.
The built-in presets were tuned against that output, so it stays the default.
Pass ``radians=True`` to use ``t * 2 * pi`` instead, which gives the
textbook curves.

Note: This module is pure NumPy and should NOT import PySide6 or PyVista.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING, Union

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt

FULL_TURN_DEGREES = 360.0
FULL_TURN_RADIANS = 2.0 * np.pi


class CurveFamily(IntEnum):
    """Roulette family. Values match the order of the family selector."""
    HYPOTROCHOID = 0
    EPITROCHOID = 1


@dataclass(frozen=True)
class CurveParameters:
    """
    The five scalar parameters of a roulette curve plus its family.

    No range is enforced: ``radius_two == 0`` is accepted and produces
    NaN/Inf coordinates.
    """
    radius_one: float
    radius_two: float
    distance: float
    stretch: float
    scale: float
    family: CurveFamily = CurveFamily.HYPOTROCHOID


def evaluate(
    params: CurveParameters,
    t: Union[float, npt.ArrayLike],
    *,
    radians: bool = False,
) -> npt.NDArray[np.float64]:
    """
    Evaluate the curve at ``t``.

    Args:
        params: Curve parameters.
        t: Curve parameter, scalar or 1D array. One unit of ``t`` is one
           revolution of the rolling circle's centre.
        radians: Convert the angle to radians before the trigonometric calls.

    Returns:
        Array of shape (3,) for a scalar ``t``, (N, 3) for an array of N values.
    """
    t_arr = np.asarray(t, dtype=np.float64)
    angle = t_arr * (FULL_TURN_RADIANS if radians else FULL_TURN_DEGREES)

    if params.family == CurveFamily.HYPOTROCHOID:
        radius = np.float64(params.radius_one) - np.float64(params.radius_two)
        sign = 1.0
    else:
        radius = np.float64(params.radius_one) + np.float64(params.radius_two)
        sign = -1.0

    # radius_two == 0 is a documented degenerate case: let it become NaN/Inf
    with np.errstate(divide="ignore", invalid="ignore"):
        inner = np.divide(radius * angle, np.float64(params.radius_two))
        x = radius * np.cos(angle) + sign * params.distance * np.cos(inner)
        y = radius * np.sin(angle) + sign * params.distance * np.sin(inner)
        z = t_arr * params.stretch
        points = np.stack([x, y, z], axis=-1) * params.scale

    return points


def point_count(segments: float, multiplier: float) -> int:
    """Number of samples produced by ``generate`` for the given discretization."""
    # Products like 0.29 * 100 land just below the integer they denote
    return int(np.floor(multiplier * segments + 1e-9)) + 1


def generate(
    params: CurveParameters,
    segments: float,
    multiplier: float,
    *,
    radians: bool = False,
) -> npt.NDArray[np.float64]:
    """
    Sample the curve at ``t = index / segments`` for every index in
    ``[0, multiplier * segments]``.

    Args:
        params: Curve parameters.
        segments: Samples per unit of ``t``.
        multiplier: How many units of ``t`` to cover.
        radians: See ``evaluate``.

    Returns:
        An (N, 3) array with N = ``point_count(segments, multiplier)``.
    """
    indices = np.arange(point_count(segments, multiplier), dtype=np.float64)
    with np.errstate(divide="ignore", invalid="ignore"):
        t = indices / np.float64(segments)
    return evaluate(params, t, radians=radians).reshape(-1, 3)
