"""
Shape Controller
================
Owns the parameters of the displayed roulette curve and the single line actor
that represents it in the scene.

Why is this file needed?
------------------------
1. State Management: It is the one authoritative place for the current curve
   parameters, their animation increments and wrap bounds. The control panel
   reads from and writes to it, it never holds its own copy.
2. Regeneration: Every parameter change and every animation tick rebuilds the
   geometry from scratch. The previous geometry is always released and
   removed from the scene before the new one is added, so at most one shape
   exists at any time.

Classes:
    RenderableShape: The polyline mesh, its actor and material settings.
    ShapeController: Parameter state, animation and the draw/remove lifecycle.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol

import numpy as np
import pyvista as pv
from PySide6.QtCore import QObject, Signal

from roulettecurves.config import (
    ANIMATION_LIMITS, MATERIAL_LIMITS, SHAPE_LIMITS, VIEW_SETTINGS,
    AnimationLimits, MaterialLimits, ShapeLimits, ViewSettings,
)
from roulettecurves.model.animation import AnimationState
from roulettecurves.model.curves import CurveFamily, CurveParameters, generate
from roulettecurves.model.presets import Preset, ResolvedPreset

logger = logging.getLogger(__name__)


class Scene(Protocol):
    """The part of ``pyvista.Plotter`` the controller relies on."""

    def add_mesh(self, mesh: pv.DataSet, **kwargs: Any) -> Any: ...

    def remove_actor(self, actor: Any, **kwargs: Any) -> Any: ...


@dataclass
class RenderableShape:
    """The displayed line geometry together with its material."""
    mesh: Optional[pv.PolyData]
    actor: Any
    color: str
    opacity: float
    transparent: bool = True

    @property
    def released(self) -> bool:
        return self.mesh is None

    def release(self) -> None:
        """Free the geometry. Safe to call more than once."""
        if self.mesh is None:
            return
        self.mesh.Initialize()
        self.mesh = None


def points_to_polyline(points: np.ndarray) -> pv.PolyData:
    """Convert an (N, 3) array of points into a single open polyline."""
    points = np.asarray(points, dtype=np.float64).reshape(-1, 3)
    n = points.shape[0]
    pd = pv.PolyData(points)
    pd.lines = np.hstack([[n], np.arange(n, dtype=np.int_)])
    # remove vertex cells, so they don't show up as dots
    pd.verts = np.empty(0, dtype=np.int_)
    return pd


class ShapeController(QObject):
    """
    Current roulette curve, its animation and its renderable geometry.

    Every setter of a curve, discretization or material value redraws the
    shape immediately. Increment setters and ``set_animate`` only store the
    value; it is picked up by the next ``update``.
    """
    # Emitted after every redraw so views can refresh displayed values
    parameters_changed = Signal()

    def __init__(
        self,
        scene: Scene,
        shape_limits: ShapeLimits = SHAPE_LIMITS,
        material_limits: MaterialLimits = MATERIAL_LIMITS,
        animation_limits: AnimationLimits = ANIMATION_LIMITS,
        view_settings: ViewSettings = VIEW_SETTINGS,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self.scene = scene
        self.shape_limits = shape_limits
        self.material_limits = material_limits
        self.animation_limits = animation_limits
        self.view_settings = view_settings

        # Defaults are overwritten by a preset at start-up
        self._radius_one = AnimationState(maximum=shape_limits.radius_one.maximum)
        self._radius_two = AnimationState(maximum=shape_limits.radius_two.maximum)
        self._distance = AnimationState(maximum=shape_limits.distance.maximum)
        self._stretch = AnimationState(maximum=shape_limits.stretch.maximum)
        self.scale: float = 0.0
        self.family: CurveFamily = CurveFamily.HYPOTROCHOID
        self.segments: float = 0.0
        self.segment_multiplier: float = 0.0
        self.opacity: float = 0.0
        self.radians: bool = False
        self.animate: bool = False

        self.shape: Optional[RenderableShape] = None

    # ------------------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------------------

    @property
    def radius_one(self) -> float:
        return self._radius_one.value

    @property
    def radius_two(self) -> float:
        return self._radius_two.value

    @property
    def distance(self) -> float:
        return self._distance.value

    @property
    def stretch(self) -> float:
        return self._stretch.value

    @property
    def radius_one_increment(self) -> float:
        return self._radius_one.increment

    @property
    def radius_two_increment(self) -> float:
        return self._radius_two.increment

    @property
    def distance_increment(self) -> float:
        return self._distance.increment

    @property
    def stretch_increment(self) -> float:
        return self._stretch.increment

    @property
    def parameters(self) -> CurveParameters:
        return CurveParameters(
            radius_one=self.radius_one,
            radius_two=self.radius_two,
            distance=self.distance,
            stretch=self.stretch,
            scale=self.scale,
            family=self.family,
        )

    @property
    def is_rendered(self) -> bool:
        return self.shape is not None

    def snapshot(self) -> Dict[str, float]:
        """Current values keyed by parameter name, for refreshing the controls."""
        return {
            "family": int(self.family),
            "radius_one": self.radius_one,
            "radius_two": self.radius_two,
            "distance": self.distance,
            "stretch": self.stretch,
            "segments": self.segments,
            "segment_multiplier": self.segment_multiplier,
            "scale": self.scale,
            "opacity": self.opacity,
            "radius_one_increment": self.radius_one_increment,
            "radius_two_increment": self.radius_two_increment,
            "distance_increment": self.distance_increment,
            "stretch_increment": self.stretch_increment,
        }

    # ------------------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------------------

    def draw(self) -> None:
        """
        Generate the curve and add it to the scene as the active shape.

        A shape that is already displayed is removed first.
        """
        self.remove()
        points = generate(self.parameters, self.segments, self.segment_multiplier, radians=self.radians)
        logger.debug(f"Drawing {self.family.name.lower()} with {len(points)} points.")

        mesh = points_to_polyline(points)
        actor = self.scene.add_mesh(
            mesh,
            color=self.view_settings.line_color,
            opacity=self.opacity,
            line_width=self.view_settings.line_width,
            render_lines_as_tubes=False,
            pickable=False,
            show_scalar_bar=False,
            reset_camera=False,
            render=False,
        )
        self.shape = RenderableShape(
            mesh=mesh,
            actor=actor,
            color=self.view_settings.line_color,
            opacity=self.opacity,
        )

    def remove(self) -> None:
        """Release the active shape and take it out of the scene. No-op if there is none."""
        if self.shape is None:
            return
        self.shape.release()
        self.scene.remove_actor(self.shape.actor, reset_camera=False, render=False)
        self.shape = None

    def redraw(self) -> None:
        self.draw()
        self.parameters_changed.emit()

    def update(self, delta_seconds: float) -> None:
        """Advance the animated parameters by ``delta_seconds`` and regenerate."""
        for state in (self._radius_one, self._radius_two, self._distance, self._stretch):
            state.advance(delta_seconds)
        self.redraw()

    # ------------------------------------------------------------------------------
    # Setters (redraw)
    # ------------------------------------------------------------------------------

    def set_radius_one(self, value: float) -> None:
        self._radius_one.value = float(value)
        self.redraw()

    def set_radius_two(self, value: float) -> None:
        self._radius_two.value = float(value)
        self.redraw()

    def set_distance(self, value: float) -> None:
        self._distance.value = float(value)
        self.redraw()

    def set_stretch(self, value: float) -> None:
        self._stretch.value = float(value)
        self.redraw()

    def set_scale(self, value: float) -> None:
        self.scale = float(value)
        self.redraw()

    def set_family(self, family: CurveFamily | int) -> None:
        self.family = CurveFamily(family)
        self.redraw()

    def set_opacity(self, value: float) -> None:
        self.opacity = float(value)
        self.redraw()

    def set_segments(self, value: float) -> None:
        self.segments = float(value)
        self.redraw()

    def set_segment_multiplier(self, value: float) -> None:
        self.segment_multiplier = float(value)
        self.redraw()

    def set_radians(self, enabled: bool) -> None:
        self.radians = bool(enabled)
        self.redraw()

    # ------------------------------------------------------------------------------
    # Setters (next tick)
    # ------------------------------------------------------------------------------

    def set_radius_one_increment(self, value: float) -> None:
        self._radius_one.increment = float(value)

    def set_radius_two_increment(self, value: float) -> None:
        self._radius_two.increment = float(value)

    def set_distance_increment(self, value: float) -> None:
        self._distance.increment = float(value)

    def set_stretch_increment(self, value: float) -> None:
        self._stretch.increment = float(value)

    def set_animate(self, enabled: bool) -> None:
        self.animate = bool(enabled)

    # ------------------------------------------------------------------------------
    # Presets
    # ------------------------------------------------------------------------------

    def apply_preset(self, preset: Preset | ResolvedPreset) -> None:
        """
        Apply a preset through the regular setters.

        A ``Preset`` is resolved against the controller's ranges first. Each
        assignment redraws, the same as moving the matching slider.
        """
        if isinstance(preset, Preset):
            preset = preset.resolve(
                shape_limits=self.shape_limits,
                material_limits=self.material_limits,
                animation_limits=self.animation_limits,
            )
        logger.info(f"Applying {preset.key}.")

        self.set_family(preset.family)
        self.set_radius_one(preset.radius_one)
        self.set_radius_two(preset.radius_two)
        self.set_distance(preset.distance)
        self.set_segments(preset.segments)
        self.set_segment_multiplier(preset.segment_multiplier)
        self.set_stretch(preset.stretch)
        self.set_scale(preset.scale)
        self.set_opacity(preset.opacity)

        self.set_animate(True)
        self.set_radius_one_increment(preset.radius_one_increment)
        self.set_radius_two_increment(preset.radius_two_increment)
        self.set_distance_increment(preset.distance_increment)
        if preset.stretch_increment is not None:
            self.set_stretch_increment(preset.stretch_increment)
