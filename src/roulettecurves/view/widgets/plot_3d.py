"""
3D Visualization Widget (PyVista Wrapper)
"""

from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtWidgets import QWidget, QVBoxLayout
from PySide6.QtGui import QResizeEvent

from pyvistaqt import QtInteractor

from roulettecurves.config import VIEW_SETTINGS, ViewSettings

logger = logging.getLogger(__name__)


class PyVistaWidget(QWidget):
    """
    Perspective 3D viewport with orbit (trackball) interaction.

    The embedded plotter is the scene the Shape Controller draws into.
    """
    def __init__(self, view_settings: ViewSettings = VIEW_SETTINGS, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.view_settings = view_settings

        self.layout_box: QVBoxLayout = QVBoxLayout(self)
        self.layout_box.setContentsMargins(0, 0, 0, 0)

        self.plotter: QtInteractor = QtInteractor(self)
        self.layout_box.addWidget(self.plotter)

        self._init_plotter()

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def reset_camera(self) -> None:
        """Put the camera back on the +Z axis looking at the origin."""
        settings = self.view_settings
        cam = self.plotter.camera
        cam.position = (0.0, 0.0, settings.camera_distance)
        cam.focal_point = (0.0, 0.0, 0.0)
        cam.up = (0.0, 1.0, 0.0)
        cam.view_angle = settings.view_angle
        cam.clipping_range = (settings.near, settings.far)
        # Fresh interactor style drops any in-progress orbit state
        self.plotter.enable_trackball_style()
        logger.info("Camera reset.")

    def render_scene(self) -> None:
        self.plotter.render()

    def close_plotter(self) -> None:
        if self.plotter is not None:
            self.plotter.close()

    # ------------------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------------------

    def _init_plotter(self) -> None:
        self.plotter.set_background(self.view_settings.background_color)
        self.plotter.disable_parallel_projection()
        self.reset_camera()

    def resizeEvent(self, event: QResizeEvent) -> None:
        # VTK adapts the camera aspect itself
        size = event.size()
        logger.debug(f"Viewport resized to {size.width()}x{size.height()}.")
        super().resizeEvent(event)
