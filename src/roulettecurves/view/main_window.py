"""
Main Application Window
=======================
The primary GUI container: control panel on the left, 3D viewport on the right.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Routing: It connects panel requests (presets, camera reset) to the
   Shape Controller and the viewport.
3. Frame Loop: It owns the timer that advances the animation and renders
   once per frame.
"""
import logging

from PySide6.QtWidgets import QMainWindow, QSplitter
from PySide6.QtCore import Qt, QTimer, QElapsedTimer, Slot
from PySide6.QtGui import QCloseEvent

from roulettecurves.application import VISIBLE_APP_NAME
from roulettecurves.config import VIEW_SETTINGS, ViewSettings
from roulettecurves.controller.shape import ShapeController
from roulettecurves.model.animation import frame_delta
from roulettecurves.model import presets
from roulettecurves.view.widgets.control_panel import ControlPanel
from roulettecurves.view.widgets.plot_3d import PyVistaWidget

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(
        self,
        initial_preset: str = presets.DEFAULT_PRESET,
        view_settings: ViewSettings = VIEW_SETTINGS,
    ) -> None:
        super().__init__()
        self.view_settings = view_settings
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(1400, 900)

        splitter = QSplitter(Qt.Horizontal)
        self.setCentralWidget(splitter)

        # --- RIGHT SIDE: 3D Visualization (created first, it is the scene) ---
        self.visualizer = PyVistaWidget(view_settings)
        self.controller = ShapeController(self.visualizer.plotter, view_settings=view_settings, parent=self)

        # --- LEFT SIDE: Controls ---
        self.control_panel = ControlPanel(self.controller)

        splitter.addWidget(self.control_panel)
        splitter.addWidget(self.visualizer)
        splitter.setSizes([350, 1050])

        # --- SIGNAL CONNECTIONS ---
        self.control_panel.preset_requested.connect(self.on_preset_requested)
        self.control_panel.reset_camera_requested.connect(self.visualizer.reset_camera)

        # --- FRAME LOOP ---
        self._clock = QElapsedTimer()
        self._frame_timer = QTimer(self)
        self._frame_timer.setInterval(view_settings.frame_interval_ms)
        self._frame_timer.timeout.connect(self.on_frame)

        self.on_preset_requested(initial_preset)
        self._clock.start()
        self._frame_timer.start()

    @Slot(str)
    def on_preset_requested(self, key: str) -> None:
        self.controller.apply_preset(presets.get_preset(key))
        self.control_panel.load_from_controller()
        self.visualizer.reset_camera()

    @Slot()
    def on_frame(self) -> None:
        """Advance the animation by one frame step and render."""
        delta_seconds = frame_delta(self._clock.restart(), self.view_settings.seconds_per_frame)
        if self.controller.animate:
            self.controller.update(delta_seconds)
        self.visualizer.render_scene()

    def closeEvent(self, event: QCloseEvent, /) -> None:
        self._frame_timer.stop()
        self.controller.remove()
        self.visualizer.close_plotter()
        event.accept()
