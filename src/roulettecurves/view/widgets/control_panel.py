"""
Shape Control Panel
"""
from __future__ import annotations

from typing import Callable, Dict, Optional

from PySide6.QtCore import Signal, Slot
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QGroupBox, QFormLayout, QDoubleSpinBox, QComboBox,
    QCheckBox, QPushButton, QSizePolicy
)

from roulettecurves.config import ParameterRange
from roulettecurves.controller.shape import ShapeController
from roulettecurves.model.curves import CurveFamily
from roulettecurves.model import presets

FAMILY_LABELS = {
    CurveFamily.HYPOTROCHOID: "Hypotrochoid",
    CurveFamily.EPITROCHOID: "Epitrochoid",
}


class ControlPanel(QWidget):
    """
    Left-side panel with the shape, material, animation and preset controls.

    The panel keeps no values of its own: every widget writes through a
    controller setter and is refreshed from the controller afterwards. Spin box
    ranges are the controller's limits.
    """
    preset_requested = Signal(str)
    reset_camera_requested = Signal()

    def __init__(
        self,
        controller: ShapeController,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self.controller = controller
        shape_limits = controller.shape_limits
        material_limits = controller.material_limits
        animation_limits = controller.animation_limits
        self._spins: Dict[str, QDoubleSpinBox] = {}

        layout = QVBoxLayout(self)

        # --- Shape parameters ---
        grp_shape = QGroupBox("Shape parameters")
        form = QFormLayout(grp_shape)

        self.family_combo = QComboBox()
        for family, label in FAMILY_LABELS.items():
            self.family_combo.addItem(label, userData=int(family))
        self.family_combo.currentIndexChanged.connect(self.on_family_changed)
        form.addRow("type", self.family_combo)

        self._add_spin(form, "radius_one", "radiusOne", shape_limits.radius_one, controller.set_radius_one)
        self._add_spin(form, "radius_two", "radiusTwo", shape_limits.radius_two, controller.set_radius_two)
        self._add_spin(form, "distance", "distance", shape_limits.distance, controller.set_distance)
        self._add_spin(form, "stretch", "stretch", shape_limits.stretch, controller.set_stretch)
        self._add_spin(form, "segments", "segments", shape_limits.segments, controller.set_segments)
        self._add_spin(
            form, "segment_multiplier", "segmentMultiplier",
            shape_limits.segment_multiplier, controller.set_segment_multiplier
        )
        self._add_spin(form, "scale", "scale", shape_limits.scale, controller.set_scale)

        self.chk_radians = QCheckBox("")
        self.chk_radians.setToolTip("Convert the rolling angle to radians (textbook curves).")
        self.chk_radians.toggled.connect(controller.set_radians)
        form.addRow("true radians", self.chk_radians)

        layout.addWidget(grp_shape)

        # --- Material options ---
        grp_material = QGroupBox("Material options")
        form = QFormLayout(grp_material)
        self._add_spin(form, "opacity", "opacity", material_limits.opacity, controller.set_opacity)
        layout.addWidget(grp_material)

        # --- Animation options ---
        grp_animation = QGroupBox("Animation options")
        form = QFormLayout(grp_animation)
        self._add_spin(
            form, "radius_one_increment", "radiusOne increment",
            animation_limits.radius_one_increment, controller.set_radius_one_increment
        )
        self._add_spin(
            form, "radius_two_increment", "radiusTwo increment",
            animation_limits.radius_two_increment, controller.set_radius_two_increment
        )
        self._add_spin(
            form, "distance_increment", "distance increment",
            animation_limits.distance_increment, controller.set_distance_increment
        )
        self._add_spin(
            form, "stretch_increment", "stretch increment",
            animation_limits.stretch_increment, controller.set_stretch_increment
        )

        self.chk_animate = QCheckBox("")
        self.chk_animate.toggled.connect(controller.set_animate)
        form.addRow("animate", self.chk_animate)
        layout.addWidget(grp_animation)

        # --- Presets ---
        grp_presets = QGroupBox("Presets")
        preset_layout = QVBoxLayout(grp_presets)
        for key in presets.list_keys():
            btn = QPushButton(presets.get_preset(key).label)
            btn.clicked.connect(lambda _=False, k=key: self.preset_requested.emit(k))
            preset_layout.addWidget(btn)
        layout.addWidget(grp_presets)

        # --- Standalone options ---
        self.btn_reset_camera = QPushButton("Reset camera")
        self.btn_reset_camera.clicked.connect(self.reset_camera_requested)
        layout.addWidget(self.btn_reset_camera)

        layout.addStretch()

        controller.parameters_changed.connect(self.load_from_controller)

    def _add_spin(
        self,
        form: QFormLayout,
        key: str,
        label: str,
        parameter_range: ParameterRange,
        setter: Callable[[float], None],
    ) -> QDoubleSpinBox:
        w = QDoubleSpinBox()
        w.setRange(parameter_range.minimum, parameter_range.maximum)
        w.setSingleStep(parameter_range.step)
        w.setDecimals(parameter_range.display_decimals)
        w.setKeyboardTracking(False)
        w.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        w.valueChanged.connect(setter)
        form.addRow(label, w)
        self._spins[key] = w
        return w

    @Slot(int)
    def on_family_changed(self, index: int) -> None:
        self.controller.set_family(self.family_combo.itemData(index))

    @Slot()
    def load_from_controller(self) -> None:
        """Show the controller's current values without feeding them back."""
        values = self.controller.snapshot()
        for key, spin in self._spins.items():
            spin.blockSignals(True)
            try:
                spin.setValue(values[key])
            finally:
                spin.blockSignals(False)

        self.family_combo.blockSignals(True)
        try:
            self.family_combo.setCurrentIndex(self.family_combo.findData(values["family"]))
        finally:
            self.family_combo.blockSignals(False)

        for chk, checked in ((self.chk_animate, self.controller.animate), (self.chk_radians, self.controller.radians)):
            chk.blockSignals(True)
            try:
                chk.setChecked(checked)
            finally:
                chk.blockSignals(False)
