"""
Tests for the parameter ranges and the preset catalog.
"""
import logging

import pytest

from roulettecurves.config import ParameterRange, ShapeLimits, SHAPE_LIMITS, decimals_for_step
from roulettecurves.logging_config import setup_logging
from roulettecurves.model.curves import CurveFamily
from roulettecurves.model.presets import (
    Bound, RangeFraction, PRESETS, DEFAULT_PRESET, get_preset, list_keys,
)


class TestParameterRange:

    def test_defaults_match_control_ranges(self):
        assert SHAPE_LIMITS.radius_one.maximum == 10.0
        assert SHAPE_LIMITS.segments.minimum == 100
        assert SHAPE_LIMITS.scale.maximum == 0.5

    def test_empty_range_rejected(self):
        with pytest.raises(ValueError):
            ParameterRange(1.0, 1.0, 0.1)

    def test_inverted_range_rejected(self):
        with pytest.raises(ValueError):
            ParameterRange(5.0, 1.0, 0.1)

    @pytest.mark.parametrize("step, decimals", [(0.01, 2), (0.1, 1), (1.0, 0), (10, 0)])
    def test_decimals_follow_step(self, step, decimals):
        assert decimals_for_step(step) == decimals
        assert ParameterRange(0.0, 100.0, step).display_decimals == decimals

    def test_multiplier_shows_fractional_preset_values(self):
        limits = SHAPE_LIMITS.segment_multiplier
        assert limits.display_decimals >= 1
        resolved = get_preset("preset01").resolve()
        assert round(resolved.segment_multiplier, limits.display_decimals) == pytest.approx(7.5)

    def test_non_positive_step_rejected(self):
        with pytest.raises(ValueError):
            ParameterRange(0.0, 1.0, 0.0)


class TestPresetCatalog:

    def test_three_presets_in_order(self):
        assert list_keys() == ["preset01", "preset02", "preset03"]
        assert DEFAULT_PRESET in PRESETS

    def test_unknown_key(self):
        with pytest.raises(KeyError):
            get_preset("preset99")

    def test_fraction_of_minimum(self):
        assert RangeFraction(1.0, Bound.MINIMUM).resolve(SHAPE_LIMITS.segments) == 100

    def test_preset01_resolution(self):
        resolved = get_preset("preset01").resolve()
        assert resolved.family is CurveFamily.HYPOTROCHOID
        assert resolved.radius_one == pytest.approx(3.305)
        assert resolved.segments == pytest.approx(100)
        assert resolved.segment_multiplier == pytest.approx(7.5)
        assert resolved.scale == pytest.approx(0.1)
        assert resolved.stretch_increment is None

    def test_resolution_follows_limits(self):
        limits = ShapeLimits(radius_one=ParameterRange(0.1, 20.0, 0.01))
        resolved = get_preset("preset01").resolve(shape_limits=limits)
        assert resolved.radius_one == pytest.approx(6.61)

    def test_only_preset03_sets_stretch_increment(self):
        assert [key for key, p in PRESETS.items() if p.stretch_increment is not None] == ["preset03"]


def test_setup_logging_writes_file(tmp_path):
    log_file = tmp_path / "app.log"
    setup_logging(level=logging.DEBUG, log_file=str(log_file))
    logging.getLogger("roulettecurves.tests").debug("hello")
    for handler in logging.getLogger("roulettecurves").handlers:
        handler.flush()
    assert "hello" in log_file.read_text(encoding="utf-8")
    setup_logging(level=logging.WARNING)


def test_setup_logging_creates_log_folder_and_replaces_handlers(tmp_path):
    log_file = tmp_path / "logs" / "run.log"
    setup_logging(level=logging.INFO, log_file=log_file)
    logger = setup_logging(level=logging.INFO, log_file=log_file)
    assert log_file.parent.is_dir()
    assert len(logger.handlers) == 2
    assert logging.getLogger("pyvista").level == logging.WARNING
    setup_logging(level=logging.WARNING)
