"""Tests for the parameter-editing boundary."""

import math

import pytest

from bethe_bloch.app.controls import ParameterEditor
from bethe_bloch.config.chart_config import AxisRange
from bethe_bloch.config.enums import ChartKind


class TestMaterialEdits:
    """Tests for A and Z edits."""

    def test_set_mass_number(self, editor):
        assert editor.set_mass_number(12.0) is True
        assert editor.config.material.a == 12.0

    def test_mass_number_clamped(self, editor):
        """Test the [1, 300] clamp."""
        editor.set_mass_number(500.0)
        assert editor.config.material.a == 300.0

        editor.set_mass_number(0.0)
        assert editor.config.material.a == 1.0

    def test_unchanged_value_reports_false(self, editor):
        assert editor.set_mass_number(editor.config.material.a) is False

    def test_clamp_to_current_value_reports_false(self, editor):
        """Test that an edit clamped back to the current value is not a change."""
        editor.set_mass_number(300.0)
        assert editor.set_mass_number(1000.0) is False

    def test_nan_ignored(self, editor):
        before = editor.config
        assert editor.set_mass_number(math.nan) is False
        assert editor.config is before

    def test_set_atomic_number(self, editor):
        """Test that Z is stored as an integer."""
        assert editor.set_atomic_number(6.7) is True
        assert editor.config.material.z_big == 6
        assert isinstance(editor.config.material.z_big, int)

    @pytest.mark.parametrize("value,expected", [(0, 1), (-10, 1), (301, 300)])
    def test_atomic_number_clamped(self, editor, value, expected):
        editor.set_atomic_number(value)
        assert editor.config.material.z_big == expected


class TestAxisEdits:
    """Tests for set_axis_bound."""

    def test_set_energy_max(self, editor):
        assert editor.set_axis_bound(ChartKind.ENERGY, "x", "max", 10.0) is True
        assert editor.config.energy.x == AxisRange(0.0, 10.0)

    def test_max_below_min_clamped_to_gap(self, editor):
        """Test that max stays min_gap above min on the energy chart."""
        editor.set_axis_bound(ChartKind.ENERGY, "x", "max", -1.0)
        assert editor.config.energy.x == AxisRange(0.0, 0.01)

    def test_min_above_max_clamped_to_gap(self, editor):
        """Test that min stays min_gap below max on the stopping-power chart."""
        editor.set_axis_bound(ChartKind.STOPPING_POWER, "y", "min", 50.0)

        assert editor.config.stopping_power.y.min == pytest.approx(19.9)
        assert editor.config.stopping_power.y.max == 20.0

    def test_log_axis_min_stays_positive(self, editor):
        """Test the floor of the logarithmic βγ axis."""
        editor.set_axis_bound(ChartKind.STOPPING_POWER, "x", "min", 0.0)

        assert editor.config.stopping_power.x.min == 1e-3
        assert editor.config.validate() == []

    def test_energy_min_floor(self, editor):
        editor.set_axis_bound(ChartKind.ENERGY, "y", "min", -100.0)
        assert editor.config.energy.y.min == 0.0

    def test_other_chart_untouched(self, editor):
        before = editor.config.stopping_power
        editor.set_axis_bound(ChartKind.ENERGY, "y", "max", 100.0)

        assert editor.config.stopping_power == before

    def test_every_edit_keeps_config_valid(self, editor):
        """Test that no sequence of edits produces an invalid snapshot."""
        for chart in ChartKind:
            for axis in ("x", "y"):
                for bound in ("min", "max"):
                    for value in (-1e9, 0.0, 1e-12, 3.0, 1e9):
                        editor.set_axis_bound(chart, axis, bound, value)
                        assert editor.config.validate() == []

    def test_invalid_axis_name(self, editor):
        with pytest.raises(ValueError, match="axis must be one of"):
            editor.set_axis_bound(ChartKind.ENERGY, "z", "min", 1.0)

    def test_invalid_bound_name(self, editor):
        with pytest.raises(ValueError, match="bound must be one of"):
            editor.set_axis_bound(ChartKind.ENERGY, "x", "mid", 1.0)

    def test_custom_limits(self, default_config):
        from bethe_bloch.config.chart_config import ParameterLimits

        editor = ParameterEditor(default_config, ParameterLimits(a_max=100.0))
        editor.set_mass_number(250.0)

        assert editor.config.material.a == 100.0
