"""Tests for coordinate transforms and chart layout."""

import numpy as np
import pytest
from numpy.testing import assert_allclose

from bethe_bloch.config.chart_config import AxisRange, PlotConfig
from bethe_bloch.config.enums import AxisScale
from bethe_bloch.config.style import StyleConfig
from bethe_bloch.core.kinematics import DomainError
from bethe_bloch.render.layout import energy_layout, split_vertically, stopping_power_layout
from bethe_bloch.render.transforms import (
    ChartTransform,
    LinearTransform,
    LogTransform,
    PixelBox,
    make_transform,
)


class TestPixelBox:
    """Tests for PixelBox."""

    def test_edges(self):
        box = PixelBox(left=80, top=50, width=450, height=345)

        assert box.right == 530
        assert box.bottom == 395
        assert box.contains(80, 50)
        assert not box.contains(79, 50)

    def test_figure_fraction(self):
        """Test conversion to matplotlib's bottom-left fractions."""
        box = PixelBox(left=0, top=0, width=50, height=25)
        assert_allclose(box.to_figure_fraction(100, 100), (0.0, 0.75, 0.5, 0.25), atol=1e-12)

    def test_empty_box(self):
        with pytest.raises(ValueError, match="positive size"):
            PixelBox(0, 0, 0, 10)


class TestLinearTransform:
    """Tests for LinearTransform."""

    def test_endpoints_and_midpoint(self):
        transform = LinearTransform(0.0, 10.0, 100.0, 200.0)
        assert_allclose(transform([0.0, 5.0, 10.0]), [100.0, 150.0, 200.0])

    def test_reversed_pixel_interval(self):
        """Test a y axis mapping min to the bottom pixel row."""
        transform = LinearTransform(0.0, 20.0, 395.0, 50.0)
        assert_allclose(transform([0.0, 20.0]), [395.0, 50.0])

    def test_empty_range(self):
        with pytest.raises(DomainError, match="lo < hi"):
            LinearTransform(1.0, 1.0, 0.0, 100.0)


class TestLogTransform:
    """Tests for LogTransform."""

    def test_decades_equally_spaced(self):
        transform = LogTransform(0.1, 1000.0, 0.0, 400.0)
        assert_allclose(transform([0.1, 1.0, 10.0, 100.0, 1000.0]), [0.0, 100.0, 200.0, 300.0, 400.0], atol=1e-9)

    @pytest.mark.parametrize("lo", [0.0, -1.0])
    def test_non_positive_lo(self, lo):
        """Test that lo <= 0 raises DomainError."""
        with pytest.raises(DomainError, match="lo > 0"):
            LogTransform(lo, 10.0, 0.0, 100.0)

    def test_non_positive_value(self):
        """Test that a non-positive sample raises DomainError."""
        transform = LogTransform(1.0, 10.0, 0.0, 100.0)
        with pytest.raises(DomainError, match="non-positive"):
            transform(np.array([0.0, 1.0]))

    def test_make_transform(self):
        assert isinstance(make_transform(AxisScale.LOGARITHMIC, 1.0, 10.0, 0.0, 1.0), LogTransform)
        assert isinstance(make_transform(AxisScale.LINEAR, 0.0, 10.0, 0.0, 1.0), LinearTransform)


class TestChartTransform:
    """Tests for ChartTransform."""

    def test_from_plot(self):
        """Test mapping onto a plot box with a top-left origin."""
        plot = PlotConfig(x=AxisRange(0.0, 5.0), y=AxisRange(0.0, 800.0))
        box = PixelBox(left=100, top=50, width=430, height=400)
        transform = ChartTransform.from_plot(plot, box)

        px, py = transform.to_pixels([0.0, 5.0], [0.0, 800.0])

        assert_allclose(px, [100.0, 530.0])
        assert_allclose(py, [450.0, 50.0])

    def test_log_plot_with_zero_min(self):
        """Test that a log plot starting at 0 cannot be transformed."""
        plot = PlotConfig(x=AxisRange(0.0, 5.0), y=AxisRange(0.0, 1.0), x_scale=AxisScale.LOGARITHMIC)
        with pytest.raises(DomainError):
            ChartTransform.from_plot(plot, PixelBox(0, 0, 10, 10))


class TestLayout:
    """Tests for the chart layouts."""

    def test_split_vertically(self):
        assert split_vertically(500, 0.87) == (435, 65)

    def test_stopping_power_layout(self):
        """Test primary plot and secondary strip positions."""
        layout = stopping_power_layout(StyleConfig())

        assert (layout.width, layout.height) == (550, 500)
        assert layout.caption == PixelBox(0, 0, 550, 50)
        assert layout.primary == PixelBox(left=80, top=50, width=450, height=345)
        assert layout.secondary.top == 435
        assert layout.secondary.left == layout.primary.left
        assert layout.secondary.width == layout.primary.width
        assert layout.secondary.bottom == 500 - 10 - 45

    def test_energy_layout(self):
        layout = energy_layout(StyleConfig())

        assert layout.primary == PixelBox(left=100, top=50, width=430, height=400)
        assert layout.secondary is None

    def test_chart_too_small(self):
        """Test that margins larger than the chart are rejected."""
        with pytest.raises(ValueError, match="positive size"):
            energy_layout(StyleConfig(chart_width=100, chart_height=80))
