"""Data-to-pixel coordinate transforms.

Pixel coordinates use a top-left origin: x grows to the right, y grows
downwards. A plot box maps the axis minimum to its left (x) or bottom (y) edge
and the maximum to its right or top edge.
"""

from dataclasses import dataclass
from typing import Tuple

import numpy as np

from bethe_bloch.config.chart_config import PlotConfig
from bethe_bloch.config.enums import AxisScale
from bethe_bloch.core.kinematics import DomainError


@dataclass(frozen=True)
class PixelBox:
    """Axis-aligned pixel rectangle, top-left origin.

    Attributes:
        left, top: Upper-left corner [px]
        width, height: Extent [px]
    """

    left: float
    top: float
    width: float
    height: float

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"PixelBox must have positive size, got {self.width}x{self.height}")

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    def contains(self, x: float, y: float) -> bool:
        return self.left <= x <= self.right and self.top <= y <= self.bottom

    def to_figure_fraction(self, fig_width: float, fig_height: float) -> Tuple[float, float, float, float]:
        """Box as matplotlib [left, bottom, width, height] figure fractions."""
        return (
            self.left / fig_width,
            1.0 - self.bottom / fig_height,
            self.width / fig_width,
            self.height / fig_height,
        )


class CoordinateTransform:
    """Maps a data interval [lo, hi] onto a pixel interval.

    ``pixel_lo`` receives lo and ``pixel_hi`` receives hi; the pixel interval
    may run in either direction.
    """

    def __init__(self, lo: float, hi: float, pixel_lo: float, pixel_hi: float):
        if not hi > lo:
            raise DomainError(f"Transform range must satisfy lo < hi, got [{lo}, {hi}]")
        self.lo = float(lo)
        self.hi = float(hi)
        self.pixel_lo = float(pixel_lo)
        self.pixel_hi = float(pixel_hi)

    def _normalize(self, values: np.ndarray) -> np.ndarray:
        raise NotImplementedError

    def __call__(self, values) -> np.ndarray:
        """Transform data values to pixel coordinates."""
        t = self._normalize(np.asarray(values, dtype=np.float64))
        return self.pixel_lo + t * (self.pixel_hi - self.pixel_lo)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}([{self.lo:g}, {self.hi:g}] -> "
            f"[{self.pixel_lo:g}, {self.pixel_hi:g}])"
        )


class LinearTransform(CoordinateTransform):
    """Pixel position affine in the data value."""

    def _normalize(self, values: np.ndarray) -> np.ndarray:
        return (values - self.lo) / (self.hi - self.lo)


class LogTransform(CoordinateTransform):
    """Pixel position affine in log10 of the data value.

    Raises:
        DomainError: If lo <= 0, or if a transformed value is <= 0
    """

    def __init__(self, lo: float, hi: float, pixel_lo: float, pixel_hi: float):
        if lo <= 0:
            raise DomainError(f"Logarithmic transform requires lo > 0, got {lo}")
        super().__init__(lo, hi, pixel_lo, pixel_hi)
        self._log_lo = np.log10(self.lo)
        self._log_span = np.log10(self.hi) - self._log_lo

    def _normalize(self, values: np.ndarray) -> np.ndarray:
        if np.any(values <= 0):
            raise DomainError(
                f"Logarithmic transform got non-positive value {float(np.min(values))}"
            )
        return (np.log10(values) - self._log_lo) / self._log_span


def make_transform(scale: AxisScale, lo: float, hi: float, pixel_lo: float, pixel_hi: float) -> CoordinateTransform:
    """Build the transform for an axis scale."""
    if scale is AxisScale.LOGARITHMIC:
        return LogTransform(lo, hi, pixel_lo, pixel_hi)
    return LinearTransform(lo, hi, pixel_lo, pixel_hi)


@dataclass(frozen=True)
class ChartTransform:
    """Paired x and y transforms of one plot box."""

    x: CoordinateTransform
    y: CoordinateTransform

    @classmethod
    def from_plot(cls, plot: PlotConfig, box: PixelBox) -> "ChartTransform":
        """Transforms of a plot's axes onto a pixel box; y is always linear."""
        return cls(
            x=make_transform(plot.x_scale, plot.x.min, plot.x.max, box.left, box.right),
            y=LinearTransform(plot.y.min, plot.y.max, box.bottom, box.top),
        )

    def to_pixels(self, xs, ys) -> Tuple[np.ndarray, np.ndarray]:
        """Transform sample coordinates to pixel coordinates."""
        return self.x(xs), self.y(ys)
