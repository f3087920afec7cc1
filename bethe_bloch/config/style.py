"""Styling constants for the chart rasterizer.

StyleConfig is built once at startup and treated as immutable for the process
lifetime. Sizes are given in pixels; the rasterizer converts them to points
using ``dpi``.
"""

from dataclasses import dataclass
from typing import Tuple

from bethe_bloch.config.defaults import (
    DEFAULT_BACKGROUND,
    DEFAULT_CAPTION_FONT_PX,
    DEFAULT_CAPTION_HEIGHT_PX,
    DEFAULT_CHART_HEIGHT,
    DEFAULT_CHART_WIDTH,
    DEFAULT_DPI,
    DEFAULT_ENERGY_LABEL_BOTTOM_PX,
    DEFAULT_ENERGY_LABEL_LEFT_PX,
    DEFAULT_FONT_FAMILY,
    DEFAULT_FOREGROUND,
    DEFAULT_GRID_ALPHA,
    DEFAULT_LABEL_FONT_PX,
    DEFAULT_LEGEND_BACKGROUND,
    DEFAULT_MARGIN_BOTTOM_PX,
    DEFAULT_MARGIN_PX,
    DEFAULT_PRIMARY_SPLIT,
    DEFAULT_SECONDARY_LABEL_BOTTOM_PX,
    DEFAULT_STOPPING_POWER_COLOR,
    DEFAULT_STOPPING_POWER_LABEL_BOTTOM_PX,
    DEFAULT_STOPPING_POWER_LABEL_LEFT_PX,
    DEFAULT_STROKE_WIDTH_PX,
)

RGB = Tuple[int, int, int]


def rgb_to_unit(color: RGB) -> Tuple[float, float, float]:
    """Convert an 8-bit RGB triple to matplotlib's [0, 1] floats."""
    return tuple(channel / 255.0 for channel in color)


@dataclass(frozen=True)
class StyleConfig:
    """Process-wide styling constants.

    Attributes:
        chart_width, chart_height: Raster size of each chart [px]
        background: Fill color of the whole chart
        foreground: Axes, ticks, labels and caption color
        legend_background: Legend box fill
        stopping_power_color: Color of the stopping-power curve
        font_family: matplotlib font family
        caption_font_px, label_font_px: Font sizes [px]
        stroke_width_px: Curve line width [px]
        grid_alpha: Opacity of gridlines
        margin_px: Left/right margin around each plot [px]
        margin_bottom_px: Bottom margin [px]
        caption_height_px: Height of the caption band [px]
        stopping_power_label_left_px, stopping_power_label_bottom_px: Label areas of the primary plot
        secondary_label_bottom_px: Label area below the muon energy strip
        energy_label_left_px, energy_label_bottom_px: Label areas of the energy chart
        primary_split: Fraction of the stopping-power chart height above the secondary strip
        dpi: Rendering resolution
    """

    chart_width: int = DEFAULT_CHART_WIDTH
    chart_height: int = DEFAULT_CHART_HEIGHT
    background: RGB = DEFAULT_BACKGROUND
    foreground: RGB = DEFAULT_FOREGROUND
    legend_background: RGB = DEFAULT_LEGEND_BACKGROUND
    stopping_power_color: RGB = DEFAULT_STOPPING_POWER_COLOR
    font_family: str = DEFAULT_FONT_FAMILY
    caption_font_px: int = DEFAULT_CAPTION_FONT_PX
    label_font_px: int = DEFAULT_LABEL_FONT_PX
    stroke_width_px: int = DEFAULT_STROKE_WIDTH_PX
    grid_alpha: float = DEFAULT_GRID_ALPHA
    margin_px: int = DEFAULT_MARGIN_PX
    margin_bottom_px: int = DEFAULT_MARGIN_BOTTOM_PX
    caption_height_px: int = DEFAULT_CAPTION_HEIGHT_PX
    stopping_power_label_left_px: int = DEFAULT_STOPPING_POWER_LABEL_LEFT_PX
    stopping_power_label_bottom_px: int = DEFAULT_STOPPING_POWER_LABEL_BOTTOM_PX
    secondary_label_bottom_px: int = DEFAULT_SECONDARY_LABEL_BOTTOM_PX
    energy_label_left_px: int = DEFAULT_ENERGY_LABEL_LEFT_PX
    energy_label_bottom_px: int = DEFAULT_ENERGY_LABEL_BOTTOM_PX
    primary_split: float = DEFAULT_PRIMARY_SPLIT
    dpi: int = DEFAULT_DPI

    def __post_init__(self):
        """Validate style."""
        if self.chart_width <= 0 or self.chart_height <= 0:
            raise ValueError(
                f"Chart size must be positive: {self.chart_width}x{self.chart_height}"
            )
        if not 0.0 < self.primary_split < 1.0:
            raise ValueError(f"primary_split must be in (0, 1), got {self.primary_split}")
        if self.dpi <= 0:
            raise ValueError(f"dpi must be positive, got {self.dpi}")

    def px_to_pt(self, pixels: float) -> float:
        """Convert a pixel length to points at this style's dpi."""
        return pixels * 72.0 / self.dpi

    @classmethod
    def from_dict(cls, data: dict) -> "StyleConfig":
        """Create style from the ``style`` section of defaults.yaml.

        Keys not present keep their literal defaults.
        """
        known = cls.__dataclass_fields__
        kwargs = {}
        for key, value in data.items():
            if key not in known:
                raise ValueError(f"Unknown style parameter: {key}")
            kwargs[key] = tuple(value) if isinstance(value, list) else value
        return cls(**kwargs)


DEFAULT_STYLE = StyleConfig()
