"""Pixel layout of the two charts.

Each chart reserves a caption band at the top and label areas left of and
below its plot box. The stopping-power chart is additionally split into a
primary region (the curve) and a secondary strip carrying the muon
kinetic-energy scale.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from bethe_bloch.config.style import DEFAULT_STYLE, StyleConfig
from bethe_bloch.render.transforms import PixelBox


@dataclass(frozen=True)
class ChartLayout:
    """Regions of one chart raster.

    Attributes:
        width, height: Raster size [px]
        caption: Caption band
        primary: Plot box holding the curves
        secondary: Muon energy strip (stopping-power chart only)
    """

    width: int
    height: int
    caption: PixelBox
    primary: PixelBox
    secondary: Optional[PixelBox] = None


def split_vertically(height: int, fraction: float) -> Tuple[int, int]:
    """Split a height into (upper, lower) integer parts, upper ≈ fraction * height."""
    upper = int(round(height * fraction))
    return upper, height - upper


def stopping_power_layout(style: StyleConfig = DEFAULT_STYLE) -> ChartLayout:
    """Layout of the stopping-power chart.

    Raises:
        ValueError: If the chart is too small for its margins
    """
    width, height = style.chart_width, style.chart_height
    primary_height, _ = split_vertically(height, style.primary_split)

    left = style.margin_px + style.stopping_power_label_left_px
    right = width - style.margin_px
    top = style.caption_height_px

    primary = PixelBox(
        left=left,
        top=top,
        width=right - left,
        height=primary_height - style.stopping_power_label_bottom_px - top,
    )
    secondary = PixelBox(
        left=left,
        top=primary_height,
        width=right - left,
        height=height - style.margin_bottom_px - style.secondary_label_bottom_px - primary_height,
    )

    return ChartLayout(
        width=width,
        height=height,
        caption=PixelBox(0, 0, width, style.caption_height_px),
        primary=primary,
        secondary=secondary,
    )


def energy_layout(style: StyleConfig = DEFAULT_STYLE) -> ChartLayout:
    """Layout of the kinetic-energy chart.

    Raises:
        ValueError: If the chart is too small for its margins
    """
    width, height = style.chart_width, style.chart_height

    left = style.margin_px + style.energy_label_left_px
    right = width - style.margin_px
    top = style.caption_height_px
    bottom = height - style.margin_bottom_px - style.energy_label_bottom_px

    return ChartLayout(
        width=width,
        height=height,
        caption=PixelBox(0, 0, width, style.caption_height_px),
        primary=PixelBox(left=left, top=top, width=right - left, height=bottom - top),
    )
