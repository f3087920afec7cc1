"""Chart rasterization into RGB byte buffers.

Each render call builds a fresh matplotlib Figure on an Agg canvas sized to
the chart in pixels, draws the axes furniture and the curves, and copies the
canvas into a RasterBuffer. Nothing is kept between calls, so the same
configuration always produces the same bytes.

Curves are converted to pixel coordinates with our own transforms
(render.transforms) and stroked as display-space polylines clipped to the plot
box; matplotlib axes only provide ticks, gridlines and labels.
"""

import logging
from dataclasses import dataclass
from typing import List, Tuple

import numpy as np
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure
from matplotlib.lines import Line2D
from matplotlib.transforms import IdentityTransform

from bethe_bloch.config.chart_config import ChartConfig, PlotConfig
from bethe_bloch.config.defaults import SECONDARY_AXIS_Y_MAX, SECONDARY_AXIS_Y_MIN
from bethe_bloch.config.enums import AxisScale, ChartKind
from bethe_bloch.config.style import DEFAULT_STYLE, StyleConfig, rgb_to_unit
from bethe_bloch.core.constants import DEFAULT_CONSTANTS, PhysicsConstants
from bethe_bloch.core.particles import PARTICLES
from bethe_bloch.core.sampling import (
    Series,
    energy_series,
    muon_energy_range,
    stopping_power_series,
)
from bethe_bloch.render.layout import ChartLayout, energy_layout, stopping_power_layout
from bethe_bloch.render.transforms import ChartTransform, PixelBox

logger = logging.getLogger(__name__)

STOPPING_POWER_CAPTION = "Bethe-Bloch"
STOPPING_POWER_Y_LABEL = "dE/dx [MeV·cm²/g]"
BETA_GAMMA_LABEL = "βγ"
MUON_ENERGY_LABEL = "Muon kinetic energy [GeV]"
ENERGY_CAPTION = "Energy and βγ relation"
ENERGY_Y_LABEL = "E_k [MeV]"


@dataclass(frozen=True, eq=False)
class RasterBuffer:
    """Flat RGB pixel buffer, row-major from the top-left corner.

    Attributes:
        width, height: Size [px]
        pixels: uint8 array of length width * height * 3
    """

    width: int
    height: int
    pixels: np.ndarray

    def __post_init__(self):
        """Validate buffer."""
        expected = self.width * self.height * 3
        if self.pixels.dtype != np.uint8 or self.pixels.shape != (expected,):
            raise ValueError(
                f"RasterBuffer of {self.width}x{self.height} needs {expected} uint8 values, "
                f"got shape {self.pixels.shape} dtype {self.pixels.dtype}"
            )

    @classmethod
    def from_rgba(cls, rgba: np.ndarray) -> "RasterBuffer":
        """Copy an (H, W, 4) RGBA image, dropping alpha."""
        height, width = rgba.shape[:2]
        pixels = np.ascontiguousarray(rgba[..., :3], dtype=np.uint8).reshape(-1)
        return cls(width=width, height=height, pixels=pixels.copy())

    def as_image(self) -> np.ndarray:
        """(H, W, 3) view of the pixels."""
        return self.pixels.reshape(self.height, self.width, 3)

    def pixel(self, x: int, y: int) -> Tuple[int, int, int]:
        """RGB triple at column x, row y."""
        r, g, b = self.as_image()[y, x]
        return int(r), int(g), int(b)

    def tobytes(self) -> bytes:
        return self.pixels.tobytes()


class ChartRasterizer:
    """Base class for the two chart renderers.

    Subclasses provide the layout, the sampled series and the chart-specific
    axes furniture; ``render`` runs the shared pipeline.
    """

    kind: ChartKind

    def __init__(
        self,
        style: StyleConfig = DEFAULT_STYLE,
        constants: PhysicsConstants = DEFAULT_CONSTANTS,
    ):
        self.style = style
        self.constants = constants

    def layout(self) -> ChartLayout:
        raise NotImplementedError

    def sample(self, config: ChartConfig) -> List[Series]:
        raise NotImplementedError

    def render(self, config: ChartConfig) -> RasterBuffer:
        """Sample and rasterize one chart.

        Raises:
            DomainError: If an axis range is outside its transform's domain
                or a curve has no drawable samples
        """
        return self.rasterize(config, self.sample(config))

    def rasterize(self, config: ChartConfig, series: List[Series]) -> RasterBuffer:
        """Rasterize already-sampled series.

        Raises:
            DomainError: If an axis range is outside its transform's domain
        """
        layout = self.layout()
        plot = config.plot(self.kind)
        transform = ChartTransform.from_plot(plot, layout.primary)

        figure, canvas = self._new_figure(layout)
        axes = self._add_axes(figure, layout, layout.primary, plot)
        self._decorate(figure, axes, layout, config)

        for curve in series:
            self._stroke(figure, axes, layout, transform, curve)

        canvas.draw()
        rgba = np.asarray(canvas.buffer_rgba())
        if rgba.shape[:2] != (layout.height, layout.width):
            raise RuntimeError(
                f"Canvas is {rgba.shape[1]}x{rgba.shape[0]}, expected {layout.width}x{layout.height}"
            )

        logger.debug(f"Rendered {self.kind.value} chart with {len(series)} series")
        return RasterBuffer.from_rgba(rgba)

    def _decorate(self, figure: Figure, axes, layout: ChartLayout, config: ChartConfig):
        raise NotImplementedError

    # -------------------------------------------------------------------------
    # Shared drawing helpers
    # -------------------------------------------------------------------------

    def _new_figure(self, layout: ChartLayout) -> Tuple[Figure, FigureCanvasAgg]:
        dpi = self.style.dpi
        width_in = layout.width / dpi
        height_in = layout.height / dpi
        # Agg truncates width * dpi; nudge the size up when that loses a pixel
        if int(width_in * dpi) != layout.width:
            width_in = np.nextafter(width_in, np.inf)
        if int(height_in * dpi) != layout.height:
            height_in = np.nextafter(height_in, np.inf)

        figure = Figure(
            figsize=(width_in, height_in),
            dpi=dpi,
            facecolor=rgb_to_unit(self.style.background),
        )
        canvas = FigureCanvasAgg(figure)
        return figure, canvas

    def _add_axes(self, figure: Figure, layout: ChartLayout, box: PixelBox, plot: PlotConfig):
        style = self.style
        foreground = rgb_to_unit(style.foreground)
        label_pt = style.px_to_pt(style.label_font_px)

        axes = figure.add_axes(box.to_figure_fraction(layout.width, layout.height))
        axes.set_facecolor(rgb_to_unit(style.background))

        if plot.x_scale is AxisScale.LOGARITHMIC:
            axes.set_xscale("log")
        axes.set_xlim(plot.x.min, plot.x.max)
        axes.set_ylim(plot.y.min, plot.y.max)

        for spine in axes.spines.values():
            spine.set_color(foreground)
        axes.tick_params(colors=foreground, labelsize=label_pt, which="both")
        axes.grid(True, which="major", color=foreground, alpha=style.grid_alpha)
        axes.set_axisbelow(True)
        return axes

    def _set_labels(self, axes, x_label: str, y_label: str):
        style = self.style
        foreground = rgb_to_unit(style.foreground)
        label_pt = style.px_to_pt(style.label_font_px)
        axes.set_xlabel(x_label, color=foreground, fontsize=label_pt, family=style.font_family)
        axes.set_ylabel(y_label, color=foreground, fontsize=label_pt, family=style.font_family)

    def _caption(self, figure: Figure, layout: ChartLayout, text: str):
        style = self.style
        box = layout.caption
        center_y = box.top + box.height / 2.0
        figure.text(
            0.5,
            1.0 - center_y / layout.height,
            text,
            ha="center",
            va="center",
            color=rgb_to_unit(style.foreground),
            fontsize=style.px_to_pt(style.caption_font_px),
            family=style.font_family,
        )

    def _stroke(self, figure: Figure, axes, layout: ChartLayout, transform: ChartTransform, curve: Series):
        px, py = transform.to_pixels(curve.x, curve.y)
        line = Line2D(
            px,
            layout.height - py,
            transform=IdentityTransform(),
            color=rgb_to_unit(curve.color),
            linewidth=self.style.px_to_pt(self.style.stroke_width_px),
            solid_joinstyle="round",
            solid_capstyle="butt",
        )
        line.set_clip_box(axes.bbox)
        figure.add_artist(line)


class StoppingPowerRasterizer(ChartRasterizer):
    """Bethe-Bloch dE/dx over a logarithmic βγ axis with a muon energy strip."""

    kind = ChartKind.STOPPING_POWER

    def layout(self) -> ChartLayout:
        return stopping_power_layout(self.style)

    def sample(self, config: ChartConfig) -> List[Series]:
        return [stopping_power_series(config, self.constants, color=self.style.stopping_power_color)]

    def _decorate(self, figure: Figure, axes, layout: ChartLayout, config: ChartConfig):
        plot = config.stopping_power
        self._set_labels(axes, BETA_GAMMA_LABEL, STOPPING_POWER_Y_LABEL)
        self._caption(figure, layout, STOPPING_POWER_CAPTION)
        self._secondary_axis(figure, layout, plot)

    def _secondary_axis(self, figure: Figure, layout: ChartLayout, plot: PlotConfig):
        """Muon kinetic-energy scale; a log-scaled x axis with no data and no y axis."""
        style = self.style
        foreground = rgb_to_unit(style.foreground)
        label_pt = style.px_to_pt(style.label_font_px)
        lo, hi = muon_energy_range(plot.x, self.constants)

        strip = figure.add_axes(layout.secondary.to_figure_fraction(layout.width, layout.height))
        strip.set_facecolor(rgb_to_unit(style.background))
        strip.set_xscale("log")
        strip.set_xlim(lo, hi)
        strip.set_ylim(SECONDARY_AXIS_Y_MIN, SECONDARY_AXIS_Y_MAX)
        strip.get_yaxis().set_visible(False)
        for name, spine in strip.spines.items():
            spine.set_color(foreground)
            spine.set_visible(name == "bottom")
        strip.tick_params(colors=foreground, labelsize=label_pt, which="both")
        strip.grid(True, which="major", axis="x", color=foreground, alpha=style.grid_alpha)
        strip.set_xlabel(MUON_ENERGY_LABEL, color=foreground, fontsize=label_pt, family=style.font_family)


class EnergyRasterizer(ChartRasterizer):
    """Kinetic energy vs βγ for every catalog particle, with a legend."""

    kind = ChartKind.ENERGY

    def layout(self) -> ChartLayout:
        return energy_layout(self.style)

    def sample(self, config: ChartConfig) -> List[Series]:
        return energy_series(config, PARTICLES)

    def _decorate(self, figure: Figure, axes, layout: ChartLayout, config: ChartConfig):
        style = self.style
        self._set_labels(axes, BETA_GAMMA_LABEL, ENERGY_Y_LABEL)
        self._caption(figure, layout, ENERGY_CAPTION)

        # Curves are figure artists; a figure legend keeps the box above them
        handles = [
            Line2D(
                [], [],
                color=rgb_to_unit(particle.color),
                linewidth=style.px_to_pt(style.stroke_width_px),
                label=particle.label,
            )
            for particle in PARTICLES
        ]
        legend = figure.legend(
            handles=handles,
            loc="upper left",
            bbox_to_anchor=(0.0, 1.0),
            bbox_transform=axes.transAxes,
            facecolor=rgb_to_unit(style.legend_background),
            edgecolor=rgb_to_unit(style.foreground),
            framealpha=1.0,
            fontsize=style.px_to_pt(style.label_font_px),
        )
        for text in legend.get_texts():
            text.set_color(rgb_to_unit(style.foreground))


RASTERIZERS = {
    ChartKind.STOPPING_POWER: StoppingPowerRasterizer,
    ChartKind.ENERGY: EnergyRasterizer,
}


def create_rasterizer(
    kind: ChartKind,
    style: StyleConfig = DEFAULT_STYLE,
    constants: PhysicsConstants = DEFAULT_CONSTANTS,
) -> ChartRasterizer:
    """Build the rasterizer of one chart."""
    return RASTERIZERS[kind](style=style, constants=constants)
