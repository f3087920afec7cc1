"""Interactive Bethe-Bloch chart window.

Usage:
    python -m bethe_bloch.app.viewer
    python -m bethe_bloch.app.viewer --log-level DEBUG
    BETHE_BLOCH_DEFAULTS_PATH=my_defaults.yaml python -m bethe_bloch.app.viewer

The window holds a control panel on the left and the two chart rasters side by
side. Each submitted text box is one input cycle: the edit is clamped by the
ParameterEditor, and a set changed flag triggers the recompute.
"""

import argparse
import logging
from typing import Callable, Dict, List, Tuple

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.widgets import TextBox

from bethe_bloch.app.controls import ParameterEditor
from bethe_bloch.app.orchestrator import InputCycle, RecomputeOrchestrator
from bethe_bloch.config import (
    ChartKind,
    ParameterLimits,
    RecomputePolicy,
    StyleConfig,
    create_default_config,
    get_default,
    get_defaults,
    warn_if_unsafe,
)
from bethe_bloch.config.defaults import DEFAULT_WINDOW_HEIGHT, DEFAULT_WINDOW_WIDTH
from bethe_bloch.config.style import rgb_to_unit
from bethe_bloch.core.constants import PhysicsConstants
from bethe_bloch.render.textures import TextureHandle, TexturePublisher

logger = logging.getLogger(__name__)

WINDOW_TITLE = "Bethe Bloch"
AUTHOR_LINE = "Author: Arkadiusz Żyłkowski"

PANEL_WIDTH_PX = 220
CHART_GAP_PX = 10
ROW_HEIGHT_PX = 34
BOX_HEIGHT_PX = 24


class AxesImageTextureHost:
    """Texture host backed by matplotlib AxesImage panels.

    Each allocated texture takes the next free panel; set_texture replaces the
    image data in place.
    """

    def __init__(self, figure, panels: List):
        self.figure = figure
        self._free = list(panels)
        self.images: Dict[int, object] = {}

    def alloc_texture(self, width: int, height: int) -> TextureHandle:
        if not self._free:
            raise RuntimeError("No free image panel for a new texture")
        axes = self._free.pop(0)
        axes.set_axis_off()
        image = axes.imshow(
            np.zeros((height, width, 4), dtype=np.uint8),
            interpolation="nearest",
            origin="upper",
        )
        handle = TextureHandle(id=len(self.images) + 1, width=width, height=height)
        self.images[handle.id] = image
        return handle

    def set_texture(self, handle: TextureHandle, rgba: np.ndarray) -> None:
        self.images[handle.id].set_data(rgba)
        self.figure.canvas.draw_idle()


class ChartViewer:
    """Window shell wiring the text boxes to the editor and orchestrator."""

    def __init__(
        self,
        editor: ParameterEditor,
        style: StyleConfig,
        constants: PhysicsConstants,
        policy: RecomputePolicy,
    ):
        self.editor = editor
        self.style = style
        self.cycle = InputCycle()
        self.boxes: List[Tuple[TextBox, Callable[[], float], Callable[[float], bool]]] = []
        self._syncing = False

        dpi = style.dpi
        self.figure = plt.figure(
            figsize=(DEFAULT_WINDOW_WIDTH / dpi, DEFAULT_WINDOW_HEIGHT / dpi),
            dpi=dpi,
            facecolor=rgb_to_unit(style.background),
        )
        manager = self.figure.canvas.manager
        if manager is not None:
            manager.set_window_title(WINDOW_TITLE)

        host = AxesImageTextureHost(self.figure, self._chart_panels())
        self.orchestrator = RecomputeOrchestrator(
            editor.config,
            TexturePublisher(host),
            style=style,
            constants=constants,
            policy=policy,
        )
        self._build_controls()

    # -------------------------------------------------------------------------
    # Layout
    # -------------------------------------------------------------------------

    def _fraction(self, left: float, top: float, width: float, height: float) -> List[float]:
        """Pixel rectangle (top-left origin) as figure fractions."""
        return [
            left / DEFAULT_WINDOW_WIDTH,
            1.0 - (top + height) / DEFAULT_WINDOW_HEIGHT,
            width / DEFAULT_WINDOW_WIDTH,
            height / DEFAULT_WINDOW_HEIGHT,
        ]

    def _chart_panels(self) -> List:
        width, height = self.style.chart_width, self.style.chart_height
        top = (DEFAULT_WINDOW_HEIGHT - height) / 2.0
        panels = []
        for index in range(len(ChartKind)):
            left = PANEL_WIDTH_PX + CHART_GAP_PX + index * width
            panels.append(self.figure.add_axes(self._fraction(left, top, width, height)))
        return panels

    def _heading(self, text: str, top: float):
        self.figure.text(
            (PANEL_WIDTH_PX / 2.0) / DEFAULT_WINDOW_WIDTH,
            1.0 - top / DEFAULT_WINDOW_HEIGHT,
            text,
            ha="center",
            va="top",
            weight="bold",
            color=rgb_to_unit(self.style.foreground),
        )

    def _add_box(self, label: str, left: float, top: float, getter, setter):
        axes = self.figure.add_axes(self._fraction(left, top, 60, BOX_HEIGHT_PX))
        box = TextBox(axes, label, initial=f"{getter():g}")
        box.label.set_color(rgb_to_unit(self.style.foreground))
        box.on_submit(lambda text, setter=setter: self._on_submit(text, setter))
        self.boxes.append((box, getter, setter))

    def _add_axis_rows(self, kind: ChartKind, top: float) -> float:
        editor = self.editor
        for axis in ("x", "y"):
            for column, bound in enumerate(("min", "max")):
                self._add_box(
                    f"{axis} {bound}: ",
                    60 + column * 110,
                    top,
                    lambda axis=axis, bound=bound: getattr(getattr(editor.config.plot(kind), axis), bound),
                    lambda value, axis=axis, bound=bound: editor.set_axis_bound(kind, axis, bound, value),
                )
            top += ROW_HEIGHT_PX
        return top

    def _build_controls(self):
        editor = self.editor
        top = 12.0

        self._heading("Bethe Bloch controls", top)
        top += ROW_HEIGHT_PX
        self._add_box("A: ", 60, top, lambda: editor.config.material.a, editor.set_mass_number)
        self._add_box("Z: ", 170, top, lambda: editor.config.material.z_big, editor.set_atomic_number)
        top += ROW_HEIGHT_PX
        top = self._add_axis_rows(ChartKind.STOPPING_POWER, top)

        top += ROW_HEIGHT_PX / 2.0
        self._heading("E(βγ) controls", top)
        top += ROW_HEIGHT_PX
        self._add_axis_rows(ChartKind.ENERGY, top)

        self.figure.text(
            8 / DEFAULT_WINDOW_WIDTH,
            8 / DEFAULT_WINDOW_HEIGHT,
            AUTHOR_LINE,
            ha="left",
            va="bottom",
            color=rgb_to_unit(self.style.foreground),
        )

    # -------------------------------------------------------------------------
    # Input cycle
    # -------------------------------------------------------------------------

    def _on_submit(self, text: str, setter: Callable[[float], bool]):
        if self._syncing:
            return

        try:
            value = float(text)
        except ValueError:
            logger.warning(f"Ignoring non-numeric input {text!r}")
            value = None

        if value is not None:
            self.cycle.record(setter(value))

        report = self.orchestrator.apply(self.editor.config, self.cycle.reset())
        if report.attempted:
            logger.info(
                f"Re-rendered {[k.value for k in report.rendered]}, "
                f"failed {[k.value for k in report.failed]}"
            )
        self._sync_boxes()

    def _sync_boxes(self):
        """Show the clamped values; set_val re-fires on_submit, hence the guard."""
        self._syncing = True
        try:
            for box, getter, _ in self.boxes:
                shown = f"{getter():g}"
                if box.text != shown:
                    box.set_val(shown)
        finally:
            self._syncing = False

    def show(self):
        report = self.orchestrator.start()
        if not report.ok:
            logger.error(f"Initial render failed for {[k.value for k in report.failed]}")
        plt.show()


def main() -> None:
    """Viewer entry point."""
    parser = argparse.ArgumentParser(
        description="Interactive Bethe-Bloch stopping power and kinetic energy charts",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    defaults = get_defaults()
    config = create_default_config()
    warn_if_unsafe(config)

    viewer = ChartViewer(
        ParameterEditor(config, ParameterLimits.from_dict(defaults.get("limits", {}))),
        style=StyleConfig.from_dict(defaults.get("style", {})),
        constants=PhysicsConstants.from_dict(defaults.get("physics", {})),
        policy=RecomputePolicy(get_default("recompute.policy", RecomputePolicy.ALWAYS_BOTH.value)),
    )
    viewer.show()


if __name__ == "__main__":
    main()
