"""Recompute orchestration.

Widgets report a changed flag per edit; an InputCycle ORs them together and,
once per event-loop iteration, the orchestrator turns a set flag into fresh
render passes. A pass is resample, rasterize, publish for one chart; the two
charts never depend on each other.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional

from bethe_bloch.config.chart_config import ChartConfig
from bethe_bloch.config.enums import ChartKind, RecomputePolicy
from bethe_bloch.config.style import DEFAULT_STYLE, StyleConfig
from bethe_bloch.config.validation import validate_config
from bethe_bloch.core.constants import DEFAULT_CONSTANTS, PhysicsConstants
from bethe_bloch.core.kinematics import DomainError
from bethe_bloch.render.rasterizer import ChartRasterizer, RasterBuffer, create_rasterizer
from bethe_bloch.render.textures import TexturePublisher

logger = logging.getLogger(__name__)


class InputCycle:
    """Accumulates the changed flags of one input cycle with logical OR."""

    def __init__(self):
        self.changed = False

    def record(self, changed: bool) -> bool:
        """Record one widget's flag and pass it through."""
        self.changed = self.changed or bool(changed)
        return changed

    def reset(self) -> bool:
        """End the cycle, returning whether any widget changed."""
        changed = self.changed
        self.changed = False
        return changed


@dataclass
class RenderReport:
    """Outcome of one apply/start call.

    Attributes:
        rendered: Charts whose textures were republished
        failed: Charts whose pass aborted, with the error message
    """

    rendered: List[ChartKind] = field(default_factory=list)
    failed: Dict[ChartKind, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failed

    @property
    def attempted(self) -> List[ChartKind]:
        return self.rendered + list(self.failed)


def affected_charts(old: Optional[ChartConfig], new: ChartConfig) -> List[ChartKind]:
    """Charts whose inputs differ between two snapshots.

    Material parameters only feed the stopping-power chart.
    """
    if old is None:
        return list(ChartKind)

    affected = []
    if old.material != new.material or old.stopping_power != new.stopping_power:
        affected.append(ChartKind.STOPPING_POWER)
    if old.energy != new.energy:
        affected.append(ChartKind.ENERGY)
    return affected


class RecomputeOrchestrator:
    """Owns the current snapshot and drives the per-chart render passes.

    Example:
        >>> publisher = TexturePublisher(InMemoryTextureHost())
        >>> orchestrator = RecomputeOrchestrator(create_default_config(), publisher)
        >>> orchestrator.start().rendered
        [<ChartKind.STOPPING_POWER: 'stopping_power'>, <ChartKind.ENERGY: 'energy'>]
    """

    def __init__(
        self,
        config: ChartConfig,
        publisher: TexturePublisher,
        style: StyleConfig = DEFAULT_STYLE,
        constants: PhysicsConstants = DEFAULT_CONSTANTS,
        policy: RecomputePolicy = RecomputePolicy.ALWAYS_BOTH,
        rasterizers: Optional[Mapping[ChartKind, ChartRasterizer]] = None,
    ):
        validate_config(config)
        self.config = config
        self.publisher = publisher
        self.policy = policy
        if rasterizers is None:
            rasterizers = {kind: create_rasterizer(kind, style, constants) for kind in ChartKind}
        self.rasterizers = dict(rasterizers)

    def start(self) -> RenderReport:
        """Allocate both chart textures and publish the initial renders."""
        for kind in ChartKind:
            layout = self.rasterizers[kind].layout()
            self.publisher.allocate(kind, layout.width, layout.height)
        return self._render(list(ChartKind))

    def apply(self, config: ChartConfig, changed: bool) -> RenderReport:
        """Apply the result of one input cycle.

        Args:
            config: Snapshot after the cycle's edits
            changed: OR of the cycle's changed flags

        Returns:
            Report of the passes run; empty if nothing changed

        Raises:
            ConfigurationError: If the snapshot is invalid; nothing is rendered
        """
        if not changed:
            return RenderReport()

        validate_config(config)
        previous, self.config = self.config, config

        if self.policy is RecomputePolicy.AFFECTED_ONLY:
            kinds = affected_charts(previous, config)
        else:
            kinds = list(ChartKind)

        return self._render(kinds)

    def render_chart(self, kind: ChartKind) -> RasterBuffer:
        """Run one chart's pass on the current snapshot and publish it.

        Raises:
            DomainError: If the chart cannot be rendered; the texture is left untouched
        """
        buffer = self.rasterizers[kind].render(self.config)
        self.publisher.publish(kind, buffer)
        return buffer

    def _render(self, kinds: List[ChartKind]) -> RenderReport:
        report = RenderReport()
        for kind in kinds:
            try:
                self.render_chart(kind)
            except DomainError as e:
                logger.error(f"{kind.value} chart not updated: {e}")
                report.failed[kind] = str(e)
            else:
                report.rendered.append(kind)
        return report
