"""Parameter-editing boundary.

Every edit goes through one clamp-and-validate step: the requested value is
clamped into its allowed range, the resulting snapshot replaces the current
one, and the call reports whether anything actually changed. Invalid snapshots
never leave this boundary.
"""

import logging
import math
from dataclasses import replace
from typing import Optional

from bethe_bloch.config.chart_config import ChartConfig, ParameterLimits, clamp_value
from bethe_bloch.config.enums import AxisScale, ChartKind, SamplingType

logger = logging.getLogger(__name__)

BOUNDS = ("min", "max")
AXES = ("x", "y")


class ParameterEditor:
    """Holds the editable ChartConfig snapshot.

    Example:
        >>> editor = ParameterEditor(ChartConfig())
        >>> editor.set_mass_number(500.0)
        True
        >>> editor.config.material.a
        300.0
    """

    def __init__(self, config: ChartConfig, limits: Optional[ParameterLimits] = None):
        self.config = config
        self.limits = limits if limits is not None else ParameterLimits()

    def _commit(self, config: ChartConfig) -> bool:
        if config == self.config:
            return False
        self.config = config
        return True

    def set_mass_number(self, value: float) -> bool:
        """Set A, clamped to [a_min, a_max]. Returns the changed flag."""
        value = float(value)
        if math.isnan(value):
            return False
        a = clamp_value(value, self.limits.a_min, self.limits.a_max)
        return self._commit(self.config.with_material(a=a))

    def set_atomic_number(self, value: float) -> bool:
        """Set Z, truncated to an integer and clamped to [z_min, z_max]."""
        value = float(value)
        if math.isnan(value):
            return False
        z_big = int(clamp_value(value, self.limits.z_min, self.limits.z_max))
        return self._commit(self.config.with_material(z_big=z_big))

    def set_axis_bound(self, chart: ChartKind, axis: str, bound: str, value: float) -> bool:
        """Set one bound of one axis.

        The value is clamped so the axis keeps its minimum gap and stays
        inside its floor and ceiling; an edit that cannot be made valid is
        dropped.

        Args:
            chart: Chart owning the axis
            axis: 'x' or 'y'
            bound: 'min' or 'max'
            value: Requested bound

        Returns:
            True if the snapshot changed
        """
        if axis not in AXES:
            raise ValueError(f"axis must be one of {AXES}, got {axis!r}")
        if bound not in BOUNDS:
            raise ValueError(f"bound must be one of {BOUNDS}, got {bound!r}")

        plot = self.config.plot(chart)
        current = getattr(plot, axis)
        positive = axis == "x" and (
            plot.x_scale is AxisScale.LOGARITHMIC
            or plot.sampling.sampling_type is SamplingType.LOGARITHMIC
        )

        limits = self.limits.axis_limits(chart, axis)
        if bound == "min":
            clamped = limits.clamp(current, new_min=value, positive=positive)
        else:
            clamped = limits.clamp(current, new_max=value, positive=positive)

        applied = getattr(clamped, bound)
        if applied != float(value):
            logger.debug(f"{chart.value}.{axis}.{bound}: requested {value}, applied {applied}")

        return self._commit(self.config.with_plot(chart, replace(plot, **{axis: clamped})))
