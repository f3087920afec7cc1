"""Chart Configuration - Single Source of Truth (SSOT)

This module provides the configuration dataclasses for both charts.
ALL parameters that influence a render pass must flow through ChartConfig.

The configuration is a plain value type: every dataclass is frozen, edits
produce a new snapshot via ``dataclasses.replace`` and two snapshots can be
compared with ``==``.

Import Policy:
    from bethe_bloch.config.chart_config import ChartConfig, AxisRange, AxisLimits

DO NOT use: from bethe_bloch.config.chart_config import *
"""

import math
from dataclasses import dataclass, field, replace
from typing import Optional

from bethe_bloch.config.defaults import (
    DEFAULT_A,
    DEFAULT_A_MAX,
    DEFAULT_A_MIN,
    DEFAULT_AXIS_CEILING,
    DEFAULT_AXIS_FLOOR,
    DEFAULT_BETHE_FORMULA,
    DEFAULT_CHARGE,
    DEFAULT_DELTA,
    DEFAULT_ENERGY_MAX_SAMPLES,
    DEFAULT_ENERGY_MIN_GAP,
    DEFAULT_ENERGY_SAMPLES_PER_UNIT,
    DEFAULT_ENERGY_SAMPLING,
    DEFAULT_ENERGY_X_MAX,
    DEFAULT_ENERGY_X_MIN,
    DEFAULT_ENERGY_X_SCALE,
    DEFAULT_ENERGY_Y_MAX,
    DEFAULT_ENERGY_Y_MIN,
    DEFAULT_STOPPING_POWER_MAX_SAMPLES,
    DEFAULT_STOPPING_POWER_MIN_GAP,
    DEFAULT_STOPPING_POWER_SAMPLES_PER_UNIT,
    DEFAULT_STOPPING_POWER_SAMPLING,
    DEFAULT_STOPPING_POWER_X_FLOOR,
    DEFAULT_STOPPING_POWER_X_MAX,
    DEFAULT_STOPPING_POWER_X_MIN,
    DEFAULT_STOPPING_POWER_X_SCALE,
    DEFAULT_STOPPING_POWER_Y_MAX,
    DEFAULT_STOPPING_POWER_Y_MIN,
    DEFAULT_T_MAX,
    DEFAULT_Z,
    DEFAULT_Z_MAX,
    DEFAULT_Z_MIN,
)
from bethe_bloch.config.enums import AxisScale, BetheFormula, ChartKind, SamplingType


def clamp_value(value: float, lo: float, hi: float) -> float:
    """Clamp value into [lo, hi]; lo wins if the interval is empty."""
    return max(lo, min(value, hi))


@dataclass(frozen=True)
class AxisRange:
    """A single axis range {min, max}.

    Invariant: min < max (and min > 0 on a logarithmic axis). The range does
    not enforce this itself; ``validate`` reports violations and AxisLimits.clamp
    keeps edits inside it.
    """

    min: float
    max: float

    @property
    def span(self) -> float:
        return self.max - self.min

    def validate(self, name: str, positive: bool = False) -> list[str]:
        """Validate the range.

        Args:
            name: Axis name used in error messages
            positive: Require min > 0 (logarithmic axes)

        Returns:
            List of error messages (empty if valid)
        """
        errors = []

        if not (math.isfinite(self.min) and math.isfinite(self.max)):
            errors.append(f"{name}: bounds must be finite, got [{self.min}, {self.max}]")
            return errors

        if self.max <= self.min:
            errors.append(f"{name}: max ({self.max}) must be > min ({self.min})")

        if positive and self.min <= 0:
            errors.append(f"{name}: min ({self.min}) must be > 0 on a logarithmic axis")

        return errors


@dataclass(frozen=True)
class AxisLimits:
    """Clamp bounds applied to an axis at the input boundary.

    Attributes:
        floor: Lowest allowed min
        ceiling: Highest allowed max
        min_gap: Smallest allowed max - min
    """

    floor: float = DEFAULT_AXIS_FLOOR
    ceiling: float = DEFAULT_AXIS_CEILING
    min_gap: float = DEFAULT_ENERGY_MIN_GAP

    def clamp(
        self,
        axis: AxisRange,
        new_min: Optional[float] = None,
        new_max: Optional[float] = None,
        positive: bool = False,
    ) -> AxisRange:
        """Clamp an edit of one or both bounds and validate the result.

        Editing min clamps it to [floor, max - min_gap]; editing max clamps it
        to [min + min_gap, ceiling]. Editing both clamps min first. A result
        that still violates the axis invariant (NaN input, gap lost to
        rounding) is rejected and the original axis is returned.

        Args:
            axis: Current range
            new_min: Requested min, or None to keep it
            new_max: Requested max, or None to keep it
            positive: Require min > 0 (logarithmic axes)

        Returns:
            The clamped range, or ``axis`` if the edit was rejected
        """
        lo = axis.min if new_min is None else float(new_min)
        hi = axis.max if new_max is None else float(new_max)
        if math.isnan(lo) or math.isnan(hi):
            return axis

        if new_min is not None and new_max is None:
            lo = clamp_value(lo, self.floor, hi - self.min_gap)
        elif new_max is not None and new_min is None:
            hi = clamp_value(hi, lo + self.min_gap, self.ceiling)
        else:
            lo = clamp_value(lo, self.floor, self.ceiling - self.min_gap)
            hi = clamp_value(hi, lo + self.min_gap, self.ceiling)

        candidate = AxisRange(lo, hi)
        if candidate.validate("axis", positive=positive):
            return axis
        return candidate


@dataclass(frozen=True)
class SamplingConfig:
    """How a chart's x range is subdivided.

    Attributes:
        sampling_type: Linear or geometric spacing
        samples_per_unit: Intervals per unit of x (sample density)
        max_samples: Upper bound on the interval count
    """

    sampling_type: SamplingType = SamplingType.LINEAR
    samples_per_unit: float = DEFAULT_ENERGY_SAMPLES_PER_UNIT
    max_samples: int = DEFAULT_ENERGY_MAX_SAMPLES

    def validate(self, name: str) -> list[str]:
        errors = []
        if not self.samples_per_unit > 0:
            errors.append(f"{name}: samples_per_unit must be > 0, got {self.samples_per_unit}")
        if self.max_samples < 1:
            errors.append(f"{name}: max_samples must be >= 1, got {self.max_samples}")
        return errors


@dataclass(frozen=True)
class PlotConfig:
    """Axis ranges and sampling for one chart.

    Attributes:
        x, y: Axis ranges
        x_scale: Transform of the x axis (y is always linear)
        sampling: Subdivision of the x range
    """

    x: AxisRange
    y: AxisRange
    x_scale: AxisScale = AxisScale.LINEAR
    sampling: SamplingConfig = field(default_factory=SamplingConfig)

    def validate(self, name: str) -> list[str]:
        """Validate the plot configuration.

        Returns:
            List of error messages (empty if valid)
        """
        errors = []
        errors.extend(self.x.validate(f"{name}.x", positive=self.x_scale is AxisScale.LOGARITHMIC))
        errors.extend(self.y.validate(f"{name}.y"))
        errors.extend(self.sampling.validate(f"{name}.sampling"))

        if self.sampling.sampling_type is SamplingType.LOGARITHMIC and self.x.min <= 0:
            errors.append(f"{name}: logarithmic sampling requires x.min > 0, got {self.x.min}")

        return errors


@dataclass(frozen=True)
class MaterialConfig:
    """Absorber and projectile parameters of the stopping-power formula.

    Attributes:
        a: Mass number A [u]
        z_big: Atomic number Z
        charge: Effective projectile charge z
        t_max: Maximum transferable energy [MeV]
        delta: Density-effect correction
        formula: Stopping-power formula variant
    """

    a: float = DEFAULT_A
    z_big: int = DEFAULT_Z
    charge: float = DEFAULT_CHARGE
    t_max: float = DEFAULT_T_MAX
    delta: float = DEFAULT_DELTA
    formula: BetheFormula = BetheFormula(DEFAULT_BETHE_FORMULA)

    def validate(self) -> list[str]:
        errors = []

        if not self.a > 0:
            errors.append(f"A must be > 0, got {self.a}")
        if int(self.z_big) != self.z_big or self.z_big < 1:
            errors.append(f"Z must be an integer >= 1, got {self.z_big}")
        if not math.isfinite(self.charge):
            errors.append(f"charge must be finite, got {self.charge}")
        if not math.isfinite(self.delta):
            errors.append(f"delta must be finite, got {self.delta}")
        if self.formula is BetheFormula.PDG and not self.t_max > 0:
            errors.append(f"t_max must be > 0 for the PDG formula, got {self.t_max}")

        return errors


def default_stopping_power_plot() -> PlotConfig:
    return PlotConfig(
        x=AxisRange(DEFAULT_STOPPING_POWER_X_MIN, DEFAULT_STOPPING_POWER_X_MAX),
        y=AxisRange(DEFAULT_STOPPING_POWER_Y_MIN, DEFAULT_STOPPING_POWER_Y_MAX),
        x_scale=AxisScale(DEFAULT_STOPPING_POWER_X_SCALE),
        sampling=SamplingConfig(
            sampling_type=SamplingType(DEFAULT_STOPPING_POWER_SAMPLING),
            samples_per_unit=DEFAULT_STOPPING_POWER_SAMPLES_PER_UNIT,
            max_samples=DEFAULT_STOPPING_POWER_MAX_SAMPLES,
        ),
    )


def default_energy_plot() -> PlotConfig:
    return PlotConfig(
        x=AxisRange(DEFAULT_ENERGY_X_MIN, DEFAULT_ENERGY_X_MAX),
        y=AxisRange(DEFAULT_ENERGY_Y_MIN, DEFAULT_ENERGY_Y_MAX),
        x_scale=AxisScale(DEFAULT_ENERGY_X_SCALE),
        sampling=SamplingConfig(
            sampling_type=SamplingType(DEFAULT_ENERGY_SAMPLING),
            samples_per_unit=DEFAULT_ENERGY_SAMPLES_PER_UNIT,
            max_samples=DEFAULT_ENERGY_MAX_SAMPLES,
        ),
    )


@dataclass(frozen=True)
class ChartConfig:
    """Complete render configuration (SSOT).

    Example:
        >>> config = ChartConfig()
        >>> config.validate()
        []
        >>> wider = config.with_plot(
        ...     ChartKind.ENERGY,
        ...     replace(config.energy, x=AxisRange(0.0, 10.0)),
        ... )

    Attributes:
        material: Stopping-power formula inputs
        stopping_power: Axes and sampling of the stopping-power chart
        energy: Axes and sampling of the kinetic-energy chart
    """

    material: MaterialConfig = field(default_factory=MaterialConfig)
    stopping_power: PlotConfig = field(default_factory=default_stopping_power_plot)
    energy: PlotConfig = field(default_factory=default_energy_plot)

    def plot(self, kind: ChartKind) -> PlotConfig:
        """Return the plot configuration of one chart."""
        if kind is ChartKind.STOPPING_POWER:
            return self.stopping_power
        return self.energy

    def with_plot(self, kind: ChartKind, plot: PlotConfig) -> "ChartConfig":
        """Return a new snapshot with one chart's plot configuration replaced."""
        if kind is ChartKind.STOPPING_POWER:
            return replace(self, stopping_power=plot)
        return replace(self, energy=plot)

    def with_material(self, **changes) -> "ChartConfig":
        """Return a new snapshot with material fields replaced."""
        return replace(self, material=replace(self.material, **changes))

    def validate(self) -> list[str]:
        """Validate the complete configuration.

        Returns:
            List of error messages (empty if valid)
        """
        errors = []
        errors.extend(self.material.validate())
        errors.extend(self.stopping_power.validate(ChartKind.STOPPING_POWER.value))
        errors.extend(self.energy.validate(ChartKind.ENERGY.value))
        return errors

    def to_dict(self) -> dict:
        """Convert configuration to the defaults.yaml layout."""

        def plot_dict(plot: PlotConfig) -> dict:
            return {
                "x_min": plot.x.min,
                "x_max": plot.x.max,
                "y_min": plot.y.min,
                "y_max": plot.y.max,
                "x_scale": plot.x_scale.value,
                "sampling": {
                    "type": plot.sampling.sampling_type.value,
                    "samples_per_unit": plot.sampling.samples_per_unit,
                    "max_samples": plot.sampling.max_samples,
                },
            }

        return {
            "material": {
                "a": self.material.a,
                "z_big": self.material.z_big,
                "charge": self.material.charge,
                "t_max": self.material.t_max,
                "delta": self.material.delta,
                "formula": self.material.formula.value,
            },
            ChartKind.STOPPING_POWER.value: plot_dict(self.stopping_power),
            ChartKind.ENERGY.value: plot_dict(self.energy),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ChartConfig":
        """Create configuration from a dictionary in the defaults.yaml layout.

        Missing keys fall back to the literals in defaults.py.
        """
        material_data = data.get("material", {})

        def plot_from(section: dict, fallback: PlotConfig) -> PlotConfig:
            sampling_data = section.get("sampling", {})
            return PlotConfig(
                x=AxisRange(
                    float(section.get("x_min", fallback.x.min)),
                    float(section.get("x_max", fallback.x.max)),
                ),
                y=AxisRange(
                    float(section.get("y_min", fallback.y.min)),
                    float(section.get("y_max", fallback.y.max)),
                ),
                x_scale=AxisScale(section.get("x_scale", fallback.x_scale.value)),
                sampling=SamplingConfig(
                    sampling_type=SamplingType(
                        sampling_data.get("type", fallback.sampling.sampling_type.value),
                    ),
                    samples_per_unit=float(
                        sampling_data.get("samples_per_unit", fallback.sampling.samples_per_unit),
                    ),
                    max_samples=int(sampling_data.get("max_samples", fallback.sampling.max_samples)),
                ),
            )

        material = MaterialConfig(
            a=float(material_data.get("a", DEFAULT_A)),
            z_big=int(material_data.get("z_big", DEFAULT_Z)),
            charge=float(material_data.get("charge", DEFAULT_CHARGE)),
            t_max=float(material_data.get("t_max", DEFAULT_T_MAX)),
            delta=float(material_data.get("delta", DEFAULT_DELTA)),
            formula=BetheFormula(material_data.get("formula", DEFAULT_BETHE_FORMULA)),
        )

        return cls(
            material=material,
            stopping_power=plot_from(
                data.get(ChartKind.STOPPING_POWER.value, {}), default_stopping_power_plot(),
            ),
            energy=plot_from(data.get(ChartKind.ENERGY.value, {}), default_energy_plot()),
        )


@dataclass(frozen=True)
class ParameterLimits:
    """Clamp limits of the parameter-editing boundary.

    Attributes:
        a_min, a_max: Mass number range
        z_min, z_max: Atomic number range
        stopping_power_x, stopping_power_y: Stopping-power chart axis limits
        energy_x, energy_y: Energy chart axis limits
    """

    a_min: float = DEFAULT_A_MIN
    a_max: float = DEFAULT_A_MAX
    z_min: int = DEFAULT_Z_MIN
    z_max: int = DEFAULT_Z_MAX
    stopping_power_x: AxisLimits = AxisLimits(
        floor=DEFAULT_STOPPING_POWER_X_FLOOR, min_gap=DEFAULT_STOPPING_POWER_MIN_GAP,
    )
    stopping_power_y: AxisLimits = AxisLimits(min_gap=DEFAULT_STOPPING_POWER_MIN_GAP)
    energy_x: AxisLimits = AxisLimits(min_gap=DEFAULT_ENERGY_MIN_GAP)
    energy_y: AxisLimits = AxisLimits(min_gap=DEFAULT_ENERGY_MIN_GAP)

    def axis_limits(self, kind: ChartKind, axis: str) -> AxisLimits:
        """Limits of one axis ('x' or 'y') of one chart."""
        if axis not in ("x", "y"):
            raise ValueError(f"axis must be 'x' or 'y', got {axis!r}")
        if kind is ChartKind.STOPPING_POWER:
            return self.stopping_power_x if axis == "x" else self.stopping_power_y
        return self.energy_x if axis == "x" else self.energy_y

    @classmethod
    def from_dict(cls, data: dict) -> "ParameterLimits":
        """Create limits from the ``limits`` section of defaults.yaml."""
        sp_gap = float(data.get("stopping_power_min_gap", DEFAULT_STOPPING_POWER_MIN_GAP))
        energy_gap = float(data.get("energy_min_gap", DEFAULT_ENERGY_MIN_GAP))
        return cls(
            a_min=float(data.get("a_min", DEFAULT_A_MIN)),
            a_max=float(data.get("a_max", DEFAULT_A_MAX)),
            z_min=int(data.get("z_min", DEFAULT_Z_MIN)),
            z_max=int(data.get("z_max", DEFAULT_Z_MAX)),
            stopping_power_x=AxisLimits(
                floor=float(data.get("stopping_power_x_floor", DEFAULT_STOPPING_POWER_X_FLOOR)),
                min_gap=sp_gap,
            ),
            stopping_power_y=AxisLimits(min_gap=sp_gap),
            energy_x=AxisLimits(min_gap=energy_gap),
            energy_y=AxisLimits(min_gap=energy_gap),
        )


def create_default_config() -> ChartConfig:
    """Create the startup configuration from defaults.yaml.

    This is the recommended way to get a default configuration.
    Values missing from the YAML fall back to the literals in defaults.py.

    Returns:
        Valid ChartConfig instance

    Raises:
        ValueError: If the defaults describe an invalid configuration
    """
    from bethe_bloch.config.yaml_loader import get_defaults

    config = ChartConfig.from_dict(get_defaults())
    errors = config.validate()

    if errors:
        raise ValueError("Default configuration is invalid:\n" + "\n".join(errors))

    return config
