"""Curve sampling for both charts.

A chart's x range is subdivided into N intervals (N + 1 points, endpoints
inclusive), each evaluator is applied to every point and the result is packed
into a Series. Sample count follows the range width times a fixed density,
bounded to [1, max_samples] intervals so even a vanishing range yields a
drawable two-point line.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, Tuple

import numpy as np

from bethe_bloch.config.chart_config import AxisRange, ChartConfig, PlotConfig
from bethe_bloch.config.defaults import DEFAULT_STOPPING_POWER_COLOR
from bethe_bloch.config.enums import SamplingType
from bethe_bloch.core.constants import DEFAULT_CONSTANTS, PhysicsConstants
from bethe_bloch.core.kinematics import DomainError, kinetic_energy, stopping_power
from bethe_bloch.core.particles import MUON, PARTICLES, RGB, ParticleSpec

logger = logging.getLogger(__name__)

Evaluator = Callable[[np.ndarray], np.ndarray]
DomainPredicate = Callable[[np.ndarray], np.ndarray]


@dataclass(frozen=True, eq=False)
class Series:
    """Ordered (x, y) samples of one curve.

    Attributes:
        label: Curve name (legend text)
        x: Sample abscissae, strictly increasing
        y: Sample values, same length as x
        color: Curve color (8-bit RGB)
    """

    label: str
    x: np.ndarray
    y: np.ndarray
    color: RGB

    def __post_init__(self):
        """Validate data."""
        if self.x.ndim != 1 or self.y.ndim != 1:
            raise ValueError(f"Series arrays must be 1D, got shapes {self.x.shape} and {self.y.shape}")
        if len(self.x) != len(self.y):
            raise ValueError(
                f"Series x length {len(self.x)} must match y length {len(self.y)}"
            )

    def __len__(self) -> int:
        return len(self.x)

    def points(self) -> Iterator[Tuple[float, float]]:
        """Iterate over the (x, y) pairs in order."""
        return zip(self.x.tolist(), self.y.tolist())


def sample_count(x_min: float, x_max: float, samples_per_unit: float, max_samples: int) -> int:
    """Number of intervals for a range.

    Args:
        x_min, x_max: Range bounds
        samples_per_unit: Intervals per unit of x
        max_samples: Upper bound on the interval count

    Returns:
        N in [1, max_samples]; the range is sampled with N + 1 points
    """
    requested = (x_max - x_min) * samples_per_unit
    # Wide ranges overflow to inf; cap before converting
    if not math.isfinite(requested) or requested >= max_samples:
        return max(1, max_samples)
    return max(1, int(math.ceil(requested)))


def sample_domain(
    x_min: float,
    x_max: float,
    n_intervals: int,
    sampling_type: SamplingType = SamplingType.LINEAR,
) -> np.ndarray:
    """Sample abscissae over [x_min, x_max], endpoints included.

    LINEAR emits x_min + i * (x_max - x_min) / N for i in [0, N].
    LOGARITHMIC emits N + 1 geometrically spaced points.

    Args:
        x_min, x_max: Range bounds, x_min < x_max
        n_intervals: N >= 1
        sampling_type: Spacing of the points

    Returns:
        Strictly increasing array of N + 1 abscissae

    Raises:
        ValueError: If the range is empty or inverted, or N < 1
        DomainError: If logarithmic spacing is requested with x_min <= 0
    """
    if not x_max > x_min:
        raise ValueError(f"x_max ({x_max}) must be > x_min ({x_min})")
    if n_intervals < 1:
        raise ValueError(f"n_intervals must be >= 1, got {n_intervals}")

    if sampling_type is SamplingType.LOGARITHMIC:
        if x_min <= 0:
            raise DomainError(f"Logarithmic sampling requires x_min > 0, got {x_min}")
        return np.geomspace(x_min, x_max, n_intervals + 1)

    return np.linspace(x_min, x_max, n_intervals + 1)


def plot_domain(plot: PlotConfig) -> np.ndarray:
    """Sample abscissae for a chart's x axis and sampling settings."""
    n_intervals = sample_count(
        plot.x.min, plot.x.max, plot.sampling.samples_per_unit, plot.sampling.max_samples,
    )
    return sample_domain(plot.x.min, plot.x.max, n_intervals, plot.sampling.sampling_type)


def sample_curve(
    func: Evaluator,
    x: np.ndarray,
    label: str,
    color: RGB,
    domain: Optional[DomainPredicate] = None,
) -> Series:
    """Evaluate a curve over the given abscissae.

    Points outside ``domain`` are dropped before evaluation. Any non-finite
    value left afterwards is replaced by 0 so it never reaches the rasterizer.

    Args:
        func: Vectorised evaluator y = func(x)
        x: Abscissae
        label: Curve name
        color: Curve color
        domain: Predicate selecting the points the evaluator is defined on

    Returns:
        Series of the in-domain samples

    Raises:
        DomainError: If fewer than 2 points lie inside the domain
    """
    x = np.asarray(x, dtype=np.float64)

    if domain is not None:
        mask = np.asarray(domain(x), dtype=bool)
        skipped = int(np.count_nonzero(~mask))
        if skipped:
            logger.debug(f"{label}: skipped {skipped} out-of-domain sample(s)")
        x = x[mask]

    if len(x) < 2:
        raise DomainError(f"{label}: need at least 2 in-domain samples, got {len(x)}")

    y = np.asarray(func(x), dtype=np.float64)

    bad = ~np.isfinite(y)
    if np.any(bad):
        logger.warning(f"{label}: replaced {int(np.count_nonzero(bad))} non-finite value(s) with 0")
        y = np.where(bad, 0.0, y)

    return Series(label=label, x=x, y=y, color=color)


def stopping_power_series(
    config: ChartConfig,
    constants: PhysicsConstants = DEFAULT_CONSTANTS,
    color: RGB = DEFAULT_STOPPING_POWER_COLOR,
) -> Series:
    """Sample the stopping-power curve over the stopping-power chart's x axis.

    βγ = 0 is outside the formula's domain and is never evaluated.
    """
    material = config.material
    x = plot_domain(config.stopping_power)

    def evaluate(beta_gamma: np.ndarray) -> np.ndarray:
        return stopping_power(
            material.a,
            material.z_big,
            material.charge,
            beta_gamma,
            material.t_max,
            material.delta,
            constants=constants,
            formula=material.formula,
        )

    return sample_curve(evaluate, x, label="dE/dx", color=color, domain=lambda bg: bg > 0)


def energy_series(
    config: ChartConfig,
    particles: Tuple[ParticleSpec, ...] = PARTICLES,
) -> List[Series]:
    """Sample the kinetic-energy curve of every catalog particle.

    All series share one x-domain and sample count.
    """
    x = plot_domain(config.energy)

    series = []
    for particle in particles:
        series.append(
            sample_curve(
                lambda bg, mass=particle.rest_mass: kinetic_energy(bg, mass),
                x,
                label=particle.label,
                color=particle.color,
                domain=lambda bg: bg >= 0,
            )
        )
    return series


def muon_energy_range(
    x_axis: AxisRange,
    constants: PhysicsConstants = DEFAULT_CONSTANTS,
) -> Tuple[float, float]:
    """Muon kinetic energy [GeV] at both ends of a βγ axis.

    Used as the bounds of the secondary tick scale under the stopping-power plot.

    Raises:
        DomainError: If the lower bound is not positive (log scale)
    """
    lo = kinetic_energy(x_axis.min, MUON.rest_mass) / constants.mev_per_gev
    hi = kinetic_energy(x_axis.max, MUON.rest_mass) / constants.mev_per_gev

    if not lo > 0:
        raise DomainError(
            f"Muon energy axis needs a positive lower bound; βγ min {x_axis.min} gives {lo} GeV"
        )
    if not hi > lo:
        raise DomainError(f"Muon energy axis is empty: [{lo}, {hi}] GeV")

    return lo, hi
