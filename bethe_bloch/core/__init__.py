"""Core physics and sampling for the Bethe-Bloch charts.

This module contains the physics constants, the particle catalog, the
closed-form kinematics and stopping-power evaluators, and the curve sampler
that turns them into drawable series.
"""

from bethe_bloch.core.constants import DEFAULT_CONSTANTS, PhysicsConstants
from bethe_bloch.core.kinematics import (
    DomainError,
    beta_squared,
    kinetic_energy,
    max_energy_transfer,
    mean_excitation_energy,
    stopping_power,
)
from bethe_bloch.core.particles import PARTICLES, ParticleSpec, get_particle
from bethe_bloch.core.sampling import (
    Series,
    energy_series,
    muon_energy_range,
    sample_count,
    sample_curve,
    sample_domain,
    stopping_power_series,
)

__all__ = [
    "PhysicsConstants",
    "DEFAULT_CONSTANTS",
    "DomainError",
    "beta_squared",
    "kinetic_energy",
    "max_energy_transfer",
    "mean_excitation_energy",
    "stopping_power",
    "ParticleSpec",
    "PARTICLES",
    "get_particle",
    "Series",
    "sample_count",
    "sample_domain",
    "sample_curve",
    "stopping_power_series",
    "energy_series",
    "muon_energy_range",
]
