"""Relativistic kinematics and Bethe-Bloch stopping power.

All functions accept either scalars or numpy arrays for ``beta_gamma`` and
return a float for scalar input, an array otherwise. They are total on their
documented domains and raise DomainError outside them instead of returning NaN.
"""

from __future__ import annotations

from typing import Union

import numpy as np

from bethe_bloch.config.enums import BetheFormula
from bethe_bloch.core.constants import DEFAULT_CONSTANTS, PhysicsConstants

ArrayLike = Union[float, np.ndarray]


class DomainError(ValueError):
    """Raised when a value falls outside a function's or transform's domain."""

    pass


def _as_output(values: np.ndarray, scalar: bool) -> ArrayLike:
    return float(values) if scalar else values


def beta_squared(beta_gamma: ArrayLike) -> ArrayLike:
    """β² = (βγ)² / ((βγ)² + 1)."""
    bg = np.asarray(beta_gamma, dtype=np.float64)
    bg2 = bg * bg
    return _as_output(bg2 / (bg2 + 1.0), bg.ndim == 0)


def kinetic_energy(beta_gamma: ArrayLike, mass: float) -> ArrayLike:
    """Kinetic energy E_k = m (γ - 1) for a given βγ.

    γ = hypot(βγ, 1), finite for every finite βγ. At βγ = 0, γ is exactly 1
    and the energy is exactly 0.

    Args:
        beta_gamma: βγ >= 0
        mass: Rest mass [MeV/c²], > 0

    Returns:
        Kinetic energy [MeV]

    Raises:
        DomainError: If any βγ is negative or the mass is not positive
    """
    if mass <= 0:
        raise DomainError(f"mass must be > 0, got {mass}")

    bg = np.asarray(beta_gamma, dtype=np.float64)
    if np.any(bg < 0):
        raise DomainError(f"beta_gamma must be >= 0, got min {float(np.min(bg))}")

    gamma = np.hypot(bg, 1.0)

    return _as_output(mass * (gamma - 1.0), bg.ndim == 0)


def max_energy_transfer(beta_gamma: ArrayLike, constants: PhysicsConstants = DEFAULT_CONSTANTS) -> ArrayLike:
    """Wm = 2 m_e (βγ)² [MeV]."""
    bg = np.asarray(beta_gamma, dtype=np.float64)
    return _as_output(2.0 * constants.m_e * bg * bg, bg.ndim == 0)


def mean_excitation_energy(z_big: int, constants: PhysicsConstants = DEFAULT_CONSTANTS) -> float:
    """I = k1 * Z [MeV], with k1 = constants.i_coefficient."""
    return constants.i_coefficient * z_big


def stopping_power(
    a: float,
    z_big: int,
    z: float,
    beta_gamma: ArrayLike,
    t_max: float,
    delta: float,
    constants: PhysicsConstants = DEFAULT_CONSTANTS,
    formula: BetheFormula = BetheFormula.SIMPLIFIED,
) -> ArrayLike:
    """Mass stopping power -dE/dx [MeV·cm²/g].

    SIMPLIFIED:
        K * Z/(A β²) * (ln(Wm / I) - β²)
    PDG:
        K z² Z/A 1/β² * (½ ln(2 m_e (βγ)² t_max / I²) - β² - δ/2)

    Args:
        a: Mass number A, > 0
        z_big: Atomic number Z, integer >= 1
        z: Effective charge of the projectile
        beta_gamma: βγ, > 0
        t_max: Maximum transferable energy [MeV] (PDG variant only)
        delta: Density-effect correction (PDG variant only)
        constants: Calibration constants
        formula: Formula variant

    Raises:
        DomainError: For βγ <= 0 (the log argument vanishes), A <= 0 or Z < 1
    """
    if a <= 0:
        raise DomainError(f"A must be > 0, got {a}")
    if int(z_big) != z_big or z_big < 1:
        raise DomainError(f"Z must be an integer >= 1, got {z_big}")

    bg = np.asarray(beta_gamma, dtype=np.float64)
    if np.any(bg <= 0):
        raise DomainError(f"beta_gamma must be > 0, got min {float(np.min(bg))}")

    beta2 = bg * bg / (bg * bg + 1.0)
    i_exc = mean_excitation_energy(z_big, constants)
    w_m = 2.0 * constants.m_e * bg * bg

    if formula is BetheFormula.PDG:
        if t_max <= 0:
            raise DomainError(f"t_max must be > 0 for the PDG formula, got {t_max}")
        bracket = 0.5 * np.log(w_m * t_max / (i_exc * i_exc)) - beta2 - 0.5 * delta
        values = constants.K * z * z * (z_big / a) * bracket / beta2
    else:
        values = constants.K * (z_big / (a * beta2)) * (np.log(w_m / i_exc) - beta2)

    return _as_output(values, bg.ndim == 0)
