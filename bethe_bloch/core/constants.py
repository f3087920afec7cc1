"""Physics constants for the Bethe-Bloch chart viewer.

This module is the Single Source of Truth (SSOT) for all physics constants
used by the curve evaluators. Import from here rather than defining constants locally.

Import Policy:
    from bethe_bloch.core.constants import DEFAULT_CONSTANTS, ELECTRON_MASS_MEV

DO NOT use: from bethe_bloch.core.constants import *
"""

from dataclasses import dataclass

# =============================================================================
# Fundamental Constants
# =============================================================================

# Electron rest mass [MeV/c²]
# Rounded value; particle masses in the catalog are multiples of it
ELECTRON_MASS_MEV = 0.511

# Bethe formula constant [MeV·cm²/g]
BETHE_K = 0.3072

# Mean excitation energy per unit atomic number [MeV]
# I = I_COEFFICIENT * Z. 1e-5 MeV is the 10 eV * Z Bloch rule, the same
# calibration some variants write as "10 * Z" with I in eV.
I_COEFFICIENT_MEV = 1e-5

MEV_PER_GEV = 1.0e3

# =============================================================================
# Particle Mass Multiples (in units of the electron rest mass)
# =============================================================================

ELECTRON_MASS_MULTIPLE = 1.0
MUON_MASS_MULTIPLE = 207.0
PION_MASS_MULTIPLE = 273.0
PROTON_MASS_MULTIPLE = 1836.0
DEUTERON_MASS_MULTIPLE = 3649.0
ALPHA_MASS_MULTIPLE = 7294.0


@dataclass(frozen=True)
class PhysicsConstants:
    """Calibration constants for the stopping-power and kinematics formulas.

    Units: MeV for energies and masses, MeV·cm²/g for stopping power.
    """

    m_e: float = ELECTRON_MASS_MEV
    """Electron rest mass [MeV/c²]"""

    K: float = BETHE_K
    """Bethe formula constant [MeV·cm²/g]"""

    i_coefficient: float = I_COEFFICIENT_MEV
    """Mean excitation energy per unit Z [MeV]; not a universal constant, tune per material"""

    mev_per_gev: float = MEV_PER_GEV
    """Energy unit conversion used by the secondary axis"""

    def __post_init__(self):
        """Validate constants."""
        if self.m_e <= 0:
            raise ValueError(f"Electron mass must be positive: m_e={self.m_e}")
        if self.i_coefficient <= 0:
            raise ValueError(f"Excitation coefficient must be positive: i_coefficient={self.i_coefficient}")

    @classmethod
    def from_dict(cls, data: dict) -> "PhysicsConstants":
        """Create constants from the ``physics`` section of a defaults mapping."""
        return cls(
            m_e=float(data.get("electron_mass_mev", ELECTRON_MASS_MEV)),
            K=float(data.get("k", BETHE_K)),
            i_coefficient=float(data.get("i_coefficient_mev", I_COEFFICIENT_MEV)),
            mev_per_gev=float(data.get("mev_per_gev", MEV_PER_GEV)),
        )


DEFAULT_CONSTANTS = PhysicsConstants()
