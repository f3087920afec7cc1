"""Particle catalog for the kinetic-energy chart.

Rest masses are multiples of the electron rest mass (core.constants, SSOT).
The catalog is fixed and immutable; its order is the legend order.
"""

from dataclasses import dataclass
from typing import Tuple

from bethe_bloch.core.constants import (
    ALPHA_MASS_MULTIPLE,
    DEUTERON_MASS_MULTIPLE,
    ELECTRON_MASS_MEV,
    ELECTRON_MASS_MULTIPLE,
    MUON_MASS_MULTIPLE,
    PION_MASS_MULTIPLE,
    PROTON_MASS_MULTIPLE,
)

RGB = Tuple[int, int, int]

CYAN: RGB = (0, 255, 255)
MAGENTA: RGB = (255, 0, 255)
YELLOW: RGB = (255, 255, 0)
BLUE: RGB = (0, 0, 255)
GREEN: RGB = (0, 255, 0)
RED: RGB = (255, 0, 0)


@dataclass(frozen=True)
class ParticleSpec:
    """A catalog particle.

    Attributes:
        name: Lookup key
        label: Legend text
        rest_mass: Rest mass [MeV/c²]
        color: Curve color (8-bit RGB)
    """

    name: str
    label: str
    rest_mass: float
    color: RGB

    def __post_init__(self):
        if self.rest_mass <= 0:
            raise ValueError(f"Rest mass must be positive: rest_mass={self.rest_mass}")


def _from_multiple(name: str, label: str, multiple: float, color: RGB) -> ParticleSpec:
    return ParticleSpec(name=name, label=label, rest_mass=multiple * ELECTRON_MASS_MEV, color=color)


ELECTRON = _from_multiple("electron", "Electron", ELECTRON_MASS_MULTIPLE, CYAN)
MUON = _from_multiple("muon", "Muon", MUON_MASS_MULTIPLE, MAGENTA)
PION = _from_multiple("pion", "Pi", PION_MASS_MULTIPLE, YELLOW)
PROTON = _from_multiple("proton", "Proton", PROTON_MASS_MULTIPLE, BLUE)
DEUTERON = _from_multiple("deuteron", "D", DEUTERON_MASS_MULTIPLE, GREEN)
ALPHA = _from_multiple("alpha", "Alpha", ALPHA_MASS_MULTIPLE, RED)

PARTICLES: Tuple[ParticleSpec, ...] = (ELECTRON, MUON, PION, PROTON, DEUTERON, ALPHA)


def get_particle(name: str) -> ParticleSpec:
    """Look up a catalog particle by name.

    Raises:
        KeyError: If the name is not in the catalog
    """
    for particle in PARTICLES:
        if particle.name == name:
            return particle
    raise KeyError(f"Unknown particle '{name}'. Available: {[p.name for p in PARTICLES]}")
