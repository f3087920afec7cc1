"""
Configuration Enums for the Bethe-Bloch chart viewer

This module defines all enumeration types used throughout the chart configuration.
These enums provide type-safe configuration options and improve code documentation.

Import Policy:
    from bethe_bloch.config.enums import AxisScale, SamplingType, BetheFormula, ChartKind

DO NOT use: from bethe_bloch.config.enums import *
"""

from enum import Enum


class ChartKind(Enum):
    """The two independently rendered charts.

    Options:
        STOPPING_POWER: Bethe-Bloch dE/dx over a logarithmic βγ axis
        ENERGY: Kinetic energy vs βγ for the six catalog particles
    """
    STOPPING_POWER = "stopping_power"
    ENERGY = "energy"


class AxisScale(Enum):
    """Coordinate transform applied between data space and pixel space.

    Options:
        LINEAR: Pixel position is affine in x
        LOGARITHMIC: Pixel position is affine in log(x); requires x > 0
    """
    LINEAR = "linear"
    LOGARITHMIC = "logarithmic"


class SamplingType(Enum):
    """How sample abscissae are distributed over an axis range.

    Options:
        LINEAR: Equal steps in x (x_min + i * step)
        LOGARITHMIC: Equal steps in log(x) (geometric spacing, requires x_min > 0)

    Note:
        LINEAR sampling on a LOGARITHMIC axis compresses the low end of the
        domain into few samples. Raise samples_per_unit when widening such a range.
    """
    LINEAR = "linear"
    LOGARITHMIC = "logarithmic"


class BetheFormula(Enum):
    """Stopping-power formula variant.

    Options:
        SIMPLIFIED: K * Z/(A β²) * (ln(Wm/I) - β²); ignores z, t_max and delta (default)
        PDG: K z² Z/A 1/β² (½ ln(2 m_e β²γ² t_max / I²) - β² - δ/2)
    """
    SIMPLIFIED = "simplified"
    PDG = "pdg"


class RecomputePolicy(Enum):
    """Which charts are re-rendered after a parameter change.

    Options:
        ALWAYS_BOTH: Any change re-renders both charts (default)
        AFFECTED_ONLY: Diff the config snapshots and re-render only charts whose inputs changed
    """
    ALWAYS_BOTH = "always_both"
    AFFECTED_ONLY = "affected_only"
