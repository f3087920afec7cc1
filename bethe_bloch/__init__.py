"""Bethe-Bloch Chart Viewer

Renders two physics charts as raster images and regenerates them whenever a
numeric parameter is edited:

- Bethe-Bloch mass stopping power over a logarithmic βγ axis, with a
  secondary muon kinetic-energy scale
- Kinetic energy vs βγ for electron, muon, pion, proton, deuteron and alpha

Key Principles:
- Pure, vectorised physics evaluators (numpy)
- Immutable ChartConfig snapshots, clamped at the input boundary
- Stateless rasterization on a matplotlib Agg canvas
- Stable per-chart texture handles, pixels replaced in place

Version: 1.0
"""

__version__ = "1.0"

# Configuration
from bethe_bloch.config import (
    AxisRange,
    BetheFormula,
    ChartConfig,
    ChartKind,
    ConfigurationError,
    RecomputePolicy,
    create_default_config,
    validate_config,
)

# Physics and sampling
from bethe_bloch.core import (
    DEFAULT_CONSTANTS,
    PARTICLES,
    DomainError,
    PhysicsConstants,
    Series,
    kinetic_energy,
    stopping_power,
)

# Rendering
from bethe_bloch.render import (
    EnergyRasterizer,
    InMemoryTextureHost,
    RasterBuffer,
    StoppingPowerRasterizer,
    TexturePublisher,
)

# Orchestration
from bethe_bloch.app import InputCycle, ParameterEditor, RecomputeOrchestrator

__all__ = [
    # Version
    "__version__",
    # Configuration
    "AxisRange",
    "BetheFormula",
    "ChartConfig",
    "ChartKind",
    "ConfigurationError",
    "RecomputePolicy",
    "create_default_config",
    "validate_config",
    # Physics
    "PhysicsConstants",
    "DEFAULT_CONSTANTS",
    "PARTICLES",
    "DomainError",
    "kinetic_energy",
    "stopping_power",
    "Series",
    # Rendering
    "RasterBuffer",
    "StoppingPowerRasterizer",
    "EnergyRasterizer",
    "InMemoryTextureHost",
    "TexturePublisher",
    # Orchestration
    "InputCycle",
    "ParameterEditor",
    "RecomputeOrchestrator",
]
