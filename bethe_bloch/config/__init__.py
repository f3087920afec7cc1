"""Configuration Module - Single Source of Truth for Chart Parameters

Default Configuration (loaded from defaults.yaml):
    from bethe_bloch.config import get_default, create_default_config

    x_max = get_default('stopping_power.x_max')
    config = create_default_config()

Recommended Usage:
    from bethe_bloch.config import ChartConfig, AxisRange, validate_config
    from bethe_bloch.config.enums import ChartKind

    config = ChartConfig()
    config = config.with_material(a=12.0, z_big=6)
    validate_config(config)

Import Policy:
    DO NOT use: from bethe_bloch.config import *

Submodules:
    enums: Configuration enumerations (ChartKind, AxisScale, SamplingType, ...)
    defaults: Default literals (SSOT)
    yaml_loader: YAML defaults loader (get_default, get_defaults)
    chart_config: Value-type configuration dataclasses
    style: Immutable styling constants
    validation: Validation utilities (validate_config, warn_if_unsafe, ...)
"""

from bethe_bloch.config.enums import (
    AxisScale,
    BetheFormula,
    ChartKind,
    RecomputePolicy,
    SamplingType,
)
from bethe_bloch.config.yaml_loader import get_default, get_defaults, reload_defaults
from bethe_bloch.config.chart_config import (
    AxisLimits,
    AxisRange,
    ChartConfig,
    MaterialConfig,
    ParameterLimits,
    PlotConfig,
    SamplingConfig,
    create_default_config,
)
from bethe_bloch.config.style import DEFAULT_STYLE, StyleConfig
from bethe_bloch.config.validation import (
    ConfigurationError,
    ConfigurationWarning,
    check_invariants,
    create_validated_config,
    validate_config,
    warn_if_unsafe,
)


__all__ = [
    # Enums
    "AxisScale",
    "BetheFormula",
    "ChartKind",
    "RecomputePolicy",
    "SamplingType",
    # Config classes
    "AxisRange",
    "AxisLimits",
    "SamplingConfig",
    "PlotConfig",
    "MaterialConfig",
    "ChartConfig",
    "ParameterLimits",
    "StyleConfig",
    "DEFAULT_STYLE",
    # Factory functions
    "create_default_config",
    "create_validated_config",
    # Validation
    "ConfigurationError",
    "ConfigurationWarning",
    "validate_config",
    "check_invariants",
    "warn_if_unsafe",
    # YAML defaults access
    "get_default",
    "get_defaults",
    "reload_defaults",
]
