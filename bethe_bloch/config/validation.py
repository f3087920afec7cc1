"""
Configuration Validation Utilities

This module provides validation functions for chart configurations.
It includes invariant checking and safety warnings.

Import Policy:
    from bethe_bloch.config.validation import validate_config, check_invariants, warn_if_unsafe

DO NOT use: from bethe_bloch.config.validation import *
"""

import math
import warnings
from typing import List, Tuple

from bethe_bloch.config.chart_config import ChartConfig, PlotConfig
from bethe_bloch.config.enums import AxisScale, ChartKind, SamplingType


class ConfigurationError(Exception):
    """Raised when configuration validation fails."""

    pass


class ConfigurationWarning(Warning):
    """Warning for potentially unsafe configuration choices."""

    pass


def validate_config(config: ChartConfig, raise_on_error: bool = True) -> Tuple[bool, List[str]]:
    """Validate a chart configuration.

    This is the main validation entry point. The orchestrator calls it before
    any snapshot reaches the sampler or rasterizer.

    Args:
        config: ChartConfig to validate
        raise_on_error: If True, raise ConfigurationError on validation failure

    Returns:
        Tuple of (is_valid, error_messages)

    Raises:
        ConfigurationError: If validation fails and raise_on_error=True
    """
    errors = config.validate()

    if errors:
        if raise_on_error:
            raise ConfigurationError(
                f"Configuration validation failed with {len(errors)} error(s):\n"
                + "\n".join(f"  - {err}" for err in errors)
            )
        return False, errors

    return True, []


def check_invariants(config: ChartConfig) -> bool:
    """Check the invariants every render pass relies on.

    Invariants checked:
        1. min < max on every axis
        2. min > 0 on logarithmic axes and for logarithmic sampling
        3. A > 0 and Z an integer >= 1
        4. Positive sample density and sample cap

    Returns:
        True if all invariants are satisfied
    """
    is_valid, _ = validate_config(config, raise_on_error=False)
    return is_valid


def _requested_intervals(plot: PlotConfig) -> float:
    """Uncapped interval count; inf when the product overflows."""
    requested = plot.x.span * plot.sampling.samples_per_unit
    return math.ceil(requested) if math.isfinite(requested) else math.inf


def warn_if_unsafe(config: ChartConfig) -> List[str]:
    """Check for legal but poor configuration choices.

    These are not errors, but choices that may lead to:
    - Coarse curves (sample cap reached)
    - Badly resolved low end of a logarithmic axis

    Warnings are issued via Python's warnings module.

    Returns:
        List of warning messages (empty if no warnings)
    """
    warnings_list = []

    for kind in ChartKind:
        plot = config.plot(kind)

        requested = _requested_intervals(plot)
        if requested > plot.sampling.max_samples:
            warnings_list.append(
                f"{kind.value}: x range needs {requested:.6g} samples at "
                f"{plot.sampling.samples_per_unit:g}/unit but max_samples is "
                f"{plot.sampling.max_samples}. The curve will be sampled more coarsely."
            )

        if (
            plot.x_scale is AxisScale.LOGARITHMIC
            and plot.sampling.sampling_type is SamplingType.LINEAR
            and plot.x.min > 0
        ):
            decades = math.log10(plot.x.max / plot.x.min)
            step = plot.x.span / max(1, min(requested, plot.sampling.max_samples))
            if decades > 3 and step > plot.x.min:
                warnings_list.append(
                    f"{kind.value}: linear sampling step ({step:.3g}) exceeds x.min ({plot.x.min:g}) "
                    f"on a log axis spanning {decades:.1f} decades. "
                    "Consider logarithmic sampling."
                )

    for warning_msg in warnings_list:
        warnings.warn(warning_msg, ConfigurationWarning, stacklevel=2)

    return warnings_list


def create_validated_config(**kwargs) -> ChartConfig:
    """Create a chart configuration with validation.

    Keyword arguments override material fields (a, z_big, charge, t_max,
    delta, formula).

    Raises:
        ConfigurationError: If the resulting configuration is invalid
        ValueError: For an unknown parameter name

    Example:
        >>> config = create_validated_config(a=12.0, z_big=6)
    """
    from bethe_bloch.config.chart_config import MaterialConfig

    config = ChartConfig()
    unknown = [key for key in kwargs if key not in MaterialConfig.__dataclass_fields__]
    if unknown:
        raise ValueError(f"Unknown configuration parameter(s): {unknown}")
    if kwargs:
        config = config.with_material(**kwargs)

    validate_config(config)
    warn_if_unsafe(config)
    return config
