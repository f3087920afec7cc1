"""Pytest configuration and shared fixtures for Bethe-Bloch chart tests."""

from dataclasses import replace

import matplotlib
import pytest

matplotlib.use("Agg")

from bethe_bloch.app.controls import ParameterEditor
from bethe_bloch.app.orchestrator import RecomputeOrchestrator
from bethe_bloch.config.chart_config import ChartConfig, SamplingConfig
from bethe_bloch.config.enums import SamplingType
from bethe_bloch.config.style import StyleConfig
from bethe_bloch.core.constants import PhysicsConstants
from bethe_bloch.render.rasterizer import EnergyRasterizer, StoppingPowerRasterizer
from bethe_bloch.render.textures import InMemoryTextureHost, TexturePublisher


# Fixtures for configuration


@pytest.fixture
def default_config():
    """Startup configuration (same values as defaults.yaml)."""
    return ChartConfig()


@pytest.fixture
def fast_config(default_config):
    """Default ranges with coarser sampling for fast render tests."""
    return replace(
        default_config,
        stopping_power=replace(
            default_config.stopping_power,
            sampling=SamplingConfig(SamplingType.LINEAR, samples_per_unit=20.0, max_samples=20_000),
        ),
        energy=replace(
            default_config.energy,
            sampling=SamplingConfig(SamplingType.LINEAR, samples_per_unit=40.0, max_samples=2_000),
        ),
    )


@pytest.fixture
def style():
    """Default styling constants."""
    return StyleConfig()


@pytest.fixture
def constants():
    """Default physics constants."""
    return PhysicsConstants()


# Fixtures for rendering


@pytest.fixture
def stopping_power_rasterizer(style, constants):
    """Stopping-power chart rasterizer."""
    return StoppingPowerRasterizer(style=style, constants=constants)


@pytest.fixture
def energy_rasterizer(style, constants):
    """Kinetic-energy chart rasterizer."""
    return EnergyRasterizer(style=style, constants=constants)


@pytest.fixture
def host():
    """In-memory texture host."""
    return InMemoryTextureHost()


@pytest.fixture
def publisher(host):
    """Texture publisher on the in-memory host."""
    return TexturePublisher(host)


# Fixtures for orchestration


@pytest.fixture
def orchestrator(fast_config, publisher, style, constants):
    """Orchestrator that has not been started yet."""
    return RecomputeOrchestrator(fast_config, publisher, style=style, constants=constants)


@pytest.fixture
def editor(default_config):
    """Parameter editor on the default configuration."""
    return ParameterEditor(default_config)
