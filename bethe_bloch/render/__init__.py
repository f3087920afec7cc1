"""Rasterization and texture publishing for the Bethe-Bloch charts."""

from bethe_bloch.render.layout import (
    ChartLayout,
    energy_layout,
    split_vertically,
    stopping_power_layout,
)
from bethe_bloch.render.rasterizer import (
    ChartRasterizer,
    EnergyRasterizer,
    RasterBuffer,
    StoppingPowerRasterizer,
    create_rasterizer,
)
from bethe_bloch.render.textures import (
    InMemoryTextureHost,
    TextureHandle,
    TextureHost,
    TexturePublisher,
    rgb_to_rgba,
)
from bethe_bloch.render.transforms import (
    ChartTransform,
    CoordinateTransform,
    LinearTransform,
    LogTransform,
    PixelBox,
    make_transform,
)

__all__ = [
    "PixelBox",
    "CoordinateTransform",
    "LinearTransform",
    "LogTransform",
    "make_transform",
    "ChartTransform",
    "ChartLayout",
    "split_vertically",
    "stopping_power_layout",
    "energy_layout",
    "RasterBuffer",
    "ChartRasterizer",
    "StoppingPowerRasterizer",
    "EnergyRasterizer",
    "create_rasterizer",
    "TextureHandle",
    "TextureHost",
    "InMemoryTextureHost",
    "TexturePublisher",
    "rgb_to_rgba",
]
