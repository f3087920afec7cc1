"""Publishing chart rasters as display textures.

A texture handle is allocated once per chart and lives for the whole process;
every later render replaces the pixels behind the same handle.
"""

import itertools
import logging
from dataclasses import dataclass
from typing import Dict, Protocol

import numpy as np

from bethe_bloch.config.enums import ChartKind
from bethe_bloch.render.rasterizer import RasterBuffer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TextureHandle:
    """Opaque texture identifier with its fixed pixel size."""

    id: int
    width: int
    height: int


class TextureHost(Protocol):
    """Display-side texture storage."""

    def alloc_texture(self, width: int, height: int) -> TextureHandle:
        ...

    def set_texture(self, handle: TextureHandle, rgba: np.ndarray) -> None:
        ...


class InMemoryTextureHost:
    """Texture host that keeps the uploaded pixels in memory.

    Used for headless rendering and tests.
    """

    def __init__(self):
        self._ids = itertools.count(1)
        self.textures: Dict[int, np.ndarray] = {}
        self.upload_counts: Dict[int, int] = {}

    def alloc_texture(self, width: int, height: int) -> TextureHandle:
        handle = TextureHandle(id=next(self._ids), width=width, height=height)
        self.textures[handle.id] = np.zeros((height, width, 4), dtype=np.uint8)
        self.upload_counts[handle.id] = 0
        return handle

    def set_texture(self, handle: TextureHandle, rgba: np.ndarray) -> None:
        if handle.id not in self.textures:
            raise KeyError(f"Unknown texture handle {handle.id}")
        self.textures[handle.id] = rgba.copy()
        self.upload_counts[handle.id] += 1


def rgb_to_rgba(buffer: RasterBuffer) -> np.ndarray:
    """Expand a flat RGB buffer to an opaque (H, W, 4) RGBA image."""
    rgba = np.empty((buffer.height, buffer.width, 4), dtype=np.uint8)
    rgba[..., :3] = buffer.as_image()
    rgba[..., 3] = 255
    return rgba


class TexturePublisher:
    """Owns the per-chart texture handles of a host."""

    def __init__(self, host: TextureHost):
        self.host = host
        self._handles: Dict[ChartKind, TextureHandle] = {}

    def allocate(self, kind: ChartKind, width: int, height: int) -> TextureHandle:
        """Allocate the texture of one chart.

        Raises:
            RuntimeError: If the chart already has a texture
        """
        if kind in self._handles:
            raise RuntimeError(f"Texture for {kind.value} chart is already allocated")
        handle = self.host.alloc_texture(width, height)
        self._handles[kind] = handle
        logger.debug(f"Allocated texture {handle.id} ({width}x{height}) for {kind.value} chart")
        return handle

    def is_allocated(self, kind: ChartKind) -> bool:
        return kind in self._handles

    def handle(self, kind: ChartKind) -> TextureHandle:
        """Handle of an allocated chart texture.

        Raises:
            RuntimeError: If the chart has no texture yet
        """
        try:
            return self._handles[kind]
        except KeyError:
            raise RuntimeError(f"No texture allocated for {kind.value} chart") from None

    def publish(self, kind: ChartKind, buffer: RasterBuffer) -> TextureHandle:
        """Replace a chart texture's pixels with a rendered buffer.

        Raises:
            RuntimeError: If the chart has no texture yet
            ValueError: If the buffer size differs from the texture size
        """
        handle = self.handle(kind)
        if (buffer.width, buffer.height) != (handle.width, handle.height):
            raise ValueError(
                f"Buffer is {buffer.width}x{buffer.height}, texture {handle.id} is "
                f"{handle.width}x{handle.height}"
            )
        self.host.set_texture(handle, rgb_to_rgba(buffer))
        return handle
