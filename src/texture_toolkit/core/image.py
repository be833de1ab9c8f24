"""RGBA image buffer used by every composer.

This module provides the Image container and the Channel enum. Pixel data is
always float32 RGBA in [0, 1], shape (height, width, 4). Row 0 is the bottom
row of the picture (texture-space origin); the exporter and loader flip rows
when talking to image files.
"""

from __future__ import annotations
from typing import Tuple, Union
from dataclasses import dataclass
from enum import IntEnum
import logging
import numpy as np

from ..errors import InvalidParameterError

logger = logging.getLogger(__name__)


RGBA = Tuple[float, float, float, float]


class Channel(IntEnum):
    """RGBA channel designation (value is the index into the pixel axis)."""
    R = 0
    G = 1
    B = 2
    A = 3

    @classmethod
    def parse(cls, value: Union['Channel', str, int]) -> 'Channel':
        """Parse a channel from a Channel, index, or name ('r', 'red', 'A', ...).

        Raises:
            InvalidParameterError: If the value names no channel
        """
        if isinstance(value, Channel):
            return value

        if isinstance(value, (int, np.integer)) and not isinstance(value, bool):
            try:
                return cls(int(value))
            except ValueError:
                raise InvalidParameterError(
                    f"Channel index must be 0-3, got {value}"
                ) from None

        if isinstance(value, str):
            key = value.strip().lower()
            aliases = {
                'r': cls.R, 'red': cls.R,
                'g': cls.G, 'green': cls.G,
                'b': cls.B, 'blue': cls.B,
                'a': cls.A, 'alpha': cls.A,
            }
            if key in aliases:
                return aliases[key]

        raise InvalidParameterError(f"Unknown channel: {value!r}")


@dataclass(eq=False)
class Image:
    """RGBA float image.

    Attributes:
        pixels: float32 array of shape (height, width, 4), values in [0, 1],
            row 0 at the bottom

    Example:
        >>> img = Image.blank(4, 2)
        >>> img.size
        (4, 2)
        >>> img.pixel(0, 0)
        (0.0, 0.0, 0.0, 0.0)
    """
    pixels: np.ndarray

    def __post_init__(self):
        pixels = np.asarray(self.pixels)
        if pixels.ndim != 3 or pixels.shape[2] != 4:
            raise InvalidParameterError(
                f"Image pixels must have shape (height, width, 4), got {pixels.shape}"
            )
        if pixels.shape[0] < 1 or pixels.shape[1] < 1:
            raise InvalidParameterError(
                f"Image must be at least 1x1, got {pixels.shape[1]}x{pixels.shape[0]}"
            )
        if pixels.dtype != np.float32:
            pixels = pixels.astype(np.float32)
        self.pixels = pixels

    @classmethod
    def blank(
        cls,
        width: int,
        height: int,
        fill: Tuple[float, ...] = (0.0, 0.0, 0.0, 0.0)
    ) -> 'Image':
        """Allocate an image filled with a single colour.

        Args:
            width: Width in pixels (positive)
            height: Height in pixels (positive)
            fill: RGBA (or RGB, alpha 1) fill colour, default transparent black

        Returns:
            New Image

        Raises:
            InvalidParameterError: If a dimension is not a positive integer
        """
        width = require_positive_int(width, 'width')
        height = require_positive_int(height, 'height')
        color = _as_rgba(fill)

        pixels = np.empty((height, width, 4), dtype=np.float32)
        pixels[...] = color
        return cls(pixels)

    @classmethod
    def from_array(cls, data: np.ndarray) -> 'Image':
        """Build an Image from a greyscale, RGB or RGBA array.

        uint8 data is scaled by 1/255 and uint16 by 1/65535; float data is
        assumed to already be in [0, 1] and is clipped. Missing alpha is 1.

        Args:
            data: Array of shape (H, W), (H, W, 1), (H, W, 3) or (H, W, 4)

        Returns:
            New Image (the input array is never shared)
        """
        data = np.asarray(data)

        if data.dtype == np.uint8:
            values = data.astype(np.float32) / 255.0
        elif data.dtype == np.uint16:
            values = data.astype(np.float32) / 65535.0
        elif np.issubdtype(data.dtype, np.floating) or data.dtype == bool:
            values = np.clip(data.astype(np.float32), 0.0, 1.0)
        else:
            raise InvalidParameterError(f"Unsupported pixel dtype {data.dtype}")

        if values.ndim == 2:
            values = values[:, :, np.newaxis]
        if values.ndim != 3:
            raise InvalidParameterError(f"Expected 2D or 3D array, got shape {data.shape}")

        height, width, channels = values.shape
        pixels = np.ones((height, width, 4), dtype=np.float32)

        if channels == 1:
            pixels[:, :, :3] = values
        elif channels == 3:
            pixels[:, :, :3] = values
        elif channels == 4:
            pixels[...] = values
        else:
            raise InvalidParameterError(f"Expected 1, 3 or 4 channels, got {channels}")

        logger.debug(f"Image from array: {width}x{height}, {channels} channel(s), dtype={data.dtype}")
        return cls(pixels)

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    @property
    def size(self) -> Tuple[int, int]:
        """(width, height)."""
        return (self.width, self.height)

    def channel(self, channel: Union[Channel, str, int]) -> np.ndarray:
        """Return a (height, width) view of one channel."""
        return self.pixels[:, :, Channel.parse(channel)]

    def pixel(self, x: int, y: int) -> RGBA:
        """RGBA value at column x, row y (row 0 is the bottom row)."""
        r, g, b, a = self.pixels[y, x]
        return (float(r), float(g), float(b), float(a))

    def copy(self) -> 'Image':
        return Image(self.pixels.copy())

    def __eq__(self, other):
        if not isinstance(other, Image):
            return NotImplemented
        return np.array_equal(self.pixels, other.pixels)

    def __repr__(self):
        return f"Image({self.width}x{self.height})"


def require_positive_int(value, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidParameterError(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise InvalidParameterError(f"{name} must be positive, got {value}")
    return int(value)


def _as_rgba(color) -> np.ndarray:
    values = np.asarray(color, dtype=np.float32).reshape(-1)
    if values.size == 3:
        values = np.append(values, np.float32(1.0))
    if values.size != 4:
        raise InvalidParameterError(f"Colour must have 3 or 4 components, got {color!r}")
    return values
