"""Preview helpers for ramp textures.

This module provides the PreviewGenerator class for enlarging small textures
for display and for pulling single bands out of a ramp.
"""

import numpy as np
import logging

from PIL import Image as PILImage

from ..core.image import Image, require_positive_int
from ..errors import InvalidParameterError

logger = logging.getLogger(__name__)


class PreviewGenerator:
    """Generate display previews of ramp textures.

    Ramps are tiny (32x4 per band by default), so previews are enlarged with
    nearest-neighbour sampling, the same point filtering a ramp uses in a
    shader.

    Example:
        >>> generator = PreviewGenerator()
        >>> big = generator.enlarge(ramp, scale=8)
        >>> second_band = generator.extract_band(ramp, index=1, band_count=4)
    """

    def __init__(self):
        """Initialize the PreviewGenerator."""
        pass

    def enlarge(self, image: Image, scale: float) -> Image:
        """Resize an image by a factor using nearest-neighbour sampling.

        Args:
            image: Source image
            scale: Positive scale factor; each dimension is rounded, min 1 pixel

        Returns:
            New resized Image
        """
        if scale <= 0:
            raise InvalidParameterError(f"Preview scale must be positive, got {scale}")

        new_width = max(1, int(round(image.width * scale)))
        new_height = max(1, int(round(image.height * scale)))

        if (new_width, new_height) == image.size:
            logger.debug("Preview scale leaves size unchanged, returning copy")
            return image.copy()

        logger.info(f"Creating preview: {image.width}x{image.height} -> {new_width}x{new_height}")

        # Resize each channel in float mode so no 8-bit quantization happens
        channels = []
        for c in range(4):
            band = PILImage.fromarray(np.ascontiguousarray(image.pixels[:, :, c]))
            resized = band.resize((new_width, new_height), resample=PILImage.NEAREST)
            channels.append(np.asarray(resized, dtype=np.float32))

        return Image(np.stack(channels, axis=2))

    def extract_band(self, ramp: Image, index: int, band_count: int) -> Image:
        """Return the rows belonging to one band of a ramp.

        Args:
            ramp: Ramp texture with band_count equal-height bands
            index: 0-based band index, counted from the bottom like composition
            band_count: Number of bands in the ramp

        Returns:
            New Image holding just that band

        Raises:
            InvalidParameterError: For an out-of-range index or a ramp height
                not divisible by band_count
        """
        band_count = require_positive_int(band_count, 'band_count')
        if not 0 <= index < band_count:
            raise InvalidParameterError(
                f"Band index must be in [0, {band_count - 1}], got {index}"
            )
        if ramp.height % band_count != 0:
            raise InvalidParameterError(
                f"Ramp height {ramp.height} is not divisible by {band_count} bands"
            )

        band_height = ramp.height // band_count
        start = index * band_height
        return Image(ramp.pixels[start:start + band_height].copy())

    @staticmethod
    def band_v_coordinate(index: int, band_count: int) -> float:
        """Texture v coordinate at the centre of a band, as a shader samples it."""
        band_count = require_positive_int(band_count, 'band_count')
        if not 0 <= index < band_count:
            raise InvalidParameterError(
                f"Band index must be in [0, {band_count - 1}], got {index}"
            )
        return (index + 0.5) / band_count
