"""Ramp texture generation.

This module provides the RampComposer class, which rasterizes an ordered list
of gradients into a single texture with one horizontal band per gradient.
"""

from __future__ import annotations
from typing import Optional, Sequence, Tuple
import logging
import numpy as np

from ..core.image import Image, require_positive_int
from ..core.gradient import Gradient

logger = logging.getLogger(__name__)


class RampComposer:
    """Build ramp textures from gradients.

    Band i covers rows [i * row_height, (i + 1) * row_height), counting from
    the bottom row. Every row of a band holds the same samples: column x is
    the gradient evaluated at x / (row_width - 1).

    Example:
        >>> composer = RampComposer()
        >>> ramp = composer.compose(
        ...     [Gradient.from_colors('#FF0000', '#0000FF')],
        ...     row_width=32,
        ...     row_height=4
        ... )
        >>> ramp.size
        (32, 4)
    """

    def __init__(self, fill: Tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)):
        """Initialize the RampComposer.

        Args:
            fill: Initial buffer colour. Bands whose gradient is None keep it,
                and an empty gradient list yields a single pixel of it.
        """
        self.fill = tuple(float(c) for c in fill)

    def compose(
        self,
        gradients: Sequence[Optional[Gradient]],
        row_width: int,
        row_height: int
    ) -> Image:
        """Rasterize gradients into a ramp texture.

        Args:
            gradients: Ordered gradients, one band each; None entries are skipped
            row_width: Width of the texture in pixels
            row_height: Height of each band in pixels

        Returns:
            Image of size row_width x (row_height * len(gradients)), or a 1x1
            fill-colour image when gradients is empty

        Raises:
            InvalidParameterError: If row_width or row_height is not a positive integer
        """
        if not gradients:
            logger.debug("No gradients, returning 1x1 placeholder")
            return Image.blank(1, 1, fill=self.fill)

        row_width = require_positive_int(row_width, 'row_width')
        row_height = require_positive_int(row_height, 'row_height')

        ramp = Image.blank(row_width, row_height * len(gradients), fill=self.fill)

        if row_width == 1:
            ts = np.zeros(1, dtype=np.float64)
        else:
            ts = np.arange(row_width, dtype=np.float64) / (row_width - 1)

        for i, gradient in enumerate(gradients):
            if gradient is None:
                logger.debug(f"Gradient {i} is None, band left at fill value")
                continue

            start = i * row_height
            end = start + row_height
            ramp.pixels[start:end, :, :] = gradient.evaluate_many(ts)[np.newaxis, :, :]

        logger.debug(
            f"Ramp composed: {len(gradients)} band(s), size={ramp.width}x{ramp.height}"
        )
        return ramp
