"""Image loading from disk."""

from typing import Union
from pathlib import Path
import numpy as np
import logging

from PIL import Image as PILImage

from ..core.image import Image
from ..errors import InvalidParameterError

logger = logging.getLogger(__name__)


_UINT16_MODES = ('I;16', 'I;16B', 'I;16L')


class ImageLoader:
    """Read any Pillow-supported image file into an Image.

    Files are converted to RGBA and flipped so row 0 is the bottom row,
    matching what ImageExporter writes. 16-bit and float greyscale files keep
    their precision.

    Example:
        >>> loader = ImageLoader()
        >>> albedo = loader.load('textures/Rock_Albedo.png')
        >>> albedo.size
        (1024, 1024)
    """

    def load(self, filepath: Union[str, Path]) -> Image:
        """Load an image file.

        Args:
            filepath: Path to the image

        Returns:
            Image with values in [0, 1]

        Raises:
            FileNotFoundError: If the file does not exist
            InvalidParameterError: If 32-bit integer data exceeds the 16-bit range
            PIL.UnidentifiedImageError: If the file is not a readable image
        """
        filepath = Path(filepath)
        if not filepath.is_file():
            raise FileNotFoundError(f"Image not found: {filepath}")

        with PILImage.open(filepath) as img:
            source_mode = img.mode
            if img.mode in _UINT16_MODES:
                data = np.array(img, dtype=np.uint16)
            elif img.mode == 'I':
                data = self._int32_to_uint16(np.array(img), filepath)
            elif img.mode == 'F':
                # Float maps are already in [0, 1]; Image.from_array clips the rest
                data = np.array(img, dtype=np.float32)
            else:
                data = np.array(img.convert('RGBA'))

        image = Image.from_array(np.flipud(data))
        logger.info(f"Loaded {filepath.name}: {image.width}x{image.height} ({source_mode})")
        return image

    @staticmethod
    def _int32_to_uint16(data: np.ndarray, filepath: Path) -> np.ndarray:
        """Narrow 32-bit integer greyscale to uint16 when every value fits."""
        low, high = int(data.min()), int(data.max())
        if low < 0 or high > 65535:
            raise InvalidParameterError(
                f"{filepath.name}: integer pixel values {low}..{high} "
                f"do not fit the 16-bit range 0..65535"
            )
        return data.astype(np.uint16)
