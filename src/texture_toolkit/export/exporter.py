"""Image export to texture file formats.

This module provides the ImageExporter class for encoding Image buffers as
PNG, TGA or JPEG files with Pillow.
"""

from typing import Optional, Dict, Any, Union
from pathlib import Path
import numpy as np
import logging

from PIL import Image as PILImage, PngImagePlugin

from ..core.image import Image
from ..errors import UnsupportedFormatError

logger = logging.getLogger(__name__)


# File extension for each format name accepted by the pipeline and CLI
FORMAT_EXTENSIONS = {
    'tga': '.tga',
    'png': '.png',
    'jpg': '.jpg',
    'jpeg': '.jpg',
}


def to_uint8(image: Image) -> np.ndarray:
    """Quantize an Image to 8-bit RGBA in file row order (top row first).

    Values are clipped to [0, 1] and rounded half up.

    Args:
        image: Source image (row 0 at the bottom)

    Returns:
        uint8 array of shape (height, width, 4)
    """
    scaled = np.floor(np.clip(image.pixels, 0.0, 1.0) * 255.0 + 0.5)
    return np.ascontiguousarray(np.flipud(scaled.astype(np.uint8)))


class ImageExporter:
    """Write images to disk.

    Supported output formats:
    - PNG: 8-bit RGBA, optional metadata in text chunks
    - TGA: 8-bit RGBA, optional RLE compression
    - JPEG: 8-bit RGB, alpha dropped

    Example:
        >>> exporter = ImageExporter()
        >>> exporter.save_png(ramp, 'ramps/toon.png', metadata={'bands': 4})
        >>> exporter.auto_save(mask, 'textures/Rock_MaskMap.tga')
    """

    def __init__(self):
        """Initialize the ImageExporter."""
        pass

    def save_png(
        self,
        image: Image,
        filepath: Union[str, Path],
        metadata: Optional[Dict[str, Any]] = None
    ) -> Path:
        """Save image as 8-bit RGBA PNG.

        Args:
            image: Image to save
            filepath: Output file path
            metadata: Optional key/value pairs stored as PNG text chunks

        Returns:
            Path to saved file
        """
        filepath = self._prepare_path(filepath)
        img = PILImage.fromarray(to_uint8(image))

        pnginfo = None
        if metadata:
            pnginfo = PngImagePlugin.PngInfo()
            for key, value in metadata.items():
                pnginfo.add_text(str(key), str(value))

        img.save(filepath, format='PNG', pnginfo=pnginfo)

        logger.info(f"Saved {image.width}x{image.height} PNG to {filepath}")
        return filepath

    def save_tga(
        self,
        image: Image,
        filepath: Union[str, Path],
        rle: bool = False
    ) -> Path:
        """Save image as 8-bit RGBA TGA.

        Args:
            image: Image to save
            filepath: Output file path
            rle: Use run-length encoding

        Returns:
            Path to saved file
        """
        filepath = self._prepare_path(filepath)
        img = PILImage.fromarray(to_uint8(image))

        img.save(filepath, format='TGA', rle=rle)

        logger.info(f"Saved {image.width}x{image.height} TGA to {filepath} (rle={rle})")
        return filepath

    def save_jpeg(
        self,
        image: Image,
        filepath: Union[str, Path],
        quality: int = 75
    ) -> Path:
        """Save image as JPEG (lossy, 8-bit RGB only).

        Note: JPEG has no alpha channel and is lossy, so it is a poor fit for
        mask maps. Use PNG or TGA when alpha or exact values matter.

        Args:
            image: Image to save
            filepath: Output file path
            quality: JPEG quality (1-100, higher is better)

        Returns:
            Path to saved file
        """
        filepath = self._prepare_path(filepath)
        rgb = to_uint8(image)[:, :, :3]
        img = PILImage.fromarray(np.ascontiguousarray(rgb))

        img.save(filepath, format='JPEG', quality=quality)

        logger.info(f"Saved JPEG to {filepath} (quality={quality})")
        if np.any(image.pixels[:, :, 3] < 1.0):
            logger.warning("JPEG has no alpha channel - alpha values were discarded")
        return filepath

    def auto_save(
        self,
        image: Image,
        filepath: Union[str, Path],
        **kwargs
    ) -> Path:
        """Save based on file extension.

        Args:
            image: Image to save
            filepath: Output file path (extension determines format)
            **kwargs: Format-specific arguments

        Returns:
            Path to saved file

        Example:
            >>> exporter.auto_save(ramp, 'output.tga', rle=True)
            >>> exporter.auto_save(ramp, 'output.jpg', quality=95)
        """
        filepath = Path(filepath)
        ext = filepath.suffix.lower()

        if ext == '.png':
            return self.save_png(image, filepath, **kwargs)
        elif ext == '.tga':
            return self.save_tga(image, filepath, **kwargs)
        elif ext in ['.jpg', '.jpeg']:
            return self.save_jpeg(image, filepath, **kwargs)
        else:
            raise UnsupportedFormatError(
                f"Unsupported file extension: {ext or '(none)'}. "
                f"Supported: .png, .tga, .jpg, .jpeg"
            )

    @staticmethod
    def extension_for(image_format: str) -> str:
        """Map a format name ('tga', 'png', 'jpg') to its file extension."""
        try:
            return FORMAT_EXTENSIONS[image_format.lower()]
        except (KeyError, AttributeError):
            raise UnsupportedFormatError(
                f"Unknown image format: {image_format!r}. "
                f"Supported: {', '.join(sorted(set(FORMAT_EXTENSIONS)))}"
            ) from None

    def _prepare_path(self, filepath: Union[str, Path]) -> Path:
        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)
        return filepath
