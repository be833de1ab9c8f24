"""File output and display helpers.

- ImageExporter: PNG / TGA / JPEG encoding
- ImageLoader: decoding any Pillow-readable image
- PreviewGenerator: enlarged previews and single-band extraction
"""

from .exporter import ImageExporter, FORMAT_EXTENSIONS, to_uint8
from .loader import ImageLoader
from .preview import PreviewGenerator

__all__ = [
    'ImageExporter',
    'FORMAT_EXTENSIONS',
    'to_uint8',
    'ImageLoader',
    'PreviewGenerator',
]
