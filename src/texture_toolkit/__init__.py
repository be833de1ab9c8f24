"""Texture Toolkit - ramp texture generation and texture channel packing.

Offline texture authoring utilities for real-time rendering pipelines,
working on plain numpy pixel buffers.

API:
- core: Image, Channel, Gradient, GradientStop
- composers: RampComposer, ChannelComposer, ChannelSource
- export: ImageExporter, ImageLoader, PreviewGenerator
- utilities: RampPreset, BoneNode, walk_bones, bone_segments
- pipeline: TexturePipeline (file-to-file workflows)
"""

from .core import Image, Channel, Gradient, GradientStop
from .composers import RampComposer, ChannelComposer, ChannelSource
from .export import ImageExporter, ImageLoader, PreviewGenerator
from .utilities import RampPreset, BoneNode, BoneSegment, walk_bones, bone_segments
from .pipeline import TexturePipeline
from .errors import (
    TextureToolkitError,
    EmptyInputError,
    InvalidInputError,
    DimensionMismatchError,
    InvalidParameterError,
    UnsupportedFormatError,
    PresetError,
)

__version__ = "0.1.0"
__all__ = [
    # Core
    "Image",
    "Channel",
    "Gradient",
    "GradientStop",
    # Composers
    "RampComposer",
    "ChannelComposer",
    "ChannelSource",
    # Export
    "ImageExporter",
    "ImageLoader",
    "PreviewGenerator",
    # Utilities
    "RampPreset",
    "BoneNode",
    "BoneSegment",
    "walk_bones",
    "bone_segments",
    # Pipeline
    "TexturePipeline",
    # Errors
    "TextureToolkitError",
    "EmptyInputError",
    "InvalidInputError",
    "DimensionMismatchError",
    "InvalidParameterError",
    "UnsupportedFormatError",
    "PresetError",
]
