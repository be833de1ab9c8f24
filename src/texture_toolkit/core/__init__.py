"""Core data model: images, channels and gradients.

- Image: float32 RGBA buffer, origin bottom-left
- Channel: R/G/B/A selector
- Gradient, GradientStop: colour ramps sampled by the ramp composer
"""

from .image import Image, Channel
from .gradient import Gradient, GradientStop, parse_color, color_to_hex

__all__ = [
    'Image',
    'Channel',
    'Gradient',
    'GradientStop',
    'parse_color',
    'color_to_hex',
]
