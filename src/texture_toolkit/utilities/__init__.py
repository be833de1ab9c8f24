"""Supporting utilities.

- RampPreset: JSON ramp configurations
- BoneNode, walk_bones, bone_segments: bone hierarchy traversal for debug drawing
"""

from .presets import RampPreset
from .bones import BoneNode, BoneSegment, iter_bones, walk_bones, bone_segments

__all__ = [
    'RampPreset',
    'BoneNode',
    'BoneSegment',
    'iter_bones',
    'walk_bones',
    'bone_segments',
]
