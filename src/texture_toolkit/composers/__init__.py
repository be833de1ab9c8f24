"""Pure texture composers.

- RampComposer: gradients to ramp texture
- ChannelComposer: channel packing (mask maps) and separation
"""

from .ramp_composer import RampComposer
from .channel_composer import ChannelComposer, ChannelSource, DEFAULT_FILL

__all__ = [
    'RampComposer',
    'ChannelComposer',
    'ChannelSource',
    'DEFAULT_FILL',
]
