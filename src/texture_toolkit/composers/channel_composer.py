"""Texture channel mixing and separation.

This module provides the ChannelComposer class for packing up to four scalar
maps into one RGBA texture (e.g. a metallic/occlusion/detail/smoothness mask
map) and for splitting an RGBA texture back into greyscale images.
"""

from __future__ import annotations
from typing import Dict, Mapping, Optional, Union
from dataclasses import dataclass
import logging
import numpy as np

from ..core.image import Image, Channel
from ..errors import DimensionMismatchError, EmptyInputError

logger = logging.getLogger(__name__)


# Value written to an output channel whose source is absent
DEFAULT_FILL: Dict[Channel, float] = {
    Channel.R: 0.0,
    Channel.G: 0.0,
    Channel.B: 0.0,
    Channel.A: 1.0,
}


@dataclass
class ChannelSource:
    """One input texture and the channel to read from it.

    Attributes:
        image: Source image
        channel: Channel sampled from the image (default R, which is the value
            of a greyscale texture)
    """
    image: Image
    channel: Channel = Channel.R

    def __post_init__(self):
        self.channel = Channel.parse(self.channel)

    def values(self) -> np.ndarray:
        """(height, width) array of the selected channel."""
        return self.image.channel(self.channel)

    def __repr__(self):
        return f"ChannelSource({self.image!r}, {self.channel.name})"


SourceLike = Union[ChannelSource, Image, None]


class ChannelComposer:
    """Pack and unpack texture channels.

    Example:
        >>> composer = ChannelComposer()
        >>> packed = composer.compose({
        ...     'R': metallic,
        ...     'G': ChannelSource(occlusion, Channel.G),
        ...     'A': roughness,
        ... }, invert_and_swap_roughness=True)
        >>>
        >>> channels = composer.separate(packed)
        >>> channels[Channel.A].size == packed.size
        True
    """

    def __init__(self, defaults: Optional[Mapping[Union[Channel, str], float]] = None):
        """Initialize the ChannelComposer.

        Args:
            defaults: Override the value used for absent sources, per output
                channel (default R=0, G=0, B=0, A=1)
        """
        self.defaults = dict(DEFAULT_FILL)
        if defaults:
            for key, value in defaults.items():
                self.defaults[Channel.parse(key)] = float(value)

    def compose(
        self,
        sources: Mapping[Union[Channel, str, int], SourceLike],
        invert_and_swap_roughness: bool = False
    ) -> Image:
        """Build one RGBA image from up to four channel sources.

        Args:
            sources: Mapping of output channel (R/G/B/A) to a ChannelSource, a
                bare Image (sampled at R) or None
            invert_and_swap_roughness: Treat the A source as roughness and store
                smoothness = 1 - roughness

        Returns:
            New Image sized like the first present source in R, G, B, A order

        Raises:
            EmptyInputError: If all four sources are absent
            DimensionMismatchError: If present sources differ in size
        """
        resolved = self._resolve_sources(sources)
        present = [(c, s) for c, s in resolved.items() if s is not None]

        if not present:
            raise EmptyInputError("No input textures: assign at least one of R, G, B, A")

        width, height = present[0][1].image.size
        mismatched = [
            f"{c.name}={s.image.width}x{s.image.height}"
            for c, s in present
            if s.image.size != (width, height)
        ]
        if mismatched:
            raise DimensionMismatchError(
                f"All channel sources must be {width}x{height} "
                f"(size of {present[0][0].name} source), got {', '.join(mismatched)}"
            )

        logger.debug(
            f"Composing {width}x{height}: "
            + ', '.join(f"{c.name}<-{s.channel.name}" for c, s in present)
            + f", invert_alpha={invert_and_swap_roughness}"
        )

        output = np.empty((height, width, 4), dtype=np.float32)
        for channel in Channel:
            source = resolved[channel]
            if source is None:
                output[:, :, channel] = self.defaults[channel]
                continue

            values = source.values()
            if channel is Channel.A and invert_and_swap_roughness:
                values = 1.0 - values
            output[:, :, channel] = values

        return Image(output)

    def compose_mask_map(
        self,
        metallic: SourceLike = None,
        occlusion: SourceLike = None,
        detail_mask: SourceLike = None,
        smoothness: SourceLike = None,
        use_roughness: bool = False
    ) -> Image:
        """Pack a mask map: metallic->R, occlusion->G, detail mask->B, smoothness->A.

        With use_roughness the smoothness slot takes a roughness map and is
        inverted.
        """
        return self.compose(
            {
                Channel.R: metallic,
                Channel.G: occlusion,
                Channel.B: detail_mask,
                Channel.A: smoothness,
            },
            invert_and_swap_roughness=use_roughness
        )

    def separate(self, source: Image) -> Dict[Channel, Image]:
        """Split an image into one greyscale image per channel.

        Each output has R = G = B = the extracted channel value and alpha 1.

        Args:
            source: Image to split

        Returns:
            Dict mapping each Channel to its greyscale Image
        """
        result = {}
        for channel in Channel:
            pixels = np.ones((source.height, source.width, 4), dtype=np.float32)
            pixels[:, :, :3] = source.pixels[:, :, channel, np.newaxis]
            result[channel] = Image(pixels)

        logger.debug(f"Separated {source.width}x{source.height} image into 4 channels")
        return result

    def _resolve_sources(
        self,
        sources: Mapping[Union[Channel, str, int], SourceLike]
    ) -> Dict[Channel, Optional[ChannelSource]]:
        resolved: Dict[Channel, Optional[ChannelSource]] = {c: None for c in Channel}
        for key, source in sources.items():
            channel = Channel.parse(key)
            if isinstance(source, Image):
                source = ChannelSource(source)
            resolved[channel] = source
        return resolved
