"""File-to-file texture workflows.

This module provides the TexturePipeline class that ties the pure composers
to image files: render a ramp preset to disk, pack several maps into one mask
texture, and split a texture into per-channel images.
"""

from __future__ import annotations
from typing import Dict, Literal, Optional, Union
from pathlib import Path
import logging

from .core.image import Image, Channel
from .composers import RampComposer, ChannelComposer
from .export import ImageExporter, ImageLoader
from .utilities.presets import RampPreset
from .errors import EmptyInputError

logger = logging.getLogger(__name__)


RampFormat = Literal['tga', 'png', 'jpg']
PathLike = Union[str, Path]

MASK_MAP_SUFFIX = "_MaskMap"


class TexturePipeline:
    """Texture authoring workflows over image files.

    Example:
        >>> pipeline = TexturePipeline()
        >>>
        >>> # Ramp preset -> Ramps/ToonSkin.tga
        >>> pipeline.save_ramp(RampPreset.load('toon_skin.json'), 'Ramps/')
        >>>
        >>> # Metallic + roughness -> Rock_Metallic_MaskMap.png
        >>> pipeline.mix_textures(
        ...     red='Rock_Metallic.png',
        ...     alpha='Rock_Roughness.png',
        ...     use_roughness=True
        ... )
        >>>
        >>> # Rock_MaskMap.png -> Rock_MaskMap_R.png ... Rock_MaskMap_A.png
        >>> pipeline.separate_texture('Rock_MaskMap.png')
    """

    def __init__(
        self,
        exporter: Optional[ImageExporter] = None,
        loader: Optional[ImageLoader] = None,
        ramp_composer: Optional[RampComposer] = None,
        channel_composer: Optional[ChannelComposer] = None
    ):
        """Initialize the TexturePipeline.

        Args:
            exporter: Image writer (default ImageExporter())
            loader: Image reader (default ImageLoader())
            ramp_composer: Ramp builder (default RampComposer())
            channel_composer: Channel packer (default ChannelComposer())
        """
        self.exporter = exporter or ImageExporter()
        self.loader = loader or ImageLoader()
        self.ramp_composer = ramp_composer or RampComposer()
        self.channel_composer = channel_composer or ChannelComposer()

    def render_ramp(self, preset: RampPreset) -> Image:
        """Compose the ramp texture described by a preset."""
        return self.ramp_composer.compose(
            preset.gradients,
            row_width=preset.row_width,
            row_height=preset.row_height
        )

    def save_ramp(
        self,
        preset: RampPreset,
        output_dir: PathLike,
        image_format: RampFormat = 'tga'
    ) -> Path:
        """Render a preset and write it as <output_dir>/<preset.name>.<ext>.

        Args:
            preset: Ramp configuration
            output_dir: Destination directory (created if missing)
            image_format: 'tga', 'png' or 'jpg'

        Returns:
            Path to the written texture
        """
        extension = self.exporter.extension_for(image_format)
        ramp = self.render_ramp(preset)
        filepath = Path(output_dir) / f"{preset.name}{extension}"

        logger.info(
            f"Writing ramp '{preset.name}': {len(preset.gradients)} band(s), "
            f"{ramp.width}x{ramp.height}"
        )
        return self.exporter.auto_save(ramp, filepath)

    def mix_textures(
        self,
        red: Optional[PathLike] = None,
        green: Optional[PathLike] = None,
        blue: Optional[PathLike] = None,
        alpha: Optional[PathLike] = None,
        use_roughness: bool = False,
        output_path: Optional[PathLike] = None
    ) -> Path:
        """Pack up to four texture files into one RGBA texture.

        Each input is read at its red channel (the value of a greyscale map).

        Args:
            red: Texture for the R channel (metallic)
            green: Texture for the G channel (occlusion)
            blue: Texture for the B channel (detail mask)
            alpha: Texture for the A channel (smoothness, or roughness with
                use_roughness)
            use_roughness: Invert the alpha input
            output_path: Destination file. Defaults to <stem>_MaskMap.png next to
                the first given input

        Returns:
            Path to the written texture

        Raises:
            EmptyInputError: If no input path is given
            DimensionMismatchError: If inputs differ in size
        """
        inputs = {
            Channel.R: red,
            Channel.G: green,
            Channel.B: blue,
            Channel.A: alpha,
        }
        given = [Path(p) for p in inputs.values() if p is not None]
        if not given:
            raise EmptyInputError("No input textures: pass at least one of red, green, blue, alpha")

        sources = {
            channel: self.loader.load(path) if path is not None else None
            for channel, path in inputs.items()
        }
        mixed = self.channel_composer.compose(sources, invert_and_swap_roughness=use_roughness)

        if output_path is None:
            first = given[0]
            output_path = first.parent / f"{first.stem}{MASK_MAP_SUFFIX}.png"

        return self.exporter.auto_save(mixed, output_path)

    def separate_texture(
        self,
        input_path: PathLike,
        output_dir: Optional[PathLike] = None
    ) -> Dict[Channel, Path]:
        """Split a texture into <stem>_R.png, <stem>_G.png, <stem>_B.png, <stem>_A.png.

        Args:
            input_path: Texture to split
            output_dir: Destination directory (default: the input's directory)

        Returns:
            Dict mapping each Channel to its written file
        """
        input_path = Path(input_path)
        output_dir = Path(output_dir) if output_dir is not None else input_path.parent

        source = self.loader.load(input_path)
        channels = self.channel_composer.separate(source)

        written = {}
        for channel, image in channels.items():
            filepath = output_dir / f"{input_path.stem}_{channel.name}.png"
            written[channel] = self.exporter.save_png(image, filepath)

        logger.info(f"Separated {input_path.name} into {len(written)} channel textures in {output_dir}")
        return written
