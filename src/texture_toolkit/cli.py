"""Command-line front end for texture_toolkit.

Subcommands:
    ramp         Render a ramp preset to a TGA/PNG/JPG texture
    mix          Pack up to four textures into one RGBA texture
    separate     Split a texture into per-channel greyscale PNGs
    init-preset  Write a starter ramp preset
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from .core.gradient import Gradient
from .errors import TextureToolkitError
from .pipeline import TexturePipeline
from .utilities.presets import RampPreset, DEFAULT_RAMP_NAME

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='texture-toolkit',
        description="Generate ramp textures and pack/split texture channels"
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable debug logging'
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    ramp = subparsers.add_parser('ramp', help='Render a ramp preset')
    ramp.add_argument('preset', type=Path, help='Path to ramp preset JSON')
    ramp.add_argument(
        '-o', '--output-dir',
        type=Path,
        default=Path('.'),
        help='Output directory (default: current directory)'
    )
    ramp.add_argument(
        '-f', '--format',
        choices=['tga', 'png', 'jpg'],
        default='tga',
        help='Output format (default: tga)'
    )
    ramp.add_argument('--row-width', type=int, help='Override band width from the preset')
    ramp.add_argument('--row-height', type=int, help='Override band height from the preset')

    mix = subparsers.add_parser('mix', help='Pack textures into RGBA channels')
    mix.add_argument('-r', '--red', type=Path, help='R channel texture (metallic)')
    mix.add_argument('-g', '--green', type=Path, help='G channel texture (occlusion)')
    mix.add_argument('-b', '--blue', type=Path, help='B channel texture (detail mask)')
    mix.add_argument('-a', '--alpha', type=Path, help='A channel texture (smoothness)')
    mix.add_argument(
        '--use-roughness',
        action='store_true',
        help='Alpha input is roughness; store smoothness = 1 - roughness'
    )
    mix.add_argument(
        '-o', '--output',
        type=Path,
        help='Output file (default: <first input>_MaskMap.png)'
    )

    separate = subparsers.add_parser('separate', help='Split a texture into channels')
    separate.add_argument('input', type=Path, help='Texture to split')
    separate.add_argument(
        '-o', '--output-dir',
        type=Path,
        help="Output directory (default: the input's directory)"
    )

    init = subparsers.add_parser('init-preset', help='Write a starter ramp preset')
    init.add_argument('path', type=Path, help='Preset file to create')
    init.add_argument('--name', default=DEFAULT_RAMP_NAME, help='Ramp texture name')

    return parser


def run(args: argparse.Namespace, pipeline: Optional[TexturePipeline] = None) -> Path:
    """Execute a parsed command and return the main output path."""
    pipeline = pipeline or TexturePipeline()

    if args.command == 'ramp':
        preset = RampPreset.load(args.preset)
        overrides = {}
        if args.row_width is not None:
            overrides['row_width'] = args.row_width
        if args.row_height is not None:
            overrides['row_height'] = args.row_height
        if overrides:
            preset = replace(preset, **overrides)
        return pipeline.save_ramp(preset, args.output_dir, image_format=args.format)

    if args.command == 'mix':
        return pipeline.mix_textures(
            red=args.red,
            green=args.green,
            blue=args.blue,
            alpha=args.alpha,
            use_roughness=args.use_roughness,
            output_path=args.output
        )

    if args.command == 'separate':
        written = pipeline.separate_texture(args.input, output_dir=args.output_dir)
        return next(iter(written.values())).parent

    if args.command == 'init-preset':
        preset = RampPreset(
            name=args.name,
            gradients=[Gradient.from_colors('#000000', '#FFFFFF')]
        )
        return preset.save(args.path)

    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        output = run(args)
    except (TextureToolkitError, OSError) as e:
        logger.error(str(e))
        return 1

    logger.info(f"Done: {output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
