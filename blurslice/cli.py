# blurslice - Command Line Tool
"""
Blur image files or benchmark the blur from the command line.

Usage:
    # Blur an image, writing blurred-out.png
    blurslice blur photo.png 4.0

    # Custom output file
    blurslice blur photo.png 4.0 --output soft.png

    # Benchmark on a synthetic image or a given file
    blurslice bench
    blurslice bench photo.png --sigma 50 --sigma 1.5 --iterations 5
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

from .benchmark import Benchmark, BenchmarkConfig
from .config import settings
from .exceptions import BlurError
from .filters.blur import blur_image
from .pixel_format import PixelFormat

logger = logging.getLogger(__name__)


def load_pixels(path: Path) -> tuple[np.ndarray, PixelFormat]:
    """Load an image file as a uint8 array.

    Modes other than L, LA, RGB and RGBA are converted to RGB.
    """
    with Image.open(path) as img:
        try:
            fmt = PixelFormat.from_pil_mode(img.mode)
        except ValueError:
            logger.debug(f"Converting {img.mode} image to RGB")
            img = img.convert("RGB")
            fmt = PixelFormat.RGB
        pixels = np.array(img, dtype=np.uint8)
    return pixels, fmt


def save_pixels(pixels: np.ndarray, path: Path) -> None:
    """Save a (H, W) or (H, W, C) uint8 array as an image file."""
    Image.fromarray(pixels).save(path)


def _cmd_blur(args: argparse.Namespace) -> int:
    source = Path(args.image)
    output = Path(args.output)
    try:
        pixels, fmt = load_pixels(source)
    except (OSError, UnidentifiedImageError) as e:
        print(f"Error: cannot load {source}: {e}", file=sys.stderr)
        return 1

    height, width = pixels.shape[:2]
    print(f"Blurring {source} ({width}x{height} {fmt.pil_mode}) at sigma {args.sigma}...")
    try:
        result = blur_image(pixels, args.sigma)
    except BlurError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        save_pixels(result, output)
    except (OSError, ValueError) as e:
        print(f"Error: cannot save {output}: {e}", file=sys.stderr)
        return 1
    print(f"Saved {output}")
    return 0


def _cmd_bench(args: argparse.Namespace) -> int:
    if args.image:
        try:
            source, _ = load_pixels(Path(args.image))
        except (OSError, UnidentifiedImageError) as e:
            print(f"Error: cannot load {args.image}: {e}", file=sys.stderr)
            return 1
        name = Path(args.image).name
    else:
        source = Benchmark.synthetic_source()
        name = "synthetic"

    config = BenchmarkConfig()
    if args.sigma:
        config.sigmas = list(args.sigma)
    if args.iterations is not None:
        config.iterations = args.iterations

    result = Benchmark.run(source, config, name=name)
    result.print()
    return 0


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog='blurslice',
        description='Fast approximate Gaussian blur for 8-bit images',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s blur photo.png 4.0                # Writes blurred-out.png
  %(prog)s blur photo.png 4.0 -o soft.png    # Custom output file
  %(prog)s bench --sigma 1.5 --iterations 3  # Benchmark a synthetic image
"""
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable debug logging'
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    blur = subparsers.add_parser('blur', help='Blur an image file')
    blur.add_argument('image', help='Input image file')
    blur.add_argument(
        'sigma',
        type=float,
        nargs='?',
        default=settings.DEFAULT_SIGMA,
        help=f'Gaussian sigma in pixels (default: {settings.DEFAULT_SIGMA})'
    )
    blur.add_argument(
        '--output', '-o',
        default=settings.DEFAULT_OUTPUT,
        help=f'Output file (default: {settings.DEFAULT_OUTPUT})'
    )
    blur.set_defaults(func=_cmd_blur)

    bench = subparsers.add_parser('bench', help='Benchmark the blur')
    bench.add_argument('image', nargs='?', help='Image file (default: synthetic noise)')
    bench.add_argument(
        '--sigma',
        type=float,
        action='append',
        help='Sigma to benchmark, may be repeated (default: from settings)'
    )
    bench.add_argument(
        '--iterations', '-n',
        type=_positive_int,
        default=None,
        help='Timed iterations per sigma'
    )
    bench.set_defaults(func=_cmd_bench)

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.LOG_LEVEL.upper(),
        format='%(levelname)s %(name)s: %(message)s',
    )
    return args.func(args)


if __name__ == '__main__':
    sys.exit(main())
