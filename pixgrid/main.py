"""Command-line entry point for pixgrid.

This tool loads an image (a file, a bundled resource, or a JSON pixel
array), downsamples it to a square grid, optionally blurs each cell with
its neighbors, and saves the grid drawn as solid colored squares.

Usage example:
    python -m pixgrid.main -i input.png -o output.png --size 100 --blur-distance 5
"""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional

from .config import GridOptions
from .extract import RESAMPLE_MODES, load_pixels
from .jsonio import encode_pixels
from .render import render_options
from .sources import DEFAULT_RESOURCE, PackageSource, source_for_path
from .utils.loader import save_image

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Parameters
    ----------
    argv : list[str] | None
        Optional list of arguments for testing. If None, uses sys.argv.

    Returns
    -------
    argparse.Namespace
        Parsed arguments.
    """
    defaults = GridOptions()
    parser = argparse.ArgumentParser(
        prog="pixgrid",
        description=(
            "Downsample an image to a grid of colored squares, optionally "
            "blurring each square with its neighbors."
        ),
    )

    src = parser.add_mutually_exclusive_group()
    src.add_argument("-i", "--input", help="Path to an image file or a .json pixel array")
    src.add_argument(
        "--resource",
        default=DEFAULT_RESOURCE,
        help=f"Bundled resource name, used when no --input is given (default: {DEFAULT_RESOURCE})",
    )
    parser.add_argument("-o", "--output", required=True, help="Path to output image file")

    parser.add_argument("--size", type=int, default=defaults.size, help="Grid side in cells (1..200)")
    parser.add_argument(
        "--blur-distance",
        type=int,
        default=defaults.blur_distance,
        help="Half-width of the square neighbor window (>=0)",
    )
    parser.add_argument(
        "--weight",
        type=float,
        default=defaults.weight,
        help="Contribution of each neighbor relative to the cell itself (>=0)",
    )
    parser.add_argument("--no-blur", action="store_true", help="Draw the grid without blurring")
    parser.add_argument(
        "--cell-size",
        type=int,
        default=defaults.cell_size,
        help="Side of each drawn square in output pixels (>=1)",
    )
    parser.add_argument(
        "--resample",
        type=str,
        default=defaults.resample,
        choices=list(RESAMPLE_MODES),
        help="Resampling used to shrink the source image to the grid",
    )
    parser.add_argument("--dump-json", default=None, help="Also write the extracted pixels as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    return parser.parse_args(argv)


def options_from_args(ns: argparse.Namespace) -> GridOptions:
    """Build and validate GridOptions from parsed arguments."""
    options = GridOptions(
        size=ns.size,
        blur_distance=ns.blur_distance,
        weight=ns.weight,
        blurred=not ns.no_blur,
        cell_size=ns.cell_size,
        resample=ns.resample,
    )
    options.validate()
    return options


def validate_args(ns: argparse.Namespace) -> None:
    """Validate argument values and raise ValueError for invalid inputs."""
    if ns.input is not None and not Path(ns.input).exists():
        raise ValueError(f"Input file not found: {ns.input}")
    options_from_args(ns)


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry function for the CLI.

    Parameters
    ----------
    argv : list[str] | None
        Optional list of arguments for testing.

    Returns
    -------
    int
        Exit status code: 0 on success, 1 when nothing could be loaded
        or written, 2 for invalid arguments.
    """
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        validate_args(args)
    except ValueError as e:
        print(f"Argument error: {e}")
        return 2
    options = options_from_args(args)

    # 1) Load pixels from a file or the bundled resources
    if args.input is not None:
        source, name = source_for_path(args.input)
    else:
        source, name = PackageSource(), args.resource
    pixels = load_pixels(source, name, size=options.size, resample=options.resample)
    if not pixels:
        logger.error("Nothing to render from %s", name)
        return 1

    # 2) Draw the grid (NumPy -> Pillow)
    out = render_options(pixels, options)
    try:
        if args.dump_json:
            Path(args.dump_json).write_text(encode_pixels(pixels), encoding="utf-8")
            logger.info("Wrote %d pixels to %s", len(pixels), args.dump_json)
        save_image(out, args.output)
    except (OSError, ValueError) as e:
        print(f"Write error: {e}")
        return 1
    logger.info("Wrote %dx%d grid to %s", options.size, options.size, args.output)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
