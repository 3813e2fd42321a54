#!/usr/bin/env python3
"""
tocubemap.py — Convert an equirectangular panorama to six cube-face PNGs.

Writes face0.png … face5.png into the output folder (created if absent,
one level only):
    face0  +Y      face3  -Z (down)
    face1  -Y      face4  +X
    face2  +Z (up) face5  -X

Usage:
    pano2cube <output_size> <input_image> <output_folder>
    python3 -m pano2cube 512 skybox.png output

Dependencies: Pillow, numpy

The source is expected to be 2:1; other aspect ratios are converted as if
they were 2:1 (with a warning), which stretches the result horizontally.
"""

import argparse
import os
import re
import sys
import traceback
from typing import Optional, Sequence

from .codec import FolderWriter, ImageCodec, PillowCodec, load_image
from .errors import (ConversionError, InvalidArgumentCountError,
                     InvalidSizeArgumentError)
from .render import CubemapRenderer

PROG = 'pano2cube'
SIZE_PATTERN = re.compile(r'[+-]?[0-9]+')
HELP_FLAGS = ('-h', '--help')


# ── Argument handling ─────────────────────────────────────────────────────────

def parse_size(text: str) -> int:
    """Parse the output face size; must be a positive integer."""
    if not SIZE_PATTERN.fullmatch(text):
        raise InvalidSizeArgumentError(
            f"invalid output size {text!r}: not an integer")
    size = int(text)
    if size <= 0:
        raise InvalidSizeArgumentError(
            f"invalid output size {text!r}: must be positive")
    return size


def build_parser(prog: str = PROG) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=prog,
        description='Convert an equirectangular panorama to six cube-face PNGs.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            'Output: face0.png … face5.png inside output_folder.\n'
            'The input should have a 2:1 aspect ratio.'
        ),
    )
    parser.add_argument('output_size', nargs='?', help='Cube face side length in pixels')
    parser.add_argument('input_image', nargs='?', help='Equirectangular image path')
    parser.add_argument('output_folder', nargs='?', help='Folder for the face PNGs')
    parser.add_argument('extra', nargs='*', help=argparse.SUPPRESS)
    return parser


def print_usage(prog: str = PROG) -> None:
    print(f"Usage: {prog} <output_size> <input_image> <output_folder>")
    print(f"Example: {prog} 512 skybox.png output")


# ── Main processing ───────────────────────────────────────────────────────────

def convert(size: int, input_path: str, output_folder: str,
            codec: Optional[ImageCodec] = None) -> list[str]:
    """
    Convert *input_path* into six faces of *size* px inside *output_folder*.

    Returns the paths written.  Raises a ConversionError subclass on failure;
    faces written before the failure are left in place.
    """
    codec = codec or PillowCodec()

    print(f"Processing: {os.path.abspath(input_path)}")
    source = load_image(input_path, codec)
    H, W = source.shape[:2]
    print(f"Source:     {W} × {H} px")
    print(f"Face size:  {size} × {size} px")
    if W != 2 * H:
        print(f"WARNING: source is {W} × {H}, not 2:1 — faces will be stretched",
              file=sys.stderr)

    codec.ensure_directory(output_folder)

    written: list[str] = []
    renderer = CubemapRenderer(
        source, size, FolderWriter(output_folder, codec),
        on_face=lambda _, name: written.append(os.path.join(output_folder, name)),
    )
    renderer.run()

    print(f"Done → {output_folder}")
    return written


# ── CLI ───────────────────────────────────────────────────────────────────────

def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    argv = list(sys.argv[1:] if argv is None else argv)
    # everything is positional, even paths starting with '-'
    if not argv or argv[0] not in HELP_FLAGS:
        argv.insert(0, '--')
    args = parser.parse_args(argv)

    try:
        if args.output_folder is None:
            raise InvalidArgumentCountError("expected 3 arguments")
        size = parse_size(args.output_size)
        convert(size, args.input_image, args.output_folder)
    except InvalidArgumentCountError:
        print_usage(parser.prog)
        return 0
    except ConversionError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    except Exception as exc:
        print(f"ERROR converting {args.input_image}: {exc}", file=sys.stderr)
        traceback.print_exc()
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
