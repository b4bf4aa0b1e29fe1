"""
Show Image - Terminal Netpbm Viewer
===================================
Loads a PBM/PGM/PPM file and prints its header and pixels.

Usage:
    python demos/show_image/main.py image.pbm
    python demos/show_image/main.py image.ppm --invert --rotate -v
"""

import argparse
import logging
import sys

from netpbm import NetpbmImage, Kind, NetpbmError

# Gray ramp from dark to light
_RAMP = " .:-=+*#%@"


def render_row(img, y):
    """Render one image row as text."""
    chars = []
    for x in range(img.width):
        value = img.at(x, y)
        if img.kind == Kind.BITMAP:
            chars.append("■" if value else "□")
            continue
        if img.kind == Kind.COLOR:
            value = sum(value) // 3
        level = min(value, img.max_value) * (len(_RAMP) - 1) // img.max_value
        chars.append(_RAMP[level])
    return "".join(chars)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Print a Netpbm image")
    parser.add_argument("path", help="PBM, PGM or PPM file")
    parser.add_argument("--invert", action="store_true", help="invert before printing")
    parser.add_argument("--rotate", action="store_true", help="rotate 90 degrees clockwise")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        img = NetpbmImage.open(args.path)
    except (OSError, NetpbmError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.invert:
        img.invert()
    if args.rotate:
        img.rotate90cw()

    width, height = img.size()
    print(f"Magic Number: {img.magic_number}")
    print(f"Width:  {width}")
    print(f"Height: {height}")
    if img.max_value is not None:
        print(f"Max:    {img.max_value}")
    print("Data:")
    for y in range(height):
        print(render_row(img, y))
    return 0


if __name__ == "__main__":
    sys.exit(main())
