import argparse
import os
import sys

from PIL import Image

from charset import CharacterSet
from convert import image_to_ascii
from errors import ImageDecodeError, Img2AsciiError
from fonts import discover_monospace, load_font
from render import render

DEFAULT_CHARSET = " ░▒▓█"
DEFAULT_WIDTH = 80


def terminal_width():
    try:
        return os.get_terminal_size().columns
    except OSError:
        return DEFAULT_WIDTH


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Display images in the terminal as ASCII art')
    parser.add_argument('image', help='Path to image file')
    parser.add_argument('-w', '--width', type=int, default=None, help='Output width in columns (default: terminal width)')
    parser.add_argument('-c', '--charset', default=DEFAULT_CHARSET, help='Characters to draw with')
    parser.add_argument('-nc', '--no-color', dest='colored', action='store_false', default=True,
                        help='Pick characters by luminance instead of opacity')
    parser.add_argument('-f', '--font', default=None, help='Font used to measure the characters')
    parser.add_argument('-p', '--plain', action='store_true', help='Print characters without color escapes')
    return parser.parse_args(argv)


def open_image(path):
    try:
        img = Image.open(path)
        img.load()
    except OSError as e:
        raise ImageDecodeError(f"Cannot read image {path}: {e}") from e
    return img


def run(args):
    img = open_image(args.image)
    font = load_font(args.font) if args.font else discover_monospace()
    charset = CharacterSet(args.charset, font)
    width = args.width
    if width is None:
        # chunk_sizes needs 2px per column, so narrow images get fewer columns
        width = min(terminal_width(), max(img.width // 2, 1))

    cells, columns = image_to_ascii(img, charset, width, args.colored)
    return render(cells, columns, plain=args.plain)


def main(argv=None):
    args = parse_args(argv)

    try:
        frame = run(args)
    except Img2AsciiError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    sys.stdout.write(frame)
    sys.stdout.flush()
    return 0

if __name__ == "__main__":
    sys.exit(main())
