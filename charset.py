from bisect import bisect_left

import numpy as np
from PIL import Image, ImageDraw

# Fonts are loaded at GLYPH_SIZE px and measured on a fixed CANVAS so narrow
# glyphs are not boosted relative to wide ones.
GLYPH_SIZE = 100
CANVAS = GLYPH_SIZE * 2


def rasterize(char, font):
    """Render ``char`` into a tightly cropped coverage bitmap ("L" mode).

    Returns None for glyphs with no visual extent (space, control characters).
    """
    left, top, right, bottom = font.getbbox(char)
    width, height = right - left, bottom - top
    if width <= 0 or height <= 0:
        return None

    glyph = Image.new("L", (width, height), 0)
    ImageDraw.Draw(glyph).text((-left, -top), char, fill=255, font=font)
    return glyph


def average_brightness(char, font):
    glyph = rasterize(char, font)
    if glyph is None:
        return 0.0

    canvas = Image.new("L", (CANVAS, CANVAS), 0)
    canvas.paste(glyph, (0, 0))
    coverage = np.asarray(canvas, dtype=np.float64) / 255.0
    return float(coverage.mean())


class CharacterSet:
    """Characters sorted by how much ink they put on screen."""

    def __init__(self, chars, font):
        entries = [(c, average_brightness(c, font)) for c in dict.fromkeys(chars)]
        entries.sort(key=lambda entry: entry[1])
        self._chars = entries
        self._brightness = [b for _, b in entries]

    def __len__(self):
        return len(self._chars)

    def chars(self):
        return iter(self._chars)

    def lowest_brightness(self):
        return self._chars[0] if self._chars else None

    def highest_brightness(self):
        return self._chars[-1] if self._chars else None

    def nearest_brightness(self, brightness):
        """Character for ``brightness``.

        This is the insertion point of a binary search, not a true nearest
        neighbour: between two entries it picks the one above, and anything
        past the brightest entry clamps to it.
        """
        if not self._chars:
            return None

        index = bisect_left(self._brightness, brightness)
        if index >= len(self._chars):
            index = len(self._chars) - 1
        return self._chars[index][0]
