from collections import namedtuple

import numpy as np
from PIL import Image

from errors import InvalidConfigError

# 16 bit luminance as Pillow decodes it ("I" for older PNG plugins)
WIDE_MODES = ("I", "I;16", "I;16B", "I;16L")


class Rgba(namedtuple("Rgba", "r g b a")):
    __slots__ = ()

    def brightness(self):
        return (self.r + self.g + self.b) / 3 / 255

    def alpha(self):
        return self.a / 255

    def to_rgb8(self):
        return tuple(int(min(max(c, 0.0), 255.0)) for c in (self.r, self.g, self.b))


def chunk_sizes(image_width, desired_width):
    """Source pixels per output cell as ``(horizontal, vertical)``.

    Terminal cells are about twice as tall as they are wide, so a cell covers
    half as many columns as rows.
    """
    if desired_width < 1:
        raise InvalidConfigError(f"width must be positive, got {desired_width}")

    vertical = image_width // desired_width
    horizontal = vertical // 2
    if horizontal < 1 or vertical < 1:
        raise InvalidConfigError(
            f"width {desired_width} is too large for an image {image_width}px wide "
            f"(at most {image_width // 2} columns)"
        )
    return horizontal, vertical


def pad_image(img, horizontal, vertical):
    w_correction = horizontal - img.width % horizontal
    h_correction = vertical - img.height % vertical
    return img.resize(
        (img.width + w_correction, img.height + h_correction),
        Image.Resampling.BICUBIC,
    )


def to_rgba8(img):
    """Convert any Pillow image to 8 bit RGBA.

    Pillow clips 16 bit greyscale to 255 when converting it directly, so
    those modes are scaled down to 8 bit luminance first.
    """
    if img.mode in WIDE_MODES:
        levels = np.clip(np.asarray(img), 0, 65535).astype(np.uint32) >> 8
        img = Image.fromarray(levels.astype(np.uint8))
    return img.convert("RGBA")


def average_blocks(img, horizontal, vertical):
    """Average RGBA of every cell, row-major, and the number of columns.

    ``img`` must already be padded to a multiple of the chunk sizes.
    """
    pixels = np.asarray(to_rgba8(img), dtype=np.float64)
    height, width = pixels.shape[:2]
    columns = width // horizontal

    samples = []
    for top in range(0, height, vertical):
        for left in range(0, width, horizontal):
            chunk = pixels[top:min(top + vertical, height), left:min(left + horizontal, width)]
            mean = chunk.reshape(-1, 4).sum(axis=0) / (chunk.shape[0] * chunk.shape[1])
            samples.append(Rgba(*(float(c) for c in mean)))

    return samples, columns
