from blocks import average_blocks, chunk_sizes, pad_image, to_rgba8
from errors import InvalidConfigError


def brightness_range(charset):
    lowest = charset.lowest_brightness()
    highest = charset.highest_brightness()
    if lowest is None or highest is None:
        raise InvalidConfigError("character set is empty")
    return lowest[1], highest[1]


def map_brightness(sample, charset, colored, brightness_range):
    # Glyph brightness is nowhere near 0..1 in practice, so stretch the
    # sample onto whatever range the character set actually covers.
    low, high = brightness_range
    raw = sample.alpha() if colored else sample.brightness()
    mapped = raw * (high - low) + low

    char = charset.nearest_brightness(mapped)
    return char if char is not None else " "


def image_to_ascii(img, charset, desired_width, colored=True):
    """Convert ``img`` into a flat row-major list of ``(char, (r, g, b))``.

    Returns the cells together with the number of columns per row.
    """
    b_range = brightness_range(charset)
    horizontal, vertical = chunk_sizes(img.width, desired_width)

    img = pad_image(to_rgba8(img), horizontal, vertical)
    samples, columns = average_blocks(img, horizontal, vertical)

    cells = [
        (map_brightness(sample, charset, colored, b_range), sample.to_rgb8())
        for sample in samples
    ]
    return cells, columns
