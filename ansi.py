ESC = "\033"
RESET = ESC + "[0m"


def rgb_to_ansi256(r, g, b):
    """Nearest index in the 256 color palette.

    Pure greys go through the 24 step greyscale ramp (232-255) instead of the
    6x6x6 cube, which only has a handful of grey points and looks banded.
    """
    if r == g == b:
        if r <= 8:
            return 16
        if r > 248:
            return 231
        return round((r - 8) / 247 * 24) + 232

    levels = [round(c / 255 * 5) for c in (r, g, b)]
    return 16 + 36 * levels[0] + 6 * levels[1] + levels[2]


def fg256(index):
    return f"{ESC}[38;5;{index}m"


def fg24(r, g, b):
    return f"{ESC}[38;2;{r};{g};{b}m"


def color_escape(color):
    # 256 color first so terminals without truecolor still get something close
    r, g, b = color
    return fg256(rgb_to_ansi256(r, g, b)) + fg24(r, g, b)
