import os
import platform

from PIL import ImageFont

from charset import GLYPH_SIZE
from errors import FontLoadError


def monospace_candidates():
    system = platform.system().lower()

    if "darwin" in system:
        return [
            "/System/Library/Fonts/Menlo.ttc",
            "/System/Library/Fonts/Monaco.ttf",
            "/Library/Fonts/Courier New.ttf",
            "/System/Library/Fonts/Supplemental/Courier New.ttf",
        ]
    if "windows" in system:
        windir = os.environ.get("WINDIR", r"C:\Windows")
        return [
            os.path.join(windir, "Fonts", "CASCADIAMONO.TTF"),
            os.path.join(windir, "Fonts", "CONSOLA.TTF"),
            os.path.join(windir, "Fonts", "LUCON.TTF"),
        ]
    return [
        "/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf",
        "/usr/share/fonts/TTF/DejaVuSansMono.ttf",
        "/usr/share/fonts/truetype/liberation/LiberationMono-Regular.ttf",
        "/usr/share/fonts/truetype/noto/NotoSansMono-Regular.ttf",
        "/usr/share/fonts/truetype/ubuntu/UbuntuMono-R.ttf",
    ]


def load_font(path, size=GLYPH_SIZE):
    try:
        return ImageFont.truetype(path, size)
    except OSError as e:
        raise FontLoadError(f"Failed to load font {path}: {e}") from e


def discover_monospace(size=GLYPH_SIZE):
    """Best-effort system monospace font, falling back to Pillow's bundled one."""
    for path in monospace_candidates():
        if os.path.exists(path):
            return load_font(path, size)

    try:
        return ImageFont.load_default(size)
    except (OSError, ImportError) as e:
        raise FontLoadError(f"No monospace font found and no fallback available: {e}") from e
