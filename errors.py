class Img2AsciiError(Exception):
    pass


class FontLoadError(Img2AsciiError):
    pass


class InvalidConfigError(Img2AsciiError, ValueError):
    pass


class ImageDecodeError(Img2AsciiError):
    pass
