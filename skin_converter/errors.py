"""Exceptions raised by the skin converter. All derive from ValueError."""

PREFIX = "MINECRAFT-SKIN-CONVERTER: "


class SkinConverterError(ValueError):
    def __init__(self, message: str):
        super().__init__(PREFIX + message)


class InvalidInputTypeError(SkinConverterError):
    """Source is neither in-memory bytes nor a resolvable path / data URI."""


class DimensionMismatchError(SkinConverterError):
    """Decoded size differs from the size the file header reports."""


class InvalidDimensionsError(SkinConverterError):
    """Raster is not one of the accepted skin sizes."""


class SizeTooSmallError(SkinConverterError):
    """Requested head thumbnail is smaller than 8px."""


class DecodeFailureError(SkinConverterError):
    """The image bytes could not be read or decoded."""
