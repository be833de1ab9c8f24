"""Exception types raised by texture_toolkit.

All errors derive from TextureToolkitError, which is a ValueError so callers
that already catch ValueError for bad input keep working.
"""


class TextureToolkitError(ValueError):
    """Base class for all texture_toolkit errors."""


class EmptyInputError(TextureToolkitError):
    """Raised when an operation receives nothing to work on."""


# Name used by the channel mixer when no source texture is assigned.
InvalidInputError = EmptyInputError


class DimensionMismatchError(TextureToolkitError):
    """Raised when images that must share a size do not."""


class InvalidParameterError(TextureToolkitError):
    """Raised for out-of-range sizes, positions, channel names or indices."""


class UnsupportedFormatError(TextureToolkitError):
    """Raised for image formats the exporter cannot write."""


class PresetError(TextureToolkitError):
    """Raised when a ramp preset file cannot be parsed."""
