"""
errors.py — Exception hierarchy for panorama → cubemap conversion.

Every error is terminal: the CLI reports it once and aborts the run.
"""


class ConversionError(Exception):
    """Base class for every error raised while converting a panorama."""


class InvalidArgumentCountError(ConversionError):
    """Fewer positional arguments than the CLI needs (prints usage, exits 0)."""


class InvalidSizeArgumentError(ConversionError, ValueError):
    """Output size is not a positive integer."""


class ImageDecodeError(ConversionError):
    """Source image could not be read or decoded."""


class DirectoryCreateError(ConversionError, OSError):
    """Output folder could not be created."""


class ImageEncodeError(ConversionError):
    """A cube face could not be encoded or written."""


class ZeroVectorError(ConversionError, ValueError):
    """Normalisation of a zero-length vector."""


class RenderStateError(ConversionError, RuntimeError):
    """Renderer stepped after it finished or failed."""
