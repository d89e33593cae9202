"""Exceptions raised by chromaconv."""


class ChromaconvError(Exception):
    """Base class for every error raised by this package."""


class UnsupportedConversion(ChromaconvError, ValueError):
    """The source or target kind (or a named preset) is not recognized."""


class InvalidArgument(ChromaconvError, ValueError):
    """A value cannot be built from the given components or base color."""


class OutOfRange(ChromaconvError, IndexError):
    """A component index lies outside the color's fixed channel count."""
