"""Error types raised by the radial layout engine and ring primitives."""


class RingsError(Exception):
    """Base class for ringplot errors."""


class InvalidRangeError(RingsError, ValueError):
    """Raised for inverted radii, inverted features or out-of-bounds features."""


class NotFoundError(RingsError, LookupError):
    """Raised when an arc is requested for a location that was not laid out."""


class ArcOverflowError(RingsError, ArithmeticError):
    """Raised when the requested gaps do not fit in the base arc."""


class UnsupportedTypeError(RingsError, TypeError):
    """Raised when an unexpected variant reaches a dispatch point."""


class RenderError(RingsError, RuntimeError):
    """Raised when a validated primitive cannot be rendered."""
