"""
Error types raised by the geometry core and the data loader.

All of them are ValueError subclasses, so callers that only care about
"bad input" can catch ValueError.
"""


class GeometryError(ValueError):
    """Base class for every recoverable analyzer error."""


class InvalidLineError(GeometryError):
    """Both a and b are zero: a*x + b*y = c does not describe a line."""


class InvalidInputError(GeometryError):
    """A line set passed to the quadrilateral classifier does not hold 4 lines."""


class LineDataError(GeometryError):
    """The line-data source is missing, unreadable or malformed."""
