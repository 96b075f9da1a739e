"""Exception types raised by the geometry primitives."""

from __future__ import annotations

from typing import Optional, TypeVar

T = TypeVar("T")


class GeometryError(Exception):
    """Base class for all geom3d errors."""


class MissingValueError(GeometryError, TypeError):
    """A required point, line or cube argument was ``None``."""


class InvalidGeometryError(GeometryError, ValueError):
    """Argument rejected at a constructor or factory boundary.

    Covers non-positive sizes and scale factors, negative radii,
    coincident line endpoints, wrong vertex counts and inverted bounds.
    """


class DegenerateVectorError(GeometryError, ZeroDivisionError):
    def __init__(self, message: str = "Cannot normalize zero vector"):
        self.message = message
        super().__init__(self.message)


def require(value: Optional[T], name: str) -> T:
    """Return *value*, raising MissingValueError if it is ``None``."""
    if value is None:
        raise MissingValueError(f"{name} cannot be None")
    return value
