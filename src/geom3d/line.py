"""Directed 3D line segments.

A ``Line3D`` owns two distinct endpoints. Direction is derived as
``end - start`` on demand. Reversing a line gives a different (unequal)
segment over the same locus.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Tuple

from .exceptions import InvalidGeometryError, require
from .geometry import clamp
from .parameters import EPSILON
from .point import Point3D

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Line3D:
    """Directed segment from ``start`` to ``end``.

    Raises
    ------
    MissingValueError
        If either endpoint is ``None``.
    InvalidGeometryError
        If the endpoints are equal under ``Point3D`` equality.
    """

    start: Point3D
    end: Point3D

    def __post_init__(self):
        require(self.start, "start point")
        require(self.end, "end point")
        if self.start == self.end:
            raise InvalidGeometryError(
                f"Start and end points must be different (degenerate line at {self.start})"
            )
        logger.debug("Created Line3D %s -> %s", self.start, self.end)

    @classmethod
    def from_points(cls, start: Point3D, end: Point3D) -> Line3D:
        return cls(start, end)

    @classmethod
    def from_direction_vector(cls, start: Point3D, direction: Point3D, length: float) -> Line3D:
        """Segment of *length* from *start* along *direction*.

        Parameters
        ----------
        start : Point3D
            First endpoint.
        direction : Point3D
            Any non-zero vector; only its direction is used.
        length : float
            Segment length. Must be positive.

        Raises
        ------
        InvalidGeometryError
            If *length* is not positive.
        DegenerateVectorError
            If *direction* is (near) zero.
        """
        require(start, "start point")
        require(direction, "direction")
        if length <= 0:
            raise InvalidGeometryError(f"Length must be positive (length={length})")
        step = direction.normalize().scale(length, length, length)
        return cls(start, start.translate(step.x, step.y, step.z))

    # ------------------------------------------------------------------
    # Derived geometry
    # ------------------------------------------------------------------

    def length(self) -> float:
        return self.start.distance_to(self.end)

    def direction(self) -> Point3D:
        """Unnormalized direction ``end - start``."""
        return self.end - self.start

    def normalized_direction(self) -> Point3D:
        return self.direction().normalize()

    def midpoint(self) -> Point3D:
        return self.start.midpoint(self.end)

    def point_at_parameter(self, t: float) -> Point3D:
        """Point ``start + t * direction``.

        ``t`` in [0, 1] stays on the segment; other values extrapolate
        along the infinite line and are logged as a warning.
        """
        if t < 0 or t > 1:
            logger.warning("Parameter t=%g is outside [0, 1]; point lies off the segment", t)
        return self.start + self.direction() * t

    # ------------------------------------------------------------------
    # Point queries
    # ------------------------------------------------------------------

    def _project(self, point: Point3D) -> float:
        """Clamped parameter of the orthogonal projection of *point*."""
        direction = self.direction()
        to_point = point - self.start
        t = to_point.dot_product(direction) / direction.dot_product(direction)
        return clamp(t)

    def distance_to_point(self, point: Point3D) -> float:
        """Distance from *point* to the nearest point of the segment."""
        require(point, "point")
        t = self._project(point)
        distance = point.distance_to(self.point_at_parameter(t))
        logger.debug("Distance from %s to %s: %g (t=%g)", point, self, distance, t)
        return distance

    def closest_point_to(self, point: Point3D) -> Point3D:
        """Nearest point of the segment to *point*."""
        require(point, "point")
        return self.point_at_parameter(self._project(point))

    def contains_point(self, point: Point3D) -> bool:
        require(point, "point")
        return self.distance_to_point(point) < EPSILON

    # ------------------------------------------------------------------
    # Line-line queries
    # ------------------------------------------------------------------

    def closest_parameters(self, other: Line3D) -> Tuple[float, float]:
        """Clamped parameters ``(s, t)`` of the closest points on both segments.

        Uses the two-pass clamp-and-recompute scheme: clamp both
        parameters, then re-solve ``t`` if ``s`` hit a boundary and ``s``
        if ``t`` hit a boundary. This is not the exact segment-segment
        minimum in every skew configuration near the endpoints; callers
        rely on its exact results, so it is kept as is.

        Parallel segments fix ``s = 0`` and project onto *other*.
        """
        require(other, "other line")
        d1 = self.direction()
        d2 = other.direction()
        w = self.start - other.start

        a = d1.dot_product(d1)
        b = d1.dot_product(d2)
        c = d2.dot_product(d2)
        d = d1.dot_product(w)
        e = d2.dot_product(w)
        denom = a * c - b * b

        if denom < EPSILON:
            s = 0.0
            t = clamp(d / b if b > c else e / c)
        else:
            s = clamp((b * e - c * d) / denom)
            t = clamp((a * e - b * d) / denom)
            if s <= EPSILON or s >= 1.0 - EPSILON:
                t = clamp((b * s + e) / c)
            if t <= EPSILON or t >= 1.0 - EPSILON:
                s = clamp((b * t - d) / a)

        logger.debug("Closest parameters s=%g t=%g (parallel=%s)", s, t, denom < EPSILON)
        return s, t

    def shortest_distance_to(self, other: Line3D) -> float:
        """Minimum distance between this segment and *other*."""
        s, t = self.closest_parameters(other)
        return self.point_at_parameter(s).distance_to(other.point_at_parameter(t))

    def is_parallel_to(self, other: Line3D) -> bool:
        require(other, "other line")
        cross = self.normalized_direction().cross_product(other.normalized_direction())
        return cross.magnitude() < EPSILON

    def is_perpendicular_to(self, other: Line3D) -> bool:
        require(other, "other line")
        dot = self.normalized_direction().dot_product(other.normalized_direction())
        return abs(dot) < EPSILON

    def angle_to(self, other: Line3D) -> float:
        """Acute angle between the two lines, in [0, pi/2] radians."""
        require(other, "other line")
        dot = abs(self.normalized_direction().dot_product(other.normalized_direction()))
        return math.acos(clamp(dot, -1.0, 1.0))

    # ------------------------------------------------------------------
    # Transforms
    # ------------------------------------------------------------------

    def translate(self, dx: float, dy: float, dz: float) -> Line3D:
        return Line3D(self.start.translate(dx, dy, dz), self.end.translate(dx, dy, dz))

    def scale(self, factor: float) -> Line3D:
        """Rescale about ``start``: the start stays fixed, the end moves.

        Raises
        ------
        InvalidGeometryError
            If *factor* is not positive.
        """
        if factor <= 0:
            raise InvalidGeometryError(f"Scale factor must be positive (factor={factor})")
        step = self.direction().scale(factor, factor, factor)
        return Line3D(self.start, self.start.translate(step.x, step.y, step.z))

    def reverse(self) -> Line3D:
        return Line3D(self.end, self.start)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Line3D):
            return NotImplemented
        return self.start == other.start and self.end == other.end

    def __hash__(self) -> int:
        return hash((self.start, self.end))

    def __str__(self) -> str:
        return f"Line3D[start={self.start}, end={self.end}, length={self.length():.2f}]"
