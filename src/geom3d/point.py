"""Immutable 3D point / free vector.

A ``Point3D`` is used both as a position and as a direction vector; every
operation returns a new instance.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterator

import numpy as np
from numpy.typing import NDArray

from .exceptions import DegenerateVectorError, InvalidGeometryError, require
from .parameters import DEFAULT_TOLERANCES, EPSILON

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Point3D:
    """3D point with epsilon-tolerant equality.

    Two points are equal when every coordinate differs by less than
    ``EPSILON``. Hashing rounds coordinates to
    ``Tolerances.hash_decimals`` places first, so points that are equal
    but straddle a rounding boundary can hash differently. Use computed
    points as dict keys only when they come from identical arithmetic.
    """

    x: float
    y: float
    z: float

    def __post_init__(self):
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        object.__setattr__(self, "z", float(self.z))

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def origin(cls) -> Point3D:
        """The point (0, 0, 0)."""
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def from_spherical(cls, radius: float, theta: float, phi: float) -> Point3D:
        """Build from spherical coordinates.

        Parameters
        ----------
        radius : float
            Distance from the origin. Must be non-negative.
        theta : float
            Azimuthal angle in the xy-plane from +x (radians).
        phi : float
            Polar angle from +z (radians).

        Raises
        ------
        InvalidGeometryError
            If *radius* is negative.
        """
        if radius < 0:
            raise InvalidGeometryError(f"Radius must be non-negative (radius={radius})")
        x = radius * math.sin(phi) * math.cos(theta)
        y = radius * math.sin(phi) * math.sin(theta)
        z = radius * math.cos(phi)
        logger.debug("Spherical (r=%g, theta=%g, phi=%g) -> (%g, %g, %g)", radius, theta, phi, x, y, z)
        return cls(x, y, z)

    @classmethod
    def from_cylindrical(cls, radius: float, theta: float, z: float) -> Point3D:
        """Build from cylindrical coordinates (radius, azimuth, height).

        Raises
        ------
        InvalidGeometryError
            If *radius* is negative.
        """
        if radius < 0:
            raise InvalidGeometryError(f"Radius must be non-negative (radius={radius})")
        x = radius * math.cos(theta)
        y = radius * math.sin(theta)
        logger.debug("Cylindrical (r=%g, theta=%g, z=%g) -> (%g, %g, %g)", radius, theta, z, x, y, z)
        return cls(x, y, z)

    @classmethod
    def from_array(cls, arr: NDArray[np.float64]) -> Point3D:
        """Create from a NumPy array of shape (3,)."""
        arr = np.asarray(arr, dtype=np.float64)
        if arr.shape != (3,):
            raise InvalidGeometryError(f"Expected array of shape (3,), got {arr.shape}")
        return cls(float(arr[0]), float(arr[1]), float(arr[2]))

    def to_array(self) -> NDArray[np.float64]:
        """Convert to NumPy array (3,)."""
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    # ------------------------------------------------------------------
    # Metrics
    # ------------------------------------------------------------------

    def distance_to(self, other: Point3D) -> float:
        """Euclidean distance to another point."""
        require(other, "other point")
        dx = self.x - other.x
        dy = self.y - other.y
        dz = self.z - other.z
        return math.sqrt(dx * dx + dy * dy + dz * dz)

    def manhattan_distance_to(self, other: Point3D) -> float:
        """L1 distance to another point."""
        require(other, "other point")
        return abs(self.x - other.x) + abs(self.y - other.y) + abs(self.z - other.z)

    def magnitude(self) -> float:
        """Length of the vector from the origin."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    # ------------------------------------------------------------------
    # Transforms (rotation is always about the coordinate origin)
    # ------------------------------------------------------------------

    def rotate_x(self, angle: float) -> Point3D:
        """Rotate about the x-axis through the origin (radians)."""
        c, s = math.cos(angle), math.sin(angle)
        return Point3D(self.x, self.y * c - self.z * s, self.y * s + self.z * c)

    def rotate_y(self, angle: float) -> Point3D:
        """Rotate about the y-axis through the origin (radians)."""
        c, s = math.cos(angle), math.sin(angle)
        return Point3D(self.x * c + self.z * s, self.y, -self.x * s + self.z * c)

    def rotate_z(self, angle: float) -> Point3D:
        """Rotate about the z-axis through the origin (radians)."""
        c, s = math.cos(angle), math.sin(angle)
        return Point3D(self.x * c - self.y * s, self.x * s + self.y * c, self.z)

    def translate(self, dx: float, dy: float, dz: float) -> Point3D:
        return Point3D(self.x + dx, self.y + dy, self.z + dz)

    def scale(self, sx: float, sy: float, sz: float) -> Point3D:
        """Component-wise scale.

        Zero or negative factors are accepted and produce collapsed or
        mirrored points; a zero factor is logged as a warning.
        """
        if sx == 0 or sy == 0 or sz == 0:
            logger.warning("Scaling %s with zero scale factor (%g, %g, %g)", self, sx, sy, sz)
        return Point3D(self.x * sx, self.y * sy, self.z * sz)

    # ------------------------------------------------------------------
    # Vector algebra
    # ------------------------------------------------------------------

    def dot_product(self, other: Point3D) -> float:
        require(other, "other point")
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross_product(self, other: Point3D) -> Point3D:
        """Right-handed cross product (i x j = k)."""
        require(other, "other point")
        return Point3D(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def normalize(self) -> Point3D:
        """Unit vector in the same direction.

        Raises
        ------
        DegenerateVectorError
            If the magnitude is below ``EPSILON``.
        """
        mag = self.magnitude()
        if mag < EPSILON:
            logger.debug("Cannot normalize %r (magnitude %g)", self, mag)
            raise DegenerateVectorError()
        return Point3D(self.x / mag, self.y / mag, self.z / mag)

    def midpoint(self, other: Point3D) -> Point3D:
        require(other, "other point")
        return Point3D((self.x + other.x) / 2.0, (self.y + other.y) / 2.0, (self.z + other.z) / 2.0)

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------

    def __add__(self, other: Point3D) -> Point3D:
        if not isinstance(other, Point3D):
            return NotImplemented
        return Point3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Point3D) -> Point3D:
        if not isinstance(other, Point3D):
            return NotImplemented
        return Point3D(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Point3D:
        return Point3D(-self.x, -self.y, -self.z)

    def __mul__(self, k: float) -> Point3D:
        if isinstance(k, Point3D):
            return NotImplemented
        return Point3D(self.x * k, self.y * k, self.z * k)

    def __rmul__(self, k: float) -> Point3D:
        return self.__mul__(k)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Point3D):
            return NotImplemented
        return (
            abs(self.x - other.x) < EPSILON
            and abs(self.y - other.y) < EPSILON
            and abs(self.z - other.z) < EPSILON
        )

    def __hash__(self) -> int:
        n = DEFAULT_TOLERANCES.hash_decimals
        # + 0.0 folds -0.0 into 0.0
        return hash((round(self.x, n) + 0.0, round(self.y, n) + 0.0, round(self.z, n) + 0.0))

    def __str__(self) -> str:
        return f"Point3D({self.x:.2f}, {self.y:.2f}, {self.z:.2f})"
