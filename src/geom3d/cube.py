"""Oriented cubes described by center, side length and Euler angles.

Vertices, edges and face centers are derived on every call from
``(center, side_length, rotation_x, rotation_y, rotation_z)``. Rotations
are extrinsic, applied about the world axes in the order X, Y, Z.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np
from numpy.typing import NDArray

from .exceptions import InvalidGeometryError, require
from .geometry import bounding_box, euler_rotation_matrix, rodrigues_rotate
from .line import Line3D
from .parameters import DEFAULT_TOLERANCES, EPSILON
from .point import Point3D

logger = logging.getLogger(__name__)

# Unit-cube corners: bottom face (z=-1) counter-clockwise, then top face
# (z=+1) vertically above it.
_CORNERS = np.array(
    [
        [-1.0, -1.0, -1.0],
        [1.0, -1.0, -1.0],
        [1.0, 1.0, -1.0],
        [-1.0, 1.0, -1.0],
        [-1.0, -1.0, 1.0],
        [1.0, -1.0, 1.0],
        [1.0, 1.0, 1.0],
        [-1.0, 1.0, 1.0],
    ],
    dtype=np.float64,
)

# Face directions in order -X, +X, -Y, +Y, -Z, +Z.
_FACE_NORMALS = np.array(
    [
        [-1.0, 0.0, 0.0],
        [1.0, 0.0, 0.0],
        [0.0, -1.0, 0.0],
        [0.0, 1.0, 0.0],
        [0.0, 0.0, -1.0],
        [0.0, 0.0, 1.0],
    ],
    dtype=np.float64,
)

FACE_LABELS = ("-X", "+X", "-Y", "+Y", "-Z", "+Z")

EDGE_INDEX_PAIRS: Tuple[Tuple[int, int], ...] = (
    # bottom
    (0, 1), (1, 2), (2, 3), (3, 0),
    # top
    (4, 5), (5, 6), (6, 7), (7, 4),
    # vertical
    (0, 4), (1, 5), (2, 6), (3, 7),
)


@dataclass(frozen=True, eq=False)
class Cube3D:
    """Cube with center, positive side length and X/Y/Z rotations (radians).

    Equality compares centers with ``Point3D`` equality and the side
    length and each rotation within ``EPSILON``. Hashing rounds the
    scalars the same way ``Point3D`` does, with the same caveat.

    Raises
    ------
    MissingValueError
        If *center* is ``None``.
    InvalidGeometryError
        If *side_length* is not positive.
    """

    center: Point3D
    side_length: float
    rotation_x: float = 0.0
    rotation_y: float = 0.0
    rotation_z: float = 0.0

    def __post_init__(self):
        require(self.center, "center")
        if self.side_length <= 0:
            raise InvalidGeometryError(f"Side length must be positive (side_length={self.side_length})")
        object.__setattr__(self, "side_length", float(self.side_length))
        object.__setattr__(self, "rotation_x", float(self.rotation_x))
        object.__setattr__(self, "rotation_y", float(self.rotation_y))
        object.__setattr__(self, "rotation_z", float(self.rotation_z))
        logger.debug(
            "Created Cube3D center=%s side=%g rotations=(%g, %g, %g)",
            self.center, self.side_length, self.rotation_x, self.rotation_y, self.rotation_z,
        )

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def from_vertices(cls, vertices: Sequence[Optional[Point3D]]) -> Cube3D:
        """Fit an axis-aligned cube to 8 vertices.

        The center is the mean of the vertices and the side length is
        recovered from the mean center-to-vertex distance (the
        circumscribed radius, ``s * sqrt(3) / 2``). Orientation is not
        recovered: the result always has zero rotations.

        Raises
        ------
        MissingValueError
            If *vertices* or any vertex is ``None``.
        InvalidGeometryError
            If there are not exactly 8 vertices.
        """
        require(vertices, "vertices")
        if len(vertices) != 8:
            raise InvalidGeometryError(f"Cube must have exactly 8 vertices, got {len(vertices)}")
        for i, vertex in enumerate(vertices):
            require(vertex, f"vertex at index {i}")

        coords = np.array([v.to_array() for v in vertices])
        center = coords.mean(axis=0)
        mean_radius = float(np.linalg.norm(coords - center, axis=1).mean())
        side = 2.0 * mean_radius / math.sqrt(3.0)
        logger.debug("Fitted cube to vertices: center=%s side=%g", center, side)
        return cls(Point3D.from_array(center), side)

    @classmethod
    def from_bounds(cls, min_point: Point3D, max_point: Point3D) -> Cube3D:
        """Largest axis-aligned cube centered in the box ``[min_point, max_point]``.

        The side length is the smallest box dimension, so the cube
        touches the box only on its tightest axis.

        Raises
        ------
        InvalidGeometryError
            If any dimension of ``max_point - min_point`` is not positive.
        """
        require(min_point, "min point")
        require(max_point, "max point")
        extent = max_point - min_point
        if extent.x <= 0 or extent.y <= 0 or extent.z <= 0:
            raise InvalidGeometryError("Max must be greater than min in all dimensions")
        side = min(extent.x, extent.y, extent.z)
        return cls(min_point.midpoint(max_point), side)

    # ------------------------------------------------------------------
    # Scalar measures
    # ------------------------------------------------------------------

    def volume(self) -> float:
        return self.side_length ** 3

    def surface_area(self) -> float:
        return 6.0 * self.side_length ** 2

    def total_edge_length(self) -> float:
        return 12.0 * self.side_length

    def space_diagonal(self) -> float:
        return self.side_length * math.sqrt(3.0)

    def circumscribed_sphere_radius(self) -> float:
        """Radius of the sphere through all 8 vertices."""
        return self.space_diagonal() / 2.0

    def inscribed_sphere_radius(self) -> float:
        """Radius of the sphere tangent to all 6 faces."""
        return self.side_length / 2.0

    # ------------------------------------------------------------------
    # Frames
    # ------------------------------------------------------------------

    def _rotation(self) -> NDArray[np.float64]:
        return euler_rotation_matrix(self.rotation_x, self.rotation_y, self.rotation_z)

    def _to_world(self, local: NDArray[np.float64]) -> NDArray[np.float64]:
        """Rotate row-stacked local points X->Y->Z, then move to the center."""
        return local @ self._rotation().T + self.center.to_array()

    def _to_local(self, point: Point3D) -> NDArray[np.float64]:
        """Inverse of ``_to_world``: un-translate, then undo Z, Y, X."""
        return (point.to_array() - self.center.to_array()) @ self._rotation()

    def vertex_array(self) -> NDArray[np.float64]:
        """World-space vertices as an (8, 3) array."""
        return self._to_world(_CORNERS * (self.side_length / 2.0))

    def vertices(self) -> List[Point3D]:
        """The 8 world-space vertices.

        Indices 0-3 are the bottom face counter-clockwise, 4-7 the top face
        with vertex ``i + 4`` directly above vertex ``i`` (in local frame).
        """
        return [Point3D.from_array(row) for row in self.vertex_array()]

    @staticmethod
    def edge_index_pairs() -> Tuple[Tuple[int, int], ...]:
        """Vertex index pairs of the 12 edges: bottom, top, then vertical."""
        return EDGE_INDEX_PAIRS

    def edges(self) -> List[Line3D]:
        vertices = self.vertices()
        return [Line3D(vertices[i], vertices[j]) for i, j in EDGE_INDEX_PAIRS]

    def face_centers(self) -> List[Point3D]:
        """The 6 face centers, ordered -X, +X, -Y, +Y, -Z, +Z (local axes)."""
        world = self._to_world(_FACE_NORMALS * (self.side_length / 2.0))
        return [Point3D.from_array(row) for row in world]

    # ------------------------------------------------------------------
    # Transforms
    # ------------------------------------------------------------------

    def rotate_x(self, angle: float) -> Cube3D:
        """Add *angle* to the stored X rotation."""
        return Cube3D(self.center, self.side_length, self.rotation_x + angle, self.rotation_y, self.rotation_z)

    def rotate_y(self, angle: float) -> Cube3D:
        """Add *angle* to the stored Y rotation."""
        return Cube3D(self.center, self.side_length, self.rotation_x, self.rotation_y + angle, self.rotation_z)

    def rotate_z(self, angle: float) -> Cube3D:
        """Add *angle* to the stored Z rotation."""
        return Cube3D(self.center, self.side_length, self.rotation_x, self.rotation_y, self.rotation_z + angle)

    def rotate_around_axis(self, axis: Point3D, angle: float) -> Cube3D:
        """Rotate the vertices about *axis* through the center, then refit.

        Each world-space vertex is rotated with Rodrigues' formula and the
        result is rebuilt with :meth:`from_vertices`. The returned cube
        keeps the center and side length but is axis-aligned: its stored
        rotations are zero and do not describe the applied rotation.

        Raises
        ------
        DegenerateVectorError
            If *axis* is (near) zero.
        """
        require(axis, "axis")
        unit = axis.normalize()
        logger.debug("Rotating cube about axis %s by %g rad", unit, angle)
        rotated = rodrigues_rotate(self.vertex_array(), self.center.to_array(), unit.to_array(), angle)
        return Cube3D.from_vertices([Point3D.from_array(row) for row in rotated])

    def translate(self, dx: float, dy: float, dz: float) -> Cube3D:
        return Cube3D(
            self.center.translate(dx, dy, dz), self.side_length,
            self.rotation_x, self.rotation_y, self.rotation_z,
        )

    def scale(self, factor: float) -> Cube3D:
        """Multiply the side length by *factor*; center and rotation unchanged.

        Raises
        ------
        InvalidGeometryError
            If *factor* is not positive.
        """
        if factor <= 0:
            raise InvalidGeometryError(f"Scale factor must be positive (factor={factor})")
        return Cube3D(
            self.center, self.side_length * factor,
            self.rotation_x, self.rotation_y, self.rotation_z,
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def contains_point(self, point: Point3D) -> bool:
        """Closed containment test, inclusive within ``EPSILON`` of the faces."""
        require(point, "point")
        local = self._to_local(point)
        inside = bool(np.all(np.abs(local) <= self.side_length / 2.0 + EPSILON))
        logger.debug("Point %s is %s cube", point, "inside" if inside else "outside")
        return inside

    def intersects(self, other: Cube3D) -> bool:
        """Conservative bounding-sphere overlap test.

        True whenever the circumscribed spheres touch or overlap. This may
        report an intersection for rotated cubes that do not actually
        overlap, but never misses a real one.
        """
        require(other, "other cube")
        distance = self.center.distance_to(other.center)
        radius_sum = self.circumscribed_sphere_radius() + other.circumscribed_sphere_radius()
        result = distance <= radius_sum
        logger.debug("Bounding spheres %s (distance=%g, radius sum=%g)",
                     "overlap" if result else "are disjoint", distance, radius_sum)
        return result

    def axis_aligned_bounding_box(self) -> Tuple[Point3D, Point3D]:
        """``(min_point, max_point)`` over the 8 world-space vertices."""
        lo, hi = bounding_box(self.vertex_array())
        logger.debug("AABB min=%s max=%s", lo, hi)
        return Point3D.from_array(lo), Point3D.from_array(hi)

    def distance_to_point(self, point: Point3D) -> float:
        """Distance from *point* to the cube surface; 0 inside or on it."""
        require(point, "point")
        local = self._to_local(point)
        half = self.side_length / 2.0
        closest = np.clip(local, -half, half)
        return float(np.linalg.norm(local - closest))

    def projected_area(self, normal: Point3D) -> float:
        """Approximate silhouette area when projected along *normal*.

        Computes ``px*py + py*pz + pz*px`` with ``p_i = |n_i| * s``. Only
        the side length and the normal enter the formula; the cube's own
        rotation is ignored, so a rotated cube reports the same area as an
        unrotated one.

        Raises
        ------
        DegenerateVectorError
            If *normal* is (near) zero.
        """
        require(normal, "normal")
        n = normal.normalize()
        px = abs(n.x) * self.side_length
        py = abs(n.y) * self.side_length
        pz = abs(n.z) * self.side_length
        return px * py + py * pz + pz * px

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Cube3D):
            return NotImplemented
        return (
            self.center == other.center
            and abs(self.side_length - other.side_length) < EPSILON
            and abs(self.rotation_x - other.rotation_x) < EPSILON
            and abs(self.rotation_y - other.rotation_y) < EPSILON
            and abs(self.rotation_z - other.rotation_z) < EPSILON
        )

    def __hash__(self) -> int:
        n = DEFAULT_TOLERANCES.hash_decimals
        return hash((
            self.center,
            round(self.side_length, n),
            round(self.rotation_x, n) + 0.0,
            round(self.rotation_y, n) + 0.0,
            round(self.rotation_z, n) + 0.0,
        ))

    def __str__(self) -> str:
        return (
            f"Cube3D[center={self.center}, sideLength={self.side_length:.2f}, "
            f"volume={self.volume():.2f}, rotations=({self.rotation_x:.2f}, "
            f"{self.rotation_y:.2f}, {self.rotation_z:.2f})]"
        )
