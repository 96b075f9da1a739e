"""Text rendering of primitives for diagnostics."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .cube import FACE_LABELS

if TYPE_CHECKING:
    from .cube import Cube3D
    from .point import Point3D


def format_point(point: Point3D, precision: int = 2) -> str:
    """Format a point as a bare ``(x, y, z)`` tuple string."""
    return f"({point.x:.{precision}f}, {point.y:.{precision}f}, {point.z:.{precision}f})"


def format_cube_report(cube: Cube3D, debug: bool = False) -> str:
    """Format a cube's measures, vertices and face centers as a text block.

    With *debug*, edges are listed with their vertex indices and lengths.
    """
    lines: list[str] = []
    lines.append("=" * 80)
    lines.append("# Cube3D")
    lines.append("=" * 80)
    lines.append(f"  center:        {format_point(cube.center)}")
    lines.append(f"  side length:   {cube.side_length:.4f}")
    lines.append(
        f"  rotations:     ({cube.rotation_x:.4f}, {cube.rotation_y:.4f}, {cube.rotation_z:.4f}) rad"
    )
    lines.append("")
    lines.append(f"  volume:              {cube.volume():.4f}")
    lines.append(f"  surface area:        {cube.surface_area():.4f}")
    lines.append(f"  total edge length:   {cube.total_edge_length():.4f}")
    lines.append(f"  space diagonal:      {cube.space_diagonal():.4f}")
    lines.append(f"  circumscribed r:     {cube.circumscribed_sphere_radius():.4f}")
    lines.append(f"  inscribed r:         {cube.inscribed_sphere_radius():.4f}")

    lines.append("")
    lines.append("# Vertices")
    for i, vertex in enumerate(cube.vertices()):
        lines.append(f"  [{i}] {format_point(vertex, 4)}")

    lines.append("")
    lines.append("# Face centers")
    for label, fc in zip(FACE_LABELS, cube.face_centers()):
        lines.append(f"  {label:>2} {format_point(fc, 4)}")

    lo, hi = cube.axis_aligned_bounding_box()
    lines.append("")
    lines.append(f"# AABB  min={format_point(lo, 4)}  max={format_point(hi, 4)}")

    if debug:
        lines.append("")
        lines.append("# Edges (i-j: length)")
        for (i, j), edge in zip(cube.edge_index_pairs(), cube.edges()):
            lines.append(f"  [{i}-{j}]: {edge.length():.4f}")

    lines.append("")
    return "\n".join(lines)
