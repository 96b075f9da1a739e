"""Cube connectivity as a graph.

Nodes are vertex indices carrying a ``position`` tuple; edges carry their
``length``. Useful for walking faces or exporting a wireframe.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

import networkx as nx

from .cube import Cube3D
from .exceptions import InvalidGeometryError

logger = logging.getLogger(__name__)

# Faces as vertex cycles: bottom, top, then the four sides.
FACE_CYCLES: Tuple[Tuple[int, int, int, int], ...] = (
    (0, 1, 2, 3),  # -Z
    (4, 5, 6, 7),  # +Z
    (0, 1, 5, 4),  # -Y
    (1, 2, 6, 5),  # +X
    (2, 3, 7, 6),  # +Y
    (3, 0, 4, 7),  # -X
)


def build_wireframe(cube: Cube3D) -> nx.Graph:
    """Build the 8-node, 12-edge wireframe graph of *cube*.

    Parameters
    ----------
    cube : Cube3D
        Cube whose world-space vertices become node positions.

    Returns
    -------
    nx.Graph
        Nodes ``0..7`` with attribute ``position`` (x, y, z); edges from
        ``Cube3D.edge_index_pairs()`` with attribute ``length``.
    """
    G = nx.Graph()
    vertices = cube.vertices()
    for i, vertex in enumerate(vertices):
        G.add_node(i, position=tuple(vertex))

    for i, j in cube.edge_index_pairs():
        G.add_edge(i, j, length=vertices[i].distance_to(vertices[j]))

    logger.debug("Wireframe: %d nodes, %d edges", G.number_of_nodes(), G.number_of_edges())
    return G


def face_cycles(graph: Optional[nx.Graph] = None) -> List[Tuple[int, int, int, int]]:
    """The 6 cube faces as 4-cycles of vertex indices.

    Faces depend only on cube topology, so the same table serves every
    cube. When *graph* is given (typically from :func:`build_wireframe`),
    each face is checked to be a cycle of it.

    Raises
    ------
    InvalidGeometryError
        If *graph* lacks an edge used by a face.
    """
    if graph is not None:
        for cycle in FACE_CYCLES:
            for k in range(4):
                a, b = cycle[k], cycle[(k + 1) % 4]
                if not graph.has_edge(a, b):
                    raise InvalidGeometryError(f"Face {cycle} uses missing edge ({a}, {b})")
    return list(FACE_CYCLES)
