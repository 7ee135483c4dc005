"""Floyd-Warshall all-pairs shortest paths over a dense distance matrix.

The solver copies the caller's matrix and relaxes the copy in place:

    for k in 0..N-1:          intermediate vertex, must stay outermost
        for i in 0..N-1:      source
            for j in 0..N-1:  destination
                d[i][j] = min(d[i][j], d[i][k] + d[k][j])

After phase k, ``d[i][j]`` is the shortest i -> j distance using only
vertices ``0..k`` as intermediates. The sentinel ``inf`` is treated as an
absorbing element under addition and as the maximum under comparison, so
``inf + x`` never takes part in a relaxation.

Example:
    >>> from apsp import FloydWarshall
    >>> INF = 9999
    >>> solver = FloydWarshall([[0, 3, INF], [INF, 0, 2], [INF, INF, 0]], 3)
    >>> solver.calculate_distance()
    [[0, 3, 5], [9999, 0, 2], [9999, 9999, 0]]
"""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from apsp.config import SOLVER_CONFIG
from apsp.display import format_matrix
from apsp.logging import get_logger
from apsp.matrix import (
    check_vertices_count,
    copy_matrix,
    matrix_size,
    validate_matrix,
)
from apsp.types import DistanceMatrix, MatrixLike

logger = get_logger(__name__)


class FloydWarshall:
    """Shortest distances between every ordered pair of vertices.

    The solver owns a copy of the input matrix. ``calculate_distance()`` may be
    called any number of times; once solved, further calls change nothing.

    Negative weights are accepted but negative cycles are not detected:
    distances involving vertices on or reachable from such a cycle are not
    meaningful.

    Attributes:
        vertices_count: Number of vertices N.
        inf: Sentinel value meaning "no path".
    """

    def __init__(
        self,
        graph: MatrixLike,
        vertices_count: int,
        inf: Optional[int] = None,
    ) -> None:
        """Copy ``graph`` into a new solver.

        Args:
            graph: N x N matrix of integer weights. Diagonal entries are
                expected to be zero and missing edges set to ``inf``.
            vertices_count: Number of vertices N.
            inf: Sentinel for a missing edge. Defaults to ``SOLVER_CONFIG.inf``.

        Raises:
            ValueError: If ``vertices_count`` is not an integer, or if
                validation is enabled in ``SOLVER_CONFIG`` and the matrix is
                not N x N integers with N >= 1.
        """
        vertices_count = check_vertices_count(vertices_count)
        if SOLVER_CONFIG.validate:
            validate_matrix(graph, vertices_count)
        elif vertices_count < 1 or matrix_size(graph) < vertices_count:
            raise ValueError(
                f"Cannot copy a {vertices_count}x{vertices_count} block from a "
                f"matrix with {matrix_size(graph)} rows"
            )

        self._vertices_count = vertices_count
        self._inf = SOLVER_CONFIG.resolve_inf(inf)
        self._distance: DistanceMatrix = copy_matrix(graph, vertices_count)
        self._solved = False

        logger.debug(
            "Created solver for %d vertices (inf=%d)", vertices_count, self._inf
        )

    @property
    def vertices_count(self) -> int:
        return self._vertices_count

    @property
    def inf(self) -> int:
        return self._inf

    @property
    def is_solved(self) -> bool:
        """True once ``calculate_distance()`` has run at least once."""
        return self._solved

    @property
    def distance(self) -> DistanceMatrix:
        """Copy of the current distance matrix."""
        return [row[:] for row in self._distance]

    def calculate_distance(self) -> DistanceMatrix:
        """Relax every pair through every intermediate vertex.

        Returns:
            Copy of the solved matrix. Unreachable pairs hold ``inf``.
        """
        n = self._vertices_count
        inf = self._inf
        dist = self._distance
        updates = 0

        for k in range(n):
            row_k = dist[k]
            for i in range(n):
                row_i = dist[i]
                d_ik = row_i[k]
                if d_ik == inf:
                    continue
                for j in range(n):
                    d_kj = row_k[j]
                    if d_kj == inf:
                        continue
                    candidate = d_ik + d_kj
                    current = row_i[j]
                    if current == inf or candidate < current:
                        row_i[j] = candidate
                        updates += 1

        self._solved = True
        logger.debug("Relaxation over %d vertices made %d updates", n, updates)
        return self.distance

    def format(self, cell_width: Optional[int] = None) -> str:
        """Render the current matrix, sentinel entries shown as ``INF``."""
        return format_matrix(self._distance, self._inf, cell_width)

    def print(self, file: Optional[TextIO] = None) -> None:
        """Write ``format()`` to ``file`` (stdout by default)."""
        stream = sys.stdout if file is None else file
        stream.write(self.format())

    def __repr__(self) -> str:
        state = "solved" if self._solved else "constructed"
        return (
            f"FloydWarshall(vertices_count={self._vertices_count}, "
            f"inf={self._inf}, state={state})"
        )


def floyd_warshall(graph: MatrixLike, inf: Optional[int] = None) -> DistanceMatrix:
    """Solve a square matrix in one call.

    Args:
        graph: N x N matrix of integer weights.
        inf: Sentinel for a missing edge. Defaults to ``SOLVER_CONFIG.inf``.

    Returns:
        New matrix of shortest distances; ``graph`` is left untouched.
    """
    return FloydWarshall(graph, matrix_size(graph), inf=inf).calculate_distance()
