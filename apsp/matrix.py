"""Validation and copying of caller-supplied distance matrices."""

from __future__ import annotations

from numbers import Integral
from typing import Any, Optional

from apsp.logging import get_logger
from apsp.types import DistanceMatrix, MatrixLike

logger = get_logger(__name__)


def matrix_size(graph: MatrixLike) -> int:
    """Return the row count of ``graph``.

    Raises:
        ValueError: If ``graph`` has no length (e.g. a scalar).
    """
    try:
        return len(graph)
    except TypeError:
        raise ValueError(
            f"Distance matrix must be a sequence of rows, got {type(graph).__name__}"
        ) from None


def check_vertices_count(vertices_count: Any) -> int:
    """Return ``vertices_count`` as an int.

    Raises:
        ValueError: If it is not an integer (bools and floats included).
    """
    if not _is_integer(vertices_count):
        raise ValueError(
            f"Vertex count must be an integer, got {vertices_count!r}"
        )
    return int(vertices_count)


def validate_matrix(graph: MatrixLike, vertices_count: Optional[int] = None) -> int:
    """Check that ``graph`` is a square integer matrix with at least one vertex.

    Args:
        graph: Matrix to check (nested sequences or a 2-D numpy array).
        vertices_count: Expected dimension. When None, the row count is used.

    Returns:
        The validated dimension N.

    Raises:
        ValueError: If the dimension is below one, does not match
            ``vertices_count``, a row has the wrong length, or an entry is not
            an integer.
    """
    rows = matrix_size(graph)
    n = rows if vertices_count is None else check_vertices_count(vertices_count)

    if n < 1:
        raise ValueError(f"Vertex count must be at least 1, got {n}")
    if rows != n:
        raise ValueError(
            f"Distance matrix has {rows} rows but vertex count is {n}"
        )

    has_negative = False
    for i in range(n):
        row = graph[i]
        if matrix_size(row) != n:
            raise ValueError(
                f"Distance matrix is not square: row {i} has {len(row)} "
                f"entries, expected {n}"
            )
        for j in range(n):
            value = row[j]
            if not _is_integer(value):
                raise ValueError(
                    f"Distance matrix entry [{i}][{j}] must be an integer, "
                    f"got {value!r}"
                )
            if value < 0:
                has_negative = True

    if has_negative:
        logger.warning(
            "Distance matrix contains negative weights; distances are "
            "meaningless for vertices on or reachable from a negative cycle"
        )
    return n


def copy_matrix(graph: MatrixLike, vertices_count: int) -> DistanceMatrix:
    """Return an independent list-of-lists copy of the top-left N x N block."""
    return [
        [int(graph[i][j]) for j in range(vertices_count)]
        for i in range(vertices_count)
    ]


def _is_integer(value: Any) -> bool:
    # bool is an Integral subclass but never a meaningful weight
    return isinstance(value, Integral) and not isinstance(value, bool)
