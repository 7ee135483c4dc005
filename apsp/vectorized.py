"""Floyd-Warshall with each k-phase applied to the whole matrix at once.

The intermediate vertex k still advances one step at a time; only the i x j
plane inside a phase is updated in bulk. Sentinel legs are masked out so that
``inf + x`` never competes with a real distance.

Distances are held in ``int64`` when every value a relaxation can produce
fits in it. Otherwise the matrix is kept as an ``object`` array of Python
ints, which cannot overflow.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from apsp.config import SOLVER_CONFIG
from apsp.logging import get_logger
from apsp.matrix import validate_matrix
from apsp.types import MatrixLike

logger = get_logger(__name__)

_INT64_MAX = int(np.iinfo(np.int64).max)


def floyd_warshall_numpy(graph: MatrixLike, inf: Optional[int] = None) -> np.ndarray:
    """Compute all-pairs shortest distances with numpy.

    Gives the same result as ``FloydWarshall(graph, n).calculate_distance()``
    for inputs without negative cycles.

    Args:
        graph: N x N matrix of integer weights (nested sequences or ndarray).
            With validation disabled in ``SOLVER_CONFIG`` entries are passed
            through ``int()``, so a float such as 1.5 is truncated to 1.
        inf: Sentinel for a missing edge. Defaults to ``SOLVER_CONFIG.inf``.

    Returns:
        New array of shortest distances; unreachable pairs hold ``inf``.
        The dtype is ``int64``, or ``object`` (Python ints) when a path sum
        or the sentinel would not fit in ``int64``. ``graph`` is left
        untouched.

    Raises:
        ValueError: If ``graph`` is not a non-empty square matrix, or, with
            validation enabled, holds a non-integer entry.
    """
    if SOLVER_CONFIG.validate:
        validate_matrix(graph)
    inf = SOLVER_CONFIG.resolve_inf(inf)

    entries = np.array(graph, dtype=object)
    if entries.ndim != 2 or entries.shape[0] != entries.shape[1] or entries.shape[0] < 1:
        raise ValueError(f"Expected a non-empty square matrix, got shape {entries.shape}")
    n = entries.shape[0]
    entries = np.frompyfunc(int, 1, 1)(entries)

    if _fits_int64(entries, inf, n):
        dist = entries.astype(np.int64)
    else:
        logger.debug("Path sums may exceed int64; relaxing with Python ints")
        dist = entries

    for k in range(n):
        col_k = dist[:, k]
        row_k = dist[k, :]
        reachable = (col_k != inf)[:, np.newaxis] & (row_k != inf)[np.newaxis, :]
        candidate = col_k[:, np.newaxis] + row_k[np.newaxis, :]
        improves = reachable & ((dist == inf) | (candidate < dist))
        dist = np.where(improves, candidate, dist)

    logger.debug("Vectorized relaxation finished for %d vertices", n)
    return dist


def _fits_int64(entries: np.ndarray, inf: int, n: int) -> bool:
    # A candidate joins two walks of at most n - 1 edges each; inf + inf is
    # also formed before masking.
    max_weight = max((abs(v) for v in entries.flat if v != inf), default=0)
    bound = 2 * max(abs(inf), max_weight * max(n - 1, 1))
    return bound <= _INT64_MAX
