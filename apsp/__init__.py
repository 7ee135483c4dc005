"""apsp: all-pairs shortest paths over dense distance matrices.

Primary API:
    FloydWarshall - solver that owns a copy of the input matrix
    floyd_warshall() - solve a square matrix in one call
    floyd_warshall_numpy() - same relaxation with vectorized k-phases
    SOLVER_CONFIG - process-wide sentinel and display defaults

Example:
    from apsp import FloydWarshall, SOLVER_CONFIG

    INF = SOLVER_CONFIG.inf
    solver = FloydWarshall([[0, 4, INF], [INF, 0, 1], [2, INF, 0]], 3)
    distances = solver.calculate_distance()
    solver.print()
"""

from __future__ import annotations

from apsp import logging
from apsp._version import __version__
from apsp.config import SOLVER_CONFIG, SolverConfig
from apsp.display import format_matrix
from apsp.solver import FloydWarshall, floyd_warshall
from apsp.vectorized import floyd_warshall_numpy

__all__ = [
    # Version
    "__version__",
    # Solvers
    "FloydWarshall",
    "floyd_warshall",
    "floyd_warshall_numpy",
    # Configuration
    "SolverConfig",
    "SOLVER_CONFIG",
    # Display
    "format_matrix",
    # Utilities
    "logging",
]
