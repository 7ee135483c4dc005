"""Plain-text rendering of distance matrices."""

from __future__ import annotations

from typing import Optional, Sequence

from apsp.config import SOLVER_CONFIG

#: Marker printed in place of the sentinel value.
INF_MARKER = "INF"


def format_matrix(
    matrix: Sequence[Sequence[int]],
    inf: Optional[int] = None,
    cell_width: Optional[int] = None,
) -> str:
    """Render ``matrix`` one row per line, each cell right-aligned.

    Sentinel entries are shown as ``INF``. The last line is a separator of
    ``cell_width * N`` dashes.

    Args:
        matrix: Square matrix to render.
        inf: Sentinel value. Defaults to ``SOLVER_CONFIG.inf``.
        cell_width: Field width. Defaults to ``SOLVER_CONFIG.cell_width``.

    Returns:
        The rendered text, newline-terminated.
    """
    inf = SOLVER_CONFIG.resolve_inf(inf)
    width = SOLVER_CONFIG.cell_width if cell_width is None else cell_width

    lines = []
    for row in matrix:
        cells = (INF_MARKER if value == inf else str(value) for value in row)
        lines.append("".join(cell.rjust(width) for cell in cells))
    lines.append("-" * (width * len(matrix)))
    return "\n".join(lines) + "\n"
