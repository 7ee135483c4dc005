"""Configuration for the distance matrix solver."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class SolverConfig:
    """Process-wide defaults for solvers and matrix display."""

    # Sentinel distance meaning "no known path"
    inf: int = 9999

    # Check matrix shape and entry types when a solver is constructed
    validate: bool = True

    # Width of one right-aligned cell when a matrix is rendered as text
    cell_width: int = 7

    def resolve_inf(self, inf: Optional[int] = None) -> int:
        """Return ``inf`` if given, otherwise the configured sentinel."""
        return self.inf if inf is None else inf


# Global configuration instance
SOLVER_CONFIG = SolverConfig()
