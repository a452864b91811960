"""Configuration classes for eulergraph solvers."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class SolverConfig:
    """Configuration for Eulerian walk construction."""

    # Raise WalkInvariantError when a sub-walk anchor is missing from its
    # parent walk. When False the sub-walk is dropped with a warning.
    strict_splice: bool = True

    # Reject graphs whose edges span more than one connected component.
    # Without this check such graphs yield a walk covering one component only.
    require_connected: bool = False

    def resolve(self, override: Optional["SolverConfig"]) -> "SolverConfig":
        """Return ``override`` when given, otherwise this configuration."""
        return override if override is not None else self


# Global configuration instance
SOLVER_CONFIG = SolverConfig()
