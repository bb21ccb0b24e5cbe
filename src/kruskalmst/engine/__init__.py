"""Run orchestration: configuration, result type and the solver runner."""

from kruskalmst.engine.config import SolverConfig, SolverResult
from kruskalmst.engine.runner import run_solver

__all__ = [
    "SolverConfig",
    "SolverResult",
    "run_solver",
]
