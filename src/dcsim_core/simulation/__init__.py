# src/dcsim_core/simulation/__init__.py
from .exceptions import (
    EmptyCircuitError,
    GroundReferenceError,
    NoSolutionError,
    SingularMatrixError,
)
from .config import ConfigParsingError, SolverConfig, parse_solver_config
from .solver import gaussian_elimination
from .mna import MnaAssembler, MnaSystem
from .results import DCSolution, SolveOutcome, build_solution
from .execution import run_dc_analysis

__all__ = [
    # Exceptions
    "EmptyCircuitError",
    "GroundReferenceError",
    "NoSolutionError",
    "SingularMatrixError",
    "ConfigParsingError",
    # Configuration
    "SolverConfig",
    "parse_solver_config",
    # Core Classes
    "gaussian_elimination",
    "MnaAssembler",
    "MnaSystem",
    "DCSolution",
    "SolveOutcome",
    "build_solution",
    "run_dc_analysis",
]
