# src/dcsim_core/simulation/config.py
import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..constants import SINGULARITY_EPSILON

logger = logging.getLogger(__name__)


class ConfigParsingError(ValueError):
    """Custom exception for errors during solver configuration parsing."""
    pass


@dataclass(frozen=True)
class SolverConfig:
    """
    Numerical settings for one solver invocation. Passed explicitly; there is no
    process-wide mutable configuration.

    Attributes:
        epsilon: Pivot magnitudes below this threshold mark the system as singular.
    """
    epsilon: float = SINGULARITY_EPSILON

    def __post_init__(self):
        if not (isinstance(self.epsilon, (int, float)) and math.isfinite(self.epsilon) and self.epsilon > 0):
            raise ConfigParsingError(f"Solver epsilon must be a positive finite number, got {self.epsilon!r}.")


def parse_solver_config(raw_solver_config: Optional[Dict[str, Any]]) -> SolverConfig:
    """
    Parses a raw solver configuration dictionary (e.g. a netlist's `solver:` block).
    A missing or empty block yields the defaults.
    """
    if not raw_solver_config:
        return SolverConfig()
    unknown = set(raw_solver_config) - {"epsilon"}
    if unknown:
        raise ConfigParsingError(f"Unknown solver configuration key(s): {sorted(unknown)}.")
    try:
        epsilon = float(raw_solver_config.get("epsilon", SINGULARITY_EPSILON))
        return SolverConfig(epsilon=epsilon)
    except (TypeError, ValueError) as e:
        raise ConfigParsingError(f"Failed to parse solver configuration: {e}") from e
