# src/dcsim_core/constants.py
import logging

logger = logging.getLogger(__name__)

# --- Numerical Constants for Simulation ---

#: Pivots whose magnitude falls below this value are treated as zero during
#: Gaussian elimination, and the system is reported as singular.
#: Used as the default `SolverConfig.epsilon`.
SINGULARITY_EPSILON: float = 1.0e-9

#: Number of decimals used when printing node voltages for humans.
VOLTAGE_DISPLAY_DECIMALS: int = 3
