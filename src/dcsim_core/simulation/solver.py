# src/dcsim_core/simulation/solver.py
"""
Dense Gaussian elimination with partial pivoting.

This module knows nothing about circuits: it takes a square matrix and a
right-hand side and returns the solution vector.
"""
import logging
from typing import Optional

import numpy as np
from numpy.typing import ArrayLike

from .config import SolverConfig
from .exceptions import SingularMatrixError

logger = logging.getLogger(__name__)


def gaussian_elimination(A: ArrayLike, B: ArrayLike, config: Optional[SolverConfig] = None) -> np.ndarray:
    """
    Solves `A @ x = B` by forward elimination with partial pivoting followed by
    back substitution.

    The inputs are copied into working storage local to this call; the caller's
    arrays are never modified.

    Args:
        A: Square (n x n) coefficient matrix.
        B: Right-hand side of length n.
        config: Numerical settings. Defaults to `SolverConfig()`.

    Returns:
        The solution vector `x` of length n.

    Raises:
        SingularMatrixError: If a pivot's magnitude is below `config.epsilon`
            or the result contains NaN/Inf.
        ValueError: If the shapes are inconsistent.
    """
    config = config if config is not None else SolverConfig()
    a = np.array(A, dtype=float)
    b = np.array(B, dtype=float)

    if a.ndim != 2 or a.shape[0] != a.shape[1]:
        raise ValueError(f"Coefficient matrix must be square, got shape {a.shape}.")
    if b.ndim != 1 or b.shape[0] != a.shape[0]:
        raise ValueError(f"Right-hand side must be a vector of length {a.shape[0]}, got shape {b.shape}.")

    n = a.shape[0]
    logger.debug(f"Gaussian elimination on a {n}x{n} system (epsilon={config.epsilon:.1e}).")

    for i in range(n):
        # Partial pivoting: first row holding the largest magnitude in column i.
        pivot_row = i + int(np.argmax(np.abs(a[i:, i])))
        if pivot_row != i:
            a[[i, pivot_row]] = a[[pivot_row, i]]
            b[[i, pivot_row]] = b[[pivot_row, i]]
            logger.debug(f"Swapped rows {i} and {pivot_row}.")

        pivot = a[i, i]
        if not np.isfinite(pivot) or abs(pivot) < config.epsilon:
            logger.debug(f"Pivot {pivot:.3e} in column {i} is below the singularity threshold.")
            raise SingularMatrixError(
                details="The system has no unique solution.",
                pivot_index=i,
                pivot_value=float(pivot),
            )

        factors = a[i + 1:, i] / pivot
        a[i + 1:, i:] -= np.outer(factors, a[i, i:])
        b[i + 1:] -= factors * b[i]

    x = np.zeros(n, dtype=float)
    for i in range(n - 1, -1, -1):
        x[i] = (b[i] - a[i, i + 1:] @ x[i + 1:]) / a[i, i]

    if not np.all(np.isfinite(x)):
        logger.error("NaN or Inf detected in the solution vector.")
        raise SingularMatrixError(details="Solve resulted in NaN/Inf values.")

    return x
