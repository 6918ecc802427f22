"""
Dense linear-system solver used by the DLT homography fit.

Gauss-Jordan elimination with partial pivoting on the augmented matrix [A | b].
The reduced row-echelon form is produced directly, so the last column holds the
solution without a separate back-substitution pass.
"""

import numpy as np
import numpy.typing as npt

from geo_homography.exceptions import SingularSystemError

# Pivots below this magnitude are treated as zero
SINGULAR_PIVOT_EPSILON = 1e-10


def solve_linear_system(a: npt.ArrayLike, b: npt.ArrayLike) -> list[float]:
    """Solve A·x = b for a square, non-singular A.

    For each pivot column the row with the largest absolute value (first one on
    ties) is swapped into place, the pivot row is normalized, and the column is
    eliminated from every other row.

    Args:
        a: N×N coefficient matrix (the homography fit uses N = 8)
        b: Right-hand side vector of length N

    Returns:
        Solution vector x as a list of N floats

    Raises:
        ValueError: If A is not square or b does not have N entries
        SingularSystemError: If a pivot falls below SINGULAR_PIVOT_EPSILON
    """
    coeffs = np.array(a, dtype=np.float64)
    rhs = np.array(b, dtype=np.float64)

    if coeffs.ndim != 2 or coeffs.shape[0] != coeffs.shape[1]:
        raise ValueError(f"Coefficient matrix must be square, got shape {coeffs.shape}")
    n = coeffs.shape[0]
    if rhs.shape != (n,):
        raise ValueError(f"Right-hand side must have {n} entries, got shape {rhs.shape}")

    augmented = np.column_stack([coeffs, rhs])

    for col in range(n):
        # argmax returns the first maximal entry, so ties keep the upper row
        max_row = col + int(np.argmax(np.abs(augmented[col:, col])))
        if max_row != col:
            augmented[[col, max_row]] = augmented[[max_row, col]]

        pivot = float(augmented[col, col])
        if abs(pivot) < SINGULAR_PIVOT_EPSILON:
            raise SingularSystemError(
                f"Singular matrix in homography DLT (pivot {pivot:.3e} in column {col})"
            )

        augmented[col, col:] /= pivot
        for row in range(n):
            if row == col:
                continue
            factor = float(augmented[row, col])
            augmented[row, col:] -= factor * augmented[col, col:]

    return [float(value) for value in augmented[:, n]]
