"""Real roots of a polynomial via the eigenvalues of its companion matrix.

Pure functions. No I/O.

Coefficients are in ascending order: coefficients[i] multiplies x**i.
"""

import numpy as np
from scipy import linalg

DEFAULT_IMAG_TOLERANCE = 1e-9


class ShapeMismatchError(ValueError):
    """Coefficient count does not equal degree + 1."""


class LeadingCoefficientError(ValueError):
    """Leading coefficient is zero, so the polynomial is not of the stated degree."""


class DecompositionError(RuntimeError):
    """The eigenvalue solver could not factorize the companion matrix."""


def companion_matrix(coefficients) -> np.ndarray:
    """Build the n x n companion matrix of a degree-n polynomial.

    Ones on the subdiagonal, the monic-normalized coefficients
    -c[i] / c[n] down the last column, zeros elsewhere.
    """
    coeffs = np.asarray(coefficients, dtype=float)
    n = len(coeffs) - 1
    if n < 1:
        return np.zeros((0, 0))
    if coeffs[n] == 0:
        raise LeadingCoefficientError(
            "the leading coefficient (last cash-flow difference) must be non-zero"
        )

    companion = np.zeros((n, n))
    companion[np.arange(1, n), np.arange(0, n - 1)] = 1.0
    companion[:, n - 1] = -coeffs[:n] / coeffs[n]
    return companion


def polynomial_roots(coefficients) -> np.ndarray:
    """All complex roots, with multiplicity, in eigen-solver output order."""
    companion = companion_matrix(coefficients)
    if companion.size == 0:
        return np.zeros(0, dtype=complex)

    try:
        values = linalg.eigvals(companion, check_finite=True)
    except linalg.LinAlgError as e:
        raise DecompositionError(f"eigenvalue decomposition failed: {e}") from e
    except ValueError as e:
        # Non-finite matrix entries (inf/nan coefficients or overflow on division)
        raise DecompositionError(f"eigenvalue decomposition failed: {e}") from e
    return np.asarray(values, dtype=complex)


def is_real(root: complex, tolerance: float = DEFAULT_IMAG_TOLERANCE) -> bool:
    """Treat a root as real when |imag| <= tolerance * max(1, |real|).

    tolerance=0.0 is the exact-zero test.
    """
    return abs(root.imag) <= tolerance * max(1.0, abs(root.real))


def find_real_roots(
    degree: int,
    coefficients,
    tolerance: float = DEFAULT_IMAG_TOLERANCE,
) -> list[float]:
    """Real roots of sum(coefficients[i] * x**i), unsorted.

    Raises ShapeMismatchError if degree < 0 or len(coefficients) != degree + 1,
    LeadingCoefficientError if coefficients[degree] == 0,
    DecompositionError if the eigen-solve fails and ValueError for a
    negative tolerance.
    """
    if tolerance < 0:
        raise ValueError("tolerance must be non-negative")
    coefficients = list(coefficients)
    if degree < 0:
        raise ShapeMismatchError("degree must be non-negative")
    if degree + 1 != len(coefficients):
        raise ShapeMismatchError("the number of coefficients must be degree + 1")

    roots = polynomial_roots(coefficients)
    return [float(r.real) for r in roots if is_real(complex(r), tolerance)]
