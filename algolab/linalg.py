"""Direct solvers for linear systems and the power method for eigenvalues."""

from __future__ import annotations

from collections.abc import Sequence


class SingularMatrixError(ArithmeticError):
    """A zero pivot was met while solving a linear system."""


def _augmented_rows(augmented: Sequence[Sequence[float]]) -> list[list[float]]:
    rows = [[float(value) for value in row] for row in augmented]
    size = len(rows)
    if size == 0 or any(len(row) != size + 1 for row in rows):
        raise ValueError("expected n rows of n + 1 coefficients each")
    return rows


def gauss_elimination(augmented: Sequence[Sequence[float]]) -> list[float]:
    """Solve the system given by an ``n x (n + 1)`` augmented matrix.

    Uses forward elimination without pivoting and back substitution.
    """
    rows = _augmented_rows(augmented)
    size = len(rows)
    for i, pivot_row in enumerate(rows):
        pivot = pivot_row[i]
        if pivot == 0:
            raise SingularMatrixError(f"zero pivot in row {i}")
        for row in rows[i + 1:]:
            ratio = row[i] / pivot
            row[:] = [value - ratio * p for value, p in zip(row, pivot_row)]
    solution = [0.0] * size
    for i in reversed(range(size)):
        rest = sum(rows[i][j] * solution[j] for j in range(i + 1, size))
        solution[i] = (rows[i][size] - rest) / rows[i][i]
    return solution


def gauss_jordan(augmented: Sequence[Sequence[float]]) -> list[float]:
    """Solve the system given by an augmented matrix by Gauss-Jordan elimination."""
    rows = _augmented_rows(augmented)
    size = len(rows)
    for j, pivot_row in enumerate(rows):
        pivot = pivot_row[j]
        if pivot == 0:
            raise SingularMatrixError(f"zero pivot in row {j}")
        for i, row in enumerate(rows):
            if i != j:
                ratio = row[j] / pivot
                row[:] = [value - ratio * p for value, p in zip(row, pivot_row)]
    return [row[size] / row[i] for i, row in enumerate(rows)]


def power_method(
    matrix: Sequence[Sequence[float]],
    initial: Sequence[float],
    tolerance: float = 5e-5,
) -> tuple[float, list[float]]:
    """Return the dominant eigenvalue and eigenvector of a square matrix.

    The vector is scaled so that its largest entry is 1.  Iteration stops
    when no entry changes by ``tolerance`` or more.
    """
    rows = [[float(value) for value in row] for row in matrix]
    vector = [float(value) for value in initial]
    size = len(vector)
    if size == 0 or len(rows) != size or any(len(row) != size for row in rows):
        raise ValueError("matrix must be square and match the initial vector")
    while True:
        product = [sum(a * v for a, v in zip(row, vector)) for row in rows]
        eigenvalue = max(product)
        if eigenvalue == 0:
            raise ValueError("largest entry of the product is zero; cannot normalise")
        scaled = [value / eigenvalue for value in product]
        difference = max(abs(new - old) for new, old in zip(scaled, vector))
        vector = scaled
        if difference < tolerance:
            return eigenvalue, vector