"""Interpolation and least-squares curve fitting."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

from algolab.linalg import gauss_elimination


def lagrange_interpolate(points: Iterable[tuple[float, float]], x: float) -> float:
    """Evaluate at ``x`` the Lagrange polynomial through the given ``(x, y)`` points."""
    nodes = list(points)
    if not nodes:
        raise ValueError("at least one point is required")
    total = 0.0
    for i, (xi, yi) in enumerate(nodes):
        basis = 1.0
        for j, (xj, _) in enumerate(nodes):
            if i != j:
                if xi == xj:
                    raise ValueError(f"duplicate abscissa {xi}")
                basis *= (x - xj) / (xi - xj)
        total += basis * yi
    return total


def _paired(xs: Sequence[float], ys: Sequence[float]) -> tuple[list[float], list[float]]:
    xs, ys = [float(x) for x in xs], [float(y) for y in ys]
    if len(xs) != len(ys):
        raise ValueError("xs and ys must have the same length")
    if not xs:
        raise ValueError("at least one data point is required")
    return xs, ys


def _line(xs: list[float], ys: list[float]) -> tuple[float, float]:
    n = len(xs)
    sum_x = sum(xs)
    sum_y = sum(ys)
    sum_xy = sum(x * y for x, y in zip(xs, ys))
    sum_x2 = sum(x * x for x in xs)
    denominator = n * sum_x2 - sum_x * sum_x
    if denominator == 0:
        raise ValueError("the x values must not all be equal")
    b = (n * sum_xy - sum_x * sum_y) / denominator
    a = (sum_y - b * sum_x) / n
    return a, b


def fit_linear(xs: Sequence[float], ys: Sequence[float]) -> tuple[float, float]:
    """Fit ``y = a + b x`` by least squares and return ``(a, b)``."""
    return _line(*_paired(xs, ys))


def fit_exponential(xs: Sequence[float], ys: Sequence[float]) -> tuple[float, float]:
    """Fit ``y = a e^(b x)`` by least squares on ``ln y`` and return ``(a, b)``."""
    xs, ys = _paired(xs, ys)
    if any(y <= 0 for y in ys):
        raise ValueError("all y values must be positive")
    log_a, b = _line(xs, [math.log(y) for y in ys])
    return math.exp(log_a), b


def fit_polynomial(
    xs: Sequence[float], ys: Sequence[float], degree: int
) -> list[float]:
    """Fit a polynomial of the given degree by least squares.

    Returns the coefficients ``[a0, a1, ..., a_degree]`` of
    ``a0 + a1 x + ... + a_degree x^degree``.
    """
    xs, ys = _paired(xs, ys)
    if degree < 0:
        raise ValueError("degree must be non-negative")
    size = degree + 1
    normal = [
        [sum(x ** (j + k) for x in xs) for k in range(size)]
        + [sum(y * x**j for x, y in zip(xs, ys))]
        for j in range(size)
    ]
    return gauss_elimination(normal)