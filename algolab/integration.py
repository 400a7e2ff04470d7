"""Numerical integration over equally spaced points."""

from __future__ import annotations

from collections.abc import Callable

Function = Callable[[float], float]


def sample_points(f: Function, a: float, b: float, n: int) -> list[tuple[float, float]]:
    """Return the ``n + 1`` points ``(x, f(x))`` dividing ``[a, b]`` into ``n`` parts."""
    if n < 1:
        raise ValueError("the number of divisions must be at least 1")
    h = (b - a) / n
    return [(a + i * h, f(a + i * h)) for i in range(n + 1)]


def _ordinates(f: Function, a: float, b: float, n: int) -> tuple[float, list[float]]:
    ys = [y for _, y in sample_points(f, a, b, n)]
    return (b - a) / n, ys


def trapezoidal(f: Function, a: float, b: float, n: int) -> float:
    """Integrate ``f`` over ``[a, b]`` by the trapezoidal rule with ``n`` divisions."""
    h, ys = _ordinates(f, a, b, n)
    return h / 2 * (ys[0] + ys[-1] + 2 * sum(ys[1:-1]))


def simpson_13(f: Function, a: float, b: float, n: int) -> float:
    """Integrate ``f`` over ``[a, b]`` by Simpson's 1/3 rule with ``n`` divisions."""
    h, ys = _ordinates(f, a, b, n)
    inner = sum(
        (2 if i % 2 == 0 else 4) * y for i, y in enumerate(ys[1:-1], start=1)
    )
    return h / 3 * (ys[0] + ys[-1] + inner)


def simpson_38(f: Function, a: float, b: float, n: int) -> float:
    """Integrate ``f`` over ``[a, b]`` by Simpson's 3/8 rule with ``n`` divisions."""
    h, ys = _ordinates(f, a, b, n)
    inner = sum(
        (2 if i % 3 == 0 else 3) * y for i, y in enumerate(ys[1:-1], start=1)
    )
    return 3 * h / 8 * (ys[0] + ys[-1] + inner)