"""Root finding for scalar functions of one real variable."""

from __future__ import annotations

from collections.abc import Callable

Function = Callable[[float], float]


class NoRootError(ValueError):
    """The function does not change sign over the given interval."""


class ConvergenceError(ArithmeticError):
    """An iterative method did not reach the requested tolerance."""


def bisection(
    f: Function,
    a: float,
    b: float,
    tolerance: float = 1e-6,
    max_iterations: int = 500,
) -> float:
    """Find a root of ``f`` in ``[a, b]`` by repeated halving of the interval.

    Stops once ``|f(c)|`` drops below ``tolerance``.  Raises
    :class:`NoRootError` when ``f(a)`` and ``f(b)`` share a sign, and
    :class:`ConvergenceError` when the limit on iterations is reached,
    which is what happens when the function is discontinuous.
    """
    fa, fb = f(a), f(b)
    if fa * fb > 0:
        raise NoRootError(f"no root on the interval [{a}, {b}]")
    if fa == 0:
        return a
    if fb == 0:
        return b
    for _ in range(max_iterations):
        c = (a + b) / 2
        fc = f(c)
        if f(a) * fc < 0:
            b = c
        else:
            a = c
        if abs(fc) < tolerance:
            return c
    raise ConvergenceError(
        f"bisection did not converge in {max_iterations} iterations; "
        "the function may be discontinuous"
    )


def newton_raphson(
    f: Function,
    df: Function,
    x0: float,
    tolerance: float = 1e-4,
    max_iterations: int = 100,
) -> float:
    """Find a root of ``f`` by Newton's method starting from ``x0``.

    Stops once two successive estimates differ by at most ``tolerance``.
    """
    x = x0
    for _ in range(max_iterations):
        slope = df(x)
        if slope == 0:
            raise ConvergenceError(f"derivative vanishes at x = {x}")
        x_next = x - f(x) / slope
        error = abs(x_next - x)
        x = x_next
        if error <= tolerance:
            return x
    raise ConvergenceError(
        f"Newton's method did not converge in {max_iterations} iterations"
    )


def secant(
    f: Function,
    a: float,
    b: float,
    tolerance: float = 1e-5,
    max_iterations: int = 300,
) -> float:
    """Find a root of ``f`` by the secant method from the estimates ``a`` and ``b``.

    Stops once ``|f(c)|`` drops below ``tolerance``.
    """
    for _ in range(max_iterations):
        fa, fb = f(a), f(b)
        if fb == fa:
            raise ConvergenceError(f"secant through {a} and {b} is horizontal")
        c = (a * fb - b * fa) / (fb - fa)
        a, b = b, c
        if abs(f(c)) < tolerance:
            return c
    raise ConvergenceError(
        f"secant method did not converge in {max_iterations} iterations; "
        "the function may be discontinuous on the interval"
    )