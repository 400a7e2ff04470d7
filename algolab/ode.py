"""Step-by-step solvers for first-order ODEs and pairs of coupled ODEs."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

Slope = Callable[[float, float], float]
SystemSlope = Callable[[float, float, float], float]


@dataclass(frozen=True)
class Step:
    """A point ``(x, y)`` on an approximate solution."""

    x: float
    y: float


@dataclass(frozen=True)
class SystemStep:
    """A point ``(x, y, z)`` on an approximate solution of a coupled system."""

    x: float
    y: float
    z: float


def _check_step_size(h: float) -> None:
    if h <= 0:
        raise ValueError("the step size must be positive")


def euler(f: Slope, x0: float, y0: float, xn: float, h: float) -> list[Step]:
    """Solve ``y' = f(x, y)`` by Euler's method.

    Steps are taken while ``x <= xn``, so the last point lies one step past
    the last grid point not beyond ``xn``.  The starting point comes first.
    """
    _check_step_size(h)
    x, y = x0, y0
    steps = [Step(x, y)]
    while x <= xn:
        y = y + h * f(x, y)
        x = x + h
        steps.append(Step(x, y))
    return steps


def rk2(f: Slope, x0: float, y0: float, xn: float, h: float) -> list[Step]:
    """Solve ``y' = f(x, y)`` by the second-order Runge-Kutta method.

    Steps are taken while ``x < xn``.  The starting point comes first.
    """
    _check_step_size(h)
    x, y = x0, y0
    steps = [Step(x, y)]
    while x < xn:
        k1 = h * f(x, y)
        k2 = h * f(x + h, y + k1)
        y = y + (k1 + k2) / 2
        x = x + h
        steps.append(Step(x, y))
    return steps


def rk4(f: Slope, x0: float, y0: float, xn: float, h: float) -> list[Step]:
    """Solve ``y' = f(x, y)`` by the classical fourth-order Runge-Kutta method.

    Steps are taken while ``x < xn``.  The starting point comes first.
    """
    _check_step_size(h)
    x, y = x0, y0
    steps = [Step(x, y)]
    while x < xn:
        k1 = h * f(x, y)
        k2 = h * f(x + h / 2, y + k1 / 2)
        k3 = h * f(x + h / 2, y + k2 / 2)
        k4 = h * f(x + h, y + k3)
        y = y + (k1 + 2 * k2 + 2 * k3 + k4) / 6
        x = x + h
        steps.append(Step(x, y))
    return steps


def _integrate_system(
    increment: Callable[[float, float, float], tuple[float, float]],
    x0: float,
    y0: float,
    z0: float,
    xn: float,
    h: float,
) -> list[SystemStep]:
    _check_step_size(h)
    x, y, z = x0, y0, z0
    steps = [SystemStep(x, y, z)]
    while True:
        k, l = increment(x, y, z)
        y, z, x = y + k, z + l, x + h
        steps.append(SystemStep(x, y, z))
        if x >= xn:
            return steps


def rk2_system(
    f: SystemSlope,
    g: SystemSlope,
    x0: float,
    y0: float,
    z0: float,
    xn: float,
    h: float,
) -> list[SystemStep]:
    """Solve ``y' = f(x, y, z)``, ``z' = g(x, y, z)`` by second-order Runge-Kutta.

    At least one step is always taken; stepping continues while ``x < xn``.
    """

    def increment(x: float, y: float, z: float) -> tuple[float, float]:
        k1 = h * f(x, y, z)
        l1 = h * g(x, y, z)
        k2 = h * f(x + h, y + k1, z + l1)
        l2 = h * g(x + h, y + k1, z + l1)
        return (k1 + k2) / 2, (l1 + l2) / 2

    return _integrate_system(increment, x0, y0, z0, xn, h)


def rk4_system(
    f: SystemSlope,
    g: SystemSlope,
    x0: float,
    y0: float,
    z0: float,
    xn: float,
    h: float,
) -> list[SystemStep]:
    """Solve ``y' = f(x, y, z)``, ``z' = g(x, y, z)`` by fourth-order Runge-Kutta.

    At least one step is always taken; stepping continues while ``x < xn``.
    """

    def increment(x: float, y: float, z: float) -> tuple[float, float]:
        k1 = h * f(x, y, z)
        l1 = h * g(x, y, z)
        k2 = h * f(x + h / 2, y + k1 / 2, z + l1 / 2)
        l2 = h * g(x + h / 2, y + k1 / 2, z + l1 / 2)
        k3 = h * f(x + h / 2, y + k2 / 2, z + l2 / 2)
        l3 = h * g(x + h / 2, y + k2 / 2, z + l2 / 2)
        k4 = h * f(x + h, y + k3, z + l3)
        l4 = h * g(x + h, y + k3, z + l3)
        return (
            (k1 + 2 * k2 + 2 * k3 + k4) / 6,
            (l1 + 2 * l2 + 2 * l3 + l4) / 6,
        )

    return _integrate_system(increment, x0, y0, z0, xn, h)