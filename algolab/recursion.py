"""Factorials, Fibonacci numbers and the Tower of Hanoi."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Move:
    """Moving one disk from one rod to another."""

    disk: int
    source: str
    target: str

    def __str__(self) -> str:
        return f"Move disk {self.disk} from rod {self.source} to rod {self.target}"


def factorial(n: int) -> int:
    """Return ``n!``; ``n`` must be non-negative."""
    if n < 0:
        raise ValueError("factorial is not defined for negative numbers")
    result = 1
    for k in range(2, n + 1):
        result *= k
    return result


def factorial_tail(n: int) -> int:
    """Return ``n!`` by an accumulating product; gives 1 for any ``n <= 1``."""
    accumulator = 1
    while n > 1:
        accumulator *= n
        n -= 1
    return accumulator


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number, with ``fibonacci(0) == 0``."""
    if n < 0:
        raise ValueError("Fibonacci numbers need a non-negative index")
    if n < 2:
        return n
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def fibonacci_tail(n: int) -> int:
    """Return the ``n``-th Fibonacci number by carrying two accumulators."""
    if n < 0:
        raise ValueError("Fibonacci numbers need a non-negative index")
    a, b = 0, 1
    while n > 1:
        a, b = b, a + b
        n -= 1
    return a if n == 0 else b


def tower_of_hanoi(
    n: int, source: str = "A", auxiliary: str = "B", target: str = "C"
) -> list[Move]:
    """Return the moves that carry ``n`` disks from ``source`` to ``target``."""
    if n < 0:
        raise ValueError("the number of disks must be non-negative")
    moves: list[Move] = []

    def solve(disks: int, start: str, spare: str, goal: str) -> None:
        if disks == 0:
            return
        solve(disks - 1, start, goal, spare)
        moves.append(Move(disks, start, goal))
        solve(disks - 1, spare, start, goal)

    solve(n, source, auxiliary, target)
    return moves