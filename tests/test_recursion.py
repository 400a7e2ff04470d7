import math

import pytest

from algolab.recursion import (
    Move,
    factorial,
    factorial_tail,
    fibonacci,
    fibonacci_tail,
    tower_of_hanoi,
)


@pytest.mark.parametrize("n", range(0, 20))
def test_factorial_matches_math(n):
    assert factorial(n) == math.factorial(n)


@pytest.mark.parametrize("n", range(1, 20))
def test_factorial_tail_matches_factorial(n):
    assert factorial_tail(n) == factorial(n)


def test_factorial_tail_small_inputs():
    assert factorial_tail(0) == factorial(0)
    assert factorial_tail(-3) == factorial(1)


def test_factorial_negative_raises():
    with pytest.raises(ValueError):
        factorial(-1)


def test_fibonacci_base_cases():
    assert fibonacci(0) == 0
    assert fibonacci(1) == 1


@pytest.mark.parametrize("n", range(2, 30))
def test_fibonacci_recurrence(n):
    assert fibonacci(n) == fibonacci(n - 1) + fibonacci(n - 2)


@pytest.mark.parametrize("n", range(0, 30))
def test_fibonacci_tail_matches(n):
    assert fibonacci_tail(n) == fibonacci(n)


@pytest.mark.parametrize("func", [fibonacci, fibonacci_tail])
def test_fibonacci_negative_raises(func):
    with pytest.raises(ValueError):
        func(-1)


def test_hanoi_single_disk():
    assert tower_of_hanoi(1) == [Move(1, "A", "C")]


def test_move_text():
    assert str(Move(1, "A", "C")) == "Move disk 1 from rod A to rod C"


def test_hanoi_zero_disks():
    assert tower_of_hanoi(0) == []


@pytest.mark.parametrize("n", range(1, 9))
def test_hanoi_moves_are_legal_and_complete(n):
    moves = tower_of_hanoi(n, "A", "B", "C")
    assert len(moves) == 2**n - 1
    rods = {"A": list(range(n, 0, -1)), "B": [], "C": []}
    for move in moves:
        assert rods[move.source][-1] == move.disk
        disk = rods[move.source].pop()
        if rods[move.target]:
            assert rods[move.target][-1] > disk
        rods[move.target].append(disk)
    assert rods["C"] == list(range(n, 0, -1))
    assert rods["A"] == [] and rods["B"] == []


def test_hanoi_custom_rod_names():
    moves = tower_of_hanoi(3, "X", "Y", "Z")
    assert {m.source for m in moves} | {m.target for m in moves} == {"X", "Y", "Z"}
    assert moves[len(moves) // 2] == Move(3, "X", "Z")


def test_hanoi_negative_raises():
    with pytest.raises(ValueError):
        tower_of_hanoi(-1)