import math

import pytest

from algolab.ode import Step, SystemStep, euler, rk2, rk2_system, rk4, rk4_system


def test_euler_starts_at_initial_point():
    steps = euler(lambda x, y: 2 * x + math.sin(x), 0, 1, 1, 0.25)
    assert steps[0] == Step(0, 1)


def test_euler_exact_for_constant_slope_and_steps_past_xn():
    steps = euler(lambda x, y: 1.0, 0, 0, 1, 0.5)
    assert [s.x for s in steps] == [0, 0.5, 1.0, 1.5]
    assert all(s.y == pytest.approx(s.x) for s in steps)


def test_euler_rejects_non_positive_step():
    with pytest.raises(ValueError):
        euler(lambda x, y: y, 0, 1, 1, 0)


def test_rk2_exact_for_linear_slope():
    steps = rk2(lambda x, y: 2 * x, 0, 0, 2, 0.25)
    assert steps[-1].x == 2
    assert all(s.y == pytest.approx(s.x * s.x) for s in steps)


def test_rk2_no_steps_when_already_at_target():
    assert rk2(lambda x, y: 2 * y / x, 1, 1, 1, 0.1) == [Step(1, 1)]


def test_rk2_tracks_power_law():
    steps = rk2(lambda x, y: 2 * y / x, 1, 1, 2, 1 / 128)
    assert steps[-1].x == 2
    assert steps[-1].y == pytest.approx(steps[-1].x ** 2, rel=1e-3)


def test_rk4_tracks_exponential():
    steps = rk4(lambda x, y: y, 0, 1, 1, 0.125)
    assert steps[-1].x == 1
    assert steps[-1].y == pytest.approx(math.e, abs=1e-5)


def test_rk4_x_values_increase_by_step():
    steps = rk4(lambda x, y: (x * x + y * y) / 10, 0, 1, 0.5, 0.125)
    xs = [s.x for s in steps]
    assert all(b - a == pytest.approx(0.125) for a, b in zip(xs, xs[1:]))
    assert xs[-1] >= 0.5


def test_rk4_rejects_negative_step():
    with pytest.raises(ValueError):
        rk4(lambda x, y: y, 0, 1, 1, -0.1)


def test_rk4_system_harmonic_oscillator():
    steps = rk4_system(lambda x, y, z: z, lambda x, y, z: -y, 0, 0, 1, 1, 1 / 64)
    last = steps[-1]
    assert last.x == 1
    assert last.y == pytest.approx(math.sin(last.x), abs=1e-8)
    assert last.z == pytest.approx(math.cos(last.x), abs=1e-8)


def test_rk2_system_harmonic_oscillator():
    steps = rk2_system(lambda x, y, z: z, lambda x, y, z: -y, 0, 0, 1, 1, 1 / 128)
    last = steps[-1]
    assert last.y == pytest.approx(math.sin(last.x), abs=1e-3)
    assert last.z == pytest.approx(math.cos(last.x), abs=1e-3)


@pytest.mark.parametrize("solver", [rk2_system, rk4_system])
def test_system_always_takes_one_step(solver):
    steps = solver(lambda x, y, z: z, lambda x, y, z: x * y * y - y * y, 0, 1, 0, 0, 0.5)
    assert len(steps) == 2
    assert steps[0] == SystemStep(0, 1, 0)
    assert steps[1].x == 0.5


@pytest.mark.parametrize("solver", [rk2_system, rk4_system])
def test_system_rejects_zero_step(solver):
    with pytest.raises(ValueError):
        solver(lambda x, y, z: z, lambda x, y, z: -y, 0, 0, 1, 1, 0)