import numpy as np
import pytest

from trajopt_init.initialization import ModeOperatingPoints, SystemOperatingPoint


def make_mode_operating_points():
    return ModeOperatingPoints(
        {
            0: SystemOperatingPoint([0.0, 0.0], [1.0]),
            1: SystemOperatingPoint([1.0, 1.0], [2.0]),
            2: SystemOperatingPoint([2.0, 2.0], [3.0]),
        }
    )


def test_uses_subsystem_active_at_start_time(switching_machine):
    mop = make_mode_operating_points()
    mop.initialize_model(switching_machine, 0, "SLQ")
    ts, xs, us = mop.get_system_operating_trajectories(np.zeros(2), 0.0, 0.5)
    assert ts == [0.0, 0.5]
    np.testing.assert_array_equal(np.stack(xs), [[0.0, 0.0], [0.0, 0.0]])
    np.testing.assert_array_equal(np.stack(us), [[1.0], [1.0]])

    ts, xs, us = mop.get_system_operating_trajectories(np.zeros(2), 0.5, 1.0, ts, xs, us, True)
    assert ts == [0.0, 0.5, 0.5, 1.0]
    np.testing.assert_array_equal(xs[-1], [1.0, 1.0])
    np.testing.assert_array_equal(us[-1], [2.0])


def test_follows_partition(switching_machine):
    mop = make_mode_operating_points()
    mop.initialize_model(switching_machine, 1)
    _, xs, _ = mop.get_system_operating_trajectories(np.zeros(2), 1.5, 2.0)
    np.testing.assert_array_equal(xs[0], [2.0, 2.0])


def test_requires_initialization():
    with pytest.raises(RuntimeError):
        make_mode_operating_points().get_system_operating_trajectories(np.zeros(2), 0.0, 1.0)


def test_missing_subsystem_raises(switching_machine):
    mop = ModeOperatingPoints({0: SystemOperatingPoint([0.0, 0.0], [1.0])})
    mop.initialize_model(switching_machine, 1)
    with pytest.raises(KeyError):
        mop.get_system_operating_trajectories(np.zeros(2), 1.0, 1.5)


def test_mismatching_dimensions_raise():
    with pytest.raises(ValueError):
        ModeOperatingPoints(
            {0: SystemOperatingPoint([0.0, 0.0], [1.0]), 1: SystemOperatingPoint([0.0], [1.0])}
        )
    with pytest.raises(ValueError):
        ModeOperatingPoints({})


def test_clone_keeps_initialization(switching_machine):
    mop = make_mode_operating_points()
    mop.initialize_model(switching_machine, 1)
    clone = mop.clone()
    assert isinstance(clone, ModeOperatingPoints)
    assert clone.subsystems == [0, 1, 2]
    assert clone.operating_point(2) is not mop.operating_point(2)
    a = mop.get_system_operating_trajectories(np.zeros(2), 1.0, 1.5)
    b = clone.get_system_operating_trajectories(np.zeros(2), 1.0, 1.5)
    assert a[0] == b[0]
    np.testing.assert_array_equal(np.stack(a[1]), np.stack(b[1]))
