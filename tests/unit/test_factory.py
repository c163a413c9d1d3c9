from pathlib import Path

import numpy as np
import pytest
from ml_collections import ConfigDict

from trajopt_init.initialization import (
    InterpolatedOperatingTrajectories,
    ModeOperatingPoints,
    SystemOperatingPoint,
    make_logic_rules_machine,
    make_operating_trajectories,
)
from trajopt_init.utils import load_config

CONFIG_DIR = Path(__file__).parents[2] / "config"


def test_load_operating_point_config():
    config = load_config(CONFIG_DIR / "operating_point.toml")
    op = make_operating_trajectories(config)
    assert isinstance(op, SystemOperatingPoint)
    np.testing.assert_array_equal(op.state_operating_point, [1.0, 2.0])
    np.testing.assert_array_equal(op.input_operating_point, [5.0])
    machine = make_logic_rules_machine(config)
    assert machine.num_partitions == 2
    assert machine.get_switching_times(0) == []


def test_load_mode_operating_points_config():
    config = load_config(CONFIG_DIR / "mode_operating_points.toml")
    mop = make_operating_trajectories(config)
    assert isinstance(mop, ModeOperatingPoints)
    assert mop.subsystems == [0, 1]
    np.testing.assert_array_equal(mop.operating_point(1).input_operating_point, [0.0])
    machine = make_logic_rules_machine(config)
    assert machine.get_switching_times(0) == [0.5]
    assert machine.get_switching_times(1) == [1.5]


def test_load_interpolated_config():
    config = load_config(CONFIG_DIR / "interpolated.toml")
    traj = make_operating_trajectories(config)
    assert isinstance(traj, InterpolatedOperatingTrajectories)
    assert (traj.state_dim, traj.input_dim) == (2, 1)


def test_default_operating_point_from_dims():
    config = ConfigDict(
        {"dims": {"state_dim": 4, "input_dim": 2}, "operating_trajectories": {"type": "operating_point"}}
    )
    op = make_operating_trajectories(config)
    np.testing.assert_array_equal(op.state_operating_point, np.zeros(4))
    np.testing.assert_array_equal(op.input_operating_point, np.zeros(2))


def test_config_dimension_mismatch():
    config = ConfigDict(
        {
            "dims": {"state_dim": 3, "input_dim": 1},
            "operating_trajectories": {"type": "operating_point", "state": [1.0, 2.0]},
        }
    )
    with pytest.raises(ValueError):
        make_operating_trajectories(config)


def test_unknown_type():
    config = ConfigDict(
        {"dims": {"state_dim": 1, "input_dim": 1}, "operating_trajectories": {"type": "spline"}}
    )
    with pytest.raises(ValueError):
        make_operating_trajectories(config)


def test_load_config_requires_toml(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("dims: {}")
    with pytest.raises(AssertionError):
        load_config(path)
    with pytest.raises(AssertionError):
        load_config(tmp_path / "missing.toml")
