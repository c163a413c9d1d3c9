"""Assemble the seed trajectory a solver would start from.

Run as:

    $ python scripts/seed.py --config operating_point.toml

The config file is looked up in `config/`.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import fire
import numpy as np

from trajopt_init.initialization import (
    make_logic_rules_machine,
    make_operating_trajectories,
    operating_trajectories_over_horizon,
)
from trajopt_init.utils import load_config, stack_trajectories

if TYPE_CHECKING:
    from numpy.typing import NDArray


logger = logging.getLogger(__name__)


def seed(
    config: str = "operating_point.toml",
    initial_state: list[float] | None = None,
    algorithm_name: str = "SLQ",
) -> tuple[NDArray, NDArray, NDArray]:
    """Build the seed trajectory over all time partitions of a config.

    Args:
        config: The path to the configuration file. Assumes the file is in `config/`.
        initial_state: Initial state of the horizon. Zeros if None.
        algorithm_name: Name reported to the operating trajectories on initialization.

    Returns:
        Time (N,), state (N, nx) and input (N, nu) arrays.
    """
    config = load_config(Path(__file__).parents[1] / "config" / config)
    operating_trajectories = make_operating_trajectories(config)
    logic_rules_machine = make_logic_rules_machine(config)

    if initial_state is None:
        initial_state = np.zeros(config.dims.state_dim)
    initial_state = np.asarray(initial_state, dtype=float)

    ts, xs, us = stack_trajectories(
        *operating_trajectories_over_horizon(
            operating_trajectories, logic_rules_machine, initial_state, algorithm_name=algorithm_name
        )
    )
    log_seed_stats(ts, xs, us, logic_rules_machine.num_partitions)
    return ts, xs, us


def log_seed_stats(ts: NDArray, xs: NDArray, us: NDArray, num_partitions: int):
    """Log the samples of a seed trajectory."""
    rows = "\n".join(f"  t={t:8.3f}  x={x.tolist()}  u={u.tolist()}" for t, x, u in zip(ts, xs, us))
    logger.info(f"Seed with {len(ts)} samples over {num_partitions} partition(s):\n{rows}")


if __name__ == "__main__":
    logging.basicConfig()
    logging.getLogger("trajopt_init").setLevel(logging.INFO)
    logger.setLevel(logging.INFO)
    fire.Fire(seed, serialize=lambda _: None)
