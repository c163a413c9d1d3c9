"""Operating trajectories read off a precomputed trajectory, e.g. a previous solution."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

import numpy as np
from scipy.interpolate import interp1d

from .base import SystemOperatingTrajectoriesBase, prepare_outputs

if TYPE_CHECKING:
    from numpy.typing import ArrayLike, NDArray

    from trajopt_init.logic import LogicRulesMachine


class InterpolatedOperatingTrajectories(SystemOperatingTrajectoriesBase):
    """Linear interpolation of a stored state/input trajectory.

    Outside the stored time range the first and last samples are held. Neither the initial state
    nor the logic rules machine are used.
    """

    def __init__(
        self,
        time_trajectory: Sequence[float],
        state_trajectory: Sequence[ArrayLike],
        input_trajectory: Sequence[ArrayLike],
    ):
        ts = np.array(time_trajectory, dtype=float)
        xs = np.array(state_trajectory, dtype=float)
        us = np.array(input_trajectory, dtype=float)
        if ts.ndim != 1 or xs.ndim != 2 or us.ndim != 2:
            raise ValueError(
                f"Expected time (N,), state (N, nx) and input (N, nu) arrays, got shapes "
                f"{ts.shape}, {xs.shape}, {us.shape}"
            )
        if not len(ts) == len(xs) == len(us):
            raise ValueError(f"Trajectory lengths differ: {len(ts)}, {len(xs)}, {len(us)}")
        if len(ts) < 2:
            raise ValueError("At least two samples are required for interpolation")
        if np.any(np.diff(ts) <= 0):
            raise ValueError("Time stamps must be strictly increasing")

        self._ts, self._xs, self._us = ts, xs, us
        self._ts.flags.writeable = False
        self._xs.flags.writeable = False
        self._us.flags.writeable = False
        self._state_interp = interp1d(
            ts, xs, axis=0, assume_sorted=True, bounds_error=False, fill_value=(xs[0], xs[-1])
        )
        self._input_interp = interp1d(
            ts, us, axis=0, assume_sorted=True, bounds_error=False, fill_value=(us[0], us[-1])
        )

    @property
    def state_dim(self) -> int:
        return self._xs.shape[1]

    @property
    def input_dim(self) -> int:
        return self._us.shape[1]

    def initialize_model(
        self,
        logic_rules_machine: LogicRulesMachine,
        partition_index: int,
        algorithm_name: str | None = None,
    ) -> None:
        super().initialize_model(logic_rules_machine, partition_index, algorithm_name)

    def clone(self) -> InterpolatedOperatingTrajectories:
        return InterpolatedOperatingTrajectories(self._ts, self._xs, self._us)

    def get_system_operating_trajectories(
        self,
        initial_state: NDArray,
        start_time: float,
        final_time: float,
        time_trajectory: list[float] | None = None,
        state_trajectory: list[NDArray] | None = None,
        input_trajectory: list[NDArray] | None = None,
        concat_output: bool = False,
    ) -> tuple[list[float], list[NDArray], list[NDArray]]:
        """Sample the stored trajectory at the interval bounds and every stored time in between."""
        time_trajectory, state_trajectory, input_trajectory = prepare_outputs(
            time_trajectory, state_trajectory, input_trajectory, concat_output
        )

        inner = self._ts[(self._ts > start_time) & (self._ts < final_time)]
        ts = [start_time, *inner.tolist(), final_time]
        xs = self._state_interp(ts)
        us = self._input_interp(ts)

        time_trajectory.extend(ts)
        state_trajectory.extend(np.array(x) for x in xs)
        input_trajectory.extend(np.array(u) for u in us)

        return time_trajectory, state_trajectory, input_trajectory
