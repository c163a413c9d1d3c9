from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from trajopt_init.utils import as_vector, readonly

from .base import SystemOperatingTrajectoriesBase, prepare_outputs

if TYPE_CHECKING:
    from numpy.typing import ArrayLike, NDArray

    from trajopt_init.logic import LogicRulesMachine


class SystemOperatingPoint(SystemOperatingTrajectoriesBase):
    """Constant operating point for initializing SLQ-based algorithms.

    Returns the same state and input at the start and final time of every interval. The logic
    rules machine passed to `initialize_model` is not used.
    """

    def __init__(
        self,
        state_operating_point: ArrayLike | None = None,
        input_operating_point: ArrayLike | None = None,
        state_dim: int | None = None,
        input_dim: int | None = None,
    ):
        """Store the operating point.

        Args:
            state_operating_point: State operating point. Zeros of `state_dim` if None.
            input_operating_point: Input operating point. Zeros of `input_dim` if None.
            state_dim: Dimension of the state space.
            input_dim: Dimension of the control input space.
        """
        self._state_operating_point = readonly(
            self._vector_or_zeros(state_operating_point, state_dim, "state_operating_point")
        )
        self._input_operating_point = readonly(
            self._vector_or_zeros(input_operating_point, input_dim, "input_operating_point")
        )

    @staticmethod
    def _vector_or_zeros(value: ArrayLike | None, dim: int | None, name: str) -> NDArray:
        if value is None:
            if dim is None:
                raise ValueError(f"Either {name} or its dimension has to be given")
            return np.zeros(int(dim))
        return as_vector(value, dim, name)

    @property
    def state_operating_point(self) -> NDArray:
        return self._state_operating_point

    @property
    def input_operating_point(self) -> NDArray:
        return self._input_operating_point

    @property
    def state_dim(self) -> int:
        return self._state_operating_point.shape[0]

    @property
    def input_dim(self) -> int:
        return self._input_operating_point.shape[0]

    def initialize_model(
        self,
        logic_rules_machine: LogicRulesMachine,
        partition_index: int,
        algorithm_name: str | None = None,
    ) -> None:
        super().initialize_model(logic_rules_machine, partition_index, algorithm_name)

    def clone(self) -> SystemOperatingPoint:
        return SystemOperatingPoint(self._state_operating_point, self._input_operating_point)

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
        """Get the operating point at `start_time` and `final_time`.

        `initial_state` is ignored: the trajectory does not start from the true initial state.
        No ordering of the times is checked.
        """
        time_trajectory, state_trajectory, input_trajectory = prepare_outputs(
            time_trajectory, state_trajectory, input_trajectory, concat_output
        )

        time_trajectory.append(start_time)
        time_trajectory.append(final_time)

        state_trajectory.append(self._state_operating_point.copy())
        state_trajectory.append(self._state_operating_point.copy())

        input_trajectory.append(self._input_operating_point.copy())
        input_trajectory.append(self._input_operating_point.copy())

        return time_trajectory, state_trajectory, input_trajectory

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(state_operating_point={self._state_operating_point.tolist()}, "
            f"input_operating_point={self._input_operating_point.tolist()})"
        )
