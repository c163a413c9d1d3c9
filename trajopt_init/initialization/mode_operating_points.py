from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Mapping

from .base import SystemOperatingTrajectoriesBase
from .operating_point import SystemOperatingPoint

if TYPE_CHECKING:
    from numpy.typing import NDArray

    from trajopt_init.logic import LogicRulesMachine


class ModeOperatingPoints(SystemOperatingTrajectoriesBase):
    """Constant operating point per subsystem.

    Consumes the logic rules machine: `initialize_model` fetches the active subsystem lookup of
    the partition and every interval is seeded with the operating point of the subsystem active
    at its start time.
    """

    def __init__(self, operating_points: Mapping[int, SystemOperatingPoint]):
        """Store the operating points.

        Args:
            operating_points: Operating point of each subsystem ID. All of them must share the
                same state and input dimensions.
        """
        if not operating_points:
            raise ValueError("At least one operating point is required")
        self._operating_points = {int(k): v.clone() for k, v in operating_points.items()}
        dims = {(op.state_dim, op.input_dim) for op in self._operating_points.values()}
        if len(dims) != 1:
            raise ValueError(f"Operating points have mismatching (state, input) dimensions: {dims}")
        self._active_subsystem: Callable[[float], int] | None = None
        self._partition_index: int | None = None

    @property
    def subsystems(self) -> list[int]:
        return sorted(self._operating_points)

    def operating_point(self, subsystem: int) -> SystemOperatingPoint:
        return self._operating_points[subsystem]

    def initialize_model(
        self,
        logic_rules_machine: LogicRulesMachine,
        partition_index: int,
        algorithm_name: str | None = None,
    ) -> None:
        super().initialize_model(logic_rules_machine, partition_index, algorithm_name)
        self._active_subsystem = logic_rules_machine.find_active_subsystem_handle(partition_index)
        self._partition_index = partition_index

    def clone(self) -> ModeOperatingPoints:
        other = ModeOperatingPoints(self._operating_points)
        other._active_subsystem = self._active_subsystem
        other._partition_index = self._partition_index
        return other

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
        if self._active_subsystem is None:
            raise RuntimeError("initialize_model has to be called before requesting trajectories")
        subsystem = self._active_subsystem(start_time)
        if subsystem not in self._operating_points:
            raise KeyError(
                f"No operating point for subsystem {subsystem} "
                f"(partition {self._partition_index}, t={start_time})"
            )
        return self._operating_points[subsystem].get_system_operating_trajectories(
            initial_state,
            start_time,
            final_time,
            time_trajectory,
            state_trajectory,
            input_trajectory,
            concat_output,
        )
