from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from numpy.typing import NDArray

    from trajopt_init.logic import LogicRulesMachine


logger = logging.getLogger(__name__)


@runtime_checkable
class SystemOperatingTrajectoriesBase(Protocol):
    """Operating trajectories protocol used to initialize SLQ-type solvers.

    Implementations produce a seed state/input trajectory over a time interval. Solvers call
    `initialize_model` once per time partition and then `get_system_operating_trajectories` for
    each switch-free interval in it. Variants that do not depend on the partition structure may
    inherit the no-op `initialize_model` below.
    """

    def initialize_model(
        self,
        logic_rules_machine: LogicRulesMachine,
        partition_index: int,
        algorithm_name: str | None = None,
    ) -> None:
        """Initialize the operating trajectories for a time partition.

        Args:
            logic_rules_machine: Parses the logic rules, e.g. `find_active_subsystem_handle`
                returns a function giving the ID of the active subsystem at a time.
            partition_index: Index of the time partition.
            algorithm_name: The algorithm that calls this class (optional).
        """
        logger.debug(
            f"{type(self).__name__} initialized for partition {partition_index}"
            + (f" by {algorithm_name}" if algorithm_name else "")
        )

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
        """Get the operating trajectories in [start_time, final_time].

        The interval holds no intermediate switch except possibly at `final_time`.

        Args:
            initial_state: Initial state.
            start_time: Initial time.
            final_time: Final time.
            time_trajectory: Output time stamp trajectory, or None for a fresh list.
            state_trajectory: Output state trajectory, or None for a fresh list.
            input_trajectory: Output control input trajectory, or None for a fresh list.
            concat_output: Append to the output trajectories instead of overriding them.

        Returns:
            The (time, state, input) trajectories, the same lists that were passed in.
        """
        ...

    def clone(self) -> SystemOperatingTrajectoriesBase:
        """Return an independent copy of this instance."""
        ...


def prepare_outputs(
    time_trajectory: list[float] | None,
    state_trajectory: list[NDArray] | None,
    input_trajectory: list[NDArray] | None,
    concat_output: bool,
) -> tuple[list[float], list[NDArray], list[NDArray]]:
    """Create missing output lists and clear the given ones unless concatenating."""
    outputs = []
    for trajectory in (time_trajectory, state_trajectory, input_trajectory):
        if trajectory is None:
            trajectory = []
        elif not concat_output:
            trajectory.clear()
        outputs.append(trajectory)
    return tuple(outputs)
