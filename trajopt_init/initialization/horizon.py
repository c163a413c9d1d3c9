from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import Sequence

    from numpy.typing import NDArray

    from trajopt_init.logic import LogicRulesMachine

    from .base import SystemOperatingTrajectoriesBase


logger = logging.getLogger(__name__)


def operating_trajectories_over_horizon(
    operating_trajectories: SystemOperatingTrajectoriesBase,
    logic_rules_machine: LogicRulesMachine,
    initial_state: NDArray,
    partitioning_times: Sequence[float] | None = None,
    algorithm_name: str | None = None,
) -> tuple[list[float], list[NDArray], list[NDArray]]:
    """Assemble the seed trajectory of the whole horizon partition by partition.

    Every partition is initialized once and then split at its switching times, so each call to
    `get_system_operating_trajectories` covers an interval without intermediate switches.

    Args:
        operating_trajectories: The operating trajectories to query.
        logic_rules_machine: The logic rules machine. Updated with `partitioning_times` if given.
        initial_state: Initial state of the horizon. Later intervals receive the last state of
            the seed assembled so far.
        partitioning_times: Partition boundaries, or None if the machine is already updated.
        algorithm_name: Name of the calling algorithm, forwarded to `initialize_model`.

    Returns:
        The concatenated (time, state, input) trajectories.
    """
    if partitioning_times is not None:
        logic_rules_machine.update_logic_rules(partitioning_times)
    bounds = logic_rules_machine.partitioning_times

    time_trajectory: list[float] = []
    state_trajectory: list[NDArray] = []
    input_trajectory: list[NDArray] = []
    state = initial_state
    for i in range(logic_rules_machine.num_partitions):
        operating_trajectories.initialize_model(logic_rules_machine, i, algorithm_name)
        times = [bounds[i], *logic_rules_machine.get_switching_times(i), bounds[i + 1]]
        for t0, t1 in zip(times[:-1], times[1:]):
            operating_trajectories.get_system_operating_trajectories(
                state,
                t0,
                t1,
                time_trajectory,
                state_trajectory,
                input_trajectory,
                concat_output=True,
            )
            # the next interval starts where the seed ended
            state = state_trajectory[-1]
        logger.debug(
            f"Partition {i}: {len(times) - 1} interval(s) in [{bounds[i]}, {bounds[i + 1]}]"
        )

    return time_trajectory, state_trajectory, input_trajectory
