"""Split logic rules over the time partitions of a solver.

A solver divides its horizon into partitions given by ``partitioning_times``
(``num_partitions + 1`` non-decreasing times). The machine assigns every
switching time to the partition that contains it and answers which subsystem
is active at a given time inside a partition.
"""

from __future__ import annotations

import bisect
import logging
from typing import TYPE_CHECKING, Callable

import numpy as np

from .logic_rules import LogicRules, NullLogicRules

if TYPE_CHECKING:
    from typing import Sequence


logger = logging.getLogger(__name__)


class LogicRulesMachine:
    """Parses `LogicRules` into per-partition switching times and event counters."""

    def __init__(self, logic_rules: LogicRules | None = None):
        self._logic_rules = logic_rules if logic_rules is not None else NullLogicRules()
        self._partitioning_times: list[float] | None = None
        self._switching_times: list[list[float]] = []
        self._event_counters: list[list[int]] = []

    @property
    def logic_rules(self) -> LogicRules:
        return self._logic_rules

    def set_logic_rules(self, logic_rules: LogicRules) -> None:
        """Replace the logic rules. `update_logic_rules` has to be called again."""
        self._logic_rules = logic_rules
        self._partitioning_times = None
        self._switching_times = []
        self._event_counters = []

    def update_logic_rules(self, partitioning_times: Sequence[float]) -> None:
        """Distribute the switching times over the given time partitions.

        Args:
            partitioning_times: Partition boundaries, at least two non-decreasing times.
        """
        partitioning_times = [float(t) for t in partitioning_times]
        if len(partitioning_times) < 2:
            raise ValueError("At least two partitioning times are required")
        if np.any(np.diff(partitioning_times) < 0):
            raise ValueError(f"Partitioning times must be non-decreasing: {partitioning_times}")

        all_switches = self._logic_rules.switching_times
        self._switching_times = []
        self._event_counters = []
        for t0, t1 in zip(partitioning_times[:-1], partitioning_times[1:]):
            # a switch exactly at t0 is already active at the partition start
            first = bisect.bisect_right(all_switches, t0)
            last = bisect.bisect_left(all_switches, t1)
            switches = all_switches[first:max(first, last)]
            self._switching_times.append(list(switches))
            self._event_counters.append(list(range(first, first + len(switches) + 1)))
        self._partitioning_times = partitioning_times
        logger.debug(
            f"Logic rules split over {self.num_partitions} partitions: {self._switching_times}"
        )

    @property
    def num_partitions(self) -> int:
        self._check_updated()
        return len(self._partitioning_times) - 1

    @property
    def partitioning_times(self) -> list[float]:
        self._check_updated()
        return list(self._partitioning_times)

    def get_switching_times(self, partition_index: int) -> list[float]:
        """Switching times strictly inside the partition."""
        self._check_partition(partition_index)
        return list(self._switching_times[partition_index])

    def get_event_counters(self, partition_index: int) -> list[int]:
        """Indices into the subsystems sequence that are active in the partition, in order."""
        self._check_partition(partition_index)
        return list(self._event_counters[partition_index])

    def find_active_subsystem_handle(self, partition_index: int) -> Callable[[float], int]:
        """Return a function mapping a time inside the partition to the active subsystem ID.

        Times outside the partition map to its first or last subsystem.
        """
        self._check_partition(partition_index)
        switches = list(self._switching_times[partition_index])
        subsystems = [
            self._logic_rules.subsystems_sequence[k] for k in self._event_counters[partition_index]
        ]

        def active_subsystem(time: float) -> int:
            return subsystems[bisect.bisect_right(switches, time)]

        return active_subsystem

    def _check_updated(self) -> None:
        if self._partitioning_times is None:
            raise RuntimeError("update_logic_rules has to be called before using the machine")

    def _check_partition(self, partition_index: int) -> None:
        if not 0 <= partition_index < self.num_partitions:
            raise IndexError(
                f"Partition index {partition_index} out of range [0, {self.num_partitions})"
            )
