from __future__ import annotations

from typing import Sequence

import numpy as np


class LogicRules:
    """Switching times and the sequence of subsystems they separate.

    Subsystem ``subsystems_sequence[k]`` is active on
    ``[switching_times[k-1], switching_times[k])``, so a switch at time ``ts``
    activates the next subsystem for every ``t >= ts``.
    """

    def __init__(
        self,
        switching_times: Sequence[float] = (),
        subsystems_sequence: Sequence[int] | None = None,
    ):
        self.switching_times = [float(t) for t in switching_times]
        if subsystems_sequence is None:
            subsystems_sequence = range(len(self.switching_times) + 1)
        self.subsystems_sequence = [int(s) for s in subsystems_sequence]

        if np.any(np.diff(self.switching_times) < 0):
            raise ValueError(f"Switching times must be non-decreasing: {self.switching_times}")
        if len(self.subsystems_sequence) != len(self.switching_times) + 1:
            raise ValueError(
                f"Expected {len(self.switching_times) + 1} subsystems for "
                f"{len(self.switching_times)} switching times, got {len(self.subsystems_sequence)}"
            )

    @property
    def num_subsystems(self) -> int:
        return len(self.subsystems_sequence)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(switching_times={self.switching_times}, "
            f"subsystems_sequence={self.subsystems_sequence})"
        )


class NullLogicRules(LogicRules):
    """Logic rules without any switch; subsystem 0 is always active."""

    def __init__(self):
        super().__init__((), (0,))
