"""Operating trajectories for initializing trajectory optimization solvers."""

from trajopt_init.initialization import (
    InterpolatedOperatingTrajectories,
    ModeOperatingPoints,
    SystemOperatingPoint,
    SystemOperatingTrajectoriesBase,
)
from trajopt_init.logic import LogicRules, LogicRulesMachine, NullLogicRules

__all__ = [
    "SystemOperatingTrajectoriesBase",
    "SystemOperatingPoint",
    "ModeOperatingPoints",
    "InterpolatedOperatingTrajectories",
    "LogicRules",
    "NullLogicRules",
    "LogicRulesMachine",
]
