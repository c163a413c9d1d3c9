from .base import SystemOperatingTrajectoriesBase
from .operating_point import SystemOperatingPoint
from .mode_operating_points import ModeOperatingPoints
from .interpolated_trajectories import InterpolatedOperatingTrajectories
from .horizon import operating_trajectories_over_horizon
from .factory import make_logic_rules_machine, make_operating_trajectories

__all__ = [
    "SystemOperatingTrajectoriesBase",
    "SystemOperatingPoint",
    "ModeOperatingPoints",
    "InterpolatedOperatingTrajectories",
    "operating_trajectories_over_horizon",
    "make_logic_rules_machine",
    "make_operating_trajectories",
]
