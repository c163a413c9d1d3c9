"""Build operating trajectories and logic rules machines from a config."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from trajopt_init.logic import LogicRules, LogicRulesMachine

from .interpolated_trajectories import InterpolatedOperatingTrajectories
from .mode_operating_points import ModeOperatingPoints
from .operating_point import SystemOperatingPoint

if TYPE_CHECKING:
    from ml_collections import ConfigDict

    from .base import SystemOperatingTrajectoriesBase


logger = logging.getLogger(__name__)


def make_operating_trajectories(config: ConfigDict) -> SystemOperatingTrajectoriesBase:
    """Create the operating trajectories selected by `config.operating_trajectories.type`.

    Args:
        config: Configuration with a `dims` and an `operating_trajectories` section.

    Returns:
        One of `SystemOperatingPoint`, `ModeOperatingPoints` or `InterpolatedOperatingTrajectories`.
    """
    state_dim = config.dims.state_dim
    input_dim = config.dims.input_dim
    section = config.operating_trajectories
    kind = section.type
    logger.debug(f"Creating operating trajectories of type '{kind}'")

    if kind == "operating_point":
        return SystemOperatingPoint(
            section.get("state"), section.get("input"), state_dim=state_dim, input_dim=input_dim
        )
    if kind == "mode_operating_points":
        operating_points = {
            int(mode["subsystem"]): SystemOperatingPoint(
                mode.get("state"), mode.get("input"), state_dim=state_dim, input_dim=input_dim
            )
            for mode in section.modes
        }
        return ModeOperatingPoints(operating_points)
    if kind == "interpolated":
        trajectories = InterpolatedOperatingTrajectories(section.time, section.state, section.input)
        if (trajectories.state_dim, trajectories.input_dim) != (state_dim, input_dim):
            raise ValueError(
                f"Interpolated trajectories have dimensions ({trajectories.state_dim}, "
                f"{trajectories.input_dim}), expected ({state_dim}, {input_dim})"
            )
        return trajectories
    raise ValueError(f"Unknown operating trajectories type: '{kind}'")


def make_logic_rules_machine(config: ConfigDict) -> LogicRulesMachine:
    """Create a logic rules machine updated with `config.partitioning_times`.

    Without a `logic_rules` section the machine uses null logic rules.
    """
    rules = config.get("logic_rules")
    if rules is None:
        machine = LogicRulesMachine()
    else:
        machine = LogicRulesMachine(
            LogicRules(rules.get("switching_times", ()), rules.get("subsystems_sequence"))
        )
    machine.update_logic_rules(config.partitioning_times)
    return machine
