import numpy as np
import pytest

from trajopt_init.initialization import SystemOperatingPoint
from trajopt_init.logic import LogicRules, LogicRulesMachine


@pytest.fixture
def operating_point():
    return SystemOperatingPoint(np.array([1.0, 2.0]), np.array([5.0]))


@pytest.fixture
def switching_machine():
    # subsystem 0 -> 1 at t=0.5, 1 -> 2 at t=1.5, partitions [0, 1] and [1, 2]
    machine = LogicRulesMachine(LogicRules([0.5, 1.5], [0, 1, 2]))
    machine.update_logic_rules([0.0, 1.0, 2.0])
    return machine
