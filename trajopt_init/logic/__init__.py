from .logic_rules import LogicRules, NullLogicRules
from .logic_rules_machine import LogicRulesMachine

__all__ = ["LogicRules", "NullLogicRules", "LogicRulesMachine"]
