"""
Rule Catalog
============
The fixed list of auxiliary rule modules, built once at import time.
"""

from typing import Iterable, Tuple

from preset_kit.models.rule import RuleCondition, RuleDefinition
from preset_kit.rules.content import (
    CHARACTER_DEVELOPMENT_RULES,
    DISTANT_ATTITUDE_RULES,
    ESTRANGEMENT_RULES,
    INTERACTION_RULES,
    TIME_RULES,
)

# Relative priority in the assembled output (higher first)
RULE_WEIGHTS = {
    "characterDevelopment": 7,
    "time": 6,
    "interaction": 5,
    "distantAttitude": 4,
    "estrangement": 3,
}


class RuleCatalog:
    """Immutable, ordered collection of rule definitions with unique keys."""

    def __init__(self, rules: Iterable[RuleDefinition]):
        rules = tuple(rules)
        seen = set()
        for rule in rules:
            if rule.key in seen:
                raise ValueError(f"Duplicate rule key in catalog: {rule.key}")
            seen.add(rule.key)
        self._rules: Tuple[RuleDefinition, ...] = rules

    def list_all(self) -> Tuple[RuleDefinition, ...]:
        return self._rules

    def keys(self) -> Tuple[str, ...]:
        return tuple(r.key for r in self._rules)


DEFAULT_CATALOG = RuleCatalog(
    [
        RuleDefinition(
            key="characterDevelopment",
            name="Character Development",
            content=CHARACTER_DEVELOPMENT_RULES,
            weight=RULE_WEIGHTS["characterDevelopment"],
        ),
        RuleDefinition(
            key="time",
            name="Time System",
            content=TIME_RULES,
            weight=RULE_WEIGHTS["time"],
        ),
        RuleDefinition(
            key="interaction",
            name="Interaction Rules",
            content=INTERACTION_RULES,
            weight=RULE_WEIGHTS["interaction"],
        ),
        RuleDefinition(
            key="distantAttitude",
            name="Distant Attitude",
            content=DISTANT_ATTITUDE_RULES,
            weight=RULE_WEIGHTS["distantAttitude"],
            condition=RuleCondition.DEGRADATION_31,
        ),
        RuleDefinition(
            key="estrangement",
            name="Estrangement",
            content=ESTRANGEMENT_RULES,
            weight=RULE_WEIGHTS["estrangement"],
            condition=RuleCondition.DEGRADATION_65,
        ),
    ]
)
