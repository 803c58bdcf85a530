"""
Models for the auxiliary rule modules.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

# Degradation thresholds for the gated rule modules
DEGRADATION_THRESHOLD_A = 31
DEGRADATION_THRESHOLD_B = 65


class RuleCondition(str, Enum):
    """
    Gate on the degradation level. NONE means the rule is never gated.
    """

    NONE = "none"
    DEGRADATION_31 = "degradation31+"
    DEGRADATION_65 = "degradation65+"

    @property
    def threshold(self) -> Optional[int]:
        return _THRESHOLDS.get(self)

    def is_met(self, degradation: Optional[float]) -> bool:
        threshold = self.threshold
        if threshold is None:
            return True
        return degradation is not None and degradation >= threshold


_THRESHOLDS = {
    RuleCondition.DEGRADATION_31: DEGRADATION_THRESHOLD_A,
    RuleCondition.DEGRADATION_65: DEGRADATION_THRESHOLD_B,
}


@dataclass(frozen=True)
class RuleDefinition:
    key: str
    name: str
    content: str
    weight: int
    enabled: bool = True
    condition: RuleCondition = RuleCondition.NONE


class AssemblyOptions(BaseModel):
    """Caller-supplied parameters for rule assembly."""

    model_config = ConfigDict(populate_by_name=True)

    degradation: Optional[float] = Field(
        None, description="Current degradation level; None means unknown."
    )
    enabled_rules: Optional[List[str]] = Field(
        None,
        alias="enabledRules",
        description="Allow-list of rule keys. None means every rule is allowed.",
    )
    custom_rules: Optional[Dict[str, str]] = Field(
        None,
        alias="customRules",
        description="Per-key replacement content.",
    )
