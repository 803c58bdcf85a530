from preset_kit.models.preset import DEFAULT_PRESET, DEFAULT_PRESET_NAME, PresetConfig, PromptEntry
from preset_kit.models.rule import (
    DEGRADATION_THRESHOLD_A,
    DEGRADATION_THRESHOLD_B,
    AssemblyOptions,
    RuleCondition,
    RuleDefinition,
)

__all__ = [
    "DEFAULT_PRESET",
    "DEFAULT_PRESET_NAME",
    "PresetConfig",
    "PromptEntry",
    "DEGRADATION_THRESHOLD_A",
    "DEGRADATION_THRESHOLD_B",
    "AssemblyOptions",
    "RuleCondition",
    "RuleDefinition",
]
