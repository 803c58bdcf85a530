"""
Code-layer rules: fixed instruction blocks that do not depend on game state.
"""

from preset_kit.rules.content import (
    EMOTION_CLOTHING_RULES,
    GAMEPLAY_LOGIC_RULES,
    LOCATION_INTERACTION_RULES,
    RESPONSE_FORMAT_RULES,
    SOCIAL_MEDIA_RULES,
)

CODE_RULES = (
    LOCATION_INTERACTION_RULES,
    SOCIAL_MEDIA_RULES,
    GAMEPLAY_LOGIC_RULES,
    EMOTION_CLOTHING_RULES,
    RESPONSE_FORMAT_RULES,
)


def assemble_code_rules() -> str:
    return "\n\n".join(CODE_RULES)
