"""
Content sanitizer for preset fragments.

Strips decorative and non-instructional substrings from a single text blob
through an ordered sequence of pattern removals.
"""

import re
from typing import Any, List, Pattern, Tuple

from preset_kit.prompts.patterns import (
    SELF_CLOSING_TAGS,
    SENTINEL_TOKENS,
    SPEAKER_LABELS,
    THOUGHT_TAGS,
)


def _alternation(words) -> str:
    return "|".join(re.escape(w) for w in words)


# Order matters: each step sees the output of the previous one
_REMOVAL_STEPS: List[Tuple[str, Pattern[str]]] = [
    ("code_fence", re.compile(r"```[\s\S]*?```")),
    (
        "thought_tag",
        re.compile(
            rf"<({_alternation(THOUGHT_TAGS)})\b[^>]*>[\s\S]*?</\1\s*>",
            re.IGNORECASE,
        ),
    ),
    # Narrower than the placeholder step below; kept separate so comment
    # handling can diverge from placeholder handling later
    ("comment_macro", re.compile(r"\{\{\s*//[\s\S]*?\}\}")),
    ("placeholder", re.compile(r"\{\{[\s\S]*?\}\}")),
    (
        "speaker_label",
        re.compile(rf"<?\|(?:{_alternation(SPEAKER_LABELS)})\|>?", re.IGNORECASE),
    ),
    (
        "sentinel",
        re.compile(
            rf"{_alternation(SENTINEL_TOKENS)}"
            rf"|<(?:{_alternation(SELF_CLOSING_TAGS)})\s*/?>",
            re.IGNORECASE,
        ),
    ),
]

_EXCESS_NEWLINES = re.compile(r"\n{3,}")


class ContentSanitizer:
    """Applies the removal steps until the text reaches a fixed point."""

    def __init__(self, steps: List[Tuple[str, Pattern[str]]] | None = None):
        self.steps = steps if steps is not None else _REMOVAL_STEPS

    def _apply_once(self, text: str) -> str:
        for _name, pattern in self.steps:
            text = pattern.sub("", text)
        text = _EXCESS_NEWLINES.sub("\n\n", text)
        return text.strip()

    def sanitize(self, text: Any) -> str:
        if not isinstance(text, str) or not text:
            return ""
        # A removal can splice two halves into a new match ("{" + "{{x}}" + "{y}}"),
        # so repeat until nothing changes. Every pass only deletes, so this ends.
        current = self._apply_once(text)
        while True:
            following = self._apply_once(current)
            if following == current:
                return current
            current = following


_default_sanitizer = ContentSanitizer()


def sanitize(text: Any) -> str:
    """Sanitizes `text` with the default removal steps. Never raises."""
    return _default_sanitizer.sanitize(text)
