import logging
import re
from typing import Optional

from preset_kit.models.preset import PromptEntry
from preset_kit.prompts.patterns import (
    CODE_KEYWORDS,
    CODE_LENGTH_THRESHOLD,
    EXCLUDED_IDENTIFIERS,
    MARKUP_SIGNALS,
)

logger = logging.getLogger(__name__)

_FENCED_BLOCK = re.compile(r"```([\s\S]*?)```")
_MARKUP = re.compile("|".join(MARKUP_SIGNALS), re.IGNORECASE)
_CODE = re.compile("|".join(CODE_KEYWORDS))


def has_decorative_markup(content: str) -> bool:
    """True when any fenced block in `content` carries HTML/CSS/JS markup."""
    return any(_MARKUP.search(m.group(1)) for m in _FENCED_BLOCK.finditer(content))


def looks_like_code(content: str) -> bool:
    return len(content) > CODE_LENGTH_THRESHOLD and bool(_CODE.search(content))


class PromptSelector:
    """
    Heuristic filter deciding whether a preset entry belongs in the output.
    The first matching rule wins.
    """

    def __init__(self, excluded_identifiers: Optional[frozenset] = None):
        self.excluded_identifiers = (
            excluded_identifiers if excluded_identifiers is not None else EXCLUDED_IDENTIFIERS
        )

    def rejection_reason(self, entry: PromptEntry) -> Optional[str]:
        """Returns why `entry` is excluded, or None when it is usable."""
        if entry.enabled is False:
            return "disabled"
        if entry.is_marker:
            return "marker"
        if entry.identifier is not None and entry.identifier in self.excluded_identifiers:
            return "excluded_identifier"
        if entry.content:
            if has_decorative_markup(entry.content):
                return "decorative_markup"
            if looks_like_code(entry.content):
                return "program_code"
        return None

    def should_include(self, entry: PromptEntry) -> bool:
        reason = self.rejection_reason(entry)
        if reason:
            logger.debug(f"Skipping prompt '{entry.identifier or entry.name}': {reason}")
            return False
        return True


_default_selector = PromptSelector()


def should_include(entry: PromptEntry) -> bool:
    return _default_selector.should_include(entry)
