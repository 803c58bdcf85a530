"""
Preset Extractor
================
Turns an untrusted preset document into a single instruction text.

Pipeline:
1. `prompts` entries, sorted by injection order, filtered by the selector,
   system role only
2. The top-level system prompt field
3. The top-level generic prompt field
4. Any other long top-level string that reads like instructions
5. Exact-duplicate removal, joined with blank lines
"""

import logging
import re
from typing import Any, Iterable, List, Mapping, Optional

from preset_kit.models.preset import PromptEntry
from preset_kit.prompts.patterns import (
    FRAGMENT_SEPARATOR,
    INSTRUCTION_KEYWORDS,
    MIN_FALLBACK_FIELD_LENGTH,
    MIN_FRAGMENT_LENGTH,
    PROMPT_KEYS,
    PROMPTS_KEY,
    SYSTEM_PROMPT_KEYS,
)
from preset_kit.prompts.sanitizer import ContentSanitizer
from preset_kit.prompts.selector import PromptSelector
from preset_kit.utils.accessors import get_list, get_str

logger = logging.getLogger(__name__)

_INSTRUCTION_WORDS = re.compile(
    "|".join(re.escape(w) for w in INSTRUCTION_KEYWORDS), re.IGNORECASE
)


def sort_by_injection_order(entries: Iterable[PromptEntry]) -> List[PromptEntry]:
    """Stable ascending sort; entries without an order go last."""
    return sorted(
        entries,
        key=lambda e: (0, e.injection_order) if e.injection_order is not None else (1, 0.0),
    )


def dedupe(fragments: Iterable[str]) -> List[str]:
    seen = set()
    unique = []
    for fragment in fragments:
        if fragment not in seen:
            seen.add(fragment)
            unique.append(fragment)
    return unique


class PresetExtractor:
    """Selects, cleans and joins the usable instruction fragments of a preset."""

    def __init__(
        self,
        sanitizer: Optional[ContentSanitizer] = None,
        selector: Optional[PromptSelector] = None,
    ):
        self.sanitizer = sanitizer or ContentSanitizer()
        self.selector = selector or PromptSelector()

    def _clean(self, text: Optional[str]) -> Optional[str]:
        if not text:
            return None
        cleaned = self.sanitizer.sanitize(text)
        return cleaned if len(cleaned) > MIN_FRAGMENT_LENGTH else None

    def _from_prompt_entries(self, document: Mapping[str, Any]) -> List[str]:
        raw_entries = get_list(document, PROMPTS_KEY)
        if raw_entries is None:
            return []

        fragments = []
        entries = sort_by_injection_order(PromptEntry.from_raw(raw) for raw in raw_entries)
        for entry in entries:
            if not self.selector.should_include(entry):
                continue
            if not entry.is_system:
                continue
            cleaned = self._clean(entry.content)
            if cleaned:
                fragments.append(cleaned)
        logger.debug(f"Kept {len(fragments)} of {len(raw_entries)} prompt entries")
        return fragments

    def _from_named_field(self, document: Mapping[str, Any], keys) -> List[str]:
        cleaned = self._clean(get_str(document, *keys))
        return [cleaned] if cleaned else []

    def _from_other_fields(self, document: Mapping[str, Any]) -> List[str]:
        consumed = {PROMPTS_KEY, *SYSTEM_PROMPT_KEYS, *PROMPT_KEYS}
        fragments = []
        for key, value in document.items():
            if key in consumed or not isinstance(value, str):
                continue
            if len(value) <= MIN_FALLBACK_FIELD_LENGTH:
                continue
            if not _INSTRUCTION_WORDS.search(value):
                continue
            cleaned = self._clean(value)
            if cleaned:
                logger.debug(f"Keeping fallback field '{key}'")
                fragments.append(cleaned)
        return fragments

    def extract(self, document: Any) -> str:
        if not isinstance(document, Mapping):
            logger.debug("Preset document is not an object; nothing to extract")
            return ""

        fragments: List[str] = []
        fragments.extend(self._from_prompt_entries(document))
        fragments.extend(self._from_named_field(document, SYSTEM_PROMPT_KEYS))
        fragments.extend(self._from_named_field(document, PROMPT_KEYS))
        fragments.extend(self._from_other_fields(document))

        unique = dedupe(fragments)
        if len(unique) != len(fragments):
            logger.debug(f"Dropped {len(fragments) - len(unique)} duplicate fragments")
        return FRAGMENT_SEPARATOR.join(unique)


_default_extractor = PresetExtractor()


def extract_preset(document: Any) -> str:
    """Extracts the instruction text from a parsed preset document."""
    return _default_extractor.extract(document)
