from preset_kit.prompts.extractor import PresetExtractor, extract_preset
from preset_kit.prompts.sanitizer import ContentSanitizer, sanitize
from preset_kit.prompts.selector import PromptSelector, should_include

__all__ = [
    "PresetExtractor",
    "extract_preset",
    "ContentSanitizer",
    "sanitize",
    "PromptSelector",
    "should_include",
]
