"""
Declarative tables used by the sanitizer, the selector and the extractor.

Extend these tuples to teach the pipeline about new authoring-tool markup;
the control flow does not need to change.
"""

# --- SANITIZER ---

# Tags whose whole span (tags included) is model-internal reasoning
THOUGHT_TAGS = (
    "thinking",
    "think",
    "thought",
    "reasoning",
    "inner_monologue",
    "internal",
)

# Labels written as |label| (optionally <|label|>) in dialogue-format templates
SPEAKER_LABELS = (
    "user",
    "assistant",
    "system",
    "char",
    "model",
    "human",
)

# Structural separators emitted by the authoring tool
SENTINEL_TOKENS = (
    "<START>",
    "<END>",
    "<|im_start|>",
    "<|im_end|>",
    "<|endoftext|>",
    "[Start a new chat]",
    "[Example Chat]",
)

# Self-closing tags, matched case-insensitively with optional inner space
SELF_CLOSING_TAGS = (
    "br",
    "hr",
)

# --- SELECTOR ---

# Identifiers of preset entries that never carry instructions: character and
# persona slots, scenario, chat history, definitions, version and config blocks
EXCLUDED_IDENTIFIERS = frozenset(
    {
        "charDescription",
        "charPersonality",
        "personaDescription",
        "scenario",
        "chatHistory",
        "dialogueExamples",
        "enhanceDefinitions",
        "worldInfoBefore",
        "worldInfoAfter",
        "versionInfo",
        "presetVersion",
        "configBlock",
        "settings",
    }
)

# Markers inside a fenced block that identify decorative HTML/CSS/JS
MARKUP_SIGNALS = (
    r"<!doctype\s+html",
    r"<html\b",
    r"<script\b",
    r"<style\b",
)

# Content longer than this is checked against the program-code heuristic
CODE_LENGTH_THRESHOLD = 2000

# Keywords typical of imperative code (JS-flavored, as produced by preset scripts)
CODE_KEYWORDS = (
    r"\bfunction\s*\(",
    r"\bfunction\s+\w+\s*\(",
    r"\bconst\s+\w+\s*=",
    r"\blet\s+\w+\s*=",
    r"\bvar\s+\w+\s*=",
    r"\breturn\b[^\n]*;",
    r"=>\s*\{",
    r"\bdocument\.\w+",
    r"\bconsole\.log\s*\(",
)

# --- EXTRACTOR ---

# Minimum length a sanitized fragment must exceed to be kept
MIN_FRAGMENT_LENGTH = 10

# Minimum length for a generic top-level string field to be considered at all
MIN_FALLBACK_FIELD_LENGTH = 50

# Top-level keys holding the single system prompt
SYSTEM_PROMPT_KEYS = ("system_prompt", "systemPrompt")

# Top-level keys holding a generic prompt
PROMPT_KEYS = ("prompt",)

# Key holding the list of prompt entries
PROMPTS_KEY = "prompts"

# Words suggesting a stray string field is instructional (English and Chinese)
INSTRUCTION_KEYWORDS = (
    "role",
    "personality",
    "scenario",
    "dialogue",
    "reply",
    "description",
    "rule",
    "instruction",
    "角色",
    "性格",
    "场景",
    "对话",
    "回复",
    "描述",
    "规则",
    "指令",
)

FRAGMENT_SEPARATOR = "\n\n"
