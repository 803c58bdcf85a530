import re

import pytest

from preset_kit.prompts.sanitizer import ContentSanitizer, sanitize

PLACEHOLDER = re.compile(r"\{\{[\s\S]*?\}\}")

TRICKY_INPUTS = [
    "",
    "plain instruction text",
    "Hi {{char}}, meet {{user}}.",
    "{{{x}}{y}}",
    "a{{b{{c}}d}}e",
    "{" + "{{x}}" + "{y}}",
    "`````x````",
    "``" + "```code```" + "`",
    "<think>a<think>b</think>c</think>",
    "<thinking>one</thinking>\n\n\n\n<START>two",
    "|user|{{// comment}}|assistant|",
    "\n\n\n   padded   \n\n\n",
    "<|im_start|>system\nBe terse.<|im_end|>",
    "{{" * 5 + "}}" * 5,
]


def test_removes_fenced_code_blocks():
    text = "Keep this.\n```js\nalert(1)\n```\nAnd this."
    assert sanitize(text) == "Keep this.\n\nAnd this."


def test_removes_thought_spans_case_insensitively():
    assert sanitize("Before <Thinking>secret plan</thinking> after") == "Before  after"
    assert sanitize("A<REASONING>x</Reasoning>B") == "AB"


def test_thought_tags_must_match_by_name():
    result = sanitize("<think>kept</thought>")
    assert result == "<think>kept</thought>"


def test_removes_comment_macros_and_placeholders():
    assert sanitize("Hello {{// authoring note}} world") == "Hello  world"
    assert sanitize("Hi {{char}}, meet {{user}}.") == "Hi , meet ."
    assert sanitize("{{setvar::mood::calm}}Stay calm.") == "Stay calm."


def test_removes_speaker_labels():
    assert sanitize("|user| hello |Assistant| hi") == "hello  hi"
    assert sanitize("<|user|>Question") == "Question"


def test_removes_sentinel_tokens_and_self_closing_tags():
    text = "<START>Line one<br/>Line two<br />three<|im_end|>"
    assert sanitize(text) == "Line oneLine twothree"
    assert sanitize("[Start a new chat]Go") == "Go"


def test_collapses_newlines_and_trims():
    assert sanitize("a\n\n\n\nb") == "a\n\nb"
    assert sanitize("  x  ") == "x"
    assert sanitize("a\n\nb") == "a\n\nb"


@pytest.mark.parametrize("value", [None, 123, [], {"a": 1}, ""])
def test_non_text_input_yields_empty_string(value):
    assert sanitize(value) == ""


@pytest.mark.parametrize("text", TRICKY_INPUTS)
def test_sanitize_is_idempotent(text):
    once = sanitize(text)
    assert sanitize(once) == once


@pytest.mark.parametrize("text", TRICKY_INPUTS)
def test_sanitize_never_grows_and_leaves_no_placeholders(text):
    out = sanitize(text)
    assert len(out) <= len(text)
    assert PLACEHOLDER.search(out) is None


def test_custom_steps_can_be_injected():
    only_fences = ContentSanitizer(steps=[("fence", re.compile(r"```[\s\S]*?```"))])
    assert only_fences.sanitize("{{kept}} ```x```") == "{{kept}}"
