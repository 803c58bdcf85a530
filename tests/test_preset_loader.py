import asyncio
import json

import pytest

from preset_kit.services.preset_loader import (
    PresetParseError,
    aextract_from_file,
    aload_preset_file,
    extract_from_file,
    load_preset_file,
    parse_preset_json,
)


@pytest.fixture
def preset_file(tmp_path):
    path = tmp_path / "preset.json"
    path.write_text(
        json.dumps(
            {
                "temperature": 0.9,
                "prompts": [
                    {"identifier": "main", "role": "system", "content": "Stay in character at all times.", "injection_order": 2},
                    {"identifier": "styleGuide", "role": "system", "content": "Keep descriptions tasteful.", "injection_order": 1},
                    {"identifier": "chatHistory", "marker": True},
                ],
            },
            ensure_ascii=False,
        ),
        encoding="utf-8",
    )
    return path


def test_load_and_extract_from_file(preset_file):
    assert load_preset_file(preset_file)["temperature"] == 0.9
    assert extract_from_file(preset_file) == "Keep descriptions tasteful.\n\nStay in character at all times."


def test_async_variants_match_sync(preset_file):
    assert asyncio.run(aload_preset_file(preset_file)) == load_preset_file(preset_file)
    assert asyncio.run(aextract_from_file(str(preset_file))) == extract_from_file(preset_file)


def test_invalid_json_is_wrapped_with_source(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text('{"prompts": [', encoding="utf-8")
    with pytest.raises(PresetParseError, match="broken.json") as exc_info:
        load_preset_file(path)
    assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)
    assert isinstance(exc_info.value, ValueError)


def test_missing_file_is_wrapped(tmp_path):
    with pytest.raises(PresetParseError, match="Could not read") as exc_info:
        load_preset_file(tmp_path / "nope.json")
    assert isinstance(exc_info.value.__cause__, OSError)


def test_async_loader_wraps_parse_errors(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("not json", encoding="utf-8")
    with pytest.raises(PresetParseError):
        asyncio.run(aload_preset_file(path))


def test_parse_preset_json_returns_any_json_value():
    assert parse_preset_json("[1, 2]") == [1, 2]
    with pytest.raises(PresetParseError, match="<string>"):
        parse_preset_json("")
