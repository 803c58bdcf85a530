"""
Parse boundary for preset documents.

This is the only place in the pipeline that can fail: malformed JSON or an
unreadable file is re-raised as PresetParseError with a readable message.
"""

import asyncio
import json
import logging
from pathlib import Path
from typing import Any

from preset_kit.prompts.extractor import extract_preset

logger = logging.getLogger(__name__)


class PresetParseError(ValueError):
    pass


def parse_preset_json(text: str, source: str = "<string>") -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise PresetParseError(
            f"Preset {source} is not valid JSON (line {e.lineno}, column {e.colno}): {e.msg}"
        ) from e


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise PresetParseError(f"Could not read preset file {path}: {e}") from e


def load_preset_file(path: str | Path) -> Any:
    path = Path(path)
    logger.info(f"Loading preset file: {path}")
    return parse_preset_json(_read_text(path), source=str(path))


async def aload_preset_file(path: str | Path) -> Any:
    """Async variant of `load_preset_file`; the read runs in a worker thread."""
    path = Path(path)
    logger.info(f"Loading preset file: {path}")
    text = await asyncio.to_thread(_read_text, path)
    return parse_preset_json(text, source=str(path))


def extract_from_file(path: str | Path) -> str:
    return extract_preset(load_preset_file(path))


async def aextract_from_file(path: str | Path) -> str:
    return extract_preset(await aload_preset_file(path))
