from preset_kit.services.preset_loader import (
    PresetParseError,
    aextract_from_file,
    aload_preset_file,
    extract_from_file,
    load_preset_file,
    parse_preset_json,
)
from preset_kit.services.preset_store import PresetStore

__all__ = [
    "PresetParseError",
    "aextract_from_file",
    "aload_preset_file",
    "extract_from_file",
    "load_preset_file",
    "parse_preset_json",
    "PresetStore",
]
