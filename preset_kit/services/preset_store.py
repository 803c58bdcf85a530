import json
import logging
from typing import Dict, List

from pydantic import ValidationError

from preset_kit.models.preset import DEFAULT_PRESET, DEFAULT_PRESET_NAME, PresetConfig
from preset_kit.services.preset_loader import PresetParseError, parse_preset_json

logger = logging.getLogger(__name__)


class PresetStore:
    """
    In-memory registry of named sampling presets.
    The default preset always exists and cannot be deleted.
    """

    def __init__(self):
        self._presets: Dict[str, PresetConfig] = {}
        self.reset_to_default()

    def get_preset(self, name: str = DEFAULT_PRESET_NAME) -> PresetConfig:
        """Copy of the named preset, or of the default one if unknown."""
        preset = self._presets.get(name)
        if preset is None:
            return DEFAULT_PRESET.model_copy(deep=True)
        return preset.model_copy(deep=True)

    def save_preset(self, preset: PresetConfig):
        self._presets[preset.name] = preset.model_copy(deep=True)
        logger.info(f"Saved preset: {preset.name}")

    def delete_preset(self, name: str) -> bool:
        if name == DEFAULT_PRESET_NAME:
            logger.warning("The default preset cannot be deleted")
            return False
        if name not in self._presets:
            return False
        del self._presets[name]
        logger.info(f"Deleted preset: {name}")
        return True

    def list_names(self) -> List[str]:
        return list(self._presets.keys())

    def get_all(self) -> Dict[str, PresetConfig]:
        return {name: p.model_copy(deep=True) for name, p in self._presets.items()}

    def export_json(self) -> str:
        return json.dumps(
            {name: p.model_dump(exclude_none=True) for name, p in self._presets.items()},
            indent=2,
            ensure_ascii=False,
        )

    def import_json(self, text: str):
        """Merges presets from an `export_json` document; existing names are replaced."""
        data = parse_preset_json(text, source="import")
        if not isinstance(data, dict):
            raise PresetParseError("Preset import must be a JSON object keyed by preset name")

        imported = {}
        for name, raw in data.items():
            if not isinstance(raw, dict):
                raise PresetParseError(f"Preset '{name}' must be a JSON object")
            try:
                imported[name] = PresetConfig(**{**raw, "name": name})
            except ValidationError as e:
                raise PresetParseError(f"Preset '{name}' is invalid: {e}") from e

        self._presets.update(imported)
        logger.info(f"Imported {len(imported)} presets")

    def reset_to_default(self):
        self._presets = {DEFAULT_PRESET_NAME: DEFAULT_PRESET.model_copy(deep=True)}
