from dataclasses import dataclass
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from preset_kit.utils.accessors import get_bool, get_number, get_str


@dataclass(frozen=True)
class PromptEntry:
    """
    One candidate instruction fragment from a preset's `prompts` list.

    Built only through `from_raw`, which never raises: missing or mistyped
    fields become None (or the field default).
    """

    identifier: Optional[str] = None
    name: Optional[str] = None
    enabled: bool = True
    role: Optional[str] = None
    content: Optional[str] = None
    is_system_prompt: bool = False
    is_marker: bool = False
    injection_order: Optional[float] = None

    @classmethod
    def from_raw(cls, raw: Any) -> "PromptEntry":
        # Both the camelCase export names and the SillyTavern spellings are accepted
        return cls(
            identifier=get_str(raw, "identifier"),
            name=get_str(raw, "name"),
            enabled=get_bool(raw, "enabled", default=True),
            role=get_str(raw, "role"),
            content=get_str(raw, "content"),
            is_system_prompt=get_bool(raw, "isSystemPrompt", "system_prompt", default=False),
            is_marker=get_bool(raw, "isMarker", "marker", default=False),
            injection_order=get_number(raw, "injectionOrder", "injection_order"),
        )

    @property
    def is_system(self) -> bool:
        return self.role == "system" or self.is_system_prompt


class PresetConfig(BaseModel):
    """Sampling parameters stored under a preset name."""

    model_config = ConfigDict(extra="allow")

    name: str
    temperature: Optional[float] = Field(None, ge=0.0)
    top_p: Optional[float] = Field(None, ge=0.0, le=1.0)
    max_tokens: Optional[int] = Field(None, ge=1)
    frequency_penalty: Optional[float] = None
    presence_penalty: Optional[float] = None


DEFAULT_PRESET_NAME = "default"

DEFAULT_PRESET = PresetConfig(
    name=DEFAULT_PRESET_NAME,
    temperature=0.9,
    top_p=0.95,
    max_tokens=2000,
    frequency_penalty=0.3,
    presence_penalty=0.3,
)
