"""App settings: commentary connection, voice behaviour, point of view.

get_settings() layers three sources, later ones winning:
  1. defaults (the Settings field defaults)
  2. stored values from state.json
  3. INLAND_EMPIRE_* environment variables (loaded from .env by python-dotenv)

update_settings() applies a partial merge and re-validates the whole model, so
a bad field leaves the current settings untouched.
"""

from __future__ import annotations

import os
from typing import Any, Literal

from pydantic import BaseModel, Field, model_validator

PovStyle = Literal["second", "third", "first"]
Pronouns = Literal["they", "he", "she", "it"]
ProviderFormat = Literal["openai", "koboldcpp"]

# env var → settings field
ENV_OVERRIDES: dict[str, str] = {
    "INLAND_EMPIRE_API_ENDPOINT": "api_endpoint",
    "INLAND_EMPIRE_API_KEY": "api_key",
    "INLAND_EMPIRE_MODEL": "model",
}


class Settings(BaseModel):
    enabled: bool = True
    show_dice_rolls: bool = True
    show_failed_checks: bool = True
    auto_detect_status: bool = True

    min_voices: int = Field(1, ge=0, le=6)
    max_voices: int = Field(4, ge=0, le=10)

    # commentary service
    api_endpoint: str = ""
    api_key: str = ""
    provider_format: ProviderFormat = "openai"
    model: str = "glm-4-plus"
    max_tokens: int = Field(300, ge=50, le=1000)
    temperature: float = Field(0.9, ge=0.0, le=2.0)
    timeout: float = Field(120.0, gt=0)

    # point of view
    pov_style: PovStyle = "second"
    character_name: str = ""
    character_pronouns: Pronouns = "they"
    character_context: str = ""

    @model_validator(mode="after")
    def _voice_range(self) -> Settings:
        if self.max_voices < self.min_voices:
            raise ValueError(
                f"max_voices ({self.max_voices}) must be >= min_voices ({self.min_voices})"
            )
        return self


def env_overrides() -> dict[str, Any]:
    return {
        field: os.environ[var]
        for var, field in ENV_OVERRIDES.items()
        if os.environ.get(var)
    }


def get_settings(stored: dict[str, Any] | None = None) -> Settings:
    """Defaults merged with stored values, then environment overrides."""
    merged: dict[str, Any] = {}
    for key, value in (stored or {}).items():
        if key in Settings.model_fields:
            merged[key] = value
    merged.update(env_overrides())
    return Settings.model_validate(merged)


def update_settings(current: Settings, fields: dict[str, Any]) -> Settings:
    """Return a new Settings with `fields` merged in. Unknown keys are ignored."""
    data = current.model_dump()
    for key, value in fields.items():
        if key in Settings.model_fields:
            data[key] = value
    return Settings.model_validate(data)
