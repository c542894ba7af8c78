"""
Configuration settings - Infrastructure component for managing application configuration.
Uses Pydantic for validation and environment variable loading.
"""

from __future__ import annotations
import math
from datetime import timedelta
from typing import Any, Dict, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ...domain.timeouts import TimeoutPreset


class Settings(BaseSettings):
    """Ollama connection and timeout configuration."""

    model_config = SettingsConfigDict(
        env_file='.env',
        case_sensitive=False,
        extra='ignore',
        populate_by_name=True,
    )

    host: str = Field('http://localhost:11434', validation_alias='OLLAMA_HOST')
    model: str = Field('llama3.2', validation_alias='OLLAMA_MODEL')

    # Explicit seconds win over the named preset
    timeout_s: Optional[float] = Field(None, validation_alias='OLLAMA_TIMEOUT_S')
    timeout_preset: Optional[str] = Field(None, validation_alias='OLLAMA_TIMEOUT_PRESET')

    # Logging
    log_level: str = Field('INFO', validation_alias='LOG_LEVEL')

    @field_validator('timeout_s', mode='before')
    @classmethod
    def validate_timeout_s(cls, v: Any) -> Any:
        """Blank means unset; anything else must be a positive, finite number."""
        if v is None or (isinstance(v, str) and not v.strip()):
            return None
        seconds = float(v)
        if not math.isfinite(seconds) or seconds <= 0:
            raise ValueError('OLLAMA_TIMEOUT_S must be greater than zero')
        return seconds

    @field_validator('timeout_preset', mode='before')
    @classmethod
    def validate_timeout_preset(cls, v: Any) -> Any:
        if v is None or (isinstance(v, str) and not v.strip()):
            return None
        return TimeoutPreset.from_name(v).value

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            return 'INFO'
        return v.upper()

    def resolved_timeout(self) -> Optional[timedelta]:
        """Timeout to apply to new clients, or None for the ollama default."""
        if self.timeout_s is not None:
            return timedelta(seconds=self.timeout_s)
        if self.timeout_preset is not None:
            return TimeoutPreset.from_name(self.timeout_preset).duration
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary for serialization."""
        return self.model_dump()


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get global settings instance (singleton pattern)."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reload_settings() -> Settings:
    """Reload settings from environment (for testing)."""
    global _settings
    _settings = Settings()
    return _settings
