"""Configuration management for Orchestra actors.

Loads and validates environment variables using Pydantic settings.
"""

from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings

from notation.markings import Dynamic, KeySignature
from orchestra.exceptions import ConfigurationError


class OrchestraConfig(BaseSettings):
    """Orchestra actor configuration loaded from environment variables."""

    # Runtime settings
    env: Literal["development", "production", "test"] = Field(
        default="development", alias="ORCHESTRA_ENV"
    )
    backend: Literal["simulated", "live"] = Field(
        default="simulated", alias="ORCHESTRA_BACKEND"
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", alias="ORCHESTRA_LOG_LEVEL"
    )

    # Performance defaults
    tempo: int = Field(default=120, alias="ORCHESTRA_TEMPO", ge=40, le=240)
    dynamic: Literal["pp", "p", "mf", "f", "ff"] = Field(
        default="mf", alias="ORCHESTRA_DYNAMIC"
    )
    key: Literal["C", "G", "F", "D", "Bb"] = Field(default="C", alias="ORCHESTRA_KEY")

    # Radio hub
    hub_host: str = Field(default="0.0.0.0", alias="ORCHESTRA_HUB_HOST")
    hub_port: int = Field(default=8765, alias="ORCHESTRA_HUB_PORT", ge=1024, le=65535)
    hub_url: str = Field(
        default="ws://127.0.0.1:8765/ws/radio", alias="ORCHESTRA_HUB_URL"
    )
    radio_group: int = Field(default=0, alias="ORCHESTRA_RADIO_GROUP", ge=0, le=255)

    # FluidSynth tone output
    soundfont: Path = Field(
        default=Path("soundfonts/FluidR3_GM.sf2"), alias="ORCHESTRA_SOUNDFONT"
    )
    program: int = Field(default=73, alias="ORCHESTRA_PROGRAM", ge=0, le=127)
    audio_driver: Optional[str] = Field(default=None, alias="ORCHESTRA_AUDIO_DRIVER")

    @field_validator("hub_url")
    @classmethod
    def validate_hub_url(cls, v: str) -> str:
        """Validate that the hub URL uses a WebSocket scheme."""
        if not v.startswith(("ws://", "wss://")):
            raise ValueError(f"Hub URL must start with ws:// or wss://, got {v}")
        return v

    @property
    def default_dynamic(self) -> Dynamic:
        return Dynamic.from_marking(self.dynamic)

    @property
    def default_key(self) -> KeySignature:
        return KeySignature[self.key]

    class Config:
        """Pydantic configuration."""

        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


# Singleton configuration instance
_config: OrchestraConfig | None = None


def get_config() -> OrchestraConfig:
    """Get the global configuration instance.

    Returns:
        OrchestraConfig: Configuration singleton

    Raises:
        ConfigurationError: If an environment variable fails validation
    """
    global _config
    if _config is None:
        try:
            _config = OrchestraConfig()
        except ValidationError as e:
            raise ConfigurationError(f"Invalid Orchestra configuration: {e}") from e
    return _config


def reset_config() -> None:
    """Drop the cached configuration so the next get_config() reloads it."""
    global _config
    _config = None
