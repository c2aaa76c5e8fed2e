"""Configuration management for inputseq."""
import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator
from pydantic_settings import BaseSettings

_TRUTHY = {"1", "true", "yes", "on"}


class SequenceConfig(BaseModel):
    """Defaults applied to sequences built without explicit arguments."""
    debug_trace: bool = False
    auto_reset: bool = True
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value!r}")
        return level


class Config(BaseSettings):
    """Main configuration."""
    sequence: SequenceConfig = SequenceConfig()

    @classmethod
    def load(cls, env_path: Optional[Path] = None) -> "Config":
        """Load configuration from environment variables."""
        if env_path:
            load_dotenv(env_path)
        else:
            load_dotenv()

        return cls(
            sequence=SequenceConfig(
                debug_trace=_env_flag("INPUTSEQ_DEBUG_TRACE", False),
                auto_reset=_env_flag("INPUTSEQ_AUTO_RESET", True),
                log_level=os.getenv("INPUTSEQ_LOG_LEVEL", "INFO"),
            )
        )


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in _TRUTHY


# Global config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.load()
    return _config


def reset_config() -> None:
    """Drop the cached configuration so the next get_config() reloads it."""
    global _config
    _config = None
