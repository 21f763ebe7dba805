"""Configuration management for the transcript server."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional
from functools import lru_cache
from dotenv import load_dotenv

# Load environment variables from .env file
env_path = Path('.env')
if env_path.exists():
    load_dotenv(dotenv_path=env_path)

VARIANT_FULL = "full"
VARIANT_MINIMAL = "minimal"
VARIANTS = (VARIANT_FULL, VARIANT_MINIMAL)


def _env(name: str, default: str) -> str:
    return os.getenv(name, default)


@dataclass
class APIConfig:
    """API configuration settings."""

    # Core API settings
    host: str = field(default_factory=lambda: _env("API_HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT") or _env("API_PORT", "3002")))
    debug: bool = field(default_factory=lambda: _env("API_DEBUG", "false").lower() == "true")

    # Which deployable surface to expose
    variant: str = field(default_factory=lambda: _env("API_VARIANT", VARIANT_FULL).lower())

    # Language fallback policy
    default_language: str = field(default_factory=lambda: _env("API_DEFAULT_LANGUAGE", "en"))
    secondary_language: str = field(default_factory=lambda: _env("API_SECONDARY_LANGUAGE", "pl"))

    # CORS settings
    cors_origins: List[str] = None

    # Application metadata
    title: str = field(default_factory=lambda: _env("API_TITLE", "YouTube Transcript API"))
    description: str = "Fetch YouTube captions as plain text or timestamped segments"
    version: str = field(default_factory=lambda: _env("APP_VERSION", "1.0.0"))

    # Environment
    environment: str = field(default_factory=lambda: _env("ENVIRONMENT", "development"))

    # Logging
    log_level: str = field(default_factory=lambda: _env("API_LOG_LEVEL", "INFO"))
    logger_name: str = "transcript_server"

    def __post_init__(self):
        """Post-initialization processing."""
        if self.cors_origins is None:
            origins_str = os.getenv("API_CORS_ORIGINS", "*")
            self.cors_origins = [origin.strip() for origin in origins_str.split(",") if origin.strip()]

    @property
    def is_full(self) -> bool:
        return self.variant == VARIANT_FULL

    def validate(self) -> List[str]:
        """Validate configuration and return list of errors."""
        errors = []

        if self.port < 1 or self.port > 65535:
            errors.append("API_PORT must be between 1 and 65535")

        if self.variant not in VARIANTS:
            errors.append(f"API_VARIANT must be one of: {', '.join(VARIANTS)}")

        if not self.default_language:
            errors.append("API_DEFAULT_LANGUAGE must not be empty")

        if not self.secondary_language:
            errors.append("API_SECONDARY_LANGUAGE must not be empty")

        return errors


def load_config(config: Optional[APIConfig] = None) -> APIConfig:
    """Validate a configuration, raising ``ValueError`` listing every problem."""
    config = config or APIConfig()
    errors = config.validate()
    if errors:
        raise ValueError(f"Configuration errors: {', '.join(errors)}")
    return config


@lru_cache()
def get_api_config() -> APIConfig:
    """Get validated API configuration."""
    return load_config()
