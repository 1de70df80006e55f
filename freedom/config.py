import json
import os
from typing import Any, Dict, List, Mapping, Optional

from loguru import logger
from pydantic import BaseModel, Field, ValidationError, field_validator

ENV_PREFIX = "FREEDOM_"


class ConfigurationError(Exception):
    """Raised when the configuration file or environment cannot be loaded or parsed."""


class Settings(BaseModel):
    """Runtime settings for the HTTP service."""

    cors_origins: List[str] = Field(
        default_factory=lambda: [
            "http://localhost:3000",
            "http://localhost:5173",
            "http://127.0.0.1:3000",
            "http://127.0.0.1:5173",
        ],
        description="Origins allowed to call /api/*.",
    )
    log_level: str = Field("INFO", description="Minimum loguru level for the stderr sink.")
    host: str = "127.0.0.1"
    port: int = Field(5000, ge=1, le=65535)
    debug: bool = False

    @field_validator("cors_origins", mode="before")
    @classmethod
    def split_origins(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @field_validator("log_level")
    @classmethod
    def known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level {value!r}")
        return level


def load_config_from_json(file_path: str) -> Dict[str, Any]:
    """Loads and returns the configuration dictionary from a JSON file."""
    if not os.path.exists(file_path):
        raise ConfigurationError(f"Configuration file not found at: {file_path}")

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Error parsing JSON file '{file_path}': {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration file '{file_path}' must hold a JSON object")
    return data


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from an optional JSON file plus FREEDOM_* environment variables.

    FREEDOM_CONFIG_FILE names the JSON file; the other variables
    (FREEDOM_CORS_ORIGINS, FREEDOM_LOG_LEVEL, FREEDOM_HOST, FREEDOM_PORT,
    FREEDOM_DEBUG) override its keys.
    """
    environ = os.environ if environ is None else environ

    values: Dict[str, Any] = {}
    config_file = environ.get(f"{ENV_PREFIX}CONFIG_FILE")
    if config_file:
        logger.info(f"Loading configuration from: {config_file}")
        values.update(load_config_from_json(config_file))

    for field_name in Settings.model_fields:
        raw = environ.get(f"{ENV_PREFIX}{field_name.upper()}")
        if raw is not None:
            values[field_name] = raw

    try:
        return Settings.model_validate(values)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e
