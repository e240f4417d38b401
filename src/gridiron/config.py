"""Application settings with file and environment overrides."""

import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml


DEFAULT_BASE_URL = "https://nfl-fpl-backend.onrender.com"

# Default cache directory
CACHE_DIR = Path(__file__).parent.parent.parent / "data" / "cache"

# Settings file used when GRIDIRON_CONFIG is not set
SETTINGS_FILE = CACHE_DIR.parent / "settings.yaml"
CONFIG_ENV_VAR = "GRIDIRON_CONFIG"

# Environment variable -> settings field
ENV_VARS = {
    "GRIDIRON_BASE_URL": "base_url",
    "GRIDIRON_TIMEOUT": "timeout_seconds",
    "GRIDIRON_CACHE_TTL": "cache_ttl_minutes",
    "GRIDIRON_CACHE_DIR": "cache_dir",
    "GRIDIRON_LOG_LEVEL": "log_level",
    "GRIDIRON_LOG_JSON": "log_json",
}

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class ConfigError(Exception):
    """Raised when a setting has an invalid value."""

    pass


@dataclass(frozen=True)
class Settings:
    """
    Runtime settings.

    Attributes:
        base_url: Root URL of the fantasy service.
        timeout_seconds: Per-request timeout.
        cache_ttl_minutes: Lifetime of cached GET responses (0 disables).
        cache_dir: Directory for cached responses.
        log_level: Standard logging level name.
        log_json: Render logs as JSON instead of console output.
    """

    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = 30.0
    cache_ttl_minutes: int = 10
    cache_dir: Path = CACHE_DIR
    log_level: str = "INFO"
    log_json: bool = False

    def __post_init__(self) -> None:
        if not self.base_url.startswith(("http://", "https://")):
            raise ConfigError(f"base_url must be an http(s) URL: {self.base_url}")
        if self.timeout_seconds <= 0:
            raise ConfigError("timeout_seconds must be positive")
        if self.cache_ttl_minutes < 0:
            raise ConfigError("cache_ttl_minutes cannot be negative")
        if self.log_level.upper() not in LOG_LEVELS:
            raise ConfigError(f"Unknown log level: {self.log_level}")


def _coerce(name: str, value: Any) -> Any:
    """Convert a raw file/env value to the type of the named field."""
    try:
        if name == "timeout_seconds":
            return float(value)
        if name == "cache_ttl_minutes":
            return int(value)
        if name == "cache_dir":
            return Path(value)
        if name == "log_json":
            if isinstance(value, bool):
                return value
            return str(value).strip().lower() in {"1", "true", "yes", "on"}
        if name == "base_url":
            return str(value).rstrip("/")
        return str(value)
    except (TypeError, ValueError):
        raise ConfigError(f"Invalid value for {name}: {value!r}")


def _apply(settings: Settings, overrides: Mapping[str, Any]) -> Settings:
    known = {f.name for f in fields(Settings)}
    changes = {}
    for name, value in overrides.items():
        if name not in known:
            raise ConfigError(f"Unknown setting: {name}")
        changes[name] = _coerce(name, value)
    return replace(settings, **changes)


def load_settings(
    path: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Settings:
    """
    Load settings.

    Priority order:
    1. Environment variables (highest priority)
    2. YAML settings file
    3. Defaults (lowest priority)

    Args:
        path: YAML file; ignored if it does not exist. Defaults to
            settings_path(environ).
        environ: Environment mapping (defaults to os.environ).

    Returns:
        Settings instance.

    Raises:
        ConfigError: If a value is invalid or the file is malformed.
    """
    env = os.environ if environ is None else environ
    if path is None:
        path = settings_path(env)

    settings = Settings()

    if path.exists():
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Malformed settings file {path}: {e}")
        if not isinstance(data, dict):
            raise ConfigError(f"Settings file {path} must contain a mapping")
        settings = _apply(settings, data)

    env_overrides = {field: env[var] for var, field in ENV_VARS.items() if var in env}
    return _apply(settings, env_overrides)


def settings_path(environ: Optional[Mapping[str, str]] = None) -> Path:
    """Settings file named by GRIDIRON_CONFIG, else SETTINGS_FILE."""
    env = os.environ if environ is None else environ
    if env.get(CONFIG_ENV_VAR):
        return Path(env[CONFIG_ENV_VAR])
    return SETTINGS_FILE
