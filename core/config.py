"""Configuration models and loading."""

import json
import os
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from core.exceptions import ConfigurationError

CONFIG_DIR = Path.home() / ".config" / "tmdb-proxy"
CONFIG_FILE = CONFIG_DIR / "config.json"

# (section, field) <- environment variable
ENV_OVERRIDES: dict[str, tuple[str, str]] = {
    "HOST": ("server", "host"),
    "PORT": ("server", "port"),
    "TMDB_BASE_URL": ("tmdb", "base_url"),
    "TMDB_TOKEN": ("tmdb", "token"),
    "TMDB_PREFIX": ("forward", "prefix"),
    "UPSTREAM_TIMEOUT": ("forward", "timeout"),
    "SHUTDOWN_TIMEOUT": ("limits", "shutdown_timeout"),
}


class ServerSettings(BaseModel):
    host: str = "0.0.0.0"
    port: int = 3000
    environment: str = "development"


class TmdbSettings(BaseModel):
    base_url: str = "https://api.themoviedb.org/3"
    token: str = ""


class ForwardSettings(BaseModel):
    prefix: str = "/tmdb"
    timeout: float = Field(default=10.0, gt=0)


class LimitsSettings(BaseModel):
    max_connections: int = 100
    max_keepalive_connections: int = 20
    keep_alive_timeout: int = 5
    shutdown_timeout: int = 10


class Config(BaseModel):
    server: ServerSettings = Field(default_factory=ServerSettings)
    tmdb: TmdbSettings = Field(default_factory=TmdbSettings)
    forward: ForwardSettings = Field(default_factory=ForwardSettings)
    limits: LimitsSettings = Field(default_factory=LimitsSettings)

    @property
    def is_production(self) -> bool:
        return self.server.environment == "production"


def config_file_path(environ: Mapping[str, str] | None = None) -> Path:
    """Return the JSON config path, honouring TMDB_PROXY_CONFIG."""
    environ = os.environ if environ is None else environ
    override = environ.get("TMDB_PROXY_CONFIG")
    return Path(override) if override else CONFIG_FILE


def load_config(
    environ: Mapping[str, str] | None = None,
    config_file: Path | None = None,
) -> Config:
    """Load configuration from the optional JSON file, then apply env overrides.

    Raises:
        ConfigurationError: The file is not valid JSON or a value fails validation.
    """
    environ = os.environ if environ is None else environ
    path = config_file or config_file_path(environ)

    data: dict = {}
    if path.exists():
        try:
            data = json.loads(path.read_text())
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"Expected a JSON object in {path}")

    for env_name, (section, field) in ENV_OVERRIDES.items():
        value = environ.get(env_name)
        if value is not None and value != "":
            data.setdefault(section, {})[field] = value

    environment = environ.get("APP_ENV") or environ.get("NODE_ENV")
    if environment:
        data.setdefault("server", {})["environment"] = environment

    try:
        return Config.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e
