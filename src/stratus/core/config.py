import logging
import re
from pathlib import Path
from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from stratus.core.errors import ConfigurationReadError, ConfigurationWriteError
from stratus.core.urls import OBJECT_SCHEMES, SUPPORTED_SCHEMES

logger = logging.getLogger(__name__)

CONFIG_VERSION = "1"
CONFIG_FILENAME = "config.json"
ALIAS_NAME_PATTERN = re.compile(r"^[a-zA-Z][a-zA-Z0-9_-]+$")


class StratusSettings(BaseSettings):
    """
    Process-level settings, read from ``STRATUS_*`` environment variables.
    """

    model_config = SettingsConfigDict(env_prefix="STRATUS_", extra="ignore")

    config_dir: Path = Field(
        default_factory=lambda: Path.home() / ".stratus",
        description="Directory holding config.json.",
    )


class HostConfig(BaseModel):
    """Credentials and endpoint options for the hosts matching one glob."""

    model_config = ConfigDict(frozen=True)

    access_key_id: str = ""
    secret_access_key: str = ""
    region: str | None = None

    @property
    def is_anonymous(self) -> bool:
        return not self.access_key_id and not self.secret_access_key

    @property
    def has_valid_credentials(self) -> bool:
        return bool(self.access_key_id) == bool(self.secret_access_key)


class StratusConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    version: str = CONFIG_VERSION
    aliases: dict[str, str] = Field(default_factory=dict)
    hosts: dict[str, HostConfig] = Field(default_factory=dict)

    @field_validator("version")
    @classmethod
    def check_version(cls, version: str) -> str:
        if version != CONFIG_VERSION:
            raise ValueError(
                f"unsupported config version ‘{version}’, expected ‘{CONFIG_VERSION}’"
            )
        return version

    @field_validator("aliases")
    @classmethod
    def check_aliases(cls, aliases: dict[str, str]) -> dict[str, str]:
        for name, prefix in aliases.items():
            if not ALIAS_NAME_PATTERN.match(name):
                raise ValueError(f"invalid alias name ‘{name}’")
            if name.lower() in SUPPORTED_SCHEMES:
                raise ValueError(f"alias name ‘{name}’ is a reserved URL scheme")

            parts = urlsplit(prefix)
            if parts.scheme.lower() not in OBJECT_SCHEMES or not parts.netloc:
                raise ValueError(f"alias ‘{name}’ must expand to an http(s) URL")
        return aliases


def default_config() -> StratusConfig:
    anonymous = HostConfig()
    return StratusConfig(
        aliases={
            "s3": "https://s3.amazonaws.com",
            "play": "https://play.min.io",
            "localhost": "http://localhost:9000",
        },
        hosts={
            "localhost:*": anonymous,
            "127.0.0.1:*": anonymous,
            "s3*.amazonaws.com": anonymous,
            "play.min.io": anonymous,
        },
    )


class ConfigStore:
    """
    Reads and writes config.json. The loaded StratusConfig is passed
    explicitly to everything that needs it.
    """

    def __init__(self, config_dir: Path | str | None = None):
        if config_dir is None:
            config_dir = StratusSettings().config_dir
        self.config_dir = Path(config_dir).expanduser()

    def path(self) -> Path:
        return self.config_dir / CONFIG_FILENAME

    def exists(self) -> bool:
        return self.path().is_file()

    def load(self) -> StratusConfig:
        config_path = self.path()
        try:
            raw = config_path.read_bytes()
        except OSError as e:
            raise ConfigurationReadError(str(e), path=str(config_path)) from e

        try:
            config = StratusConfig.model_validate_json(raw)
        except ValidationError as e:
            raise ConfigurationReadError(
                f"invalid config: {e.error_count()} error(s)", path=str(config_path)
            ) from e
        except UnicodeDecodeError as e:
            raise ConfigurationReadError(
                "config file is not valid UTF-8", path=str(config_path)
            ) from e

        logger.debug(
            "Loaded %d aliases and %d hosts from %s",
            len(config.aliases),
            len(config.hosts),
            config_path,
        )
        return config

    def save(self, config: StratusConfig) -> Path:
        config_path = self.path()
        try:
            self.config_dir.mkdir(mode=0o700, parents=True, exist_ok=True)
            config_path.write_text(
                config.model_dump_json(indent=2) + "\n", encoding="utf-8"
            )
        except OSError as e:
            raise ConfigurationWriteError(str(e), path=str(config_path)) from e
        return config_path
