import json
import os
import tempfile
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from loguru import logger
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from commit_ai.enums import ModelName
from commit_ai.errors import ConfigError, MissingCredentialError

load_dotenv()

ENV_PREFIX = "COMMIT_AI_"
PROJECT_NAME = "commit-ai"
STORED_KEYS = ("api_key", "model")


def default_config_dir() -> Path:
    """Directory holding the persisted configuration.

    $COMMIT_AI_CONFIG_DIR wins, then $XDG_CONFIG_HOME, then ~/.config.
    """
    override = os.environ.get(f"{ENV_PREFIX}CONFIG_DIR")
    if override:
        return Path(override).expanduser()
    base = os.environ.get("XDG_CONFIG_HOME") or os.path.join("~", ".config")
    return Path(base).expanduser() / PROJECT_NAME


class ConfigStore:
    """JSON document on disk holding the API key and model preference."""

    def __init__(self, path: Path | None = None):
        self._path = Path(path) if path else default_config_dir() / "config.json"

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> dict[str, Any]:
        if not self._path.exists():
            return {}
        try:
            with open(self._path, encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Ignoring unreadable config file {self._path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring config file {self._path}: not a JSON object")
            return {}
        return {key: data[key] for key in STORED_KEYS if data.get(key)}

    def save(self, values: dict[str, Any]) -> None:
        """Write a new document replacing the previous one."""
        document = {key: values[key] for key in STORED_KEYS if values.get(key)}
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self._path.parent, prefix=".config-", suffix=".json")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(document, f, indent=2)
                os.chmod(tmp_name, 0o600)
                os.replace(tmp_name, self._path)
            except BaseException:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise
        except OSError as e:
            raise ConfigError(f"Failed to save config to {self._path}: {e}") from e
        logger.debug(f"Configuration saved to {self._path}")


class Settings(BaseSettings):
    api_key: str | None = Field(None, description="The API key for OpenAI.")
    model: str = Field(ModelName.gpt_4o.value, description="The name of the model to use.")
    api_base: str | None = Field(None, description="The base URL for the OpenAI API.")
    timeout: float = Field(60.0, gt=0, description="Request timeout in seconds.")
    max_retries: int = Field(2, ge=0, description="Retries performed by the OpenAI client.")

    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX, case_sensitive=False)

    @model_validator(mode="after")
    def validate_settings(self) -> "Settings":
        if not self.model or not self.model.strip():
            raise ValueError("model must not be empty")
        if self.api_base and not self.api_base.startswith(("http://", "https://")):
            raise ValueError(f"Invalid base URL format: {self.api_base}")
        return self

    @classmethod
    def load(cls, store: ConfigStore | None = None) -> "Settings":
        """Build settings from the stored document; environment values win."""
        stored = (store or ConfigStore()).load()
        overrides = {
            key: value
            for key, value in stored.items()
            if f"{ENV_PREFIX}{key.upper()}" not in os.environ
        }
        return cls(**overrides)

    def require_api_key(self) -> str:
        if not self.api_key:
            raise MissingCredentialError()
        return self.api_key

    def __str__(self) -> str:
        """Custom string representation to avoid leaking sensitive information."""
        return f"Settings(model={self.model!r}, api_key={'***' if self.api_key else None})"

    def __repr__(self) -> str:
        """Custom repr to avoid leaking sensitive information."""
        return self.__str__()
