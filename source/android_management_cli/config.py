# ABOUTME: Configuration management for the Android Management CLI
# ABOUTME: Loads and saves the flat JSON configuration file in the user's home directory

"""Configuration management for the Android Management CLI."""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from android_management_cli.errors import ConfigCorrupt, ConfigWriteError

logger = logging.getLogger(__name__)

DEFAULT_CALLBACK_URL = "https://lisica.design"

SERVICE_ACCOUNT_KEY = "serviceAccountKey"
PROJECT_ID = "projectId"
CALLBACK_URL = "callbackUrl"
DEFAULT_ENTERPRISE = "defaultEnterprise"

REQUIRED_KEYS = (SERVICE_ACCOUNT_KEY, PROJECT_ID)


class Config:
    """Flat key/value configuration persisted as a single JSON object."""

    CONFIG_FILE = Path(os.environ.get("AMDM_CONFIG_FILE") or Path.home() / ".amdm_config.json")

    def __init__(self, data: dict[str, Any] | None = None, path: Path | None = None):
        """Initialize configuration."""
        self.data: dict[str, Any] = dict(data or {})
        self.path = Path(path) if path else self.CONFIG_FILE

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """Load configuration from file.

        A missing file yields an empty configuration.

        Raises:
            ConfigCorrupt: If the file exists but is not a JSON object.
        """
        config_path = Path(path) if path else cls.CONFIG_FILE

        if not config_path.exists():
            logger.debug("No configuration file at %s", config_path)
            return cls(path=config_path)

        try:
            with open(config_path, encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigCorrupt(f"Configuration file {config_path} is not valid JSON: {e}") from e
        except OSError as e:
            raise ConfigCorrupt(f"Could not read configuration file {config_path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigCorrupt(f"Configuration file {config_path} must contain a JSON object")

        logger.debug("Loaded configuration from %s (%d keys)", config_path, len(data))
        return cls(data, path=config_path)

    def save(self) -> None:
        """Save the whole configuration, replacing the file.

        Raises:
            ConfigWriteError: If the file could not be written.
        """
        directory = self.path.parent
        tmp_name = None
        try:
            directory.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w", encoding="utf-8", dir=directory, prefix=".amdm_config.", suffix=".tmp", delete=False
            ) as f:
                tmp_name = f.name
                json.dump(self.data, f, indent=2, ensure_ascii=False)
            os.replace(tmp_name, self.path)
        except OSError as e:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise ConfigWriteError(f"Could not write configuration file {self.path}: {e}") from e

        logger.debug("Saved configuration to %s", self.path)

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self.data[key] = value

    def update(self, values: dict[str, Any]) -> None:
        self.data.update(values)

    def to_dict(self) -> dict[str, Any]:
        """Return a copy of the configuration mapping."""
        return dict(self.data)

    def __contains__(self, key: str) -> bool:
        return key in self.data

    @property
    def service_account_key(self) -> str | None:
        return self.data.get(SERVICE_ACCOUNT_KEY) or None

    @property
    def project_id(self) -> str | None:
        return self.data.get(PROJECT_ID) or None

    @property
    def callback_url(self) -> str:
        """Callback URL used for signup URLs, with the built-in fallback."""
        return self.data.get(CALLBACK_URL) or DEFAULT_CALLBACK_URL

    @property
    def default_enterprise(self) -> str | None:
        return self.data.get(DEFAULT_ENTERPRISE) or None

    def missing_fields(self) -> list[str]:
        """List the required keys that are absent or empty."""
        return [key for key in REQUIRED_KEYS if not self.data.get(key)]

    @property
    def is_complete(self) -> bool:
        return not self.missing_fields()
