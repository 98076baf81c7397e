"""Client configuration: credentials, hosts and transport settings."""

from pathlib import Path
from typing import Any, Optional

try:
    import yaml
except ModuleNotFoundError as e:
    raise ModuleNotFoundError(
        "PyYAML is required for config loading. Run: poetry install"
    ) from e
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from vonage_client.errors import ConfigurationError

ENV_PREFIX = "VONAGE_"

# Sections of a nested YAML config that are flattened into settings
YAML_SECTIONS = ("credentials", "hosts", "http")


class Config(BaseSettings):
    """
    Credentials and connection settings shared by every namespace.

    Values passed explicitly win over environment variables prefixed with
    ``VONAGE_`` (``VONAGE_TOKEN``, ``VONAGE_SIGNATURE_SECRET``, ...). The
    Meetings host is read from ``VONAGE_HOST``.
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_ignore_empty=True,
        extra="forbid",
        frozen=True,
    )

    api_key: Optional[str] = None
    api_secret: Optional[str] = None
    token: Optional[str] = Field(
        default=None,
        description="Pre-obtained bearer credential (JWT) for Messages and Meetings",
    )
    signature_secret: Optional[str] = Field(
        default=None,
        description="Account signature secret used to verify webhook JWTs",
    )

    api_host: str = "api.nexmo.com"
    vonage_host: str = Field(
        default="api-eu.vonage.com",
        validation_alias=AliasChoices("vonage_host", "VONAGE_HOST"),
    )
    timeout: float = Field(default=30.0, gt=0)

    app_name: Optional[str] = None
    app_version: Optional[str] = None

    def require(self, field: str) -> str:
        """Return a configured string value or raise ConfigurationError."""
        value = getattr(self, field)
        if not value:
            raise ConfigurationError(
                f"No {field} configured. Pass {field}=... or set "
                f"{ENV_PREFIX}{field.upper()} in the environment."
            )
        return value

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Config":
        """Load config from YAML. Supports nested (credentials/hosts) or flat structure."""
        data = yaml.safe_load(Path(path).read_text()) or {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file {path} must contain a mapping")
        flat: dict[str, Any] = {}
        for section in YAML_SECTIONS:
            nested = data.pop(section, None) or {}
            if not isinstance(nested, dict):
                raise ConfigurationError(
                    f"Section '{section}' in {path} must be a mapping, "
                    f"got {type(nested).__name__}"
                )
            flat.update(nested)
        flat.update(data)
        return cls(**{str(k): v for k, v in flat.items()})
