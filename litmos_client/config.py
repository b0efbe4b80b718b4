"""
Client configuration: an immutable pydantic model plus environment loading.

Key concepts:
  - Configuration is frozen: it is built once per client and shared read-only
    by every request.  Assigning to a field raises.
  - field_validator rejects blank credentials; load_configuration() turns
    pydantic's ValidationError into our ConfigurationError so callers only
    ever see the package's own exception types.
  - EnvSettings (pydantic-settings) reads LITMOS_* environment variables or a
    .env file for deployments that don't pass credentials explicitly.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigurationError

# Litmos Developer API documentation: http://help.litmos.com/developer-api/
API_VERSION = "1"
DEFAULT_HOST = "litmos.com"
DEFAULT_TIMEOUT = 30.0  # seconds, passed straight to requests


class Configuration(BaseModel):
    """Credentials and endpoint settings for one LitmosClient."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    api_key: str = Field(repr=False)  # kept out of logs and tracebacks
    source: str
    api_version: str = API_VERSION
    host: str = DEFAULT_HOST
    timeout: Optional[float] = DEFAULT_TIMEOUT

    @field_validator("api_version", mode="before")
    @classmethod
    def coerce_version(cls, v: object) -> object:
        """Accept api_version=1 as well as api_version="1"."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("api_key", "source", "api_version", "host")
    @classmethod
    def not_blank(cls, v: str, info: ValidationInfo) -> str:
        if not v:
            raise ValueError(f"{info.field_name} must not be blank")
        return v

    @property
    def base_url(self) -> str:
        return f"https://api.{self.host}/v{self.api_version}.svc"


class EnvSettings(BaseSettings):
    """LITMOS_API_KEY, LITMOS_SOURCE, LITMOS_API_VERSION, LITMOS_HOST, LITMOS_TIMEOUT."""

    model_config = SettingsConfigDict(
        env_prefix="LITMOS_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str = ""
    source: str = ""
    api_version: str = API_VERSION
    host: str = DEFAULT_HOST
    timeout: Optional[float] = DEFAULT_TIMEOUT


def load_configuration(**values: Any) -> Configuration:
    """
    Build a Configuration, raising ConfigurationError on any invalid field.

    Examples:
        load_configuration(api_key="abc", source="example.com")
        load_configuration(api_key="", source="x")   → ConfigurationError
    """
    try:
        return Configuration(**values)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or 'configuration'}: {err['msg']}"
            for err in exc.errors()
        )
        raise ConfigurationError(f"Invalid Litmos configuration: {problems}") from exc


def configuration_from_env(**overrides: Any) -> Configuration:
    """Read LITMOS_* settings from the environment; explicit *overrides* win."""
    values = EnvSettings().model_dump()
    values.update({k: v for k, v in overrides.items() if v is not None})
    return load_configuration(**values)
