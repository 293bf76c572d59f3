"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) away from the CLI.
- Only the CLI layer instantiates `AppSettings`; the pipeline receives an
  explicit `DeploymentConfig` built from it.
"""

from __future__ import annotations

from pydantic import AliasChoices, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.errors import ConfigurationError
from core.domain.models import DeploymentConfig

DEFAULT_TIMEOUT_SECONDS = 30.0


class AppSettings(BaseSettings):
    """Central application settings.

    Deployment fields are plain optional strings on purpose: they are checked
    by the input validator, so a bad value surfaces as `ConfigurationError`
    instead of a settings parse failure.
    """

    model_config = SettingsConfigDict(
        env_prefix="DOKPLOY_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        populate_by_name=True,
    )

    auth_token: str | None = Field(
        default=None,
        description="API token presented as `Authorization: Bearer <token>`.",
    )
    resource_id: str | None = Field(
        default=None,
        validation_alias=AliasChoices("DOKPLOY_RESOURCE_ID", "DOKPLOY_APPLICATION_ID"),
        description="Application or compose id to redeploy.",
    )
    base_url: str | None = Field(
        default=None,
        description="Control plane base URL, without trailing slash.",
    )
    deployment_type: str | None = Field(
        default=None,
        description="`application` (default) or `compose`.",
    )

    http_timeout_seconds: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS,
        gt=0,
        description="Timeout for the deploy request (seconds).",
    )
    user_agent: str = Field(
        default="dokploy-deploy/0.1",
        min_length=1,
        description="User-Agent sent with the deploy request.",
    )

    def to_deployment_config(self, **overrides: str | None) -> DeploymentConfig:
        """Merge CLI overrides (non-None wins) over the resolved settings."""

        values: dict[str, str | None] = {
            "auth_token": self.auth_token,
            "resource_id": self.resource_id,
            "base_url": self.base_url,
            "deployment_type": self.deployment_type,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return DeploymentConfig(**values)


def load_settings() -> AppSettings:
    """`AppSettings()` with parse failures reported as configuration errors."""

    try:
        return AppSettings()
    except ValidationError as exc:
        raise ConfigurationError(f"invalid settings: {exc.errors()[0]['msg']}") from exc
