"""Input validation.

Turns a raw `DeploymentConfig` into a `DeploymentRequest` or raises
`ConfigurationError`. Runs before anything touches the network.
"""

from __future__ import annotations

import logging
from urllib.parse import urlsplit

from core.domain.errors import ConfigurationError
from core.domain.models import DeploymentConfig, DeploymentRequest, DeploymentType

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS: tuple[str, ...] = ("auth_token", "resource_id", "base_url")


def _require(config: DeploymentConfig, name: str) -> str:
    value = getattr(config, name)
    if value is None or not value.strip():
        raise ConfigurationError(f"{name} is required and must not be empty", field=name)
    return value


def _check_auth_token(token: str) -> None:
    """The token travels in an HTTP header: printable ASCII only."""

    if not token.isascii() or any(ord(ch) < 0x20 or ord(ch) == 0x7F for ch in token):
        raise ConfigurationError(
            "auth_token must contain only printable ASCII characters",
            field="auth_token",
        )


def parse_deployment_type(raw: str | None) -> DeploymentType:
    """Exact, case-sensitive match. Absent or empty selects the default."""

    if raw is None or raw == "":
        return DeploymentType.default()
    for member in DeploymentType:
        if raw == member.value:
            return member
    allowed = ", ".join(repr(m.value) for m in DeploymentType)
    raise ConfigurationError(
        f"deployment_type must be one of {allowed}, got {raw!r}",
        field="deployment_type",
    )


def _check_base_url(base_url: str) -> None:
    parts = urlsplit(base_url)
    if parts.scheme not in {"http", "https"} or not parts.netloc:
        raise ConfigurationError(
            f"base_url must be an absolute http(s) URL, got {base_url!r}",
            field="base_url",
        )
    if base_url.endswith("/"):
        raise ConfigurationError(
            f"base_url must not end with a slash, got {base_url!r}",
            field="base_url",
        )


def validate_config(config: DeploymentConfig) -> DeploymentRequest:
    """Validate every field and build the immutable request."""

    values = {name: _require(config, name) for name in _REQUIRED_FIELDS}
    _check_auth_token(values["auth_token"])
    _check_base_url(values["base_url"])
    deployment_type = parse_deployment_type(config.deployment_type)

    logger.debug(
        "Configuration valid: type=%s resource_id=%s base_url=%s",
        deployment_type.value,
        values["resource_id"],
        values["base_url"],
    )
    return DeploymentRequest(deployment_type=deployment_type, **values)
