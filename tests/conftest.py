from __future__ import annotations

from pathlib import Path

import pytest

from core.domain.models import DeploymentConfig
from tests.support.stubs import RecordingDispatcher

_ENV_VARS = (
    "DOKPLOY_AUTH_TOKEN",
    "DOKPLOY_RESOURCE_ID",
    "DOKPLOY_APPLICATION_ID",
    "DOKPLOY_BASE_URL",
    "DOKPLOY_DEPLOYMENT_TYPE",
    "DOKPLOY_HTTP_TIMEOUT_SECONDS",
    "DOKPLOY_USER_AGENT",
)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """No DOKPLOY_* variables and no stray `.env` in the working directory."""

    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def compose_config() -> DeploymentConfig:
    return DeploymentConfig(
        auth_token="t1",
        deployment_type="compose",
        resource_id="c-42",
        base_url="https://host",
    )


@pytest.fixture
def recording_dispatcher() -> RecordingDispatcher:
    return RecordingDispatcher()
