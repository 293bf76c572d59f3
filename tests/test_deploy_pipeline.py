from __future__ import annotations

import pytest

from core.domain.errors import ConfigurationError, DeploymentRejectedError, TransportError
from core.domain.models import DeploymentConfig, DeploymentType
from core.services.deploy_pipeline import build_http_request, plan_deployment, trigger_deployment
from tests.support.stubs import RecordingDispatcher


def test_compose_example_builds_expected_request(compose_config: DeploymentConfig) -> None:
    request, endpoint = plan_deployment(compose_config)
    planned = build_http_request(request, endpoint)

    assert planned.method == "POST"
    assert planned.url == "https://host/api/compose.deploy"
    assert planned.json == {"composeId": "c-42"}
    assert planned.headers["Authorization"] == "Bearer t1"
    assert planned.headers["Content-Type"] == "application/json"
    assert planned.headers["Accept"] == "application/json"


def test_redacted_headers_hide_token(compose_config: DeploymentConfig) -> None:
    planned = build_http_request(*plan_deployment(compose_config))
    assert "t1" not in planned.redacted_headers()["Authorization"]
    assert planned.headers["Authorization"] == "Bearer t1"


def test_trigger_success_dispatches_once(
    compose_config: DeploymentConfig, recording_dispatcher: RecordingDispatcher
) -> None:
    result = trigger_deployment(compose_config, recording_dispatcher)

    assert result.succeeded
    assert len(recording_dispatcher.calls) == 1
    request, endpoint = recording_dispatcher.calls[0]
    assert request.deployment_type is DeploymentType.COMPOSE
    assert endpoint.payload_key == "composeId"


@pytest.mark.parametrize("status_code", [401, 500])
def test_trigger_non_200_is_rejected(compose_config: DeploymentConfig, status_code: int) -> None:
    dispatcher = RecordingDispatcher(status_code)
    with pytest.raises(DeploymentRejectedError) as excinfo:
        trigger_deployment(compose_config, dispatcher)
    assert excinfo.value.status_code == status_code
    assert len(dispatcher.calls) == 1


def test_invalid_type_never_dispatches(recording_dispatcher: RecordingDispatcher) -> None:
    config = DeploymentConfig(auth_token="t", resource_id="r", base_url="https://h", deployment_type="Compose")
    with pytest.raises(ConfigurationError):
        trigger_deployment(config, recording_dispatcher)
    assert recording_dispatcher.calls == []


def test_missing_token_never_dispatches(recording_dispatcher: RecordingDispatcher) -> None:
    config = DeploymentConfig(resource_id="r", base_url="https://h")
    with pytest.raises(ConfigurationError):
        trigger_deployment(config, recording_dispatcher)
    assert recording_dispatcher.calls == []


def test_transport_failure_propagates(compose_config: DeploymentConfig) -> None:
    dispatcher = RecordingDispatcher(fail=True)
    with pytest.raises(TransportError) as excinfo:
        trigger_deployment(compose_config, dispatcher)
    assert not isinstance(excinfo.value, DeploymentRejectedError)
    assert excinfo.value.url == "https://host/api/compose.deploy"


def test_error_kinds_have_distinct_exit_codes() -> None:
    codes = {ConfigurationError.exit_code, TransportError.exit_code, DeploymentRejectedError.exit_code}
    assert len(codes) == 3
    assert 0 not in codes
