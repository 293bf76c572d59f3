"""Deployment trigger orchestration.

Validate -> select endpoint -> dispatch -> classify, strictly in that order.
The pipeline takes an explicit `DeploymentConfig` and an injected
`RequestDispatcher`; it never reads the environment and never prints, which
keeps it usable from the CLI, from other entry points and from tests.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from core.domain.models import DeploymentConfig, DeploymentRequest, DispatchResult, EndpointSpec
from core.interfaces.dispatcher import RequestDispatcher
from core.services.classifier import classify_result
from core.services.endpoints import select_endpoint
from core.services.validator import validate_config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlannedRequest:
    """The exact HTTP call a deployment trigger makes."""

    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    json: dict[str, str] = field(default_factory=dict)

    def redacted_headers(self) -> dict[str, str]:
        """Headers safe to print: the bearer token is masked."""

        out = dict(self.headers)
        if "Authorization" in out:
            out["Authorization"] = "Bearer ****"
        return out


def build_http_request(request: DeploymentRequest, endpoint: EndpointSpec) -> PlannedRequest:
    return PlannedRequest(
        method="POST",
        url=f"{request.base_url}{endpoint.path}",
        headers={
            "Content-Type": "application/json",
            "Accept": "application/json",
            "Authorization": f"Bearer {request.auth_token}",
        },
        json={endpoint.payload_key: request.resource_id},
    )


def plan_deployment(config: DeploymentConfig) -> tuple[DeploymentRequest, EndpointSpec]:
    """Validation and endpoint selection only; no I/O."""

    request = validate_config(config)
    endpoint = select_endpoint(request.deployment_type)
    return request, endpoint


def trigger_deployment(config: DeploymentConfig, dispatcher: RequestDispatcher) -> DispatchResult:
    """Run the whole trigger once.

    Raises:
    - `ConfigurationError` before the dispatcher is touched.
    - `TransportError` when the dispatcher cannot complete the call.
    - `DeploymentRejectedError` for any status other than 200.
    """

    request, endpoint = plan_deployment(config)
    logger.info(
        "Triggering %s deployment of %s via %s%s",
        request.deployment_type.value,
        request.resource_id,
        request.base_url,
        endpoint.path,
    )
    result = dispatcher.dispatch(request, endpoint)
    return classify_result(result)
