"""Endpoint selection: one place maps a deployment type to its API call."""

from __future__ import annotations

from core.domain.models import DeploymentType, EndpointSpec

ENDPOINTS: dict[DeploymentType, EndpointSpec] = {
    DeploymentType.APPLICATION: EndpointSpec(
        path="/api/application.deploy",
        payload_key="applicationId",
    ),
    DeploymentType.COMPOSE: EndpointSpec(
        path="/api/compose.deploy",
        payload_key="composeId",
    ),
}


def select_endpoint(deployment_type: DeploymentType) -> EndpointSpec:
    return ENDPOINTS[deployment_type]
