from __future__ import annotations

from core.domain.errors import TransportError
from core.domain.models import DeploymentRequest, DispatchResult, EndpointSpec


class RecordingDispatcher:
    """Stub dispatcher: answers with a fixed status or raises, and records calls."""

    def __init__(self, status_code: int = 200, *, fail: bool = False) -> None:
        self.status_code = status_code
        self.fail = fail
        self.calls: list[tuple[DeploymentRequest, EndpointSpec]] = []

    def dispatch(self, request: DeploymentRequest, endpoint: EndpointSpec) -> DispatchResult:
        self.calls.append((request, endpoint))
        url = f"{request.base_url}{endpoint.path}"
        if self.fail:
            raise TransportError("connection refused", url=url)
        return DispatchResult(status_code=self.status_code, url=url)
