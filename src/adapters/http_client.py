"""httpx wrapper and the HTTP dispatcher.

Why a wrapper:
- Standardizes timeout, headers and redirect policy for the deploy call.
- Easy to test: pass an `httpx.MockTransport` to `build_client`.
"""

from __future__ import annotations

import logging

import httpx

from core.config import AppSettings
from core.domain.errors import TransportError
from core.domain.models import DeploymentRequest, DispatchResult, EndpointSpec
from core.services.deploy_pipeline import build_http_request

logger = logging.getLogger(__name__)


def build_client(
    settings: AppSettings | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
    timeout_seconds: float | None = None,
) -> httpx.Client:
    """Create an `httpx.Client` with bounded timeout and no redirects.

    A redirect is not a 200, so following it would hide a rejection.
    """

    settings = settings or AppSettings()
    timeout = timeout_seconds if timeout_seconds is not None else settings.http_timeout_seconds
    return httpx.Client(
        timeout=httpx.Timeout(timeout),
        follow_redirects=False,
        headers={"User-Agent": settings.user_agent},
        transport=transport,
    )


class HttpxDispatcher:
    """`RequestDispatcher` backed by a synchronous `httpx.Client`.

    The client is owned by the caller (use it as a context manager).
    """

    def __init__(self, client: httpx.Client) -> None:
        self._client = client

    def dispatch(self, request: DeploymentRequest, endpoint: EndpointSpec) -> DispatchResult:
        planned = build_http_request(request, endpoint)
        logger.debug("%s %s headers=%s", planned.method, planned.url, planned.redacted_headers())
        try:
            response = self._client.request(
                planned.method,
                planned.url,
                headers=planned.headers,
                json=planned.json,
            )
        except httpx.TimeoutException as exc:
            raise TransportError(f"request to {planned.url} timed out: {exc}", url=planned.url) from exc
        except httpx.TransportError as exc:
            raise TransportError(f"could not reach {planned.url}: {exc}", url=planned.url) from exc

        logger.debug("Response: HTTP %s", response.status_code)
        return DispatchResult(status_code=response.status_code, url=planned.url)
