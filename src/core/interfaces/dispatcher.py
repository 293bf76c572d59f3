"""Dispatcher contract.

Why Protocol:
- Structural contract (duck typing) with no rigid inheritance.
- The pipeline depends on this abstraction; the httpx adapter implements it
  and tests can hand in a stub that records calls.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import DeploymentRequest, DispatchResult, EndpointSpec


@runtime_checkable
class RequestDispatcher(Protocol):
    """Sends exactly one authenticated request and reports its status code.

    Rules:
    - Never retries.
    - Raises `core.domain.errors.TransportError` when the call cannot complete.
    """

    def dispatch(self, request: DeploymentRequest, endpoint: EndpointSpec) -> DispatchResult:
        ...
