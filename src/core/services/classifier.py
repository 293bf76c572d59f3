"""Result classification.

HTTP 200 is the only success. Every other code, 2xx included, is a rejection
carrying the literal status code.
"""

from __future__ import annotations

import logging

from core.domain.errors import DeploymentRejectedError
from core.domain.models import DispatchResult

logger = logging.getLogger(__name__)


def classify_result(result: DispatchResult) -> DispatchResult:
    """Return `result` unchanged on success, raise otherwise."""

    if result.succeeded:
        logger.debug("Deployment accepted: HTTP %s", result.status_code)
        return result
    logger.debug("Deployment rejected: HTTP %s", result.status_code)
    raise DeploymentRejectedError(result.status_code, url=result.url)
