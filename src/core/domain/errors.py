"""Error kinds for a deployment trigger.

The three kinds are disjoint and each maps to its own process exit code, so a
CI log can tell a configuration bug from a network failure from a rejection.
"""

from __future__ import annotations


class DeployError(Exception):
    """Base class; `exit_code` is what the CLI exits with."""

    exit_code: int = 1
    kind: str = "DeployError"


class ConfigurationError(DeployError):
    """Missing or malformed input. Raised before any network I/O."""

    exit_code = 2
    kind = "ConfigurationError"

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class TransportError(DeployError):
    """The request could not be delivered (DNS, refused, TLS, timeout)."""

    exit_code = 3
    kind = "TransportError"

    def __init__(self, message: str, *, url: str) -> None:
        super().__init__(message)
        self.url = url


class DeploymentRejectedError(DeployError):
    """The request was delivered but the server did not answer 200."""

    exit_code = 1
    kind = "DeploymentRejectedError"

    def __init__(self, status_code: int, *, url: str = "") -> None:
        target = f" by {url}" if url else ""
        super().__init__(f"deployment rejected{target} with HTTP status {status_code}")
        self.status_code = status_code
        self.url = url
