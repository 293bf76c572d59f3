"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Immutable values (`frozen=True`) with self-documenting fields (Field),
  without coupling the Core to any I/O library.

Note:
- These models describe *what* a deployment trigger is, not *how* it is sent.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class DeploymentType(str, Enum):
    """Kind of resource a deployment trigger targets."""

    APPLICATION = "application"
    COMPOSE = "compose"

    @classmethod
    def default(cls) -> "DeploymentType":
        return cls.APPLICATION


class DeploymentConfig(BaseModel):
    """Raw configuration, exactly as resolved by the caller (flags, env, tests).

    Nothing is validated here: empty strings and unknown deployment types are
    accepted so that the validator can reject them with a single error kind.
    """

    model_config = ConfigDict(frozen=True)

    auth_token: str | None = Field(default=None, description="Bearer token.")
    resource_id: str | None = Field(
        default=None,
        description="Application id or compose id, depending on the type.",
    )
    base_url: str | None = Field(
        default=None,
        description="Control plane URL, e.g. `https://dokploy.example.com`.",
    )
    deployment_type: str | None = Field(
        default=None,
        description="`application` or `compose`; absent means `application`.",
    )


class DeploymentRequest(BaseModel):
    """A validated deployment trigger. Built once per invocation."""

    model_config = ConfigDict(frozen=True)

    auth_token: str = Field(..., min_length=1, repr=False)
    resource_id: str = Field(..., min_length=1)
    base_url: str = Field(..., min_length=1)
    deployment_type: DeploymentType = Field(default=DeploymentType.APPLICATION)


class EndpointSpec(BaseModel):
    """API path and JSON payload key for one deployment type."""

    model_config = ConfigDict(frozen=True)

    path: str
    payload_key: str


class DispatchResult(BaseModel):
    """Outcome of the single outbound call: only the status code is kept."""

    model_config = ConfigDict(frozen=True)

    status_code: int
    url: str = Field(default="", description="URL the request was sent to.")

    @property
    def succeeded(self) -> bool:
        return self.status_code == 200
