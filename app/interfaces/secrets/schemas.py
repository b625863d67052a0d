"""
Pydantic schemas for secrets API request/response validation.

These schemas enforce input validation and define the API contract.
No business logic belongs here.
"""

from typing import Optional

from pydantic import Base64Bytes, BaseModel, ConfigDict, Field, model_validator

NAME_DESCRIPTION = "Secret name, unique within its namespace"
NAMESPACE_DESCRIPTION = "Target namespace. Overridden by the resolved namespace."


class SecretPayload(BaseModel):
    """Request body for create, replace and delete.

    Attributes:
        name: Secret name (required, non-empty).
        namespace: Caller-declared namespace; used only for resolution.
        value: Secret value as text.
        raw_value: Secret value as base64-encoded bytes.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1, description=NAME_DESCRIPTION)
    namespace: Optional[str] = Field(default=None, description=NAMESPACE_DESCRIPTION)
    value: Optional[str] = Field(default=None, description="Secret value")
    raw_value: Optional[Base64Bytes] = Field(
        default=None, alias="rawValue", description="Base64-encoded secret value"
    )

    @model_validator(mode="after")
    def check_single_value(self) -> "SecretPayload":
        """Reject payloads that carry both ``value`` and ``rawValue``."""
        if self.value is not None and self.raw_value is not None:
            raise ValueError("only one of value and rawValue may be set")
        return self


class NamespacePayload(BaseModel):
    """Lenient view of a request body, used only to find its namespace."""

    namespace: Optional[str] = None


class SecretItemSchema(BaseModel):
    """A single secret in the list response. Never includes the value."""

    name: str
    namespace: str


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    error: str
    detail: Optional[str] = None


class HealthResponse(BaseModel):
    """Response schema for health check endpoint."""

    status: str
    version: str
