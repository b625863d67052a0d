"""
Payload decoder for the secrets API.

Implements the SecretDecoder port on top of the Pydantic schemas,
so that request bodies are validated by the same models that
document the API contract.
"""

from pydantic import ValidationError

from app.domain.secrets.entities import SecretRecord
from app.domain.secrets.errors import MalformedSecretError
from app.domain.secrets.ports import SecretDecoder
from app.interfaces.secrets.schemas import NamespacePayload, SecretPayload


def _describe(exc: ValidationError) -> str:
    """Summarize the first validation error without echoing input values."""
    first = exc.errors(include_url=False, include_input=False)[0]
    location = ".".join(str(part) for part in first.get("loc", ())) or "body"
    return f"{location}: {first.get('msg', 'invalid')}"


class PydanticSecretDecoder(SecretDecoder):
    """Decodes JSON request bodies into SecretRecord entities."""

    def decode(self, body: bytes) -> SecretRecord:
        try:
            payload = SecretPayload.model_validate_json(body)
        except ValidationError as exc:
            raise MalformedSecretError(_describe(exc)) from exc
        return SecretRecord(
            name=payload.name,
            namespace=payload.namespace or "",
            value=payload.value,
            raw_value=payload.raw_value,
        )

    def extract_namespace(self, body: bytes) -> str:
        try:
            payload = NamespacePayload.model_validate_json(body)
        except ValidationError as exc:
            raise MalformedSecretError(_describe(exc)) from exc
        return payload.namespace or ""
