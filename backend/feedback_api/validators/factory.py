from __future__ import annotations
from feedback_api.core.config import settings
from feedback_api.domain.interfaces.credential_validator import CredentialValidator
from feedback_api.validators.presence import PresenceValidator
from feedback_api.validators.introspection import IntrospectionValidator

def get_validator(name: str | None = None) -> CredentialValidator:
    kind = (name or settings.auth_validator or "presence").lower()
    if kind == "presence":
        return PresenceValidator()
    if kind == "introspection":
        return IntrospectionValidator()
    raise ValueError(f"Unknown credential validator: {kind}")
