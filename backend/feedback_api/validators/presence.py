from __future__ import annotations
from feedback_api.domain.entities.principal import Principal

class PresenceValidator:
    """Accepts any non-empty token. Not an authentication check."""

    async def validate(self, token: str) -> Principal | None:
        if not token:
            return None
        return Principal(subject="anonymous")
