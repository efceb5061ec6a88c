from typing import Protocol, Optional
from feedback_api.domain.entities.principal import Principal

class CredentialValidator(Protocol):
    async def validate(self, token: str) -> Optional[Principal]:
        """Return a Principal when the token is accepted, None to reject."""
        ...
