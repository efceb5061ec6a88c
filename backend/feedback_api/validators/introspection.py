from __future__ import annotations
import httpx
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential
from feedback_api.core.config import settings
from feedback_api.domain.entities.principal import Principal

class IntrospectionValidator:
    """Asks an OAuth2-style introspection endpoint whether a token is active."""

    def __init__(self, url:str|None=None, timeout:float|None=None, transport:httpx.AsyncBaseTransport|None=None):
        self.url = url or settings.auth_introspection_url
        self.timeout = timeout or settings.auth_introspection_timeout
        self.transport = transport
        if not self.url:
            raise ValueError("AUTH_INTROSPECTION_URL is required for the introspection validator")

    @retry(
        retry=retry_if_exception_type(httpx.TransportError),
        stop=stop_after_attempt(3),
        wait=wait_exponential(min=0.5, max=4),
        reraise=True,
    )
    async def _introspect(self, token:str) -> dict:
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            r = await client.post(self.url, data={"token": token})
            if r.status_code >= 400:
                return {"active": False}
            try:
                return r.json()
            except ValueError:
                return {"active": False}

    async def validate(self, token:str) -> Principal | None:
        if not token:
            return None
        body = await self._introspect(token)
        if not isinstance(body, dict) or body.get("active") is not True:
            return None
        return Principal(subject=str(body.get("sub") or "unknown"), claims=body)
