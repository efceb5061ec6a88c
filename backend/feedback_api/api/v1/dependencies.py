from fastapi import Request
import structlog

from feedback_api.domain.entities.principal import Principal
from feedback_api.domain.errors import UnauthorizedError
from feedback_api.services.feedback_service import FeedbackService

logger = structlog.get_logger("access-gate")

def feedback_service(request: Request) -> FeedbackService:
    return FeedbackService(request.app.state.feedback_repo)

def bearer_token(authorization: str | None) -> str | None:
    """Second space-separated segment of the header, the scheme is not checked."""
    if not authorization:
        return None
    parts = authorization.split(" ")
    return parts[1] if len(parts) > 1 and parts[1] else None

async def require_credentials(request: Request) -> Principal:
    token = bearer_token(request.headers.get("authorization"))
    if not token:
        logger.info("auth rejected", reason="missing_token", path=request.url.path)
        raise UnauthorizedError()

    principal = await request.app.state.credential_validator.validate(token)
    if principal is None:
        logger.info("auth rejected", reason="invalid_token", path=request.url.path)
        raise UnauthorizedError()

    structlog.contextvars.bind_contextvars(subject=principal.subject)
    return principal
