from fastapi import APIRouter
from feedback_api.domain.entities.feedback import utcnow
from feedback_api.schemas.health import HealthOut

router = APIRouter(tags=["health"])

@router.get("/health", response_model=HealthOut)
async def health():
    return HealthOut(timestamp=utcnow())
