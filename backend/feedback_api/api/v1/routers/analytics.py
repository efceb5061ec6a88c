from fastapi import APIRouter, Depends
from feedback_api.api.v1.dependencies import feedback_service, require_credentials
from feedback_api.services.feedback_service import FeedbackService
from feedback_api.schemas.feedback import AnalyticsSummaryOut

router = APIRouter(prefix="/analytics", tags=["analytics"], dependencies=[Depends(require_credentials)])

@router.get("/summary", response_model=AnalyticsSummaryOut)
async def get_summary(svc: FeedbackService = Depends(feedback_service)):
    return svc.summary()
