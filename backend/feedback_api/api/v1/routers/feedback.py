from fastapi import APIRouter, Depends, Query, status
from feedback_api.api.v1.dependencies import feedback_service, require_credentials
from feedback_api.services.feedback_service import FeedbackService
from feedback_api.schemas.feedback import (
    FeedbackCreate, FeedbackUpdate, FeedbackOut, ResponseCreate, ResponseOut,
)

router = APIRouter(prefix="/feedback", tags=["feedback"], dependencies=[Depends(require_credentials)])

@router.post("", response_model=FeedbackOut, status_code=status.HTTP_201_CREATED)
async def create_feedback(payload: FeedbackCreate, svc: FeedbackService = Depends(feedback_service)):
    obj = svc.create_feedback(
        customer_name=payload.customer_name,
        customer_email=payload.customer_email,
        property_id=payload.property_id,
        rating=payload.rating,
        category=payload.category,
        comments=payload.comments,
    )
    return FeedbackOut.model_validate(obj.__dict__)

@router.get("", response_model=list[FeedbackOut])
async def list_feedback(
    property_id: str | None = Query(None),
    category: str | None = Query(None),
    status: str | None = Query(None),
    limit: int = Query(20),
    offset: int = Query(0),
    svc: FeedbackService = Depends(feedback_service),
):
    items = svc.list_feedback(property_id=property_id, category=category, status=status, limit=limit, offset=offset)
    return [FeedbackOut.model_validate(i.__dict__) for i in items]

@router.get("/{feedback_id}", response_model=FeedbackOut)
async def get_feedback(feedback_id: str, svc: FeedbackService = Depends(feedback_service)):
    obj = svc.get_feedback(feedback_id)
    return FeedbackOut.model_validate(obj.__dict__)

@router.patch("/{feedback_id}", response_model=FeedbackOut)
async def update_feedback(
    feedback_id: str,
    payload: FeedbackUpdate | None = None,
    svc: FeedbackService = Depends(feedback_service),
):
    # only fields present in the body are applied, even when null
    changes = {k: getattr(payload, k) for k in payload.model_fields_set} if payload else {}
    obj = svc.update_feedback(feedback_id, changes)
    return FeedbackOut.model_validate(obj.__dict__)

@router.post("/{feedback_id}/response", response_model=ResponseOut, status_code=status.HTTP_201_CREATED)
async def post_response(
    feedback_id: str,
    payload: ResponseCreate | None = None,
    svc: FeedbackService = Depends(feedback_service),
):
    obj = svc.add_response(feedback_id, payload.response if payload else None)
    return ResponseOut.model_validate(obj.__dict__)
