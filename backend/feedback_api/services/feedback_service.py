from __future__ import annotations
import re
from typing import Sequence, Mapping, Any, Optional
import structlog

from feedback_api.domain.interfaces.feedback_repo import FeedbackRepository
from feedback_api.domain.entities.feedback import Feedback, ManagementResponse, DEFAULT_CATEGORY, DEFAULT_STATUS
from feedback_api.domain.errors import (
    MissingFieldError, InvalidFormatError, OutOfRangeError, InvalidRequestError, NotFoundError,
)
from feedback_api.services.sentiment import score_sentiment
from feedback_api.services.analytics_service import summarize

logger = structlog.get_logger("feedback-service")

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
REQUIRED_FIELDS = ("customer_name", "customer_email", "property_id", "rating", "comments")
MIN_RATING, MAX_RATING = 1, 5

def _missing(v: Any) -> bool:
    return v is None or v == ""

class FeedbackService:
    def __init__(self, repo: FeedbackRepository):
        self.repo = repo

    def create_feedback(self, *, customer_name:str|None, customer_email:str|None, property_id:str|None,
                        rating:int|None, comments:str|None, category:str|None=None) -> Feedback:
        values = {
            "customer_name": customer_name,
            "customer_email": customer_email,
            "property_id": property_id,
            "rating": rating,
            "comments": comments,
        }
        missing = [k for k in REQUIRED_FIELDS if _missing(values[k])]
        if missing:
            logger.info("feedback rejected", reason="missing_fields", fields=missing)
            raise MissingFieldError()
        if not EMAIL_RE.fullmatch(customer_email):
            raise InvalidFormatError("Invalid email format")
        if not MIN_RATING <= rating <= MAX_RATING:
            raise OutOfRangeError(f"Rating must be between {MIN_RATING} and {MAX_RATING}")

        obj = Feedback(
            customer_name=customer_name,
            customer_email=customer_email,
            property_id=property_id,
            rating=rating,
            comments=comments,
            category=category or DEFAULT_CATEGORY,
            sentiment_score=score_sentiment(comments),
            status=DEFAULT_STATUS,
        )
        self.repo.add(obj)
        logger.info("feedback created", feedback_id=obj.feedback_id, property_id=property_id,
                    rating=rating, sentiment_score=obj.sentiment_score)
        return obj

    def list_feedback(self, *, property_id:str|None=None, category:str|None=None, status:str|None=None,
                      limit:int=20, offset:int=0) -> Sequence[Feedback]:
        if limit < 0:
            raise InvalidRequestError("Invalid value for 'limit'. Must be a positive integer.")
        if offset < 0:
            raise InvalidRequestError("Invalid value for 'offset'. Must be a non-negative integer.")

        filters = {"property_id": property_id, "category": category, "status": status}
        active = {k: v for k, v in filters.items() if v}
        items = [f for f in self.repo.list() if all(getattr(f, k) == v for k, v in active.items())]
        return items[offset:offset + limit]

    def get_feedback(self, feedback_id:str) -> Feedback:
        obj = self.repo.get(feedback_id)
        if obj is None:
            raise NotFoundError(feedback_id)
        return obj

    def update_feedback(self, feedback_id:str, changes:Mapping[str, Any]) -> Feedback:
        obj = self.repo.update(feedback_id, changes)
        if obj is None:
            raise NotFoundError(feedback_id)
        logger.info("feedback updated", feedback_id=feedback_id, fields=sorted(changes))
        return obj

    def add_response(self, feedback_id:str, response:Optional[str]) -> ManagementResponse:
        if _missing(response):
            raise MissingFieldError("Missing required field: response")
        if self.repo.get(feedback_id) is None:
            raise NotFoundError(feedback_id)
        obj = self.repo.add_response(ManagementResponse(feedback_id=feedback_id, response=response))
        logger.info("response posted", feedback_id=feedback_id, response_id=obj.response_id)
        return obj

    def summary(self) -> dict:
        return summarize(self.repo.list())
