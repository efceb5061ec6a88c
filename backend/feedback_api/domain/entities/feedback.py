from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
import uuid

DEFAULT_CATEGORY = "General"
DEFAULT_STATUS = "open"

def utcnow() -> datetime:
    return datetime.now(timezone.utc)

def new_id() -> str:
    return str(uuid.uuid4())

@dataclass
class Feedback:
    customer_name: str
    customer_email: str
    property_id: str
    rating: int  # 1..5
    comments: str
    sentiment_score: float
    category: str | None = DEFAULT_CATEGORY
    # open string, no transition graph
    status: str | None = DEFAULT_STATUS
    feedback_id: str = field(default_factory=new_id)
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        if self.updated_at is None:
            self.updated_at = self.created_at

@dataclass
class ManagementResponse:
    feedback_id: str
    response: str
    response_id: str = field(default_factory=new_id)
    created_at: datetime = field(default_factory=utcnow)
