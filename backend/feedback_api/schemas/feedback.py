from datetime import datetime
from typing import Optional, Dict
from pydantic import BaseModel, Field, field_validator

# all optional: missing required fields are reported by FeedbackService
class FeedbackCreate(BaseModel):
    customer_name: Optional[str] = None
    customer_email: Optional[str] = None
    property_id: Optional[str] = None
    rating: Optional[int] = None
    category: Optional[str] = None
    comments: Optional[str] = None

    @field_validator("rating", mode="before")
    @classmethod
    def _no_bool_rating(cls, v):
        # JSON true/false would otherwise coerce to 1/0
        if isinstance(v, bool):
            raise ValueError("rating must be an integer")
        return v

class FeedbackUpdate(BaseModel):
    category: Optional[str] = None
    status: Optional[str] = None

class FeedbackOut(BaseModel):
    feedback_id: str
    customer_name: str
    customer_email: str
    property_id: str
    rating: int
    category: Optional[str]
    comments: str
    sentiment_score: float
    status: Optional[str]
    created_at: datetime
    updated_at: datetime

class ResponseCreate(BaseModel):
    response: Optional[str] = None

class ResponseOut(BaseModel):
    message: str = "Response posted successfully"
    response_id: str
    feedback_id: str
    response: str
    created_at: datetime

class AnalyticsSummaryOut(BaseModel):
    total_feedback: int
    average_rating: float
    category_counts: Dict[str, int] = Field(default_factory=dict)
    sentiment_average: float
