from __future__ import annotations
from collections import Counter
from typing import Iterable
from feedback_api.domain.entities.feedback import Feedback

def summarize(records: Iterable[Feedback]) -> dict:
    data = list(records)
    total = len(data)
    if not total:
        return {
            "total_feedback": 0,
            "average_rating": 0,
            "category_counts": {},
            "sentiment_average": 0,
        }

    rating_sum = sum(f.rating for f in data)
    sentiment_sum = sum(f.sentiment_score for f in data)
    # a category patched to null is reported under "null", as JSON would key it
    categories = Counter("null" if f.category is None else f.category for f in data)

    return {
        "total_feedback": total,
        "average_rating": round(rating_sum / total, 2),
        "category_counts": dict(categories),
        "sentiment_average": round(sentiment_sum / total, 2),
    }
