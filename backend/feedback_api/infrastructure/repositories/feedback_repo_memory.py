from __future__ import annotations
import threading
from dataclasses import replace
from typing import Sequence, Optional, Mapping, Any
from feedback_api.domain.entities.feedback import Feedback, ManagementResponse, utcnow

UPDATABLE_FIELDS = ("category", "status")

class InMemoryFeedbackRepository:
    """Process-local store for feedback and management responses.

    Both sequences keep insertion order. Every call takes the same lock and
    hands back copies, so callers never hold a reference into the store.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._feedback: list[Feedback] = []
        self._responses: list[ManagementResponse] = []

    def add(self, feedback: Feedback) -> Feedback:
        with self._lock:
            self._feedback.append(replace(feedback))
        return feedback

    def get(self, feedback_id: str) -> Optional[Feedback]:
        with self._lock:
            obj = self._find(feedback_id)
            return replace(obj) if obj else None

    def list(self) -> Sequence[Feedback]:
        with self._lock:
            return [replace(f) for f in self._feedback]

    def update(self, feedback_id: str, changes: Mapping[str, Any]) -> Optional[Feedback]:
        unknown = set(changes) - set(UPDATABLE_FIELDS)
        if unknown:
            raise ValueError(f"Fields not updatable: {sorted(unknown)}")
        with self._lock:
            obj = self._find(feedback_id)
            if obj is None:
                return None
            for k, v in changes.items():
                setattr(obj, k, v)
            obj.updated_at = utcnow()
            return replace(obj)

    def add_response(self, response: ManagementResponse) -> ManagementResponse:
        with self._lock:
            self._responses.append(replace(response))
        return response

    def list_responses(self) -> Sequence[ManagementResponse]:
        with self._lock:
            return [replace(r) for r in self._responses]

    def _find(self, feedback_id: str) -> Optional[Feedback]:
        for f in self._feedback:
            if f.feedback_id == feedback_id:
                return f
        return None
