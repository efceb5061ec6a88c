from typing import Protocol, Sequence, Optional, Mapping, Any
from feedback_api.domain.entities.feedback import Feedback, ManagementResponse

class FeedbackRepository(Protocol):
    def add(self, feedback: Feedback) -> Feedback: ...
    def get(self, feedback_id: str) -> Optional[Feedback]: ...
    def list(self) -> Sequence[Feedback]: ...
    def update(self, feedback_id: str, changes: Mapping[str, Any]) -> Optional[Feedback]: ...
    def add_response(self, response: ManagementResponse) -> ManagementResponse: ...
    def list_responses(self) -> Sequence[ManagementResponse]: ...
