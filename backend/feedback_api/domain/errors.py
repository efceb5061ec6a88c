from __future__ import annotations


class FeedbackAPIError(Exception):
    status_code: int = 500
    message: str = "Internal Server Error"

    def __init__(self, message: str | None = None):
        self.message = message or self.message
        super().__init__(self.message)


class UnauthorizedError(FeedbackAPIError):
    status_code = 401
    message = "Unauthorized"


class InvalidRequestError(FeedbackAPIError):
    status_code = 400
    message = "Invalid request"


class MissingFieldError(InvalidRequestError):
    message = "Missing required fields"


class InvalidFormatError(InvalidRequestError):
    message = "Invalid format"


class OutOfRangeError(InvalidRequestError):
    message = "Value out of range"


class NotFoundError(FeedbackAPIError):
    status_code = 404

    def __init__(self, resource_id: str):
        self.resource_id = resource_id
        super().__init__(f"Feedback not found for ID: {resource_id}")
