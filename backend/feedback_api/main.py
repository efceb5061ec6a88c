# feedback_api/main.py
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from feedback_api.core.config import settings
from feedback_api.core.logging import setup_logging
from feedback_api.domain.errors import FeedbackAPIError
from feedback_api.domain.interfaces.credential_validator import CredentialValidator
from feedback_api.domain.interfaces.feedback_repo import FeedbackRepository
from feedback_api.infrastructure.repositories.feedback_repo_memory import InMemoryFeedbackRepository
from feedback_api.validators.factory import get_validator
from feedback_api.api.v1.routers.feedback import router as feedback_router
from feedback_api.api.v1.routers.analytics import router as analytics_router
from feedback_api.api.v1.routers.health import router as health_router

from feedback_api.middleware.error_handler import (
    api_error_handler, validation_error_handler, http_exception_handler, http_error_handler,
)
from feedback_api.middleware.request_id import RequestIDMiddleware
from feedback_api.middleware.request_timing import RequestTimingMiddleware

logger = structlog.get_logger("feedback-api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Customer Feedback Management API running", port=settings.port)
    logger.info("Health check", url=f"http://localhost:{settings.port}/health")
    yield


def create_app(
    repo: FeedbackRepository | None = None,
    validator: CredentialValidator | None = None,
) -> FastAPI:
    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    app.state.feedback_repo = repo if repo is not None else InMemoryFeedbackRepository()
    app.state.credential_validator = validator if validator is not None else get_validator()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in settings.cors_origins.split(",")] if settings.cors_origins else ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(RequestTimingMiddleware)

    app.include_router(feedback_router)
    app.include_router(analytics_router)
    app.include_router(health_router)

    app.add_exception_handler(FeedbackAPIError, api_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, http_error_handler)
    return app


setup_logging()
app = create_app()


def run() -> None:
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    run()
