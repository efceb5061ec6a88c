import pytest
from fastapi.testclient import TestClient

from feedback_api.main import create_app
from feedback_api.infrastructure.repositories.feedback_repo_memory import InMemoryFeedbackRepository
from feedback_api.services.feedback_service import FeedbackService

AUTH = {"Authorization": "Bearer test-token"}


def feedback_payload(**overrides):
    data = {
        "customer_name": "Jane Guest",
        "customer_email": "jane@example.com",
        "property_id": "prop-1",
        "rating": 4,
        "category": "Room",
        "comments": "The room was great and clean",
    }
    data.update(overrides)
    return data


@pytest.fixture
def repo():
    return InMemoryFeedbackRepository()


@pytest.fixture
def service(repo):
    return FeedbackService(repo)


@pytest.fixture
def app(repo):
    # fresh store per test
    return create_app(repo=repo)


@pytest.fixture
def client(app):
    return TestClient(app, headers=AUTH)


@pytest.fixture
def anon_client(app):
    return TestClient(app)
