import threading
import pytest
from feedback_api.domain.entities.feedback import Feedback, ManagementResponse
from feedback_api.infrastructure.repositories.feedback_repo_memory import InMemoryFeedbackRepository


def make(**kw):
    data = dict(customer_name="A", customer_email="a@b.co", property_id="p1", rating=3,
                comments="ok", sentiment_score=0.5)
    data.update(kw)
    return Feedback(**data)


def test_new_feedback_defaults():
    fb = make()
    assert fb.category == "General"
    assert fb.status == "open"
    assert fb.created_at == fb.updated_at
    assert fb.feedback_id

def test_ids_are_unique():
    assert make().feedback_id != make().feedback_id

def test_list_preserves_insertion_order():
    repo = InMemoryFeedbackRepository()
    items = [repo.add(make(property_id=f"p{i}")) for i in range(5)]
    assert [f.feedback_id for f in repo.list()] == [f.feedback_id for f in items]

def test_get_unknown_returns_none():
    assert InMemoryFeedbackRepository().get("missing") is None

def test_returned_records_are_copies():
    repo = InMemoryFeedbackRepository()
    fb = repo.add(make())
    got = repo.get(fb.feedback_id)
    got.status = "tampered"
    assert repo.get(fb.feedback_id).status == "open"

def test_update_changes_only_given_fields():
    repo = InMemoryFeedbackRepository()
    fb = repo.add(make(category="Room"))
    updated = repo.update(fb.feedback_id, {"status": "closed"})
    assert updated.status == "closed"
    assert updated.category == "Room"
    assert updated.updated_at >= fb.updated_at
    assert updated.created_at == fb.created_at

def test_update_unknown_returns_none():
    assert InMemoryFeedbackRepository().update("missing", {"status": "x"}) is None

def test_update_rejects_other_fields():
    repo = InMemoryFeedbackRepository()
    fb = repo.add(make())
    with pytest.raises(ValueError):
        repo.update(fb.feedback_id, {"rating": 5})

def test_responses_are_stored_in_order():
    repo = InMemoryFeedbackRepository()
    r1 = repo.add_response(ManagementResponse(feedback_id="f1", response="thanks"))
    r2 = repo.add_response(ManagementResponse(feedback_id="f1", response="fixed"))
    assert [r.response_id for r in repo.list_responses()] == [r1.response_id, r2.response_id]

def test_concurrent_adds_and_updates():
    repo = InMemoryFeedbackRepository()
    seed = repo.add(make())

    def writer():
        for _ in range(100):
            repo.add(make())
            repo.update(seed.feedback_id, {"status": "in_progress"})

    threads = [threading.Thread(target=writer) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    ids = [f.feedback_id for f in repo.list()]
    assert len(ids) == len(set(ids)) == 8 * 100 + 1
    assert ids[0] == seed.feedback_id
    assert repo.get(seed.feedback_id).status == "in_progress"
