import pytest

from config import TestConfig
from feedback_service import create_app
from feedback_service.extensions import db
from feedback_service.models.feedback import Feedback
from feedback_service.services.feedback_service import FeedbackService


@pytest.fixture(scope="module")
def app():
    app = create_app(TestConfig)
    with app.app_context():
        db.create_all()
    yield app


@pytest.fixture()
def client(app):
    return app.test_client()


def test_list_feedbacks_returns_sample_set(client):
    r = client.get("/api/feedbacks")
    assert r.status_code == 200, r.data
    body = r.get_json()
    assert body["success"] is True
    assert body["error"] is None
    assert len(body["result"]) == 10
    first = body["result"][0]
    assert first["id"] == "1"
    assert first["eventId"] == "evt-1"
    assert first["categoryName"] == "Music"
    assert first["createdAt"].startswith("2029-04-22")


def test_get_feedback_by_id(client):
    r = client.get("/api/feedbacks/4")
    assert r.status_code == 200, r.data
    item = r.get_json()["result"]
    assert item["eventName"] == "Culinary Delights Festival"
    assert item["rating"] == 4
    assert item["isAnonymous"] is False


def test_get_feedback_not_found(client):
    r = client.get("/api/feedbacks/nonexistent-id")
    assert r.status_code == 404
    err = r.get_json()["error"]
    assert err["code"] == "NOT_FOUND"
    assert err["message"] == "Feedback not found"


def test_feedbacks_by_event(client):
    r = client.get("/api/feedbacks/event/evt-1")
    assert r.status_code == 200, r.data
    items = r.get_json()["result"]
    assert len(items) == 1
    assert items[0]["eventName"] == "Echo Beats Festival"
    assert items[0]["rating"] == 5


def test_feedbacks_by_unknown_event_is_empty_success(client):
    r = client.get("/api/feedbacks/event/evt-404")
    assert r.status_code == 200
    body = r.get_json()
    assert body["success"] is True
    assert body["result"] == []


def test_statistics(client):
    r = client.get("/api/feedbacks/statistics")
    assert r.status_code == 200
    body = r.get_json()
    assert body["success"] is True
    stats = body["result"]
    assert stats["overallRating"] == 4.8
    assert stats["totalReviews"] == 15545
    months = [m["month"] for m in stats["monthlyData"]]
    assert months[0] == "Jan" and months[-1] == "Dec"
    assert len(months) == 12
    assert stats["monthlyData"][5] == {"month": "Jun", "rating1To3": 720, "rating4To5": 950}


def test_create_feedback(client, app):
    r = client.post("/api/feedbacks", json={
        "eventId": "evt-200",
        "userId": "user-200",
        "userName": "Jane Doe",
        "content": "Great show",
        "rating": 4,
        "venueRating": 5,
    })
    assert r.status_code == 200, r.data
    body = r.get_json()
    assert body["success"] is True
    created = body["result"]
    assert created["id"]
    assert created["eventId"] == "evt-200"
    assert created["userId"] == "user-200"
    assert created["rating"] == 4

    with app.app_context():
        stored = db.session.get(Feedback, created["id"])
        assert stored is not None
        assert stored.content == "Great show"


def test_create_does_not_change_listing(client):
    client.post("/api/feedbacks", json={"eventId": "evt-1", "rating": 3})
    r = client.get("/api/feedbacks")
    assert len(r.get_json()["result"]) == 10
    r = client.get("/api/feedbacks/event/evt-1")
    assert len(r.get_json()["result"]) == 1


def test_create_anonymous_feedback_has_no_user(client, app):
    r = client.post("/api/feedbacks", json={
        "eventId": "evt-300",
        "rating": 2,
        "content": "Too loud",
        "isAnonymous": True,
    })
    assert r.status_code == 200, r.data
    created = r.get_json()["result"]
    assert created["isAnonymous"] is True
    assert created["userId"] is None
    assert created["userName"] is None

    with app.app_context():
        stored = db.session.get(Feedback, created["id"])
        assert stored.is_anonymous is True
        assert stored.user_id is None
        assert stored.user_name is None


@pytest.mark.parametrize("rating", [0, 6, -1, "5", None])
def test_create_rejects_invalid_rating(client, monkeypatch, rating):
    called = []
    monkeypatch.setattr(FeedbackService, "create_feedback", lambda self, data: called.append(data))

    r = client.post("/api/feedbacks", json={"eventId": "evt-1", "rating": rating})
    assert r.status_code == 400, r.data
    err = r.get_json()["error"]
    assert err["code"] == "VALIDATION_ERROR"
    assert "rating" in err["details"]
    assert called == []


def test_create_rejects_missing_event_id(client):
    r = client.post("/api/feedbacks", json={"rating": 5})
    assert r.status_code == 400
    assert "eventId" in r.get_json()["error"]["details"]

    r = client.post("/api/feedbacks", json={"eventId": "", "rating": 5})
    assert r.status_code == 400
    assert "eventId" in r.get_json()["error"]["details"]


def test_create_rejects_out_of_range_sub_rating(client):
    r = client.post("/api/feedbacks", json={
        "eventId": "evt-1",
        "rating": 5,
        "staffSupportRating": 9,
    })
    assert r.status_code == 400
    assert "staffSupportRating" in r.get_json()["error"]["details"]


def test_create_store_failure_is_server_error(client, monkeypatch):
    from feedback_service.repositories.feedback_repository import FeedbackRepository
    from feedback_service.utils.result import Err

    monkeypatch.setattr(FeedbackRepository, "add", lambda self, entity: Err("database is unavailable"))

    r = client.post("/api/feedbacks", json={"eventId": "evt-1", "rating": 5})
    assert r.status_code == 500
    err = r.get_json()["error"]
    assert err["code"] == "SERVER_ERROR"
    assert err["message"] == "database is unavailable"


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    body = r.get_json()
    assert body["status"] == "online"
    assert body["database"] == "healthy"


def test_created_at_is_serialized_as_utc(client):
    r = client.post("/api/feedbacks", json={"eventId": "evt-400", "rating": 5})
    assert r.status_code == 200, r.data
    assert r.get_json()["result"]["createdAt"].endswith("+00:00")

    r = client.get("/api/feedbacks/1")
    assert r.get_json()["result"]["createdAt"] == "2029-04-22T00:00:00+00:00"
