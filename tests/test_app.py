from fastapi.testclient import TestClient

from mentor_match.config import get_settings
from mentor_match.constants import ErrorMessages
from mentor_match.database import SessionLocal
from mentor_match.main import app
from mentor_match.models import User
from mentor_match.services.user_service import UserService


def test_root_redirects_to_docs(client):
    response = client.get("/", follow_redirects=False)
    assert response.status_code == 307
    assert response.headers["location"] == "/docs"


def test_openapi_lists_matching_routes(client):
    paths = client.get("/openapi.json").json()["paths"]
    assert "/api/matching-requests" in paths
    assert "/api/matching-requests/{request_id}" in paths
    assert "/api/mentors" in paths


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_unknown_route_is_json_404(client):
    response = client.get("/api/nothing-here")
    assert response.status_code == 404
    assert response.json() == {"detail": "Not Found"}


def test_seed_default_accounts_is_idempotent(db):
    service = UserService(db)
    service.seed_default_accounts()
    service.seed_default_accounts()

    users = {user.email: user for user in db.query(User).all()}
    assert set(users) == {"mentor@test.com", "mentee@test.com"}
    assert users["mentor@test.com"].role == "mentor"
    assert "React" in users["mentor@test.com"].skills
    assert users["mentee@test.com"].skills is None


def test_default_accounts_can_log_in(client, db):
    UserService(db).seed_default_accounts()
    response = client.post("/api/login", json={"email": "mentee@test.com", "password": "password123"})
    assert response.status_code == 200


def test_startup_skips_seeding_when_disabled():
    assert get_settings().SEED_DEFAULT_ACCOUNTS is False
    with TestClient(app) as started:
        assert started.get("/health").status_code == 200
    with SessionLocal() as session:
        assert session.query(User).count() == 0


def test_requests_over_the_limit_get_429(client):
    limit = get_settings().RATE_LIMIT_REQUESTS
    for _ in range(limit):
        assert client.get("/api/mentors").status_code == 401

    response = client.get("/api/mentors")
    assert response.status_code == 429
    assert response.json() == {"detail": ErrorMessages.TOO_MANY_REQUESTS}
    # the limit is per client, across routes
    assert client.post("/api/login", json={"email": "a@b.com", "password": "x"}).status_code == 429


def test_health_is_not_rate_limited(client):
    limit = get_settings().RATE_LIMIT_REQUESTS
    for _ in range(limit + 5):
        assert client.get("/health").status_code == 200
