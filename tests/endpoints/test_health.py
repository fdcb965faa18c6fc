from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

import main
from app.services.lesson import lesson_service
from app.utils import deps
from tests.helpers.asserts import api_call, assert_error


def test_health(client: TestClient):
    body = api_call(client, "GET", "/api/health").json()
    assert body["status"] == "OK"
    assert body["service"]
    assert body["timestamp"]


def test_unknown_route(client: TestClient):
    r = client.get("/api/does-not-exist")
    assert_error(r, 404, "Route not found", code="NOT_FOUND")
    body = r.json()
    assert body["path"] == "/api/does-not-exist"
    assert body["request_id"]


def test_request_id_header(client: TestClient):
    r = client.get("/api/health", headers={"X-Request-ID": "abc-123"})
    assert r.headers["X-Request-ID"] == "abc-123"


def test_persistence_failure_is_reported(client: TestClient, monkeypatch):
    def _broken(*args, **kwargs):
        raise OperationalError("SELECT lessons", {}, Exception("database is locked"))

    monkeypatch.setattr(lesson_service, "list_lessons", _broken)
    r = client.get("/api/lessons")
    assert_error(r, 500, "Database operation failed", code="PERSISTENCE_ERROR")
    assert "database is locked" in r.json()["message"]
    assert r.headers["X-Request-ID"] == r.json()["request_id"]


def test_unhandled_error_keeps_request_id(db_session, monkeypatch):
    def _broken(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr(lesson_service, "list_lessons", _broken)
    main.app.dependency_overrides[deps.get_db] = lambda: db_session
    try:
        with TestClient(main.app, raise_server_exceptions=False) as client:
            r = client.get("/api/lessons", headers={"X-Request-ID": "trace-500"})
    finally:
        main.app.dependency_overrides.clear()

    assert_error(r, 500, "Something went wrong!", code="INTERNAL_SERVER_ERROR")
    body = r.json()
    assert body["message"] == "boom"
    assert body["details"] == {"error_type": "RuntimeError"}
    assert body["request_id"] == "trace-500"
    assert r.headers["X-Request-ID"] == "trace-500"


def test_error_responses_carry_request_id(client: TestClient):
    r = client.get("/api/lessons/999", headers={"X-Request-ID": "trace-404"})
    assert r.status_code == 404
    assert r.json()["request_id"] == "trace-404"
    assert r.headers["X-Request-ID"] == "trace-404"
