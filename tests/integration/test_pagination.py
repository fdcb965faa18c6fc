from datetime import timedelta

import pytest
from fastapi.testclient import TestClient

from tests.helpers.asserts import api_call, assert_error


@pytest.fixture
def twenty_five_lessons(lesson_factory, now):
    return [
        lesson_factory(title=f"Lesson {i}", created_at=now - timedelta(minutes=25 - i))
        for i in range(25)
    ]


def test_second_page(client: TestClient, twenty_five_lessons):
    body = api_call(client, "GET", "/api/lessons", params={"page": 2, "limit": 10}).json()
    assert len(body["items"]) == 10
    assert body["pagination"] == {"page": 2, "limit": 10, "total": 25, "pages": 3}
    assert body["items"][0]["title"] == "Lesson 14"
    assert body["items"][-1]["title"] == "Lesson 5"


def test_last_and_past_last_page(client: TestClient, twenty_five_lessons):
    body = api_call(client, "GET", "/api/lessons", params={"page": 3, "limit": 10}).json()
    assert [l["title"] for l in body["items"]] == [f"Lesson {i}" for i in range(4, -1, -1)]

    body = api_call(client, "GET", "/api/lessons", params={"page": 9, "limit": 10}).json()
    assert body["items"] == []
    assert body["pagination"]["total"] == 25


def test_page_size_alias(client: TestClient, twenty_five_lessons):
    body = api_call(client, "GET", "/api/lessons", params={"pageSize": 5}).json()
    assert body["pagination"] == {"page": 1, "limit": 5, "total": 25, "pages": 5}
    assert body["items"][0]["title"] == "Lesson 24"


def test_pages_never_overlap(client: TestClient, twenty_five_lessons):
    seen = []
    for page in range(1, 4):
        body = api_call(client, "GET", "/api/lessons", params={"page": page, "limit": 10}).json()
        seen.extend(l["id"] for l in body["items"])
    assert len(seen) == len(set(seen)) == 25


@pytest.mark.parametrize("params", [{"page": 0}, {"limit": 0}, {"limit": 101}, {"pageSize": 500}])
def test_invalid_paging(client: TestClient, params):
    assert_error(client.get("/api/lessons", params=params), 400, "Request validation failed")
