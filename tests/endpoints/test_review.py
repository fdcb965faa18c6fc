from datetime import timedelta

from fastapi.testclient import TestClient

from app.schemas.review import Review
from tests.helpers.asserts import api_call, assert_error
from tests.helpers.contract import validate_paginated, validate_response_schema


def test_public_review_submission(client: TestClient):
    r = api_call(client, "POST", "/api/reviews",
                 json={"student_name": "Layla", "rating": 4, "comment": "Clear explanations"}, expected_status=201)
    body = r.json()
    validate_response_schema(body, Review)
    assert body["rating"] == 4
    assert body["date"]


def test_review_rating_out_of_range(client: TestClient):
    r = client.post("/api/reviews", json={"student_name": "Layla", "rating": 6, "comment": "Too good"})
    assert_error(r, 400, "Rating must be between 1 and 5")

    r = client.post("/api/reviews", json={"student_name": "Layla", "rating": 0, "comment": "Meh"})
    assert_error(r, 400, "Rating must be between 1 and 5")


def test_review_required_fields(client: TestClient):
    r = client.post("/api/reviews", json={"student_name": "Layla", "rating": 5})
    assert_error(r, 400, "Student name, rating, and comment are required")


def test_list_reviews_summary(client: TestClient, review_factory, now):
    review_factory(student_name="A", rating=5, date=now - timedelta(days=2))
    review_factory(student_name="B", rating=4, date=now - timedelta(days=1))
    review_factory(student_name="C", rating=4, date=now)

    body = api_call(client, "GET", "/api/reviews").json()
    pagination = validate_paginated(body, Review)
    assert pagination["limit"] == 10
    assert body["totalReviews"] == 3
    assert body["averageRating"] == 4.3
    assert [r["student_name"] for r in body["items"]] == ["C", "B", "A"]

    body = api_call(client, "GET", "/api/reviews", params={"rating": 4}).json()
    assert body["totalReviews"] == 2
    # the summary is site-wide, not per filter
    assert body["averageRating"] == 4.3


def test_list_reviews_empty(client: TestClient):
    body = api_call(client, "GET", "/api/reviews").json()
    assert body["items"] == []
    assert body["averageRating"] == 0
    assert body["pagination"] == {"page": 1, "limit": 10, "total": 0, "pages": 0}


def test_update_and_delete_review(client: TestClient, auth_headers, review_factory):
    review = review_factory(rating=3)
    assert client.put(f"/api/reviews/{review.id}", json={"rating": 5}).status_code == 401

    body = api_call(client, "PUT", f"/api/reviews/{review.id}", headers=auth_headers, json={"rating": 5}).json()
    assert body["rating"] == 5
    assert body["comment"] == review.comment

    r = client.put(f"/api/reviews/{review.id}", headers=auth_headers, json={"rating": 9})
    assert_error(r, 400, "Rating must be between 1 and 5")

    r = api_call(client, "DELETE", f"/api/reviews/{review.id}", headers=auth_headers)
    assert r.json()["message"] == "Review deleted successfully"
    assert_error(client.get(f"/api/reviews/{review.id}"), 404, "Review not found")
