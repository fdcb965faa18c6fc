from datetime import timedelta

from fastapi.testclient import TestClient

from app.schemas.dashboard import AnalyticsResponse, DashboardStats
from tests.helpers.asserts import api_call, assert_error
from tests.helpers.contract import validate_response_schema


class TestDashboardEndpoints:
    def test_stats_on_empty_database(self, client: TestClient, auth_headers):
        body = api_call(client, "GET", "/api/dashboard/stats", headers=auth_headers).json()
        assert body == {
            "lessons": 0,
            "videos": 0,
            "files": 0,
            "reviews": 0,
            "messages": 0,
            "unreadMessages": 0,
            "totalViews": 0,
            "totalDownloads": 0,
            "averageRating": 0,
        }

    def test_stats_aggregate(
        self, client: TestClient, auth_headers, lesson_factory, video_factory, file_factory,
        review_factory, message_factory
    ):
        lesson = lesson_factory()
        video_factory(lesson.id, views=10)
        video_factory(lesson.id, views=5)
        file_factory(lesson.id, downloads=3)
        review_factory(rating=5)
        review_factory(rating=2)
        message_factory()
        message_factory(is_read=True)

        body = api_call(client, "GET", "/api/dashboard/stats", headers=auth_headers).json()
        validate_response_schema(body, DashboardStats)
        assert body["lessons"] == 1
        assert body["videos"] == 2
        assert body["files"] == 1
        assert body["messages"] == 2
        assert body["unreadMessages"] == 1
        assert body["totalViews"] == 15
        assert body["totalDownloads"] == 3
        assert body["averageRating"] == 3.5

    def test_dashboard_requires_token(self, client: TestClient):
        for path in ("/stats", "/recent-messages", "/recent-reviews", "/popular-lessons",
                     "/popular-videos", "/analytics"):
            assert_error(client.get(f"/api/dashboard{path}"), 401, "No token provided")

    def test_recent_and_popular_listings(
        self, client: TestClient, auth_headers, lesson_factory, video_factory, message_factory, review_factory, now
    ):
        for i in range(7):
            message_factory(student_name=f"Student {i}", created_at=now - timedelta(minutes=10 - i))
        body = api_call(client, "GET", "/api/dashboard/recent-messages", headers=auth_headers).json()
        assert [m["student_name"] for m in body] == [f"Student {i}" for i in (6, 5, 4, 3, 2)]

        review_factory(student_name="Old", date=now - timedelta(days=3))
        review_factory(student_name="New", date=now)
        body = api_call(client, "GET", "/api/dashboard/recent-reviews", headers=auth_headers,
                        params={"limit": 1}).json()
        assert [r["student_name"] for r in body] == ["New"]

        small = lesson_factory(title="Small", video_count=1)
        big = lesson_factory(title="Big", video_count=4)
        body = api_call(client, "GET", "/api/dashboard/popular-lessons", headers=auth_headers).json()
        assert [l["title"] for l in body] == ["Big", "Small"]

        video_factory(small.id, title="Quiet", views=1)
        video_factory(big.id, title="Viral", views=900)
        body = api_call(client, "GET", "/api/dashboard/popular-videos", headers=auth_headers).json()
        assert [v["title"] for v in body] == ["Viral", "Quiet"]

    def test_analytics_default_period(
        self, client: TestClient, auth_headers, lesson_factory, video_factory, message_factory, now
    ):
        lesson = lesson_factory(created_at=now - timedelta(hours=2))
        lesson_factory(title="Older", created_at=now - timedelta(days=3, hours=12))
        lesson_factory(title="Ancient", created_at=now - timedelta(days=40))
        video_factory(lesson.id, created_at=now - timedelta(hours=1))
        message_factory(created_at=now - timedelta(days=6, hours=12))

        body = api_call(client, "GET", "/api/dashboard/analytics", headers=auth_headers).json()
        AnalyticsResponse.model_validate(body)
        assert body["period"] == "7d"
        assert len(body["lessons"]) == len(body["videos"]) == len(body["messages"]) == 7
        assert [b["index"] for b in body["lessons"]] == list(range(7))
        assert body["totalLessons"] == 2
        assert body["totalVideos"] == 1
        assert body["totalMessages"] == 1

        lesson_counts = [b["count"] for b in body["lessons"]]
        assert lesson_counts[6] == 1
        assert lesson_counts[3] == 1
        assert sum(lesson_counts) == 2
        assert body["videos"][6]["count"] == 1
        assert body["messages"][0]["count"] == 1

        dates = [b["date"] for b in body["lessons"]]
        assert dates == sorted(dates)

    def test_analytics_periods(self, client: TestClient, auth_headers, lesson_factory, now):
        lesson_factory(created_at=now - timedelta(minutes=30))
        lesson_factory(created_at=now - timedelta(days=20))

        body = api_call(client, "GET", "/api/dashboard/analytics", headers=auth_headers,
                        params={"period": "1d"}).json()
        assert len(body["lessons"]) == 24
        assert body["totalLessons"] == 1
        assert body["lessons"][-1]["count"] == 1
        assert all(len(b["date"]) == 5 and b["date"].endswith(":00") for b in body["lessons"])

        body = api_call(client, "GET", "/api/dashboard/analytics", headers=auth_headers,
                        params={"period": "30d"}).json()
        assert len(body["lessons"]) == 30
        assert body["totalLessons"] == 2

    def test_analytics_invalid_period(self, client: TestClient, auth_headers):
        r = client.get("/api/dashboard/analytics", headers=auth_headers, params={"period": "90d"})
        assert_error(r, 400, "Request validation failed", code="VALIDATION_ERROR")


class TestSiteSettingsEndpoints:
    def test_settings_are_public_with_defaults(self, client: TestClient):
        body = api_call(client, "GET", "/api/dashboard/settings").json()
        assert body["primary_color"] == "#2563eb"
        assert body["secondary_color"] == "#f59e0b"
        assert body["updated_at"]

    def test_update_settings(self, client: TestClient, auth_headers):
        assert client.put("/api/dashboard/settings", json={"hero_title": "x"}).status_code == 401

        body = api_call(client, "PUT", "/api/dashboard/settings", headers=auth_headers,
                        json={"hero_title": "Learn maths with confidence", "primary_color": "#111111"}).json()
        assert body["hero_title"] == "Learn maths with confidence"
        assert body["primary_color"] == "#111111"
        assert body["secondary_color"] == "#f59e0b"

        body = api_call(client, "GET", "/api/dashboard/settings").json()
        assert body["hero_title"] == "Learn maths with confidence"
