from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from app.models.file import LessonFile
from app.models.video import Video


def test_lesson_deletion_cascade(client: TestClient, auth_headers, db_session: Session):
    """
    Delete a lesson with two videos and three files.
    Every child must be gone afterwards and nothing else touched.
    """
    print("\n[TEST] Lesson deletion cascade")

    print("[1] Creating lessons")
    r = client.post("/api/lessons", headers=auth_headers, json={"title": "Fractions", "level": "beginner"})
    assert r.status_code == 201, r.text
    lesson_id = r.json()["id"]
    r = client.post("/api/lessons", headers=auth_headers, json={"title": "Decimals", "level": "beginner"})
    survivor_id = r.json()["id"]

    print("[2] Attaching videos and files")
    video_ids = []
    for i in range(2):
        r = client.post("/api/videos", headers=auth_headers,
                        json={"lesson_id": lesson_id, "title": f"Video {i}", "url": f"https://v/{i}"})
        assert r.status_code == 201, r.text
        video_ids.append(r.json()["id"])

    file_ids = []
    for i in range(3):
        r = client.post("/api/files", headers=auth_headers,
                        json={"lesson_id": lesson_id, "name": f"Sheet {i}", "url": f"https://f/{i}"})
        assert r.status_code == 201, r.text
        file_ids.append(r.json()["id"])

    r = client.post("/api/videos", headers=auth_headers,
                    json={"lesson_id": survivor_id, "title": "Keep me", "url": "https://v/keep"})
    keep_video_id = r.json()["id"]

    detail = client.get(f"/api/lessons/{lesson_id}").json()
    assert detail["video_count"] == 2
    assert detail["file_count"] == 3
    print("[OK] Children attached")

    print("[3] Deleting lesson")
    r = client.delete(f"/api/lessons/{lesson_id}", headers=auth_headers)
    assert r.status_code == 200, r.text
    assert r.json()["message"] == "Lesson deleted successfully"

    print("[4] Verifying cascade")
    assert client.get(f"/api/lessons/{lesson_id}").status_code == 404
    for video_id in video_ids:
        assert client.get(f"/api/videos/{video_id}").status_code == 404
    for file_id in file_ids:
        assert client.get(f"/api/files/{file_id}").status_code == 404

    assert db_session.query(Video).filter(Video.lesson_id == lesson_id).count() == 0
    assert db_session.query(LessonFile).filter(LessonFile.lesson_id == lesson_id).count() == 0

    assert client.get(f"/api/lessons/{survivor_id}").status_code == 200
    assert client.get(f"/api/videos/{keep_video_id}").status_code == 200
    print("[OK] Lesson deletion cascade complete")


def test_delete_missing_lesson(client: TestClient, auth_headers):
    r = client.delete("/api/lessons/4242", headers=auth_headers)
    assert r.status_code == 404
    assert r.json()["error"] == "Lesson not found"
