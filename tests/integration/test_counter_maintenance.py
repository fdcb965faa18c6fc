from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from app.crud.lesson import lesson as crud_lesson
from app.models.file import LessonFile
from app.models.video import Video
from app.services.lesson import lesson_service


def _child_counts(db: Session, lesson_id: int):
    return (
        db.query(Video).filter(Video.lesson_id == lesson_id).count(),
        db.query(LessonFile).filter(LessonFile.lesson_id == lesson_id).count(),
    )


def test_lesson_counters_follow_children(client: TestClient, auth_headers, db_session: Session):
    """
    Counters on a lesson track the real number of videos and files
    through every create and delete.
    """
    print("\n[TEST] Lesson counter maintenance")
    lesson_id = client.post("/api/lessons", headers=auth_headers,
                            json={"title": "Trigonometry", "level": "advanced"}).json()["id"]

    steps = [
        ("POST", "/api/videos", {"lesson_id": lesson_id, "title": "Sine", "url": "https://v/sin"}),
        ("POST", "/api/videos", {"lesson_id": lesson_id, "title": "Cosine", "url": "https://v/cos"}),
        ("POST", "/api/files", {"lesson_id": lesson_id, "name": "Identities", "url": "https://f/id"}),
    ]
    created = []
    for method, path, payload in steps:
        r = client.request(method, path, headers=auth_headers, json=payload)
        assert r.status_code == 201, r.text
        created.append((path, r.json()["id"]))

        detail = client.get(f"/api/lessons/{lesson_id}").json()
        assert (detail["video_count"], detail["file_count"]) == _child_counts(db_session, lesson_id)

    for path, child_id in created:
        assert client.delete(f"{path}/{child_id}", headers=auth_headers).status_code == 200
        detail = client.get(f"/api/lessons/{lesson_id}").json()
        assert (detail["video_count"], detail["file_count"]) == _child_counts(db_session, lesson_id)

    assert (detail["video_count"], detail["file_count"]) == (0, 0)
    print("[OK] Counters stayed consistent")


def test_sequential_views_are_not_lost(client: TestClient, auth_headers):
    lesson_id = client.post("/api/lessons", headers=auth_headers,
                            json={"title": "Limits", "level": "intermediate"}).json()["id"]
    video_id = client.post("/api/videos", headers=auth_headers,
                           json={"lesson_id": lesson_id, "title": "Epsilon", "url": "https://v/e"}).json()["id"]

    for _ in range(2):
        assert client.put(f"/api/videos/{video_id}/view").status_code == 200

    assert client.get(f"/api/videos/{video_id}").json()["views"] == 2


def test_failed_recount_keeps_child_write(
    client: TestClient, auth_headers, db_session: Session, lesson_factory, monkeypatch
):
    """A recount failure is logged; the video itself is still created."""
    from sqlalchemy.exc import OperationalError

    lesson = lesson_factory()

    def _broken_recount(*args, **kwargs):
        raise OperationalError("UPDATE lessons", {}, Exception("database is locked"))

    monkeypatch.setattr(crud_lesson, "recount_children", _broken_recount)
    r = client.post("/api/videos", headers=auth_headers,
                    json={"lesson_id": lesson.id, "title": "Orphan count", "url": "https://v/o"})
    assert r.status_code == 201, r.text
    assert _child_counts(db_session, lesson.id) == (1, 0)

    monkeypatch.undo()
    lesson_service.recount_children(db_session, lesson.id)
    db_session.expire_all()
    assert crud_lesson.get(db_session, id=lesson.id).video_count == 1
