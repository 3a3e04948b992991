import io

import pytest

from shared import media


def test_health_check(client):
    assert client.get("/").status_code == 200


def test_public_stats_defaults_and_counts(client, admin_headers):
    h = admin_headers
    cls = client.post("/classes", json={"name": "A Level"}, headers=h).json()
    client.post("/courses", json={"classId": cls["id"], "name": "Physics"}, headers=h)
    client.post("/courses", json={"classId": cls["id"], "name": "Biology", "isActive": False}, headers=h)
    client.put("/settings", json={"studentsTaught": "20K+"}, headers=h)

    stats = client.get("/public/stats").json()
    assert stats == {"years": "30+", "students": "20K+", "rate": "95%", "subjects": "1"}


def test_admin_stats(client, admin_headers):
    h = admin_headers
    client.post("/classes", json={"name": "A Level"}, headers=h)
    client.post("/messages", json={
        "name": "Nimal", "email": "nimal@example.com", "subject": "Hi", "message": "Hello",
    })
    client.post("/appointments", json={
        "studentName": "Kasun", "email": "kasun@example.com", "phone": "071",
        "classType": "online", "date": "2026-11-02", "time": "10:00 AM",
    })

    response = client.get("/admin/stats", headers=h)
    assert response.status_code == 200
    stats = response.json()
    assert stats["totalClasses"] == 1
    assert stats["totalCourses"] == 0
    assert stats["unreadMessages"] == 1
    assert stats["pendingAppointments"] == 1
    assert [m["name"] for m in stats["recentMessages"]] == ["Nimal"]
    assert [a["studentName"] for a in stats["upcomingAppointments"]] == ["Kasun"]


def test_upcoming_appointments_sorted_by_date(client, admin_headers):
    for name, date, time in [("Later", "2026-12-01", "9:00 AM"), ("Sooner", "2026-11-02", "10:00 AM")]:
        client.post("/appointments", json={
            "studentName": name, "email": "kasun@example.com", "phone": "071",
            "classType": "online", "date": date, "time": time,
        })

    stats = client.get("/admin/stats", headers=admin_headers).json()
    assert [a["studentName"] for a in stats["upcomingAppointments"]] == ["Sooner", "Later"]


def test_admin_stats_requires_admin(client, student_headers):
    assert client.get("/admin/stats", headers=student_headers).status_code == 403


@pytest.mark.parametrize("content_type, expected", [
    ("image/png", "image"),
    ("video/mp4", "video"),
    ("application/pdf", "raw"),
    (None, "raw"),
])
def test_resource_type_for(content_type, expected):
    assert media.resource_type_for(content_type) == expected


def test_raw_public_ids_keep_extension():
    assert media.build_public_id("Past Paper (2023).pdf", "raw").endswith(".pdf")
    assert not media.build_public_id("photo.jpg", "image").endswith(".jpg")


def test_upload_requires_authentication(client):
    response = client.post("/upload", files={"file": ("notes.pdf", b"%PDF-1.4", "application/pdf")})
    assert response.status_code == 401


def test_upload_returns_hosted_reference(client, student_headers, monkeypatch):
    calls = []

    def fake_upload(file, folder, resource_type, public_id):
        calls.append((folder, resource_type, public_id))
        return {
            "secure_url": f"https://res.cloudinary.com/demo/{resource_type}/upload/{public_id}",
            "public_id": f"shacademy/{folder}/{public_id}",
            "resource_type": resource_type,
        }

    monkeypatch.setattr(media, "_upload", fake_upload)

    response = client.post(
        "/upload",
        files={"file": ("notes.pdf", io.BytesIO(b"%PDF-1.4"), "application/pdf")},
        data={"folder": "materials"},
        headers=student_headers,
    )
    assert response.status_code == 200
    body = response.json()
    assert body["url"].startswith("https://res.cloudinary.com/")
    assert body["publicId"].startswith("shacademy/materials/")
    assert body["resourceType"] == "raw"
    assert body["fileName"] == "notes.pdf"
    assert calls[0][0] == "materials"


def test_upload_failure_is_a_dependency_error(client, student_headers, monkeypatch):
    def failing_upload(file, folder, resource_type, public_id):
        raise RuntimeError("cloudinary unavailable")

    monkeypatch.setattr(media, "_upload", failing_upload)

    response = client.post(
        "/upload",
        files={"file": ("photo.png", io.BytesIO(b"\x89PNG"), "image/png")},
        headers=student_headers,
    )
    assert response.status_code == 502
    assert response.json()["detail"] == "Upload failed"


def test_upload_without_file(client, student_headers):
    response = client.post("/upload", data={"folder": "general"}, headers=student_headers)
    assert response.status_code == 400
