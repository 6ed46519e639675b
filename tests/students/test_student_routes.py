from __future__ import annotations

from google.api_core.exceptions import DeadlineExceeded, ServiceUnavailable

STUDENT = {
    "name": "Thabo",
    "surname": "Nkosi",
    "birthCertificateId": "BC-100",
    "parentId": "p1",
    "dateOfBirth": "2016-04-09",
    "grade": "Grade 3",
}


def test_create_student_returns_201_with_envelope(client):
    response = client.post("/api/students", json=STUDENT)

    assert response.status_code == 201
    body = response.get_json()
    assert body["success"] is True
    assert body["message"] == "Student created successfully"
    assert body["timestamp"].endswith("Z")
    assert body["data"]["status"] == "PENDING"
    assert body["data"]["dateOfBirth"] == "2016-04-09T00:00:00Z"
    assert body["data"]["studentId"]


def test_duplicate_birth_certificate_is_a_400(client):
    client.post("/api/students", json=STUDENT)

    response = client.post("/api/students", json=STUDENT)

    assert response.status_code == 400
    assert response.get_json() == {
        "success": False,
        "message": "A student with this birth certificate ID already exists",
        "data": None,
        "timestamp": response.get_json()["timestamp"],
    }


def test_malformed_json_is_a_400(client):
    response = client.post("/api/students", data="{not json", content_type="application/json")

    assert response.status_code == 400
    assert response.get_json()["success"] is False


def test_malformed_timestamp_is_a_400_listing_supported_formats(client):
    response = client.post("/api/students", json={**STUDENT, "dateOfBirth": "yesterday"})

    assert response.status_code == 400
    assert "Supported formats" in response.get_json()["message"]


def test_get_missing_student_is_a_404(client):
    response = client.get("/api/students/nope")

    assert response.status_code == 404
    assert response.get_json()["message"] == "Student not found"


def test_approval_flow(client):
    student_id = client.post("/api/students", json=STUDENT).get_json()["data"]["studentId"]

    assert client.put(f"/api/students/{student_id}/approve-with-class", json={"className": "3A"}).status_code == 400
    response = client.put(
        f"/api/students/{student_id}/approve-with-class", json={"className": "3A", "teacher": "Mr Dube"}
    )
    assert response.status_code == 200
    assert response.get_json()["data"]["className"] == "3A"

    approved = client.get("/api/students/approved").get_json()["data"]
    assert [s["studentId"] for s in approved] == [student_id]
    assert client.get("/api/students/pending").get_json()["data"] == []


def test_reject_needs_a_reason(client):
    student_id = client.post("/api/students", json=STUDENT).get_json()["data"]["studentId"]

    assert client.put(f"/api/students/{student_id}/reject", json={}).status_code == 400
    response = client.put(f"/api/students/{student_id}/reject", json={"reason": "Late application"})
    assert response.get_json()["data"]["rejectionReason"] == "Late application"


def test_delete_missing_student_is_a_404(client):
    assert client.delete("/api/students/nope").status_code == 404


def test_store_timeout_is_a_503(client, fake_client):
    fake_client.fail_with = DeadlineExceeded("slow")

    response = client.get("/api/students")

    assert response.status_code == 503
    assert response.get_json()["success"] is False


def test_store_failure_is_a_500(client, fake_client):
    fake_client.fail_with = ServiceUnavailable("down")

    response = client.get("/api/students")

    assert response.status_code == 500
    assert response.get_json()["message"].startswith("Database error")
