from __future__ import annotations


def test_announcement_crud(client):
    created = client.post("/api/admin/announcements", json={"title": "Sports day", "type": "EVENT"})
    announcement_id = created.get_json()["data"]["announcementId"]

    assert created.get_json()["data"]["active"] is True
    updated = client.put(f"/api/admin/announcements/{announcement_id}", json={"title": "Moved", "active": False})
    assert updated.get_json()["data"]["active"] is False
    assert client.delete(f"/api/admin/announcements/{announcement_id}").status_code == 200
    assert client.get(f"/api/admin/announcements/{announcement_id}").status_code == 404


def test_announcement_without_title_is_a_400(client):
    assert client.post("/api/admin/announcements", json={"content": "..."}).status_code == 400


def test_approve_document_request(client):
    request_id = client.post("/api/parents/p1/document-requests", json={"studentId": "s1"}).get_json()["data"][
        "requestId"
    ]

    response = client.put(f"/api/admin/document-requests/{request_id}/approve")

    assert response.get_json()["data"]["status"] == "APPROVED"
    assert client.get("/api/admin/document-requests/pending").get_json()["data"] == []


def test_approving_a_missing_request_is_a_404(client):
    response = client.put("/api/admin/document-requests/nope/approve")

    assert response.status_code == 404
    assert response.get_json()["message"] == "Document request not found"
