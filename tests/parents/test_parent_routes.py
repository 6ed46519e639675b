from __future__ import annotations


def _parent(client, **body):
    return client.post("/api/parents", json={"fullName": "Naledi", **body}).get_json()["data"]["parentId"]


def test_add_and_list_children(client):
    parent_id = _parent(client)

    response = client.post(
        f"/api/parents/{parent_id}/children",
        json={"name": "Lerato", "surname": "Mokoena", "birthCertificateId": "BC-7", "parentId": "someone-else"},
    )

    assert response.status_code == 200
    assert response.get_json()["data"]["parentId"] == parent_id
    children = client.get(f"/api/parents/{parent_id}/children").get_json()["data"]
    assert [c["name"] for c in children] == ["Lerato"]


def test_parent_cannot_update_someone_elses_child(client):
    owner = _parent(client)
    other = _parent(client, fullName="Sipho")
    child = client.post(
        f"/api/parents/{owner}/children",
        json={"name": "Lerato", "surname": "Mokoena", "birthCertificateId": "BC-7"},
    ).get_json()["data"]

    response = client.put(f"/api/parents/{other}/children/{child['studentId']}", json={"name": "Hacked"})

    assert response.status_code == 403
    assert response.get_json()["message"] == "You can only update your own children's data"
    assert client.get(f"/api/students/{child['studentId']}").get_json()["data"]["name"] == "Lerato"


def test_update_own_child(client):
    owner = _parent(client)
    child = client.post(
        f"/api/parents/{owner}/children",
        json={"name": "Lerato", "surname": "Mokoena", "birthCertificateId": "BC-7"},
    ).get_json()["data"]

    response = client.put(
        f"/api/parents/{owner}/children/{child['studentId']}",
        json={"name": "Lerato M", "surname": "Mokoena", "birthCertificateId": "BC-7"},
    )

    assert response.status_code == 200
    assert response.get_json()["data"]["createdAt"] == child["createdAt"]


def test_update_missing_child_is_a_404(client):
    owner = _parent(client)

    assert client.put(f"/api/parents/{owner}/children/nope", json={}).status_code == 404


def test_document_request_through_the_parent(client):
    parent_id = _parent(client)

    response = client.post(
        f"/api/parents/{parent_id}/document-requests",
        json={"studentId": "s1", "documentType": "TRANSFER_LETTER", "reason": "Moving"},
    )

    data = response.get_json()["data"]
    assert data["parentId"] == parent_id
    assert data["status"] == "PENDING"
    pending = client.get("/api/admin/document-requests/pending").get_json()["data"]
    assert [r["requestId"] for r in pending] == [data["requestId"]]


def test_get_missing_parent_is_a_404(client):
    assert client.get("/api/parents/nope").status_code == 404
