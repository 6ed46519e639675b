from __future__ import annotations


def _trip(client, **body):
    response = client.post("/api/trips", json={"title": "Zoo visit", "price": "120.50", **body})
    assert response.status_code == 201
    return response.get_json()["data"]


def test_register_and_check_payment(client):
    trip = _trip(client)

    response = client.post(f"/api/trips/{trip['tripId']}/register", json={"studentId": "s1", "parentId": "p1"})

    payment = response.get_json()["data"]
    assert response.status_code == 200
    assert payment["status"] == "COMPLETED"
    assert payment["amount"] == 120.5
    check = client.get(f"/api/payments/check/s1/{trip['tripId']}").get_json()["data"]
    assert check == {"hasPaid": True}


def test_register_twice_is_a_400(client):
    trip = _trip(client)
    client.post(f"/api/trips/{trip['tripId']}/register", json={"studentId": "s1", "parentId": "p1"})

    response = client.post(f"/api/trips/{trip['tripId']}/register", json={"studentId": "s1", "parentId": "p1"})

    assert response.status_code == 400
    assert response.get_json()["message"] == "Student already registered for this trip"


def test_update_without_registered_students_keeps_them(client):
    trip = _trip(client)
    client.post(f"/api/trips/{trip['tripId']}/register", json={"studentId": "s1", "parentId": "p1"})

    response = client.put(f"/api/trips/{trip['tripId']}", json={"title": "Aquarium"})

    data = response.get_json()["data"]
    assert data["registeredStudents"] == ["s1"]
    assert data["createdAt"] == trip["createdAt"]


def test_hold_activate_and_image(client):
    trip_id = _trip(client)["tripId"]

    assert client.put(f"/api/trips/{trip_id}/hold").get_json()["data"]["active"] is False
    assert client.put(f"/api/trips/{trip_id}/activate").get_json()["data"]["active"] is True
    assert client.put(f"/api/trips/{trip_id}/image", json={}).status_code == 400
    image = client.put(f"/api/trips/{trip_id}/image", json={"imageData": "https://img.test/zoo.png"})
    assert image.get_json()["data"]["imageUrl"] == "https://img.test/zoo.png"


def test_paid_students_grouped_by_grade(client):
    trip_id = _trip(client)["tripId"]
    student = client.post(
        "/api/students", json={"name": "A", "surname": "B", "birthCertificateId": "BC-1", "grade": "Grade 4"}
    ).get_json()["data"]
    client.post(f"/api/trips/{trip_id}/register", json={"studentId": student["studentId"], "parentId": "p1"})

    grouped = client.get(f"/api/trips/{trip_id}/paid-students").get_json()["data"]

    assert list(grouped) == ["Grade 4"]
    assert grouped["Grade 4"][0]["studentId"] == student["studentId"]


def test_missing_trip(client):
    assert client.get("/api/trips/nope").status_code == 404
    assert client.put("/api/trips/nope/hold").status_code == 404
