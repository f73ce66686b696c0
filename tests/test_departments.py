"""
Tests for the department endpoints.
"""


def test_list_seeded_departments(client):
    response = client.get("/api/departments")
    assert response.status_code == 200
    data = response.json()
    assert [d["name"] for d in data] == ["Cardiology", "Pediatrics", "Orthopedics", "Neurology"]
    assert data[0] == {
        "id": 1,
        "name": "Cardiology",
        "description": "Heart and cardiovascular care",
        "headDoctorId": None,
    }


def test_create_department(client):
    """
    Creating a department returns 201 and the next id after the seeded ones.
    """
    response = client.post(
        "/api/departments",
        json={"name": "Oncology", "description": "Cancer care", "headDoctorId": 3}
    )
    assert response.status_code == 201
    data = response.json()
    assert data["id"] == 5
    assert data["headDoctorId"] == 3

    fetched = client.get("/api/departments/5")
    assert fetched.status_code == 200
    assert fetched.json() == data


def test_create_department_missing_name(client):
    response = client.post("/api/departments", json={"description": "No name"})
    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "Invalid department data"


def test_create_department_with_malformed_json(client):
    response = client.post(
        "/api/departments",
        content="{not json",
        headers={"Content-Type": "application/json"}
    )
    assert response.status_code == 400
    assert "message" in response.json()


def test_get_missing_department(client):
    response = client.get("/api/departments/999")
    assert response.status_code == 404
    assert response.json() == {"message": "Department not found"}


def test_update_department_keeps_other_fields(client):
    response = client.put("/api/departments/2", json={"headDoctorId": 7})
    assert response.status_code == 200
    data = response.json()
    assert data == {
        "id": 2,
        "name": "Pediatrics",
        "description": "Children's healthcare",
        "headDoctorId": 7,
    }


def test_update_department_ignores_id_in_body(client):
    response = client.put("/api/departments/3", json={"id": 99, "name": "Bones"})
    assert response.status_code == 200
    assert response.json()["id"] == 3
    assert client.get("/api/departments/99").status_code == 404


def test_update_department_invalid_body(client):
    response = client.put("/api/departments/1", json={"headDoctorId": "nobody"})
    assert response.status_code == 400
    assert "message" in response.json()


def test_update_missing_department(client):
    response = client.put("/api/departments/999", json={"name": "Ghost"})
    assert response.status_code == 404


def test_delete_department(client):
    response = client.delete("/api/departments/4")
    assert response.status_code == 204
    assert response.content == b""

    assert client.delete("/api/departments/4").status_code == 404
    assert len(client.get("/api/departments").json()) == 3


def test_duplicate_department_names_are_accepted(client):
    response = client.post("/api/departments", json={"name": "Cardiology"})
    assert response.status_code == 201
