"""
Tests for the main application endpoints and error handling.
"""
import logging

from fastapi.testclient import TestClient

from hospital.exceptions import resource_name
from hospital.main import create_app
from hospital.storage import MemStorage


class BrokenStorage(MemStorage):
    """Storage whose reads fail, to exercise the 500 path."""

    def get_departments(self):
        raise RuntimeError("storage unavailable")

    def get_patient(self, patient_id):
        raise RuntimeError("storage unavailable")


def test_root_endpoint(client):
    """
    Test the root endpoint returns a welcome message.
    """
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert "message" in data
    assert "version" in data


def test_health_check(client):
    """
    Test the health check endpoint returns a healthy status.
    """
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["storage"] == "memory"


def test_request_id_header(client):
    response = client.get("/api/departments")
    assert response.status_code == 200
    assert "x-request-id" in response.headers
    assert "x-process-time" in response.headers


def test_unknown_route_returns_message_body(client):
    response = client.get("/api/wards")
    assert response.status_code == 404
    assert "message" in response.json()


def test_non_integer_id_is_bad_request(client):
    response = client.get("/api/doctors/abc")
    assert response.status_code == 400
    assert "message" in response.json()


def test_storage_failure_on_list_returns_500():
    """
    Unexpected storage errors surface as 500 with a generic message.
    """
    with TestClient(create_app(storage=BrokenStorage())) as client:
        response = client.get("/api/departments")
    assert response.status_code == 500
    assert response.json() == {"message": "Failed to fetch departments"}


def test_storage_failure_on_get_returns_500():
    with TestClient(create_app(storage=BrokenStorage())) as client:
        response = client.get("/api/patients/1")
    assert response.status_code == 500
    assert response.json() == {"message": "Failed to fetch patient"}


def test_apps_do_not_share_storage():
    """
    Each application owns the storage it was created with.
    """
    with TestClient(create_app(storage=MemStorage())) as first:
        first.post("/api/departments", json={"name": "Oncology"})
        assert len(first.get("/api/departments").json()) == 5

    with TestClient(create_app(storage=MemStorage())) as second:
        assert len(second.get("/api/departments").json()) == 4


def test_unseeded_storage_starts_empty():
    with TestClient(create_app(storage=MemStorage(seed=False))) as client:
        assert client.get("/api/departments").json() == []
        response = client.post("/api/departments", json={"name": "Oncology"})
    assert response.json()["id"] == 1


def test_resource_name_from_path():
    assert resource_name("/api/medical-records/3") == "medical record"
    assert resource_name("/api/doctors") == "doctor"
    assert resource_name("/health") is None


def test_request_log_names_the_resource(client, caplog):
    caplog.set_level(logging.INFO, logger="hospital.core.middleware")

    client.get("/api/medical-records")
    client.get("/api/patients/999")

    lines = [r.getMessage() for r in caplog.records if r.name == "hospital.core.middleware"]
    assert any("[medical record] completed" in line and "Status: 200" in line for line in lines)
    missing = [r for r in caplog.records if "[patient] completed" in r.getMessage()]
    assert missing and missing[0].levelno == logging.WARNING
