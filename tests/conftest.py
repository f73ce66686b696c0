"""
Test configuration for the hospital management backend.
"""
import pytest
from fastapi.testclient import TestClient

from hospital.main import create_app
from hospital.storage import MemStorage


@pytest.fixture(scope="function")
def storage():
    """
    Create a fresh in-memory storage, seeded with the default departments, for each test.
    """
    return MemStorage()


@pytest.fixture(scope="function")
def client(storage):
    """
    Create a test client for an application backed by the test storage.
    """
    app = create_app(storage=storage)

    with TestClient(app) as client:
        yield client


@pytest.fixture
def doctor_payload():
    return {
        "name": "Dr. Sarah Johnson",
        "email": "sarah.johnson@hospital.com",
        "phone": "555-0101",
        "specialization": "Cardiologist",
        "departmentId": 1,
        "experience": 12,
    }


@pytest.fixture
def patient_payload():
    return {
        "name": "Ann Lee",
        "email": "a@x.com",
        "phone": "555-1234",
        "age": 34,
        "gender": "female",
        "address": "12 Elm Street",
        "departmentId": 2,
    }


@pytest.fixture
def appointment_payload():
    return {
        "patientId": 1,
        "doctorId": 1,
        "departmentId": 1,
        "appointmentDate": "2024-03-15",
        "appointmentTime": "09:30",
        "reason": "Routine check-up",
    }


@pytest.fixture
def medical_record_payload():
    return {
        "patientId": 1,
        "doctorId": 1,
        "appointmentId": 1,
        "diagnosis": "Hypertension",
        "treatment": "Lifestyle changes and monitoring",
        "medications": "Lisinopril 10mg",
        "recordDate": "2024-03-15",
    }
