"""
Tests for the in-memory storage layer.
"""
import pytest
from pydantic import ValidationError

from hospital.storage import MemStorage, Storage
from hospital.departments.schemas import DepartmentCreate, DepartmentUpdate
from hospital.doctors.schemas import DoctorCreate, DoctorUpdate, DoctorStatus
from hospital.patients.schemas import PatientCreate, PatientStatus
from hospital.appointments.schemas import AppointmentCreate, AppointmentStatus
from hospital.medical_records.schemas import MedicalRecordCreate, MedicalRecordUpdate


def make_doctor(name="Dr. Who", department_id=1, **overrides):
    data = {
        "name": name,
        "email": f"{name.lower().replace(' ', '.')}@hospital.com",
        "phone": "555-0000",
        "specialization": "General Medicine",
        "department_id": department_id,
        "experience": 5,
    }
    data.update(overrides)
    return DoctorCreate(**data)


def make_patient(name="Ann Lee", email="a@x.com", phone="555-1234", department_id=1):
    return PatientCreate(
        name=name, email=email, phone=phone, age=40, gender="female", department_id=department_id
    )


def make_appointment(patient_id=1, doctor_id=1, date="2024-03-15"):
    return AppointmentCreate(
        patient_id=patient_id,
        doctor_id=doctor_id,
        department_id=1,
        appointment_date=date,
        appointment_time="10:00",
        reason="Follow-up",
    )


def make_record(patient_id=1, doctor_id=1):
    return MedicalRecordCreate(
        patient_id=patient_id,
        doctor_id=doctor_id,
        diagnosis="Flu",
        treatment="Rest",
        record_date="2024-03-15",
    )


@pytest.fixture
def storage():
    return MemStorage()


def test_mem_storage_implements_storage_contract(storage):
    assert isinstance(storage, Storage)


def test_seeded_departments(storage):
    """
    A new storage holds the four default departments with ids 1-4.
    """
    departments = storage.get_departments()
    assert [d.id for d in departments] == [1, 2, 3, 4]
    assert [d.name for d in departments] == ["Cardiology", "Pediatrics", "Orthopedics", "Neurology"]
    assert all(d.head_doctor_id is None for d in departments)

    created = storage.create_department(DepartmentCreate(name="Oncology"))
    assert created.id == 5


def test_seeding_can_be_disabled():
    storage = MemStorage(seed=False)
    assert storage.get_departments() == []
    assert storage.create_department(DepartmentCreate(name="Oncology")).id == 1


def test_seed_data_is_not_shared_between_instances():
    first = MemStorage()
    first.update_department(1, DepartmentUpdate(name="Heart Centre"))
    assert MemStorage().get_department(1).name == "Cardiology"


def test_returned_records_cannot_be_changed_in_place(storage):
    """
    Records handed out by storage are read-only; changes go through update_*.
    """
    department = storage.get_department(1)
    with pytest.raises(ValidationError):
        department.name = "Mutated"

    doctor = storage.create_doctor(make_doctor())
    with pytest.raises(ValidationError):
        doctor.status = DoctorStatus.INACTIVE

    assert storage.get_department(1).name == "Cardiology"
    assert storage.get_doctor(doctor.id).status == DoctorStatus.ACTIVE


def test_create_then_get_returns_equal_record(storage):
    doctor = storage.create_doctor(make_doctor())
    assert storage.get_doctor(doctor.id) == doctor

    patient = storage.create_patient(make_patient())
    assert storage.get_patient(patient.id) == patient

    appointment = storage.create_appointment(make_appointment())
    assert storage.get_appointment(appointment.id) == appointment

    record = storage.create_medical_record(make_record())
    assert storage.get_medical_record(record.id) == record


def test_defaults_applied_on_create(storage):
    assert storage.create_doctor(make_doctor()).status == DoctorStatus.ACTIVE
    assert storage.create_patient(make_patient()).status == PatientStatus.ACTIVE
    assert storage.create_appointment(make_appointment()).status == AppointmentStatus.SCHEDULED


def test_get_unknown_id_returns_none(storage):
    assert storage.get_department(999) is None
    assert storage.get_doctor(1) is None
    assert storage.get_medical_record(1) is None


def test_ids_are_never_reused():
    """
    Deleting a record does not free its id.
    """
    storage = MemStorage(seed=False)
    first = storage.create_department(DepartmentCreate(name="A"))
    second = storage.create_department(DepartmentCreate(name="B"))
    third = storage.create_department(DepartmentCreate(name="C"))
    assert storage.delete_department(second.id) is True

    fourth = storage.create_department(DepartmentCreate(name="D"))
    assert [first.id, second.id, third.id, fourth.id] == [1, 2, 3, 4]
    assert [d.id for d in storage.get_departments()] == [1, 3, 4]


def test_ids_are_counted_per_entity_type(storage):
    storage.create_doctor(make_doctor())
    patient = storage.create_patient(make_patient())
    assert patient.id == 1


def test_update_merges_only_given_fields(storage):
    doctor = storage.create_doctor(make_doctor(name="Dr. Grey"))
    updated = storage.update_doctor(doctor.id, DoctorUpdate(status="inactive"))

    assert updated.id == doctor.id
    assert updated.status == DoctorStatus.INACTIVE
    assert updated.name == "Dr. Grey"
    assert updated.experience == doctor.experience
    assert storage.get_doctor(doctor.id) == updated


def test_update_with_null_leaves_field_unchanged(storage):
    record = storage.create_medical_record(make_record())
    updated = storage.update_medical_record(record.id, MedicalRecordUpdate(diagnosis=None, treatment="Fluids"))
    assert updated.diagnosis == "Flu"
    assert updated.treatment == "Fluids"


def test_update_unknown_id_returns_none_and_changes_nothing(storage):
    before = storage.get_departments()
    assert storage.update_department(999, DepartmentUpdate(name="Ghost")) is None
    assert storage.get_departments() == before


def test_delete_returns_true_once(storage):
    patient = storage.create_patient(make_patient())
    assert storage.delete_patient(patient.id) is True
    assert storage.delete_patient(patient.id) is False
    assert storage.delete_patient(12345) is False
    assert storage.get_patient(patient.id) is None


def test_department_names_are_not_required_to_be_unique(storage):
    duplicate = storage.create_department(DepartmentCreate(name="Cardiology"))
    assert duplicate.id == 5
    assert [d.name for d in storage.get_departments()].count("Cardiology") == 2


def test_references_are_not_checked(storage):
    doctor = storage.create_doctor(make_doctor(department_id=42))
    assert doctor.department_id == 42
    assert storage.get_doctors_by_department(42) == [doctor]


def test_doctors_and_patients_by_department(storage):
    cardio = storage.create_doctor(make_doctor(name="Dr. A", department_id=1))
    storage.create_doctor(make_doctor(name="Dr. B", department_id=2))
    storage.create_patient(make_patient(department_id=2))
    peds_patient = storage.create_patient(make_patient(name="Bo Chan", department_id=3))

    assert storage.get_doctors_by_department(1) == [cardio]
    assert storage.get_patients_by_department(3) == [peds_patient]
    assert storage.get_patients_by_department(4) == []


def test_search_patients():
    """
    Search matches name (any case), email, phone substring and id substring.
    """
    storage = MemStorage()
    for i in range(6):
        storage.create_patient(make_patient(name=f"Filler {i}", email=f"f{i}@y.org", phone="999-0000"))
    ann = storage.create_patient(make_patient())
    assert ann.id == 7

    assert storage.search_patients("lee") == [ann]
    assert storage.search_patients("LEE") == [ann]
    assert storage.search_patients("555") == [ann]
    assert storage.search_patients("7") == [ann]
    assert storage.search_patients("A@X.COM") == [ann]
    assert storage.search_patients("nobody") == []


def test_appointment_filters(storage):
    first = storage.create_appointment(make_appointment(patient_id=1, doctor_id=2, date="2024-03-15"))
    second = storage.create_appointment(make_appointment(patient_id=2, doctor_id=2, date="2024-03-16"))

    assert storage.get_appointments_by_patient(1) == [first]
    assert storage.get_appointments_by_doctor(2) == [first, second]
    assert storage.get_appointments_by_date("2024-03-16") == [second]
    assert storage.get_appointments_by_date("2024-03-17") == []


def test_medical_record_filters(storage):
    first = storage.create_medical_record(make_record(patient_id=1, doctor_id=1))
    second = storage.create_medical_record(make_record(patient_id=2, doctor_id=1))

    assert storage.get_medical_records_by_patient(2) == [second]
    assert storage.get_medical_records_by_doctor(1) == [first, second]
    assert storage.get_medical_records() == [first, second]
