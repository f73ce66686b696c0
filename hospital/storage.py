"""
Storage layer for the hospital system.

``Storage`` is the contract the HTTP layer talks to; ``MemStorage`` keeps
every record in process memory. A persistent engine can implement the same
interface without any router or service changes.

Reference fields (department_id, doctor_id, patient_id, appointment_id,
head_doctor_id) are stored as plain integers and never checked against the
referenced table. Department name and doctor email uniqueness are not
enforced either.
"""
from abc import ABC, abstractmethod
from typing import Callable, Dict, Generic, List, Optional, Type, TypeVar
import logging

from .core.schemas import CamelModel
from .departments.schemas import Department, DepartmentCreate, DepartmentUpdate
from .doctors.schemas import Doctor, DoctorCreate, DoctorUpdate
from .patients.schemas import Patient, PatientCreate, PatientUpdate
from .appointments.schemas import Appointment, AppointmentCreate, AppointmentUpdate
from .medical_records.schemas import MedicalRecord, MedicalRecordCreate, MedicalRecordUpdate

# Set up logging
logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=CamelModel)

SEED_DEPARTMENTS = [
    Department(id=1, name="Cardiology", description="Heart and cardiovascular care", head_doctor_id=None),
    Department(id=2, name="Pediatrics", description="Children's healthcare", head_doctor_id=None),
    Department(id=3, name="Orthopedics", description="Bone and joint care", head_doctor_id=None),
    Department(id=4, name="Neurology", description="Brain and nervous system", head_doctor_id=None),
]


class Table(Generic[RecordT]):
    """
    Keyed in-memory table for one record type.

    Ids are handed out from a per-table counter that only moves forward, so an
    id is never reused after its record is deleted.
    """

    def __init__(self, record_class: Type[RecordT]):
        self.record_class = record_class
        self._rows: Dict[int, RecordT] = {}
        self._next_id = 1

    def all(self) -> List[RecordT]:
        return list(self._rows.values())

    def get(self, record_id: int) -> Optional[RecordT]:
        return self._rows.get(record_id)

    def filter(self, predicate: Callable[[RecordT], bool]) -> List[RecordT]:
        return [row for row in self._rows.values() if predicate(row)]

    def insert(self, data: CamelModel) -> RecordT:
        record = self.record_class(id=self._next_id, **data.model_dump())
        self._rows[record.id] = record
        self._next_id += 1
        return record

    def load(self, record: RecordT) -> RecordT:
        """Store a record under its own id, moving the counter past it."""
        self._rows[record.id] = record
        self._next_id = max(self._next_id, record.id + 1)
        return record

    def update(self, record_id: int, data: CamelModel) -> Optional[RecordT]:
        existing = self._rows.get(record_id)
        if existing is None:
            return None
        updated = existing.model_copy(update=data.patch_data())
        self._rows[record_id] = updated
        return updated

    def delete(self, record_id: int) -> bool:
        return self._rows.pop(record_id, None) is not None


class Storage(ABC):
    """
    Storage contract for all hospital records.

    Lookups that find nothing return ``None`` (or ``False`` for deletes);
    they never raise.
    """

    # Department methods
    @abstractmethod
    def get_departments(self) -> List[Department]:
        """Return every department."""

    @abstractmethod
    def get_department(self, department_id: int) -> Optional[Department]:
        """Return one department, or None if the id is unknown."""

    @abstractmethod
    def create_department(self, data: DepartmentCreate) -> Department:
        """Store a new department under the next unused id."""

    @abstractmethod
    def update_department(self, department_id: int, data: DepartmentUpdate) -> Optional[Department]:
        """Merge the set fields of ``data`` over a department; None if unknown."""

    @abstractmethod
    def delete_department(self, department_id: int) -> bool:
        """Remove a department; True if one was removed."""

    # Doctor methods
    @abstractmethod
    def get_doctors(self) -> List[Doctor]:
        """Return every doctor."""

    @abstractmethod
    def get_doctor(self, doctor_id: int) -> Optional[Doctor]:
        """Return one doctor, or None if the id is unknown."""

    @abstractmethod
    def get_doctors_by_department(self, department_id: int) -> List[Doctor]:
        """Return doctors whose department_id equals ``department_id``."""

    @abstractmethod
    def create_doctor(self, data: DoctorCreate) -> Doctor:
        """Store a new doctor under the next unused id."""

    @abstractmethod
    def update_doctor(self, doctor_id: int, data: DoctorUpdate) -> Optional[Doctor]:
        """Merge the set fields of ``data`` over a doctor; None if unknown."""

    @abstractmethod
    def delete_doctor(self, doctor_id: int) -> bool:
        """Remove a doctor; True if one was removed."""

    # Patient methods
    @abstractmethod
    def get_patients(self) -> List[Patient]:
        """Return every patient."""

    @abstractmethod
    def get_patient(self, patient_id: int) -> Optional[Patient]:
        """Return one patient, or None if the id is unknown."""

    @abstractmethod
    def get_patients_by_department(self, department_id: int) -> List[Patient]:
        """Return patients whose department_id equals ``department_id``."""

    @abstractmethod
    def search_patients(self, query: str) -> List[Patient]:
        """
        Free-text patient search.

        Matches a case-insensitive substring of name or email, a substring of
        phone, or a substring of the id rendered as a string.
        """

    @abstractmethod
    def create_patient(self, data: PatientCreate) -> Patient:
        """Store a new patient under the next unused id."""

    @abstractmethod
    def update_patient(self, patient_id: int, data: PatientUpdate) -> Optional[Patient]:
        """Merge the set fields of ``data`` over a patient; None if unknown."""

    @abstractmethod
    def delete_patient(self, patient_id: int) -> bool:
        """Remove a patient; True if one was removed."""

    # Appointment methods
    @abstractmethod
    def get_appointments(self) -> List[Appointment]:
        """Return every appointment."""

    @abstractmethod
    def get_appointment(self, appointment_id: int) -> Optional[Appointment]:
        """Return one appointment, or None if the id is unknown."""

    @abstractmethod
    def get_appointments_by_patient(self, patient_id: int) -> List[Appointment]:
        """Return appointments for one patient."""

    @abstractmethod
    def get_appointments_by_doctor(self, doctor_id: int) -> List[Appointment]:
        """Return appointments with one doctor."""

    @abstractmethod
    def get_appointments_by_date(self, date: str) -> List[Appointment]:
        """Return appointments whose appointment_date equals ``date`` exactly."""

    @abstractmethod
    def create_appointment(self, data: AppointmentCreate) -> Appointment:
        """Store a new appointment under the next unused id."""

    @abstractmethod
    def update_appointment(self, appointment_id: int, data: AppointmentUpdate) -> Optional[Appointment]:
        """Merge the set fields of ``data`` over an appointment; None if unknown."""

    @abstractmethod
    def delete_appointment(self, appointment_id: int) -> bool:
        """Remove an appointment; True if one was removed."""

    # Medical record methods
    @abstractmethod
    def get_medical_records(self) -> List[MedicalRecord]:
        """Return every medical record."""

    @abstractmethod
    def get_medical_record(self, record_id: int) -> Optional[MedicalRecord]:
        """Return one medical record, or None if the id is unknown."""

    @abstractmethod
    def get_medical_records_by_patient(self, patient_id: int) -> List[MedicalRecord]:
        """Return medical records for one patient."""

    @abstractmethod
    def get_medical_records_by_doctor(self, doctor_id: int) -> List[MedicalRecord]:
        """Return medical records written by one doctor."""

    @abstractmethod
    def create_medical_record(self, data: MedicalRecordCreate) -> MedicalRecord:
        """Store a new medical record under the next unused id."""

    @abstractmethod
    def update_medical_record(self, record_id: int, data: MedicalRecordUpdate) -> Optional[MedicalRecord]:
        """Merge the set fields of ``data`` over a medical record; None if unknown."""

    @abstractmethod
    def delete_medical_record(self, record_id: int) -> bool:
        """Remove a medical record; True if one was removed."""


class MemStorage(Storage):
    """
    In-memory implementation of ``Storage``.

    Args:
        seed: Pre-populate the four default departments (ids 1-4)
    """

    def __init__(self, seed: bool = True):
        self.departments: Table[Department] = Table(Department)
        self.doctors: Table[Doctor] = Table(Doctor)
        self.patients: Table[Patient] = Table(Patient)
        self.appointments: Table[Appointment] = Table(Appointment)
        self.medical_records: Table[MedicalRecord] = Table(MedicalRecord)

        if seed:
            self._initialize_data()

    def _initialize_data(self):
        for department in SEED_DEPARTMENTS:
            self.departments.load(department.model_copy())
        logger.info(f"Seeded {len(SEED_DEPARTMENTS)} default departments")

    # Department methods
    def get_departments(self) -> List[Department]:
        return self.departments.all()

    def get_department(self, department_id: int) -> Optional[Department]:
        return self.departments.get(department_id)

    def create_department(self, data: DepartmentCreate) -> Department:
        return self.departments.insert(data)

    def update_department(self, department_id: int, data: DepartmentUpdate) -> Optional[Department]:
        return self.departments.update(department_id, data)

    def delete_department(self, department_id: int) -> bool:
        return self.departments.delete(department_id)

    # Doctor methods
    def get_doctors(self) -> List[Doctor]:
        return self.doctors.all()

    def get_doctor(self, doctor_id: int) -> Optional[Doctor]:
        return self.doctors.get(doctor_id)

    def get_doctors_by_department(self, department_id: int) -> List[Doctor]:
        return self.doctors.filter(lambda doctor: doctor.department_id == department_id)

    def create_doctor(self, data: DoctorCreate) -> Doctor:
        return self.doctors.insert(data)

    def update_doctor(self, doctor_id: int, data: DoctorUpdate) -> Optional[Doctor]:
        return self.doctors.update(doctor_id, data)

    def delete_doctor(self, doctor_id: int) -> bool:
        return self.doctors.delete(doctor_id)

    # Patient methods
    def get_patients(self) -> List[Patient]:
        return self.patients.all()

    def get_patient(self, patient_id: int) -> Optional[Patient]:
        return self.patients.get(patient_id)

    def get_patients_by_department(self, department_id: int) -> List[Patient]:
        return self.patients.filter(lambda patient: patient.department_id == department_id)

    def search_patients(self, query: str) -> List[Patient]:
        lowercase_query = query.lower()

        def matches(patient: Patient) -> bool:
            return (
                lowercase_query in patient.name.lower()
                or lowercase_query in patient.email.lower()
                or query in patient.phone
                or query in str(patient.id)
            )

        return self.patients.filter(matches)

    def create_patient(self, data: PatientCreate) -> Patient:
        return self.patients.insert(data)

    def update_patient(self, patient_id: int, data: PatientUpdate) -> Optional[Patient]:
        return self.patients.update(patient_id, data)

    def delete_patient(self, patient_id: int) -> bool:
        return self.patients.delete(patient_id)

    # Appointment methods
    def get_appointments(self) -> List[Appointment]:
        return self.appointments.all()

    def get_appointment(self, appointment_id: int) -> Optional[Appointment]:
        return self.appointments.get(appointment_id)

    def get_appointments_by_patient(self, patient_id: int) -> List[Appointment]:
        return self.appointments.filter(lambda appointment: appointment.patient_id == patient_id)

    def get_appointments_by_doctor(self, doctor_id: int) -> List[Appointment]:
        return self.appointments.filter(lambda appointment: appointment.doctor_id == doctor_id)

    def get_appointments_by_date(self, date: str) -> List[Appointment]:
        return self.appointments.filter(lambda appointment: appointment.appointment_date == date)

    def create_appointment(self, data: AppointmentCreate) -> Appointment:
        return self.appointments.insert(data)

    def update_appointment(self, appointment_id: int, data: AppointmentUpdate) -> Optional[Appointment]:
        return self.appointments.update(appointment_id, data)

    def delete_appointment(self, appointment_id: int) -> bool:
        return self.appointments.delete(appointment_id)

    # Medical record methods
    def get_medical_records(self) -> List[MedicalRecord]:
        return self.medical_records.all()

    def get_medical_record(self, record_id: int) -> Optional[MedicalRecord]:
        return self.medical_records.get(record_id)

    def get_medical_records_by_patient(self, patient_id: int) -> List[MedicalRecord]:
        return self.medical_records.filter(lambda record: record.patient_id == patient_id)

    def get_medical_records_by_doctor(self, doctor_id: int) -> List[MedicalRecord]:
        return self.medical_records.filter(lambda record: record.doctor_id == doctor_id)

    def create_medical_record(self, data: MedicalRecordCreate) -> MedicalRecord:
        return self.medical_records.insert(data)

    def update_medical_record(self, record_id: int, data: MedicalRecordUpdate) -> Optional[MedicalRecord]:
        return self.medical_records.update(record_id, data)

    def delete_medical_record(self, record_id: int) -> bool:
        return self.medical_records.delete(record_id)

