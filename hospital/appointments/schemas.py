"""
Appointment Schemas - Pydantic models for appointment data validation and serialization.

Appointment dates and times are kept as the plain strings the client sends
(``YYYY-MM-DD`` and ``HH:MM`` from the booking form); date filtering compares
them verbatim.
"""
import enum
from typing import Optional
from pydantic import ConfigDict, Field, StrictInt, StrictStr
from ..core.schemas import CamelModel


class AppointmentStatus(str, enum.Enum):
    """Enum for appointment status"""
    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class AppointmentBase(CamelModel):
    """
    Fields shared by appointment create requests and stored appointments

    Fields:
    - patient_id: ID of the patient
    - doctor_id: ID of the doctor
    - department_id: ID of the department
    - appointment_date: Calendar date of the appointment
    - appointment_time: Time of day of the appointment
    - reason: Reason for the visit
    - status: Current status, defaults to scheduled
    - notes: Additional notes (optional)
    """
    patient_id: StrictInt = Field(..., description="ID of the patient")
    doctor_id: StrictInt = Field(..., description="ID of the doctor")
    department_id: StrictInt = Field(..., description="ID of the department")
    appointment_date: StrictStr = Field(..., description="Calendar date of the appointment (YYYY-MM-DD)")
    appointment_time: StrictStr = Field(..., description="Time of day of the appointment (HH:MM)")
    reason: StrictStr = Field(..., description="Reason for the visit")
    status: AppointmentStatus = Field(default=AppointmentStatus.SCHEDULED, description="Current status")
    notes: Optional[StrictStr] = Field(None, description="Additional notes")


class AppointmentCreate(AppointmentBase):
    """Appointment Create Schema - Used when booking an appointment"""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "patientId": 1,
                "doctorId": 1,
                "departmentId": 1,
                "appointmentDate": "2024-03-15",
                "appointmentTime": "09:30",
                "reason": "Routine check-up",
                "status": "scheduled"
            }
        }
    )


class AppointmentUpdate(CamelModel):
    """Appointment Update Schema - Every field optional, unset fields are left untouched"""
    patient_id: Optional[StrictInt] = None
    doctor_id: Optional[StrictInt] = None
    department_id: Optional[StrictInt] = None
    appointment_date: Optional[StrictStr] = None
    appointment_time: Optional[StrictStr] = None
    reason: Optional[StrictStr] = None
    status: Optional[AppointmentStatus] = None
    notes: Optional[StrictStr] = None


class Appointment(AppointmentBase):
    """Appointment Schema - A stored appointment, as returned by the API"""
    model_config = ConfigDict(frozen=True)

    id: int
