"""
Doctor Schemas - Pydantic models for doctor data validation and serialization.

This module defines the schemas used for creating, updating and returning doctors.
"""
import enum
from typing import Optional
from pydantic import ConfigDict, Field, StrictInt, StrictStr
from ..core.schemas import CamelModel


class DoctorStatus(str, enum.Enum):
    """Enum for doctor employment status"""
    ACTIVE = "active"
    INACTIVE = "inactive"


class DoctorBase(CamelModel):
    """
    Fields shared by doctor create requests and stored doctors

    Fields:
    - name: Doctor's full name
    - email: Contact email (uniqueness is not enforced)
    - phone: Contact phone number
    - specialization: Doctor's medical specialization
    - department_id: ID of the department the doctor works in
    - experience: Years of experience
    - status: Employment status, defaults to active
    """
    name: StrictStr = Field(..., description="Doctor's full name")
    email: StrictStr = Field(..., description="Contact email")
    phone: StrictStr = Field(..., description="Contact phone number")
    specialization: StrictStr = Field(..., description="Doctor's medical specialization")
    department_id: StrictInt = Field(..., description="ID of the department the doctor works in")
    experience: StrictInt = Field(..., description="Years of experience")
    status: DoctorStatus = Field(default=DoctorStatus.ACTIVE, description="Employment status")


class DoctorCreate(DoctorBase):
    """Doctor Create Schema - Used when adding a new doctor"""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Dr. Sarah Johnson",
                "email": "sarah.johnson@hospital.com",
                "phone": "555-0101",
                "specialization": "Cardiologist",
                "departmentId": 1,
                "experience": 12,
                "status": "active"
            }
        }
    )


class DoctorUpdate(CamelModel):
    """Doctor Update Schema - Every field optional, unset fields are left untouched"""
    name: Optional[StrictStr] = None
    email: Optional[StrictStr] = None
    phone: Optional[StrictStr] = None
    specialization: Optional[StrictStr] = None
    department_id: Optional[StrictInt] = None
    experience: Optional[StrictInt] = None
    status: Optional[DoctorStatus] = None


class Doctor(DoctorBase):
    """Doctor Schema - A stored doctor, as returned by the API"""
    model_config = ConfigDict(frozen=True)

    id: int
