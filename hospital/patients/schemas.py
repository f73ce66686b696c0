"""
Patient Schemas - Pydantic models for patient data validation and serialization.
"""
import enum
from typing import Optional
from pydantic import ConfigDict, Field, StrictInt, StrictStr
from ..core.schemas import CamelModel


class Gender(str, enum.Enum):
    """Enum for patient gender"""
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class PatientStatus(str, enum.Enum):
    """Enum for patient admission status"""
    ACTIVE = "active"
    DISCHARGED = "discharged"
    CRITICAL = "critical"


class PatientBase(CamelModel):
    """
    Fields shared by patient create requests and stored patients

    Fields:
    - name: Patient's full name
    - email: Contact email
    - phone: Contact phone number
    - age: Age in years
    - gender: male, female or other
    - address: Home address (optional)
    - department_id: ID of the department treating the patient
    - status: Admission status, defaults to active
    """
    name: StrictStr = Field(..., description="Patient's full name")
    email: StrictStr = Field(..., description="Contact email")
    phone: StrictStr = Field(..., description="Contact phone number")
    age: StrictInt = Field(..., description="Age in years")
    gender: Gender = Field(..., description="Patient's gender")
    address: Optional[StrictStr] = Field(None, description="Home address")
    department_id: StrictInt = Field(..., description="ID of the department treating the patient")
    status: PatientStatus = Field(default=PatientStatus.ACTIVE, description="Admission status")


class PatientCreate(PatientBase):
    """Patient Create Schema - Used when admitting a new patient"""
    pass


class PatientUpdate(CamelModel):
    """Patient Update Schema - Every field optional, unset fields are left untouched"""
    name: Optional[StrictStr] = None
    email: Optional[StrictStr] = None
    phone: Optional[StrictStr] = None
    age: Optional[StrictInt] = None
    gender: Optional[Gender] = None
    address: Optional[StrictStr] = None
    department_id: Optional[StrictInt] = None
    status: Optional[PatientStatus] = None


class Patient(PatientBase):
    """Patient Schema - A stored patient, as returned by the API"""
    model_config = ConfigDict(frozen=True)

    id: int
