"""
Medical Record Schemas - Pydantic models for medical record validation and serialization.
"""
from typing import Optional
from pydantic import ConfigDict, Field, StrictInt, StrictStr
from ..core.schemas import CamelModel


class MedicalRecordBase(CamelModel):
    """
    Fields shared by medical record create requests and stored records

    Fields:
    - patient_id: ID of the patient
    - doctor_id: ID of the attending doctor
    - appointment_id: ID of the appointment the record came from (optional)
    - diagnosis: Medical diagnosis
    - treatment: Treatment prescribed
    - medications: Prescribed medications (optional)
    - notes: Additional medical notes (optional)
    - record_date: Date the record was written
    """
    patient_id: StrictInt = Field(..., description="ID of the patient")
    doctor_id: StrictInt = Field(..., description="ID of the attending doctor")
    appointment_id: Optional[StrictInt] = Field(None, description="ID of the related appointment")
    diagnosis: StrictStr = Field(..., description="Medical diagnosis")
    treatment: StrictStr = Field(..., description="Treatment prescribed")
    medications: Optional[StrictStr] = Field(None, description="Prescribed medications")
    notes: Optional[StrictStr] = Field(None, description="Additional medical notes")
    record_date: StrictStr = Field(..., description="Date the record was written")


class MedicalRecordCreate(MedicalRecordBase):
    """Medical Record Create Schema - Used when writing a new record"""
    pass


class MedicalRecordUpdate(CamelModel):
    """Medical Record Update Schema - Every field optional, unset fields are left untouched"""
    patient_id: Optional[StrictInt] = None
    doctor_id: Optional[StrictInt] = None
    appointment_id: Optional[StrictInt] = None
    diagnosis: Optional[StrictStr] = None
    treatment: Optional[StrictStr] = None
    medications: Optional[StrictStr] = None
    notes: Optional[StrictStr] = None
    record_date: Optional[StrictStr] = None


class MedicalRecord(MedicalRecordBase):
    """Medical Record Schema - A stored medical record, as returned by the API"""
    model_config = ConfigDict(frozen=True)

    id: int
