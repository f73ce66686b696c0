"""
Medical Record Router - API endpoints for patient medical records.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, Query, Response, status

from ..dependencies import get_storage, parse_id_filter
from ..storage import Storage
from ..core.schemas import MessageResponse
from .schemas import MedicalRecord, MedicalRecordCreate, MedicalRecordUpdate
from . import service

router = APIRouter(responses={404: {"model": MessageResponse}, 400: {"model": MessageResponse}})


@router.get("", response_model=List[MedicalRecord])
async def list_medical_records(
    patient_id: Optional[str] = Query(None, alias="patientId", description="Filter by patient"),
    doctor_id: Optional[str] = Query(None, alias="doctorId", description="Filter by doctor"),
    storage: Storage = Depends(get_storage)
):
    """
    Get medical records

    ``patientId`` takes precedence over ``doctorId``.
    Empty filters are skipped; a non-numeric id answers 400.
    """
    return service.list_medical_records(
        storage,
        patient_id=parse_id_filter(patient_id, "patientId"),
        doctor_id=parse_id_filter(doctor_id, "doctorId")
    )


@router.get("/{record_id}", response_model=MedicalRecord)
async def get_medical_record(record_id: int, storage: Storage = Depends(get_storage)):
    return service.get_medical_record(storage, record_id)


@router.post("", response_model=MedicalRecord, status_code=status.HTTP_201_CREATED)
async def create_medical_record(record_data: MedicalRecordCreate, storage: Storage = Depends(get_storage)):
    """
    Write a medical record
    """
    return service.create_medical_record(storage, record_data)


@router.put("/{record_id}", response_model=MedicalRecord)
async def update_medical_record(
    record_id: int,
    record_data: MedicalRecordUpdate,
    storage: Storage = Depends(get_storage)
):
    return service.update_medical_record(storage, record_id, record_data)


@router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_medical_record(record_id: int, storage: Storage = Depends(get_storage)):
    service.delete_medical_record(storage, record_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
