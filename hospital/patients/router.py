"""
Patient Router - API endpoints for patient management and search.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, Query, Response, status

from ..dependencies import get_storage, parse_id_filter
from ..storage import Storage
from ..core.schemas import MessageResponse
from .schemas import Patient, PatientCreate, PatientUpdate
from . import service

router = APIRouter(responses={404: {"model": MessageResponse}, 400: {"model": MessageResponse}})


@router.get("", response_model=List[Patient])
async def list_patients(
    search: Optional[str] = Query(None, description="Search by name, email, phone or ID"),
    department_id: Optional[str] = Query(None, alias="departmentId", description="Filter by department"),
    storage: Storage = Depends(get_storage)
):
    """
    Get patients

    When both ``search`` and ``departmentId`` are given only the search is applied.
    An empty ``departmentId`` is ignored; a non-numeric one answers 400.
    """
    return service.list_patients(
        storage,
        search=search,
        department_id=parse_id_filter(department_id, "departmentId")
    )


@router.get("/{patient_id}", response_model=Patient)
async def get_patient(patient_id: int, storage: Storage = Depends(get_storage)):
    """
    Get a patient by ID
    """
    return service.get_patient(storage, patient_id)


@router.post("", response_model=Patient, status_code=status.HTTP_201_CREATED)
async def create_patient(patient_data: PatientCreate, storage: Storage = Depends(get_storage)):
    """
    Admit a patient

    Status defaults to active when not given.
    """
    return service.create_patient(storage, patient_data)


@router.put("/{patient_id}", response_model=Patient)
async def update_patient(
    patient_id: int,
    patient_data: PatientUpdate,
    storage: Storage = Depends(get_storage)
):
    """
    Update a patient
    """
    return service.update_patient(storage, patient_id, patient_data)


@router.delete("/{patient_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_patient(patient_id: int, storage: Storage = Depends(get_storage)):
    """
    Delete a patient
    """
    service.delete_patient(storage, patient_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
