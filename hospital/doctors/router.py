"""
Doctor Router - API endpoints for doctor management.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, Query, Response, status

from ..dependencies import get_storage, parse_id_filter
from ..storage import Storage
from ..core.schemas import MessageResponse
from .schemas import Doctor, DoctorCreate, DoctorUpdate
from . import service

router = APIRouter(responses={404: {"model": MessageResponse}, 400: {"model": MessageResponse}})


@router.get("", response_model=List[Doctor])
async def list_doctors(
    department_id: Optional[str] = Query(None, alias="departmentId", description="Filter by department"),
    storage: Storage = Depends(get_storage)
):
    """
    Get all doctors, or only the doctors of one department

    An empty ``departmentId`` is ignored; a non-numeric one answers 400.
    """
    return service.list_doctors(storage, department_id=parse_id_filter(department_id, "departmentId"))


@router.get("/{doctor_id}", response_model=Doctor)
async def get_doctor(doctor_id: int, storage: Storage = Depends(get_storage)):
    """
    Get a doctor by ID
    """
    return service.get_doctor(storage, doctor_id)


@router.post("", response_model=Doctor, status_code=status.HTTP_201_CREATED)
async def create_doctor(doctor_data: DoctorCreate, storage: Storage = Depends(get_storage)):
    """
    Add a doctor

    Status defaults to active when not given.
    """
    return service.create_doctor(storage, doctor_data)


@router.put("/{doctor_id}", response_model=Doctor)
async def update_doctor(
    doctor_id: int,
    doctor_data: DoctorUpdate,
    storage: Storage = Depends(get_storage)
):
    """
    Update a doctor

    Only the fields present in the body are changed.
    """
    return service.update_doctor(storage, doctor_id, doctor_data)


@router.delete("/{doctor_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_doctor(doctor_id: int, storage: Storage = Depends(get_storage)):
    """
    Delete a doctor
    """
    service.delete_doctor(storage, doctor_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
