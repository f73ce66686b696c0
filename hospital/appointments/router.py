"""
Appointment Router - API endpoints for appointment scheduling.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, Query, Response, status

from ..dependencies import get_storage, parse_id_filter
from ..storage import Storage
from ..core.schemas import MessageResponse
from .schemas import Appointment, AppointmentCreate, AppointmentUpdate
from . import service

router = APIRouter(responses={404: {"model": MessageResponse}, 400: {"model": MessageResponse}})


@router.get("", response_model=List[Appointment])
async def list_appointments(
    patient_id: Optional[str] = Query(None, alias="patientId", description="Filter by patient"),
    doctor_id: Optional[str] = Query(None, alias="doctorId", description="Filter by doctor"),
    date: Optional[str] = Query(None, description="Filter by appointment date (YYYY-MM-DD)"),
    storage: Storage = Depends(get_storage)
):
    """
    Get appointments

    Only one filter is applied: ``patientId`` first, then ``doctorId``, then ``date``.
    Empty filters are skipped; a non-numeric ``patientId`` or ``doctorId`` answers 400.
    """
    return service.list_appointments(
        storage,
        patient_id=parse_id_filter(patient_id, "patientId"),
        doctor_id=parse_id_filter(doctor_id, "doctorId"),
        date=date
    )


@router.get("/{appointment_id}", response_model=Appointment)
async def get_appointment(appointment_id: int, storage: Storage = Depends(get_storage)):
    """
    Get an appointment by ID
    """
    return service.get_appointment(storage, appointment_id)


@router.post("", response_model=Appointment, status_code=status.HTTP_201_CREATED)
async def create_appointment(appointment_data: AppointmentCreate, storage: Storage = Depends(get_storage)):
    """
    Book an appointment

    Status defaults to scheduled when not given.
    """
    return service.create_appointment(storage, appointment_data)


@router.put("/{appointment_id}", response_model=Appointment)
async def update_appointment(
    appointment_id: int,
    appointment_data: AppointmentUpdate,
    storage: Storage = Depends(get_storage)
):
    """
    Update an appointment

    Used both for rescheduling and for marking an appointment completed or cancelled.
    """
    return service.update_appointment(storage, appointment_id, appointment_data)


@router.delete("/{appointment_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_appointment(appointment_id: int, storage: Storage = Depends(get_storage)):
    """
    Delete an appointment
    """
    service.delete_appointment(storage, appointment_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
