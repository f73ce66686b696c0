"""
Appointment Service - Business logic for appointment scheduling.

This module provides service functions for appointment CRUD operations and
the per-patient, per-doctor and per-date listings.
"""
from typing import List, Optional
import logging

from ..exceptions import ResourceNotFoundException, InternalErrorException
from ..storage import Storage
from .schemas import Appointment, AppointmentCreate, AppointmentUpdate

# Set up logging
logger = logging.getLogger(__name__)


def list_appointments(
    storage: Storage,
    patient_id: Optional[int] = None,
    doctor_id: Optional[int] = None,
    date: Optional[str] = None
) -> List[Appointment]:
    """
    Get appointments, narrowed by at most one filter.

    Filters are tried in order patient_id, doctor_id, date; the first one
    given is applied and the rest are ignored.

    Args:
        storage: Storage instance
        patient_id: Only return appointments for this patient
        doctor_id: Only return appointments with this doctor
        date: Only return appointments on this date (exact string match)

    Returns:
        List[Appointment]: Matching appointments

    Raises:
        InternalErrorException: If storage fails
    """
    try:
        if patient_id is not None:
            return storage.get_appointments_by_patient(patient_id)
        if doctor_id is not None:
            return storage.get_appointments_by_doctor(doctor_id)
        if date:
            return storage.get_appointments_by_date(date)
        return storage.get_appointments()
    except Exception as e:
        logger.error(f"Error fetching appointments: {str(e)}")
        raise InternalErrorException("Failed to fetch appointments")


def get_appointment(storage: Storage, appointment_id: int) -> Appointment:
    """
    Get an appointment by ID.

    Raises:
        ResourceNotFoundException: If the appointment does not exist
        InternalErrorException: If storage fails
    """
    try:
        appointment = storage.get_appointment(appointment_id)
    except Exception as e:
        logger.error(f"Error fetching appointment {appointment_id}: {str(e)}")
        raise InternalErrorException("Failed to fetch appointment")

    if appointment is None:
        raise ResourceNotFoundException("Appointment not found")
    return appointment


def create_appointment(storage: Storage, appointment_data: AppointmentCreate) -> Appointment:
    """
    Book an appointment.

    Patient, doctor and department IDs are stored as given without checking
    that they exist, and no double-booking check is made.
    """
    try:
        appointment = storage.create_appointment(appointment_data)
    except Exception as e:
        logger.error(f"Error creating appointment: {str(e)}")
        raise InternalErrorException("Failed to create appointment")

    logger.info(
        f"Appointment {appointment.id} booked for patient {appointment.patient_id} "
        f"with doctor {appointment.doctor_id} on {appointment.appointment_date} {appointment.appointment_time}"
    )
    return appointment


def update_appointment(storage: Storage, appointment_id: int, appointment_data: AppointmentUpdate) -> Appointment:
    """
    Update an appointment with the fields present in ``appointment_data``.

    Raises:
        ResourceNotFoundException: If the appointment does not exist
    """
    try:
        appointment = storage.update_appointment(appointment_id, appointment_data)
    except Exception as e:
        logger.error(f"Error updating appointment {appointment_id}: {str(e)}")
        raise InternalErrorException("Failed to update appointment")

    if appointment is None:
        raise ResourceNotFoundException("Appointment not found")

    logger.info(f"Appointment {appointment_id} updated (status: {appointment.status.value})")
    return appointment


def delete_appointment(storage: Storage, appointment_id: int) -> None:
    try:
        deleted = storage.delete_appointment(appointment_id)
    except Exception as e:
        logger.error(f"Error deleting appointment {appointment_id}: {str(e)}")
        raise InternalErrorException("Failed to delete appointment")

    if not deleted:
        raise ResourceNotFoundException("Appointment not found")

    logger.info(f"Appointment {appointment_id} deleted")
