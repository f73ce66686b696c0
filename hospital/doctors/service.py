"""
Doctor Service - Business logic for doctor management.

This module provides service functions for doctor CRUD operations and the
per-department doctor listing.
"""
from typing import List, Optional
import logging

from ..exceptions import ResourceNotFoundException, InternalErrorException
from ..storage import Storage
from .schemas import Doctor, DoctorCreate, DoctorUpdate

# Set up logging
logger = logging.getLogger(__name__)


def list_doctors(storage: Storage, department_id: Optional[int] = None) -> List[Doctor]:
    """
    Get doctors, optionally only those in one department.

    Args:
        storage: Storage instance
        department_id: Only return doctors in this department

    Returns:
        List[Doctor]: Matching doctors

    Raises:
        InternalErrorException: If storage fails
    """
    try:
        if department_id is not None:
            return storage.get_doctors_by_department(department_id)
        return storage.get_doctors()
    except Exception as e:
        logger.error(f"Error fetching doctors: {str(e)}")
        raise InternalErrorException("Failed to fetch doctors")


def get_doctor(storage: Storage, doctor_id: int) -> Doctor:
    """
    Get a doctor by ID.

    Raises:
        ResourceNotFoundException: If the doctor does not exist
        InternalErrorException: If storage fails
    """
    try:
        doctor = storage.get_doctor(doctor_id)
    except Exception as e:
        logger.error(f"Error fetching doctor {doctor_id}: {str(e)}")
        raise InternalErrorException("Failed to fetch doctor")

    if doctor is None:
        raise ResourceNotFoundException("Doctor not found")
    return doctor


def create_doctor(storage: Storage, doctor_data: DoctorCreate) -> Doctor:
    """
    Create a doctor.

    The department_id is stored as given; the department need not exist.
    """
    try:
        doctor = storage.create_doctor(doctor_data)
    except Exception as e:
        logger.error(f"Error creating doctor: {str(e)}")
        raise InternalErrorException("Failed to create doctor")

    logger.info(f"Doctor {doctor.id} created in department {doctor.department_id}")
    return doctor


def update_doctor(storage: Storage, doctor_id: int, doctor_data: DoctorUpdate) -> Doctor:
    """
    Update a doctor with the fields present in ``doctor_data``.

    Raises:
        ResourceNotFoundException: If the doctor does not exist
    """
    try:
        doctor = storage.update_doctor(doctor_id, doctor_data)
    except Exception as e:
        logger.error(f"Error updating doctor {doctor_id}: {str(e)}")
        raise InternalErrorException("Failed to update doctor")

    if doctor is None:
        raise ResourceNotFoundException("Doctor not found")

    logger.info(f"Doctor {doctor_id} updated")
    return doctor


def delete_doctor(storage: Storage, doctor_id: int) -> None:
    """
    Delete a doctor.

    Raises:
        ResourceNotFoundException: If the doctor does not exist
    """
    try:
        deleted = storage.delete_doctor(doctor_id)
    except Exception as e:
        logger.error(f"Error deleting doctor {doctor_id}: {str(e)}")
        raise InternalErrorException("Failed to delete doctor")

    if not deleted:
        raise ResourceNotFoundException("Doctor not found")

    logger.info(f"Doctor {doctor_id} deleted")
