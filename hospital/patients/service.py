"""
Patient Service - Business logic for patient management.

This module provides service functions for patient CRUD operations, the
per-department listing and free-text patient search.
"""
from typing import List, Optional
import logging

from ..exceptions import ResourceNotFoundException, InternalErrorException
from ..storage import Storage
from .schemas import Patient, PatientCreate, PatientUpdate

# Set up logging
logger = logging.getLogger(__name__)


def list_patients(
    storage: Storage,
    search: Optional[str] = None,
    department_id: Optional[int] = None
) -> List[Patient]:
    """
    Get patients, narrowed by at most one filter.

    A non-empty ``search`` wins over ``department_id``; the other filter is
    ignored when both are given.

    Args:
        storage: Storage instance
        search: Free-text query matched against name, email, phone and ID
        department_id: Only return patients in this department

    Returns:
        List[Patient]: Matching patients

    Raises:
        InternalErrorException: If storage fails
    """
    try:
        if search:
            return storage.search_patients(search)
        if department_id is not None:
            return storage.get_patients_by_department(department_id)
        return storage.get_patients()
    except Exception as e:
        logger.error(f"Error fetching patients: {str(e)}")
        raise InternalErrorException("Failed to fetch patients")


def get_patient(storage: Storage, patient_id: int) -> Patient:
    """
    Get a patient by ID.

    Raises:
        ResourceNotFoundException: If the patient does not exist
        InternalErrorException: If storage fails
    """
    try:
        patient = storage.get_patient(patient_id)
    except Exception as e:
        logger.error(f"Error fetching patient {patient_id}: {str(e)}")
        raise InternalErrorException("Failed to fetch patient")

    if patient is None:
        raise ResourceNotFoundException("Patient not found")
    return patient


def create_patient(storage: Storage, patient_data: PatientCreate) -> Patient:
    try:
        patient = storage.create_patient(patient_data)
    except Exception as e:
        logger.error(f"Error creating patient: {str(e)}")
        raise InternalErrorException("Failed to create patient")

    logger.info(f"Patient {patient.id} admitted to department {patient.department_id}")
    return patient


def update_patient(storage: Storage, patient_id: int, patient_data: PatientUpdate) -> Patient:
    """
    Update a patient with the fields present in ``patient_data``.

    Raises:
        ResourceNotFoundException: If the patient does not exist
    """
    try:
        patient = storage.update_patient(patient_id, patient_data)
    except Exception as e:
        logger.error(f"Error updating patient {patient_id}: {str(e)}")
        raise InternalErrorException("Failed to update patient")

    if patient is None:
        raise ResourceNotFoundException("Patient not found")

    logger.info(f"Patient {patient_id} updated")
    return patient


def delete_patient(storage: Storage, patient_id: int) -> None:
    """
    Delete a patient.

    Appointments and medical records that reference the patient are kept.

    Raises:
        ResourceNotFoundException: If the patient does not exist
    """
    try:
        deleted = storage.delete_patient(patient_id)
    except Exception as e:
        logger.error(f"Error deleting patient {patient_id}: {str(e)}")
        raise InternalErrorException("Failed to delete patient")

    if not deleted:
        raise ResourceNotFoundException("Patient not found")

    logger.info(f"Patient {patient_id} deleted")
