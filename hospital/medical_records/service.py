"""
Medical Record Service - Business logic for patient medical records.
"""
from typing import List, Optional
import logging

from ..exceptions import ResourceNotFoundException, InternalErrorException
from ..storage import Storage
from .schemas import MedicalRecord, MedicalRecordCreate, MedicalRecordUpdate

# Set up logging
logger = logging.getLogger(__name__)


def list_medical_records(
    storage: Storage,
    patient_id: Optional[int] = None,
    doctor_id: Optional[int] = None
) -> List[MedicalRecord]:
    """
    Get medical records, narrowed by at most one filter.

    ``patient_id`` wins over ``doctor_id`` when both are given.

    Raises:
        InternalErrorException: If storage fails
    """
    try:
        if patient_id is not None:
            return storage.get_medical_records_by_patient(patient_id)
        if doctor_id is not None:
            return storage.get_medical_records_by_doctor(doctor_id)
        return storage.get_medical_records()
    except Exception as e:
        logger.error(f"Error fetching medical records: {str(e)}")
        raise InternalErrorException("Failed to fetch medical records")


def get_medical_record(storage: Storage, record_id: int) -> MedicalRecord:
    """
    Get a medical record by ID.

    Raises:
        ResourceNotFoundException: If the record does not exist
        InternalErrorException: If storage fails
    """
    try:
        record = storage.get_medical_record(record_id)
    except Exception as e:
        logger.error(f"Error fetching medical record {record_id}: {str(e)}")
        raise InternalErrorException("Failed to fetch medical record")

    if record is None:
        raise ResourceNotFoundException("Medical record not found")
    return record


def create_medical_record(storage: Storage, record_data: MedicalRecordCreate) -> MedicalRecord:
    try:
        record = storage.create_medical_record(record_data)
    except Exception as e:
        logger.error(f"Error creating medical record: {str(e)}")
        raise InternalErrorException("Failed to create medical record")

    logger.info(f"Medical record {record.id} created for patient {record.patient_id} by doctor {record.doctor_id}")
    return record


def update_medical_record(storage: Storage, record_id: int, record_data: MedicalRecordUpdate) -> MedicalRecord:
    try:
        record = storage.update_medical_record(record_id, record_data)
    except Exception as e:
        logger.error(f"Error updating medical record {record_id}: {str(e)}")
        raise InternalErrorException("Failed to update medical record")

    if record is None:
        raise ResourceNotFoundException("Medical record not found")

    logger.info(f"Medical record {record_id} updated")
    return record


def delete_medical_record(storage: Storage, record_id: int) -> None:
    try:
        deleted = storage.delete_medical_record(record_id)
    except Exception as e:
        logger.error(f"Error deleting medical record {record_id}: {str(e)}")
        raise InternalErrorException("Failed to delete medical record")

    if not deleted:
        raise ResourceNotFoundException("Medical record not found")

    logger.info(f"Medical record {record_id} deleted")
