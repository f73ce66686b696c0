"""
Department Service - Business logic for department management.

This module provides service functions for department CRUD operations on top
of the storage layer. Not-found lookups become ResourceNotFoundException,
unexpected storage failures become InternalErrorException.
"""
from typing import List
import logging

from ..exceptions import ResourceNotFoundException, InternalErrorException
from ..storage import Storage
from .schemas import Department, DepartmentCreate, DepartmentUpdate

# Set up logging
logger = logging.getLogger(__name__)


def list_departments(storage: Storage) -> List[Department]:
    """
    Get every department.

    Args:
        storage: Storage instance

    Returns:
        List[Department]: All departments in insertion order

    Raises:
        InternalErrorException: If storage fails
    """
    try:
        return storage.get_departments()
    except Exception as e:
        logger.error(f"Error fetching departments: {str(e)}")
        raise InternalErrorException("Failed to fetch departments")


def get_department(storage: Storage, department_id: int) -> Department:
    """
    Get a department by ID.

    Args:
        storage: Storage instance
        department_id: ID of the department

    Returns:
        Department: The stored department

    Raises:
        ResourceNotFoundException: If the department does not exist
        InternalErrorException: If storage fails
    """
    try:
        department = storage.get_department(department_id)
    except Exception as e:
        logger.error(f"Error fetching department {department_id}: {str(e)}")
        raise InternalErrorException("Failed to fetch department")

    if department is None:
        raise ResourceNotFoundException("Department not found")
    return department


def create_department(storage: Storage, department_data: DepartmentCreate) -> Department:
    """
    Create a department.

    Name uniqueness is not checked; two departments may share a name.

    Args:
        storage: Storage instance
        department_data: Validated department fields

    Returns:
        Department: The stored department with its new ID
    """
    try:
        department = storage.create_department(department_data)
    except Exception as e:
        logger.error(f"Error creating department: {str(e)}")
        raise InternalErrorException("Failed to create department")

    logger.info(f"Department {department.id} created: {department.name}")
    return department


def update_department(storage: Storage, department_id: int, department_data: DepartmentUpdate) -> Department:
    """
    Update a department with the fields present in ``department_data``.

    Args:
        storage: Storage instance
        department_id: ID of the department
        department_data: Fields to change

    Returns:
        Department: The updated department

    Raises:
        ResourceNotFoundException: If the department does not exist
    """
    try:
        department = storage.update_department(department_id, department_data)
    except Exception as e:
        logger.error(f"Error updating department {department_id}: {str(e)}")
        raise InternalErrorException("Failed to update department")

    if department is None:
        raise ResourceNotFoundException("Department not found")

    logger.info(f"Department {department_id} updated")
    return department


def delete_department(storage: Storage, department_id: int) -> None:
    """
    Delete a department.

    Doctors and patients that reference it keep their department_id.

    Raises:
        ResourceNotFoundException: If the department does not exist
    """
    try:
        deleted = storage.delete_department(department_id)
    except Exception as e:
        logger.error(f"Error deleting department {department_id}: {str(e)}")
        raise InternalErrorException("Failed to delete department")

    if not deleted:
        raise ResourceNotFoundException("Department not found")

    logger.info(f"Department {department_id} deleted")
