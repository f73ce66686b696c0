"""
Department Router - API endpoints for department management.
"""
from typing import List
from fastapi import APIRouter, Depends, Response, status

from ..dependencies import get_storage
from ..storage import Storage
from ..core.schemas import MessageResponse
from .schemas import Department, DepartmentCreate, DepartmentUpdate
from . import service

router = APIRouter(responses={404: {"model": MessageResponse}, 400: {"model": MessageResponse}})


@router.get("", response_model=List[Department])
async def list_departments(storage: Storage = Depends(get_storage)):
    """
    Get all departments
    """
    return service.list_departments(storage)


@router.get("/{department_id}", response_model=Department)
async def get_department(department_id: int, storage: Storage = Depends(get_storage)):
    """
    Get a department by ID
    """
    return service.get_department(storage, department_id)


@router.post("", response_model=Department, status_code=status.HTTP_201_CREATED)
async def create_department(department_data: DepartmentCreate, storage: Storage = Depends(get_storage)):
    """
    Create a department

    The new department receives the next unused ID.
    """
    return service.create_department(storage, department_data)


@router.put("/{department_id}", response_model=Department)
async def update_department(
    department_id: int,
    department_data: DepartmentUpdate,
    storage: Storage = Depends(get_storage)
):
    """
    Update a department

    Only the fields present in the body are changed.
    """
    return service.update_department(storage, department_id, department_data)


@router.delete("/{department_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_department(department_id: int, storage: Storage = Depends(get_storage)):
    """
    Delete a department
    """
    service.delete_department(storage, department_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
