"""
Department Schemas - Pydantic models for department data validation and serialization.
"""
from typing import Optional
from pydantic import ConfigDict, Field, StrictInt, StrictStr
from ..core.schemas import CamelModel


class DepartmentBase(CamelModel):
    """
    Fields shared by department create requests and stored departments

    Fields:
    - name: Department name (e.g. Cardiology)
    - description: Short description of the department (optional)
    - head_doctor_id: ID of the doctor heading the department (optional, not checked)
    """
    name: StrictStr = Field(..., description="Department name")
    description: Optional[StrictStr] = Field(None, description="Short description of the department")
    head_doctor_id: Optional[StrictInt] = Field(None, description="ID of the doctor heading the department")


class DepartmentCreate(DepartmentBase):
    """Department Create Schema - Used when adding a new department"""
    pass


class DepartmentUpdate(CamelModel):
    """Department Update Schema - Every field optional, unset fields are left untouched"""
    name: Optional[StrictStr] = None
    description: Optional[StrictStr] = None
    head_doctor_id: Optional[StrictInt] = None


class Department(DepartmentBase):
    """Department Schema - A stored department, as returned by the API"""
    model_config = ConfigDict(frozen=True)

    id: int
