"""
Dashboard Schemas - Summary counts shown on the hospital overview page.
"""
from ..core.schemas import CamelModel


class DashboardStats(CamelModel):
    """
    Dashboard Stats Schema

    Fields:
    - date: Day used for today_appointments (YYYY-MM-DD)
    - total_patients: Number of stored patients
    - active_doctors: Number of doctors with status active
    - today_appointments: Number of appointments on ``date``
    - total_departments: Number of stored departments
    """
    date: str
    total_patients: int
    active_doctors: int
    today_appointments: int
    total_departments: int
