"""
Dashboard Service - Aggregate counts across all hospital records.
"""
from datetime import datetime, timezone
from typing import Optional
import logging

from ..exceptions import InternalErrorException
from ..storage import Storage
from ..doctors.schemas import DoctorStatus
from .schemas import DashboardStats

# Set up logging
logger = logging.getLogger(__name__)


def get_dashboard_stats(storage: Storage, date: Optional[str] = None) -> DashboardStats:
    """
    Count patients, active doctors, the day's appointments and departments.

    Args:
        storage: Storage instance
        date: Day to count appointments for; defaults to the current UTC date

    Returns:
        DashboardStats: Summary counts

    Raises:
        InternalErrorException: If storage fails
    """
    day = date or datetime.now(timezone.utc).date().isoformat()

    try:
        active_doctors = [
            doctor for doctor in storage.get_doctors()
            if doctor.status == DoctorStatus.ACTIVE
        ]
        return DashboardStats(
            date=day,
            total_patients=len(storage.get_patients()),
            active_doctors=len(active_doctors),
            today_appointments=len(storage.get_appointments_by_date(day)),
            total_departments=len(storage.get_departments()),
        )
    except Exception as e:
        logger.error(f"Error computing dashboard stats: {str(e)}")
        raise InternalErrorException("Failed to fetch dashboard stats")
