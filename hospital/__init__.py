"""
Hospital management backend.

This package provides a REST API over five related record types:
- Departments
- Doctors
- Patients
- Appointments
- Medical records
"""
