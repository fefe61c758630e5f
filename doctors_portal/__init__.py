"""
Doctors Portal

A FastAPI booking service for a medical-appointment portal: treatment slot
availability, bookings, users with an admin role, and a doctor roster.
"""

__version__ = "1.0.0"
