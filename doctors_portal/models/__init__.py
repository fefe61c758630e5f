from .appointment_option import AppointmentOption
from .booking import Booking
from .doctor import Doctor
from .user import User

__all__ = ["AppointmentOption", "Booking", "Doctor", "User"]
