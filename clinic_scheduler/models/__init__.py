from .appointment import (
    Appointment, AppointmentKind, EmergencyAppointment, RegularAppointment,
    URGENCY_MAX, URGENCY_MIN
)
from .doctor import Doctor
from .patient import Patient

__all__ = [
    "Appointment", "AppointmentKind", "EmergencyAppointment", "RegularAppointment",
    "URGENCY_MAX", "URGENCY_MIN", "Doctor", "Patient",
]
