from typing import Dict, Iterator, List, Optional
import itertools
import logging

from ..core.exceptions import AppointmentNotFound, PatientOrDoctorNotFound
from ..models.appointment import Appointment
from ..models.doctor import Doctor
from ..models.patient import Patient

logger = logging.getLogger(__name__)

REPORT_HEADER = "--- Appointment Report ---"

class Clinic:
    """Sole owner of patients, doctors and appointments.

    Appointments live in an arena keyed by a booking sequence number; patients
    and doctors only hold those keys.
    """

    def __init__(self):
        self.patients: List[Patient] = []
        self.doctors: List[Doctor] = []
        self._appointments: Dict[int, Appointment] = {}
        self._sequence = itertools.count(1)

    @property
    def appointments(self) -> List[Appointment]:
        """Current appointments in booking order."""
        return list(self._appointments.values())

    def get_appointment(self, key: int) -> Optional[Appointment]:
        return self._appointments.get(key)

    def find_patient(self, patient_id: str) -> Optional[Patient]:
        # First match wins when IDs are duplicated
        for patient in self.patients:
            if patient.id == patient_id:
                return patient
        return None

    def find_doctor(self, doctor_id: str) -> Optional[Doctor]:
        for doctor in self.doctors:
            if doctor.id == doctor_id:
                return doctor
        return None

    def add_patient(self, name: str, patient_id: str) -> Patient:
        """Register a new patient. Duplicate IDs are not rejected."""
        patient = Patient(name=name, id=patient_id)
        self.patients.append(patient)
        logger.info(f"Added patient {patient_id}")
        return patient

    def add_doctor(self, name: str, doctor_id: str, specialty: str) -> Doctor:
        """Register a new doctor. Duplicate IDs are not rejected."""
        doctor = Doctor(name=name, id=doctor_id, specialty=specialty)
        self.doctors.append(doctor)
        logger.info(f"Added doctor {doctor_id} ({specialty})")
        return doctor

    def book_appointment(self, appointment: Appointment) -> int:
        """Book an appointment and return its key.

        Raises PatientOrDoctorNotFound, leaving the clinic untouched, when
        either ID is unknown.
        """
        patient = self.find_patient(appointment.patient_id)
        doctor = self.find_doctor(appointment.doctor_id)

        if patient is None or doctor is None:
            logger.warning(
                f"Booking rejected: patient={appointment.patient_id} "
                f"doctor={appointment.doctor_id}"
            )
            raise PatientOrDoctorNotFound(appointment.patient_id, appointment.doctor_id)

        key = next(self._sequence)
        patient.add_appointment(key)
        doctor.add_appointment(key)
        self._appointments[key] = appointment

        logger.info(f"Booked appointment {key}: {appointment!r}")
        return key

    def cancel_appointment(
        self, patient_id: str, doctor_id: str, date: str, time: str
    ) -> Appointment:
        """Cancel the first-booked appointment matching all four fields."""
        key = next(
            (
                k for k, appt in self._appointments.items()
                if appt.matches(patient_id, doctor_id, date, time)
            ),
            None,
        )

        if key is None:
            logger.warning(
                f"Cancellation failed: no appointment for patient={patient_id} "
                f"doctor={doctor_id} at {date} {time}"
            )
            raise AppointmentNotFound(patient_id, doctor_id, date, time)

        patient = self.find_patient(patient_id)
        if patient is not None:
            patient.remove_appointment(key)
        doctor = self.find_doctor(doctor_id)
        if doctor is not None:
            doctor.remove_appointment(key)

        appointment = self._appointments.pop(key)
        logger.info(f"Cancelled appointment {key}")
        return appointment

    def generate_report(self) -> List[Appointment]:
        """Return all appointments by descending priority.

        The sort is stable, so equal priorities keep booking order.
        """
        return sorted(
            self._appointments.values(),
            key=lambda appt: appt.priority,
            reverse=True,
        )

    def report_lines(self) -> Iterator[str]:
        yield REPORT_HEADER
        for appointment in self.generate_report():
            yield appointment.report_line()

    def patient_appointments(self, patient_id: str) -> Iterator[str]:
        patient = self.find_patient(patient_id)
        if patient is None:
            raise PatientOrDoctorNotFound(patient_id=patient_id, detail="Patient not found.")
        return patient.view_appointments(self._appointments)

    def doctor_schedule(self, doctor_id: str) -> Iterator[str]:
        doctor = self.find_doctor(doctor_id)
        if doctor is None:
            raise PatientOrDoctorNotFound(doctor_id=doctor_id, detail="Doctor not found.")
        return doctor.view_schedule(self._appointments)
