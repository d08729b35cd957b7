from typing import Callable, Dict, Optional
import logging

from ..core.exceptions import ClinicError
from ..models.appointment import (
    AppointmentKind, EmergencyAppointment, RegularAppointment,
    URGENCY_MAX, URGENCY_MIN
)
from ..services.clinic_service import Clinic
from .prompts import (
    EndOfInput, InputFn, OutputFn, read_choice, read_int, read_string
)

logger = logging.getLogger(__name__)

MENU = (
    "\n1.Add Patient 2.Add Doctor 3.Book Appointment\n"
    "4.View Report 5.Cancel Appointment 6.Exit\n"
    "7.View Patient Appointments 8.View Doctor Schedule"
)
EXIT_CHOICE = "6"

class ClinicConsole:
    """Menu loop that collects field values and calls into a Clinic."""

    def __init__(
        self,
        clinic: Optional[Clinic] = None,
        input_fn: Optional[InputFn] = None,
        output_fn: Optional[OutputFn] = None,
    ):
        self.clinic = clinic if clinic is not None else Clinic()
        self.input_fn = input_fn or input
        self.output_fn = output_fn or print
        self.commands: Dict[str, Callable[[], None]] = {
            "1": self.add_patient,
            "2": self.add_doctor,
            "3": self.book_appointment,
            "4": self.view_report,
            "5": self.cancel_appointment,
            "7": self.view_patient_appointments,
            "8": self.view_doctor_schedule,
        }

    def _string(self, prompt: str) -> str:
        return read_string(prompt, self.input_fn)

    def run(self) -> None:
        """Run until the user selects Exit or input runs out."""
        try:
            while True:
                self.output_fn(MENU)
                choice = self.input_fn("Choice: ").strip()
                if choice == EXIT_CHOICE:
                    break
                command = self.commands.get(choice)
                if command is None:
                    self.output_fn("Invalid choice.")
                    continue
                try:
                    command()
                except ClinicError as e:
                    self.output_fn(e.detail)
        except (EOFError, EndOfInput):
            logger.info("Input closed, exiting")

    def add_patient(self) -> None:
        self.clinic.add_patient(self._string("Name: "), self._string("Patient ID: "))
        self.output_fn("Patient added.")

    def add_doctor(self) -> None:
        self.clinic.add_doctor(
            self._string("Name: "),
            self._string("Doctor ID: "),
            self._string("Specialty: "),
        )
        self.output_fn("Doctor added.")

    def book_appointment(self) -> None:
        fields = {
            "patient_id": self._string("Patient ID: "),
            "doctor_id": self._string("Doctor ID: "),
            "date": self._string("Date (YYYY-MM-DD): "),
            "time": self._string("Time (HH:MM): "),
        }
        kind = read_choice(
            "Type (Regular/Emergency): ",
            [k.value for k in AppointmentKind],
            self.input_fn,
            self.output_fn,
        )

        if kind == AppointmentKind.REGULAR.value:
            appointment = RegularAppointment(reason=self._string("Reason: "), **fields)
        else:
            urgency = read_int(
                f"Urgency ({URGENCY_MIN}-{URGENCY_MAX}): ",
                URGENCY_MIN,
                URGENCY_MAX,
                self.input_fn,
                self.output_fn,
            )
            appointment = EmergencyAppointment(urgency=urgency, **fields)

        self.clinic.book_appointment(appointment)
        self.output_fn("Appointment booked.")

    def view_report(self) -> None:
        for line in self.clinic.report_lines():
            self.output_fn(line)

    def cancel_appointment(self) -> None:
        self.clinic.cancel_appointment(
            self._string("Patient ID: "),
            self._string("Doctor ID: "),
            self._string("Date: "),
            self._string("Time: "),
        )
        self.output_fn("Appointment cancelled.")

    def view_patient_appointments(self) -> None:
        for line in self.clinic.patient_appointments(self._string("Patient ID: ")):
            self.output_fn(line)

    def view_doctor_schedule(self) -> None:
        for line in self.clinic.doctor_schedule(self._string("Doctor ID: ")):
            self.output_fn(line)
