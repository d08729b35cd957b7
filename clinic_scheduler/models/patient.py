from pydantic import BaseModel, Field
from typing import Iterator, List, Mapping

from .appointment import Appointment

class Patient(BaseModel):
    name: str
    id: str
    
    # Arena keys of appointments owned by the Clinic
    appointment_ids: List[int] = Field(default_factory=list)
    
    def add_appointment(self, key: int) -> None:
        self.appointment_ids.append(key)
    
    def remove_appointment(self, key: int) -> None:
        if key in self.appointment_ids:
            self.appointment_ids.remove(key)
    
    def view_appointments(self, resolve: Mapping[int, Appointment]) -> Iterator[str]:
        """Yield this patient's appointments as text lines, in booking order."""
        yield f"Appointments for {self.name} ({self.id})"
        if not self.appointment_ids:
            yield "No appointments."
            return
        for key in self.appointment_ids:
            appt = resolve[key]
            yield (
                f"{appt.date} {appt.time} | Doctor: {appt.doctor_id} | "
                f"{appt.type} | Priority: {appt.priority}"
            )
    
    def __repr__(self):
        return f"<Patient(id='{self.id}', name='{self.name}')>"
