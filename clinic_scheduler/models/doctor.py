from pydantic import BaseModel, Field
from typing import Iterator, List, Mapping

from .appointment import Appointment

class Doctor(BaseModel):
    name: str
    id: str
    specialty: str
    
    # Arena keys of appointments owned by the Clinic
    appointment_ids: List[int] = Field(default_factory=list)
    
    def add_appointment(self, key: int) -> None:
        self.appointment_ids.append(key)
    
    def remove_appointment(self, key: int) -> None:
        if key in self.appointment_ids:
            self.appointment_ids.remove(key)
    
    def view_schedule(self, resolve: Mapping[int, Appointment]) -> Iterator[str]:
        """Yield the doctor's schedule as text lines, in booking order."""
        yield f"Schedule for Dr. {self.name} ({self.specialty})"
        if not self.appointment_ids:
            yield "No appointments."
            return
        for key in self.appointment_ids:
            appt = resolve[key]
            yield (
                f"{appt.date} {appt.time} | Patient: {appt.patient_id} | "
                f"{appt.type} | Priority: {appt.priority}"
            )
    
    def __repr__(self):
        return f"<Doctor(id='{self.id}', name='{self.name}', specialty='{self.specialty}')>"
