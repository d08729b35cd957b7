from pydantic import BaseModel, ConfigDict, Field
from typing import Annotated, Literal, Union
import enum

URGENCY_MIN = 1
URGENCY_MAX = 5

class AppointmentKind(str, enum.Enum):
    REGULAR = "Regular"
    EMERGENCY = "Emergency"

class _AppointmentBase(BaseModel):
    """Fields shared by every appointment kind. Records are immutable once created."""
    model_config = ConfigDict(frozen=True)
    
    date: str
    time: str
    patient_id: str
    doctor_id: str
    
    @property
    def type(self) -> str:
        return self.kind
    
    def matches(self, patient_id: str, doctor_id: str, date: str, time: str) -> bool:
        """Exact comparison on the four fields used to identify a booking."""
        return (
            self.patient_id == patient_id
            and self.doctor_id == doctor_id
            and self.date == date
            and self.time == time
        )
    
    def report_line(self) -> str:
        return (
            f"{self.date} {self.time} | Patient: {self.patient_id} | "
            f"Doctor: {self.doctor_id} | {self.type} | Priority: {self.priority}"
        )

class RegularAppointment(_AppointmentBase):
    kind: Literal["Regular"] = AppointmentKind.REGULAR.value
    reason: str
    
    @property
    def priority(self) -> int:
        return 1
    
    def __repr__(self):
        return f"<RegularAppointment(patient_id='{self.patient_id}', doctor_id='{self.doctor_id}', date='{self.date}', time='{self.time}')>"

class EmergencyAppointment(_AppointmentBase):
    kind: Literal["Emergency"] = AppointmentKind.EMERGENCY.value
    urgency: int = Field(ge=URGENCY_MIN, le=URGENCY_MAX)
    
    @property
    def priority(self) -> int:
        return self.urgency
    
    def __repr__(self):
        return f"<EmergencyAppointment(patient_id='{self.patient_id}', doctor_id='{self.doctor_id}', date='{self.date}', time='{self.time}', urgency={self.urgency})>"

# Closed set of appointment kinds, tagged by ``kind``
Appointment = Annotated[
    Union[RegularAppointment, EmergencyAppointment],
    Field(discriminator="kind"),
]
