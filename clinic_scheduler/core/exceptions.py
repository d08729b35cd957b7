from typing import Optional

# Clinic exceptions
class ClinicError(Exception):
    def __init__(self, detail: str = "Clinic operation failed"):
        super().__init__(detail)
        self.detail = detail

class PatientOrDoctorNotFound(ClinicError):
    def __init__(self, patient_id: Optional[str] = None, doctor_id: Optional[str] = None,
                 detail: str = "Invalid patient or doctor ID."):
        super().__init__(detail)
        self.patient_id = patient_id
        self.doctor_id = doctor_id

class AppointmentNotFound(ClinicError):
    def __init__(self, patient_id: str, doctor_id: str, date: str, time: str):
        super().__init__("Appointment not found.")
        self.patient_id = patient_id
        self.doctor_id = doctor_id
        self.date = date
        self.time = time
