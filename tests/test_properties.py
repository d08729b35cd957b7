"""
Property-based tests for appointment priority and report ordering

These tests validate properties that must hold for any sequence of bookings,
using Hypothesis to generate the appointments.
"""

from hypothesis import given, settings, strategies as st

from clinic_scheduler.models import EmergencyAppointment, RegularAppointment
from clinic_scheduler.services.clinic_service import Clinic

PATIENT_IDS = ["P1", "P2"]
DOCTOR_IDS = ["D1", "D2"]

_fields = dict(
    date=st.sampled_from(["2024-01-01", "2024-01-02"]),
    time=st.sampled_from(["09:00", "10:00", "11:00"]),
    patient_id=st.sampled_from(PATIENT_IDS),
    doctor_id=st.sampled_from(DOCTOR_IDS),
)

regular_strategy = st.builds(RegularAppointment, reason=st.text(min_size=1, max_size=20), **_fields)
emergency_strategy = st.builds(EmergencyAppointment, urgency=st.integers(min_value=1, max_value=5), **_fields)
appointment_strategy = st.one_of(regular_strategy, emergency_strategy)

def _clinic():
    clinic = Clinic()
    for pid in PATIENT_IDS:
        clinic.add_patient(f"Patient {pid}", pid)
    for did in DOCTOR_IDS:
        clinic.add_doctor(f"Doctor {did}", did, "General")
    return clinic

class TestPriorityProperties:

    @settings(max_examples=50)
    @given(appt=regular_strategy)
    def test_regular_priority_always_one(self, appt):
        assert appt.priority == 1

    @settings(max_examples=50)
    @given(appt=emergency_strategy)
    def test_emergency_priority_equals_urgency(self, appt):
        assert appt.priority == appt.urgency

class TestReportProperties:

    @settings(max_examples=50)
    @given(appts=st.lists(appointment_strategy, max_size=15))
    def test_report_sorted_descending(self, appts):
        """Adjacent report entries never increase in priority."""
        clinic = _clinic()
        for appt in appts:
            clinic.book_appointment(appt)

        report = clinic.generate_report()
        assert len(report) == len(appts)
        for current, following in zip(report, report[1:]):
            assert current.priority >= following.priority

    @settings(max_examples=50)
    @given(appts=st.lists(appointment_strategy, max_size=15))
    def test_ties_follow_booking_order(self, appts):
        clinic = _clinic()
        keys = [clinic.book_appointment(appt) for appt in appts]
        order = {id(clinic.get_appointment(k)): i for i, k in enumerate(keys)}

        report = clinic.generate_report()
        for current, following in zip(report, report[1:]):
            if current.priority == following.priority:
                assert order[id(current)] < order[id(following)]

    @settings(max_examples=50)
    @given(appt=appointment_strategy)
    def test_book_then_report_contains_exactly_one(self, appt):
        clinic = _clinic()
        clinic.book_appointment(appt)

        matching = [
            a for a in clinic.generate_report()
            if a.matches(appt.patient_id, appt.doctor_id, appt.date, appt.time)
        ]
        assert len(matching) == 1

    @settings(max_examples=50)
    @given(appts=st.lists(appointment_strategy, min_size=1, max_size=10), data=st.data())
    def test_cancel_removes_back_references(self, appts, data):
        """Cancelling drops the appointment from the clinic, patient and doctor."""
        clinic = _clinic()
        for appt in appts:
            clinic.book_appointment(appt)
        target = data.draw(st.sampled_from(appts))

        before = len(clinic.appointments)
        clinic.cancel_appointment(target.patient_id, target.doctor_id, target.date, target.time)

        assert len(clinic.appointments) == before - 1
        live = {k for k in range(1, len(appts) + 1) if clinic.get_appointment(k) is not None}
        for patient in clinic.patients:
            assert set(patient.appointment_ids) <= live
        for doctor in clinic.doctors:
            assert set(doctor.appointment_ids) <= live
        assert sum(len(p.appointment_ids) for p in clinic.patients) == before - 1
        assert sum(len(d.appointment_ids) for d in clinic.doctors) == before - 1
