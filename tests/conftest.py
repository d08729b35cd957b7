import pytest

from clinic_scheduler.services.clinic_service import Clinic

@pytest.fixture
def clinic():
    return Clinic()

@pytest.fixture
def registered_clinic(clinic):
    """Clinic with patient Alice (P1) and doctor Bob (D1)."""
    clinic.add_patient("Alice", "P1")
    clinic.add_doctor("Bob", "D1", "Cardiology")
    return clinic
