"""
Shared fixtures for cardiorisk tests.
"""
import pytest

from cardiorisk.core.features import HealthInput, Gender, MetabolicLevel


@pytest.fixture
def baseline_input() -> HealthInput:
    """40-year-old active male with normal labs and blood pressure."""
    return HealthInput(
        age=40,
        gender=Gender.MALE,
        cholesterol=MetabolicLevel.NORMAL,
        glucose=MetabolicLevel.NORMAL,
        smoking=False,
        alcohol=False,
        physically_active=True,
        height=170,
        weight=70,
        systolic=120,
        diastolic=80,
    )


@pytest.fixture
def high_risk_input() -> HealthInput:
    """Baseline with lifestyle, cholesterol and systolic risk factors."""
    return HealthInput(
        age=40,
        gender=Gender.MALE,
        cholesterol=MetabolicLevel.WELL_ABOVE_NORMAL,
        glucose=MetabolicLevel.NORMAL,
        smoking=True,
        alcohol=True,
        physically_active=False,
        height=170,
        weight=70,
        systolic=150,
        diastolic=80,
    )


@pytest.fixture
def baseline_payload() -> dict:
    """JSON body equivalent of baseline_input."""
    return {
        "age": 40,
        "gender": "Male",
        "cholesterol": "Normal",
        "glucose": "Normal",
        "smoking": False,
        "alcohol": False,
        "physically_active": True,
        "height": 170,
        "weight": 70,
        "systolic": 120,
        "diastolic": 80,
    }
