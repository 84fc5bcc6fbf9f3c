"""
Feature Derivation

Maps raw health inputs to the derived numeric features consumed by the
risk scorers. All functions are pure.
"""
from cardiorisk.core.features.base import HealthInput, DerivedFeatures
from cardiorisk.utils import round_half_up

BMI_DECIMALS = 2


def calculate_bmi(weight: float, height: float) -> float:
    """
    Body Mass Index from weight (kg) and height (cm), rounded to 2 decimals.

    The rounded value is what every downstream consumer sees.
    """
    if height <= 0:
        raise ValueError(f"Height must be positive, got {height}")
    height_m = height / 100
    return round_half_up(weight / (height_m * height_m), BMI_DECIMALS)


def calculate_pulse_pressure(systolic: float, diastolic: float) -> float:
    return systolic - diastolic


def calculate_mean_arterial_pressure(systolic: float, diastolic: float) -> float:
    # Unrounded; rounding is a display concern
    return (diastolic * 2 + systolic) / 3


def derive_features(data: HealthInput) -> DerivedFeatures:
    """Compute all derived features for one input."""
    bmi = calculate_bmi(data.weight, data.height)
    pulse_pressure = calculate_pulse_pressure(data.systolic, data.diastolic)
    mean_arterial_pressure = calculate_mean_arterial_pressure(data.systolic, data.diastolic)

    return DerivedFeatures(
        bmi=bmi,
        pulse_pressure=pulse_pressure,
        mean_arterial_pressure=mean_arterial_pressure,
        age_bmi_interaction=data.age * bmi,
        pulse_pressure_map_interaction=pulse_pressure * mean_arterial_pressure,
    )
