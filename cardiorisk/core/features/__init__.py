"""
Features Module

Raw health inputs and the numeric features derived from them.
"""
from .base import Gender, MetabolicLevel, HealthInput, DerivedFeatures
from .deriver import (
    calculate_bmi,
    calculate_pulse_pressure,
    calculate_mean_arterial_pressure,
    derive_features,
)

__all__ = [
    "Gender",
    "MetabolicLevel",
    "HealthInput",
    "DerivedFeatures",
    "calculate_bmi",
    "calculate_pulse_pressure",
    "calculate_mean_arterial_pressure",
    "derive_features",
]
