"""
Health Input Data Structures

Self-reported cardiovascular risk factors and the derived features computed
from them.
"""
from dataclasses import dataclass, asdict
from typing import Dict, Any
from enum import Enum


class Gender(str, Enum):
    """Biological sex as reported on the form."""
    MALE = "Male"
    FEMALE = "Female"

    @property
    def code(self) -> int:
        """Binary encoding used by the prediction model (Male=1, Female=0)."""
        return 1 if self is Gender.MALE else 0

    @classmethod
    def from_string(cls, name: str) -> "Gender":
        """Parse gender string to enum with common aliases."""
        mapping = {
            "male": cls.MALE,
            "m": cls.MALE,
            "female": cls.FEMALE,
            "f": cls.FEMALE,
        }
        key = name.strip().lower()
        if key in mapping:
            return mapping[key]
        raise ValueError(f"Unknown gender: {name}")


class MetabolicLevel(str, Enum):
    """Three-tier laboratory level used for cholesterol and glucose."""
    NORMAL = "Normal"
    ABOVE_NORMAL = "Above Normal"
    WELL_ABOVE_NORMAL = "Well Above Normal"

    @property
    def ordinal(self) -> int:
        """Ordinal encoding used by the prediction model (1, 2, 3)."""
        return {
            MetabolicLevel.NORMAL: 1,
            MetabolicLevel.ABOVE_NORMAL: 2,
            MetabolicLevel.WELL_ABOVE_NORMAL: 3,
        }[self]

    @classmethod
    def from_string(cls, name: str) -> "MetabolicLevel":
        """
        Parse a level string.

        Accepts "Above Normal", "AboveNormal", "above_normal" and the
        ordinal digits "1".."3", case-insensitively.
        """
        key = name.strip().lower().replace(" ", "").replace("_", "").replace("-", "")
        mapping = {
            "normal": cls.NORMAL,
            "1": cls.NORMAL,
            "abovenormal": cls.ABOVE_NORMAL,
            "2": cls.ABOVE_NORMAL,
            "wellabovenormal": cls.WELL_ABOVE_NORMAL,
            "3": cls.WELL_ABOVE_NORMAL,
        }
        if key in mapping:
            return mapping[key]
        raise ValueError(f"Unknown level: {name}")


@dataclass(frozen=True)
class HealthInput:
    """Raw risk factors for one assessment."""
    age: int  # years
    gender: Gender
    cholesterol: MetabolicLevel
    glucose: MetabolicLevel
    smoking: bool
    alcohol: bool
    physically_active: bool
    height: float  # cm
    weight: float  # kg
    systolic: float  # mmHg
    diastolic: float  # mmHg

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HealthInput":
        """Build from a plain mapping, parsing enum fields from strings."""
        gender = data["gender"]
        cholesterol = data["cholesterol"]
        glucose = data["glucose"]
        return cls(
            age=int(data["age"]),
            gender=gender if isinstance(gender, Gender) else Gender.from_string(str(gender)),
            cholesterol=(cholesterol if isinstance(cholesterol, MetabolicLevel)
                         else MetabolicLevel.from_string(str(cholesterol))),
            glucose=(glucose if isinstance(glucose, MetabolicLevel)
                     else MetabolicLevel.from_string(str(glucose))),
            smoking=bool(data["smoking"]),
            alcohol=bool(data["alcohol"]),
            physically_active=bool(data["physically_active"]),
            height=float(data["height"]),
            weight=float(data["weight"]),
            systolic=float(data["systolic"]),
            diastolic=float(data["diastolic"]),
        )

    def to_dict(self) -> Dict[str, Any]:
        result = asdict(self)
        result["gender"] = self.gender.value
        result["cholesterol"] = self.cholesterol.value
        result["glucose"] = self.glucose.value
        return result


@dataclass(frozen=True)
class DerivedFeatures:
    """Numeric features computed from a HealthInput."""
    bmi: float  # rounded to 2 decimals
    pulse_pressure: float
    mean_arterial_pressure: float
    age_bmi_interaction: float
    pulse_pressure_map_interaction: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
