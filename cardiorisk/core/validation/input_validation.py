"""
Health Input Validation Module

Range and ordering checks that a caller must pass before invoking the
feature deriver or a risk scorer. The core itself never calls this.
"""
from dataclasses import dataclass, field
from typing import Dict, Any, List, Optional
import math

from cardiorisk.config import settings
from cardiorisk.core.features.base import HealthInput
from cardiorisk.utils import get_logger

logger = get_logger(__name__)


def _reportable(value: float) -> Optional[float]:
    # NaN/inf cannot be serialized into a JSON error body
    return value if math.isfinite(value) else None


@dataclass
class ValidationViolation:
    """A single rejected field."""
    field: str
    message: str
    actual_value: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "field": self.field,
            "message": self.message,
            "actual_value": self.actual_value,
        }


class InvalidHealthInputError(ValueError):
    """Raised when a HealthInput fails validation."""

    def __init__(self, violations: List[ValidationViolation]):
        self.violations = violations
        super().__init__("; ".join(v.message for v in violations))


@dataclass
class ValidationResult:
    """All violations found for one input."""
    violations: List[ValidationViolation] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.violations

    def raise_for_violations(self) -> None:
        if self.violations:
            raise InvalidHealthInputError(self.violations)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "is_valid": self.is_valid,
            "violations": [v.to_dict() for v in self.violations],
        }


class HealthInputValidator:
    """
    Checks blood pressure ordering and age/height/weight bounds.

    Bounds default to the configured settings and are inclusive.
    """

    def __init__(
        self,
        age_range: Optional[tuple] = None,
        height_range: Optional[tuple] = None,
        weight_range: Optional[tuple] = None
    ):
        self.age_range = age_range or (settings.min_age, settings.max_age)
        self.height_range = height_range or (settings.min_height_cm, settings.max_height_cm)
        self.weight_range = weight_range or (settings.min_weight_kg, settings.max_weight_kg)

    def validate(self, data: HealthInput) -> ValidationResult:
        result = ValidationResult()

        pressures_finite = True
        for name, value in (("systolic", data.systolic), ("diastolic", data.diastolic)):
            if not math.isfinite(value):
                pressures_finite = False
                result.violations.append(ValidationViolation(
                    field=name,
                    message=f"{name.capitalize()} pressure must be a finite number.",
                ))

        if pressures_finite and not data.systolic > data.diastolic:
            result.violations.append(ValidationViolation(
                field="systolic",
                message="Systolic pressure must be greater than diastolic pressure.",
                actual_value=data.systolic,
            ))

        low, high = self.age_range
        if not low <= data.age <= high:
            result.violations.append(ValidationViolation(
                field="age",
                message=f"Age must be between {low:g} and {high:g}.",
                actual_value=_reportable(data.age),
            ))

        low, high = self.height_range
        if not low <= data.height <= high:
            result.violations.append(ValidationViolation(
                field="height",
                message=f"Height must be between {low:g} and {high:g} cm.",
                actual_value=_reportable(data.height),
            ))

        low, high = self.weight_range
        if not low <= data.weight <= high:
            result.violations.append(ValidationViolation(
                field="weight",
                message=f"Weight must be between {low:g} and {high:g} kg.",
                actual_value=_reportable(data.weight),
            ))

        if result.violations:
            logger.warning(f"Rejected health input: {[v.field for v in result.violations]}")
        return result
