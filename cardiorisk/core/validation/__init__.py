"""
Validation Module

Caller-side checks on health inputs before they reach the core.
"""
from .input_validation import (
    HealthInputValidator,
    ValidationResult,
    ValidationViolation,
    InvalidHealthInputError,
)

__all__ = [
    "HealthInputValidator",
    "ValidationResult",
    "ValidationViolation",
    "InvalidHealthInputError",
]
