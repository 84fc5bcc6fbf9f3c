"""
Risk Scorer Module

Common contract for cardiovascular risk scorers and the local additive
heuristic implementation.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Any, List, Optional, Tuple
from enum import Enum

from cardiorisk.core.features.base import HealthInput, DerivedFeatures, Gender, MetabolicLevel
from cardiorisk.utils import get_logger, round_half_up

logger = get_logger(__name__)

# Probability strictly above this is labelled High
HIGH_RISK_THRESHOLD = 0.30
MAX_PROBABILITY = 0.95


class RiskLevel(str, Enum):
    """Binary risk label."""
    LOW = "Low"
    HIGH = "High"

    @classmethod
    def from_probability(cls, probability: float) -> "RiskLevel":
        """Convert a 0-1 probability to a label."""
        return cls.HIGH if probability > HIGH_RISK_THRESHOLD else cls.LOW


@dataclass(frozen=True)
class RiskResult:
    """
    Outcome of one scoring call.

    ``probability`` is on a 0-100 scale. ``available`` is False only when
    the scorer could not produce an estimate; in that case risk and
    probability hold the Low/0 placeholder and ``error`` says why.
    """
    risk: RiskLevel
    probability: float
    source: str = ""
    available: bool = True
    error: Optional[str] = None

    @classmethod
    def unavailable(cls, source: str, error: str) -> "RiskResult":
        return cls(risk=RiskLevel.LOW, probability=0.0, source=source, available=False, error=error)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "risk": self.risk.value,
            "probability": self.probability,
            "source": self.source,
            "available": self.available,
            "error": self.error,
        }


class RiskScorer(ABC):
    """Contract shared by every risk scoring backend."""

    name: str = "base"

    @abstractmethod
    def score(self, data: HealthInput, features: DerivedFeatures) -> RiskResult:
        """Score one input. Must not raise for validated input."""


class HeuristicRiskScorer(RiskScorer):
    """
    Deterministic additive point system.

    Each risk factor adds a fixed amount to a 5% base. The sum is capped
    at 95% and labelled High above 30%.
    """

    name = "heuristic"

    BASE_RISK = 0.05
    AGE_REFERENCE = 20
    AGE_WEIGHT = 0.005

    MALE = 0.05
    CHOLESTEROL = {
        MetabolicLevel.ABOVE_NORMAL: 0.07,
        MetabolicLevel.WELL_ABOVE_NORMAL: 0.15,
    }
    GLUCOSE = {
        MetabolicLevel.ABOVE_NORMAL: 0.05,
        MetabolicLevel.WELL_ABOVE_NORMAL: 0.10,
    }
    SMOKING = 0.15
    ALCOHOL = 0.08
    INACTIVITY = 0.12

    # Both BMI tiers apply above 30
    BMI_OVERWEIGHT = (25.0, 0.05)
    BMI_OBESE = (30.0, 0.10)
    SYSTOLIC_HIGH = (140.0, 0.15)
    DIASTOLIC_HIGH = (90.0, 0.10)

    def breakdown(self, data: HealthInput, features: DerivedFeatures) -> List[Tuple[str, float]]:
        """
        Point contributions in summation order.

        Base and age are always present; other factors appear only when
        they fire.
        """
        terms: List[Tuple[str, float]] = [
            ("base", self.BASE_RISK),
            ("age", (data.age - self.AGE_REFERENCE) * self.AGE_WEIGHT),
        ]

        if data.gender == Gender.MALE:
            terms.append(("gender", self.MALE))

        if data.cholesterol in self.CHOLESTEROL:
            terms.append(("cholesterol", self.CHOLESTEROL[data.cholesterol]))
        if data.glucose in self.GLUCOSE:
            terms.append(("glucose", self.GLUCOSE[data.glucose]))

        if data.smoking:
            terms.append(("smoking", self.SMOKING))
        if data.alcohol:
            terms.append(("alcohol", self.ALCOHOL))
        if not data.physically_active:
            terms.append(("physical_inactivity", self.INACTIVITY))

        if features.bmi > self.BMI_OVERWEIGHT[0]:
            terms.append(("bmi_overweight", self.BMI_OVERWEIGHT[1]))
        if features.bmi > self.BMI_OBESE[0]:
            terms.append(("bmi_obese", self.BMI_OBESE[1]))

        if data.systolic > self.SYSTOLIC_HIGH[0]:
            terms.append(("systolic_pressure", self.SYSTOLIC_HIGH[1]))
        if data.diastolic > self.DIASTOLIC_HIGH[0]:
            terms.append(("diastolic_pressure", self.DIASTOLIC_HIGH[1]))

        return terms

    def raw_probability(self, data: HealthInput, features: DerivedFeatures) -> float:
        """Capped 0-1 probability before label conversion and rounding."""
        total = 0.0
        for _, points in self.breakdown(data, features):
            total += points
        return min(total, MAX_PROBABILITY)

    def score(self, data: HealthInput, features: DerivedFeatures) -> RiskResult:
        probability = self.raw_probability(data, features)
        result = RiskResult(
            risk=RiskLevel.from_probability(probability),
            probability=round_half_up(probability * 100, 1),
            source=self.name,
        )
        logger.debug(f"Heuristic score: {result.probability}% ({result.risk.value})")
        return result
