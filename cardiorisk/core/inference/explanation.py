"""
Risk Factor Analysis

Turns a scored assessment into the plain-language factor list shown next
to the result: what is driving an elevated risk, or which habits keep it
low. Display thresholds differ from the scoring thresholds: systolic > 130
is flagged here, the heuristic only scores systolic > 140.
"""
from dataclasses import dataclass, field
from typing import Dict, Any, List

from cardiorisk.core.features.base import HealthInput, DerivedFeatures, Gender, MetabolicLevel
from cardiorisk.core.inference.scorer import RiskResult, RiskLevel

DISCLAIMER = (
    "This tool provides an estimation based on general risk factors. "
    "It does not replace medical advice. Always consult with healthcare "
    "professionals for proper diagnosis and personalized recommendations."
)

HIGH_RISK_ADVICE = "Consider consulting with a healthcare professional to discuss these results."
LOW_RISK_ADVICE = "Remember that this is a screening tool. Regular checkups are still recommended."

AGE_FLAG = 50
BMI_FLAG = 25.0
SYSTOLIC_FLAG = 130.0
DIASTOLIC_FLAG = 85.0


@dataclass
class RiskExplanation:
    """Factor list and advice for one result."""
    risk: RiskLevel
    summary: str
    factors: List[str] = field(default_factory=list)
    advice: str = ""
    disclaimer: str = DISCLAIMER

    def to_dict(self) -> Dict[str, Any]:
        return {
            "risk": self.risk.value,
            "summary": self.summary,
            "factors": self.factors,
            "advice": self.advice,
            "disclaimer": self.disclaimer,
        }


class RiskFactorAnalyzer:
    """Builds a RiskExplanation from input, features and result."""

    def analyze(
        self,
        data: HealthInput,
        features: DerivedFeatures,
        result: RiskResult
    ) -> RiskExplanation:
        if not result.available:
            return RiskExplanation(
                risk=result.risk,
                summary="Your cardiovascular risk could not be estimated at this time.",
                advice="Please try again later.",
            )

        if result.risk == RiskLevel.HIGH:
            return RiskExplanation(
                risk=result.risk,
                summary="Several factors might be contributing to your elevated risk:",
                factors=self._contributing_factors(data, features),
                advice=HIGH_RISK_ADVICE,
            )

        return RiskExplanation(
            risk=result.risk,
            summary=(
                "Your cardiovascular risk appears to be relatively low. "
                "Continue maintaining these healthy habits:"
            ),
            factors=self._protective_habits(data, features),
            advice=LOW_RISK_ADVICE,
        )

    def _contributing_factors(self, data: HealthInput, features: DerivedFeatures) -> List[str]:
        factors = []
        if data.age > AGE_FLAG:
            factors.append("Age above 50 increases cardiovascular risk")
        if data.gender == Gender.MALE:
            factors.append("Men tend to have slightly higher cardiovascular risk")
        if data.cholesterol != MetabolicLevel.NORMAL:
            factors.append("Elevated cholesterol levels")
        if data.glucose != MetabolicLevel.NORMAL:
            factors.append("Elevated glucose levels")
        if data.smoking:
            factors.append("Smoking significantly increases risk")
        if data.alcohol:
            factors.append("Regular alcohol consumption")
        if not data.physically_active:
            factors.append("Lack of regular physical activity")
        if features.bmi > BMI_FLAG:
            factors.append("BMI above recommended range")
        if data.systolic > SYSTOLIC_FLAG:
            factors.append("Elevated systolic blood pressure")
        if data.diastolic > DIASTOLIC_FLAG:
            factors.append("Elevated diastolic blood pressure")
        return factors

    def _protective_habits(self, data: HealthInput, features: DerivedFeatures) -> List[str]:
        habits = []
        if not data.smoking:
            habits.append("Continued avoidance of smoking")
        if not data.alcohol:
            habits.append("Moderate or no alcohol consumption")
        if data.physically_active:
            habits.append("Regular physical activity")
        if features.bmi <= BMI_FLAG:
            habits.append("Healthy body mass index")
        if data.systolic <= SYSTOLIC_FLAG and data.diastolic <= DIASTOLIC_FLAG:
            habits.append("Well-controlled blood pressure")
        if data.cholesterol == MetabolicLevel.NORMAL:
            habits.append("Healthy cholesterol levels")
        return habits
