"""
Assessment Service - Centralized Risk Assessment Logic
"""
from dataclasses import dataclass
from typing import Dict, Any, Optional

from cardiorisk.core.features import HealthInput, DerivedFeatures, derive_features
from cardiorisk.core.inference import (
    RiskScorer, RiskResult, RiskFactorAnalyzer, RiskExplanation, create_scorer
)
from cardiorisk.core.validation import HealthInputValidator
from cardiorisk.utils import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Assessment:
    """Everything produced for one input."""
    health_input: HealthInput
    features: DerivedFeatures
    result: RiskResult
    explanation: RiskExplanation

    def to_dict(self) -> Dict[str, Any]:
        return {
            "health_input": self.health_input.to_dict(),
            "features": self.features.to_dict(),
            "result": self.result.to_dict(),
            "explanation": self.explanation.to_dict(),
        }


class AssessmentService:
    """
    Runs validate -> derive -> score -> explain for one input.
    Decouples the logic from the FastAPI endpoints.
    """

    def __init__(
        self,
        scorer: Optional[RiskScorer] = None,
        validator: Optional[HealthInputValidator] = None,
        analyzer: Optional[RiskFactorAnalyzer] = None
    ):
        self.scorer = scorer or create_scorer()
        self.validator = validator or HealthInputValidator()
        self.analyzer = analyzer or RiskFactorAnalyzer()

    def derive(self, data: HealthInput) -> DerivedFeatures:
        """Validate and derive features without scoring."""
        self.validator.validate(data).raise_for_violations()
        return derive_features(data)

    def assess(self, data: HealthInput) -> Assessment:
        """
        Assess one input.

        Raises:
            InvalidHealthInputError: if the input fails validation. The
                scorer is not called in that case.
        """
        features = self.derive(data)
        result = self.scorer.score(data, features)
        explanation = self.analyzer.analyze(data, features, result)

        logger.info(
            f"Assessment ({self.scorer.name}): {result.risk.value} "
            f"{result.probability}% available={result.available}"
        )
        return Assessment(
            health_input=data,
            features=features,
            result=result,
            explanation=explanation,
        )
