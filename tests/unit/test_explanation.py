"""
Unit Tests for Risk Factor Analysis
"""
import dataclasses

import pytest

from cardiorisk.core.features import Gender, MetabolicLevel, derive_features
from cardiorisk.core.inference import (
    HeuristicRiskScorer, RiskFactorAnalyzer, RiskResult, RiskLevel
)
from cardiorisk.core.inference.explanation import (
    DISCLAIMER, HIGH_RISK_ADVICE, LOW_RISK_ADVICE
)


@pytest.fixture
def analyzer() -> RiskFactorAnalyzer:
    return RiskFactorAnalyzer()


def _explain(analyzer, data):
    features = derive_features(data)
    result = HeuristicRiskScorer().score(data, features)
    return analyzer.analyze(data, features, result)


class TestHighRisk:
    """Contributing factors for an elevated result."""

    def test_factor_list(self, analyzer, high_risk_input):
        explanation = _explain(analyzer, high_risk_input)

        assert explanation.risk == RiskLevel.HIGH
        assert explanation.factors == [
            "Men tend to have slightly higher cardiovascular risk",
            "Elevated cholesterol levels",
            "Smoking significantly increases risk",
            "Regular alcohol consumption",
            "Lack of regular physical activity",
            "Elevated systolic blood pressure",
        ]
        assert explanation.advice == HIGH_RISK_ADVICE
        assert explanation.disclaimer == DISCLAIMER

    def test_display_thresholds(self, analyzer, high_risk_input):
        data = dataclasses.replace(
            high_risk_input, age=51, glucose=MetabolicLevel.ABOVE_NORMAL,
            weight=80, systolic=131, diastolic=86,
        )
        factors = _explain(analyzer, data).factors

        assert "Age above 50 increases cardiovascular risk" in factors
        assert "Elevated glucose levels" in factors
        assert "BMI above recommended range" in factors
        assert "Elevated systolic blood pressure" in factors
        assert "Elevated diastolic blood pressure" in factors


class TestLowRisk:
    """Habits to maintain for a low result."""

    def test_habit_list(self, analyzer, baseline_input):
        explanation = _explain(analyzer, baseline_input)

        assert explanation.risk == RiskLevel.LOW
        assert explanation.factors == [
            "Continued avoidance of smoking",
            "Moderate or no alcohol consumption",
            "Regular physical activity",
            "Healthy body mass index",
            "Well-controlled blood pressure",
            "Healthy cholesterol levels",
        ]
        assert explanation.advice == LOW_RISK_ADVICE

    def test_borderline_pressure_not_listed(self, analyzer, baseline_input):
        data = dataclasses.replace(
            baseline_input, gender=Gender.FEMALE, systolic=135, diastolic=80
        )
        factors = _explain(analyzer, data).factors
        assert "Well-controlled blood pressure" not in factors


class TestUnavailable:
    """Remote fallback results."""

    def test_no_factors(self, analyzer, baseline_input):
        features = derive_features(baseline_input)
        result = RiskResult.unavailable(source="remote", error="ConnectionError")
        explanation = analyzer.analyze(baseline_input, features, result)

        assert explanation.factors == []
        assert "could not be estimated" in explanation.summary
        assert explanation.to_dict()["risk"] == "Low"
