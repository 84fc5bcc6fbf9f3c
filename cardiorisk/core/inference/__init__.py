"""
Inference Module

Computes cardiovascular risk from health inputs and derived features,
either locally or through a remote prediction service.
"""
from .scorer import RiskScorer, HeuristicRiskScorer, RiskResult, RiskLevel
from .remote import RemoteRiskScorer, build_payload, parse_prediction
from .factory import create_scorer, SCORER_BACKENDS
from .explanation import RiskFactorAnalyzer, RiskExplanation

__all__ = [
    "RiskScorer",
    "HeuristicRiskScorer",
    "RemoteRiskScorer",
    "RiskResult",
    "RiskLevel",
    "build_payload",
    "parse_prediction",
    "create_scorer",
    "SCORER_BACKENDS",
    "RiskFactorAnalyzer",
    "RiskExplanation",
]
