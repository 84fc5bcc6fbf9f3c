"""
Scorer selection by backend name.
"""
from typing import Optional

from cardiorisk.config import settings
from cardiorisk.core.inference.scorer import RiskScorer, HeuristicRiskScorer
from cardiorisk.core.inference.remote import RemoteRiskScorer

SCORER_BACKENDS = {
    HeuristicRiskScorer.name: HeuristicRiskScorer,
    RemoteRiskScorer.name: RemoteRiskScorer,
}


def create_scorer(backend: Optional[str] = None) -> RiskScorer:
    """Instantiate the scorer registered under ``backend`` (settings default)."""
    name = (backend or settings.scorer_backend).strip().lower()
    if name not in SCORER_BACKENDS:
        raise ValueError(f"Unknown scorer backend: {name}. Valid: {sorted(SCORER_BACKENDS)}")
    return SCORER_BACKENDS[name]()
