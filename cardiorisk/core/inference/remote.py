"""
Remote Risk Scorer

Delegates scoring to an external prediction service over HTTP.
Failures never propagate to the caller: they are logged, counted and turned
into an unavailable Low/0 result.
"""
from typing import Dict, Any, Optional
import numbers
import time

import requests

from cardiorisk.config import settings
from cardiorisk.core.features.base import HealthInput, DerivedFeatures
from cardiorisk.core.inference.scorer import RiskScorer, RiskResult, RiskLevel
from cardiorisk.utils import get_logger

logger = get_logger(__name__)

_PREDICTION_LABELS = {
    1: RiskLevel.HIGH,
    0: RiskLevel.LOW,
}


def build_payload(data: HealthInput, features: DerivedFeatures) -> Dict[str, Any]:
    """
    Encode one input as the prediction service's JSON body.

    Categoricals are ordinal (Normal=1 .. Well Above Normal=3), gender is
    Male=1/Female=0 and booleans are 0/1.
    """
    return {
        "age": data.age,
        "gender": data.gender.code,
        "height": data.height,
        "weight": data.weight,
        "ap_hi": data.systolic,
        "ap_lo": data.diastolic,
        "cholesterol": data.cholesterol.ordinal,
        "gluc": data.glucose.ordinal,
        "smoke": int(data.smoking),
        "alco": int(data.alcohol),
        "active": int(data.physically_active),
        "bmi": features.bmi,
        "pulse_pressure": features.pulse_pressure,
        "map": features.mean_arterial_pressure,
        "age_bmi_interaction": features.age_bmi_interaction,
        "pulse_map_interaction": features.pulse_pressure_map_interaction,
    }


def parse_prediction(body: Any) -> RiskResult:
    """
    Translate a ``{"prediction": 0|1, "probability": number}`` body.

    Raises ValueError for anything else.
    """
    if not isinstance(body, dict):
        raise ValueError(f"Expected JSON object, got {type(body).__name__}")
    if "prediction" not in body or "probability" not in body:
        raise ValueError(f"Missing prediction/probability in response: {sorted(body)}")

    prediction = body["prediction"]
    probability = body["probability"]

    if (isinstance(prediction, bool) or not isinstance(prediction, numbers.Real)
            or prediction not in _PREDICTION_LABELS):
        raise ValueError(f"Invalid prediction value: {prediction!r}")
    if isinstance(probability, bool) or not isinstance(probability, numbers.Real):
        raise ValueError(f"Invalid probability value: {probability!r}")

    return RiskResult(
        risk=_PREDICTION_LABELS[prediction],
        probability=probability,
        source=RemoteRiskScorer.name,
    )


class RemoteRiskScorer(RiskScorer):
    """
    Client for the remote prediction endpoint.

    One POST per call, no retries.
    """

    name = "remote"

    def __init__(self, url: Optional[str] = None, timeout: Optional[float] = None):
        """
        Args:
            url: Prediction endpoint; defaults to settings.prediction_url
            timeout: Seconds to wait; defaults to settings.prediction_timeout_seconds
        """
        self.url = url or settings.prediction_url
        self.timeout = timeout if timeout is not None else settings.prediction_timeout_seconds
        self._request_count = 0
        self._failure_count = 0
        self._last_error: Optional[str] = None
        self._last_latency_ms: Optional[float] = None
        logger.info(f"RemoteRiskScorer initialized (url={self.url}, timeout={self.timeout})")

    @property
    def request_count(self) -> int:
        return self._request_count

    @property
    def failure_count(self) -> int:
        return self._failure_count

    @property
    def last_error(self) -> Optional[str]:
        return self._last_error

    @property
    def last_latency_ms(self) -> Optional[float]:
        return self._last_latency_ms

    def score(self, data: HealthInput, features: DerivedFeatures) -> RiskResult:
        payload = build_payload(data, features)
        self._request_count += 1
        start = time.time()

        try:
            response = requests.post(
                self.url,
                json=payload,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout
            )
            response.raise_for_status()
            result = parse_prediction(response.json())
        except (requests.exceptions.RequestException, ValueError) as e:
            return self._fallback(f"{type(e).__name__}: {e}")
        finally:
            self._last_latency_ms = (time.time() - start) * 1000

        logger.info(
            f"Remote prediction: {result.risk.value} ({result.probability}) "
            f"in {self._last_latency_ms:.0f}ms"
        )
        return result

    def _fallback(self, error: str) -> RiskResult:
        self._failure_count += 1
        self._last_error = error
        logger.error(f"Remote prediction failed ({self.url}): {error}")
        return RiskResult.unavailable(source=self.name, error=error)
