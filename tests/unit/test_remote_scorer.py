"""
Unit Tests for the Remote Risk Scorer

The HTTP call is replaced with a MagicMock; no network access.
"""
from unittest.mock import MagicMock, patch

import pytest
import requests

from cardiorisk.core.features import derive_features
from cardiorisk.core.inference import (
    RemoteRiskScorer, RiskLevel, build_payload, parse_prediction, create_scorer
)

POST = "cardiorisk.core.inference.remote.requests.post"


def _response(body=None, status_error=None, json_error=None):
    response = MagicMock()
    if status_error is not None:
        response.raise_for_status.side_effect = status_error
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = body
    return response


@pytest.fixture
def scorer() -> RemoteRiskScorer:
    return RemoteRiskScorer(url="http://mock-api/predict", timeout=5)


class TestPayload:
    """Tests for request encoding."""

    def test_ordinal_and_binary_encoding(self, high_risk_input):
        payload = build_payload(high_risk_input, derive_features(high_risk_input))

        assert payload["gender"] == 1
        assert payload["cholesterol"] == 3
        assert payload["gluc"] == 1
        assert payload["smoke"] == 1
        assert payload["alco"] == 1
        assert payload["active"] == 0
        assert payload["ap_hi"] == 150
        assert payload["ap_lo"] == 80

    def test_includes_derived_features(self, baseline_input):
        features = derive_features(baseline_input)
        payload = build_payload(baseline_input, features)

        assert payload["bmi"] == 24.22
        assert payload["pulse_pressure"] == 40
        assert payload["map"] == features.mean_arterial_pressure
        assert payload["age_bmi_interaction"] == features.age_bmi_interaction
        assert payload["pulse_map_interaction"] == features.pulse_pressure_map_interaction


class TestParsePrediction:
    """Tests for response decoding."""

    def test_high(self):
        result = parse_prediction({"prediction": 1, "probability": 72.4})
        assert result.risk == RiskLevel.HIGH
        assert result.probability == 72.4

    def test_low_probability_passed_through(self):
        result = parse_prediction({"prediction": 0, "probability": 0.1234})
        assert result.risk == RiskLevel.LOW
        assert result.probability == 0.1234

    @pytest.mark.parametrize("body", [
        [],
        {"prediction": 1},
        {"probability": 10},
        {"prediction": 2, "probability": 10},
        {"prediction": "1", "probability": 10},
        {"prediction": True, "probability": 10},
        {"prediction": [1], "probability": 10},
        {"prediction": 1, "probability": "high"},
    ])
    def test_malformed(self, body):
        with pytest.raises(ValueError):
            parse_prediction(body)


class TestRemoteScorer:
    """Tests for the HTTP round trip and fallback."""

    def test_success(self, scorer, baseline_input):
        features = derive_features(baseline_input)
        with patch(POST, return_value=_response({"prediction": 1, "probability": 64.2})) as post:
            result = scorer.score(baseline_input, features)

        assert result.risk == RiskLevel.HIGH
        assert result.probability == 64.2
        assert result.available
        assert result.source == "remote"

        post.assert_called_once()
        args, kwargs = post.call_args
        assert args[0] == "http://mock-api/predict"
        assert kwargs["json"] == build_payload(baseline_input, features)
        assert kwargs["headers"]["Content-Type"] == "application/json"
        assert kwargs["timeout"] == 5

    @pytest.mark.parametrize("side_effect", [
        requests.exceptions.ConnectionError("refused"),
        requests.exceptions.Timeout("slow"),
    ])
    def test_network_error_falls_back(self, scorer, baseline_input, side_effect):
        with patch(POST, side_effect=side_effect):
            result = scorer.score(baseline_input, derive_features(baseline_input))

        assert result.risk == RiskLevel.LOW
        assert result.probability == 0
        assert not result.available
        assert scorer.failure_count == 1
        assert scorer.last_error is not None

    def test_non_2xx_falls_back(self, scorer, high_risk_input):
        error = requests.exceptions.HTTPError("503 Server Error")
        with patch(POST, return_value=_response(status_error=error)):
            result = scorer.score(high_risk_input, derive_features(high_risk_input))

        assert (result.risk, result.probability) == (RiskLevel.LOW, 0)
        assert "HTTPError" in result.error

    def test_non_json_body_falls_back(self, scorer, baseline_input):
        with patch(POST, return_value=_response(json_error=ValueError("Expecting value"))):
            result = scorer.score(baseline_input, derive_features(baseline_input))

        assert (result.risk, result.probability) == (RiskLevel.LOW, 0)
        assert not result.available

    def test_missing_keys_falls_back(self, scorer, baseline_input):
        with patch(POST, return_value=_response({"score": 0.4})):
            result = scorer.score(baseline_input, derive_features(baseline_input))

        assert (result.risk, result.probability) == (RiskLevel.LOW, 0)

    def test_single_attempt_per_call(self, scorer, baseline_input):
        with patch(POST, side_effect=requests.exceptions.ConnectionError("down")) as post:
            scorer.score(baseline_input, derive_features(baseline_input))
            scorer.score(baseline_input, derive_features(baseline_input))

        assert post.call_count == 2
        assert scorer.request_count == 2
        assert scorer.failure_count == 2

    def test_idempotent_with_deterministic_backend(self, scorer, baseline_input):
        features = derive_features(baseline_input)
        with patch(POST, return_value=_response({"prediction": 0, "probability": 12.5})):
            first = scorer.score(baseline_input, features)
            second = scorer.score(baseline_input, features)
        assert first == second

    def test_latency_recorded(self, scorer, baseline_input):
        assert scorer.last_latency_ms is None
        with patch(POST, side_effect=requests.exceptions.ConnectionError("down")):
            scorer.score(baseline_input, derive_features(baseline_input))

        assert scorer.last_latency_ms is not None
        assert scorer.last_latency_ms >= 0

    def test_defaults_from_settings(self):
        scorer = create_scorer("remote")
        assert isinstance(scorer, RemoteRiskScorer)
        assert scorer.url.startswith("http")
