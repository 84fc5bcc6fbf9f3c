"""
Assessment API Models
"""
from pydantic import BaseModel, Field, field_validator
from typing import Dict, Any, List, Optional

from cardiorisk.core.features.base import HealthInput, Gender, MetabolicLevel


class HealthInputRequest(BaseModel):
    """Self-reported risk factors for one assessment."""
    age: int = Field(..., description="Age in years")
    gender: Gender
    cholesterol: MetabolicLevel = MetabolicLevel.NORMAL
    glucose: MetabolicLevel = MetabolicLevel.NORMAL
    smoking: bool = False
    alcohol: bool = False
    physically_active: bool = True
    height: float = Field(..., description="Height in cm")
    weight: float = Field(..., description="Weight in kg")
    systolic: float = Field(..., description="Systolic blood pressure (mmHg)")
    diastolic: float = Field(..., description="Diastolic blood pressure (mmHg)")

    def to_health_input(self) -> HealthInput:
        return HealthInput.from_dict(self.model_dump())

    @field_validator("gender", mode="before")
    @classmethod
    def _parse_gender(cls, value: Any) -> Any:
        return Gender.from_string(value) if isinstance(value, str) else value

    @field_validator("cholesterol", "glucose", mode="before")
    @classmethod
    def _parse_level(cls, value: Any) -> Any:
        return MetabolicLevel.from_string(value) if isinstance(value, str) else value


class FeaturesResponse(BaseModel):
    """Derived numeric features."""
    bmi: float
    pulse_pressure: float
    mean_arterial_pressure: float
    age_bmi_interaction: float
    pulse_pressure_map_interaction: float


class RiskResultResponse(BaseModel):
    """Risk label and 0-100 probability."""
    risk: str
    probability: float
    source: str
    available: bool = True
    error: Optional[str] = None


class ExplanationResponse(BaseModel):
    """Plain-language factor analysis."""
    summary: str
    factors: List[str] = []
    advice: str = ""
    disclaimer: str = ""


class AssessmentResponse(BaseModel):
    """Full assessment for one request."""
    assessment_id: str
    timestamp: str
    features: FeaturesResponse
    result: RiskResultResponse
    explanation: ExplanationResponse


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str
    timestamp: str
    components: Dict[str, str]
