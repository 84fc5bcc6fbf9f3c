"""
Cardiovascular Risk Estimation - FastAPI Application

Main application entry point with API endpoints for:
- Derived feature calculation (BMI, pulse pressure, MAP)
- Risk assessment with the heuristic or remote scorer
"""
from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from typing import Dict, Optional
from datetime import datetime
import uuid
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

from cardiorisk.config import settings
from cardiorisk.core.features import derive_features
from cardiorisk.core.validation import HealthInputValidator, InvalidHealthInputError
from cardiorisk.models.assessment import (
    HealthInputRequest,
    FeaturesResponse,
    RiskResultResponse,
    ExplanationResponse,
    AssessmentResponse,
    HealthResponse,
)
from cardiorisk.services.assessment import AssessmentService
from cardiorisk.core.inference import create_scorer
from cardiorisk.utils import get_logger

logger = get_logger(__name__)


# ---- FastAPI Application ----

app = FastAPI(
    title="Cardiovascular Risk Estimation API",
    description="Cardiovascular risk estimation from self-reported risk factors",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---- One service per scorer backend ----
_services: Dict[str, AssessmentService] = {}
_validator = HealthInputValidator()


def _get_service(backend: Optional[str] = None) -> AssessmentService:
    """Return the cached service for a backend name."""
    name = (backend or settings.scorer_backend).strip().lower()
    if name not in _services:
        try:
            scorer = create_scorer(name)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        _services[name] = AssessmentService(scorer=scorer)
    return _services[name]


def _invalid_input(error: InvalidHealthInputError) -> HTTPException:
    return HTTPException(
        status_code=422,
        detail={
            "message": "Invalid health input",
            "violations": [v.to_dict() for v in error.violations],
        }
    )


# ---- API Endpoints ----

@app.get("/", response_model=HealthResponse, tags=["Health"])
@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return HealthResponse(
        status="healthy",
        version=settings.app_version,
        timestamp=datetime.now().isoformat(),
        components={
            "api": "healthy",
            "scorer": settings.scorer_backend,
        }
    )


@app.post(f"{settings.api_prefix}/features", response_model=FeaturesResponse, tags=["Assessment"])
def calculate_features(request: HealthInputRequest):
    """Derive BMI, pulse pressure, MAP and interaction terms."""
    try:
        data = request.to_health_input()
        _validator.validate(data).raise_for_violations()
        features = derive_features(data)
    except InvalidHealthInputError as e:
        raise _invalid_input(e)
    return FeaturesResponse(**features.to_dict())


@app.post(f"{settings.api_prefix}/assessment", response_model=AssessmentResponse, tags=["Assessment"])
def run_assessment(
    request: HealthInputRequest,
    backend: Optional[str] = Query(default=None, description="'heuristic' or 'remote'")
):
    """
    Run a cardiovascular risk assessment.

    A remote backend outage is reported in the body (``available: false``),
    not as an HTTP error.
    """
    service = _get_service(backend)
    assessment_id = f"CVR-{uuid.uuid4().hex[:8].upper()}"

    try:
        assessment = service.assess(request.to_health_input())
    except InvalidHealthInputError as e:
        raise _invalid_input(e)
    except Exception as e:
        logger.error(f"Assessment {assessment_id} failed: {e}")
        raise HTTPException(status_code=500, detail=f"Assessment failed: {str(e)}")

    explanation = assessment.explanation
    return AssessmentResponse(
        assessment_id=assessment_id,
        timestamp=datetime.now().isoformat(),
        features=FeaturesResponse(**assessment.features.to_dict()),
        result=RiskResultResponse(**assessment.result.to_dict()),
        explanation=ExplanationResponse(
            summary=explanation.summary,
            factors=explanation.factors,
            advice=explanation.advice,
            disclaimer=explanation.disclaimer,
        ),
    )


# ---- Run with uvicorn ----
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
