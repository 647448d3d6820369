"""POST /v1/evaluate - credit health evaluation for a submitted profile"""

import logging
import time

from fastapi import APIRouter, HTTPException, Request

from credit_coach.api.dependencies import get_request_id
from credit_coach.api.v1.schemas import CreditHealthReportResponse, CreditProfileSchema
from credit_coach.domain.scoring import evaluate_credit_profile
from credit_coach.infrastructure.observability.logging import log_evaluation
from credit_coach.infrastructure.observability.metrics import record_evaluation

router = APIRouter()


@router.post("/evaluate", response_model=CreditHealthReportResponse)
def evaluate_profile(request_body: CreditProfileSchema, request: Request):
    """
    Score a credit profile and recommend improvement actions.

    Structurally invalid bodies are rejected with 422 before this runs;
    numeric values outside their nominal ranges are evaluated as sent.
    """
    start_time = time.perf_counter()
    request_id = get_request_id(request)

    try:
        report = evaluate_credit_profile(request_body.to_domain())
    except Exception as e:
        logging.error(f"Unexpected evaluation error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    duration_ms = (time.perf_counter() - start_time) * 1000
    record_evaluation(report)
    log_evaluation(request_id, request_body.id, report.band, len(report.recommended_actions), duration_ms)

    return CreditHealthReportResponse.from_domain(report)
