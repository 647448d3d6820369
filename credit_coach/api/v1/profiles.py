"""GET /v1/profiles - browse known profiles and their health reports"""

import logging
import time
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request

from credit_coach.api.dependencies import get_profile_repository, get_request_id
from credit_coach.api.v1.schemas import CreditHealthReportResponse, CreditProfileSchema
from credit_coach.domain.exceptions import ProfileNotFoundError, ProfileSourceError
from credit_coach.domain.models import CreditProfile
from credit_coach.domain.scoring import evaluate_credit_profile
from credit_coach.infrastructure.observability.logging import log_evaluation
from credit_coach.infrastructure.observability.metrics import (
    profile_lookup_failures_counter,
    record_evaluation,
)
from credit_coach.infrastructure.profiles.repository import ProfileRepository

router = APIRouter()


def load_profile(repository: ProfileRepository, profile_id: str, request_id: str) -> CreditProfile:
    """
    Fetch a profile, translating lookup failures into HTTP errors.

    Raises:
        HTTPException: 404 for an unknown id, 503 when the source is unreadable
    """
    try:
        return repository.get_profile(profile_id)
    except ProfileNotFoundError as e:
        profile_lookup_failures_counter.inc()
        logging.warning(f"Profile lookup failed: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=404, detail=str(e))
    except ProfileSourceError as e:
        profile_lookup_failures_counter.inc()
        logging.error(f"Profile source error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=503, detail="Profile source unavailable")


@router.get("/profiles", response_model=List[CreditProfileSchema])
def list_profiles(
    request: Request,
    repository: ProfileRepository = Depends(get_profile_repository),
):
    """List every profile in the profile source"""
    try:
        profiles = repository.list_profiles()
    except ProfileSourceError as e:
        profile_lookup_failures_counter.inc()
        logging.error(f"Profile source error: {e}", extra={"request_id": get_request_id(request)})
        raise HTTPException(status_code=503, detail="Profile source unavailable")

    return [CreditProfileSchema.from_domain(profile) for profile in profiles]


@router.get("/profiles/{profile_id}", response_model=CreditProfileSchema)
def get_profile(
    profile_id: str,
    request: Request,
    repository: ProfileRepository = Depends(get_profile_repository),
):
    profile = load_profile(repository, profile_id, get_request_id(request))
    return CreditProfileSchema.from_domain(profile)


@router.get("/profiles/{profile_id}/report", response_model=CreditHealthReportResponse)
def get_profile_report(
    profile_id: str,
    request: Request,
    repository: ProfileRepository = Depends(get_profile_repository),
):
    """Evaluate a stored profile"""
    start_time = time.perf_counter()
    request_id = get_request_id(request)

    profile = load_profile(repository, profile_id, request_id)
    report = evaluate_credit_profile(profile)

    duration_ms = (time.perf_counter() - start_time) * 1000
    record_evaluation(report)
    log_evaluation(request_id, profile.id, report.band, len(report.recommended_actions), duration_ms)

    return CreditHealthReportResponse.from_domain(report)
