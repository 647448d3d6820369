"""POST /v1/advice - advisor prompt and fallback guidance for a stored profile"""

import logging
import time

from fastapi import APIRouter, Depends, HTTPException, Request

from credit_coach.api.dependencies import get_profile_repository, get_request_id
from credit_coach.api.v1.profiles import load_profile
from credit_coach.api.v1.schemas import (
    AdviceMeta,
    AdviceRequest,
    AdviceResponse,
    AdvisorPrompt,
    CreditHealthReportResponse,
)
from credit_coach.config import settings
from credit_coach.domain.advisor import (
    build_advisor_system_prompt,
    build_advisor_user_prompt,
    create_fallback_advice,
)
from credit_coach.domain.exceptions import InvalidInputError
from credit_coach.domain.scoring import evaluate_credit_profile
from credit_coach.infrastructure.observability.logging import log_evaluation
from credit_coach.infrastructure.observability.metrics import record_evaluation
from credit_coach.infrastructure.profiles.repository import ProfileRepository

router = APIRouter()


def normalize_message(message: str) -> str:
    """
    Raises:
        InvalidInputError: Message is blank once whitespace is stripped
    """
    cleaned = message.strip()
    if not cleaned:
        raise InvalidInputError("Message must not be blank")
    return cleaned


@router.post("/advice", response_model=AdviceResponse)
def create_advice(
    request_body: AdviceRequest,
    request: Request,
    repository: ProfileRepository = Depends(get_profile_repository),
):
    """
    Build the advisor prompt for a profile plus deterministic fallback advice.

    Flow:
    1. Validate the question
    2. Load and evaluate the profile
    3. Render system and user prompts for the conversational model
    4. Return fallback advice (no model provider is called here)
    """
    start_time = time.perf_counter()
    request_id = get_request_id(request)

    try:
        message = normalize_message(request_body.message)
    except InvalidInputError as e:
        logging.warning(f"Invalid advice request: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    profile = load_profile(repository, request_body.profile_id, request_id)
    report = evaluate_credit_profile(profile)

    user_prompt = build_advisor_user_prompt(
        profile,
        report,
        message,
        include_context=request_body.include_context,
    )

    duration_ms = (time.perf_counter() - start_time) * 1000
    record_evaluation(report)
    log_evaluation(request_id, profile.id, report.band, len(report.recommended_actions), duration_ms)

    return AdviceResponse(
        advisor_text=create_fallback_advice(report, max_actions=settings.advice_max_actions),
        prompt=AdvisorPrompt(system=build_advisor_system_prompt(), user=user_prompt),
        report=CreditHealthReportResponse.from_domain(report),
        meta=AdviceMeta(
            used_model=False,
            profile_context_included=request_body.include_context,
        ),
    )
