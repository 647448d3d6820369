"""Prompt construction for the conversational advisor layer"""

import json
from dataclasses import asdict
from typing import Any, Dict, Optional, Sequence

from credit_coach.domain.models import CreditHealthReport, CreditProfile

DISCLAIMER = "Educational only, not financial advice."


def build_advisor_system_prompt() -> str:
    return " ".join(
        [
            "You are a credit coach.",
            "Give practical, non-judgmental guidance in plain language.",
            "Keep responses short, they must be under 67 words.",
        ]
    )


def _records(records: Optional[Sequence[Any]], **renames: str) -> list:
    return [_rename_keys(asdict(record), **renames) for record in records or ()]


def _rename_keys(data: Dict[str, Any], **renames: str) -> Dict[str, Any]:
    return {renames.get(key, key): value for key, value in data.items()}


def profile_context(profile: CreditProfile) -> Dict[str, Any]:
    """Profile fields shared with the model, keyed the way the advisor layer expects"""
    oldest = profile.oldest_account_detail
    return {
        "id": profile.id,
        "label": profile.label,
        "currentScore": profile.current_score,
        "creditLines": profile.credit_lines,
        "utilizationRatio": profile.utilization_ratio,
        "onTimePaymentRate": profile.on_time_payment_rate,
        "oldestAccountMonths": profile.oldest_account_months,
        "oldestAccountDetail": (
            _rename_keys(asdict(oldest), account_name="accountName", opened_date="openedDate")
            if oldest is not None
            else None
        ),
        "hardInquiriesLast12Months": profile.hard_inquiries_last_12_months,
        "creditLineHistory": _records(profile.credit_line_history, account_name="accountName"),
        "hardInquiryHistory": _records(profile.hard_inquiry_history),
        "derogatoryMarks": profile.derogatory_marks,
        "derogatoryMarkHistory": _records(profile.derogatory_mark_history),
        "notes": list(profile.notes),
    }


def analysis_context(report: CreditHealthReport) -> Dict[str, Any]:
    """Report fields shared with the model (component scores are left out)"""
    return {
        "band": report.band,
        "summary": report.summary,
        "strengths": list(report.strengths),
        "riskFactors": list(report.risk_factors),
        "estimatedScoreRange": asdict(report.estimated_score_range),
        "recommendedActions": [asdict(action) for action in report.recommended_actions],
    }


def build_advisor_user_prompt(
    profile: CreditProfile,
    report: CreditHealthReport,
    user_message: str,
    include_context: bool = True,
) -> str:
    """
    Build the user turn sent to the conversational model.

    Follow-up turns in the same conversation skip the profile and analysis
    blocks (include_context=False) since the model has already seen them.
    """
    if not include_context:
        return "\n".join(
            [
                f"User question: {user_message}",
                "",
                "Use the Profile and Analysis context already provided earlier in this conversation.",
            ]
        )

    return "\n".join(
        [
            f"User question: {user_message}",
            "",
            "Profile:",
            json.dumps(profile_context(profile), indent=2, ensure_ascii=False),
            "",
            "Analysis:",
            json.dumps(analysis_context(report), indent=2, ensure_ascii=False),
            "",
            "Use this context to answer the user question.",
        ]
    )


def create_fallback_advice(report: CreditHealthReport, max_actions: int = 3) -> str:
    """Deterministic advice used whenever no model response is available"""
    action_lines = [
        f"- {action.title} ({action.timeline})"
        for action in report.recommended_actions[:max_actions]
    ]

    return "\n".join(
        [
            f"Top priorities for this profile ({report.band}):",
            "\n".join(action_lines),
            DISCLAIMER,
        ]
    )
