"""Credit health scoring engine - core business logic for profile evaluation"""

from types import MappingProxyType
from typing import List, Mapping, Tuple

from credit_coach.domain.models import (
    ComponentScores,
    CreditHealthReport,
    CreditProfile,
    ScoreRange,
)
from credit_coach.domain.recommendations import build_actions, estimate_potential_gain
from credit_coach.utils.math_utils import clamp, round_half_up

MIN_SCORE = 300
MAX_SCORE = 850

WEIGHTS: Mapping[str, float] = MappingProxyType(
    {
        "payment_history": 0.35,
        "utilization": 0.30,
        "history_depth": 0.15,
        "inquiries_and_mix": 0.20,
    }
)

# (lower bound inclusive, band), checked highest first
BAND_THRESHOLDS: Tuple[Tuple[float, str], ...] = (
    (85, "excellent"),
    (72, "strong"),
    (55, "stable"),
    (40, "at_risk"),
)


def score_payment_history(on_time_payment_rate: float) -> float:
    return clamp(on_time_payment_rate * 100, 0, 100)


def score_utilization(utilization_ratio: float) -> float:
    """
    Piecewise-linear, monotonically decreasing in the utilization ratio.

    Breakpoints (continuous at each boundary):
    - <= 10%: 100
    - 10-30%: 100 -> 80
    - 30-50%: 80 -> 55
    - 50-75%: 55 -> 25
    - > 75%:  10 and falling, floored at 0
    """
    u = utilization_ratio
    if u <= 0.1:
        return 100
    elif u <= 0.3:
        return 80 + (0.3 - u) * 100
    elif u <= 0.5:
        return 55 + (0.5 - u) * 125
    elif u <= 0.75:
        return 25 + (0.75 - u) * 120
    else:
        return clamp(10 - (u - 0.75) * 60, 0, 20)


def score_history_depth(oldest_account_months: int) -> float:
    """Linear up to 10 years of history, floored at 10 for very young files"""
    return clamp((oldest_account_months / 120) * 100, 10, 100)


def score_inquiries_and_mix(credit_lines: int, hard_inquiries: int) -> float:
    """
    Account mix (up to 70 points, 6+ lines) plus 30 points minus inquiry penalty.

    Each hard inquiry costs 8 points, capped at 40.
    """
    line_score = clamp((credit_lines / 6) * 70, 15, 70)
    inquiry_penalty = clamp(hard_inquiries * 8, 0, 40)
    return clamp(line_score + (30 - inquiry_penalty), 0, 100)


def calculate_health_score(
    payment_history: float,
    utilization: float,
    history_depth: float,
    inquiries_and_mix: float,
    derogatory_marks: int,
) -> float:
    """
    Weighted composite of the component scores, 0 (critical) to 100 (excellent).

    Each derogatory mark costs 10 points, capped at 25.
    """
    weighted = (
        payment_history * WEIGHTS["payment_history"]
        + utilization * WEIGHTS["utilization"]
        + history_depth * WEIGHTS["history_depth"]
        + inquiries_and_mix * WEIGHTS["inquiries_and_mix"]
    )
    derogatory_penalty = clamp(derogatory_marks * 10, 0, 25)

    return clamp(weighted - derogatory_penalty, 0, 100)


def determine_band(health_score: float) -> str:
    for lower_bound, band in BAND_THRESHOLDS:
        if health_score >= lower_bound:
            return band
    return "critical"


def assess_factors(profile: CreditProfile) -> Tuple[List[str], List[str]]:
    """
    Independent threshold checks, each adding one sentence to strengths or risks.

    Returns: (strengths, risk_factors)
    """
    strengths: List[str] = []
    risk_factors: List[str] = []

    if profile.on_time_payment_rate * 100 >= 97:
        strengths.append("Strong on-time payment behavior is helping score stability.")
    else:
        risk_factors.append("Payment history is below ideal and is the highest-impact score factor.")

    if profile.utilization_ratio <= 0.3:
        strengths.append("Utilization is in a healthy range for revolving credit.")
    else:
        risk_factors.append("Utilization is high and may be suppressing score growth.")

    if profile.oldest_account_months >= 60:
        strengths.append("Average credit age depth is supporting long-term score health.")
    else:
        risk_factors.append("Credit history depth is limited; time will improve this factor.")

    if profile.hard_inquiries_last_12_months > 4:
        risk_factors.append("Recent hard inquiry volume may temporarily drag score gains.")

    if profile.derogatory_marks > 0:
        risk_factors.append("Derogatory marks are introducing downside pressure on score outcomes.")

    return strengths, risk_factors


def project_score_range(current_score: float, conservative_gain: float, optimistic_gain: float) -> ScoreRange:
    return ScoreRange(
        current=int(clamp(round_half_up(current_score), MIN_SCORE, MAX_SCORE)),
        conservative=int(clamp(round_half_up(current_score + conservative_gain), MIN_SCORE, MAX_SCORE)),
        optimistic=int(clamp(round_half_up(current_score + optimistic_gain), MIN_SCORE, MAX_SCORE)),
    )


def format_band_name(band: str) -> str:
    return band.replace("_", " ")


def build_summary(band: str) -> str:
    return (
        f"The profile looks {format_band_name(band)} right now. "
        "Main levers are payment reliability, utilization, and inquiry pacing."
    )


def evaluate_credit_profile(profile: CreditProfile) -> CreditHealthReport:
    """
    Main entry point: score a profile and recommend improvement actions.

    Pure and deterministic. Input ranges are not validated; out-of-range
    ratios flow through the arithmetic and are only bounded where the
    component formulas and score range clamp them.
    """
    payment_history = score_payment_history(profile.on_time_payment_rate)
    utilization = score_utilization(profile.utilization_ratio)
    history_depth = score_history_depth(profile.oldest_account_months)
    inquiries_and_mix = score_inquiries_and_mix(
        profile.credit_lines, profile.hard_inquiries_last_12_months
    )

    health_score = calculate_health_score(
        payment_history, utilization, history_depth, inquiries_and_mix, profile.derogatory_marks
    )
    band = determine_band(health_score)

    strengths, risk_factors = assess_factors(profile)

    actions = build_actions(profile)
    conservative_gain, optimistic_gain = estimate_potential_gain(actions)

    return CreditHealthReport(
        band=band,
        summary=build_summary(band),
        strengths=tuple(strengths),
        risk_factors=tuple(risk_factors),
        estimated_score_range=project_score_range(
            profile.current_score, conservative_gain, optimistic_gain
        ),
        recommended_actions=tuple(actions),
        component_scores=ComponentScores(
            payment_history=round_half_up(payment_history),
            utilization=round_half_up(utilization),
            history_depth=round_half_up(history_depth),
            inquiries_and_mix=round_half_up(inquiries_and_mix),
        ),
    )
