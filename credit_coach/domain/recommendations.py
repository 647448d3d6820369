"""Recommended action table and score gain projection"""

from types import MappingProxyType
from typing import Callable, List, Mapping, Sequence, Tuple

from credit_coach.domain.models import CreditAction, CreditProfile
from credit_coach.utils.math_utils import clamp

ActionRule = Tuple[Callable[[CreditProfile], bool], CreditAction]

# Evaluated in order; every matching rule contributes its action
ACTION_RULES: Tuple[ActionRule, ...] = (
    (
        lambda p: p.on_time_payment_rate < 0.97,
        CreditAction(
            id="autopay-and-calendar-guardrails",
            title="Protect payment history with autopay and reminders",
            impact="high",
            timeline="30-90 days",
            why="Preventing any new late payments is the fastest way to stop compounding damage.",
        ),
    ),
    (
        lambda p: p.utilization_ratio > 0.3,
        CreditAction(
            id="lower-utilization",
            title="Reduce revolving utilization below 30% (ideally below 10%)",
            impact="high",
            timeline="15-60 days",
            why="High balances relative to limits can significantly suppress score potential.",
        ),
    ),
    (
        lambda p: p.hard_inquiries_last_12_months > 2,
        CreditAction(
            id="pause-hard-inquiries",
            title="Pause non-essential credit applications",
            impact="medium",
            timeline="30-180 days",
            why="Fewer hard pulls can reduce short-term scoring pressure.",
        ),
    ),
    (
        lambda p: p.derogatory_marks > 0,
        CreditAction(
            id="clean-up-derogatories",
            title="Work a cleanup plan for derogatory items",
            impact="high",
            timeline="60-180 days",
            why="Addressing inaccuracies or settling eligible items can improve future underwriting outcomes.",
        ),
    ),
    (
        lambda p: p.credit_lines < 2,
        CreditAction(
            id="responsible-line-expansion",
            title="Add one managed credit line only if budget supports it",
            impact="medium",
            timeline="60-180 days",
            why="A thin file can benefit from additional positive payment history and available credit.",
        ),
    ),
    (
        lambda p: p.oldest_account_months < 24,
        CreditAction(
            id="preserve-oldest-account",
            title="Keep oldest accounts open and active",
            impact="medium",
            timeline="ongoing",
            why="Credit age builds slowly and supports longer-term score resilience.",
        ),
    ),
)

MAINTAIN_ROUTINE = CreditAction(
    id="maintain-routine",
    title="Maintain current habits and monitor monthly",
    impact="low",
    timeline="ongoing",
    why="Strong profiles benefit most from consistency and avoiding avoidable inquiries.",
)

# Impact tier -> (conservative, optimistic) score points
IMPACT_POINTS: Mapping[str, Tuple[int, int]] = MappingProxyType(
    {
        "high": (18, 35),
        "medium": (9, 18),
        "low": (3, 8),
    }
)

CONSERVATIVE_GAIN_BOUNDS = (8, 80)
OPTIMISTIC_GAIN_BOUNDS = (15, 150)


def build_actions(profile: CreditProfile) -> List[CreditAction]:
    """
    Collect the actions whose trigger condition holds for the profile.

    Order follows ACTION_RULES. When no rule fires the list holds the single
    maintain-routine action, so the result is never empty.
    """
    actions = [action for predicate, action in ACTION_RULES if predicate(profile)]

    if not actions:
        actions.append(MAINTAIN_ROUTINE)

    return actions


def estimate_potential_gain(actions: Sequence[CreditAction]) -> Tuple[int, int]:
    """
    Sum impact points across actions.

    Returns: (conservative_gain, optimistic_gain), each clamped to its bounds
    """
    conservative = sum(IMPACT_POINTS[action.impact][0] for action in actions)
    optimistic = sum(IMPACT_POINTS[action.impact][1] for action in actions)

    return (
        clamp(conservative, *CONSERVATIVE_GAIN_BOUNDS),
        clamp(optimistic, *OPTIMISTIC_GAIN_BOUNDS),
    )
