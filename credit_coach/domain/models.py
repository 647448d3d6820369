"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass
from typing import Optional, Tuple

# Ordered from worst to best
HEALTH_BANDS: Tuple[str, ...] = ("critical", "at_risk", "stable", "strong", "excellent")

ACTION_IMPACTS: Tuple[str, ...] = ("high", "medium", "low")


@dataclass(frozen=True)
class CreditLineRecord:
    """Open credit line, narrative detail only"""

    account_name: str
    limit: float


@dataclass(frozen=True)
class OldestAccountRecord:
    """Oldest account on file, narrative detail only"""

    account_name: str
    opened_date: str


@dataclass(frozen=True)
class HardInquiryRecord:
    """Hard pull by a lender, narrative detail only"""

    lender: str
    date: str


@dataclass(frozen=True)
class DerogatoryMarkRecord:
    """Negative credit-file item, narrative detail only"""

    item: str
    date: str
    status: str


@dataclass(frozen=True)
class CreditProfile:
    """Consumer credit profile to be evaluated"""

    id: str
    label: str
    current_score: int
    credit_lines: int
    utilization_ratio: float  # balance-to-limit, nominally 0.0 - 1.0
    on_time_payment_rate: float  # nominally 0.0 - 1.0
    oldest_account_months: int
    hard_inquiries_last_12_months: int
    derogatory_marks: int
    notes: Tuple[str, ...] = ()
    credit_line_history: Optional[Tuple[CreditLineRecord, ...]] = None
    oldest_account_detail: Optional[OldestAccountRecord] = None
    hard_inquiry_history: Optional[Tuple[HardInquiryRecord, ...]] = None
    derogatory_mark_history: Optional[Tuple[DerogatoryMarkRecord, ...]] = None


@dataclass(frozen=True)
class CreditAction:
    """Recommended improvement step"""

    id: str
    title: str
    why: str
    timeline: str
    impact: str  # "high", "medium" or "low"


@dataclass(frozen=True)
class ScoreRange:
    """Projected credit score after following the recommended actions"""

    current: int
    conservative: int
    optimistic: int


@dataclass(frozen=True)
class ComponentScores:
    """Rounded sub-scores (0-100) feeding the weighted composite"""

    payment_history: int
    utilization: int
    history_depth: int
    inquiries_and_mix: int


@dataclass(frozen=True)
class CreditHealthReport:
    """Output of credit health evaluation"""

    band: str  # one of HEALTH_BANDS
    summary: str
    strengths: Tuple[str, ...]
    risk_factors: Tuple[str, ...]
    estimated_score_range: ScoreRange
    recommended_actions: Tuple[CreditAction, ...]
    component_scores: ComponentScores
