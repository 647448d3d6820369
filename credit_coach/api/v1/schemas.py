"""Pydantic schemas for API request/response validation"""

from dataclasses import asdict
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from credit_coach.domain.models import (
    CreditHealthReport,
    CreditLineRecord,
    CreditProfile,
    DerogatoryMarkRecord,
    HardInquiryRecord,
    OldestAccountRecord,
)


class CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CreditLineSchema(CamelModel):
    account_name: str
    limit: float


class OldestAccountSchema(CamelModel):
    account_name: str
    opened_date: str


class HardInquirySchema(CamelModel):
    lender: str
    date: str


class DerogatoryMarkSchema(CamelModel):
    item: str
    date: str
    status: str


class CreditProfileSchema(CamelModel):
    """
    Credit profile as submitted by callers and stored in the profile source.

    Only the shape is validated. Out-of-range values (a utilization ratio
    of 1.5, negative counts) are accepted and passed to the evaluator as-is.
    """

    id: str = Field(..., min_length=1, description="Profile identifier")
    label: str
    current_score: int = Field(..., description="Current credit score, nominally 300-850")
    credit_lines: int
    utilization_ratio: float = Field(..., description="Balance-to-limit ratio, nominally 0-1")
    on_time_payment_rate: float = Field(..., description="Share of payments made on time, nominally 0-1")
    oldest_account_months: int
    hard_inquiries_last_12_months: int = Field(..., alias="hardInquiriesLast12Months")
    derogatory_marks: int
    notes: List[str] = Field(default_factory=list)
    credit_line_history: Optional[List[CreditLineSchema]] = None
    oldest_account_detail: Optional[OldestAccountSchema] = None
    hard_inquiry_history: Optional[List[HardInquirySchema]] = None
    derogatory_mark_history: Optional[List[DerogatoryMarkSchema]] = None

    @classmethod
    def from_domain(cls, profile: CreditProfile) -> "CreditProfileSchema":
        return cls.model_validate(asdict(profile))

    def to_domain(self) -> CreditProfile:
        return CreditProfile(
            id=self.id,
            label=self.label,
            current_score=self.current_score,
            credit_lines=self.credit_lines,
            utilization_ratio=self.utilization_ratio,
            on_time_payment_rate=self.on_time_payment_rate,
            oldest_account_months=self.oldest_account_months,
            hard_inquiries_last_12_months=self.hard_inquiries_last_12_months,
            derogatory_marks=self.derogatory_marks,
            notes=tuple(self.notes),
            credit_line_history=(
                tuple(CreditLineRecord(r.account_name, r.limit) for r in self.credit_line_history)
                if self.credit_line_history is not None
                else None
            ),
            oldest_account_detail=(
                OldestAccountRecord(self.oldest_account_detail.account_name, self.oldest_account_detail.opened_date)
                if self.oldest_account_detail is not None
                else None
            ),
            hard_inquiry_history=(
                tuple(HardInquiryRecord(r.lender, r.date) for r in self.hard_inquiry_history)
                if self.hard_inquiry_history is not None
                else None
            ),
            derogatory_mark_history=(
                tuple(DerogatoryMarkRecord(r.item, r.date, r.status) for r in self.derogatory_mark_history)
                if self.derogatory_mark_history is not None
                else None
            ),
        )


class CreditActionSchema(CamelModel):
    """Single recommended action"""

    id: str
    title: str
    why: str
    timeline: str
    impact: Literal["high", "medium", "low"]


class ScoreRangeSchema(CamelModel):
    current: int
    conservative: int
    optimistic: int


class ComponentScoresSchema(CamelModel):
    payment_history: int
    utilization: int
    history_depth: int
    inquiries_and_mix: int


class CreditHealthReportResponse(CamelModel):
    """Response for POST /v1/evaluate and GET /v1/profiles/{profile_id}/report"""

    band: Literal["critical", "at_risk", "stable", "strong", "excellent"]
    summary: str
    strengths: List[str]
    risk_factors: List[str]
    estimated_score_range: ScoreRangeSchema
    recommended_actions: List[CreditActionSchema]
    component_scores: ComponentScoresSchema

    @classmethod
    def from_domain(cls, report: CreditHealthReport) -> "CreditHealthReportResponse":
        scores = report.component_scores
        score_range = report.estimated_score_range
        return cls(
            band=report.band,
            summary=report.summary,
            strengths=list(report.strengths),
            risk_factors=list(report.risk_factors),
            estimated_score_range=ScoreRangeSchema(
                current=score_range.current,
                conservative=score_range.conservative,
                optimistic=score_range.optimistic,
            ),
            recommended_actions=[
                CreditActionSchema(
                    id=action.id,
                    title=action.title,
                    why=action.why,
                    timeline=action.timeline,
                    impact=action.impact,
                )
                for action in report.recommended_actions
            ],
            component_scores=ComponentScoresSchema(
                payment_history=scores.payment_history,
                utilization=scores.utilization,
                history_depth=scores.history_depth,
                inquiries_and_mix=scores.inquiries_and_mix,
            ),
        )


class AdviceRequest(CamelModel):
    """Request body for POST /v1/advice"""

    profile_id: str = Field(..., min_length=1, description="Profile identifier")
    message: str = Field(..., min_length=1, description="User question for the advisor")
    include_context: bool = Field(True, description="Embed profile and analysis in the prompt")


class AdvisorPrompt(CamelModel):
    system: str
    user: str


class AdviceMeta(CamelModel):
    used_model: bool
    profile_context_included: bool


class AdviceResponse(CamelModel):
    """Response for POST /v1/advice"""

    advisor_text: str
    prompt: AdvisorPrompt
    report: CreditHealthReportResponse
    meta: AdviceMeta
