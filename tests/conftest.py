"""Pytest fixtures for testing"""

import json
from pathlib import Path
from typing import Any, Callable, Dict

import pytest
from fastapi.testclient import TestClient

from credit_coach.api.dependencies import get_profile_repository
from credit_coach.api.main import create_app
from credit_coach.domain.models import (
    CreditProfile,
    DerogatoryMarkRecord,
    HardInquiryRecord,
    OldestAccountRecord,
)
from credit_coach.infrastructure.profiles.repository import ProfileRepository

# Meets none of the action triggers
BASELINE_PROFILE: Dict[str, Any] = {
    "id": "baseline",
    "label": "Baseline profile",
    "current_score": 735,
    "credit_lines": 4,
    "utilization_ratio": 0.05,
    "on_time_payment_rate": 1.0,
    "oldest_account_months": 80,
    "hard_inquiries_last_12_months": 0,
    "derogatory_marks": 0,
}


@pytest.fixture
def make_profile() -> Callable[..., CreditProfile]:
    """Build a CreditProfile from the baseline with selected fields overridden"""

    def _make(**overrides: Any) -> CreditProfile:
        return CreditProfile(**{**BASELINE_PROFILE, **overrides})

    return _make


@pytest.fixture
def high_utilization_profile() -> CreditProfile:
    """Thin file with high utilization, late payments and one derogatory mark"""
    return CreditProfile(
        id="u-1",
        label="High utilization profile",
        current_score=590,
        credit_lines=1,
        utilization_ratio=0.86,
        on_time_payment_rate=0.82,
        oldest_account_months=18,
        hard_inquiries_last_12_months=3,
        derogatory_marks=1,
        notes=("Carries a balance on a single store card",),
        oldest_account_detail=OldestAccountRecord("Retail Store Card", "2024-04-01"),
        hard_inquiry_history=(HardInquiryRecord("Auto Lender A", "2025-02-10"),),
        derogatory_mark_history=(DerogatoryMarkRecord("Medical collection", "2023-11-20", "open"),),
    )


@pytest.fixture
def healthy_profile() -> CreditProfile:
    """Long history, low utilization, perfect payments"""
    return CreditProfile(
        id="u-2",
        label="Healthy profile",
        current_score=770,
        credit_lines=5,
        utilization_ratio=0.08,
        on_time_payment_rate=1.0,
        oldest_account_months=140,
        hard_inquiries_last_12_months=1,
        derogatory_marks=0,
    )


@pytest.fixture
def profile_payloads() -> list[Dict[str, Any]]:
    """Profile source records as stored on disk (camelCase)"""
    return [
        {
            "id": "u-1",
            "label": "High utilization profile",
            "currentScore": 590,
            "creditLines": 1,
            "utilizationRatio": 0.86,
            "onTimePaymentRate": 0.82,
            "oldestAccountMonths": 18,
            "hardInquiriesLast12Months": 3,
            "derogatoryMarks": 1,
            "notes": ["Carries a balance on a single store card"],
            "oldestAccountDetail": {"accountName": "Retail Store Card", "openedDate": "2024-04-01"},
            "creditLineHistory": [{"accountName": "Retail Store Card", "limit": 1500}],
        },
        {
            "id": "u-4",
            "label": "Steady profile",
            "currentScore": 735,
            "creditLines": 4,
            "utilizationRatio": 0.05,
            "onTimePaymentRate": 1.0,
            "oldestAccountMonths": 80,
            "hardInquiriesLast12Months": 0,
            "derogatoryMarks": 0,
            "notes": [],
        },
    ]


@pytest.fixture
def profiles_file(tmp_path: Path, profile_payloads: list[Dict[str, Any]]) -> Path:
    path = tmp_path / "profiles.json"
    path.write_text(json.dumps(profile_payloads), encoding="utf-8")
    return path


@pytest.fixture
def client(profiles_file: Path) -> TestClient:
    """Create FastAPI test client backed by a temporary profile source"""
    app = create_app()
    repository = ProfileRepository(profiles_file)

    app.dependency_overrides[get_profile_repository] = lambda: repository
    return TestClient(app)
