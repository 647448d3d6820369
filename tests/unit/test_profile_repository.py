"""Unit tests for the JSON-backed profile source"""

import json

import pytest

from credit_coach.config import DEFAULT_PROFILES_PATH
from credit_coach.domain.exceptions import ProfileNotFoundError, ProfileSourceError
from credit_coach.domain.models import CreditLineRecord, OldestAccountRecord
from credit_coach.infrastructure.profiles.repository import ProfileRepository


def test_list_profiles_preserves_file_order(profiles_file):
    repository = ProfileRepository(profiles_file)

    assert [p.id for p in repository.list_profiles()] == ["u-1", "u-4"]


def test_get_profile_converts_camel_case_record(profiles_file):
    profile = ProfileRepository(profiles_file).get_profile("u-1")

    assert profile.current_score == 590
    assert profile.hard_inquiries_last_12_months == 3
    assert profile.utilization_ratio == 0.86
    assert profile.notes == ("Carries a balance on a single store card",)
    assert profile.oldest_account_detail == OldestAccountRecord("Retail Store Card", "2024-04-01")
    assert profile.credit_line_history == (CreditLineRecord("Retail Store Card", 1500),)
    assert profile.hard_inquiry_history is None


def test_get_profile_unknown_id(profiles_file):
    with pytest.raises(ProfileNotFoundError) as exc_info:
        ProfileRepository(profiles_file).get_profile("missing")

    assert exc_info.value.profile_id == "missing"
    assert str(exc_info.value) == "Profile missing not found"


def test_missing_file(tmp_path):
    with pytest.raises(ProfileSourceError):
        ProfileRepository(tmp_path / "absent.json").list_profiles()


def test_invalid_json(tmp_path):
    path = tmp_path / "profiles.json"
    path.write_text("[{not json", encoding="utf-8")

    with pytest.raises(ProfileSourceError):
        ProfileRepository(path).list_profiles()


def test_record_missing_required_field(tmp_path, profile_payloads):
    broken = dict(profile_payloads[0])
    del broken["utilizationRatio"]
    path = tmp_path / "profiles.json"
    path.write_text(json.dumps([broken]), encoding="utf-8")

    with pytest.raises(ProfileSourceError):
        ProfileRepository(path).get_profile("u-1")


def test_out_of_range_values_are_kept(tmp_path, profile_payloads):
    """Test the source validates shape only, not numeric ranges"""
    record = dict(profile_payloads[1], utilizationRatio=1.5, onTimePaymentRate=1.2)
    path = tmp_path / "profiles.json"
    path.write_text(json.dumps([record]), encoding="utf-8")

    profile = ProfileRepository(path).get_profile("u-4")

    assert profile.utilization_ratio == 1.5
    assert profile.on_time_payment_rate == 1.2


def test_profiles_loaded_once(profiles_file):
    repository = ProfileRepository(profiles_file)
    first = repository.list_profiles()

    profiles_file.write_text("[]", encoding="utf-8")

    assert repository.list_profiles() == first


def test_bundled_profiles_load():
    repository = ProfileRepository(DEFAULT_PROFILES_PATH)

    assert len(repository.list_profiles()) == 4
    assert repository.get_profile("u-2").label == "Healthy long-standing profile"
