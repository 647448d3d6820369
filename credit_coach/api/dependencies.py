"""Dependency injection for FastAPI endpoints"""

from functools import lru_cache

from fastapi import Request

from credit_coach.config import settings
from credit_coach.infrastructure.profiles.repository import ProfileRepository


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


@lru_cache(maxsize=1)
def get_profile_repository() -> ProfileRepository:
    """Provide the shared read-only profile repository"""
    return ProfileRepository(settings.resolved_profiles_path)
