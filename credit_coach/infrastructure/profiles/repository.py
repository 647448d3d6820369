"""Read-only profile source backed by a JSON fixture file"""

import json
import logging
from pathlib import Path
from typing import Dict, List

from pydantic import TypeAdapter, ValidationError

from credit_coach.api.v1.schemas import CreditProfileSchema
from credit_coach.domain.exceptions import ProfileNotFoundError, ProfileSourceError
from credit_coach.domain.models import CreditProfile

logger = logging.getLogger(__name__)

_profile_list_adapter = TypeAdapter(List[CreditProfileSchema])


class ProfileRepository:
    """Loads credit profiles once and serves them by id"""

    def __init__(self, path: Path):
        self.path = Path(path)
        self._profiles: Dict[str, CreditProfile] | None = None

    def _load(self) -> Dict[str, CreditProfile]:
        """
        Parse the JSON array of camelCase profile records.

        Raises:
            ProfileSourceError: File missing, not JSON, or records fail validation
        """
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
            records = _profile_list_adapter.validate_python(raw)
        except OSError as e:
            raise ProfileSourceError(f"Cannot read profile source {self.path}: {e}") from e
        except json.JSONDecodeError as e:
            raise ProfileSourceError(f"Profile source {self.path} is not valid JSON: {e}") from e
        except ValidationError as e:
            raise ProfileSourceError(
                f"Profile source {self.path} has {e.error_count()} invalid field(s)"
            ) from e

        logger.info("Loaded credit profiles", extra={"path": str(self.path), "count": len(records)})
        return {record.id: record.to_domain() for record in records}

    @property
    def profiles(self) -> Dict[str, CreditProfile]:
        if self._profiles is None:
            self._profiles = self._load()
        return self._profiles

    def list_profiles(self) -> List[CreditProfile]:
        return list(self.profiles.values())

    def get_profile(self, profile_id: str) -> CreditProfile:
        """
        Raises:
            ProfileNotFoundError: No profile with this id
        """
        try:
            return self.profiles[profile_id]
        except KeyError:
            raise ProfileNotFoundError(profile_id) from None
