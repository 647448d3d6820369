"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidInputError(DomainException):
    """Profile payload is structurally malformed (missing or mistyped field)"""

    pass


class ProfileNotFoundError(DomainException):
    """No profile with the requested id exists in the profile source"""

    def __init__(self, profile_id: str):
        super().__init__(f"Profile {profile_id} not found")
        self.profile_id = profile_id


class ProfileSourceError(DomainException):
    """Profile source is unreadable or holds malformed records"""

    pass
