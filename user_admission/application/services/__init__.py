"""Application services (use cases)."""

from .registration_service import RegistrationService

__all__ = [
    "RegistrationService",
]
