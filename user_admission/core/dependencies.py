"""Dependency wiring for the admission service."""

from functools import lru_cache

from user_admission.application.services import RegistrationService
from user_admission.domain.interfaces import (
    ClientDirectory,
    CreditScoreProvider,
    UserStore,
)
from user_admission.infrastructure.clients import InMemoryCreditScoreProvider
from user_admission.infrastructure.repositories import (
    InMemoryClientDirectory,
    InMemoryUserStore,
)
from user_admission.service.admission import get_admission_settings


# Repository dependencies
@lru_cache
def get_client_directory() -> ClientDirectory:
    """Get the process-wide ClientDirectory instance."""
    return InMemoryClientDirectory()


@lru_cache
def get_user_store() -> UserStore:
    """Get the process-wide UserStore instance."""
    return InMemoryUserStore()


# External client dependencies
@lru_cache
def get_credit_score_provider() -> CreditScoreProvider:
    """Get the process-wide CreditScoreProvider instance."""
    return InMemoryCreditScoreProvider()


# Service dependencies
def get_registration_service() -> RegistrationService:
    """Get a RegistrationService instance with all dependencies."""
    return RegistrationService(
        client_directory=get_client_directory(),
        credit_score_provider=get_credit_score_provider(),
        user_store=get_user_store(),
        settings=get_admission_settings(),
    )
