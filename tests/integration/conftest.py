"""
Fixtures for integration tests.

Provides:
- A fixed clock so age checks are deterministic
- In-memory collaborators seeded with the reference data
- A credit score provider that counts lookups
- A RegistrationService wired to all of the above
"""

from datetime import date, datetime
from typing import Callable

import pytest

from user_admission.application.services import RegistrationService
from user_admission.domain.entities import Client
from user_admission.domain.interfaces import CreditScoreProvider
from user_admission.infrastructure.clients import InMemoryCreditScoreProvider
from user_admission.infrastructure.repositories import (
    DEFAULT_CLIENTS,
    InMemoryClientDirectory,
    InMemoryUserStore,
)
from user_admission.service.admission import AdmissionSettings


FIXED_NOW = datetime(2026, 6, 15, 9, 0, 0)

# Client ids in the reference directory
NORMAL_CLIENT_ID = 1
IMPORTANT_CLIENT_ID = 2
VERY_IMPORTANT_CLIENT_ID = 3
UNKNOWN_TIER_CLIENT_ID = 99


def years_ago(years: int) -> date:
    """Date of birth for someone turning `years` on FIXED_NOW."""
    return FIXED_NOW.date().replace(year=FIXED_NOW.year - years)


# =============================================================================
# Mock Clients
# =============================================================================

class CountingCreditScoreProvider(CreditScoreProvider):
    """Wraps the in-memory provider and tracks lookups."""

    def __init__(self):
        self._delegate = InMemoryCreditScoreProvider()
        self.call_count = 0

    def get_credit_limit(self, last_name: str, date_of_birth: date) -> int:
        self.call_count += 1
        return self._delegate.get_credit_limit(last_name, date_of_birth)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def clock() -> Callable[[], datetime]:
    """Clock frozen at FIXED_NOW."""
    return lambda: FIXED_NOW


@pytest.fixture
def client_directory() -> InMemoryClientDirectory:
    """Reference clients plus one with a tier the service doesn't know."""
    return InMemoryClientDirectory(
        [
            *DEFAULT_CLIENTS,
            Client(id=UNKNOWN_TIER_CLIENT_ID, name="Nowak", type="PlatinumClient"),
        ]
    )


@pytest.fixture
def credit_score_provider() -> CountingCreditScoreProvider:
    return CountingCreditScoreProvider()


@pytest.fixture
def user_store() -> InMemoryUserStore:
    return InMemoryUserStore()


@pytest.fixture
def admission_settings() -> AdmissionSettings:
    return AdmissionSettings()


@pytest.fixture
def registration_service(
    client_directory,
    credit_score_provider,
    user_store,
    admission_settings,
    clock,
) -> RegistrationService:
    """Create a RegistrationService with in-memory collaborators."""
    return RegistrationService(
        client_directory=client_directory,
        credit_score_provider=credit_score_provider,
        user_store=user_store,
        settings=admission_settings,
        clock=clock,
    )

