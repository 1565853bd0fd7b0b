"""
Unit tests for application wiring and logging setup.
"""

import logging
from datetime import date

import structlog

from user_admission import main
from user_admission.application.services import RegistrationService
from user_admission.core.config import Settings
from user_admission.core.dependencies import (
    get_client_directory,
    get_credit_score_provider,
    get_registration_service,
    get_user_store,
)
from user_admission.core.logging import setup_logging
from user_admission.infrastructure.repositories import InMemoryUserStore


class TestDependencies:
    """Tests for the default collaborator wiring."""

    def test_collaborators_are_shared(self):
        assert get_client_directory() is get_client_directory()
        assert get_credit_score_provider() is get_credit_score_provider()
        assert get_user_store() is get_user_store()

    def test_registration_service_uses_shared_store(self):
        service = get_registration_service()
        store = get_user_store()
        before = len(store.users)

        assert isinstance(service, RegistrationService)
        assert service.add_user("John", "Doe", "john.doe@gmail.com", date(1980, 1, 1), 1)
        assert isinstance(store, InMemoryUserStore)
        assert len(store.users) == before + 1


class TestCreateApp:
    """Tests for main.create_app()."""

    def test_returns_ready_service(self, monkeypatch):
        calls = []
        monkeypatch.setattr(main, "setup_logging", calls.append)

        service = main.create_app()

        assert isinstance(service, RegistrationService)
        assert len(calls) == 1


class TestSetupLogging:
    """Tests for setup_logging()."""

    def test_configures_structlog(self):
        try:
            setup_logging(Settings(log_format="console", log_level="DEBUG"))

            assert structlog.is_configured()
            assert logging.getLogger().level == logging.DEBUG
        finally:
            structlog.reset_defaults()

    def test_unknown_level_falls_back_to_info(self):
        try:
            setup_logging(Settings(log_level="chatty"))

            assert logging.getLogger().level == logging.INFO
        finally:
            structlog.reset_defaults()
