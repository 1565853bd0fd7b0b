"""
User Admission - Application Entry Point

Configures logging and builds the registration service with its
default collaborators.
"""

import structlog

from user_admission import __version__
from user_admission.application.services import RegistrationService
from user_admission.core.config import settings
from user_admission.core.dependencies import get_registration_service
from user_admission.core.logging import setup_logging


def create_app() -> RegistrationService:
    """
    Build a ready-to-use registration service.

    Sets up structured logging from the application settings before
    wiring the service.
    """
    setup_logging(settings)

    service = get_registration_service()

    logger = structlog.get_logger(__name__)
    logger.info("application_started", app=settings.app_name, version=__version__)

    return service
