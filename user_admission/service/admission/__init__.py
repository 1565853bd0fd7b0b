"""
Admission Policy Module for the User Admission Service
"""

from .settings import AdmissionSettings, admission_settings, get_admission_settings
from .validation import is_invalid, is_invalid_email
from .age import calculate_age, is_too_young
from .credit_limit import (
    CreditLimitStrategy,
    VeryImportantClientCreditLimitStrategy,
    ImportantClientCreditLimitStrategy,
    NormalClientCreditLimitStrategy,
    get_credit_limit_bucket,
)
from .selector import CreditLimitStrategyFactory, resolve_client_type

__all__ = [
    # Settings
    "AdmissionSettings",
    "admission_settings",
    "get_admission_settings",
    # Validation
    "is_invalid",
    "is_invalid_email",
    # Age Policy
    "calculate_age",
    "is_too_young",
    # Strategies
    "CreditLimitStrategy",
    "VeryImportantClientCreditLimitStrategy",
    "ImportantClientCreditLimitStrategy",
    "NormalClientCreditLimitStrategy",
    "get_credit_limit_bucket",
    # Selector
    "CreditLimitStrategyFactory",
    "resolve_client_type",
]
