"""
Age Policy for the User Admission Service.

Age is computed against an explicit reference date so the policy stays
deterministic; callers decide what "now" is.
"""

from datetime import date

from .settings import AdmissionSettings, admission_settings


def calculate_age(date_of_birth: date, now: date) -> int:
    """
    Calculate age in whole years.

    The birthday itself counts as already turned.

    Args:
        date_of_birth: The person's date of birth
        now: Reference date (a datetime is accepted too)

    Returns:
        Age in completed years
    """
    age = now.year - date_of_birth.year

    if now.month < date_of_birth.month or (
        now.month == date_of_birth.month and now.day < date_of_birth.day
    ):
        age -= 1

    return age


def is_too_young(
    date_of_birth: date,
    now: date,
    settings: AdmissionSettings = admission_settings,
) -> bool:
    """
    Determine if a person is below the minimum admission age.

    Args:
        date_of_birth: The person's date of birth
        now: Reference date
        settings: Admission settings (uses defaults if not provided)

    Returns:
        True if the computed age is below settings.minimum_age
    """
    return calculate_age(date_of_birth, now) < settings.minimum_age
