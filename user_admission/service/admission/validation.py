"""
Input validation for registration requests.

The email check is deliberately loose: an address is only flagged when
it contains neither "@" nor ".". Addresses with just one of the two
characters are accepted.
"""

from typing import Optional


def is_blank(value: Optional[str]) -> bool:
    """True if the value is None or the empty string."""
    return value is None or value == ""


def is_invalid_email(email: Optional[str]) -> bool:
    """
    Check whether an email fails the format check.

    Args:
        email: The submitted email address

    Returns:
        True if the email contains neither "@" nor "."
    """
    email = email or ""
    return "@" not in email and "." not in email


def is_invalid(
    first_name: Optional[str],
    last_name: Optional[str],
    email: Optional[str],
) -> bool:
    """
    Check the structural validity of submitted registration fields.

    Args:
        first_name: The user's first name
        last_name: The user's last name
        email: The user's email address

    Returns:
        True if any name is empty or the email fails the format check
    """
    return (
        is_blank(first_name)
        or is_blank(last_name)
        or is_invalid_email(email)
    )
