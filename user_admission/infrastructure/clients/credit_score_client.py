"""In-memory implementation of CreditScoreProvider."""

from datetime import date
from typing import Dict, Optional

from user_admission.domain.exceptions import ClientCreditUnavailableException
from user_admission.domain.interfaces import CreditScoreProvider

DEFAULT_CREDIT_LIMITS = {
    "Kowalski": 300,
    "Doe": 10000,
    "Kwiatkowski": 1000,
}


class InMemoryCreditScoreProvider(CreditScoreProvider):
    """
    Credit score lookup backed by a dictionary keyed on last name.

    The date of birth is part of the lookup contract but the reference
    records are unique by last name, so it is not used here.
    """

    def __init__(self, credit_limits: Optional[Dict[str, int]] = None):
        if credit_limits is None:
            credit_limits = DEFAULT_CREDIT_LIMITS
        self._credit_limits = dict(credit_limits)

    def get_credit_limit(self, last_name: str, date_of_birth: date) -> int:
        """Look up the credit limit on record for a person."""
        try:
            return self._credit_limits[last_name]
        except KeyError:
            raise ClientCreditUnavailableException(last_name) from None
