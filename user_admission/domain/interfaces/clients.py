"""External client interfaces."""

from abc import ABC, abstractmethod
from datetime import date


class CreditScoreProvider(ABC):
    """
    Abstract client for the external credit scoring service.

    Supplies the base credit limit that client-tier strategies build on.
    """

    @abstractmethod
    def get_credit_limit(self, last_name: str, date_of_birth: date) -> int:
        """
        Look up the credit limit for a person.

        Args:
            last_name: The person's last name
            date_of_birth: The person's date of birth

        Returns:
            The credit limit on record

        Raises:
            ClientCreditUnavailableException: If no credit record exists
        """
        ...
