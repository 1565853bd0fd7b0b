"""
Credit Limit Strategies for the User Admission Service.

Each client tier has its own credit limit policy:

    VeryImportantClient -> no limit, nothing is looked up
    ImportantClient     -> external limit multiplied, recorded but not enforced
    NormalClient        -> external limit, enforced by the admission gate

Only strategies reporting has_credit_limit() == True are gated against
the minimum credit limit.
"""

from abc import ABC, abstractmethod

from user_admission.domain.entities import CandidateUser
from user_admission.domain.interfaces import CreditScoreProvider

from .settings import AdmissionSettings, admission_settings


class CreditLimitStrategy(ABC):
    """Credit limit policy for one client tier."""

    @abstractmethod
    def has_credit_limit(self) -> bool:
        """Whether the computed limit is enforced by the admission gate."""
        ...

    @abstractmethod
    def calculate_credit_limit(self, user: CandidateUser) -> int:
        """
        Compute the credit limit for a candidate user.

        Args:
            user: The candidate user (last_name and date_of_birth are used)

        Returns:
            The credit limit value

        Raises:
            ClientCreditUnavailableException: If the external lookup fails
        """
        ...


class VeryImportantClientCreditLimitStrategy(CreditLimitStrategy):
    """Very important clients have no credit limit at all."""

    def has_credit_limit(self) -> bool:
        return False

    def calculate_credit_limit(self, user: CandidateUser) -> int:
        return 0


class ImportantClientCreditLimitStrategy(CreditLimitStrategy):
    """
    Important clients get a multiple of the external credit limit.

    The value is stored on the user but never gated.
    """

    def __init__(
        self,
        credit_score_provider: CreditScoreProvider,
        settings: AdmissionSettings = admission_settings,
    ):
        self._credit_score_provider = credit_score_provider
        self._multiplier = settings.important_client_multiplier

    def has_credit_limit(self) -> bool:
        return False

    def calculate_credit_limit(self, user: CandidateUser) -> int:
        credit_limit = self._credit_score_provider.get_credit_limit(
            user.last_name, user.date_of_birth
        )
        return credit_limit * self._multiplier


class NormalClientCreditLimitStrategy(CreditLimitStrategy):
    """Normal clients get the external credit limit, and it is enforced."""

    def __init__(self, credit_score_provider: CreditScoreProvider):
        self._credit_score_provider = credit_score_provider

    def has_credit_limit(self) -> bool:
        return True

    def calculate_credit_limit(self, user: CandidateUser) -> int:
        return self._credit_score_provider.get_credit_limit(
            user.last_name, user.date_of_birth
        )


def get_credit_limit_bucket(credit_limit: int) -> str:
    """
    Get the bucket label for a credit limit (for metrics reporting).

    Args:
        credit_limit: Computed credit limit

    Returns:
        Bucket label string
    """
    if credit_limit <= 0:
        return "0"
    elif credit_limit < 500:
        return "1-499"
    elif credit_limit < 1000:
        return "500-999"
    elif credit_limit < 5000:
        return "1000-4999"
    elif credit_limit < 10000:
        return "5000-9999"
    else:
        return "10000+"
