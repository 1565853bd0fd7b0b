"""
Credit Limit Strategy Selector.

Maps a client's tier to the credit limit strategy that applies to it.
Unknown tiers are an error, never a silent default.
"""

from typing import Callable, Dict

from user_admission.domain.entities import Client, ClientType
from user_admission.domain.exceptions import InvalidClientTypeException
from user_admission.domain.interfaces import CreditScoreProvider

from .credit_limit import (
    CreditLimitStrategy,
    ImportantClientCreditLimitStrategy,
    NormalClientCreditLimitStrategy,
    VeryImportantClientCreditLimitStrategy,
)
from .settings import AdmissionSettings, admission_settings


def resolve_client_type(raw_type: object) -> ClientType:
    """
    Convert a raw tier value into a ClientType.

    Raises:
        InvalidClientTypeException: If the value is not a known tier
    """
    try:
        return ClientType(raw_type)
    except ValueError:
        raise InvalidClientTypeException(raw_type) from None


class CreditLimitStrategyFactory:
    """
    Builds credit limit strategies for clients.

    Holds only its collaborators, so a single instance can be shared
    by every admission attempt.
    """

    def __init__(
        self,
        credit_score_provider: CreditScoreProvider,
        settings: AdmissionSettings = admission_settings,
    ):
        self._credit_score_provider = credit_score_provider
        self._settings = settings
        self._builders: Dict[ClientType, Callable[[], CreditLimitStrategy]] = {
            ClientType.VERY_IMPORTANT: VeryImportantClientCreditLimitStrategy,
            ClientType.IMPORTANT: lambda: ImportantClientCreditLimitStrategy(
                self._credit_score_provider, self._settings
            ),
            ClientType.NORMAL: lambda: NormalClientCreditLimitStrategy(
                self._credit_score_provider
            ),
        }

    def strategy_for(self, client: Client) -> CreditLimitStrategy:
        """
        Select the credit limit strategy for a client.

        Args:
            client: The resolved client

        Returns:
            The strategy for the client's tier

        Raises:
            InvalidClientTypeException: If the client's tier is not recognized
        """
        client_type = resolve_client_type(client.type)
        return self._builders[client_type]()
