"""External client implementations."""

from .credit_score_client import DEFAULT_CREDIT_LIMITS, InMemoryCreditScoreProvider

__all__ = [
    "DEFAULT_CREDIT_LIMITS",
    "InMemoryCreditScoreProvider",
]
