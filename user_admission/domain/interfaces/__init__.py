"""
Domain Interfaces (Ports)
"""

from .repositories import ClientDirectory, UserStore
from .clients import CreditScoreProvider

__all__ = [
    "ClientDirectory",
    "UserStore",
    "CreditScoreProvider",
]
