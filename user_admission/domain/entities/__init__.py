"""Domain Entities - Core business objects."""

from .client import Client, ClientType
from .user import CandidateUser

__all__ = [
    "Client",
    "ClientType",
    "CandidateUser",
]
