"""Domain Exceptions - Data-integrity failures raised to the caller."""

from .base import DomainException
from .client import (
    ClientNotFoundException,
    InvalidClientTypeException,
)
from .credit import ClientCreditUnavailableException

__all__ = [
    "DomainException",
    "ClientNotFoundException",
    "InvalidClientTypeException",
    "ClientCreditUnavailableException",
]
