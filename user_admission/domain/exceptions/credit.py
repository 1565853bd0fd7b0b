"""Credit-score lookup domain exceptions."""

from .base import DomainException


class ClientCreditUnavailableException(DomainException):
    """Raised when no credit record exists for a user's identity."""

    def __init__(self, last_name: str):
        super().__init__(
            message=f"Client {last_name} does not exist",
            code="CLIENT_CREDIT_UNAVAILABLE",
        )
        self.last_name = last_name
