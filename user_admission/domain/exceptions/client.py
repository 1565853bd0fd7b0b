"""Client-related domain exceptions."""

from .base import DomainException


class ClientNotFoundException(DomainException):
    """Raised when a client cannot be found in the client directory."""

    def __init__(self, client_id: int):
        super().__init__(
            message=f"User with id {client_id} does not exist in database",
            code="CLIENT_NOT_FOUND",
        )
        self.client_id = client_id


class InvalidClientTypeException(DomainException):
    """Raised when a client's tier has no credit limit policy."""

    def __init__(self, client_type: object):
        super().__init__(
            message=f"Unexpected client type: {client_type!r}",
            code="INVALID_CLIENT_TYPE",
        )
        self.client_type = client_type
