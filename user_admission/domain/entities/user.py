"""Candidate user assembled during an admission attempt."""

from dataclasses import dataclass, field
from datetime import date, datetime
from uuid import UUID, uuid4

from .client import Client


@dataclass
class CandidateUser:
    """
    A user record built from a registration request and its client.

    The credit limit fields are filled in by the client's credit limit
    strategy. ``credit_limit`` is only meaningful when
    ``has_credit_limit`` is True.
    """

    first_name: str
    last_name: str
    email: str
    date_of_birth: date
    client: Client
    has_credit_limit: bool = False
    credit_limit: int = 0
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.utcnow)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "user_id": str(self.id),
            "first_name": self.first_name,
            "last_name": self.last_name,
            "email": self.email,
            "date_of_birth": self.date_of_birth.isoformat(),
            "client_id": self.client.id,
            "has_credit_limit": self.has_credit_limit,
            "credit_limit": self.credit_limit,
            "created_at": self.created_at.isoformat() + "Z",
        }
