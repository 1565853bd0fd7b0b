"""Client entity supplied by the external client directory."""

from dataclasses import dataclass
from enum import Enum


class ClientType(str, Enum):
    """Client tier that selects the credit limit policy."""
    NORMAL = "NormalClient"
    IMPORTANT = "ImportantClient"
    VERY_IMPORTANT = "VeryImportantClient"


@dataclass(frozen=True)
class Client:
    """
    A client organisation that users register under.

    Attributes:
        id: Directory identifier
        name: Display name of the client
        type: Raw tier value as stored by the directory. Usually one of
            the ClientType values, but directories may hold tiers this
            service does not know about.
    """
    id: int
    name: str
    type: str
