"""In-memory implementation of ClientDirectory."""

from typing import Dict, Iterable, Optional

from user_admission.domain.entities import Client, ClientType
from user_admission.domain.exceptions import ClientNotFoundException
from user_admission.domain.interfaces import ClientDirectory

DEFAULT_CLIENTS = (
    Client(id=1, name="Kowalski", type=ClientType.NORMAL.value),
    Client(id=2, name="Malewski", type=ClientType.IMPORTANT.value),
    Client(id=3, name="Smith", type=ClientType.VERY_IMPORTANT.value),
)


class InMemoryClientDirectory(ClientDirectory):
    """
    Client directory backed by a dictionary.

    Seeded with the reference clients unless other clients are given.
    """

    def __init__(self, clients: Optional[Iterable[Client]] = None):
        if clients is None:
            clients = DEFAULT_CLIENTS
        self._clients: Dict[int, Client] = {client.id: client for client in clients}

    def get_by_id(self, client_id: int) -> Client:
        """Retrieve a client by ID."""
        client = self._clients.get(client_id)
        if client is None:
            raise ClientNotFoundException(client_id)
        return client
