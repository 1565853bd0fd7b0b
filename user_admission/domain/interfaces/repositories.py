"""Repository interfaces for client lookup and user persistence."""

from abc import ABC, abstractmethod

from user_admission.domain.entities import CandidateUser, Client


class ClientDirectory(ABC):
    """
    Abstract directory of clients.

    Implementations may use a database, a remote service, in-memory
    storage, etc. The admission core only reads from it.
    """

    @abstractmethod
    def get_by_id(self, client_id: int) -> Client:
        """
        Retrieve a client by ID.

        Args:
            client_id: The client's identifier

        Returns:
            The client

        Raises:
            ClientNotFoundException: If no client has this ID
        """
        ...


class UserStore(ABC):
    """
    Abstract store for admitted users.

    Called once per admission, after every policy check has passed.
    """

    @abstractmethod
    def add_user(self, user: CandidateUser) -> None:
        """
        Persist an admitted user.

        Args:
            user: The fully assembled user record
        """
        ...
