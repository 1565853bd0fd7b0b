"""In-memory implementation of UserStore."""

from typing import List

import structlog

from user_admission.domain.entities import CandidateUser
from user_admission.domain.interfaces import UserStore

logger = structlog.get_logger(__name__)


class InMemoryUserStore(UserStore):
    """Keeps admitted users in a list, in insertion order."""

    def __init__(self):
        self._users: List[CandidateUser] = []

    def add_user(self, user: CandidateUser) -> None:
        self._users.append(user)
        logger.debug("user_stored", user_id=str(user.id), total=len(self._users))

    @property
    def users(self) -> List[CandidateUser]:
        return list(self._users)
