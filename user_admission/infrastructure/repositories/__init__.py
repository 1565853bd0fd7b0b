"""Repository implementations."""

from .client_directory import DEFAULT_CLIENTS, InMemoryClientDirectory
from .user_store import InMemoryUserStore

__all__ = [
    "DEFAULT_CLIENTS",
    "InMemoryClientDirectory",
    "InMemoryUserStore",
]
