"""Abstract database connection the password reminder depends on."""
from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class ConnectionSettings:
    host: str
    username: str
    password: str
    database: str

    def __repr__(self) -> str:
        return (
            f"ConnectionSettings(host={self.host!r}, username={self.username!r}, "
            f"password='***', database={self.database!r})"
        )


class Connection(ABC):
    """
    disconnected -> connected -> disconnected.

    ``query`` is only valid while connected and raises InvalidStateError
    otherwise. ``connect`` on an open connection is a no-op returning the
    same handle; ``disconnect`` always leaves the connection closed.
    """

    @property
    @abstractmethod
    def connected(self) -> bool:
        ...

    @abstractmethod
    def connect(self) -> str:
        """Open the connection and return its handle."""
        ...

    @abstractmethod
    def query(self, sql: str) -> str:
        """Run a statement and return its (non-empty) result."""
        ...

    @abstractmethod
    def disconnect(self) -> None:
        ...
