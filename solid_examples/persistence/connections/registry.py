"""Driver name -> connection factory, resolved once when wiring the app."""
from __future__ import annotations
from typing import Callable, Dict

from solid_examples.persistence.connections.mock_connection import MockConnection
from solid_examples.persistence.connections.sql_connection import MySQLConnection, PostgreSQLConnection
from solid_examples.persistence.interfaces.connection import Connection, ConnectionSettings

CONNECTION_DRIVERS: Dict[str, Callable[[ConnectionSettings], Connection]] = {
    "mysql": MySQLConnection,
    "postgresql": PostgreSQLConnection,
    "mock": lambda settings: MockConnection(),
}


def build_connection(driver: str, settings: ConnectionSettings) -> Connection:
    try:
        factory = CONNECTION_DRIVERS[driver.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown database driver '{driver}'. Must be one of {sorted(CONNECTION_DRIVERS)}."
        ) from None
    return factory(settings)
