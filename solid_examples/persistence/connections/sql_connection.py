"""Simulated SQL connections. Nothing here opens a socket; results are literals."""
from __future__ import annotations

from solid_examples.core.logger import get_logger
from solid_examples.domain.common.errors import InvalidStateError
from solid_examples.persistence.interfaces.connection import Connection, ConnectionSettings

logger = get_logger(__name__)


class SqlConnection(Connection):
    """Shared lifecycle for the simulated server connections."""

    dialect: str = ""
    label: str = ""

    def __init__(self, settings: ConnectionSettings):
        self._settings = settings
        self._connected = False

    @property
    def settings(self) -> ConnectionSettings:
        return self._settings

    @property
    def connected(self) -> bool:
        return self._connected

    @property
    def handle(self) -> str:
        return f"{self.dialect}_connection_resource"

    def connect(self) -> str:
        if self._connected:
            logger.debug("db_already_connected", dialect=self.dialect, host=self._settings.host)
            return self.handle
        logger.info("db_connecting", dialect=self.dialect, host=self._settings.host)
        self._connected = True
        return self.handle

    def query(self, sql: str) -> str:
        if not self._connected:
            raise InvalidStateError(f"Not connected to {self.label} database")
        logger.info("db_query", dialect=self.dialect, sql=sql)
        return f"{self.dialect}_result"

    def disconnect(self) -> None:
        logger.info("db_disconnecting", dialect=self.dialect, host=self._settings.host)
        self._connected = False


class MySQLConnection(SqlConnection):
    dialect = "mysql"
    label = "MySQL"


class PostgreSQLConnection(SqlConnection):
    dialect = "postgresql"
    label = "PostgreSQL"
