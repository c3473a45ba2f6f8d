"""Connection double that records every statement it is asked to run."""
from __future__ import annotations
from typing import List

from solid_examples.core.logger import get_logger
from solid_examples.domain.common.errors import InvalidStateError
from solid_examples.persistence.interfaces.connection import Connection

logger = get_logger(__name__)


class MockConnection(Connection):

    def __init__(self, result: str = "mock_result"):
        self._result = result
        self._connected = False
        self._queries: List[str] = []

    @property
    def connected(self) -> bool:
        return self._connected

    @property
    def queries(self) -> List[str]:
        return list(self._queries)

    def connect(self) -> str:
        if not self._connected:
            logger.info("db_connecting", dialect="mock")
            self._connected = True
        return "mock_connection"

    def query(self, sql: str) -> str:
        if not self._connected:
            raise InvalidStateError("Not connected to mock database")
        self._queries.append(sql)
        logger.info("db_query", dialect="mock", sql=sql)
        return self._result

    def disconnect(self) -> None:
        logger.info("db_disconnecting", dialect="mock")
        self._connected = False
