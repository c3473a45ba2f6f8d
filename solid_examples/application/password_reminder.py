"""High-level reminder policy that depends only on the Connection contract."""
from __future__ import annotations

from solid_examples.core.logger import get_logger
from solid_examples.persistence.interfaces.connection import Connection

logger = get_logger(__name__)


def _quote(value: str) -> str:
    return "'" + value.replace("'", "''") + "'"


class PasswordReminder:

    def __init__(self, connection: Connection):
        self._connection = connection

    def send_reminder(self, email: str) -> bool:
        """
        Look the user up and send a reminder if a record came back.

        The connection is closed again before returning, also when the
        lookup raises.
        """
        self._connection.connect()
        try:
            result = self._connection.query(f"SELECT * FROM users WHERE email = {_quote(email)}")
            if not result:
                return False
            logger.info("password_reminder_sent", email=email)
            return True
        finally:
            self._connection.disconnect()
