import pytest

from solid_examples.application.password_reminder import PasswordReminder
from solid_examples.domain.common.errors import InvalidStateError
from solid_examples.persistence.connections.mock_connection import MockConnection
from solid_examples.persistence.connections.sql_connection import MySQLConnection, PostgreSQLConnection
from solid_examples.persistence.interfaces.connection import Connection, ConnectionSettings

SETTINGS = ConnectionSettings(host="localhost", username="root", password="", database="app")


@pytest.mark.parametrize(
    "connection",
    [MySQLConnection(SETTINGS), PostgreSQLConnection(SETTINGS), MockConnection()],
    ids=["mysql", "postgresql", "mock"],
)
def test_reminder_sent_with_any_connection(connection):
    assert PasswordReminder(connection).send_reminder("jane@example.com") is True
    assert not connection.connected


def test_reminder_issues_lookup_query():
    mock = MockConnection()
    PasswordReminder(mock).send_reminder("jane@example.com")
    assert mock.queries == ["SELECT * FROM users WHERE email = 'jane@example.com'"]


def test_reminder_escapes_quotes():
    mock = MockConnection()
    PasswordReminder(mock).send_reminder("o'brien@example.com")
    assert mock.queries == ["SELECT * FROM users WHERE email = 'o''brien@example.com'"]


def test_no_reminder_when_lookup_is_empty():
    mock = MockConnection(result="")
    assert PasswordReminder(mock).send_reminder("nobody@example.com") is False
    assert not mock.connected


def test_connection_closed_when_query_fails():
    class BrokenConnection(MockConnection):
        def query(self, sql):
            raise InvalidStateError("connection dropped")

    broken = BrokenConnection()
    with pytest.raises(InvalidStateError, match="connection dropped"):
        PasswordReminder(broken).send_reminder("jane@example.com")
    assert not broken.connected


def test_reminder_calls_lifecycle_in_order():
    calls = []

    class Recording(Connection):
        @property
        def connected(self):
            return False

        def connect(self):
            calls.append("connect")
            return "h"

        def query(self, sql):
            calls.append("query")
            return "row"

        def disconnect(self):
            calls.append("disconnect")

    PasswordReminder(Recording()).send_reminder("a@b.c")
    assert calls == ["connect", "query", "disconnect"]
