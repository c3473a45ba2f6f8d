import pytest
from structlog.testing import capture_logs

from solid_examples.domain.common.errors import InvalidStateError
from solid_examples.persistence.connections.mock_connection import MockConnection
from solid_examples.persistence.connections.registry import build_connection
from solid_examples.persistence.connections.sql_connection import MySQLConnection, PostgreSQLConnection
from solid_examples.persistence.interfaces.connection import ConnectionSettings

SETTINGS = ConnectionSettings(host="db.local", username="app", password="s3cret", database="shop")


def _connections():
    return [MySQLConnection(SETTINGS), PostgreSQLConnection(SETTINGS), MockConnection()]


@pytest.fixture(params=["mysql", "postgresql", "mock"])
def connection(request):
    return build_connection(request.param, SETTINGS)


def test_initially_disconnected(connection):
    assert not connection.connected


def test_query_before_connect_is_invalid_state(connection):
    with pytest.raises(InvalidStateError):
        connection.query("SELECT 1")


def test_query_after_connect_returns_result(connection):
    connection.connect()
    assert connection.connected
    assert connection.query("SELECT 1")


def test_query_after_disconnect_is_invalid_state(connection):
    connection.connect()
    connection.disconnect()
    assert not connection.connected
    with pytest.raises(InvalidStateError):
        connection.query("SELECT 1")


def test_connect_twice_is_noop_with_same_handle(connection):
    first = connection.connect()
    assert connection.connect() == first
    assert connection.connected


def test_disconnect_is_unconditional(connection):
    connection.disconnect()
    assert not connection.connected


def test_dialect_specific_handles_and_results():
    mysql, pg, mock = _connections()
    assert mysql.connect() == "mysql_connection_resource"
    assert mysql.query("SELECT 1") == "mysql_result"
    assert pg.connect() == "postgresql_connection_resource"
    assert pg.query("SELECT 1") == "postgresql_result"
    assert mock.connect() == "mock_connection"
    assert mock.query("SELECT 1") == "mock_result"


def test_mock_records_queries():
    mock = MockConnection()
    mock.connect()
    mock.query("SELECT 1")
    mock.query("SELECT 2")
    assert mock.queries == ["SELECT 1", "SELECT 2"]


def test_settings_repr_hides_password():
    assert "s3cret" not in repr(SETTINGS)
    assert MySQLConnection(SETTINGS).settings.host == "db.local"


def test_unknown_driver():
    with pytest.raises(ValueError, match="Unknown database driver"):
        build_connection("oracle", SETTINGS)


@pytest.mark.parametrize("driver", ["mysql", "postgresql", "mock"])
def test_lifecycle_events_are_stable(driver):
    connection = build_connection(driver, SETTINGS)
    with capture_logs() as logs:
        connection.connect()
        connection.query("SELECT 1")
        connection.disconnect()
    assert [e["event"] for e in logs] == ["db_connecting", "db_query", "db_disconnecting"]
    assert all(e["dialect"] == driver for e in logs)
    assert logs[1]["sql"] == "SELECT 1"
