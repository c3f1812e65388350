from unittest.mock import Mock

import pytest

from closeables import (
    AutoCloseable,
    Closeable,
    WithCloseables,
    get_suppressed,
)


class Connection(AutoCloseable):
    def __init__(self, error=None):
        self.error = error
        self.closed = False

    def close(self):
        self.closed = True
        if self.error is not None:
            raise self.error


class Pool(WithCloseables):
    def __init__(self, *connections):
        self.connections = connections

    @property
    def closeables(self):
        return self.connections


def test_closeable_protocol():
    assert isinstance(Connection(), Closeable)
    assert isinstance(Mock(), Closeable)
    assert not isinstance(object(), Closeable)


def test_auto_closeable_closes_on_exit():
    with Connection() as connection:
        assert not connection.closed

    assert connection.closed


def test_auto_closeable_is_abstract():
    with pytest.raises(TypeError):
        AutoCloseable()


def test_with_closeables_closes_all():
    first, second = Connection(), Connection()

    with Pool(first, None, second):
        pass

    assert first.closed
    assert second.closed


def test_with_closeables_aggregates_errors():
    first_error, second_error = OSError("first"), RuntimeError("second")
    connections = Connection(first_error), Connection(), Connection(second_error)

    with pytest.raises(OSError) as exc:
        Pool(*connections).close()

    assert exc.value is first_error
    assert get_suppressed(exc.value) == (second_error,)
    assert all(connection.closed for connection in connections)


def test_nested_with_closeables():
    inner_error = OSError("inner")
    inner = Pool(Connection(inner_error), Connection())
    outer_connection = Connection()

    with pytest.raises(OSError) as exc:
        Pool(inner, outer_connection).close()

    assert exc.value is inner_error
    assert outer_connection.closed
