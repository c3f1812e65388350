from unittest.mock import Mock

import pytest

from closeables import interrupted


@pytest.fixture(autouse=True)
def clear_interrupted_flag():
    interrupted()
    yield
    interrupted()


@pytest.fixture
def none_raising():
    return Mock(name="none_raising")


@pytest.fixture
def checked_error():
    return OSError("checked")


@pytest.fixture
def unchecked_error():
    return RuntimeError("unchecked")


@pytest.fixture
def interrupted_error():
    return InterruptedError("interrupted")
