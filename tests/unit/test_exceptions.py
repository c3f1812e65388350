import pickle

import pytest

from closeables.exceptions import (
    CloseablesError,
    UncheckedCloseError,
)

# These instances will be pickled and unpickled during test_all_exceptions_are_pickable().
#
# If there is an exception that inherits from CloseablesError and is not in this list,
# test_all_exceptions_are_tested() will fail
EXCEPTIONS = (
    CloseablesError(),
    UncheckedCloseError(),
)


@pytest.mark.parametrize("instance", EXCEPTIONS, ids=lambda e: type(e).__name__)
def test_all_exceptions_are_pickable(instance):
    try:
        pickled_exception = pickle.dumps(instance)
        unpickled_exception = pickle.loads(pickled_exception)
        assert isinstance(unpickled_exception, type(instance))
        assert str(unpickled_exception) == str(instance)
    except Exception as e:
        pytest.fail(f"Exception {type(instance)} is not pickable: {e}")


def _all_subclasses(cls):
    """Recursively find all subclasses of a given class."""
    subclasses = set(cls.__subclasses__())

    for subclass in cls.__subclasses__():
        subclasses.update(_all_subclasses(subclass))

    return subclasses


def test_all_exceptions_are_tested():
    all_types = _all_subclasses(CloseablesError)
    tested_types = set(type(e) for e in EXCEPTIONS)
    missing_types = all_types - tested_types

    if missing_types:
        pytest.fail("The following exceptions are not tested: " + ", ".join(t.__name__ for t in missing_types))


def test_unchecked_close_error_is_runtime_error():
    error = UncheckedCloseError()

    assert isinstance(error, RuntimeError)
    assert str(error) == "Error on close"


def test_custom_message():
    assert str(CloseablesError("db", message="Closing {} failed")) == "Closing db failed"
