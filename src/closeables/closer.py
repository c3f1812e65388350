#
# Copyright (c) 2025, The closeables authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from __future__ import annotations

__all__ = (
    "close",
    "close_all",
    "close_all_unchecked",
    "close_unchecked",
)

from collections.abc import Iterable
from typing import (
    TYPE_CHECKING,
    Optional,
)

from closeables.exceptions import UncheckedCloseError
from closeables.interruption import (
    interrupt,
    is_interruption,
)
from closeables.suppression import add_suppressed
from closeables.util.logger import get_logger

if TYPE_CHECKING:
    from closeables.util.abstract import Closeable

logger = get_logger()

# Errors of these types are raised as they are by the unchecked variants.
UNCHECKED_ERRORS: tuple[type[Exception], ...] = (RuntimeError,)


def close_all(closeables: Iterable[Optional[Closeable]]) -> None:
    """
    Closes all the given closeables, raising the first error encountered.

    Every closeable is closed, even if closing a previous one failed. If more than one
    close() call raised, the errors after the first are attached to it as suppressed errors,
    in the order they were raised. See `closeables.get_suppressed()`.

    An error raised while iterating `closeables` stops the iteration and is handled like a
    close() error: it is raised if nothing failed before, otherwise it is suppressed.

    If any of the errors is an InterruptedError, the calling thread is marked as interrupted.
    See `closeables.is_interrupted()`.

    Suppressed errors are attached to the raised exception instance itself. A closeable that
    raises the same cached instance on every call will accumulate suppressed errors and notes
    across calls.

    Args:
        closeables: The objects to close. `None` elements are ignored.
    """

    error: Optional[Exception] = None

    try:
        for closeable in closeables:
            if closeable is None:
                continue

            try:
                closeable.close()
            except Exception as e:
                error = _record(error, e, source=repr(closeable))
    except Exception as e:
        error = _record(error, e, source="the closeables iterable")

    if error is not None:
        raise error


def _record(error: Optional[Exception], e: Exception, source: str) -> Exception:
    """Returns the primary error after taking `e` into account."""

    if is_interruption(e):
        logger.debug(f"Closing {source} was interrupted, marking thread as interrupted")
        interrupt()

    if error is None:
        logger.debug(f"Error while closing {source}: {e!r}")
        return e

    if e is error:
        logger.debug(f"Closing {source} raised the already recorded error {e!r}")
    else:
        logger.debug(f"Error while closing {source}, suppressed: {e!r}")
        add_suppressed(error, e)

    return error


def close(*closeables: Optional[Closeable]) -> None:
    """Same as `close_all()`, with the closeables passed as positional arguments."""
    close_all(closeables)


def close_all_unchecked(closeables: Iterable[Optional[Closeable]]) -> None:
    """
    Closes all the given closeables, raising only RuntimeErrors.

    Behaves like `close_all()`, except for what is raised: a first error that is a RuntimeError
    is raised as it is, any other one is wrapped in UncheckedCloseError. The original error,
    together with its suppressed errors, is the `__cause__` of the wrapper.

    Raises:
        UncheckedCloseError: if closing failed with an error that is not a RuntimeError.
    """

    try:
        close_all(closeables)
    except UNCHECKED_ERRORS:
        raise
    except Exception as e:
        raise UncheckedCloseError() from e


def close_unchecked(*closeables: Optional[Closeable]) -> None:
    """Same as `close_all_unchecked()`, with the closeables passed as positional arguments."""
    close_all_unchecked(closeables)
