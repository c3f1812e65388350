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

"""
Thread-local interruption flag.

Python threads cannot be interrupted from the outside, so code that needs to signal cancellation
to whoever runs next on the same thread sets this flag instead. Long-running loops are expected
to check it cooperatively with `is_interrupted()` or `interrupted()`.
"""

__all__ = (
    "INTERRUPTION_ERRORS",
    "interrupt",
    "interrupted",
    "is_interrupted",
    "is_interruption",
)

import threading

INTERRUPTION_ERRORS: tuple[type[BaseException], ...] = (InterruptedError,)

_state = threading.local()


def interrupt() -> None:
    """Mark the calling thread as interrupted."""
    _state.interrupted = True


def is_interrupted() -> bool:
    """Return the interruption flag of the calling thread, leaving it unchanged."""
    return getattr(_state, "interrupted", False)


def interrupted() -> bool:
    """Return the interruption flag of the calling thread and clear it."""
    value = is_interrupted()
    _state.interrupted = False
    return value


def is_interruption(error: BaseException) -> bool:
    return isinstance(error, INTERRUPTION_ERRORS)
