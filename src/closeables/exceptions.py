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
    "CloseablesError",
    "UncheckedCloseError",
)

from typing import Any


class CloseablesError(Exception):
    message = "An error occurred while closing resources."

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        message = kwargs.pop("message", self.message)
        super().__init__(message.format(*args, **kwargs))


class UncheckedCloseError(CloseablesError, RuntimeError):
    """
    Raised by `close_all_unchecked()` when the first error raised during closing is not a `RuntimeError`.

    The original error is available as `__cause__`, together with all errors suppressed on it.
    """

    message = "Error on close"
