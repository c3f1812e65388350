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

__all__ = ("add_suppressed", "get_suppressed")

from closeables.util.envs import (
    SUPPRESSED_NOTES,
    get_bool,
)

_ATTRIBUTE = "__suppressed__"


def add_suppressed(error: BaseException, suppressed: BaseException) -> None:
    """
    Attach `suppressed` to `error` as a secondary error, after any already attached.

    If enabled with CLOSEABLES_SUPPRESSED_NOTES, a note is also added to `error`, so the
    suppressed error shows up when the traceback of `error` is printed.
    """

    if suppressed is error:
        raise ValueError("An error cannot suppress itself")

    errors = error.__dict__.setdefault(_ATTRIBUTE, [])
    errors.append(suppressed)

    if get_bool(SUPPRESSED_NOTES, True):
        error.add_note(f"Suppressed: {type(suppressed).__name__}: {suppressed}")


def get_suppressed(error: BaseException) -> tuple[BaseException, ...]:
    return tuple(error.__dict__.get(_ATTRIBUTE, ()))
