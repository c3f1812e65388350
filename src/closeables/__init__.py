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

"""Close groups of resources, making sure every one of them gets closed and no error is lost."""

__all__ = [
    "AutoCloseable",
    "Closeable",
    "UncheckedCloseError",
    "WithCloseables",
    "add_suppressed",
    "close",
    "close_all",
    "close_all_unchecked",
    "close_unchecked",
    "get_suppressed",
    "interrupt",
    "interrupted",
    "is_interrupted",
]

from closeables.closer import (
    close,
    close_all,
    close_all_unchecked,
    close_unchecked,
)
from closeables.exceptions import UncheckedCloseError
from closeables.interruption import (
    interrupt,
    interrupted,
    is_interrupted,
)
from closeables.suppression import (
    add_suppressed,
    get_suppressed,
)
from closeables.util.abstract import (
    AutoCloseable,
    Closeable,
    WithCloseables,
)
