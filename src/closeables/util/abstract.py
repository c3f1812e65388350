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

__all__ = ("Closeable", "AutoCloseable", "WithCloseables")

from abc import (
    ABC,
    abstractmethod,
)
from collections.abc import Iterable
from types import TracebackType
from typing import (
    Optional,
    Protocol,
    runtime_checkable,
)

from closeables.closer import close_all


@runtime_checkable
class Closeable(Protocol):
    def close(self) -> None: ...


class AutoCloseable(ABC):
    def __enter__(self) -> AutoCloseable:
        return self

    @abstractmethod
    def close(self) -> None: ...

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc_value: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        self.close()


class WithCloseables(AutoCloseable):
    """
    A closeable that owns other closeables.

    Closing it attempts to close every owned closeable, even if some of them fail.
    The first failure is raised with the following ones attached as suppressed errors.
    """

    @property
    @abstractmethod
    def closeables(self) -> Iterable[Optional[Closeable]]: ...

    def close(self) -> None:
        close_all(self.closeables)
