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

"""Test utilities for recording dispatched payloads."""

from __future__ import annotations

from collections.abc import Callable


class RecordingHandler:
    """Handler that records every payload it receives.

    ``log`` is an optional shared list receiving ``name`` on every call so
    tests can assert cross-handler execution order.
    """

    def __init__(self, name: str, log: list[str] | None = None) -> None:
        super().__init__()
        self.__name__ = name
        self.__qualname__ = name
        self.name = name
        self.calls: list[object] = []
        self._log = log

    def __call__(self, payload: object) -> None:
        self.calls.append(payload)
        if self._log is not None:
            self._log.append(self.name)

    def reset(self) -> None:
        self.calls.clear()


def raising(error: BaseException) -> Callable[[object], None]:
    """Return a handler that raises ``error`` on every payload."""

    def handler(payload: object) -> None:
        del payload
        raise error

    return handler


__all__ = ["RecordingHandler", "raising"]
