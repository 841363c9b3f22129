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

"""Base exception hierarchy for :mod:`fluxdispatch`.

Exception hierarchy::

    FluxError
    └── DispatcherError (invariant violations, carries ``kind``)
        ├── UnregisteredTokenError
        ├── NotDispatchingError
        ├── CircularDependencyError
        └── AlreadyDispatchingError

Errors raised by handler bodies are never wrapped; they propagate to the
``dispatch`` caller unchanged.
"""

from __future__ import annotations

from enum import StrEnum
from typing import ClassVar, override


class ErrorKind(StrEnum):
    """Stable symbolic codes identifying dispatcher invariant violations."""

    UNREGISTERED_TOKEN = "dispatcher-unregister-not-map"
    INVALID_WAIT_TOKEN = "dispatcher-waitfor-invalid-token"
    NOT_DISPATCHING = "dispatcher-waitfor-invoked-outside-dispatch"
    CIRCULAR_DEPENDENCY = "dispatcher-waitfor-circular-dependency"
    ALREADY_DISPATCHING = "dispatcher-cant-dispatch-while-dispatching"


class FluxError(Exception):
    """Base class for all fluxdispatch exceptions.

    Catch this to handle any library-specific error with a single handler
    while letting errors raised by handler bodies propagate normally.

    Example::

        try:
            dispatcher.dispatch({"type": "saved"})
        except FluxError as e:
            logger.error("Dispatcher error: %s", e)
    """


class DispatcherError(FluxError, RuntimeError):
    """Raised when a dispatcher invariant is violated.

    Every instance carries a symbolic :attr:`kind` and a human-readable
    :attr:`message`. Subclasses pin the default kind; callers that prefer
    matching on codes can compare ``error.kind`` against :class:`ErrorKind`.
    """

    default_kind: ClassVar[ErrorKind]

    def __init__(self, message: str, *, kind: ErrorKind | None = None) -> None:
        self.kind: ErrorKind = kind if kind is not None else self.default_kind
        self.message = message
        super().__init__(f"Invariant Violation: {message}")

    @override
    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.value!r}, message={self.message!r})"


class UnregisteredTokenError(DispatcherError):
    """Raised when ``unregister`` or ``wait_for`` names an unmapped token."""

    default_kind = ErrorKind.UNREGISTERED_TOKEN

    def __init__(
        self, token: object, message: str, *, kind: ErrorKind | None = None
    ) -> None:
        self.token = token
        super().__init__(message, kind=kind)


class NotDispatchingError(DispatcherError):
    """Raised when ``wait_for`` is called outside an active dispatch cycle."""

    default_kind = ErrorKind.NOT_DISPATCHING


class CircularDependencyError(DispatcherError):
    """Raised when ``wait_for`` names a handler that is still on the call stack.

    The token in :attr:`token` is pending but not yet handled, so waiting on it
    would require the handler to complete before it starts.
    """

    default_kind = ErrorKind.CIRCULAR_DEPENDENCY

    def __init__(self, token: str, message: str) -> None:
        self.token = token
        super().__init__(message)


class AlreadyDispatchingError(DispatcherError):
    """Raised when ``dispatch`` is invoked while a cycle is already active."""

    default_kind = ErrorKind.ALREADY_DISPATCHING


__all__ = [
    "AlreadyDispatchingError",
    "CircularDependencyError",
    "DispatcherError",
    "ErrorKind",
    "FluxError",
    "NotDispatchingError",
    "UnregisteredTokenError",
]
