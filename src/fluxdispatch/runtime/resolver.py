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

"""Demand-driven handler invocation with circular dependency detection."""

from __future__ import annotations

from collections.abc import Iterable

from ..errors import (
    CircularDependencyError,
    ErrorKind,
    NotDispatchingError,
    UnregisteredTokenError,
)
from ..protocols.dispatcher import Token
from .registry import HandlerRegistry
from .session import DispatchSession


class DependencyResolver:
    """Invokes handlers for the active cycle, pulling dependencies forward.

    Resolution is plain recursion: a handler calling :meth:`wait_for` descends
    into the handlers it names before its own call returns. A token that is
    pending but not handled is on the current call stack, so waiting on it again
    is a cycle. Dependency chains are bounded by the interpreter's recursion
    limit.
    """

    def __init__(self, registry: HandlerRegistry, session: DispatchSession) -> None:
        super().__init__()
        self._registry = registry
        self._session = session

    def invoke(self, token: Token) -> None:
        """Run the handler for ``token`` with the current payload.

        Callers check that ``token`` is registered. ``token`` stays pending but
        unhandled when the handler raises.
        """
        handler = self._registry[token]
        self._session.mark_pending(token)
        handler(self._session.payload)
        self._session.mark_handled(token)

    def wait_for(self, tokens: Iterable[Token]) -> None:
        """Ensure every handler in ``tokens`` has completed this cycle."""
        if not self._session.dispatching:
            raise NotDispatchingError(
                "Dispatcher.wait_for(...): Must be invoked while dispatching."
            )
        for token in tokens:
            if token not in self._registry:
                raise _invalid_token(token)
            if self._session.is_pending(token):
                if not self._session.is_handled(token):
                    raise CircularDependencyError(
                        token,
                        "Dispatcher.wait_for(...): Circular dependency detected "
                        f"while waiting for `{token}`.",
                    )
                continue
            self.invoke(token)


def _invalid_token(token: Token) -> UnregisteredTokenError:
    return UnregisteredTokenError(
        token,
        f"Dispatcher.wait_for(...): `{token}` does not map to a registered callback.",
        kind=ErrorKind.INVALID_WAIT_TOKEN,
    )


__all__ = ["DependencyResolver"]
