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

"""Dispatcher protocol definitions.

This module defines the callable shapes and the structural dispatcher contract
used throughout fluxdispatch. It has ZERO dependencies on other fluxdispatch
modules.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Protocol

type Token = str
"""Opaque handle returned by ``register``: prefix followed by a decimal id."""

type Handler = Callable[[object], None]
"""Callback receiving every dispatched payload."""

type Next = Callable[[object], None]
"""Continuation handed to a filter; invoking it runs the rest of the chain."""

type Filter = Callable[[object, Next], None]
"""Middleware over a payload and its continuation."""

type RegisterFilter = Filter
"""Filter wrapping handler invocation, applied once at registration time."""

type DispatchFilter = Filter
"""Filter wrapping dispatch invocation, applied on every ``dispatch`` call."""


class Reentry(Protocol):
    """Bound entry point that curates a payload and runs a fresh cycle.

    Dispatch filter factories receive one of these so a filter can replace the
    payload it was handed with a dispatch of its own choosing. Calls made
    through it bypass the dispatch filter chain.
    """

    def dispatch(self, payload: object) -> None:
        """Run a dispatch cycle for ``payload`` verbatim."""
        ...

    def dispatch_action(
        self, action_type: str, fields: Mapping[str, object] | None = None
    ) -> None:
        """Run a dispatch cycle for ``{**fields, "type": action_type}``."""
        ...


type DispatchFilterFactory = Callable[[Reentry], DispatchFilter]
"""Builds a dispatch filter from the dispatcher's reentry point."""


class Dispatcher(Protocol):
    """Synchronous broadcast dispatcher with intra-cycle dependency ordering."""

    def register(self, handler: Handler) -> Token:
        """Register ``handler`` for every payload and return its token."""
        ...

    def register_action(self, action_type: str, handler: Handler) -> Token:
        """Register ``handler`` for payloads whose type equals ``action_type``."""
        ...

    def unregister(self, token: Token) -> None:
        """Remove the handler bound to ``token``."""
        ...

    def wait_for(self, tokens: Iterable[Token]) -> None:
        """Run the handlers for ``tokens`` before the caller continues."""
        ...

    def dispatch(self, payload: object) -> None:
        """Broadcast ``payload`` to every registered handler."""
        ...

    def dispatch_action(
        self, action_type: str, fields: Mapping[str, object] | None = None
    ) -> None:
        """Broadcast ``{**fields, "type": action_type}``."""
        ...

    def add_dispatch_filter(self, factory: DispatchFilterFactory) -> None:
        """Append a dispatch filter built by ``factory``."""
        ...

    def add_register_filter(self, register_filter: RegisterFilter) -> None:
        """Append a filter applied to handlers registered from now on."""
        ...

    def is_dispatching(self) -> bool:
        """Return ``True`` while a dispatch cycle is active."""
        ...

    def reset(self) -> None:
        """Drop every handler, filter, and piece of cycle bookkeeping."""
        ...


__all__ = [
    "DispatchFilter",
    "DispatchFilterFactory",
    "Dispatcher",
    "Filter",
    "Handler",
    "Next",
    "Reentry",
    "RegisterFilter",
    "Token",
]
