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

"""Synchronous broadcast dispatcher with ``wait_for`` ordering.

Handlers run in registration order. A running handler may call
:meth:`Dispatcher.wait_for` to force other handlers to complete first within
the same cycle; each handler runs at most once per cycle and circular waits
raise :class:`~fluxdispatch.errors.CircularDependencyError`.

Example::

    dispatcher = Dispatcher()

    saved: list[object] = []
    store = dispatcher.register(saved.append)

    def audit(payload: object) -> None:
        dispatcher.wait_for([store])
        assert saved[-1] is payload

    dispatcher.register(audit)
    dispatcher.dispatch_action("saved", {"id": 7})
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from ..errors import AlreadyDispatchingError
from ..protocols.dispatcher import (
    DispatchFilterFactory,
    Handler,
    RegisterFilter,
    Token,
)
from .config import DispatcherConfig
from .curation import action_handler, action_payload
from .filters import FilterChain
from .logging import StructuredLogger, describe_callable, get_logger
from .registry import HandlerRegistry
from .resolver import DependencyResolver
from .session import DispatchSession
from .tokens import TokenIssuer

logger: StructuredLogger = get_logger(__name__, context={"component": "dispatcher"})


@dataclass(slots=True, frozen=True)
class _Reentry:
    """Reentry point handed to dispatch filter factories."""

    owner: Dispatcher

    def dispatch(self, payload: object) -> None:
        self.owner._dispatch(payload)

    def dispatch_action(
        self, action_type: str, fields: Mapping[str, object] | None = None
    ) -> None:
        self.owner._dispatch(
            action_payload(action_type, fields, type_key=self.owner.config.type_key)
        )


class Dispatcher:
    """Broadcasts payloads to registered handlers.

    Tokens are unique per instance unless an ``issuer`` is shared between
    dispatchers. Instances are not thread-safe and reject re-entrant dispatch.
    """

    def __init__(
        self,
        config: DispatcherConfig | None = None,
        *,
        issuer: TokenIssuer | None = None,
    ) -> None:
        super().__init__()
        self.config = config if config is not None else DispatcherConfig()
        self._issuer = (
            issuer if issuer is not None else TokenIssuer(self.config.token_prefix)
        )
        self._registry = HandlerRegistry(self._issuer)
        self._session = DispatchSession()
        self._resolver = DependencyResolver(self._registry, self._session)
        self._register_filters = FilterChain()
        self._dispatch_filters = FilterChain()

    def register(self, handler: Handler) -> Token:
        """Register ``handler`` for every payload and return its token.

        Register filters added so far wrap ``handler`` before it is stored.
        """
        token = self._registry.add(self._register_filters.compose(handler))
        logger.debug(
            "Handler registered.",
            event="handler_registered",
            context={"token": token, "handler": describe_callable(handler)},
        )
        return token

    def register_action(self, action_type: str, handler: Handler) -> Token:
        """Register ``handler`` for payloads whose type equals ``action_type``."""
        return self.register(
            action_handler(action_type, handler, type_key=self.config.type_key)
        )

    def unregister(self, token: Token) -> None:
        """Remove the handler bound to ``token``.

        Raises :class:`~fluxdispatch.errors.UnregisteredTokenError` when
        ``token`` is not registered.
        """
        self._registry.remove(token)
        logger.debug(
            "Handler unregistered.",
            event="handler_unregistered",
            context={"token": token},
        )

    def wait_for(self, tokens: Iterable[Token]) -> None:
        """Run the handlers for ``tokens`` before the calling handler continues."""
        self._resolver.wait_for(tokens)

    def dispatch(self, payload: object) -> None:
        """Broadcast ``payload`` through the dispatch filter chain."""
        self._dispatch_filters.compose(self._dispatch)(payload)

    def dispatch_action(
        self, action_type: str, fields: Mapping[str, object] | None = None
    ) -> None:
        """Broadcast a new payload built from ``fields`` and ``action_type``.

        ``fields`` is copied; the caller's mapping is never modified.
        """
        self.dispatch(action_payload(action_type, fields, type_key=self.config.type_key))

    def add_dispatch_filter(self, factory: DispatchFilterFactory) -> None:
        """Append the filter returned by ``factory``.

        ``factory`` is called immediately with a reentry point whose
        ``dispatch`` and ``dispatch_action`` start a cycle directly, skipping
        the dispatch filter chain.
        """
        self._dispatch_filters.append(factory(_Reentry(self)))
        logger.debug(
            "Dispatch filter added.",
            event="dispatch_filter_added",
            context={
                "factory": describe_callable(factory),
                "position": len(self._dispatch_filters) - 1,
            },
        )

    def add_register_filter(self, register_filter: RegisterFilter) -> None:
        """Append a filter wrapping handlers registered from now on."""
        self._register_filters.append(register_filter)
        logger.debug(
            "Register filter added.",
            event="register_filter_added",
            context={
                "filter": describe_callable(register_filter),
                "position": len(self._register_filters) - 1,
            },
        )

    def is_dispatching(self) -> bool:
        return self._session.dispatching

    def tokens(self) -> tuple[Token, ...]:
        """Registered tokens in registration order."""
        return self._registry.tokens()

    def reset(self) -> None:
        """Drop every handler, filter, and piece of cycle bookkeeping.

        Intended for tests. The token counter keeps counting so tokens issued
        before the reset never match handlers registered after it.
        """
        self._registry.clear()
        self._session.clear()
        self._register_filters.clear()
        self._dispatch_filters.clear()
        logger.debug("Dispatcher reset.", event="dispatcher_reset")

    def __contains__(self, token: object) -> bool:
        return token in self._registry

    def __len__(self) -> int:
        return len(self._registry)

    def _dispatch(self, payload: object) -> None:
        if self._session.dispatching:
            raise AlreadyDispatchingError(
                "Dispatcher.dispatch(...): Cannot dispatch in the middle of a dispatch."
            )
        tokens = self._registry.tokens()
        self._session.start(payload, tokens)
        log = logger.bind(handlers=len(tokens))
        log.debug("Dispatch started.", event="dispatch_started")
        try:
            for token in tokens:
                if self._session.is_pending(token) or token not in self._registry:
                    continue
                self._resolver.invoke(token)
        except BaseException:
            log.debug("Dispatch aborted.", event="dispatch_aborted", exc_info=True)
            raise
        finally:
            self._session.stop()
        log.debug("Dispatch completed.", event="dispatch_completed")


__all__ = ["Dispatcher"]
