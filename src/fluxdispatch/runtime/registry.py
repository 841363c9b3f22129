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

"""Handler registry keyed by issued tokens."""

from __future__ import annotations

from ..errors import ErrorKind, UnregisteredTokenError
from ..protocols.dispatcher import Handler, Token
from .tokens import TokenIssuer


class HandlerRegistry:
    """Ordered mapping from tokens to handlers.

    :meth:`tokens` follows registration order. The registry is owned by a single
    dispatcher and is only mutated through it.
    """

    def __init__(self, issuer: TokenIssuer) -> None:
        super().__init__()
        self._issuer = issuer
        self._handlers: dict[Token, Handler] = {}

    def add(self, handler: Handler) -> Token:
        """Store ``handler`` under a freshly issued token."""
        token = self._issuer.issue()
        self._handlers[token] = handler
        return token

    def remove(self, token: Token) -> None:
        """Drop ``token`` or raise :class:`UnregisteredTokenError`."""
        try:
            del self._handlers[token]
        except KeyError:
            raise UnregisteredTokenError(
                token,
                f"Dispatcher.unregister(...): `{token}` does not map to a "
                "registered callback.",
                kind=ErrorKind.UNREGISTERED_TOKEN,
            ) from None

    def __getitem__(self, token: Token) -> Handler:
        return self._handlers[token]

    def tokens(self) -> tuple[Token, ...]:
        """Snapshot of the registered tokens in registration order."""
        return tuple(self._handlers)

    def clear(self) -> None:
        self._handlers.clear()

    def __contains__(self, token: object) -> bool:
        return token in self._handlers

    def __len__(self) -> int:
        return len(self._handlers)


__all__ = ["HandlerRegistry"]
