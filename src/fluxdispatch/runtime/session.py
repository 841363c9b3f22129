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

"""Per-cycle dispatch bookkeeping."""

from __future__ import annotations

from collections.abc import Iterable

from ..protocols.dispatcher import Token


class DispatchSession:
    """Transient state for one dispatch cycle.

    ``pending`` marks handlers that have been entered, ``handled`` marks those
    that returned normally. Both are reinitialized by :meth:`start`; after a
    cycle aborted by an error they may be stale until the next start and are
    not meaningful outside an active cycle. :meth:`stop` always clears the
    payload and the dispatching flag.
    """

    __slots__ = ("dispatching", "handled", "payload", "pending")

    def __init__(self) -> None:
        super().__init__()
        self.pending: dict[Token, bool] = {}
        self.handled: dict[Token, bool] = {}
        self.payload: object = None
        self.dispatching = False

    def start(self, payload: object, tokens: Iterable[Token]) -> None:
        tokens = tuple(tokens)
        self.pending = dict.fromkeys(tokens, False)
        self.handled = dict.fromkeys(tokens, False)
        self.payload = payload
        self.dispatching = True

    def stop(self) -> None:
        self.payload = None
        self.dispatching = False

    def is_pending(self, token: Token) -> bool:
        return self.pending.get(token, False)

    def is_handled(self, token: Token) -> bool:
        return self.handled.get(token, False)

    def mark_pending(self, token: Token) -> None:
        self.pending[token] = True

    def mark_handled(self, token: Token) -> None:
        self.handled[token] = True

    def clear(self) -> None:
        """Forget all bookkeeping, including stale entries."""
        self.pending.clear()
        self.handled.clear()
        self.stop()


__all__ = ["DispatchSession"]
