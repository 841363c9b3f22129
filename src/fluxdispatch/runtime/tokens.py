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

"""Token issuance for registered handlers.

Tokens are ``prefix + decimal id`` strings drawn from a monotonically
increasing counter starting at ``1``. A token is never handed out twice by the
same issuer, even after the handler it named is unregistered or the
dispatcher is reset.

Each dispatcher owns a private issuer by default, so tokens are unique per
instance only. Share one issuer between dispatchers when uniqueness has to
hold across them::

    issuer = TokenIssuer()
    first = Dispatcher(issuer=issuer)
    second = Dispatcher(issuer=issuer)
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field

from ..protocols.dispatcher import Token
from .config import DEFAULT_TOKEN_PREFIX


@dataclass(slots=True)
class TokenIssuer:
    """Thread-safe source of unique, strictly increasing tokens."""

    prefix: str = DEFAULT_TOKEN_PREFIX
    _last_id: int = field(default=0, init=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False)

    def issue(self) -> Token:
        """Return the next token."""
        with self._lock:
            self._last_id += 1
            return f"{self.prefix}{self._last_id}"

    @property
    def issued(self) -> int:
        """Number of tokens handed out so far."""
        return self._last_id


__all__ = ["TokenIssuer"]
