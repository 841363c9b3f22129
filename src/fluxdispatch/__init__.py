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

"""Synchronous broadcast dispatcher with intra-dispatch dependency ordering.

Register handlers, then dispatch payloads that every handler receives in
registration order. A handler may call :meth:`Dispatcher.wait_for` to have
other handlers complete first within the same dispatch; circular waits fail
with :class:`CircularDependencyError`. Two filter chains wrap registration
and dispatch respectively.
"""

from __future__ import annotations

from .errors import (
    AlreadyDispatchingError,
    CircularDependencyError,
    DispatcherError,
    ErrorKind,
    FluxError,
    NotDispatchingError,
    UnregisteredTokenError,
)
from .protocols import (
    DispatchFilter,
    DispatchFilterFactory,
    Handler,
    Next,
    Reentry,
    RegisterFilter,
    Token,
)
from .runtime import (
    Dispatcher,
    DispatcherConfig,
    TokenIssuer,
    configure_logging,
)

__all__ = [
    "AlreadyDispatchingError",
    "CircularDependencyError",
    "DispatchFilter",
    "DispatchFilterFactory",
    "Dispatcher",
    "DispatcherConfig",
    "DispatcherError",
    "ErrorKind",
    "FluxError",
    "Handler",
    "Next",
    "NotDispatchingError",
    "Reentry",
    "RegisterFilter",
    "Token",
    "TokenIssuer",
    "UnregisteredTokenError",
    "configure_logging",
]
