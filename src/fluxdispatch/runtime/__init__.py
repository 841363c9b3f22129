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

"""Runtime primitives for :mod:`fluxdispatch`."""

from __future__ import annotations

from .config import DispatcherConfig
from .curation import action_handler, action_payload, payload_type
from .dispatcher import Dispatcher
from .filters import FilterChain, compose
from .logging import StructuredLogger, configure_logging, get_logger
from .registry import HandlerRegistry
from .resolver import DependencyResolver
from .session import DispatchSession
from .tokens import TokenIssuer

__all__ = [
    "DependencyResolver",
    "DispatchSession",
    "Dispatcher",
    "DispatcherConfig",
    "FilterChain",
    "HandlerRegistry",
    "StructuredLogger",
    "TokenIssuer",
    "action_handler",
    "action_payload",
    "compose",
    "configure_logging",
    "get_logger",
    "payload_type",
]
