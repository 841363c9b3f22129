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

"""Configuration for :class:`~fluxdispatch.runtime.dispatcher.Dispatcher`."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_TOKEN_PREFIX = "ID_"
DEFAULT_TYPE_KEY = "type"


@dataclass(slots=True, frozen=True)
class DispatcherConfig:
    """Dispatcher defaults.

    ``token_prefix`` is prepended to every issued token when the dispatcher
    creates its own :class:`~fluxdispatch.runtime.tokens.TokenIssuer`.
    ``type_key`` names the payload field carrying the action type, both when
    ``dispatch_action`` builds a payload and when an action handler matches one.
    """

    token_prefix: str = DEFAULT_TOKEN_PREFIX
    type_key: str = DEFAULT_TYPE_KEY

    def __post_init__(self) -> None:
        """Validate configuration."""
        if not self.token_prefix:
            raise ValueError("DispatcherConfig.token_prefix must be non-empty")
        if not self.type_key:
            raise ValueError("DispatcherConfig.type_key must be non-empty")


__all__ = ["DEFAULT_TOKEN_PREFIX", "DEFAULT_TYPE_KEY", "DispatcherConfig"]
