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

"""Normalization of action-type call shapes.

``dispatch_action`` and ``register_action`` are thin layers over the bare
payload and bare handler entry points; the helpers here build the canonical
payload and the type-gated handler they forward.
"""

from __future__ import annotations

from collections.abc import Mapping
from functools import wraps

from ..protocols.dispatcher import Handler
from .config import DEFAULT_TYPE_KEY

_MISSING = object()


def action_payload(
    action_type: str,
    fields: Mapping[str, object] | None = None,
    *,
    type_key: str = DEFAULT_TYPE_KEY,
) -> dict[str, object]:
    """Return a new payload holding ``fields`` with ``type_key`` set.

    ``fields`` is copied, never mutated. An existing ``type_key`` entry is
    overridden by ``action_type``.
    """

    payload: dict[str, object] = dict(fields) if fields is not None else {}
    payload[type_key] = action_type
    return payload


def payload_type(payload: object, *, type_key: str = DEFAULT_TYPE_KEY) -> object:
    """Return the action type carried by ``payload``.

    Mappings are read by key and other objects by attribute. A payload without
    a type yields a private sentinel that compares unequal to every string.
    """

    if isinstance(payload, Mapping):
        return payload.get(type_key, _MISSING)
    return getattr(payload, type_key, _MISSING)


def action_handler(
    action_type: str, handler: Handler, *, type_key: str = DEFAULT_TYPE_KEY
) -> Handler:
    """Wrap ``handler`` so it only sees payloads of ``action_type``."""

    @wraps(handler)
    def gated(payload: object) -> None:
        if payload_type(payload, type_key=type_key) == action_type:
            handler(payload)

    return gated


__all__ = ["action_handler", "action_payload", "payload_type"]
