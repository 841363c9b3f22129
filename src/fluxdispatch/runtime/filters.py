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

"""Append-only middleware chains.

A chain of filters ``[f0, f1, ..., fn]`` composed around a terminal action
``t`` behaves like ``f0(payload, lambda p: f1(p, ... lambda p: fn(p, t)))``.
The earliest-added filter is therefore the outermost: it runs first and alone
decides, by calling its continuation or not, whether anything inside it runs.
The payload a filter passes to its continuation is the payload the next stage
receives.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import reduce

from ..protocols.dispatcher import Filter, Next


def compose(filters: tuple[Filter, ...], terminal: Next) -> Next:
    """Fold ``filters`` right to left around ``terminal``."""
    return reduce(_wrap, reversed(filters), terminal)


def _wrap(next_stage: Next, stage: Filter) -> Next:
    def run(payload: object) -> None:
        stage(payload, next_stage)

    return run


class FilterChain:
    """Ordered, append-only sequence of filters.

    Composition happens on demand, so a chain built by :meth:`compose` only
    reflects the filters present at that moment.
    """

    def __init__(self) -> None:
        super().__init__()
        self._filters: list[Filter] = []

    def append(self, stage: Filter) -> None:
        self._filters.append(stage)

    def compose(self, terminal: Callable[[object], None]) -> Next:
        return compose(tuple(self._filters), terminal)

    def clear(self) -> None:
        self._filters.clear()

    def __len__(self) -> int:
        return len(self._filters)


__all__ = ["FilterChain", "compose"]
