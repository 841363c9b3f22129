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

from __future__ import annotations

import pytest

from fluxdispatch import Dispatcher
from tests.helpers import RecordingHandler


@pytest.fixture
def dispatcher() -> Dispatcher:
    """Return a fresh dispatcher with its own token issuer."""

    return Dispatcher()


@pytest.fixture
def order() -> list[str]:
    """Shared execution log for :class:`RecordingHandler` instances."""

    return []


@pytest.fixture
def handler_a(order: list[str]) -> RecordingHandler:
    return RecordingHandler("A", order)


@pytest.fixture
def handler_b(order: list[str]) -> RecordingHandler:
    return RecordingHandler("B", order)
