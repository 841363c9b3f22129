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

"""Tests for token issuance and dispatcher configuration."""

from __future__ import annotations

import threading

import pytest

from fluxdispatch import Dispatcher, DispatcherConfig, TokenIssuer
from tests.helpers import RecordingHandler


def test_issuer_starts_at_one_and_increments() -> None:
    issuer = TokenIssuer()

    assert [issuer.issue() for _ in range(3)] == ["ID_1", "ID_2", "ID_3"]
    assert issuer.issued == 3


def test_issuer_uses_prefix() -> None:
    issuer = TokenIssuer(prefix="handler-")

    assert issuer.issue() == "handler-1"


def test_dispatchers_issue_tokens_independently_by_default() -> None:
    first = Dispatcher()
    second = Dispatcher()

    assert first.register(RecordingHandler("a")) == "ID_1"
    assert second.register(RecordingHandler("b")) == "ID_1"


def test_shared_issuer_keeps_tokens_unique_across_dispatchers() -> None:
    issuer = TokenIssuer()
    first = Dispatcher(issuer=issuer)
    second = Dispatcher(issuer=issuer)

    tokens = [
        first.register(RecordingHandler("a")),
        second.register(RecordingHandler("b")),
        first.register(RecordingHandler("c")),
    ]

    assert tokens == ["ID_1", "ID_2", "ID_3"]
    assert "ID_2" not in first
    assert "ID_2" in second


def test_config_prefix_applies_to_owned_issuer() -> None:
    dispatcher = Dispatcher(DispatcherConfig(token_prefix="tok:"))

    assert dispatcher.register(RecordingHandler("a")) == "tok:1"


def test_shared_issuer_is_thread_safe() -> None:
    issuer = TokenIssuer()
    issued: list[str] = []
    lock = threading.Lock()

    def worker() -> None:
        local = [issuer.issue() for _ in range(200)]
        with lock:
            issued.extend(local)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(issued) == 1600
    assert len(set(issued)) == 1600
    assert issuer.issued == 1600


@pytest.mark.parametrize(
    ("kwargs", "message"),
    [
        ({"token_prefix": ""}, "token_prefix"),
        ({"type_key": ""}, "type_key"),
    ],
)
def test_config_rejects_empty_values(kwargs: dict[str, str], message: str) -> None:
    with pytest.raises(ValueError, match=message):
        DispatcherConfig(**kwargs)
