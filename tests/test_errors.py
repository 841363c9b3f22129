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

"""Tests for the dispatcher error taxonomy."""

from __future__ import annotations

import pytest

from fluxdispatch import (
    AlreadyDispatchingError,
    CircularDependencyError,
    DispatcherError,
    ErrorKind,
    FluxError,
    NotDispatchingError,
    UnregisteredTokenError,
)


@pytest.mark.parametrize(
    ("error", "kind"),
    [
        (UnregisteredTokenError("ID_1", "missing"), ErrorKind.UNREGISTERED_TOKEN),
        (NotDispatchingError("idle"), ErrorKind.NOT_DISPATCHING),
        (CircularDependencyError("ID_1", "loop"), ErrorKind.CIRCULAR_DEPENDENCY),
        (AlreadyDispatchingError("busy"), ErrorKind.ALREADY_DISPATCHING),
    ],
)
def test_errors_carry_default_kind(error: DispatcherError, kind: ErrorKind) -> None:
    assert error.kind is kind
    assert isinstance(error, FluxError)
    assert isinstance(error, RuntimeError)


def test_error_message_is_prefixed() -> None:
    error = NotDispatchingError("Dispatcher.wait_for(...): idle")

    assert error.message == "Dispatcher.wait_for(...): idle"
    assert str(error) == "Invariant Violation: Dispatcher.wait_for(...): idle"
    assert repr(error) == (
        "NotDispatchingError(kind='dispatcher-waitfor-invoked-outside-dispatch', "
        "message='Dispatcher.wait_for(...): idle')"
    )


def test_unregistered_token_kind_can_be_overridden() -> None:
    error = UnregisteredTokenError(
        "ID_3", "not mapped", kind=ErrorKind.INVALID_WAIT_TOKEN
    )

    assert error.kind is ErrorKind.INVALID_WAIT_TOKEN
    assert error.token == "ID_3"


def test_error_kinds_are_stable_codes() -> None:
    assert ErrorKind.CIRCULAR_DEPENDENCY == "dispatcher-waitfor-circular-dependency"
    assert ErrorKind.ALREADY_DISPATCHING == (
        "dispatcher-cant-dispatch-while-dispatching"
    )
