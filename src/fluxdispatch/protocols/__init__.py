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

"""Protocol definitions for fluxdispatch.

This package provides zero-dependency protocol definitions that can be
imported by any module without risk of circular imports.

Dependency rule: This package may only import from the standard library.
"""

from __future__ import annotations

from .dispatcher import (
    DispatchFilter,
    DispatchFilterFactory,
    Dispatcher,
    Filter,
    Handler,
    Next,
    Reentry,
    RegisterFilter,
    Token,
)

__all__ = [
    "DispatchFilter",
    "DispatchFilterFactory",
    "Dispatcher",
    "Filter",
    "Handler",
    "Next",
    "Reentry",
    "RegisterFilter",
    "Token",
]
