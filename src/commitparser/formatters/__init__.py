# Copyright 2026 Google LLC
#
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
#
# SPDX-License-Identifier: Apache-2.0


"""Output formatters for parsed commit messages.

Each formatter is a pure function: ``outcome -> str``. No side effects,
no I/O.

Available formats:

- **tree**: Box-drawing tree with ranges and leaf values
- **json**: The full tree plus parse errors as JSON
- **outcome**: Header, body and footer strings as JSON

Usage::

    from commitparser.formatters import format_outcome

    print(format_outcome(parse_commit(text), fmt='json'))
"""

from __future__ import annotations

from commitparser.formatters.registry import FORMATTERS, format_outcome

__all__ = [
    'FORMATTERS',
    'format_outcome',
]
