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


"""Formatter registry and dispatch.

Maps format names to their formatter functions, providing a single
``format_outcome()`` entry point for the CLI.
"""

from __future__ import annotations

from collections.abc import Callable

from commitparser.errors import CommitParserError, E
from commitparser.formatters.json_fmt import format_json
from commitparser.formatters.outcome_fmt import format_outcome_json
from commitparser.formatters.tree import format_tree
from commitparser.parsing import ParseOutcome

Formatter = Callable[[ParseOutcome], str]

FORMATTERS: dict[str, Formatter] = {
    'json': format_json,
    'outcome': format_outcome_json,
    'tree': format_tree,
}


def format_outcome(outcome: ParseOutcome, *, fmt: str = 'tree') -> str:
    """Format a parse outcome using the named formatter.

    Args:
        outcome: The parse outcome.
        fmt: Format name (one of :data:`FORMATTERS`).

    Returns:
        The formatted string.

    Raises:
        CommitParserError: If ``fmt`` is not a registered format name.
    """
    formatter = FORMATTERS.get(fmt)
    if formatter is None:
        available = ', '.join(sorted(FORMATTERS))
        raise CommitParserError(
            code=E.FORMAT_UNKNOWN,
            message=f'Unknown format {fmt!r}',
            hint=f'Available: {available}',
        )
    return formatter(outcome)


__all__ = [
    'FORMATTERS',
    'format_outcome',
]
