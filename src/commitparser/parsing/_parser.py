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


"""Commit message parser: wires the scanner and both passes together.

Pure implementation: no I/O, no logging, no module-level mutable state.
Malformed messages never raise; problems come back as
:class:`ParseError` values on the outcome.
"""

from __future__ import annotations

from commitparser.parsing._full_message import transform
from commitparser.parsing._line_wise import parse_line_wise
from commitparser.parsing._outcome import build_outcome
from commitparser.parsing._types import DEFAULT_PARSE_OPTIONS, ParseOptions, ParseOutcome


class CommitMessageParser:
    """Parser for full conventional commit messages.

    Holds only its :class:`ParseOptions`, so one instance can be shared
    between threads.
    """

    def __init__(self, options: ParseOptions | None = None) -> None:
        self.options = options if options is not None else DEFAULT_PARSE_OPTIONS

    def parse(self, text: str) -> ParseOutcome:
        """Parse ``text`` into a tree and its string projection.

        Args:
            text: The complete commit message, header included.

        Returns:
            A :class:`ParseOutcome`. ``root`` is always set; ``errors``
            lists every recoverable problem in source order of discovery.
        """
        tree, errors = parse_line_wise(text, self.options)
        root, transform_errors = transform(tree, self.options)
        errors = [*errors, *transform_errors]
        return build_outcome(root, errors, text)


__all__ = ['CommitMessageParser']
