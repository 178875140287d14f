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


"""Classification of the lines that follow the header.

Each line is described by a :class:`LineShape` and then labelled with a
:class:`LineKind` by a small state machine. The state is the kind of the
last non-comment line, so comment lines never break up a footer::

    previous kind              line shape              kind
    ─────────────────────────  ──────────────────────  ───────────────────
    any                        comment                 comment
    any                        empty                   empty
    empty, footer-start-end,   footer start            footer-start-end
    footer-end
    footer-start-end           text without colon      footer-end  (*)
    footer-end                 text without colon      footer-end  (*)
    any other                  text                    non-footer-content

    (*) the previous line is relabelled: footer-start-end becomes
        footer-start and footer-end becomes footer-continuation.

A footer-shaped line directly after body text or the header is body
content. A footer therefore always runs from a ``footer-start`` (or a single
``footer-start-end``) line to the next ``footer-end`` line.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from commitparser.parsing._line_wise import LineWiseNode, LineWiseNodeType
from commitparser.parsing._types import NodeType, ValueNode


class LineKind(str, Enum):
    """Label of a single line after the header."""

    HEADER = 'header'
    COMMENT = 'comment'
    EMPTY = 'empty'
    FOOTER_START = 'footer-start'
    FOOTER_START_END = 'footer-start-end'
    FOOTER_CONTINUATION = 'footer-continuation'
    FOOTER_END = 'footer-end'
    NON_FOOTER_CONTENT = 'non-footer-content'


FOOTER_OPENING_KINDS = frozenset({LineKind.FOOTER_START, LineKind.FOOTER_START_END})
FOOTER_CLOSING_KINDS = frozenset({LineKind.FOOTER_START_END, LineKind.FOOTER_END})

_RELABEL: dict[LineKind, LineKind] = {
    LineKind.FOOTER_START_END: LineKind.FOOTER_START,
    LineKind.FOOTER_END: LineKind.FOOTER_CONTINUATION,
}

_FOOTER_START_STATES = frozenset({LineKind.EMPTY, LineKind.FOOTER_START_END, LineKind.FOOTER_END})

_FOOTER_TOKEN_TYPES = frozenset({NodeType.WORD, NodeType.BREAKING_CHANGE_LITERAL})


@dataclass(frozen=True)
class LineShape:
    """Syntactic facts about a line that drive its classification.

    Attributes:
        comment: The line is a comment line.
        empty: The line has no leaves besides whitespace.
        footer_start: The line opens a footer (``Token: value``,
            ``Token #value`` or ``Token #123``).
        has_colon: The line contains a ``:`` anywhere.
    """

    comment: bool = False
    empty: bool = False
    footer_start: bool = False
    has_colon: bool = False


def _is_punctuation(leaf: ValueNode, value: str) -> bool:
    return leaf.type is NodeType.PUNCTUATION and leaf.value == value


def is_footer_start(leaves: Sequence[ValueNode]) -> bool:
    """Return whether ``leaves`` open a footer.

    Accepted shapes, where ``token`` is a word or a breaking-change
    literal and ``rest`` is at least one more leaf::

        token ":" whitespace rest
        token whitespace "#" rest
        token whitespace issue-reference ...
    """
    if len(leaves) < 3 or leaves[0].type not in _FOOTER_TOKEN_TYPES:
        return False
    second, third = leaves[1], leaves[2]
    if len(leaves) > 3:
        if _is_punctuation(second, ':') and third.type is NodeType.WHITESPACE:
            return True
        if second.type is NodeType.WHITESPACE and _is_punctuation(third, '#'):
            return True
    return second.type is NodeType.WHITESPACE and third.type is NodeType.ISSUE_REFERENCE


def describe_line(line: LineWiseNode) -> LineShape:
    """Compute the :class:`LineShape` of a line-wise node."""
    if line.type is LineWiseNodeType.COMMENT:
        return LineShape(comment=True)
    leaves = line.children
    if all(leaf.type is NodeType.WHITESPACE for leaf in leaves):
        return LineShape(empty=True)
    return LineShape(
        footer_start=is_footer_start(leaves),
        has_colon=any(_is_punctuation(leaf, ':') for leaf in leaves),
    )


@dataclass(frozen=True)
class Transition:
    """Outcome of a single classification step.

    Attributes:
        kind: Kind of the current line.
        previous: New kind for the previous non-comment line, or
            ``None`` to leave it alone.
    """

    kind: LineKind
    previous: LineKind | None = None


def transition(state: LineKind, shape: LineShape) -> Transition:
    """Classify one line given the kind of the last non-comment line."""
    if shape.comment:
        return Transition(LineKind.COMMENT)
    if shape.empty:
        return Transition(LineKind.EMPTY)
    if shape.footer_start and state in _FOOTER_START_STATES:
        return Transition(LineKind.FOOTER_START_END)
    if state in _RELABEL and not shape.has_colon:
        return Transition(LineKind.FOOTER_END, previous=_RELABEL[state])
    return Transition(LineKind.NON_FOOTER_CONTENT)


class LineClassifier:
    """Label lines one at a time, relabelling earlier lines as needed."""

    def __init__(self) -> None:
        self.kinds: list[LineKind] = []
        self._state = LineKind.HEADER
        self._state_index: int | None = None

    def feed(self, line: LineWiseNode) -> LineKind:
        """Classify ``line`` and return its (possibly later revised) kind."""
        step = transition(self._state, describe_line(line))
        self.kinds.append(step.kind)
        if step.kind is LineKind.COMMENT:
            return step.kind
        if step.previous is not None and self._state_index is not None:
            self.kinds[self._state_index] = step.previous
        self._state = step.kind
        self._state_index = len(self.kinds) - 1
        return step.kind


def classify_lines(lines: Sequence[LineWiseNode]) -> list[LineKind]:
    """Return one :class:`LineKind` per line."""
    classifier = LineClassifier()
    for line in lines:
        classifier.feed(line)
    return classifier.kinds


def find_body_span(kinds: Sequence[LineKind]) -> tuple[int, int] | None:
    """Return the inclusive line index span of the body, or ``None``.

    The body starts at the first line that is neither empty nor a comment
    and ends at the last ``non-footer-content`` line. Footer-shaped lines
    inside that span belong to the body.
    """
    last = next((i for i in range(len(kinds) - 1, -1, -1) if kinds[i] is LineKind.NON_FOOTER_CONTENT), None)
    if last is None:
        return None
    first = next(i for i, kind in enumerate(kinds) if kind not in (LineKind.EMPTY, LineKind.COMMENT))
    return first, last


__all__ = [
    'FOOTER_CLOSING_KINDS',
    'FOOTER_OPENING_KINDS',
    'LineClassifier',
    'LineKind',
    'LineShape',
    'Transition',
    'classify_lines',
    'describe_line',
    'find_body_span',
    'is_footer_start',
    'transition',
]
