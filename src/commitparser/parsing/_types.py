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


"""Pure types for the commit message syntax tree.

This module has **zero** runtime dependencies beyond the standard library.
Everything here is a dataclass or an enum: no I/O, no logging, no side
effects.

Tree shape::

    message
    ├── header
    │   ├── type
    │   ├── scope-paren-open     (optional)
    │   ├── scope                (optional)
    │   ├── scope-paren-close    (optional)
    │   ├── breaking-exclamation-mark (optional)
    │   └── description
    ├── body                     (optional, single node)
    ├── footer *
    │   ├── footer-token
    │   └── footer-value
    └── comment *                (anywhere, one per physical line)

Leaves are :class:`ValueNode` instances of type ``word``, ``whitespace``,
``number``, ``punctuation``, ``issue-reference`` or
``breaking-change-literal``. Line breaks, the header colon and footer
separators are trivia: they are covered by their parent's span but are
not materialized as nodes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True)
class Position:
    """A zero-based line/character position in the source text.

    Attributes:
        line: Zero-based line number.
        character: Zero-based character offset within the line.
    """

    line: int
    character: int


@dataclass(frozen=True)
class Range:
    """A half-open range between two :class:`Position` values."""

    start: Position
    end: Position


ORIGIN = Position(line=0, character=0)
EMPTY_RANGE = Range(start=ORIGIN, end=ORIGIN)


class NodeType(str, Enum):
    """Closed set of node types in a parsed commit message tree."""

    MESSAGE = 'message'
    HEADER = 'header'
    TYPE = 'type'
    SCOPE_PAREN_OPEN = 'scope-paren-open'
    SCOPE = 'scope'
    SCOPE_PAREN_CLOSE = 'scope-paren-close'
    BREAKING_EXCLAMATION_MARK = 'breaking-exclamation-mark'
    DESCRIPTION = 'description'
    BODY = 'body'
    BREAKING_CHANGE_LITERAL = 'breaking-change-literal'
    ISSUE_REFERENCE = 'issue-reference'
    FOOTER = 'footer'
    FOOTER_TOKEN = 'footer-token'
    FOOTER_VALUE = 'footer-value'
    COMMENT = 'comment'
    WORD = 'word'
    WHITESPACE = 'whitespace'
    NUMBER = 'number'
    PUNCTUATION = 'punctuation'


NodeValue = str | int


@dataclass(eq=False)
class Node:
    """Common fields of every tree node.

    ``parent`` is a non-owning back-reference used for upward traversal.
    It is left out of ``repr`` so printing a subtree does not recurse
    back up to the root.

    Attributes:
        type: The node type.
        offset: Absolute, zero-based offset of the first character.
        length: Number of characters spanned by the node.
        range: Line/character range of the node.
        parent: Enclosing inner node, ``None`` for the root.
    """

    type: NodeType
    offset: int
    length: int
    range: Range
    parent: InnerNode | None = field(default=None, repr=False, compare=False)

    @property
    def end(self) -> int:
        """Offset one past the last character of the node."""
        return self.offset + self.length


@dataclass(eq=False)
class ValueNode(Node):
    """A leaf node carrying the literal token text."""

    value: NodeValue | None = None


@dataclass(eq=False)
class InnerNode(Node):
    """A node owning an ordered list of children."""

    children: list[Node] = field(default_factory=list)


@dataclass(eq=False)
class MessageNode(InnerNode):
    """The root of a parsed message. Keeps the source text it spans."""

    text: str = field(default='', repr=False)


class ParseErrorCode(str, Enum):
    """Codes for recoverable problems found while parsing.

    The object/array grammar codes are reserved and never produced by
    the commit message grammar.
    """

    # Scanner level.
    INVALID_UNICODE = 'invalid-unicode'
    INVALID_CHARACTER = 'invalid-character'

    # Parser level.
    VALUE_EXPECTED = 'value-expected'
    COLON_EXPECTED = 'colon-expected'
    CLOSE_PAREN_EXPECTED = 'close-paren-expected'
    END_OF_FILE_EXPECTED = 'end-of-file-expected'

    # Reserved.
    INVALID_SYMBOL = 'invalid-symbol'
    PROPERTY_NAME_EXPECTED = 'property-name-expected'
    COMMA_EXPECTED = 'comma-expected'
    CLOSE_BRACE_EXPECTED = 'close-brace-expected'
    CLOSE_BRACKET_EXPECTED = 'close-bracket-expected'


@dataclass(frozen=True)
class ParseError:
    """A recoverable parse problem.

    Attributes:
        error: What went wrong.
        offset: Offset of the offending token.
        length: Length of the offending token.
    """

    error: ParseErrorCode
    offset: int
    length: int


DEFAULT_NOTE_KEYWORDS: tuple[str, ...] = ('BREAKING CHANGE', 'BREAKING-CHANGE')
DEFAULT_ISSUE_PREFIXES: tuple[str, ...] = ('#',)


@dataclass(frozen=True)
class ParseOptions:
    """Options controlling tokenization and tree construction.

    Attributes:
        comment_char: Single character starting a comment line. Any
            other length disables comment detection.
        issue_prefixes: Prefixes that, immediately followed by digits,
            form an issue reference (e.g. ``#123``).
        issue_prefixes_case_sensitive: Match issue prefixes exactly
            instead of case-insensitively.
        note_keywords: Keywords recognized as breaking-change literals
            at the start of a line.
        strict: Rewrite a header without description into a header
            holding only a description.
        breaking_exclamation_mark_allowed: Whether ``!`` before the
            header colon marks a breaking change. ``None`` defers to
            ``header_pattern`` and then to ``True``.
        header_pattern: Optional header regex of the surrounding
            tooling, only inspected for a ``!``.
    """

    comment_char: str = '#'
    issue_prefixes: tuple[str, ...] = DEFAULT_ISSUE_PREFIXES
    issue_prefixes_case_sensitive: bool = False
    note_keywords: tuple[str, ...] = DEFAULT_NOTE_KEYWORDS
    strict: bool = False
    breaking_exclamation_mark_allowed: bool | None = None
    header_pattern: str | None = None


DEFAULT_PARSE_OPTIONS = ParseOptions()


@dataclass(frozen=True)
class HeaderOutcome:
    """String projection of the header.

    Attributes:
        raw: The full header text.
        type: Text of the ``type`` node, ``None`` if it is missing.
        scope: Text of the ``scope`` node, ``None`` if there is none.
        breaking_exclamation_mark: Whether the header has a ``!``.
        description: Text of the ``description`` node, ``None`` if
            it is missing.
    """

    raw: str
    type: str | None
    scope: str | None
    breaking_exclamation_mark: bool
    description: str | None


@dataclass(frozen=True)
class FooterOutcome:
    """String projection of a single footer."""

    raw: str
    token: str
    value: str


@dataclass(frozen=True)
class ParseOutcome:
    """Everything a caller gets back from :func:`parse_commit`.

    Attributes:
        root: The full message tree.
        errors: Recoverable problems found while parsing.
        raw: The original text.
        header: Header projection, ``None`` if no header was parsed.
        body: Body text, ``None`` if there is no body.
        footers: Footer projections in document order.
    """

    root: MessageNode | None
    errors: list[ParseError]
    raw: str
    header: HeaderOutcome | None = None
    body: str | None = None
    footers: list[FooterOutcome] = field(default_factory=list)


__all__ = [
    'DEFAULT_ISSUE_PREFIXES',
    'DEFAULT_NOTE_KEYWORDS',
    'DEFAULT_PARSE_OPTIONS',
    'EMPTY_RANGE',
    'ORIGIN',
    'FooterOutcome',
    'HeaderOutcome',
    'InnerNode',
    'MessageNode',
    'Node',
    'NodeType',
    'NodeValue',
    'ParseError',
    'ParseErrorCode',
    'ParseOptions',
    'ParseOutcome',
    'Position',
    'Range',
    'ValueNode',
]
