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


"""First parsing pass: header grammar plus one node per physical line.

The header (first line) is parsed with a small recursive-descent grammar::

    header      := type [ "(" scope ")" ] [ "!" ] ":" [ whitespace ] description
    type        := value*          (until "(", "!", ":" or end of line)
    scope       := value*          (until ")", ":" or end of line)
    description := value*          (until end of line)

Every following line is kept as a bag of tokens: a ``comment`` node when
it starts with the comment character, a ``line`` node otherwise. Deciding
which lines form the body and which form footers is left to
:mod:`commitparser.parsing._full_message`.

Malformed input is recorded as :class:`ParseError` values and parsing
resumes; the only exception raised here signals a parser defect.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from commitparser.errors import CommitParserError, E
from commitparser.parsing._accessors import does_config_allow_breaking_exclamation_mark
from commitparser.parsing._scanner import ScanError, SyntaxKind, Token, tokenize
from commitparser.parsing._types import (
    DEFAULT_PARSE_OPTIONS,
    InnerNode,
    NodeType,
    ParseError,
    ParseErrorCode,
    ParseOptions,
    Position,
    Range,
    ValueNode,
)


class LineWiseNodeType(str, Enum):
    """Node types of the intermediate, line-wise tree."""

    MESSAGE = 'message'
    HEADER = 'header'
    LINE = 'line'
    COMMENT = 'comment'


@dataclass(eq=False)
class LineWiseNode:
    """A single physical line after the header.

    Attributes:
        type: ``line`` or ``comment``.
        offset: Offset of the first character of the line.
        length: Length of the line without its line break.
        range: Range of the line without its line break.
        children: The line's tokens as leaves, in source order.
    """

    type: LineWiseNodeType
    offset: int
    length: int
    range: Range
    children: list[ValueNode] = field(default_factory=list)

    @property
    def end(self) -> int:
        """Offset one past the last character of the line."""
        return self.offset + self.length


@dataclass(eq=False)
class LineWiseTree:
    """Result of the first pass.

    Attributes:
        text: The parsed text.
        header: The parsed header, ``None`` when the message is empty or
            starts with a comment.
        lines: One node per physical line after the header.
    """

    text: str
    header: InnerNode | None = None
    lines: list[LineWiseNode] = field(default_factory=list)

    @property
    def type(self) -> LineWiseNodeType:
        """Always ``message``."""
        return LineWiseNodeType.MESSAGE

    @property
    def children(self) -> list[InnerNode | LineWiseNode]:
        """Second level of the tree: the header (if any) then every line."""
        if self.header is None:
            return list(self.lines)
        return [self.header, *self.lines]


_LEAF_TYPES: dict[SyntaxKind, NodeType] = {
    SyntaxKind.WHITESPACE: NodeType.WHITESPACE,
    SyntaxKind.WORD: NodeType.WORD,
    SyntaxKind.NUMBER: NodeType.NUMBER,
    SyntaxKind.BREAKING_CHANGE_LITERAL: NodeType.BREAKING_CHANGE_LITERAL,
    SyntaxKind.ISSUE_REFERENCE: NodeType.ISSUE_REFERENCE,
}

_SCAN_ERRORS: dict[ScanError, ParseErrorCode] = {
    ScanError.INVALID_UNICODE: ParseErrorCode.INVALID_UNICODE,
    ScanError.INVALID_CHARACTER: ParseErrorCode.INVALID_CHARACTER,
}

_LINE_END = frozenset({SyntaxKind.LINE_BREAK, SyntaxKind.EOF})
_TYPE_END = _LINE_END | {SyntaxKind.OPEN_PAREN, SyntaxKind.EXCLAMATION_MARK, SyntaxKind.COLON}
_SCOPE_END = _LINE_END | {SyntaxKind.CLOSE_PAREN, SyntaxKind.COLON}


def _start_of(token: Token) -> Position:
    return Position(line=token.line, character=token.character)


class _LineWiseParser:
    """Single-use parser holding the token cursor and the open nodes."""

    def __init__(self, text: str, options: ParseOptions) -> None:
        self._text = text
        self._tokens = tokenize(
            text,
            options,
            breaking_exclamation_mark_allowed=does_config_allow_breaking_exclamation_mark(options),
        )
        self._index = 0
        self._token = self._tokens[0]
        self._errors: list[ParseError] = []
        self._open: list[InnerNode] = []
        self._colon_reported = False
        self._check_scan_error()

    # -- token cursor -------------------------------------------------------

    def _advance(self) -> Token:
        if self._token.kind is not SyntaxKind.EOF:
            self._index += 1
            self._token = self._tokens[self._index]
            self._check_scan_error()
        return self._token

    def _check_scan_error(self) -> None:
        code = _SCAN_ERRORS.get(self._token.error)
        if code is not None:
            self._error(code)

    def _at(self, kinds: frozenset[SyntaxKind]) -> bool:
        return self._token.kind in kinds

    # -- tree building ------------------------------------------------------

    def _error(self, code: ParseErrorCode) -> None:
        self._errors.append(ParseError(error=code, offset=self._token.offset, length=self._token.length))

    def _leaf(self, node_type: NodeType) -> ValueNode:
        token = self._token
        start = _start_of(token)
        return ValueNode(
            type=node_type,
            offset=token.offset,
            length=token.length,
            range=Range(start=start, end=Position(line=start.line, character=start.character + token.length)),
            value=token.value,
        )

    def _begin(self, node_type: NodeType) -> InnerNode:
        token = self._token
        parent = self._open[-1] if self._open else None
        node = InnerNode(
            type=node_type,
            offset=token.offset,
            length=0,
            range=Range(start=_start_of(token), end=_start_of(token)),
            parent=parent,
        )
        if parent is not None:
            parent.children.append(node)
        self._open.append(node)
        return node

    def _end(self) -> InnerNode:
        node = self._open.pop()
        node.length = self._token.offset - node.offset
        node.range = Range(start=node.range.start, end=_start_of(self._token))
        return node

    def _add(self, leaf: ValueNode) -> None:
        parent = self._open[-1]
        leaf.parent = parent
        parent.children.append(leaf)

    def _parse_value(self) -> None:
        self._add(self._leaf(_LEAF_TYPES.get(self._token.kind, NodeType.PUNCTUATION)))
        self._advance()

    def _recover(self, code: ParseErrorCode, skip_until: frozenset[SyntaxKind]) -> None:
        """Record ``code`` and keep tokens as leaves until ``skip_until`` or end of line."""
        self._error(code)
        stop = skip_until | _LINE_END
        while not self._at(stop):
            self._parse_value()

    def _report_missing_colon(self, skip_until: frozenset[SyntaxKind] = frozenset()) -> None:
        if self._colon_reported:
            while not self._at(skip_until | _LINE_END):
                self._parse_value()
            return
        self._colon_reported = True
        self._recover(ParseErrorCode.COLON_EXPECTED, skip_until)

    # -- grammar ------------------------------------------------------------

    def _parse_breaking_exclamation_mark(self) -> None:
        parent = self._open[-1] if self._open else None
        if parent is None or parent.type is not NodeType.HEADER:
            raise CommitParserError(
                code=E.INTERNAL_INVARIANT,
                message=f'breaking exclamation mark at offset {self._token.offset} outside of a header',
            )
        self._add(self._leaf(NodeType.BREAKING_EXCLAMATION_MARK))
        self._advance()

    def _parse_scope(self) -> None:
        self._add(self._leaf(NodeType.SCOPE_PAREN_OPEN))
        self._advance()
        self._begin(NodeType.SCOPE)
        while not self._at(_SCOPE_END):
            self._parse_value()
        if self._token.kind is not SyntaxKind.CLOSE_PAREN:
            self._error(ParseErrorCode.CLOSE_PAREN_EXPECTED)
        self._end()
        if self._token.kind is SyntaxKind.CLOSE_PAREN:
            self._add(self._leaf(NodeType.SCOPE_PAREN_CLOSE))
            self._advance()

    def parse_header(self) -> InnerNode:
        header = self._begin(NodeType.HEADER)

        self._begin(NodeType.TYPE)
        while not self._at(_TYPE_END):
            self._parse_value()
        self._end()

        if self._token.kind is SyntaxKind.OPEN_PAREN:
            self._parse_scope()

        if not self._at(_LINE_END | {SyntaxKind.EXCLAMATION_MARK, SyntaxKind.COLON}):
            self._report_missing_colon(frozenset({SyntaxKind.EXCLAMATION_MARK, SyntaxKind.COLON}))

        if self._token.kind is SyntaxKind.EXCLAMATION_MARK:
            self._parse_breaking_exclamation_mark()

        if not self._at(_LINE_END | {SyntaxKind.COLON}):
            self._report_missing_colon(frozenset({SyntaxKind.COLON}))

        if self._token.kind is SyntaxKind.COLON:
            # The colon and a single whitespace run after it are trivia.
            if self._advance().kind is SyntaxKind.WHITESPACE:
                self._advance()
        else:
            self._report_missing_colon()

        self._begin(NodeType.DESCRIPTION)
        while not self._at(_LINE_END):
            self._parse_value()
        self._end()

        self._end()
        return header

    def _parse_physical_line(self, node_type: LineWiseNodeType) -> LineWiseNode:
        start = self._token
        leaves: list[ValueNode] = []
        while not self._at(_LINE_END):
            leaves.append(self._leaf(_LEAF_TYPES.get(self._token.kind, NodeType.PUNCTUATION)))
            self._advance()
        return LineWiseNode(
            type=node_type,
            offset=start.offset,
            length=self._token.offset - start.offset,
            range=Range(start=_start_of(start), end=_start_of(self._token)),
            children=leaves,
        )

    def parse_comment(self) -> LineWiseNode:
        if self._token.character != 0:
            raise CommitParserError(
                code=E.INTERNAL_INVARIANT,
                message=f'comment can only begin at line start, not at character {self._token.character}',
            )
        return self._parse_physical_line(LineWiseNodeType.COMMENT)

    def parse_lines(self) -> list[LineWiseNode]:
        lines: list[LineWiseNode] = []
        while self._token.kind is SyntaxKind.LINE_BREAK:
            self._advance()
            if self._token.kind is SyntaxKind.COMMENT_START:
                lines.append(self.parse_comment())
            else:
                lines.append(self._parse_physical_line(LineWiseNodeType.LINE))
        return lines

    def parse(self) -> tuple[LineWiseTree, list[ParseError]]:
        tree = LineWiseTree(text=self._text)

        if self._token.kind is SyntaxKind.EOF:
            self._error(ParseErrorCode.VALUE_EXPECTED)
            return tree, self._errors

        if self._token.kind is SyntaxKind.COMMENT_START:
            first = self.parse_comment()
            tree.lines.append(first)
            self._errors.append(ParseError(ParseErrorCode.VALUE_EXPECTED, first.offset, first.length))
        else:
            tree.header = self.parse_header()

        tree.lines.extend(self.parse_lines())

        if self._token.kind is not SyntaxKind.EOF:
            self._error(ParseErrorCode.END_OF_FILE_EXPECTED)
        return tree, self._errors


def parse_line_wise(
    text: str,
    options: ParseOptions = DEFAULT_PARSE_OPTIONS,
) -> tuple[LineWiseTree, list[ParseError]]:
    """Run the first parsing pass over ``text``.

    Args:
        text: The full commit message.
        options: Parse options.

    Returns:
        The line-wise tree and the errors found while building it.
    """
    return _LineWiseParser(text, options).parse()


__all__ = [
    'LineWiseNode',
    'LineWiseNodeType',
    'LineWiseTree',
    'parse_line_wise',
]
