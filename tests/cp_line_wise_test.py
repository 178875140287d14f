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


"""Tests for the line-wise (first) parsing pass."""

from __future__ import annotations

import pytest

from commitparser.errors import CommitParserError, E
from commitparser.parsing import (
    NodeType,
    ParseError,
    ParseErrorCode,
    ParseOptions,
    Position,
    Range,
    get_string_content_of_node,
)
from commitparser.parsing._line_wise import LineWiseNodeType, _LineWiseParser, parse_line_wise


def _types(nodes: list) -> list[NodeType]:
    return [n.type for n in nodes]


class TestHeader:
    """Tests for the header grammar."""

    def test_type_and_description(self) -> None:
        """Test type and description."""
        tree, errors = parse_line_wise('feat: add')
        assert errors == []
        assert tree.header is not None
        assert _types(tree.header.children) == [NodeType.TYPE, NodeType.DESCRIPTION]
        assert tree.lines == []

    def test_header_span(self) -> None:
        """The header covers the whole first line, without the line break."""
        tree, _ = parse_line_wise('feat: add\nmore')
        assert tree.header is not None
        assert (tree.header.offset, tree.header.length) == (0, 9)
        assert tree.header.range == Range(start=Position(0, 0), end=Position(0, 9))

    def test_colon_and_space_are_not_nodes(self) -> None:
        """Test colon and space are not nodes."""
        tree, _ = parse_line_wise('fix:  two spaces')
        assert tree.header is not None
        description = tree.header.children[1]
        assert description.offset == 6
        assert [c.value for c in description.children] == ['two', ' ', 'spaces']

    def test_missing_close_paren(self) -> None:
        """Test missing close paren."""
        tree, errors = parse_line_wise('feat(api: x')
        assert errors == [ParseError(ParseErrorCode.CLOSE_PAREN_EXPECTED, 8, 1)]
        assert tree.header is not None
        assert _types(tree.header.children) == [
            NodeType.TYPE,
            NodeType.SCOPE_PAREN_OPEN,
            NodeType.SCOPE,
            NodeType.DESCRIPTION,
        ]

    def test_missing_colon(self) -> None:
        """Without a colon the whole line is the type."""
        tree, errors = parse_line_wise('feat add')
        assert errors == [ParseError(ParseErrorCode.COLON_EXPECTED, 8, 0)]
        assert tree.header is not None
        type_node, description = tree.header.children
        assert get_string_content_of_node(type_node) == 'feat add'
        assert description.length == 0

    def test_stray_tokens_after_scope(self) -> None:
        """Tokens between scope and colon are kept and reported once."""
        tree, errors = parse_line_wise('feat(api) x: y')
        assert errors == [ParseError(ParseErrorCode.COLON_EXPECTED, 9, 1)]
        assert tree.header is not None
        assert _types(tree.header.children) == [
            NodeType.TYPE,
            NodeType.SCOPE_PAREN_OPEN,
            NodeType.SCOPE,
            NodeType.SCOPE_PAREN_CLOSE,
            NodeType.WHITESPACE,
            NodeType.WORD,
            NodeType.DESCRIPTION,
        ]

    def test_disabled_exclamation_mark_stays_in_type(self) -> None:
        """Test disabled exclamation mark stays in type."""
        tree, errors = parse_line_wise('feat!: x', ParseOptions(breaking_exclamation_mark_allowed=False))
        assert errors == []
        assert tree.header is not None
        type_node = tree.header.children[0]
        assert [c.type for c in type_node.children] == [NodeType.WORD, NodeType.PUNCTUATION]

    def test_invalid_unicode_is_reported(self) -> None:
        """Test invalid unicode is reported."""
        _, errors = parse_line_wise('feat: \ud800')
        assert errors == [ParseError(ParseErrorCode.INVALID_UNICODE, 6, 1)]

    def test_leaf_parents(self) -> None:
        """Header leaves point at their enclosing inner node."""
        tree, _ = parse_line_wise('feat(api): x')
        assert tree.header is not None
        scope = tree.header.children[2]
        assert scope.children[0].parent is scope
        assert scope.parent is tree.header


class TestLines:
    """Tests for the lines after the header."""

    def test_one_node_per_line(self) -> None:
        """Test one node per line."""
        tree, errors = parse_line_wise('feat: x\n\nbody\n# c')
        assert errors == []
        assert [line.type for line in tree.lines] == [
            LineWiseNodeType.LINE,
            LineWiseNodeType.LINE,
            LineWiseNodeType.COMMENT,
        ]
        assert tree.lines[0].children == []
        assert [leaf.value for leaf in tree.lines[1].children] == ['body']
        assert tree.lines[2].children[0].value == '#'

    def test_line_positions(self) -> None:
        """Test line positions."""
        tree, _ = parse_line_wise('feat: x\r\n\r\nbody text')
        body = tree.lines[1]
        assert (body.offset, body.length, body.end) == (11, 9, 20)
        assert body.range == Range(start=Position(2, 0), end=Position(2, 9))

    def test_children_of_tree(self) -> None:
        """The tree's second level is the header followed by every line."""
        tree, _ = parse_line_wise('feat: x\na\nb')
        assert tree.type is LineWiseNodeType.MESSAGE
        assert len(tree.children) == 3
        assert tree.children[0] is tree.header


class TestEdgeCases:
    """Tests for empty input and leading comments."""

    def test_empty_input(self) -> None:
        """Test empty input."""
        tree, errors = parse_line_wise('')
        assert tree.header is None
        assert tree.lines == []
        assert errors == [ParseError(ParseErrorCode.VALUE_EXPECTED, 0, 0)]

    def test_first_line_comment(self) -> None:
        """A leading comment yields no header but the rest is still parsed."""
        tree, errors = parse_line_wise('# comment\nfeat: x')
        assert tree.header is None
        assert [line.type for line in tree.lines] == [LineWiseNodeType.COMMENT, LineWiseNodeType.LINE]
        assert errors == [ParseError(ParseErrorCode.VALUE_EXPECTED, 0, 9)]

    def test_exclamation_mark_outside_header_is_a_defect(self) -> None:
        """Test exclamation mark outside header is a defect."""
        parser = _LineWiseParser('!', ParseOptions())
        with pytest.raises(CommitParserError) as excinfo:
            parser._parse_breaking_exclamation_mark()
        assert excinfo.value.code is E.INTERNAL_INVARIANT
