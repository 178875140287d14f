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


"""Second parsing pass: turn the line-wise tree into the full message tree.

The header is carried over as parsed. The remaining lines are
classified (see :mod:`commitparser.parsing._classify`) and grouped into
at most one ``body`` node followed by any number of ``footer`` nodes.
Comment lines become ``comment`` nodes inside whichever section they
fall in, or directly under the root otherwise. Blank lines outside the
body and footers produce no node at all.
"""

from __future__ import annotations

from collections.abc import Sequence

from commitparser.parsing._accessors import iter_leaves, position_at
from commitparser.parsing._classify import (
    FOOTER_CLOSING_KINDS,
    FOOTER_OPENING_KINDS,
    LineKind,
    classify_lines,
    find_body_span,
)
from commitparser.parsing._line_wise import LineWiseNode, LineWiseNodeType, LineWiseTree
from commitparser.parsing._types import (
    DEFAULT_PARSE_OPTIONS,
    ORIGIN,
    InnerNode,
    MessageNode,
    Node,
    NodeType,
    ParseError,
    ParseOptions,
    Range,
    ValueNode,
)


def _adopt(parent: InnerNode, child: Node) -> None:
    child.parent = parent
    parent.children.append(child)


def _span(node_type: NodeType, first: LineWiseNode | ValueNode, last: LineWiseNode | ValueNode) -> InnerNode:
    return InnerNode(
        type=node_type,
        offset=first.offset,
        length=last.end - first.offset,
        range=Range(start=first.range.start, end=last.range.end),
    )


def _comment_node(line: LineWiseNode) -> InnerNode:
    comment = _span(NodeType.COMMENT, line, line)
    for leaf in line.children:
        _adopt(comment, leaf)
    return comment


def _fill(parent: InnerNode, lines: Sequence[LineWiseNode]) -> None:
    """Move the content of ``lines`` below ``parent``, wrapping comments."""
    for line in lines:
        if line.type is LineWiseNodeType.COMMENT:
            _adopt(parent, _comment_node(line))
        else:
            for leaf in line.children:
                _adopt(parent, leaf)


def _rebuild(node: InnerNode) -> InnerNode:
    """Copy the inner nodes of a line-wise subtree, moving its leaves over."""
    copy = InnerNode(type=node.type, offset=node.offset, length=node.length, range=node.range)
    for child in node.children:
        _adopt(copy, _rebuild(child) if isinstance(child, InnerNode) else child)
    return copy


def _strict_header(header: InnerNode) -> InnerNode:
    """Collapse a header without description into a lone description."""
    description = next((c for c in header.children if c.type is NodeType.DESCRIPTION), None)
    if description is not None and description.length > 0:
        return header
    leaves = list(iter_leaves(header))
    replacement = InnerNode(
        type=NodeType.DESCRIPTION,
        offset=header.offset,
        length=header.length,
        range=header.range,
        parent=header,
    )
    for leaf in leaves:
        leaf.parent = replacement
    replacement.children = leaves
    header.children = [replacement]
    return header


def build_body(lines: Sequence[LineWiseNode]) -> InnerNode:
    """Build the ``body`` node spanning ``lines``."""
    body = _span(NodeType.BODY, lines[0], lines[-1])
    _fill(body, lines)
    return body


def build_footer(lines: Sequence[LineWiseNode]) -> InnerNode:
    """Build a ``footer`` node from its opening line and any continuation.

    The first leaf of the opening line becomes the ``footer-token``;
    everything after the first whitespace leaf becomes the start of the
    ``footer-value``. The separator in between is trivia.
    """
    opening, rest = lines[0], lines[1:]
    footer = _span(NodeType.FOOTER, opening, lines[-1])

    token_leaf = opening.children[0]
    token = _span(NodeType.FOOTER_TOKEN, token_leaf, token_leaf)
    _adopt(token, token_leaf)
    _adopt(footer, token)

    leaves = opening.children
    first_ws = next(i for i, leaf in enumerate(leaves) if leaf.type is NodeType.WHITESPACE)
    value_leaves = leaves[first_ws + 1 :]
    value = InnerNode(
        type=NodeType.FOOTER_VALUE,
        offset=value_leaves[0].offset,
        length=footer.end - value_leaves[0].offset,
        range=Range(start=value_leaves[0].range.start, end=footer.range.end),
    )
    for leaf in value_leaves:
        _adopt(value, leaf)
    _fill(value, rest)
    _adopt(footer, value)
    return footer


def _footer_runs(kinds: Sequence[LineKind], start: int) -> list[tuple[int, int]]:
    """Return inclusive index spans of footers at or after ``start``."""
    runs: list[tuple[int, int]] = []
    opened: int | None = None
    last_content: int | None = None
    for i in range(start, len(kinds)):
        kind = kinds[i]
        if kind in FOOTER_OPENING_KINDS:
            opened = i
        if opened is None or kind in (LineKind.COMMENT, LineKind.EMPTY):
            continue
        last_content = i
        if kind in FOOTER_CLOSING_KINDS:
            runs.append((opened, i))
            opened = None
    if opened is not None and last_content is not None:
        runs.append((opened, last_content))
    return runs


def transform(
    tree: LineWiseTree,
    options: ParseOptions = DEFAULT_PARSE_OPTIONS,
) -> tuple[MessageNode, list[ParseError]]:
    """Build the full message tree from the result of the first pass.

    Args:
        tree: The line-wise tree.
        options: Parse options; only ``strict`` is consulted here.

    Returns:
        The root node and any additional errors found.
    """
    text = tree.text
    root = MessageNode(
        type=NodeType.MESSAGE,
        offset=0,
        length=len(text),
        range=Range(start=ORIGIN, end=position_at(text, len(text))),
        text=text,
    )

    if tree.header is not None:
        header = _rebuild(tree.header)
        if options.strict:
            header = _strict_header(header)
        _adopt(root, header)

    lines = tree.lines
    kinds = classify_lines(lines)
    body_span = find_body_span(kinds)
    footer_from = 0 if body_span is None else body_span[1] + 1
    footers = dict(_footer_runs(kinds, footer_from))

    i = 0
    while i < len(lines):
        if body_span is not None and i == body_span[0]:
            _adopt(root, build_body(lines[body_span[0] : body_span[1] + 1]))
            i = body_span[1] + 1
        elif i in footers:
            _adopt(root, build_footer(lines[i : footers[i] + 1]))
            i = footers[i] + 1
        else:
            if kinds[i] is LineKind.COMMENT:
                _adopt(root, _comment_node(lines[i]))
            i += 1

    return root, []


__all__ = [
    'build_body',
    'build_footer',
    'transform',
]
