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


"""Pure query functions over a parsed commit message tree.

These functions are the whole boundary used by completion, diagnostics
range mapping and token highlighting: they never mutate the tree and
never touch anything outside it.

Type lookups use one of three strategies, chosen per :class:`NodeType`::

    ┌──────────────────────────────┬──────────────────────────────────┐
    │ Node types                   │ Where we look                    │
    ├──────────────────────────────┼──────────────────────────────────┤
    │ header, body, footer         │ direct children of the root      │
    │ type, scope, description,    │ direct children of the header    │
    │ breaking-exclamation-mark    │                                  │
    │ everything else              │ depth-first over the whole tree  │
    └──────────────────────────────┴──────────────────────────────────┘

Header-level types never occur outside the header, so the restricted
lookups cannot be fooled by body or footer text.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from enum import Enum

from commitparser.parsing._types import (
    EMPTY_RANGE,
    ORIGIN,
    InnerNode,
    MessageNode,
    Node,
    NodeType,
    ParseOptions,
    Position,
    Range,
    ValueNode,
)

_LINE_BREAK_RE = re.compile(r'\r\n|\r|\n')


class LookupStrategy(Enum):
    """Where :func:`get_first_node_of_type` searches for a node type."""

    SECTION = 'section'
    HEADER = 'header'
    DEEP = 'deep'


LOOKUP_STRATEGIES: dict[NodeType, LookupStrategy] = {
    NodeType.MESSAGE: LookupStrategy.DEEP,
    NodeType.HEADER: LookupStrategy.SECTION,
    NodeType.TYPE: LookupStrategy.HEADER,
    NodeType.SCOPE_PAREN_OPEN: LookupStrategy.DEEP,
    NodeType.SCOPE: LookupStrategy.HEADER,
    NodeType.SCOPE_PAREN_CLOSE: LookupStrategy.DEEP,
    NodeType.BREAKING_EXCLAMATION_MARK: LookupStrategy.HEADER,
    NodeType.DESCRIPTION: LookupStrategy.HEADER,
    NodeType.BODY: LookupStrategy.SECTION,
    NodeType.BREAKING_CHANGE_LITERAL: LookupStrategy.DEEP,
    NodeType.ISSUE_REFERENCE: LookupStrategy.DEEP,
    NodeType.FOOTER: LookupStrategy.SECTION,
    NodeType.FOOTER_TOKEN: LookupStrategy.DEEP,
    NodeType.FOOTER_VALUE: LookupStrategy.DEEP,
    NodeType.COMMENT: LookupStrategy.DEEP,
    NodeType.WORD: LookupStrategy.DEEP,
    NodeType.WHITESPACE: LookupStrategy.DEEP,
    NodeType.NUMBER: LookupStrategy.DEEP,
    NodeType.PUNCTUATION: LookupStrategy.DEEP,
}

_missing = set(NodeType) - set(LOOKUP_STRATEGIES)
if _missing:
    raise RuntimeError(f'No lookup strategy for node types: {sorted(t.value for t in _missing)}')


def children_of(node: Node | None) -> list[Node]:
    """Return the children of ``node``, or an empty list for leaves."""
    if isinstance(node, InnerNode):
        return node.children
    return []


def iter_nodes(node: Node) -> Iterator[Node]:
    """Yield ``node`` and all its descendants in depth-first pre-order."""
    stack: list[Node] = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(children_of(current)))


def _iter_nodes_reversed(node: Node) -> Iterator[Node]:
    """Yield the nodes of :func:`iter_nodes` in reverse order."""
    for child in reversed(children_of(node)):
        yield from _iter_nodes_reversed(child)
    yield node


def iter_leaves(node: Node) -> Iterator[ValueNode]:
    """Yield the leaves below ``node`` in source order."""
    for current in iter_nodes(node):
        if isinstance(current, ValueNode):
            yield current


def get_root(node: Node) -> Node:
    """Follow parent references up to the root."""
    while node.parent is not None:
        node = node.parent
    return node


def contains(node: Node, offset: int, include_right_bound: bool = False) -> bool:
    """Return whether ``offset`` lies inside the half-open span of ``node``.

    Args:
        node: The node to test.
        offset: Absolute offset.
        include_right_bound: Also accept ``offset == node.end``.
    """
    return node.offset <= offset < node.end or (include_right_bound and offset == node.end)


def find_node_at_offset(node: Node | None, offset: int, include_right_bound: bool = False) -> Node | None:
    """Find the innermost node containing ``offset``.

    Args:
        node: Root of the search.
        offset: Absolute offset.
        include_right_bound: Also match nodes ending exactly at ``offset``.

    Returns:
        The innermost matching node, or ``None`` if ``offset`` is
        outside ``node``.
    """
    if node is None or not contains(node, offset, include_right_bound):
        return None
    for child in children_of(node):
        if child.offset > offset:
            break
        found = find_node_at_offset(child, offset, include_right_bound)
        if found is not None:
            return found
    return node


def get_node_path(root: Node | None, offset: int, include_right_bound: bool = False) -> list[NodeType]:
    """Return the node types from ``root`` down to the node at ``offset``.

    >>> from commitparser import parse_commit
    >>> root = parse_commit('feat(api): x').root
    >>> [t.value for t in get_node_path(root, 6)]
    ['message', 'header', 'scope', 'word']
    """
    node = find_node_at_offset(root, offset, include_right_bound)
    path: list[NodeType] = []
    while node is not None:
        path.append(node.type)
        node = node.parent
    path.reverse()
    return path


def _header_of(root: Node) -> Node | None:
    return next((c for c in children_of(root) if c.type is NodeType.HEADER), None)


def _candidates(root: Node, node_type: NodeType, *, reverse: bool) -> Iterator[Node]:
    strategy = LOOKUP_STRATEGIES[node_type]
    if strategy is LookupStrategy.DEEP:
        return _iter_nodes_reversed(root) if reverse else iter_nodes(root)
    nodes = children_of(root) if strategy is LookupStrategy.SECTION else children_of(_header_of(root))
    return reversed(nodes) if reverse else iter(nodes)


def get_first_node_of_type(root: Node | None, node_type: NodeType) -> Node | None:
    """Return the first node of ``node_type`` in document order, or ``None``."""
    if root is None:
        return None
    return next((n for n in _candidates(root, node_type, reverse=False) if n.type is node_type), None)


def get_last_node_of_type(root: Node | None, node_type: NodeType) -> Node | None:
    """Return the last node of ``node_type`` in document order, or ``None``."""
    if root is None:
        return None
    return next((n for n in _candidates(root, node_type, reverse=True) if n.type is node_type), None)


def get_string_content_of_node(node: Node) -> str:
    """Return the source text spanned by ``node``.

    Trivia (line breaks, the header colon, footer separators) inside the
    span is included. For subtrees detached from a :class:`MessageNode`
    the leaf values are concatenated instead.
    """
    if isinstance(node, ValueNode):
        return '' if node.value is None else str(node.value)
    root = get_root(node)
    if isinstance(root, MessageNode):
        return root.text[node.offset : node.end]
    return ''.join(get_string_content_of_node(leaf) for leaf in iter_leaves(node))


def position_at(text: str, offset: int) -> Position:
    """Convert an absolute offset into a line/character position.

    ``\\r\\n``, ``\\r`` and ``\\n`` each count as a single line break.
    """
    offset = max(0, min(offset, len(text)))
    line = 0
    line_start = 0
    for match in _LINE_BREAK_RE.finditer(text, 0, offset):
        line += 1
        line_start = match.end()
    return Position(line=line, character=offset - line_start)


def get_range_for_commit_position(root: Node | None, node_type: NodeType) -> Range:
    """Return the range of the first ``node_type`` node, never ``None``.

    When the node does not exist a zero-length range is returned: at the
    start of the header for header-level types, at the origin otherwise.
    Editor features can therefore always anchor an edit somewhere.
    """
    node = get_first_node_of_type(root, node_type)
    if node is not None:
        return node.range
    if root is not None and LOOKUP_STRATEGIES[node_type] is LookupStrategy.HEADER:
        header = _header_of(root)
        start = header.range.start if header is not None else ORIGIN
        return Range(start=start, end=start)
    return EMPTY_RANGE


def does_config_allow_breaking_exclamation_mark(options: ParseOptions | None, default: bool = True) -> bool:
    """Resolve whether ``!`` before the header colon marks a breaking change.

    An explicit ``breaking_exclamation_mark_allowed`` wins. Otherwise a
    ``header_pattern`` decides by whether it mentions ``!`` at all, and
    without either the ``default`` applies.
    """
    if options is None:
        return default
    if options.breaking_exclamation_mark_allowed is not None:
        return options.breaking_exclamation_mark_allowed
    if options.header_pattern:
        return '!' in options.header_pattern
    return default


__all__ = [
    'LOOKUP_STRATEGIES',
    'LookupStrategy',
    'children_of',
    'contains',
    'does_config_allow_breaking_exclamation_mark',
    'find_node_at_offset',
    'get_first_node_of_type',
    'get_last_node_of_type',
    'get_node_path',
    'get_range_for_commit_position',
    'get_root',
    'get_string_content_of_node',
    'iter_leaves',
    'iter_nodes',
    'position_at',
]
