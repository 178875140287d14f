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


"""Flatten a message tree into plain strings for non-editor callers."""

from __future__ import annotations

from commitparser.parsing._accessors import (
    children_of,
    get_first_node_of_type,
    get_string_content_of_node,
    iter_nodes,
)
from commitparser.parsing._types import (
    FooterOutcome,
    HeaderOutcome,
    MessageNode,
    Node,
    NodeType,
    ParseError,
    ParseOutcome,
)


def _strip_comments(node: Node, text: str) -> str:
    """Return the source text of ``node`` without its comment lines."""
    parts: list[str] = []
    cursor = node.offset
    for comment in iter_nodes(node):
        if comment.type is not NodeType.COMMENT:
            continue
        parts.append(text[cursor : comment.offset])
        cursor = comment.end
        # Drop the line break ending the comment line.
        if text.startswith('\r\n', cursor):
            cursor += 2
        elif cursor < node.end and text[cursor] in '\r\n':
            cursor += 1
    parts.append(text[cursor : node.end])
    return ''.join(parts).rstrip('\r\n')


def _header_outcome(header: Node) -> HeaderOutcome:
    def text_of(node_type: NodeType) -> str | None:
        node = next((c for c in children_of(header) if c.type is node_type), None)
        return None if node is None else get_string_content_of_node(node)

    return HeaderOutcome(
        raw=get_string_content_of_node(header),
        type=text_of(NodeType.TYPE),
        scope=text_of(NodeType.SCOPE),
        breaking_exclamation_mark=any(c.type is NodeType.BREAKING_EXCLAMATION_MARK for c in children_of(header)),
        description=text_of(NodeType.DESCRIPTION),
    )


def _footer_outcome(footer: Node, text: str) -> FooterOutcome:
    token, value = children_of(footer)[:2]
    return FooterOutcome(
        raw=_strip_comments(footer, text),
        token=get_string_content_of_node(token),
        value=_strip_comments(value, text),
    )


def build_outcome(root: MessageNode | None, errors: list[ParseError], text: str) -> ParseOutcome:
    """Project ``root`` onto a :class:`ParseOutcome`.

    Comment lines are left out of the body and footer strings.
    """
    if root is None:
        return ParseOutcome(root=None, errors=errors, raw=text)
    header = get_first_node_of_type(root, NodeType.HEADER)
    body = get_first_node_of_type(root, NodeType.BODY)
    return ParseOutcome(
        root=root,
        errors=errors,
        raw=text,
        header=None if header is None else _header_outcome(header),
        body=None if body is None else _strip_comments(body, text),
        footers=[_footer_outcome(c, text) for c in children_of(root) if c.type is NodeType.FOOTER],
    )


__all__ = ['build_outcome']
