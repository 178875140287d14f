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


"""Box-drawing tree rendering of a parsed message.

One line per node with its line:character range; leaves also show their
value. Example for ``feat(api): add``::

    message 0:0-0:14
    └── header 0:0-0:14
        ├── type 0:0-0:4
        │   └── word 'feat' 0:0-0:4
        ├── scope-paren-open '(' 0:4-0:5
        ├── scope 0:5-0:8
        │   └── word 'api' 0:5-0:8
        ├── scope-paren-close ')' 0:8-0:9
        └── description 0:11-0:14
            └── word 'add' 0:11-0:14

Parse errors, if any, follow the tree.
"""

from __future__ import annotations

from commitparser.parsing import Node, ParseOutcome, Range, ValueNode, children_of


def _range_label(rng: Range) -> str:
    return f'{rng.start.line}:{rng.start.character}-{rng.end.line}:{rng.end.character}'


def _node_label(node: Node) -> str:
    if isinstance(node, ValueNode):
        return f'{node.type.value} {str(node.value)!r} {_range_label(node.range)}'
    return f'{node.type.value} {_range_label(node.range)}'


def _render(node: Node, prefix: str, is_last: bool, lines: list[str]) -> None:
    connector = '└── ' if is_last else '├── '
    lines.append(f'{prefix}{connector}{_node_label(node)}')
    child_prefix = prefix + ('    ' if is_last else '│   ')
    children = children_of(node)
    for i, child in enumerate(children):
        _render(child, child_prefix, i == len(children) - 1, lines)


def format_tree(outcome: ParseOutcome) -> str:
    """Render the message tree of ``outcome`` with box-drawing characters.

    Args:
        outcome: A parse outcome.

    Returns:
        The rendered tree followed by one line per parse error.
    """
    lines: list[str] = []
    root = outcome.root
    if root is not None:
        lines.append(_node_label(root))
        children = children_of(root)
        for i, child in enumerate(children):
            _render(child, '', i == len(children) - 1, lines)
    for error in outcome.errors:
        lines.append(f'error {error.error.value} at {error.offset} (length {error.length})')
    return '\n'.join(lines) + '\n'


__all__ = ['format_tree']
