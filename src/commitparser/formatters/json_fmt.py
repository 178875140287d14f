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


"""JSON rendering of the full message tree.

Every node becomes an object with ``type``, ``offset``, ``length`` and
``range``; leaves add ``value``, inner nodes add ``children``. Parent
references are omitted.
"""

from __future__ import annotations

import json

from commitparser.parsing import InnerNode, Node, ParseOutcome, Range, ValueNode


def range_to_dict(rng: Range) -> dict[str, dict[str, int]]:
    """Convert a :class:`Range` to LSP-style nested dicts."""
    return {
        'start': {'line': rng.start.line, 'character': rng.start.character},
        'end': {'line': rng.end.line, 'character': rng.end.character},
    }


def node_to_dict(node: Node) -> dict[str, object]:
    """Convert ``node`` and its subtree to plain JSON-compatible data."""
    data: dict[str, object] = {
        'type': node.type.value,
        'offset': node.offset,
        'length': node.length,
        'range': range_to_dict(node.range),
    }
    if isinstance(node, ValueNode):
        data['value'] = node.value
    elif isinstance(node, InnerNode):
        data['children'] = [node_to_dict(child) for child in node.children]
    return data


def format_json(outcome: ParseOutcome, *, indent: int = 2) -> str:
    """Render the tree and errors of ``outcome`` as a JSON string.

    Args:
        outcome: A parse outcome.
        indent: JSON indentation level.

    Returns:
        A JSON document with ``root`` and ``errors`` keys.
    """
    data = {
        'root': None if outcome.root is None else node_to_dict(outcome.root),
        'errors': [
            {'error': error.error.value, 'offset': error.offset, 'length': error.length} for error in outcome.errors
        ],
    }
    return json.dumps(data, indent=indent, ensure_ascii=False) + '\n'


__all__ = ['format_json', 'node_to_dict', 'range_to_dict']
