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


"""Fault-tolerant conventional commit message parsing.

The pipeline has three stages, each a plain function over the previous
stage's result::

    text ──scan──▶ tokens ──parse_line_wise──▶ line-wise tree
         ──transform──▶ message tree ──build_outcome──▶ ParseOutcome

The accessor functions re-exported here are the read-only API for
anything that walks the finished tree.

Usage::

    from commitparser.parsing import NodeType, get_first_node_of_type, parse_commit

    outcome = parse_commit('feat(api)!: drop v1\n\nBREAKING CHANGE: gone')
    assert outcome.header.scope == 'api'
    assert outcome.footers[0].token == 'BREAKING CHANGE'
    scope = get_first_node_of_type(outcome.root, NodeType.SCOPE)
"""

from commitparser.parsing._accessors import (
    LOOKUP_STRATEGIES,
    LookupStrategy,
    children_of,
    contains,
    does_config_allow_breaking_exclamation_mark,
    find_node_at_offset,
    get_first_node_of_type,
    get_last_node_of_type,
    get_node_path,
    get_range_for_commit_position,
    get_string_content_of_node,
    iter_leaves,
    iter_nodes,
    position_at,
)
from commitparser.parsing._parser import CommitMessageParser
from commitparser.parsing._types import (
    DEFAULT_PARSE_OPTIONS,
    FooterOutcome,
    HeaderOutcome,
    InnerNode,
    MessageNode,
    Node,
    NodeType,
    ParseError,
    ParseErrorCode,
    ParseOptions,
    ParseOutcome,
    Position,
    Range,
    ValueNode,
)

_DEFAULT_PARSER = CommitMessageParser()


def parse_commit(text: str, options: ParseOptions | None = None) -> ParseOutcome:
    """Parse a full commit message.

    Convenience wrapper around :meth:`CommitMessageParser.parse`.

    Args:
        text: The commit message.
        options: Parse options, defaults when ``None``.

    Returns:
        The :class:`ParseOutcome` for ``text``.
    """
    if options is None:
        return _DEFAULT_PARSER.parse(text)
    return CommitMessageParser(options).parse(text)


parse = parse_commit


__all__ = [
    'DEFAULT_PARSE_OPTIONS',
    'LOOKUP_STRATEGIES',
    'CommitMessageParser',
    'FooterOutcome',
    'HeaderOutcome',
    'InnerNode',
    'LookupStrategy',
    'MessageNode',
    'Node',
    'NodeType',
    'ParseError',
    'ParseErrorCode',
    'ParseOptions',
    'ParseOutcome',
    'Position',
    'Range',
    'ValueNode',
    'children_of',
    'contains',
    'does_config_allow_breaking_exclamation_mark',
    'find_node_at_offset',
    'get_first_node_of_type',
    'get_last_node_of_type',
    'get_node_path',
    'get_range_for_commit_position',
    'get_string_content_of_node',
    'iter_leaves',
    'iter_nodes',
    'parse',
    'parse_commit',
    'position_at',
]
