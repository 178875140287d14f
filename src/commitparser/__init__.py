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


"""Fault-tolerant conventional commit message parser.

Turns ``type(scope)!: description`` messages, with optional body,
trailer-style footers and comment lines, into a concrete syntax tree
with exact source positions for every token.
"""

from commitparser.parsing import (
    DEFAULT_PARSE_OPTIONS,
    CommitMessageParser,
    FooterOutcome,
    HeaderOutcome,
    NodeType,
    ParseError,
    ParseErrorCode,
    ParseOptions,
    ParseOutcome,
    parse,
    parse_commit,
)

__version__ = '0.1.0'

__all__ = [
    'DEFAULT_PARSE_OPTIONS',
    'CommitMessageParser',
    'FooterOutcome',
    'HeaderOutcome',
    'NodeType',
    'ParseError',
    'ParseErrorCode',
    'ParseOptions',
    'ParseOutcome',
    '__version__',
    'parse',
    'parse_commit',
]
