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


"""JSON rendering of the string projection of a parse.

This is the shape changelog and release tooling usually want: header
parts, body text and footers, without positions.
"""

from __future__ import annotations

import dataclasses
import json

from commitparser.parsing import ParseOutcome


def format_outcome_json(outcome: ParseOutcome, *, indent: int = 2) -> str:
    """Render the header, body and footers of ``outcome`` as JSON."""
    data = {
        'header': None if outcome.header is None else dataclasses.asdict(outcome.header),
        'body': outcome.body,
        'footers': [dataclasses.asdict(footer) for footer in outcome.footers],
        'errors': [error.error.value for error in outcome.errors],
    }
    return json.dumps(data, indent=indent, ensure_ascii=False) + '\n'


__all__ = ['format_outcome_json']
