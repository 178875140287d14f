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


"""Configuration reader for commitparser.

Reads ``commitparser.toml`` and returns validated
:class:`~commitparser.parsing.ParseOptions`. The file uses flat top-level
keys, one per option::

    # commitparser.toml
    comment_char = ";"
    issue_prefixes = ["#", "GH-"]
    note_keywords = ["BREAKING CHANGE", "BREAKING-CHANGE", "DEPRECATED"]
    strict = true

Key Concepts (ELI5)::

    ┌─────────────────────────┬────────────────────────────────────────────┐
    │ Concept                 │ ELI5 Explanation                           │
    ├─────────────────────────┼────────────────────────────────────────────┤
    │ ParseOptions            │ The knobs of the parser: which character   │
    │                         │ starts a comment, what an issue ref looks  │
    │                         │ like, which keywords mark a breaking note. │
    ├─────────────────────────┼────────────────────────────────────────────┤
    │ load_options()          │ Find commitparser.toml in a directory and  │
    │                         │ turn it into ParseOptions.                 │
    ├─────────────────────────┼────────────────────────────────────────────┤
    │ Fuzzy key matching      │ If you typo a key, we suggest the closest  │
    │                         │ valid one ("did you mean?").               │
    └─────────────────────────┴────────────────────────────────────────────┘

A missing file is not an error: the defaults apply.
"""

from __future__ import annotations

import dataclasses
import difflib
from pathlib import Path
from typing import Any

import tomlkit
import tomlkit.exceptions

from commitparser.errors import CommitParserError, E
from commitparser.logging import get_logger
from commitparser.parsing import ParseOptions

logger = get_logger(__name__)

CONFIG_FILENAME = 'commitparser.toml'

_TYPE_MAP: dict[str, type | tuple[type, ...]] = {
    'comment_char': str,
    'issue_prefixes': list,
    'issue_prefixes_case_sensitive': bool,
    'note_keywords': list,
    'strict': bool,
    'breaking_exclamation_mark_allowed': bool,
    'header_pattern': str,
}

VALID_KEYS: frozenset[str] = frozenset(_TYPE_MAP)

_LIST_KEYS: frozenset[str] = frozenset({'issue_prefixes', 'note_keywords'})


def _suggest_key(unknown: str) -> str | None:
    """Return the closest valid key for a typo, or None."""
    matches = difflib.get_close_matches(unknown, VALID_KEYS, n=1, cutoff=0.6)
    return matches[0] if matches else None


def _validate_value_type(key: str, value: Any, context: str) -> None:  # noqa: ANN401 - dynamic config values
    """Raise if a config value has the wrong type."""
    expected = _TYPE_MAP[key]
    if not isinstance(value, expected):
        type_name = expected.__name__ if isinstance(expected, type) else str(expected)
        raise CommitParserError(
            code=E.CONFIG_INVALID_VALUE,
            message=f"'{key}' must be {type_name}, got {type(value).__name__}",
            hint=f'Check the value of {key} in {context}.',
        )


def _validate_string_list(key: str, items: list[object], context: str) -> None:
    """Raise if a list option is empty-stringed or holds non-strings."""
    for item in items:
        if not isinstance(item, str) or not item:
            raise CommitParserError(
                code=E.CONFIG_INVALID_VALUE,
                message=f"'{key}' items must be non-empty strings, got {item!r}",
                hint=f'Each {key} entry in {context} should be a quoted string.',
            )


def _validate_comment_char(value: str, context: str) -> None:
    if len(value) != 1:
        raise CommitParserError(
            code=E.CONFIG_INVALID_VALUE,
            message=f"'comment_char' must be a single character, got {value!r}",
            hint=f'Set comment_char to one character such as "#" or ";" in {context}.',
        )


def options_from_mapping(raw: dict[str, Any], *, context: str = CONFIG_FILENAME) -> ParseOptions:  # noqa: ANN401
    """Validate a flat mapping of option values and build :class:`ParseOptions`.

    Args:
        raw: Key/value pairs as read from the TOML document.
        context: Name used in error hints.

    Raises:
        CommitParserError: On unknown keys or badly typed values.
    """
    for key in raw:
        if key not in VALID_KEYS:
            suggestion = _suggest_key(key)
            raise CommitParserError(
                code=E.CONFIG_INVALID_KEY,
                message=f"Unknown key '{key}' in {context}",
                hint=f"Did you mean '{suggestion}'?" if suggestion else f'Valid keys: {", ".join(sorted(VALID_KEYS))}.',
            )

    kwargs: dict[str, Any] = {}  # noqa: ANN401
    for key, value in raw.items():
        _validate_value_type(key, value, context)
        if key in _LIST_KEYS:
            _validate_string_list(key, value, context)
            value = tuple(value)
        kwargs[key] = value

    if 'comment_char' in kwargs:
        _validate_comment_char(kwargs['comment_char'], context)

    return ParseOptions(**kwargs)


def load_options_file(path: Path) -> ParseOptions:
    """Load and validate options from an explicit TOML file.

    Args:
        path: Path to the TOML file.

    Returns:
        Validated :class:`ParseOptions`.

    Raises:
        CommitParserError: If the file cannot be read or parsed, or
            contains invalid options.
    """
    try:
        text = path.read_text(encoding='utf-8')
    except OSError as exc:
        raise CommitParserError(
            code=E.CONFIG_NOT_FOUND,
            message=f'Failed to read {path}: {exc}',
        ) from exc

    try:
        doc = tomlkit.parse(text)
    except tomlkit.exceptions.TOMLKitError as exc:
        raise CommitParserError(
            code=E.CONFIG_NOT_FOUND,
            message=f'Failed to parse {path}: {exc}',
        ) from exc

    options = options_from_mapping(doc.unwrap(), context=path.name)
    logger.debug('config_loaded', path=str(path), options=dataclasses.asdict(options))
    return options


def load_options(root: Path) -> ParseOptions:
    """Load ``commitparser.toml`` from ``root``, or the defaults if absent."""
    config_path = root / CONFIG_FILENAME
    if not config_path.is_file():
        logger.debug('no_commitparser_config', path=str(config_path))
        return ParseOptions()
    return load_options_file(config_path)


__all__ = [
    'CONFIG_FILENAME',
    'VALID_KEYS',
    'load_options',
    'load_options_file',
    'options_from_mapping',
]
