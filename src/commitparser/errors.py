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


"""Structured error system for commitparser.

Malformed commit text never raises: the parser accumulates
:class:`~commitparser.parsing.ParseError` values instead. The exceptions
defined here cover everything else: invalid configuration, unreadable
input, unknown output formats and internal invariant violations.

Every error has a unique ``CP-NAMED-KEY`` code, a human-readable message,
and an optional hint with a suggested fix.

Key Concepts (ELI5)::

    ┌─────────────────────┬────────────────────────────────────────────────┐
    │ Concept             │ ELI5 Explanation                               │
    ├─────────────────────┼────────────────────────────────────────────────┤
    │ ErrorCode           │ A unique named ID like "CP-CONFIG-INVALID-KEY" │
    │                     │ for each error. Readable at a glance.          │
    ├─────────────────────┼────────────────────────────────────────────────┤
    │ ErrorInfo           │ A bundle of code + message + hint. Like an     │
    │                     │ error card with a fix suggestion stapled on.   │
    ├─────────────────────┼────────────────────────────────────────────────┤
    │ CommitParserError   │ An exception you can raise. Carries the        │
    │                     │ error card so renderers can display it.        │
    ├─────────────────────┼────────────────────────────────────────────────┤
    │ ERRORS catalog      │ Pre-built error cards for common mistakes.     │
    ├─────────────────────┼────────────────────────────────────────────────┤
    │ explain()           │ Looks up an error code and prints details.     │
    └─────────────────────┴────────────────────────────────────────────────┘

Code categories::

    CP-CONFIG-*       Configuration errors
    CP-INPUT-*        Commit message input errors
    CP-FORMAT-*       Output format errors
    CP-INTERNAL-*     Parser defects (never caused by user input)

Usage::

    from commitparser.errors import CommitParserError, E

    raise CommitParserError(
        code=E.CONFIG_INVALID_KEY,
        message="Unknown key 'coment_char' in commitparser.toml",
        hint="Did you mean 'comment_char'?",
    )
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum
from typing import TextIO

from rich.console import Console
from rich.markup import escape as rich_escape


class ErrorCode(str, Enum):
    """Enumeration of all commitparser diagnostic codes."""

    # Configuration
    CONFIG_NOT_FOUND = 'CP-CONFIG-NOT-FOUND'
    CONFIG_INVALID_KEY = 'CP-CONFIG-INVALID-KEY'
    CONFIG_INVALID_VALUE = 'CP-CONFIG-INVALID-VALUE'

    # Input
    INPUT_READ_FAILED = 'CP-INPUT-READ-FAILED'

    # Output
    FORMAT_UNKNOWN = 'CP-FORMAT-UNKNOWN'

    # Defects
    INTERNAL_INVARIANT = 'CP-INTERNAL-INVARIANT'


# Convenience alias for shorter imports.
E = ErrorCode


@dataclass(frozen=True)
class ErrorInfo:
    """Metadata for a single error code.

    Attributes:
        code: The ``CP-NAMED-KEY`` error code.
        message: Human-readable description of what went wrong.
        hint: Optional suggestion for how to fix the error.
    """

    code: ErrorCode
    message: str
    hint: str = ''


class CommitParserError(Exception):
    """Base exception for all commitparser errors.

    Args:
        code: The error code from :class:`ErrorCode`.
        message: Human-readable description of what went wrong.
        hint: Optional suggestion for how to fix the error.
    """

    def __init__(self, code: ErrorCode, message: str, hint: str = '') -> None:
        """Initialize with an error code, message, and optional hint."""
        self.info = ErrorInfo(code=code, message=message, hint=hint)
        super().__init__(f'[{code.value}] {message}')

    @property
    def code(self) -> ErrorCode:
        """The error code."""
        return self.info.code

    @property
    def hint(self) -> str:
        """Suggestion for fixing this error, or empty string."""
        return self.info.hint


ERRORS: dict[ErrorCode, ErrorInfo] = {
    E.CONFIG_NOT_FOUND: ErrorInfo(
        code=E.CONFIG_NOT_FOUND,
        message='The commitparser configuration file could not be read.',
        hint='Check the path passed to --config and its permissions.',
    ),
    E.CONFIG_INVALID_KEY: ErrorInfo(
        code=E.CONFIG_INVALID_KEY,
        message='commitparser.toml contains an unknown key.',
        hint='Valid keys: comment_char, issue_prefixes, issue_prefixes_case_sensitive, '
        'note_keywords, strict, breaking_exclamation_mark_allowed, header_pattern.',
    ),
    E.CONFIG_INVALID_VALUE: ErrorInfo(
        code=E.CONFIG_INVALID_VALUE,
        message='A commitparser option has the wrong type or value.',
        hint='comment_char must be a single character; list options must hold strings.',
    ),
    E.INPUT_READ_FAILED: ErrorInfo(
        code=E.INPUT_READ_FAILED,
        message='The commit message could not be read.',
        hint="Pass a readable file, or '-' to read from stdin.",
    ),
    E.FORMAT_UNKNOWN: ErrorInfo(
        code=E.FORMAT_UNKNOWN,
        message='The requested output format does not exist.',
        hint='Use one of: tree, json, outcome.',
    ),
    E.INTERNAL_INVARIANT: ErrorInfo(
        code=E.INTERNAL_INVARIANT,
        message='The parser reached a state that valid scanner output cannot produce.',
        hint='This is a bug in commitparser. Please report it with the input message.',
    ),
}


def explain(code: str) -> str | None:
    """Return a detailed explanation for an error code.

    Args:
        code: The error code string, e.g. ``"CP-CONFIG-INVALID-KEY"``.

    Returns:
        A formatted explanation string, or ``None`` if the code is unknown.
    """
    try:
        error_code = ErrorCode(code)
    except ValueError:
        return None

    info = ERRORS.get(error_code)
    if info is None:
        return f'{code}: No detailed explanation available.'

    lines = [f'{code}: {info.message}']
    if info.hint:
        lines.append(f'  Hint: {info.hint}')
    return '\n'.join(lines)


def render_error(exc: CommitParserError, *, file: TextIO | None = None) -> None:
    """Render an error in Rust-compiler style with color.

    Output format::

        error[CP-CONFIG-INVALID-KEY]: Unknown key 'coment_char' in commitparser.toml
          |
          = hint: Did you mean 'comment_char'?

    Args:
        exc: The error to render.
        file: Output stream (defaults to ``sys.stderr``).
    """
    out = file or sys.stderr

    if out.isatty():
        console = Console(file=out, highlight=False)
        msg = rich_escape(exc.info.message)
        console.print(
            f'[bold red]error[/bold red][bold red]\\[{exc.code.value}][/bold red][bold]: {msg}[/bold]',
        )
        if exc.hint:
            hint = rich_escape(exc.hint)
            console.print('  [dim]|[/dim]')
            console.print(f'  [dim]=[/dim] [cyan]hint[/cyan]: {hint}')
        console.print()
    else:
        print(f'error[{exc.code.value}]: {exc.info.message}', file=out)  # noqa: T201 - CLI output
        if exc.hint:
            print('  |', file=out)  # noqa: T201 - CLI output
            print(f'  = hint: {exc.hint}', file=out)  # noqa: T201 - CLI output
        print(file=out)  # noqa: T201 - CLI output


__all__ = [
    'E',
    'ERRORS',
    'CommitParserError',
    'ErrorCode',
    'ErrorInfo',
    'explain',
    'render_error',
]
