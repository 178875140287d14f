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


"""Hand-rolled scanner for commit messages.

Turns raw text into a stream of classified :class:`Token` values, each
carrying its absolute offset and length plus the line/character it starts
at. Scanning never fails: anything unrecognized becomes a single
character punctuation token.

Recognition order at each offset::

    whitespace → line break → comment start (column 0 only)
      → breaking-change literal (line start only) → issue reference
      → ( ) ! : → number → word → punctuation

Pure implementation: no I/O, no logging, no module-level mutable state.
"""

from __future__ import annotations

import unicodedata
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from commitparser.parsing._types import DEFAULT_PARSE_OPTIONS, ParseOptions


class SyntaxKind(Enum):
    """Kinds of tokens produced by the scanner."""

    WHITESPACE = 'whitespace'
    WORD = 'word'
    NUMBER = 'number'
    OPEN_PAREN = 'open-paren'
    CLOSE_PAREN = 'close-paren'
    EXCLAMATION_MARK = 'exclamation-mark'
    BREAKING_CHANGE_LITERAL = 'breaking-change-literal'
    COLON = 'colon'
    ISSUE_REFERENCE = 'issue-reference'
    LINE_BREAK = 'line-break'
    COMMENT_START = 'comment-start'
    PUNCTUATION = 'punctuation'
    EOF = 'eof'


class ScanError(Enum):
    """Problems attached to a token by the scanner."""

    NONE = 'none'
    INVALID_UNICODE = 'invalid-unicode'
    INVALID_CHARACTER = 'invalid-character'


@dataclass(frozen=True)
class Token:
    """A single scanned token.

    Attributes:
        kind: The token kind.
        value: The exact source text of the token.
        offset: Absolute offset of the first character.
        length: Number of characters consumed.
        line: Zero-based line the token starts on.
        character: Zero-based column the token starts at.
        error: Scanner problem flagged on this token.
    """

    kind: SyntaxKind
    value: str
    offset: int
    length: int
    line: int
    character: int
    error: ScanError = ScanError.NONE

    @property
    def end(self) -> int:
        """Offset one past the last character of the token."""
        return self.offset + self.length


_SINGLE_MARKS: dict[str, SyntaxKind] = {
    '(': SyntaxKind.OPEN_PAREN,
    ')': SyntaxKind.CLOSE_PAREN,
    '!': SyntaxKind.EXCLAMATION_MARK,
    ':': SyntaxKind.COLON,
}


def is_whitespace(ch: str) -> bool:
    """Return whether ``ch`` is a space or a tab."""
    return ch in (' ', '\t')


def is_line_break(ch: str) -> bool:
    """Return whether ``ch`` starts a line break."""
    return ch in ('\n', '\r')


def is_digit(ch: str) -> bool:
    """Return whether ``ch`` is an ASCII decimal digit."""
    return '0' <= ch <= '9'


def is_word_char(ch: str) -> bool:
    """Return whether ``ch`` is a letter, connector or dash punctuation."""
    category = unicodedata.category(ch)
    return category.startswith('L') or category in ('Pc', 'Pd')


def _is_surrogate(ch: str) -> bool:
    return unicodedata.category(ch) == 'Cs'


class Scanner:
    """Stateful scanner over a single text.

    Create one scanner per text; instances are not shared between
    parses. Use :func:`scan` or :func:`tokenize` unless you need to pull
    tokens one at a time.

    Args:
        text: The text to scan.
        options: Parse options controlling comments, issue references,
            note keywords and the breaking exclamation mark.
        breaking_exclamation_mark_allowed: Resolved value of the
            breaking exclamation mark option. When ``False``, ``!`` is
            scanned as plain punctuation.
    """

    def __init__(
        self,
        text: str,
        options: ParseOptions = DEFAULT_PARSE_OPTIONS,
        *,
        breaking_exclamation_mark_allowed: bool = True,
    ) -> None:
        """Initialize the scanner at the start of ``text``."""
        self._text = text
        self._len = len(text)
        self._pos = 0
        self._line = 0
        self._line_start = 0
        self._comment_char = options.comment_char if len(options.comment_char) == 1 else ''
        self._note_keywords = sorted((k for k in options.note_keywords if k), key=len, reverse=True)
        self._issue_prefixes = sorted((p for p in options.issue_prefixes if p), key=len, reverse=True)
        self._case_sensitive = options.issue_prefixes_case_sensitive
        self._exclamation_allowed = breaking_exclamation_mark_allowed

    @property
    def position(self) -> int:
        """Current absolute offset."""
        return self._pos

    def scan(self) -> Token:
        """Scan and return the next token. Returns ``EOF`` forever at the end."""
        start = self._pos
        line = self._line
        character = start - self._line_start

        if start >= self._len:
            return Token(SyntaxKind.EOF, '', self._len, 0, line, character)

        text = self._text
        ch = text[start]
        kind: SyntaxKind
        error = ScanError.NONE

        if is_whitespace(ch):
            end = start + 1
            while end < self._len and is_whitespace(text[end]):
                end += 1
            kind = SyntaxKind.WHITESPACE
        elif is_line_break(ch):
            end = start + 1
            if ch == '\r' and end < self._len and text[end] == '\n':
                end += 1
            kind = SyntaxKind.LINE_BREAK
        elif start == self._line_start and ch == self._comment_char:
            end = start + 1
            kind = SyntaxKind.COMMENT_START
        elif start == self._line_start and (keyword_end := self._match_note_keyword(start)):
            end = keyword_end
            kind = SyntaxKind.BREAKING_CHANGE_LITERAL
        elif issue_end := self._match_issue_reference(start):
            end = issue_end
            kind = SyntaxKind.ISSUE_REFERENCE
        elif ch in _SINGLE_MARKS and (ch != '!' or self._exclamation_allowed):
            end = start + 1
            kind = _SINGLE_MARKS[ch]
        elif is_digit(ch):
            end = self._scan_digits(start)
            kind = SyntaxKind.NUMBER
        elif is_word_char(ch):
            end = start + 1
            while end < self._len and is_word_char(text[end]):
                end += 1
            kind = SyntaxKind.WORD
        else:
            end = start + 1
            kind = SyntaxKind.PUNCTUATION
            if _is_surrogate(ch):
                error = ScanError.INVALID_UNICODE

        self._pos = end
        if kind is SyntaxKind.LINE_BREAK:
            self._line += 1
            self._line_start = end

        return Token(kind, text[start:end], start, end - start, line, character, error)

    def _scan_digits(self, start: int) -> int:
        end = start
        while end < self._len and is_digit(self._text[end]):
            end += 1
        return end

    def _match_note_keyword(self, start: int) -> int:
        """Return the end offset of the longest note keyword at ``start``, or 0."""
        for keyword in self._note_keywords:
            if self._text.startswith(keyword, start):
                return start + len(keyword)
        return 0

    def _match_issue_reference(self, start: int) -> int:
        """Return the end offset of an issue reference at ``start``, or 0.

        An issue reference is a configured prefix immediately followed by
        at least one digit; the whole digit run is part of the token.
        """
        for prefix in self._issue_prefixes:
            digits_start = start + len(prefix)
            if digits_start >= self._len or not is_digit(self._text[digits_start]):
                continue
            candidate = self._text[start:digits_start]
            if self._case_sensitive:
                matched = candidate == prefix
            else:
                matched = candidate.casefold() == prefix.casefold()
            if matched:
                return self._scan_digits(digits_start)
        return 0


def scan(
    text: str,
    options: ParseOptions = DEFAULT_PARSE_OPTIONS,
    *,
    breaking_exclamation_mark_allowed: bool = True,
) -> Iterator[Token]:
    """Yield the tokens of ``text``, ending with a single ``EOF`` token.

    Args:
        text: The text to scan.
        options: Parse options.
        breaking_exclamation_mark_allowed: Whether ``!`` is scanned as a
            breaking marker.

    Yields:
        Tokens in source order.
    """
    scanner = Scanner(text, options, breaking_exclamation_mark_allowed=breaking_exclamation_mark_allowed)
    while True:
        token = scanner.scan()
        yield token
        if token.kind is SyntaxKind.EOF:
            return


def tokenize(
    text: str,
    options: ParseOptions = DEFAULT_PARSE_OPTIONS,
    *,
    breaking_exclamation_mark_allowed: bool = True,
) -> list[Token]:
    """Return all tokens of ``text`` as a list, ``EOF`` included."""
    return list(scan(text, options, breaking_exclamation_mark_allowed=breaking_exclamation_mark_allowed))


__all__ = [
    'ScanError',
    'Scanner',
    'SyntaxKind',
    'Token',
    'is_digit',
    'is_line_break',
    'is_whitespace',
    'is_word_char',
    'scan',
    'tokenize',
]
