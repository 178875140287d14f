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


"""Tests for commitparser.errors module."""

from __future__ import annotations

import dataclasses
import io

import pytest

from commitparser.errors import (
    ERRORS,
    CommitParserError,
    E,
    ErrorCode,
    ErrorInfo,
    explain,
    render_error,
)


class TestErrorCode:
    """Tests for ErrorCode enum."""

    def test_all_codes_have_cp_prefix(self) -> None:
        """Every error code must start with 'CP-'."""
        for code in ErrorCode:
            assert code.value.startswith('CP-'), f'{code.name} does not start with CP-'

    def test_no_duplicate_values(self) -> None:
        """Error code values must be unique."""
        values = [c.value for c in ErrorCode]
        assert len(values) == len(set(values)), 'Duplicate error code values found'

    def test_e_alias(self) -> None:
        """E should be an alias for ErrorCode."""
        assert E is ErrorCode
        assert E.CONFIG_NOT_FOUND is ErrorCode.CONFIG_NOT_FOUND


class TestErrorInfo:
    """Tests for ErrorInfo dataclass."""

    def test_frozen(self) -> None:
        """ErrorInfo instances should be immutable."""
        info = ErrorInfo(code=E.CONFIG_NOT_FOUND, message='test')
        with pytest.raises(dataclasses.FrozenInstanceError):
            info.message = 'changed'  # type: ignore[misc]

    def test_default_hint(self) -> None:
        """Hint should default to empty string."""
        assert ErrorInfo(code=E.CONFIG_NOT_FOUND, message='test').hint == ''


class TestCommitParserError:
    """Tests for CommitParserError exception."""

    def test_message_includes_code(self) -> None:
        """Exception message should include the code."""
        err = CommitParserError(code=E.CONFIG_INVALID_KEY, message='test message')
        assert 'CP-CONFIG-INVALID-KEY' in str(err)
        assert 'test message' in str(err)

    def test_code_and_hint(self) -> None:
        """Code and hint properties read through to the ErrorInfo."""
        err = CommitParserError(code=E.INPUT_READ_FAILED, message='missing', hint='check path')
        assert err.code is E.INPUT_READ_FAILED
        assert err.hint == 'check path'
        assert isinstance(err.info, ErrorInfo)

    def test_hint_default_empty(self) -> None:
        """Hint should default to empty string."""
        assert CommitParserError(code=E.CONFIG_NOT_FOUND, message='missing').hint == ''


class TestErrorCatalog:
    """Tests for the ERRORS catalog."""

    def test_every_code_has_an_entry(self) -> None:
        """Test every code has an entry."""
        assert set(ERRORS) == set(ErrorCode)

    def test_catalog_entries_have_messages(self) -> None:
        """Every catalog entry should have a non-empty message."""
        for code, info in ERRORS.items():
            assert info.message, f'{code.value} has empty message'
            assert info.code is code


class TestExplain:
    """Tests for the explain() function."""

    def test_known_code(self) -> None:
        """Explain should return a message for known codes."""
        result = explain('CP-CONFIG-INVALID-KEY')
        assert result is not None
        assert result.startswith('CP-CONFIG-INVALID-KEY: ')
        assert 'Hint:' in result

    def test_unknown_code(self) -> None:
        """Explain should return None for invalid code strings."""
        assert explain('CP-NOPE') is None


class TestRenderError:
    """Tests for render_error()."""

    def test_plain_output(self) -> None:
        """Non-TTY streams get plain text."""
        out = io.StringIO()
        render_error(CommitParserError(code=E.CONFIG_INVALID_KEY, message='bad key', hint='fix it'), file=out)
        assert out.getvalue() == 'error[CP-CONFIG-INVALID-KEY]: bad key\n  |\n  = hint: fix it\n\n'

    def test_plain_output_without_hint(self) -> None:
        """Test plain output without hint."""
        out = io.StringIO()
        render_error(CommitParserError(code=E.FORMAT_UNKNOWN, message='nope'), file=out)
        assert out.getvalue() == 'error[CP-FORMAT-UNKNOWN]: nope\n\n'
