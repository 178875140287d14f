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


"""Tests for commitparser.config module."""

from __future__ import annotations

from pathlib import Path

import pytest

from commitparser.config import CONFIG_FILENAME, VALID_KEYS, load_options, load_options_file, options_from_mapping
from commitparser.errors import CommitParserError, E
from commitparser.parsing import ParseOptions


def _write_config(root: Path, content: str) -> Path:
    path = root / CONFIG_FILENAME
    path.write_text(content, encoding='utf-8')
    return path


class TestLoadOptions:
    """Tests for load_options()."""

    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        """Test missing file gives defaults."""
        assert load_options(tmp_path) == ParseOptions()

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        """Test empty file gives defaults."""
        _write_config(tmp_path, '')
        assert load_options(tmp_path) == ParseOptions()

    def test_all_keys(self, tmp_path: Path) -> None:
        """Test all keys."""
        _write_config(
            tmp_path,
            'comment_char = ";"\n'
            'issue_prefixes = ["#", "GH-"]\n'
            'issue_prefixes_case_sensitive = true\n'
            'note_keywords = ["BREAKING CHANGE", "DEPRECATED"]\n'
            'strict = true\n'
            'breaking_exclamation_mark_allowed = false\n'
            'header_pattern = "^(\\\\w*): (.*)$"\n',
        )
        options = load_options(tmp_path)
        assert options == ParseOptions(
            comment_char=';',
            issue_prefixes=('#', 'GH-'),
            issue_prefixes_case_sensitive=True,
            note_keywords=('BREAKING CHANGE', 'DEPRECATED'),
            strict=True,
            breaking_exclamation_mark_allowed=False,
            header_pattern=r'^(\w*): (.*)$',
        )

    def test_explicit_file(self, tmp_path: Path) -> None:
        """Test explicit file."""
        path = tmp_path / 'custom.toml'
        path.write_text('strict = true\n', encoding='utf-8')
        assert load_options_file(path).strict


class TestValidation:
    """Tests for config validation errors."""

    def test_unknown_key_suggests_closest(self, tmp_path: Path) -> None:
        """Test unknown key suggests closest."""
        _write_config(tmp_path, 'coment_char = ";"\n')
        with pytest.raises(CommitParserError) as excinfo:
            load_options(tmp_path)
        assert excinfo.value.code is E.CONFIG_INVALID_KEY
        assert "'comment_char'" in excinfo.value.hint

    def test_unknown_key_without_suggestion(self) -> None:
        """Test unknown key without suggestion."""
        with pytest.raises(CommitParserError) as excinfo:
            options_from_mapping({'zzz': 1})
        assert excinfo.value.code is E.CONFIG_INVALID_KEY
        assert 'Valid keys' in excinfo.value.hint

    def test_wrong_type(self) -> None:
        """Test wrong type."""
        with pytest.raises(CommitParserError) as excinfo:
            options_from_mapping({'strict': 'yes'})
        assert excinfo.value.code is E.CONFIG_INVALID_VALUE

    def test_list_items_must_be_strings(self) -> None:
        """Test list items must be strings."""
        with pytest.raises(CommitParserError) as excinfo:
            options_from_mapping({'issue_prefixes': ['#', 1]})
        assert excinfo.value.code is E.CONFIG_INVALID_VALUE
        with pytest.raises(CommitParserError):
            options_from_mapping({'note_keywords': ['']})

    def test_comment_char_must_be_single_character(self) -> None:
        """Test comment char must be single character."""
        with pytest.raises(CommitParserError) as excinfo:
            options_from_mapping({'comment_char': '//'})
        assert excinfo.value.code is E.CONFIG_INVALID_VALUE

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Test invalid toml."""
        _write_config(tmp_path, 'strict = \n')
        with pytest.raises(CommitParserError) as excinfo:
            load_options(tmp_path)
        assert excinfo.value.code is E.CONFIG_NOT_FOUND

    def test_unreadable_file(self, tmp_path: Path) -> None:
        """Test unreadable file."""
        with pytest.raises(CommitParserError) as excinfo:
            load_options_file(tmp_path / 'missing.toml')
        assert excinfo.value.code is E.CONFIG_NOT_FOUND

    def test_valid_keys_match_options(self) -> None:
        """Every ParseOptions field is configurable."""
        assert VALID_KEYS == {f for f in ParseOptions.__dataclass_fields__}
