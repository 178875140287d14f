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


"""Tests for the commitparser CLI."""

from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from commitparser import __version__
from commitparser.cli import build_parser, main


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test in an empty directory so no commitparser.toml leaks in."""
    monkeypatch.chdir(tmp_path)


def _message(tmp_path: Path, text: str) -> str:
    path = tmp_path / 'COMMIT_EDITMSG'
    path.write_text(text, encoding='utf-8')
    return str(path)


class TestBuildParser:
    """Tests for argument parsing."""

    def test_parse_defaults(self) -> None:
        """Test parse defaults."""
        args = build_parser().parse_args(['parse'])
        assert args.command == 'parse'
        assert args.file == '-'
        assert args.format == 'tree'
        assert not args.strict
        assert not args.fail_on_errors

    def test_unknown_format_rejected(self) -> None:
        """Test unknown format rejected."""
        with pytest.raises(SystemExit):
            build_parser().parse_args(['parse', '--format', 'yaml'])

    def test_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test version."""
        with pytest.raises(SystemExit):
            build_parser().parse_args(['--version'])
        assert __version__ in capsys.readouterr().out


class TestParseCommand:
    """Tests for ``commitparser parse``."""

    def test_outcome_from_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test outcome from file."""
        path = _message(tmp_path, 'feat(cli): add\n\nRefs #9\n')
        assert main(['parse', '--format', 'outcome', path]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data['header']['scope'] == 'cli'
        assert data['footers'] == [{'raw': 'Refs #9', 'token': 'Refs', 'value': '#9'}]

    def test_stdin(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
        """Test stdin."""
        monkeypatch.setattr('sys.stdin', io.StringIO('fix: y'))
        assert main(['parse']) == 0
        assert "word 'fix'" in capsys.readouterr().out

    def test_fail_on_errors(self, tmp_path: Path) -> None:
        """Test fail on errors."""
        path = _message(tmp_path, 'no colon')
        assert main(['parse', path]) == 0
        assert main(['parse', '--fail-on-errors', path]) == 1

    def test_strict_flag(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test strict flag."""
        path = _message(tmp_path, 'no colon')
        assert main(['parse', '--strict', '--format', 'outcome', path]) == 0
        header = json.loads(capsys.readouterr().out)['header']
        assert header['type'] is None
        assert header['description'] == 'no colon'

    def test_comment_char_flag(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test comment char flag."""
        path = _message(tmp_path, 'feat: x\n\n; hidden\nshown')
        assert main(['parse', '--comment-char', ';', '--format', 'outcome', path]) == 0
        assert json.loads(capsys.readouterr().out)['body'] == 'shown'

    def test_config_file_in_cwd(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test config file in cwd."""
        (tmp_path / 'commitparser.toml').write_text('comment_char = ";"\n', encoding='utf-8')
        path = _message(tmp_path, 'feat: x\n\n; hidden\nshown')
        assert main(['parse', '--format', 'outcome', path]) == 0
        assert json.loads(capsys.readouterr().out)['body'] == 'shown'

    def test_bad_config_renders_error(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test bad config renders error."""
        config = tmp_path / 'bad.toml'
        config.write_text('strcit = true\n', encoding='utf-8')
        path = _message(tmp_path, 'feat: x')
        assert main(['parse', '--config', str(config), path]) == 1
        err = capsys.readouterr().err
        assert 'CP-CONFIG-INVALID-KEY' in err
        assert "Did you mean 'strict'?" in err

    def test_invalid_comment_char_override(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test invalid comment char override."""
        path = _message(tmp_path, 'feat: x')
        assert main(['parse', '--comment-char', '//', path]) == 1
        assert 'CP-CONFIG-INVALID-VALUE' in capsys.readouterr().err

    def test_missing_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test missing file."""
        assert main(['parse', str(tmp_path / 'nope')]) == 1
        assert 'CP-INPUT-READ-FAILED' in capsys.readouterr().err


class TestOtherCommands:
    """Tests for ``explain`` and the no-command case."""

    def test_explain_known(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test explain known."""
        assert main(['explain', 'CP-FORMAT-UNKNOWN']) == 0
        assert capsys.readouterr().out.startswith('CP-FORMAT-UNKNOWN: ')

    def test_explain_unknown(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test explain unknown."""
        assert main(['explain', 'CP-NOPE']) == 1
        assert 'Unknown error code' in capsys.readouterr().out

    def test_no_command(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test no command."""
        assert main([]) == 2
        assert 'please provide a command' in capsys.readouterr().err
