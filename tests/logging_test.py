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


"""Tests for commitparser.logging module."""

from __future__ import annotations

import logging

from commitparser.logging import configure_logging, get_logger, level_for


class TestLevelFor:
    """Tests for level_for()."""

    def test_levels(self) -> None:
        """Test levels."""
        assert level_for() == logging.INFO
        assert level_for(verbose=True) == logging.DEBUG
        assert level_for(quiet=True) == logging.WARNING
        assert level_for(verbose=True, quiet=True) == logging.WARNING


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_default_level_is_info(self) -> None:
        """Default logging level should be INFO."""
        configure_logging()
        assert logging.root.level == logging.INFO

    def test_verbose_sets_debug(self) -> None:
        """Verbose flag should set DEBUG level."""
        configure_logging(verbose=True)
        assert logging.root.level == logging.DEBUG

    def test_quiet_sets_warning(self) -> None:
        """Quiet flag should set WARNING level."""
        configure_logging(quiet=True)
        assert logging.root.level == logging.WARNING

    def test_json_log_does_not_crash(self) -> None:
        """JSON log mode should configure without errors."""
        configure_logging(json_log=True)
        get_logger().info('test_json', key='value')


class TestGetLogger:
    """Tests for get_logger()."""

    def test_returns_usable_logger(self) -> None:
        """get_logger should return a logger with the standard methods."""
        log = get_logger('commitparser.test')
        assert hasattr(log, 'info')
        assert hasattr(log, 'debug')
        assert hasattr(log, 'warning')
