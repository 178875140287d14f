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


"""Structured logging for commitparser.

The parser itself only emits ``debug`` events (token and line counts,
config resolution), so library users see nothing unless they opt in.
The CLI calls :func:`configure_logging` once at startup; events then go
to stderr through `structlog <https://www.structlog.org/>`_, either as
colored console lines or, with ``--json-log``, one JSON object per line.
stdout is left to the parse output so it can be piped::

    commitparser parse --format json msg.txt | jq .header
"""

from __future__ import annotations

import logging
import sys

import structlog


def level_for(*, verbose: bool = False, quiet: bool = False) -> int:
    """Map the CLI verbosity flags to a stdlib log level.

    ``quiet`` wins over ``verbose`` when both are given.
    """
    if quiet:
        return logging.WARNING
    if verbose:
        return logging.DEBUG
    return logging.INFO


def configure_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    json_log: bool = False,
) -> None:
    """Route structlog events through the stdlib root logger on stderr.

    Args:
        verbose: Show parser debug events.
        quiet: Only show warnings and errors.
        json_log: Render events as JSON instead of console lines.
    """
    logging.basicConfig(
        format='%(message)s',
        stream=sys.stderr,
        level=level_for(verbose=verbose, quiet=quiet),
        force=True,
    )

    renderer: structlog.types.Processor
    if json_log:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt='iso'),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )
    for handler in logging.root.handlers:
        handler.setFormatter(formatter)


def get_logger(name: str = 'commitparser') -> structlog.stdlib.BoundLogger:
    """Return a structlog logger bound to ``name``."""
    return structlog.get_logger(name)


__all__ = [
    'configure_logging',
    'get_logger',
    'level_for',
]
