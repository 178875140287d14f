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


"""CLI entry point for commitparser.

Subcommands::

    commitparser parse     Parse a commit message and print its tree
    commitparser explain   Explain an error code

Usage::

    # Tree view of the message being edited:
    commitparser parse .git/COMMIT_EDITMSG

    # Header, body and footers as JSON, from stdin:
    git log -1 --format=%B | commitparser parse --format outcome

    # Fail a hook when the message has parse errors:
    commitparser parse --fail-on-errors --strict .git/COMMIT_EDITMSG

    # Explain an error:
    commitparser explain CP-CONFIG-INVALID-KEY
"""

from __future__ import annotations

import argparse
import dataclasses
import sys
from pathlib import Path

from rich_argparse import RichHelpFormatter

from commitparser import __version__
from commitparser.config import load_options, load_options_file, options_from_mapping
from commitparser.errors import CommitParserError, E, explain, render_error
from commitparser.formatters import FORMATTERS, format_outcome
from commitparser.logging import configure_logging, get_logger
from commitparser.parsing import ParseOptions, parse_commit

logger = get_logger(__name__)


def _read_message(source: str) -> str:
    """Read the commit message from a path, or stdin for ``-``."""
    if source == '-':
        return sys.stdin.read()
    path = Path(source)
    try:
        return path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as exc:
        raise CommitParserError(
            code=E.INPUT_READ_FAILED,
            message=f'Failed to read {path}: {exc}',
        ) from exc


def _resolve_options(args: argparse.Namespace) -> ParseOptions:
    """Combine the config file with command-line overrides."""
    if args.config is not None:
        options = load_options_file(Path(args.config))
    else:
        options = load_options(Path.cwd())

    overrides: dict[str, object] = {}
    if args.strict:
        overrides['strict'] = True
    if args.comment_char is not None:
        overrides['comment_char'] = args.comment_char
    if not overrides:
        return options
    # Re-validate the merged values the same way a config file is.
    merged = {**dataclasses.asdict(options), **overrides}
    for key in ('issue_prefixes', 'note_keywords'):
        merged[key] = list(merged[key])
    merged = {key: value for key, value in merged.items() if value is not None}
    return options_from_mapping(merged, context='command line')


def _cmd_parse(args: argparse.Namespace) -> int:
    """Handle the ``parse`` subcommand."""
    options = _resolve_options(args)
    text = _read_message(args.file)
    outcome = parse_commit(text, options)
    if outcome.errors:
        logger.info(
            'parse_errors',
            count=len(outcome.errors),
            codes=sorted({error.error.value for error in outcome.errors}),
        )
    sys.stdout.write(format_outcome(outcome, fmt=args.format))
    if args.fail_on_errors and outcome.errors:
        return 1
    return 0


def _cmd_explain(args: argparse.Namespace) -> int:
    """Handle the ``explain`` subcommand."""
    result = explain(args.code)
    if result is None:
        print(f'Unknown error code: {args.code}')  # noqa: T201 - CLI output
        return 1
    print(result)  # noqa: T201 - CLI output
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser.

    Returns:
        Configured :class:`argparse.ArgumentParser`.
    """
    RichHelpFormatter.styles['argparse.groups'] = 'bold yellow'
    parser = argparse.ArgumentParser(
        prog='commitparser',
        description='Fault-tolerant conventional commit message parser.',
        formatter_class=RichHelpFormatter,
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}',
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        '--verbose',
        '-v',
        action='store_true',
        help='Show debug log events.',
    )
    verbosity.add_argument(
        '--quiet',
        '-q',
        action='store_true',
        help='Only log warnings and errors.',
    )
    parser.add_argument(
        '--json-log',
        action='store_true',
        help='Write log events to stderr as JSON lines.',
    )

    subparsers = parser.add_subparsers(dest='command')

    parse_parser = subparsers.add_parser(
        'parse',
        help='Parse a commit message and print the result.',
        formatter_class=RichHelpFormatter,
    )
    parse_parser.add_argument(
        'file',
        nargs='?',
        default='-',
        help="Commit message file, or '-' for stdin (default).",
    )
    parse_parser.add_argument(
        '--format',
        '-f',
        choices=sorted(FORMATTERS),
        default='tree',
        help='Output format (default: tree).',
    )
    parse_parser.add_argument(
        '--strict',
        action='store_true',
        help='Treat a header without description as a plain description.',
    )
    parse_parser.add_argument(
        '--comment-char',
        metavar='CHAR',
        default=None,
        help='Character that starts a comment line (default: #).',
    )
    parse_parser.add_argument(
        '--config',
        metavar='PATH',
        default=None,
        help='Options file to use instead of ./commitparser.toml.',
    )
    parse_parser.add_argument(
        '--fail-on-errors',
        action='store_true',
        help='Exit with status 1 when the message has parse errors.',
    )

    explain_parser = subparsers.add_parser(
        'explain',
        help='Explain an error code.',
        formatter_class=RichHelpFormatter,
    )
    explain_parser.add_argument('code', help='Error code, e.g. CP-CONFIG-INVALID-KEY.')

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point.

    Args:
        argv: Arguments to parse instead of ``sys.argv[1:]``.

    Returns:
        Exit code (0 for success, non-zero for failure).
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=args.verbose, quiet=args.quiet, json_log=args.json_log)

    try:
        if args.command == 'parse':
            return _cmd_parse(args)
        if args.command == 'explain':
            return _cmd_explain(args)

        parser.print_help()  # noqa: T201 - CLI output
        print(  # noqa: T201 - CLI output
            f'\n{parser.prog}: error: please provide a command',
            file=sys.stderr,
        )
        return 2

    except CommitParserError as exc:
        render_error(exc)
        return 1
    except KeyboardInterrupt:
        logger.info('interrupted')
        return 130


def _main() -> None:
    """Wrapper for pyproject.toml [project.scripts] entry point."""
    sys.exit(main())


__all__ = [
    'build_parser',
    'main',
]
