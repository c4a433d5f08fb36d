"""CLI entry-point for elm_docstyle.

Usage:
    elm-docstyle <elm_code_directory | path_to_elm_file> [...]
    elm-docstyle src --check_all --verbose
    elm-docstyle src --config_path docstyle.json --format json
    python -m elm_docstyle --version
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable

from elm_docstyle import __version__
from elm_docstyle.core.config import (
    RunConfig,
    log_level_from_env,
    poll_interval_from_env,
    timeout_from_env,
)
from elm_docstyle.core.exclusions import load_exclusions
from elm_docstyle.core.runner import run_lint
from elm_docstyle.engine import Engine
from elm_docstyle.errors import DocstyleError
from elm_docstyle.model import OutputFormat
from elm_docstyle.model.options import EngineOptions
from elm_docstyle.reports.aggregate import exit_code_for
from elm_docstyle.reports.render import render
from elm_docstyle.utils.exit_codes import ExitCode

logger = logging.getLogger("elm_docstyle")

EngineFactory = Callable[[EngineOptions], Engine]

NO_ROOTS_MESSAGE = "Please specify at least one directory or path to Elm source file."


class _ArgumentParser(argparse.ArgumentParser):
    """argparse with the single failure exit code used by this CLI."""

    def error(self, message: str):  # type: ignore[override]
        self.print_usage(sys.stdout)
        print(f"{self.prog}: error: {message}")
        raise SystemExit(ExitCode.FAILURE)


def _build_parser() -> argparse.ArgumentParser:
    p = _ArgumentParser(
        prog="elm-docstyle",
        usage="%(prog)s [elm_code_directory | path_to_elm_file] [options]",
        description="Check the documentation style of Elm modules.",
        add_help=False,
    )
    p.add_argument(
        "roots",
        nargs="*",
        metavar="path",
        help="Elm source file or directory to check (searched recursively).",
    )
    p.add_argument(
        "-h",
        "--help",
        action="store_true",
        default=False,
        help="Print the help output.",
    )
    p.add_argument(
        "-v",
        "--version",
        action="store_true",
        default=False,
        help="Print the package version.",
    )
    p.add_argument(
        "--verbose",
        action="store_true",
        default=False,
        help="If set, the offending comments are added to the error report in full.",
    )
    p.add_argument(
        "--check_all",
        action="store_true",
        default=False,
        help=(
            "If set, all the function declarations are checked (including the "
            "non-exported ones). Otherwise, only the exported function "
            "declarations are checked."
        ),
    )
    p.add_argument(
        "--config_path",
        default=None,
        help="Path to the elm-docstyle JSON config. If unspecified, a default config is used.",
    )
    p.add_argument(
        "--format",
        dest="output_format",
        default=OutputFormat.HUMAN.value,
        help='Output format ("human" or "json"). The default is "human".',
    )
    return p


def _default_engine_factory(options: EngineOptions) -> Engine:
    from elm_docstyle.engine.subprocess_engine import SubprocessEngine, resolve_command

    return SubprocessEngine(resolve_command(), options)


def _configure_logging() -> None:
    logging.basicConfig(
        level=log_level_from_env(),
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _output_format(raw: str) -> OutputFormat:
    fmt = OutputFormat.parse(raw)
    if fmt is None:
        logger.warning("Unknown --format %r; falling back to 'human'", raw)
        return OutputFormat.HUMAN
    return fmt


def _run(args: argparse.Namespace, engine_factory: EngineFactory) -> int:
    fmt = _output_format(args.output_format)
    exclusions = load_exclusions(args.config_path)
    config = RunConfig(
        roots=tuple(args.roots),
        exclusions=exclusions,
        engine_options=EngineOptions(
            format=fmt,
            verbose=args.verbose,
            excluded_checks=tuple(sorted(exclusions.excluded_checks)),
            check_all_definitions=args.check_all,
        ),
        poll_interval=poll_interval_from_env(),
        timeout=timeout_from_env(),
    )

    engine = engine_factory(config.engine_options)
    try:
        outcome = run_lint(config, engine)
    finally:
        engine.close()

    print(render(outcome, fmt), end="")
    return exit_code_for(outcome)


def main(
    argv: list[str] | None = None,
    *,
    engine_factory: EngineFactory | None = None,
) -> int:
    """Entry-point — returns an exit code (0 = clean or version, 1 otherwise)."""
    parser = _build_parser()
    args = parser.parse_intermixed_args(list(argv) if argv is not None else sys.argv[1:])

    if args.help:
        print(parser.format_help(), end="")
        return ExitCode.FAILURE

    if args.version:
        print(__version__)
        return ExitCode.SUCCESS

    if not args.roots:
        print(NO_ROOTS_MESSAGE + "\n")
        print(parser.format_help(), end="")
        return ExitCode.FAILURE

    try:
        _configure_logging()
        return _run(args, engine_factory or _default_engine_factory)
    except DocstyleError as exc:
        print(exc)
        return ExitCode.FAILURE


if __name__ == "__main__":
    raise SystemExit(main())
