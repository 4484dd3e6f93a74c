"""CLI application entry point and command routing for limited-value.

This module is the **sole error boundary** for the command line.  It
catches :class:`~limited_value.exceptions.LimitedValueError`,
``KeyboardInterrupt`` and any unexpected ``Exception``, rendering
user-friendly messages and returning well-defined exit codes.

Commands
--------
* ``limited-value check RULE VALUE``         — validate one value
* ``limited-value convert FROM TO VALUE``    — validate, then re-validate
* ``limited-value rules``                    — list the rule syntax
* ``limited-value --version``

A rejected value is an expected outcome: it exits with
:data:`~limited_value.cli.exit_codes.VALUE_REJECTED`, not an error code.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable
from typing import Any

from limited_value.cli import exit_codes
from limited_value.cli.console import console
from limited_value.core.limited import define_limited
from limited_value.core.normalizers import chain, identity, lower, strip
from limited_value.core.rules import parse_number, parse_rule, rule_kind
from limited_value.exceptions import LimitedValueError
from limited_value.version import __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _add_normalizer_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--strip",
        action="store_true",
        help="Trim surrounding whitespace before checking.",
    )
    parser.add_argument(
        "--lower",
        action="store_true",
        help="Lower-case the value before checking.",
    )


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog="limited-value",
        description="Check values against limited-value rules.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output to stderr.",
    )
    commands = parser.add_subparsers(dest="command", metavar="COMMAND")

    check = commands.add_parser("check", help="Validate VALUE under RULE.")
    check.add_argument("rule", help="Rule such as 'max-length:5' (see 'rules').")
    check.add_argument("value", help="Raw value to validate.")
    _add_normalizer_flags(check)

    convert = commands.add_parser(
        "convert",
        help="Validate VALUE under SOURCE, then convert it to TARGET.",
    )
    convert.add_argument("source", help="Rule the value is created under.")
    convert.add_argument("target", help="Rule the value is converted into.")
    convert.add_argument("value", help="Raw value to validate.")
    _add_normalizer_flags(convert)

    commands.add_parser("rules", help="List the supported rule syntax.")
    return parser


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _normalizer(args: argparse.Namespace) -> Callable[[Any], Any]:
    """Build the normalizer selected by ``--strip`` / ``--lower``."""
    return chain(
        strip if args.strip else identity,
        lower if args.lower else identity,
    )


def _coerce(rule: str, text: str) -> Any:
    """Turn command-line *text* into the payload type *rule* checks.

    Numeric rules receive a number when *text* parses as one; otherwise
    the text is passed through and the rule rejects it.
    """
    if rule_kind(rule).numeric:
        number = parse_number(text)
        if number is not None:
            return number
    return text


def _report_rejection(raw: Any, rule_name: str) -> int:
    console.print("[bold red]Rejected[/bold red]")
    console.print(f"{raw!r} does not satisfy {rule_name}", markup=False)
    return exit_codes.VALUE_REJECTED


def _report_acceptance(payload: Any) -> int:
    console.print("[bold green]Accepted[/bold green]")
    # The canonical payload is the command's output; status goes to stderr.
    print(payload)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_check(args: argparse.Namespace) -> int:
    """Validate one value and print its canonical form."""
    validator = parse_rule(args.rule, normalize=_normalizer(args))
    tag = define_limited("Checked", validator, module=__name__)
    raw = _coerce(args.rule, args.value)

    created = tag.create(raw)
    if created is None:
        return _report_rejection(raw, validator.name)
    return _report_acceptance(created.extract())


def _handle_convert(args: argparse.Namespace) -> int:
    """Create a value under one rule and convert it into another."""
    normalize = _normalizer(args)
    source = define_limited(
        "Source", parse_rule(args.source, normalize=normalize), module=__name__,
    )
    target = define_limited(
        "Target", parse_rule(args.target, normalize=normalize), module=__name__,
    )
    raw = _coerce(args.source, args.value)

    created = source.create(raw)
    if created is None:
        return _report_rejection(raw, source.validator.name)

    converted = created.convert_to(target)
    if converted is None:
        return _report_rejection(created.extract(), target.validator.name)
    return _report_acceptance(converted.extract())


def _handle_rules() -> int:
    """Dispatch the ``rules`` listing command."""
    from limited_value.cli.rules_table import run_rules

    return run_rules()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the limited-value CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )

    logger.debug("Dispatching command %s", args.command)

    if args.command == "check":
        return _handle_check(args)
    if args.command == "convert":
        return _handle_convert(args)
    if args.command == "rules":
        return _handle_rules()

    parser.print_help()
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except LimitedValueError as exc:
        console.print("[bold red]Error:[/bold red]")
        console.print(str(exc), markup=False)
        if exc.hint:
            console.print("[yellow]Hint:[/yellow]")
            console.print(exc.hint, markup=False)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print("[bold red]Unexpected error.[/bold red] Please report this issue.")
        console.print(f"  {type(exc).__name__}: {exc}", markup=False)
        sys.exit(exit_codes.UNEXPECTED_ERROR)
