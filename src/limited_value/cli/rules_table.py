"""``limited-value rules`` — list the textual rule syntax.

Renders :data:`~limited_value.core.rules.RULE_KINDS` as a Rich table,
falling back to aligned plain text on stderr when Rich is missing.
"""

from __future__ import annotations

import sys

from limited_value.cli import exit_codes
from limited_value.cli.console import console
from limited_value.core.rules import RULE_KINDS, RuleKind


def _rows(kinds: tuple[RuleKind, ...]) -> list[tuple[str, str, str]]:
    """Return (syntax, example, description) rows."""
    return [(k.syntax, k.example, k.description) for k in kinds]


def _print_plain_rules_table(rows: list[tuple[str, str, str]]) -> None:
    """Render the rule table without Rich."""
    print("\nlimited-value rules", file=sys.stderr)
    print("=" * 72, file=sys.stderr)
    print(f"{'Syntax':<16} {'Example':<24} Description", file=sys.stderr)
    print("-" * 72, file=sys.stderr)
    for syntax, example, description in rows:
        print(f"{syntax:<16} {example:<24} {description}", file=sys.stderr)
    print(file=sys.stderr)


def run_rules() -> int:
    """Render every supported rule kind and return ``SUCCESS``."""
    rows = _rows(RULE_KINDS)

    try:
        from rich.table import Table
        from rich.text import Text
    except ModuleNotFoundError:
        _print_plain_rules_table(rows)
        return exit_codes.SUCCESS

    table = Table(
        title="limited-value rules",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Syntax", style="bold", min_width=14, no_wrap=True)
    table.add_column("Example", min_width=16, no_wrap=True)
    table.add_column("Description")

    for syntax, example, description in rows:
        # Text cells are not parsed as markup; examples hold regex brackets.
        table.add_row(Text(syntax), Text(example), Text(description))

    console.print()
    console.print(table)
    console.print()
    console.print("Normalize input first with [bold]--strip[/bold] or [bold]--lower[/bold].")
    return exit_codes.SUCCESS
