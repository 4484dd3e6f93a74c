"""Allow ``python -m limited_value`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m limited_value`` behaves identically to the
``limited-value`` console script.
"""

from __future__ import annotations

from limited_value.cli.app import cli

if __name__ == "__main__":
    cli()
