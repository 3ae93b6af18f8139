"""Allow ``python -m dateconv`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m dateconv`` behaves identically to the ``dateconv``
console script.
"""

from __future__ import annotations

from dateconv.cli.app import cli

if __name__ == "__main__":
    cli()
