"""Allow ``python -m internity`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m internity`` behaves identically to the ``internity``
console script.
"""

from __future__ import annotations

from internity.cli.app import cli

if __name__ == "__main__":
    cli()
