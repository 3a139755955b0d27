"""Allow ``python -m cmdshell`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m cmdshell`` behaves identically to the ``cmdshell``
console script.
"""

from __future__ import annotations

from cmdshell.cli.app import cli

if __name__ == "__main__":
    cli()
