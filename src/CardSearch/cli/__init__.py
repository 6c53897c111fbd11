"""CLI package for CardSearch command orchestration."""

from __future__ import annotations

__all__ = ["CommandRunner", "main"]

from CardSearch.cli.runner import CommandRunner
from CardSearch.cli.ui import cli


def main() -> None:
    """Run CardSearch CLI.

    Entry point referenced by console script in pyproject.toml.
    """
    cli()
