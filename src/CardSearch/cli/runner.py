"""Command runner for coordinating CLI execution.

Manages component lifecycle, logging configuration and error handling for
command execution.
"""

from __future__ import annotations

from typing import Callable, Optional, Protocol

import click

from CardSearch.cli.commands import NamedCommand, RandomCommand, SearchCommand
from CardSearch.config import AppConfig
from CardSearch.core.errors import ServiceError
from CardSearch.renderers import OutputWriter, create_output_writer
from CardSearch.services import create_search_service
from CardSearch.services.search import CardSearchService
from CardSearch.utils.log import configure_logging, log


class Command(Protocol):
    def execute(self) -> None: ...


CommandBuilder = Callable[[CardSearchService, OutputWriter], Command]


class CommandRunner:
    """Orchestrates command execution with proper resource management."""

    def __init__(self, config: AppConfig) -> None:
        """Initialize command runner.

        Args:
            config: Application configuration.
        """
        self.config = config

    def run_search(self, action: str, query: str, *, limit: Optional[int] = None) -> None:
        """Execute the search command.

        Raises:
            click.Abort: When the search fails.
        """
        self._run(
            action,
            lambda service, writer: SearchCommand(
                config=self.config,
                search_service=service,
                output_writer=writer,
                query=query,
                limit=limit,
            ),
        )

    def run_random(self, action: str, query: Optional[str]) -> None:
        """Execute the random command.

        Raises:
            click.Abort: When the lookup fails.
        """
        self._run(
            action,
            lambda service, writer: RandomCommand(
                config=self.config,
                search_service=service,
                output_writer=writer,
                query=query,
            ),
        )

    def run_named(self, action: str, name: str, *, fuzzy: bool, set_code: Optional[str]) -> None:
        """Execute the named command.

        Raises:
            click.Abort: When the lookup fails.
        """
        self._run(
            action,
            lambda service, writer: NamedCommand(
                search_service=service,
                output_writer=writer,
                name=name,
                fuzzy=fuzzy,
                set_code=set_code,
            ),
        )

    def _run(self, action: str, build: CommandBuilder) -> None:
        configure_logging(
            level=self.config.runtime.level,
            action=action,
            log_to_file=self.config.runtime.to_file,
            log_dir=self.config.runtime.dir,
        )
        try:
            search_service = create_search_service(self.config)
            output_writer = create_output_writer(self.config)
            with search_service:
                build(search_service, output_writer).execute()
            output_writer.finalize(action)
        except ServiceError as e:
            log.error("%s failed: %s", action.capitalize(), e)
            for warning in e.warnings:
                log.warning("Service warning: %s", warning)
            raise click.Abort from e
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("%s failed: %s", action.capitalize(), e)
            raise click.Abort from e
