"""Output renderers for command results.

Exports the OutputWriter base class and a factory that builds writers from
configuration.
"""

from __future__ import annotations

from CardSearch.config import AppConfig
from CardSearch.renderers.base import MultiOutputWriter, OutputWriter
from CardSearch.renderers.console import ConsoleOutputWriter, render_text
from CardSearch.renderers.json import JsonFileWriter, render_json


def create_output_writer(config: AppConfig) -> OutputWriter:
    """Create output writer based on config.

    Args:
        config: Application configuration.

    Returns:
        A writer that fans out to every configured format.
    """
    writers: list[OutputWriter] = []
    if "console" in config.output.formats:
        writers.append(ConsoleOutputWriter())
    if "json" in config.output.formats:
        writers.append(JsonFileWriter(config.output.base_dir, indent=config.output.json_indent))

    if not writers:
        raise ValueError("No output writers configured")
    return MultiOutputWriter(writers)


__all__ = [
    "OutputWriter",
    "ConsoleOutputWriter",
    "JsonFileWriter",
    "MultiOutputWriter",
    "render_json",
    "render_text",
    "create_output_writer",
]
