"""Command-line interface for LaterLens."""

from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import click
from pydantic import ValidationError

from laterlens import __version__
from laterlens.config.config import Config, find_config_file
from laterlens.extractor import ContentExtractor, DocumentLoadError, FileDocumentSource, UrlDocumentSource
from laterlens.observability import MetricsRecorder, configure_logging


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False),
    help="Configuration file path (default: laterlens.yaml or laterlens.yml in the working directory)",
)
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"]),
    help="Logging level (overrides the configuration file)",
)
@click.pass_context
def cli(ctx: click.Context, config: Optional[str], log_level: Optional[str]) -> None:
    """LaterLens - main-content extraction for web page summarization."""
    ctx.ensure_object(dict)
    try:
        config_path = Path(config) if config else find_config_file()
        settings = Config.from_yaml(config_path) if config_path else Config()
    except ValidationError as e:
        raise click.UsageError(f"Invalid configuration: {e}") from e

    if log_level:
        monitoring = settings.monitoring.model_copy(update={"log_level": log_level})
        settings = settings.model_copy(update={"monitoring": monitoring})

    configure_logging(settings.monitoring)
    ctx.obj["config"] = settings


@cli.command()
@click.argument("source")
@click.option("--url", "is_url", is_flag=True, help="Treat SOURCE as a URL instead of a file path")
@click.option("--max-length", type=int, help="Maximum length of the extracted text")
@click.option("--min-length", type=int, help="Minimum length for the text to be considered valid")
@click.option("--max-paragraphs", type=int, help="Maximum number of paragraphs to keep")
@click.option("--no-headings", is_flag=True, help="Leave out the 'Main Topics' section")
@click.option("--no-lists", is_flag=True, help="Leave out the 'Key Points' section")
@click.option("--no-quotes", is_flag=True, help="Leave out the 'Notable Quotes' section")
@click.option("--json/--text", "as_json", default=True, help="Print the full result as JSON, or only the text")
@click.pass_context
def extract(
    ctx: click.Context,
    source: str,
    is_url: bool,
    max_length: Optional[int],
    min_length: Optional[int],
    max_paragraphs: Optional[int],
    no_headings: bool,
    no_lists: bool,
    no_quotes: bool,
    as_json: bool,
) -> None:
    """Extract summarization-ready content from a file or URL."""
    settings: Config = ctx.obj["config"]
    extraction = settings.extraction

    overrides: Dict[str, Any] = {
        key: value
        for key, value in {
            "max_content_length": max_length,
            "min_content_length": min_length,
            "max_paragraphs": max_paragraphs,
        }.items()
        if value is not None
    }
    if no_headings:
        overrides["include_headings"] = False
    if no_lists:
        overrides["include_lists"] = False
    if no_quotes:
        overrides["include_quotes"] = False

    if is_url:
        document = UrlDocumentSource(source, timeout=extraction.fetch_timeout, parser=extraction.parser)
    else:
        document = FileDocumentSource(source, parser=extraction.parser)

    extractor = ContentExtractor(extraction, metrics=MetricsRecorder(settings.monitoring.metrics_enabled))
    try:
        result = asyncio.run(extractor.extract_for_summarization(document, overrides))
    except ValidationError as e:
        raise click.UsageError(f"Invalid extraction options: {e}") from e
    except DocumentLoadError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    else:
        click.echo(result.summary_input)


@cli.command("config")
@click.pass_context
def show_config(ctx: click.Context) -> None:
    """Print the effective configuration."""
    settings: Config = ctx.obj["config"]
    click.echo(settings.model_dump_json(indent=2))


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
