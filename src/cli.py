"""Click CLI that streams a channel's full message history as a JSON array."""

from __future__ import annotations

import logging
import sys
from typing import BinaryIO

import click

from src.config import Configuration
from src.emitter.stream import emit_json_array
from src.errors import HistoryExportError
from src.slack.paginator import SlackPaginator

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@click.command()
@click.option(
    "--output",
    type=click.File("wb"),
    default="-",
    help="Destination for the JSON array (default: stdout).",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    help="Log verbosity on stderr.",
)
def cli(output: BinaryIO, log_level: str) -> None:
    """Stream the entire history of $CHANNEL using $API_TOKEN."""
    logging.basicConfig(level=log_level.upper(), format=_LOG_FORMAT, stream=sys.stderr)
    try:
        configuration = Configuration.from_env()
        with SlackPaginator(configuration) as paginator:
            count = emit_json_array(paginator.messages(), output)
    except HistoryExportError as exc:
        raise click.ClickException(str(exc)) from exc
    except OSError as exc:
        raise click.ClickException(f"Failed writing output: {exc}") from exc
    logger.info(
        "Exported %d messages from %s in %d pages",
        count, configuration.channel, paginator.pages_fetched,
    )
