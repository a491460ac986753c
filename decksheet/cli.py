#!/usr/bin/env python3
"""keyforge-sheet - download a KeyForge deck as a single sheet image."""

import logging
import sys
from dataclasses import replace
from pathlib import Path

import click

from decksheet import __version__
from decksheet.client import KeyforgeClient
from decksheet.config import load_settings
from decksheet.console import (
    is_valid_file_path,
    prompt,
    prompt_file,
    prompt_yes_no,
    show_exception,
)
from decksheet.display import ProgressDisplay
from decksheet.errors import DeckSheetError
from decksheet.pipeline import download_deck
from decksheet.progress import ProgressChannel

logger = logging.getLogger(__name__)


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


@click.command()
@click.version_option(version=__version__)
@click.argument("deck", required=False)
@click.option("-o", "--output", type=click.Path(dir_okay=False), help="Image file to write (format from extension)")
@click.option("-y", "--yes", is_flag=True, help="Overwrite the output file without asking")
@click.option("--timeout", type=click.FloatRange(min=0), help="Request timeout in seconds (0 = none)")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr")
@click.pass_context
def cli(ctx, deck, output, yes, timeout, verbose):
    """Download every card in DECK and save them as one grid image.

    DECK is a deck id (xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx) or a deck URL
    containing one. Missing arguments are asked for interactively.
    """
    try:
        settings = load_settings()
    except DeckSheetError as e:
        show_exception(e)
        ctx.exit(1)

    _setup_logging("DEBUG" if verbose else settings.log_level)
    if timeout is not None:
        settings = replace(settings, timeout=timeout or None)

    if not deck:
        deck = prompt("Enter a deck id").strip()
        if not deck:
            return

    if not output:
        output = prompt_file("Save to image file")
        if not output:
            return
    elif Path(output).is_file():
        if not yes and not prompt_yes_no("Overwrite this file", False):
            return
    elif not is_valid_file_path(output):
        click.echo("Invalid file path", err=True)
        ctx.exit(1)

    display = ProgressDisplay()
    try:
        with KeyforgeClient(settings) as client:
            path = download_deck(deck, output, ProgressChannel(display), client)
    except DeckSheetError as e:
        display.finish()
        logger.debug("Deck download failed", exc_info=True)
        show_exception(e)
        ctx.exit(1)
    except KeyboardInterrupt:
        display.finish()
        click.echo("Cancelled", err=True)
        ctx.exit(130)

    display.finish()
    click.echo(f"Saved deck sheet to {path}")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
