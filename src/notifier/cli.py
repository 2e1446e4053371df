"""Command line interface for codex-notify."""

from __future__ import annotations

import json
import logging
import sys
from typing import NoReturn

import click
from colorama import init, Fore

from notifier import __version__
from notifier.card import build_card
from notifier.client import deliver
from notifier.config import load_config
from notifier.errors import ConfigError, NotifierError, ParseError
from notifier.models import parse_notification

init(autoreset=True)

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def fail(prefix: str, error: Exception) -> NoReturn:
    click.echo(f"{Fore.RED}{prefix}: {error}", err=True)
    sys.exit(1)


@click.command()
@click.version_option(version=__version__, prog_name="codex-notify")
@click.argument("payload")
@click.option("--dry-run", is_flag=True, help="Print the card payload instead of sending it")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(payload: str, dry_run: bool, verbose: bool) -> None:
    """Send a card for a completed agent turn to the configured webhook.

    PAYLOAD is the notification JSON passed by the agent.
    """
    setup_logging(verbose)

    try:
        config = load_config()
    except ConfigError as e:
        fail("Config error", e)

    try:
        notification = parse_notification(payload)
    except ParseError as e:
        fail("Error parsing JSON", e)

    if not notification.is_turn_complete:
        logger.debug(f"Ignoring notification of type {notification.type!r}")
        return

    try:
        message = build_card(notification, config)
        if dry_run:
            click.echo(json.dumps(message.to_payload(), indent=2, ensure_ascii=False))
            return
        deliver(message, config)
    except NotifierError as e:
        fail("Failed to send notification", e)

    logger.debug(f"Delivered turn {notification.turn_id} of thread {notification.thread_id}")


def main() -> None:
    cli()
