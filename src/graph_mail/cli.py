# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Command-line interface for graph-mail.

Builds Microsoft Graph ``sendMail`` payloads from ``.eml`` files so they can
be inspected or piped to another tool, without performing any request.

Usage:
    graph-mail payload message.eml
    graph-mail payload message.eml --sender noreply@example.com \\
        --recipient alice@example.com --recipient bob@example.com
    graph-mail payload message.eml --save-to-sent-items
    graph-mail config --config /etc/graph-mail/config.ini

Environment:
    GRAPH_MAIL_LOG_LEVEL - Logging level (default: WARNING)
"""

from __future__ import annotations

import configparser
import dataclasses
import email
import json
import logging
import os
import sys
from email import policy
from email.message import EmailMessage as MIMEMessage
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from .config import load_config
from .converter import envelope_from_mime, message_from_mime
from .models import Address, Envelope
from .payload import build_payload

console = Console()
err_console = Console(stderr=True)


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    err_console.print(f"[red]Error:[/red] {message}")


def read_mime(path: Path) -> MIMEMessage:
    """Parse an ``.eml`` file with the modern email policy."""
    return email.message_from_bytes(path.read_bytes(), policy=policy.default)


def resolve_envelope(
    msg: MIMEMessage,
    sender: str | None,
    recipients: tuple[str, ...],
) -> Envelope:
    """Envelope from explicit options, falling back to the message headers."""
    if sender and recipients:
        return Envelope(
            sender=Address(address=sender),
            recipients=[Address(address=r) for r in recipients],
        )
    derived = envelope_from_mime(msg)
    return Envelope(
        sender=Address(address=sender) if sender else derived.sender,
        recipients=[Address(address=r) for r in recipients] if recipients else derived.recipients,
    )


@click.group()
@click.version_option(package_name="graph-mail")
def main() -> None:
    """graph-mail CLI - Build Microsoft Graph sendMail payloads."""
    log_level = os.getenv("GRAPH_MAIL_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.WARNING),
        format="[%(asctime)s] [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


@main.command("payload")
@click.argument("eml_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--sender", "-s", default=None, help="Envelope sender (default: from headers).")
@click.option(
    "--recipient", "-r", "recipients", multiple=True,
    help="Envelope recipient, repeatable (default: To, Cc and Bcc headers).",
)
@click.option(
    "--save-to-sent-items/--no-save-to-sent-items", default=None,
    help="Override the configured saveToSentItems default.",
)
@click.option("--config", "-c", "config_path", default=None, help="Path to config.ini.")
def payload_cmd(
    eml_file: Path,
    sender: str | None,
    recipients: tuple[str, ...],
    save_to_sent_items: bool | None,
    config_path: str | None,
) -> None:
    """Print the sendMail payload for EML_FILE as JSON."""
    try:
        config = load_config(config_path)
        msg = read_mime(eml_file)
        envelope = resolve_envelope(msg, sender, recipients)
    except (OSError, ValueError, configparser.Error) as e:
        print_error(str(e))
        sys.exit(1)

    if save_to_sent_items is not None:
        config = dataclasses.replace(config, save_to_sent_items=save_to_sent_items)

    payload = build_payload(
        message_from_mime(msg), envelope, save_to_sent_items=config.save_to_sent_items
    )
    click.echo(json.dumps(payload, indent=2))


@main.command("config")
@click.option("--config", "-c", "config_path", default=None, help="Path to config.ini.")
def config_cmd(config_path: str | None) -> None:
    """Show the effective transport configuration."""
    try:
        config = load_config(config_path)
    except (OSError, configparser.Error) as e:
        print_error(str(e))
        sys.exit(1)

    table = Table(title="graph-mail configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    for field in dataclasses.fields(config):
        table.add_row(field.name, str(getattr(config, field.name)))
    console.print(table)


if __name__ == "__main__":
    main()
