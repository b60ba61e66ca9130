# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Configuration for the Microsoft Graph mail transport.

Settings come from an INI file with environment variables as fallbacks:

    [microsoft-graph]
    save_to_sent_items = true
    log_payloads = false
    name = microsoft-graph

``name`` labels the transport in log records (INI only, default
``microsoft-graph``).

Environment variables (all prefixed with GRAPH_MAIL_):
    GRAPH_MAIL_CONFIG - Path to config.ini file (default: config.ini)
    GRAPH_MAIL_SAVE_TO_SENT_ITEMS - Default for the saveToSentItems flag
    GRAPH_MAIL_LOG_PAYLOADS - Log a summary of every payload at DEBUG level
"""

from __future__ import annotations

import configparser
import os
from dataclasses import dataclass
from pathlib import Path

from .logger import get_logger

logger = get_logger("config")

CONFIG_SECTION = "microsoft-graph"

TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
FALSE_VALUES = frozenset({"0", "false", "no", "off", ""})


def parse_bool(value: object, default: bool = False) -> bool:
    """Permissive boolean parsing of a setting or header value.

    Accepts ``1/true/yes/on`` and ``0/false/no/off`` (case-insensitive,
    surrounding whitespace ignored). Anything else returns ``default``.
    """
    if isinstance(value, bool):
        return value
    if value is None:
        return default
    normalized = str(value).strip().lower()
    if normalized in TRUE_VALUES:
        return True
    if normalized in FALSE_VALUES:
        return False
    return default


@dataclass(frozen=True)
class TransportConfig:
    """Settings consumed by :class:`graph_mail.transport.GraphMailTransport`."""

    save_to_sent_items: bool = False
    """Fallback for saveToSentItems when the message carries no metadata header."""

    log_payloads: bool = False
    """Log a summary of each payload (never bodies or attachment content)."""

    name: str = "microsoft-graph"
    """Mailer name used in log records."""


def load_config(config_path: str | os.PathLike[str] | None = None) -> TransportConfig:
    """Load a :class:`TransportConfig` from an INI file and the environment.

    A missing config file is not an error: environment variables and the
    dataclass defaults apply.
    """
    path = Path(config_path or os.getenv("GRAPH_MAIL_CONFIG", "config.ini"))
    parser = configparser.ConfigParser()
    if path.exists():
        parser.read(path)
    else:
        logger.debug("Config file %s not found, using environment and defaults", path)

    def get(option: str, fallback: str | None = None) -> str | None:
        if parser.has_option(CONFIG_SECTION, option):
            return parser.get(CONFIG_SECTION, option)
        return fallback

    def get_bool(option: str, fallback: str | None, default: bool) -> bool:
        value = get(option, fallback)
        if value is None:
            return default
        normalized = value.strip().lower()
        if normalized not in TRUE_VALUES | FALSE_VALUES:
            logger.warning("Invalid boolean %r for %s, using %s", value, option, default)
        return parse_bool(value, default=default)

    return TransportConfig(
        save_to_sent_items=get_bool(
            "save_to_sent_items", os.getenv("GRAPH_MAIL_SAVE_TO_SENT_ITEMS"), False
        ),
        log_payloads=get_bool("log_payloads", os.getenv("GRAPH_MAIL_LOG_PAYLOADS"), False),
        name=get("name") or TransportConfig.name,
    )


__all__ = ["TransportConfig", "load_config", "parse_bool"]
