# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Logging utilities for the Graph mail transport.

Every logger of the package is a child of the ``GraphMail`` logger, so an
application can tune or silence the whole transport with a single
``logging.getLogger("GraphMail").setLevel(...)``. Handlers and format are
left to the entry point (see :mod:`graph_mail.cli`).

Example:
    Typical usage in a module::

        from graph_mail.logger import get_logger

        logger = get_logger("transport")   # -> "GraphMail.transport"
        logger.info("Message handed to sender")
"""

import logging

ROOT_LOGGER_NAME = "GraphMail"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the package logger or one of its children.

    Args:
        name: Child name, e.g. ``"transport"``. Names already under
            ``GraphMail`` are used as is; None returns the package logger.

    Returns:
        A ``logging.Logger`` in the ``GraphMail`` hierarchy.
    """
    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
