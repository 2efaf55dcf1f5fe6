"""Logging setup and report helpers for pinaudit."""

import logging
from collections.abc import Iterable

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "pinaudit"

logger = logging.getLogger(LOGGER_NAME)


def configure_logging(verbose: bool = False, console: Console | None = None) -> RichHandler:
    """Route pinaudit logs through a RichHandler.

    Replaces any handler installed by a previous call so repeated CLI
    invocations in one process do not duplicate output.
    """
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    for existing in list(logger.handlers):
        if isinstance(existing, RichHandler):
            logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    return handler


def bullet_items(items: Iterable[str]) -> str:
    """Return ``items`` as a multi-line bulleted list."""
    return "\n".join(f"  * {item}" for item in items)


def log_dependency_infractions(infraction: str, dependencies: Iterable[str]) -> None:
    """Log a warning with ``infraction`` and the sorted ``dependencies`` under it."""
    logger.warning("\n".join([infraction, bullet_items(sorted(dependencies)), ""]))


def log_dependency_info(info: str, dependencies: Iterable[str]) -> None:
    """Log ``info`` with the sorted ``dependencies`` under it."""
    logger.info("\n".join([info, bullet_items(sorted(dependencies)), ""]))
