"""Open an activated item's value with the platform's default handler."""

import logging
import webbrowser

logger = logging.getLogger(__name__)


def open_target(value: str) -> bool:
    """Open ``value`` (usually a URL). Returns False if no handler accepted it."""
    logger.info("Launching %s", value)
    opened = webbrowser.open(value)
    if not opened:
        logger.warning("No handler available to open %s", value)
    return opened
