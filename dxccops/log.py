"""Structured logging utilities."""

import json
import logging

from dxccops.config import LOG_LEVEL


LOG = logging.getLogger("dxccops")
if not LOG.hasHandlers():
    handler = logging.StreamHandler()
    formatter = logging.Formatter("%(asctime)s %(levelname)s %(message)s")
    handler.setFormatter(formatter)
    LOG.addHandler(handler)
LOG.setLevel(LOG_LEVEL)


def log_debug(event: str, **kwargs: object) -> None:
    """Log a debug event as structured JSON."""
    if not LOG.isEnabledFor(logging.DEBUG):
        return
    log = {"level": "debug", "event": event, **kwargs}
    LOG.debug(json.dumps(log, default=str))


def log_info(event: str, **kwargs: object) -> None:
    """Log an informational event as structured JSON."""
    log = {"level": "info", "event": event, **kwargs}
    LOG.info(json.dumps(log, default=str))


def log_warning(event: str, **kwargs: object) -> None:
    """Log a warning event as structured JSON."""
    log = {"level": "warning", "event": event, **kwargs}
    LOG.warning(json.dumps(log, default=str))


def log_error(event: str, **kwargs: object) -> None:
    """Log an error event as structured JSON."""
    log = {"level": "error", "event": event, **kwargs}
    LOG.error(json.dumps(log, default=str))
