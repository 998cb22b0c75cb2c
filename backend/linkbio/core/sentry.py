"""
Error tracking with Sentry.

Disabled unless SENTRY_DSN (or VITE_SENTRY_DSN, shared with the web client)
is configured.
"""
import logging
from typing import Optional

import sentry_sdk

from ..__version__ import __version__
from .config import settings

logger = logging.getLogger(__name__)

SERVER_NAME = "linkbio-server"

_enabled = False


def _before_send(event, hint):
    event.setdefault("tags", {})["server_name"] = SERVER_NAME
    return event


def init_sentry(dsn: Optional[str] = None) -> bool:
    """
    Initialise the Sentry SDK.

    Returns:
        True if error tracking is active
    """
    global _enabled

    dsn = dsn or settings.SENTRY_DSN
    if not dsn:
        logger.warning("Sentry DSN not provided for server. Error tracking disabled.")
        _enabled = False
        return False

    sentry_sdk.init(
        dsn=dsn,
        environment=settings.ENVIRONMENT,
        release=__version__,
        traces_sample_rate=settings.SENTRY_TRACES_SAMPLE_RATE,
        before_send=_before_send,
    )
    _enabled = True
    logger.info("[SENTRY] Error tracking enabled")
    return True


def capture_exception(error: BaseException) -> Optional[str]:
    if not _enabled:
        return None
    return sentry_sdk.capture_exception(error)


def capture_message(message: str, level: str = "info") -> Optional[str]:
    if not _enabled:
        return None
    return sentry_sdk.capture_message(message, level=level)
