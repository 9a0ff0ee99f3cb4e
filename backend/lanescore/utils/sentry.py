import logging
from typing import Optional

import sentry_sdk

from .. import config

logger = logging.getLogger(__name__)

_initialized = False


def init_sentry(dsn: Optional[str] = None) -> bool:
    """Turn on Sentry once per process; a no-op without a configured DSN."""
    global _initialized
    if _initialized:
        return True
    dsn = dsn or config.SENTRY_DSN
    if not dsn:
        logger.info("SENTRY_DSN not provided; skipping Sentry initialization.")
        return False

    sentry_sdk.init(
        dsn=dsn,
        environment=config.SENTRY_ENVIRONMENT,
        traces_sample_rate=config.SENTRY_TRACES_SAMPLE_RATE,
    )
    _initialized = True
    logger.info(
        "Initialized Sentry%s",
        f" (environment={config.SENTRY_ENVIRONMENT})"
        if config.SENTRY_ENVIRONMENT
        else "",
    )
    return True
