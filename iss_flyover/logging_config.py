import logging
import sys
from environs import Env
from .log_filters import UpstreamBodyFilter

API_CLIENTS_LOGGER = "iss_flyover.infrastructure.api.clients"

# Loggers that may carry raw upstream bodies or full request URLs
UPSTREAM_LOGGERS = ("httpx", API_CLIENTS_LOGGER)

DEFAULT_BODY_LENGTH = 105


def resolve_log_level(env: Env) -> int:
    """LOGGING_LEVEL as a logging constant; DEBUG=true forces DEBUG."""
    if env.bool("DEBUG", default=False):
        return logging.DEBUG

    level_name = env.str("LOGGING_LEVEL", "INFO").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise ValueError(f"Invalid log level: {level_name}")
    return level


def setup_logging(env: Env) -> None:
    """Set up logging configuration."""
    if logging.root.handlers:  # The host application configured logging already
        return

    level = resolve_log_level(env)
    logging.basicConfig(
        level=level,
        format="[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s",
        stream=sys.stdout,
    )

    body_filter = UpstreamBodyFilter(
        max_length=env.int("LOG_BODY_LENGTH", DEFAULT_BODY_LENGTH)
    )
    for name in UPSTREAM_LOGGERS:
        upstream_logger = logging.getLogger(name)
        upstream_logger.setLevel(level)
        upstream_logger.addFilter(body_filter)

    # httpx logs every request at INFO, which duplicates the clients' own lines
    logging.getLogger("httpx").propagate = False
    logging.getLogger("httpcore").setLevel(max(level, logging.INFO))


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(name)
