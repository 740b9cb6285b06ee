"""Logging setup for TrustGate.

The package logs through loguru under the ``trustgate`` namespace, which
stays disabled until :func:`setup_logger` is called. Sinks added here only
receive ``trustgate`` records and never touch the host application's sinks.
"""

import sys
from pathlib import Path

from loguru import logger

from trustgate.config import get_config

NAMESPACE = "trustgate"

# Default format with contextual information
DEFAULT_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)

# Plain format used when records are serialized
STRUCTURED_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} | {message}"


def setup_logger(
    log_level: str | None = None,
    log_file: Path | None = None,
    rotation: str | None = None,
    retention: str | None = None,
    format_string: str | None = None,
    structured: bool = False,
    console: bool = True,
) -> list[int]:
    """Enable access control logging and add sinks for it.

    Args:
        log_level: Minimum level of trustgate records to emit.
        log_file: Also write records to this file (optional).
        rotation: File rotation setting (e.g., "10 MB", "1 day").
        retention: File retention setting (e.g., "7 days").
        format_string: Format for both sinks, defaults to ``Config.log_format``.
        structured: Serialize file records as JSON.
        console: Add a stderr sink.

    Returns:
        Handler ids of the added sinks, for ``logger.remove``.
    """
    config = get_config()

    level = log_level or config.log_level
    log_format = format_string or config.log_format or DEFAULT_FORMAT

    logger.enable(NAMESPACE)

    handler_ids: list[int] = []
    if console:
        handler_ids.append(
            logger.add(
                sys.stderr,
                format=STRUCTURED_FORMAT if structured else log_format,
                level=level,
                filter=NAMESPACE,
                colorize=not structured,
            )
        )

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler_ids.append(
            logger.add(
                log_file,
                format=STRUCTURED_FORMAT if structured else log_format,
                level=level,
                filter=NAMESPACE,
                rotation=rotation or config.log_rotation,
                retention=retention or config.log_retention,
                serialize=structured,
            )
        )

    return handler_ids
