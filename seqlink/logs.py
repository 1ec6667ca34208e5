import logging
import os

import structlog
from structlog.typing import Processor

NO_COLOR = os.environ.get("NO_COLOR") is not None


def get_log_level(verbosity: int) -> int:
    """Map a ``-v`` count to a standard library log level."""
    if verbosity <= 0:
        return logging.WARNING

    if verbosity == 1:
        return logging.INFO

    return logging.DEBUG


def configure_logger(verbosity: int, no_color: bool = False) -> None:
    """Configure structlog for seqlink.

    Debug verbosity adds the calling module and function to every event so that
    segment operations can be traced back to their call sites.

    :param verbosity: the number of times ``--verbose`` was passed
    :param no_color: render JSON instead of colored console output
    """
    level = get_log_level(verbosity)

    processors: list[Processor] = [
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if level == logging.DEBUG:
        processors.append(
            structlog.processors.CallsiteParameterAdder(
                [
                    structlog.processors.CallsiteParameter.MODULE,
                    structlog.processors.CallsiteParameter.FUNC_NAME,
                ]
            )
        )

    processors.append(
        structlog.processors.JSONRenderer()
        if no_color or NO_COLOR
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        logger_factory=structlog.PrintLoggerFactory(),
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )
