"""structlog setup for command-line entry points."""

import logging

import structlog


def configure_logging(verbose: bool = False) -> None:
    """Configure structlog console output.

    Args:
        verbose: Log at DEBUG instead of INFO
    """
    log_level = logging.DEBUG if verbose else logging.INFO
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
    )
