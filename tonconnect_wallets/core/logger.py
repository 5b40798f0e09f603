import sys
import logging
from typing import Optional, TextIO

import structlog
from loguru import logger as loguru_logger

from .config import settings

SERVICE_NAME = "tonconnect_wallets"


def setup_logger(
    service_name: str = SERVICE_NAME,
    level: Optional[str] = None,
    *,
    sink: TextIO = sys.stderr,
    json_logs: bool = True,
):
    """
    Opt-in logging setup for applications embedding the resolver: structlog + loguru.

    Replaces loguru sinks and the global structlog configuration, so only the host
    application should call it (once, at startup). Importing the package configures nothing.
    """
    level = (level or settings.log_level).upper()
    logging.basicConfig(level=level, stream=sink)

    loguru_logger.remove()
    loguru_logger.add(
        sink,
        level=level,
        colorize=not json_logs,
        enqueue=True,
        backtrace=True,
        diagnose=False,
        format="<green>{time:HH:mm:ss}</green> | "
               "<level>{level: <8}</level> | "
               "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
               "<level>{message}</level>",
    )

    renderer = structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer()
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(level),
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.ExceptionRenderer(),
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
    )

    return structlog.get_logger(service=service_name)


# lazy proxy: follows the structlog configuration of the host application
logger = structlog.get_logger(service=SERVICE_NAME)
