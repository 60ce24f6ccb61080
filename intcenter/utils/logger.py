"""
Logging for the International Center website core.

The package logs through loguru but stays silent until the host calls
``setup_logging()``, so importing it never touches the host's sinks or
the root logger.
"""

import inspect
import logging
import sys

from loguru import logger

from intcenter.settings import Settings, get_settings

PACKAGE = "intcenter"
INTERCEPTED_LOGGERS = ("httpx", "httpcore")
DEFAULT_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

logger.disable(PACKAGE)


class InterceptHandler(logging.Handler):
    """Forward standard library records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        level: str | int
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Skip logging's own frames so loguru reports the real caller
        frame, depth = inspect.currentframe(), 0
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logging(settings: Settings | None = None, *, replace_sinks: bool = True) -> list[int]:
    """Enable package logging and add sinks configured by ``settings``.

    Only the HTTP client loggers are redirected into loguru; the root
    logger is left to the host.

    Args:
        settings: Logging options, defaults to ``get_settings()``
        replace_sinks: Drop existing loguru sinks first

    Returns:
        Ids of the sinks that were added
    """
    settings = settings or get_settings()
    log_format = settings.log_format or DEFAULT_FORMAT

    if replace_sinks:
        logger.remove()

    sink_ids = [
        logger.add(
            sys.stderr,
            level=settings.log_level,
            format=log_format,
            colorize=True,
            backtrace=True,
            diagnose=False,
        )
    ]

    if settings.log_to_file:
        log_dir = settings.get_log_dir()
        log_dir.mkdir(parents=True, exist_ok=True)
        sink_ids.append(
            logger.add(
                str(log_dir / f"{PACKAGE}.log"),
                level=settings.log_level,
                format=log_format,
                rotation=settings.log_rotation,
                retention=settings.log_retention,
                compression="zip",
                backtrace=True,
                diagnose=False,
            )
        )

    for name in INTERCEPTED_LOGGERS:
        stdlib_logger = logging.getLogger(name)
        stdlib_logger.handlers = [InterceptHandler()]
        stdlib_logger.propagate = False

    logger.enable(PACKAGE)
    return sink_ids
