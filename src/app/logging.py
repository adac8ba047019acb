import logging
import sys

from src.app.config import LoggingSettings

# Third-party loggers that are only useful when debugging them
QUIET_LOGGERS = ("httpx", "httpcore", "asyncpg", "aiosqlite", "sqlalchemy.engine")


def configure_logging(settings: LoggingSettings | None = None) -> None:
    """
    Route every log record to stdout with the configured level and format.

    Safe to call more than once; the last call wins.
    """
    settings = settings or LoggingSettings()
    logging.basicConfig(
        level=settings.level.upper(),
        format=settings.format,
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    quiet_level = logging.DEBUG if settings.level.upper() == "DEBUG" else logging.WARNING
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(quiet_level)


def get_logger(name: str) -> logging.Logger:
    """Module logger; output goes through the root handler set up by configure_logging()."""
    return logging.getLogger(name)
