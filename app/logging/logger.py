import logging
import sys


class Log:
    """Service-wide logger facade writing to stdout."""

    FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

    _logger: logging.Logger = logging.getLogger("plantscan")

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Set the level for the service logger and the uvicorn loggers."""
        level = log_level.upper()
        cls._logger.setLevel(level)
        cls._logger.propagate = False
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(logging.Formatter(cls.FORMAT))
            cls._logger.addHandler(handler)
        for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
            logging.getLogger(name).setLevel(level)

    @classmethod
    def info(cls, message: str) -> None:
        cls._logger.info(message)

    @classmethod
    def error(cls, message: str) -> None:
        cls._logger.error(message)

    @classmethod
    def warning(cls, message: str) -> None:
        cls._logger.warning(message)

    @classmethod
    def debug(cls, message: str) -> None:
        cls._logger.debug(message)
