import logging
import sys

_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


class Log:
    """Centralized logging for the extraction tool."""

    _logger: logging.Logger = logging.getLogger("contact_extract")

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Set the level and attach a single stdout handler.

        The Flask request log (werkzeug) shares the same level so a DEBUG run
        shows both the prompts and the HTTP traffic.
        """
        level = log_level.upper()
        cls._logger.setLevel(level)
        logging.getLogger("werkzeug").setLevel(level)
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(logging.Formatter(_FORMAT))
            cls._logger.addHandler(handler)

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        cls._logger.info(message, extra=kwargs)

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        cls._logger.error(message, extra=kwargs)

    @classmethod
    def exception(cls, message: str, **kwargs: object) -> None:
        """Log an error message with the active exception's traceback."""
        cls._logger.exception(message, extra=kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        cls._logger.warning(message, extra=kwargs)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        cls._logger.debug(message, extra=kwargs)
