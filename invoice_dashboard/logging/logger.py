import logging
import sys

_NOISY_LOGGERS = ("httpx", "httpcore", "google_genai", "openai")


class Log:
    """Process-wide logging facade for the dashboard service."""

    _logger: logging.Logger = logging.getLogger("invoice_dashboard")

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Set the level, attach a stdout handler once and quiet SDK loggers."""
        level = log_level.upper()
        cls._logger.setLevel(level)
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
            )
            cls._logger.addHandler(handler)
        # Provider SDKs log every HTTP round-trip at INFO.
        if level != "DEBUG":
            for name in _NOISY_LOGGERS:
                logging.getLogger(name).setLevel(logging.WARNING)

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        cls._logger.info(message, extra=kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        cls._logger.warning(message, extra=kwargs)

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        cls._logger.error(message, extra=kwargs)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        cls._logger.debug(message, extra=kwargs)
