import logging
import sys
from collections.abc import Callable, Iterable

SuppressPredicate = Callable[[logging.LogRecord], bool]

# Logger filters do not apply to records propagated from children, so the
# emitting modules are listed explicitly.
NOISY_LOGGERS = (
    "pdfminer",
    "pdfminer.cmapdb",
    "pdfminer.pdffont",
    "pdfminer.pdfinterp",
    "pdfminer.pdfpage",
    "pdfminer.psparser",
    "pymupdf",
)


def suppress_substrings(substrings: Iterable[str]) -> SuppressPredicate:
    """Build a predicate that drops records whose message contains any substring."""
    needles = tuple(s for s in substrings if s)

    def predicate(record: logging.LogRecord) -> bool:
        message = record.getMessage()
        return any(needle in message for needle in needles)

    return predicate


class _SuppressFilter(logging.Filter):
    def __init__(self, suppress: SuppressPredicate) -> None:
        super().__init__()
        self._suppress = suppress

    def filter(self, record: logging.LogRecord) -> bool:
        return not self._suppress(record)


class Log:
    """Centralized logging with structured format."""

    _logger: logging.Logger = logging.getLogger("docintake")

    @classmethod
    def configure(
        cls,
        log_level: str,
        suppress: SuppressPredicate | None = None,
    ) -> None:
        """Configure the logger with the specified level and stdout handler.

        Args:
            log_level: Level name, case-insensitive.
            suppress: Optional predicate; records for which it returns True are
                dropped from our handler and from the noisy PDF library loggers.
        """
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
            )
            cls._logger.addHandler(handler)
        if suppress is not None:
            log_filter = _SuppressFilter(suppress)
            for handler in cls._logger.handlers:
                handler.addFilter(log_filter)
            for name in NOISY_LOGGERS:
                logging.getLogger(name).addFilter(log_filter)

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        """Log an info message."""
        cls._logger.info(message, extra=kwargs)

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        """Log an error message."""
        cls._logger.error(message, extra=kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        """Log a warning message."""
        cls._logger.warning(message, extra=kwargs)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        """Log a debug message."""
        cls._logger.debug(message, extra=kwargs)
