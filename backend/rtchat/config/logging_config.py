import logging
from logging.handlers import RotatingFileHandler
import sys
from pathlib import Path
from contextvars import ContextVar

# Context variable to store correlation ID across async/thread boundaries
correlation_id_var: ContextVar[str] = ContextVar(
    "correlation_id", default="NO Correlation ID"
)

_DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(correlation_id)s] %(name)s: %(message)s"


class CorrelationIdFilter(logging.Filter):
    """Logging filter to add correlation ID to log records."""

    def filter(self, record):
        record.correlation_id = correlation_id_var.get()
        return True


class SafeFormatter(logging.Formatter):
    """Formatter that ensures correlation_id always exists."""

    def format(self, record):
        if not hasattr(record, "correlation_id"):
            record.correlation_id = "NO Correlation ID"
        return super().format(record)


def _has_handler(root: logging.Logger, kind: type, target: str) -> bool:
    return any(
        isinstance(h, kind) and getattr(h, "_rtchat_target", None) == target
        for h in root.handlers
    )


def setup_logging(
    level: str = "INFO", log_file: str | None = None, fmt: str = _DEFAULT_FORMAT
):
    root = logging.getLogger()
    root.setLevel(logging.WARNING)  # Set root to WARNING to avoid too much noise
    formatter = SafeFormatter(fmt)

    # App factories may run several times per process (tests); attach once
    if not _has_handler(root, logging.StreamHandler, "stdout"):
        logger_handler = logging.StreamHandler(sys.stdout)
        logger_handler._rtchat_target = "stdout"
        logger_handler.setFormatter(formatter)
        logger_handler.addFilter(CorrelationIdFilter())
        root.addHandler(logger_handler)

    # Set up file logging if log_file provided with rotation
    if log_file and not _has_handler(root, RotatingFileHandler, log_file):
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file, maxBytes=10 * 1024 * 1024, backupCount=5
        )
        file_handler._rtchat_target = log_file
        file_handler.setFormatter(formatter)
        file_handler.addFilter(CorrelationIdFilter())
        root.addHandler(file_handler)

    # Only the application's own loggers get the configured level
    logging.getLogger("rtchat").setLevel(getattr(logging, level.upper(), logging.INFO))
    logging.getLogger("rtchat").info(
        "Logging is set up: level=%s, log_file=%s", level, log_file
    )

    return root
