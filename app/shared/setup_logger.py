import logging
import os
import sys
from typing import Optional

from app.shared.trace import get_trace_id

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s trace_id=%(trace_id)s %(message)s"


class TraceIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.trace_id = get_trace_id() or "-"
        return True


class LoggerManager:
    def __init__(self, debug: bool = False) -> None:
        self.debug = debug
        self.logger = logging.getLogger("promptgen")
        self._handler: Optional[logging.Handler] = None
        self._configure_root_logger()

    @property
    def level(self) -> int:
        return logging.DEBUG if self.debug else logging.INFO

    def _configure_root_logger(self) -> None:
        root_logger = logging.getLogger()
        if getattr(root_logger, "_promptgen_logger_configured", False):
            return
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler.addFilter(TraceIdFilter())
        root_logger.handlers = [handler]
        root_logger._promptgen_logger_configured = True  # type: ignore[attr-defined]
        self._handler = handler
        self._apply_level()

    def _apply_level(self) -> None:
        self.logger.setLevel(self.level)
        logging.getLogger().setLevel(self.level)
        if self._handler is not None:
            self._handler.setLevel(self.level)

    def set_debug(self, debug: bool) -> None:
        """Called by the app factory once Settings are loaded."""
        self.debug = debug
        self._apply_level()

    def get_logger(self, name: Optional[str] = None) -> logging.Logger:
        if not name:
            return self.logger
        return logging.getLogger(name)


def is_debug_enabled() -> bool:
    return os.getenv("APP_DEBUG", "false").lower() == "true"


LOGGER = LoggerManager(debug=is_debug_enabled())
