import logging
from typing import Any, Dict, Optional

import structlog
from structlog.types import Processor


def _is_configured(root_logger: logging.Logger) -> bool:
    for handler in root_logger.handlers:
        if (isinstance(handler, logging.StreamHandler) and
                isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter)):
            return True
    return False


def setup_logging(json_logs: bool = False, log_level: str = "INFO", force: bool = False):
    """
    Configure structlog for the appenv package.

    Calling it again is a no-op unless ``force`` is set, so that a host
    application which already owns the root logger keeps its handlers.
    """
    root_logger = logging.getLogger()
    if _is_configured(root_logger) and not force:
        return

    timestamper = structlog.processors.TimeStamper(fmt="iso")

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.stdlib.ExtraAdder(),
        timestamper,
        structlog.processors.StackInfoRenderer(),
    ]

    if json_logs:
        # Format the exception only for JSON logs, as we want to pretty-print them when
        # using the ConsoleRenderer
        shared_processors.append(structlog.processors.format_exc_info)

    structlog.configure(
        processors=shared_processors
        + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        # Loggers are created at import time, before bootstrap configures logging
        cache_logger_on_first_use=False,
    )

    log_renderer: structlog.types.Processor
    if json_logs:
        log_renderer = structlog.processors.JSONRenderer()
    else:
        log_renderer = structlog.dev.ConsoleRenderer()

    formatter = structlog.stdlib.ProcessorFormatter(
        # These run ONLY on `logging` entries that do NOT originate within
        # structlog.
        foreign_pre_chain=shared_processors,
        # These run on ALL entries after the pre_chain is done.
        processors=[
            # Remove _record & _from_structlog.
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            log_renderer,
        ],
    )

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level.upper())


class AppEnvStructLogger:
    """
    Structured logger for the appenv package.

    Values passed to ``bind`` stay with the returned logger only; they are
    added to each of its events when the event is emitted, so binding
    never leaks into other components' output.
    """

    def __init__(self, log_name: str = "appenv", context: Optional[Dict[str, Any]] = None):
        self.log_name = log_name
        self.logger = structlog.stdlib.get_logger(log_name)
        self._context = dict(context or {})

    @property
    def context(self) -> Dict[str, Any]:
        return dict(self._context)

    def bind(self, **new_values: Any) -> 'AppEnvStructLogger':
        """Return a new logger carrying this logger's context plus ``new_values``."""
        return AppEnvStructLogger(self.log_name, {**self._context, **new_values})

    def debug(self, event: str, **kw: Any):
        self.logger.debug(event, **{**self._context, **kw})

    def info(self, event: str, **kw: Any):
        self.logger.info(event, **{**self._context, **kw})

    def warning(self, event: str, **kw: Any):
        self.logger.warning(event, **{**self._context, **kw})

    def error(self, event: str, **kw: Any):
        self.logger.error(event, **{**self._context, **kw})


def get_appenv_logger(log_name: str = "appenv") -> AppEnvStructLogger:
    """Return a structured logger without touching the logging configuration."""
    return AppEnvStructLogger(log_name)
