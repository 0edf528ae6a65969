"""
structlog setup for the bridge.

Every record, whether it comes from structlog or from a plain stdlib logger
(uvicorn, httpx), goes through the same processor chain and ends up rendered
by the console renderer in development or as JSON lines in production. Maker
API URLs carry the access token as a query parameter, so the chain masks it
before rendering.
"""

import logging
import os
import sys
from typing import Any, List, Optional

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

from maker_bridge.shared.consts import EnumEnvironment
from maker_bridge.shared.formatting import redact_token

# Loggers that print request URLs verbatim; they never go below WARNING.
_URL_LOGGERS = ("httpx", "httpcore")


def redact_access_tokens(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Mask Maker API access tokens in any string value of the event."""
    for key, value in event_dict.items():
        if isinstance(value, str):
            event_dict[key] = redact_token(value)
    return event_dict


def _enum_value(value: Any) -> Any:
    return getattr(value, "value", value)


def _shared_processors() -> List[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        redact_access_tokens,
    ]


def _renderer(environment: str) -> Processor:
    if environment.lower() == EnumEnvironment.PRODUCTION:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def _handlers(file_path: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if file_path:
        handlers.append(logging.FileHandler(file_path))
    return handlers


def configure_logging(
    level: Optional[str] = None,
    file_path: Optional[str] = None,
    environment: str = "development",
) -> None:
    """
    Route stdlib logging and structlog through one set of handlers.

    Arguments left as None fall back to ``LOG_LEVEL`` and ``LOG_FILE_PATH``
    from the environment, which lets the app log while its settings are
    still being loaded.
    """
    level_name = (level or os.environ.get("LOG_LEVEL") or "INFO").upper()
    log_file = file_path or os.environ.get("LOG_FILE_PATH")
    numeric_level = getattr(logging, level_name, logging.INFO)

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_shared_processors(),
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _renderer(environment),
        ],
    )
    handlers = _handlers(log_file)
    for handler in handlers:
        handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(numeric_level)

    for name in _URL_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_shared_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    get_logger(__name__).debug(
        "logging.configured", level=level_name, file_path=log_file
    )


def update_logging_from_settings(settings: Any) -> None:
    """Reconfigure logging from the loaded ``AppSettings``."""
    try:
        configure_logging(
            level=_enum_value(settings.logging.level),
            file_path=settings.logging.file_path,
            environment=_enum_value(settings.environment),
        )
    except Exception as e:
        logging.getLogger(__name__).error(
            "Failed to apply logging settings: %s", e
        )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)
