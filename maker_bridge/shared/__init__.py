"""
Shared module - Cross-cutting concerns / Shared Layer

Constants, enums, logging and formatting helpers used by every layer.
It must not depend on Infrastructure or Frameworks.
"""

from .consts import EnumEnvironment, EnumLogLevel
from .formatting import iso_timestamp, redact_token, redact_url
from .logging import configure_logging, get_logger, update_logging_from_settings

__all__ = [
    "EnumEnvironment",
    "EnumLogLevel",
    "configure_logging",
    "get_logger",
    "iso_timestamp",
    "redact_token",
    "redact_url",
    "update_logging_from_settings",
]
