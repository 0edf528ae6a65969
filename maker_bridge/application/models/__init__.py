"""Application-level models built from configuration."""

from .system_info import SystemInfo

__all__ = ["SystemInfo"]
