"""
Application Layer Package

Use cases orchestrating the hub gateway and the workflow dispatcher, plus
the DTOs they exchange with the presentation layer.
"""

from maker_bridge.application import dtos, models, use_cases

__all__ = ["dtos", "use_cases", "models"]
