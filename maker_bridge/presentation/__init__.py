"""
Presentation Layer Package

HTTP surface of the bridge: FastAPI routers and their error mapping.
"""

from maker_bridge.presentation import controllers

__all__ = ["controllers"]
