"""
Infrastructure Layer Package

Implementations of the domain interfaces that talk to external systems:
the hub's Maker API and the workflow host.
"""

from maker_bridge.infrastructure import gateways, services

__all__ = ["gateways", "services"]
