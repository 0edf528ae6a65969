"""
Domain Layer Package

Core entities, errors, gateway contracts and pure services. No dependency on
frameworks or infrastructure.
"""

from maker_bridge.domain import entities, gateways, ports, services

__all__ = ["entities", "gateways", "ports", "services"]
