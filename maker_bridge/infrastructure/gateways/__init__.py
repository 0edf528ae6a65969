"""
Gateways Package - Infrastructure Layer

Concrete implementations of the domain gateway interfaces.
"""

from .maker_api_gateway import MakerApiGateway

__all__ = ["MakerApiGateway"]
