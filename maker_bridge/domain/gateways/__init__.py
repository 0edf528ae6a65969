"""
Gateways Package - Domain Layer

Interfaces for external service communication. Implementations live in
the infrastructure layer.
"""

from .maker_api_gateway import IMakerApiGateway

__all__ = ["IMakerApiGateway"]
