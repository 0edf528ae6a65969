"""
Maker Bridge Root Module

Bridges a workflow-automation host and a Hubitat hub's Maker API.

Layer Structure:
- Domain: Entities, errors, gateway contracts, URL and event-filter rules
- Application: Use cases and DTOs
- Infrastructure: HTTP gateways and services
- Presentation: FastAPI routers
- Shared: Cross-cutting concerns and shared utilities
- Main: Composition root, application entry point and configuration
"""
