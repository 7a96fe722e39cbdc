"""
Adapters package - External service connections.
HTTP client for the restaurant search and online menu APIs.
"""

from adapters.chipotle_client import ChipotleClient

__all__ = ["ChipotleClient"]
