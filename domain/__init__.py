"""
Domain layer - Wire schemas, ORM models and mappers.
"""

from domain import models, schemas

__all__ = ["models", "schemas"]
