"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository
from repositories.restaurant_repository import RestaurantRepository
from repositories.catalog_repository import CatalogRepository
from repositories.menu_repository import MenuRepository

__all__ = [
    "BaseRepository",
    "RestaurantRepository",
    "CatalogRepository",
    "MenuRepository",
]
