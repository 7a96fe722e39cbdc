"""
Domain mappers package.
Handles transformation between API documents and ORM rows.
"""

from domain.mappers.restaurant_mapper import RestaurantMapper
from domain.mappers.menu_mapper import MenuMapper

__all__ = ["RestaurantMapper", "MenuMapper"]
