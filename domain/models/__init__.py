"""
Domain models package - SQLAlchemy ORM models.
"""

from domain.models.database import (
    Base,
    engine,
    build_engine,
    init_database,
    reset_database,
    fast_load,
)
from domain.models.restaurant import RestaurantRecord, AddressRecord, RealHoursRecord
from domain.models.catalog import (
    ItemType,
    ItemCategory,
    ItemName,
    PrimaryFillingName,
    ContentGroupName,
    ItemRecord,
)
from domain.models.menu import (
    MenuRecord,
    EntreeRecord,
    EntreeContentGroupRecord,
    ContentRecord,
    DrinkRecord,
    SideRecord,
    NonFoodItemRecord,
)

__all__ = [
    # Database
    "Base",
    "engine",
    "build_engine",
    "init_database",
    "reset_database",
    "fast_load",
    # Restaurant models
    "RestaurantRecord",
    "AddressRecord",
    "RealHoursRecord",
    # Catalog models
    "ItemType",
    "ItemCategory",
    "ItemName",
    "PrimaryFillingName",
    "ContentGroupName",
    "ItemRecord",
    # Menu models
    "MenuRecord",
    "EntreeRecord",
    "EntreeContentGroupRecord",
    "ContentRecord",
    "DrinkRecord",
    "SideRecord",
    "NonFoodItemRecord",
]
