"""
Domain schemas package - Pydantic models for the remote API documents.
"""

from domain.schemas.search_schemas import (
    SearchQuery,
    SearchEmbeds,
    SearchResult,
    PagingInfo,
)
from domain.schemas.restaurant_schemas import (
    Restaurant,
    Address,
    Directions,
    Timezone,
    Marketing,
    RealHours,
    OnlineOrdering,
    Catering,
    Chipotlane,
    Experience,
    Sustainability,
)
from domain.schemas.menu_schemas import (
    Menu,
    Entree,
    ContentGroup,
    Content,
    Side,
    Drink,
    NonFoodItem,
)

__all__ = [
    # Search
    "SearchQuery",
    "SearchEmbeds",
    "SearchResult",
    "PagingInfo",
    # Restaurant
    "Restaurant",
    "Address",
    "Directions",
    "Timezone",
    "Marketing",
    "RealHours",
    "OnlineOrdering",
    "Catering",
    "Chipotlane",
    "Experience",
    "Sustainability",
    # Menu
    "Menu",
    "Entree",
    "ContentGroup",
    "Content",
    "Side",
    "Drink",
    "NonFoodItem",
]
