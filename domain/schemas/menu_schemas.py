"""
Online menu documents, one per restaurant.
"""

from pydantic import Field
from typing import Optional, List, Any

from domain.schemas.base import WireModel


class ContentGroup(WireModel):
    """A named slot of an entree (e.g. fillings) with quantity bounds"""

    content_group_name: Optional[str] = None
    min_quantity: Optional[int] = None
    max_quantity: Optional[int] = None


class Content(WireModel):
    """A sub-item that can go into an entree, placed in a content group by name"""

    item_id: str
    item_type: Optional[str] = None
    item_name: Optional[str] = None
    pos_id: Optional[int] = None
    unit_price: Optional[float] = None
    unit_delivery_price: Optional[float] = None
    unit_count: Optional[int] = None
    eligible_for_delivery: Optional[bool] = None
    pricing_reference_item_id: Optional[str] = None
    count_towards_customization_max: Optional[int] = None
    count_towards_content_max: Optional[int] = None
    content_group_name: Optional[str] = None
    default_content: Optional[bool] = None
    is_item_available: Optional[bool] = None
    customizations: List[Any] = Field(default_factory=list)


class Entree(WireModel):
    item_id: str
    item_type: Optional[str] = None
    item_category: Optional[str] = None
    item_name: Optional[str] = None
    primary_filling_name: Optional[str] = None
    pos_id: Optional[int] = None
    unit_price: Optional[float] = None
    unit_delivery_price: Optional[float] = None
    unit_count: Optional[int] = None
    max_quantity: Optional[int] = None
    eligible_for_delivery: Optional[bool] = None
    max_contents: Optional[int] = None
    max_customizations: Optional[int] = None
    max_on_the_side_customizations: Optional[int] = None
    max_extras: Optional[int] = None
    max_halfs: Optional[int] = None
    max_extras_plus_halfs: Optional[int] = None
    is_universal: Optional[bool] = None
    is_item_available: Optional[bool] = None
    content_groups: List[ContentGroup] = Field(default_factory=list)
    contents: List[Content] = Field(default_factory=list)


class Side(WireModel):
    item_id: str
    item_type: Optional[str] = None
    item_category: Optional[str] = None
    item_name: Optional[str] = None
    pos_id: Optional[int] = None
    unit_price: Optional[float] = None
    unit_delivery_price: Optional[float] = None
    unit_count: Optional[int] = None
    max_quantity: Optional[int] = None
    eligible_for_delivery: Optional[bool] = None
    is_universal: Optional[bool] = None
    is_item_available: Optional[bool] = None


class Drink(Side):
    pass


class NonFoodItem(Side):
    """Utensils, bags and the like"""


class Menu(WireModel):
    restaurant_id: int
    entrees: List[Entree] = Field(default_factory=list)
    sides: List[Side] = Field(default_factory=list)
    drinks: List[Drink] = Field(default_factory=list)
    non_food_items: List[NonFoodItem] = Field(default_factory=list)
