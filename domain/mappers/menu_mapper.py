"""
Menu mappers.
Builds fact rows for one menu; content group references are resolved by the caller.
"""

from typing import Optional

from domain.models import (
    EntreeRecord,
    EntreeContentGroupRecord,
    ContentRecord,
    DrinkRecord,
    SideRecord,
    NonFoodItemRecord,
)
from domain.schemas.menu_schemas import Entree, ContentGroup, Content, Side

# Shared by drinks, sides and non-food items
_MENU_ITEM_FIELDS = (
    "item_id",
    "pos_id",
    "unit_price",
    "unit_delivery_price",
    "unit_count",
    "max_quantity",
    "eligible_for_delivery",
    "is_universal",
    "is_item_available",
)


class MenuMapper:
    """Mapper for menu fact rows."""

    @staticmethod
    def entree_to_record(entree: Entree) -> EntreeRecord:
        return EntreeRecord(
            **entree.model_dump(
                exclude={
                    "item_type",
                    "item_category",
                    "item_name",
                    "primary_filling_name",
                    "content_groups",
                    "contents",
                }
            )
        )

    @staticmethod
    def content_group_to_record(
        group: ContentGroup, content_group_id: Optional[int]
    ) -> EntreeContentGroupRecord:
        return EntreeContentGroupRecord(
            content_group_id=content_group_id,
            min_quantity=group.min_quantity,
            max_quantity=group.max_quantity,
        )

    @staticmethod
    def content_to_record(
        content: Content, content_group_id: Optional[int]
    ) -> ContentRecord:
        return ContentRecord(
            item_id=content.item_id,
            pos_id=content.pos_id,
            unit_price=content.unit_price,
            unit_delivery_price=content.unit_delivery_price,
            unit_count=content.unit_count,
            eligible_for_delivery=content.eligible_for_delivery,
            pricing_reference_item_id=content.pricing_reference_item_id,
            count_towards_customization_max=content.count_towards_customization_max,
            count_towards_content_max=content.count_towards_content_max,
            content_group_id=content_group_id,
            default_content=content.default_content,
            is_item_available=content.is_item_available,
        )

    @staticmethod
    def side_to_record(side: Side) -> SideRecord:
        return SideRecord(**side.model_dump(include=set(_MENU_ITEM_FIELDS)))

    @staticmethod
    def drink_to_record(drink: Side) -> DrinkRecord:
        return DrinkRecord(**drink.model_dump(include=set(_MENU_ITEM_FIELDS)))

    @staticmethod
    def non_food_item_to_record(item: Side) -> NonFoodItemRecord:
        return NonFoodItemRecord(**item.model_dump(include=set(_MENU_ITEM_FIELDS)))
