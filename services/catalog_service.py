"""
Catalog normalization: deduplicates the menu item catalog of every fetched
menu into dense dimension mappings and a single items table.
"""

import logging
from typing import Iterable

from domain.catalog import CatalogItem, OptimizedItems
from domain.schemas.menu_schemas import Menu

logger = logging.getLogger("chipotle.catalog")


def optimize_items(menus: Iterable[Menu]) -> OptimizedItems:
    """
    Build the normalized catalog from every fetched menu in a single pass.

    Entrees register their full identity, their contents only type and name,
    and their content group names. Sides, drinks and non-food items register
    type, category and name. Dimension values are registered even when the
    item id was already seen.

    Args:
        menus: Every menu fetched during the run

    Returns:
        OptimizedItems aggregate
    """
    oi = OptimizedItems()
    menu_count = 0

    for menu in menus:
        menu_count += 1
        for entree in menu.entrees:
            oi.add_item(
                CatalogItem(
                    item_id=entree.item_id,
                    type=oi.item_types.add(entree.item_type),
                    category=oi.item_categories.add(entree.item_category),
                    name=oi.item_names.add(entree.item_name),
                    primary_filling_name=oi.primary_filling_names.add(
                        entree.primary_filling_name
                    ),
                )
            )

            for content in entree.contents:
                oi.add_item(
                    CatalogItem(
                        item_id=content.item_id,
                        type=oi.item_types.add(content.item_type),
                        name=oi.item_names.add(content.item_name),
                    )
                )

            for group in entree.content_groups:
                oi.add_content_group(group.content_group_name)

        for item in [*menu.sides, *menu.drinks, *menu.non_food_items]:
            oi.add_item(
                CatalogItem(
                    item_id=item.item_id,
                    type=oi.item_types.add(item.item_type),
                    category=oi.item_categories.add(item.item_category),
                    name=oi.item_names.add(item.item_name),
                )
            )

    logger.info(
        "Optimized %d menus into %d items (%s)",
        menu_count,
        len(oi.items),
        ", ".join(f"{d.name}={len(d)}" for d in oi.dimensions()),
    )
    return oi
