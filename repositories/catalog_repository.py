"""
Catalog Repository - Writes the normalized dimension tables and items
"""

import logging
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import (
    ItemRecord,
    ItemType,
    ItemCategory,
    ItemName,
    PrimaryFillingName,
    ContentGroupName,
)
from domain.catalog import OptimizedItems, to_rank

logger = logging.getLogger("chipotle.database")


class CatalogRepository(BaseRepository[ItemRecord]):
    """Repository for the deduplicated item catalog"""

    def __init__(self, db: Session):
        super().__init__(db, ItemRecord)

    def insert_optimized_items(self, optimized: OptimizedItems) -> int:
        """
        Insert every dimension entry and every item in one transaction.

        Dimension ids and item foreign keys are written as ranks. Either all
        rows land or none do.

        Returns:
            Number of item rows written

        Raises:
            PersistenceError: If the transaction fails (rolled back)
        """
        dimension_rows = [
            *(ItemType(id=rank, item_type=v) for v, rank in optimized.item_types.ranks()),
            *(ItemCategory(id=rank, item_category=v) for v, rank in optimized.item_categories.ranks()),
            *(ItemName(id=rank, item_name=v) for v, rank in optimized.item_names.ranks()),
            *(
                PrimaryFillingName(id=rank, primary_filling_name=v)
                for v, rank in optimized.primary_filling_names.ranks()
            ),
            *(
                ContentGroupName(id=rank, content_group_name=v)
                for v, rank in optimized.content_groups.ranks()
            ),
        ]
        self.db.add_all(dimension_rows)
        # Dimension rows first so item foreign keys resolve on strict backends
        self.flush("inserting dimension rows")

        self.db.add_all(
            ItemRecord(
                id=item.item_id,
                item_type_id=to_rank(item.type),
                item_category_id=to_rank(item.category),
                item_name_id=to_rank(item.name),
                primary_filling_name_id=to_rank(item.primary_filling_name),
            )
            for item in optimized.items.values()
        )
        self.commit("inserting items")

        logger.info(
            "Inserted %d dimension rows and %d items",
            len(dimension_rows),
            len(optimized.items),
        )
        return len(optimized.items)
