"""
Menu Repository - Writes one menu and its fact rows per transaction
"""

from typing import Optional
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.mappers import MenuMapper
from domain.models import MenuRecord, ContentGroupName
from domain.schemas.menu_schemas import Menu
from domain.catalog import OptimizedItems


class MenuRepository(BaseRepository[MenuRecord]):
    """Repository for menus, entrees, contents, drinks, sides and non-food items"""

    def __init__(self, db: Session):
        super().__init__(db, MenuRecord)

    def insert_menu(self, menu: Menu, optimized: OptimizedItems) -> int:
        """
        Insert a menu and all of its fact rows in one transaction.

        Content groups are resolved by name against the normalized catalog;
        a name the normalizer never saw is registered and written here.
        A failure rolls back this menu only; earlier menus stay committed.

        Returns:
            Generated menu id

        Raises:
            PersistenceError: If the transaction fails
        """
        menu_record = MenuRecord(restaurant_id=menu.restaurant_id)

        for entree in menu.entrees:
            entree_record = MenuMapper.entree_to_record(entree)

            for group in entree.content_groups:
                group_id = self._content_group_id(optimized, group.content_group_name)
                entree_record.content_groups.append(
                    MenuMapper.content_group_to_record(group, group_id)
                )

            for content in entree.contents:
                group_id = self._content_group_id(optimized, content.content_group_name)
                entree_record.contents.append(
                    MenuMapper.content_to_record(content, group_id)
                )

            menu_record.entrees.append(entree_record)

        menu_record.drinks.extend(MenuMapper.drink_to_record(d) for d in menu.drinks)
        menu_record.non_food_items.extend(
            MenuMapper.non_food_item_to_record(n) for n in menu.non_food_items
        )
        menu_record.sides.extend(MenuMapper.side_to_record(s) for s in menu.sides)

        self.db.add(menu_record)
        self.flush("inserting menu")
        menu_id = menu_record.id
        self.commit("committing menu")
        return menu_id

    def _content_group_id(
        self, optimized: OptimizedItems, name: Optional[str]
    ) -> Optional[int]:
        """Rank of a content group, creating its dimension row if unseen"""
        if name is None:
            return None
        if name not in optimized.content_groups:
            optimized.add_content_group(name)
            self.db.add(
                ContentGroupName(
                    id=optimized.content_groups.rank(name), content_group_name=name
                )
            )
            self.flush("inserting content group")
        return optimized.content_groups.rank(name)
