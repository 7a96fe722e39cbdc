"""
Normalized item catalog: dimension tables and the deduplicated items table.

Dimension ids are 1-based ranks assigned by the catalog normalizer, not
autoincremented by the database.
"""

from sqlalchemy import Column, Integer, Text, ForeignKey

from domain.models.database import Base


class ItemType(Base):
    __tablename__ = "item_types"

    id = Column(Integer, primary_key=True, autoincrement=False)
    item_type = Column(Text, unique=True)


class ItemCategory(Base):
    __tablename__ = "item_categories"

    id = Column(Integer, primary_key=True, autoincrement=False)
    item_category = Column(Text, unique=True)


class ItemName(Base):
    __tablename__ = "item_names"

    id = Column(Integer, primary_key=True, autoincrement=False)
    item_name = Column(Text, unique=True)


class PrimaryFillingName(Base):
    __tablename__ = "primary_filling_names"

    id = Column(Integer, primary_key=True, autoincrement=False)
    primary_filling_name = Column(Text, unique=True)


class ContentGroupName(Base):
    """Distinct content group names (e.g. 'Fillings')"""

    __tablename__ = "content_groups"

    id = Column(Integer, primary_key=True, autoincrement=False)
    content_group_name = Column(Text, unique=True)


class ItemRecord(Base):
    """
    One row per natural item identifier across the whole run.

    Dimension references are nullable: items first seen as an entree content
    only carry a type and a name.
    """

    __tablename__ = "items"

    id = Column(Text, primary_key=True)
    item_type_id = Column(Integer, ForeignKey("item_types.id"))
    item_category_id = Column(Integer, ForeignKey("item_categories.id"))
    item_name_id = Column(Integer, ForeignKey("item_names.id"))
    primary_filling_name_id = Column(Integer, ForeignKey("primary_filling_names.id"))
