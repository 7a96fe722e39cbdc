"""
Menu fact models: one menu per restaurant and one row per item occurrence.
"""

from sqlalchemy import Column, Integer, Text, Float, Boolean, ForeignKey
from sqlalchemy.orm import relationship

from domain.models.database import Base


class MenuRecord(Base):
    __tablename__ = "menus"

    id = Column(Integer, primary_key=True, autoincrement=True)
    restaurant_id = Column(Integer)

    # Relationships
    entrees = relationship(
        "EntreeRecord", back_populates="menu", cascade="all, delete-orphan"
    )
    drinks = relationship("DrinkRecord", cascade="all, delete-orphan")
    sides = relationship("SideRecord", cascade="all, delete-orphan")
    non_food_items = relationship("NonFoodItemRecord", cascade="all, delete-orphan")


class EntreeRecord(Base):
    __tablename__ = "entrees"

    id = Column(Integer, primary_key=True, autoincrement=True)
    menu_id = Column(Integer, ForeignKey("menus.id"))
    item_id = Column(Text, ForeignKey("items.id"))
    pos_id = Column(Integer)
    unit_price = Column(Float)
    unit_delivery_price = Column(Float)
    unit_count = Column(Integer)
    max_quantity = Column(Integer)
    eligible_for_delivery = Column(Boolean)
    max_contents = Column(Integer)
    max_customizations = Column(Integer)
    max_on_the_side_customizations = Column(Integer)
    max_extras = Column(Integer)
    max_halfs = Column(Integer)
    max_extras_plus_halfs = Column(Integer)
    is_universal = Column(Boolean)
    is_item_available = Column(Boolean)

    menu = relationship("MenuRecord", back_populates="entrees")
    content_groups = relationship(
        "EntreeContentGroupRecord", cascade="all, delete-orphan"
    )
    contents = relationship("ContentRecord", cascade="all, delete-orphan")


class EntreeContentGroupRecord(Base):
    """Membership of a content group in an entree, with quantity bounds"""

    __tablename__ = "entree_content_groups"

    id = Column(Integer, primary_key=True, autoincrement=True)
    entree_id = Column(Integer, ForeignKey("entrees.id"))
    content_group_id = Column(Integer, ForeignKey("content_groups.id"))
    min_quantity = Column(Integer)
    max_quantity = Column(Integer)


class ContentRecord(Base):
    __tablename__ = "contents"

    id = Column(Integer, primary_key=True, autoincrement=True)
    entree_id = Column(Integer, ForeignKey("entrees.id"))
    item_id = Column(Text, ForeignKey("items.id"))
    pos_id = Column(Integer)
    unit_price = Column(Float)
    unit_delivery_price = Column(Float)
    unit_count = Column(Integer)
    eligible_for_delivery = Column(Boolean)
    pricing_reference_item_id = Column(Text)
    count_towards_customization_max = Column(Integer)
    count_towards_content_max = Column(Integer)
    content_group_id = Column(Integer, ForeignKey("content_groups.id"))
    default_content = Column(Boolean)
    is_item_available = Column(Boolean)


class _MenuItemColumns:
    """Columns shared by drinks, sides and non-food items"""

    id = Column(Integer, primary_key=True, autoincrement=True)
    pos_id = Column(Integer)
    unit_price = Column(Float)
    unit_delivery_price = Column(Float)
    unit_count = Column(Integer)
    max_quantity = Column(Integer)
    eligible_for_delivery = Column(Boolean)
    is_universal = Column(Boolean)
    is_item_available = Column(Boolean)


class DrinkRecord(_MenuItemColumns, Base):
    __tablename__ = "drinks"

    menu_id = Column(Integer, ForeignKey("menus.id"))
    item_id = Column(Text, ForeignKey("items.id"))


class SideRecord(_MenuItemColumns, Base):
    __tablename__ = "sides"

    menu_id = Column(Integer, ForeignKey("menus.id"))
    item_id = Column(Text, ForeignKey("items.id"))


class NonFoodItemRecord(_MenuItemColumns, Base):
    __tablename__ = "non_food_items"

    menu_id = Column(Integer, ForeignKey("menus.id"))
    item_id = Column(Text, ForeignKey("items.id"))
