"""
Tests for all repository classes.

This test suite validates the data access layer against a real SQLite file:
- RestaurantRepository: restaurant rows with flattened blocks, addresses and hours
- CatalogRepository: dimension rows and items written as ranks in one transaction
- MenuRepository: menu fact rows, content group resolution and lazy creation

Every failure is checked to roll back only the transaction it happened in.
"""

import pytest
from sqlalchemy.orm import Session

from test_fixtures import (
    burrito_menu,
    db_engine,
    db_session,
    make_content,
    make_entree,
    make_menu,
    make_restaurant,
)
from app.exceptions import PersistenceError
from domain.models import (
    AddressRecord,
    ContentGroupName,
    ContentRecord,
    DrinkRecord,
    EntreeContentGroupRecord,
    EntreeRecord,
    ItemCategory,
    ItemName,
    ItemRecord,
    ItemType,
    MenuRecord,
    NonFoodItemRecord,
    PrimaryFillingName,
    RealHoursRecord,
    RestaurantRecord,
    SideRecord,
)
from domain.schemas import Chipotlane, Timezone
from repositories import CatalogRepository, MenuRepository, RestaurantRepository
from services.catalog_service import optimize_items


# =============================================================================
# RESTAURANT REPOSITORY TESTS
# =============================================================================


def test_insert_restaurant_with_addresses_and_hours(db_session: Session):
    """
    Test inserting one restaurant.

    Verifies:
    - insert_restaurant() returns the generated id
    - Nested blocks land in prefixed columns
    - Every address and hours entry references the new id
    """
    repo = RestaurantRepository(db_session)
    restaurant = make_restaurant(
        2417,
        "Davis Downtown",
        timezone=Timezone(timezone="PST", timezone_offset=-480),
        chipotlane=Chipotlane(chipotlane_pickup_enabled=True),
    )

    restaurant_id = repo.insert_restaurant(restaurant)

    record = db_session.get(RestaurantRecord, restaurant_id)
    assert record.restaurant_number == 2417
    assert record.restaurant_name == "Davis Downtown"
    assert record.directions_landmark == "Across from the capitol"
    assert record.timezone_timezone == "PST"
    assert record.timezone_timezone_offset == -480
    assert record.chipotlane_pickup_enabled is True

    addresses = db_session.query(AddressRecord).all()
    assert len(addresses) == 1
    assert addresses[0].restaurant_id == restaurant_id
    assert addresses[0].locality == "Sacramento"

    hours = db_session.query(RealHoursRecord).filter_by(restaurant_id=restaurant_id).all()
    assert sorted(h.day_of_week for h in hours) == sorted(
        ["MONDAY", "TUESDAY", "WEDNESDAY", "THURSDAY", "FRIDAY", "SATURDAY", "SUNDAY"]
    )


def test_insert_restaurants_get_distinct_ids(db_session: Session):
    repo = RestaurantRepository(db_session)

    first = repo.insert_restaurant(make_restaurant(1))
    second = repo.insert_restaurant(make_restaurant(2, addresses=[], real_hours=[]))

    assert first != second
    assert repo.count() == 2
    numbers = {r.id: r.restaurant_number for r in db_session.query(RestaurantRecord)}
    assert numbers == {first: 1, second: 2}
    assert db_session.query(AddressRecord).count() == 1


# =============================================================================
# CATALOG REPOSITORY TESTS
# =============================================================================


def test_insert_optimized_items_writes_ranks(db_session: Session):
    """
    Test writing a normalized catalog.

    Verifies:
    - Dimension ids are ranks (first-seen order, starting at 1)
    - Item foreign keys are ranks of the same values
    - Missing dimensions stay NULL
    """
    menu = make_menu(
        1,
        entrees=[
            make_entree(
                "E1",
                groups=["Fillings"],
                contents=[make_content("C1", "TOPPING", "Rice", "Fillings")],
            )
        ],
    )
    optimized = optimize_items([menu])

    written = CatalogRepository(db_session).insert_optimized_items(optimized)

    assert written == 2
    assert {t.item_type: t.id for t in db_session.query(ItemType)} == {"ENTREE": 1, "TOPPING": 2}
    assert {n.item_name: n.id for n in db_session.query(ItemName)} == {"Burrito": 1, "Rice": 2}
    assert {c.item_category: c.id for c in db_session.query(ItemCategory)} == {"BURRITO": 1}
    assert {p.primary_filling_name: p.id for p in db_session.query(PrimaryFillingName)} == {"Chicken": 1}
    assert {g.content_group_name: g.id for g in db_session.query(ContentGroupName)} == {"Fillings": 1}

    e1 = db_session.get(ItemRecord, "E1")
    assert (e1.item_type_id, e1.item_category_id, e1.item_name_id, e1.primary_filling_name_id) == (1, 1, 1, 1)

    c1 = db_session.get(ItemRecord, "C1")
    assert c1.item_type_id == 2
    assert c1.item_name_id == 2
    assert c1.item_category_id is None
    assert c1.primary_filling_name_id is None


def test_insert_optimized_items_is_all_or_nothing(db_session: Session):
    """Test that a conflicting dimension row rolls back every catalog row"""
    db_session.add(ItemType(id=1, item_type="LEFTOVER"))
    db_session.commit()

    optimized = optimize_items([burrito_menu(1)])

    with pytest.raises(PersistenceError):
        CatalogRepository(db_session).insert_optimized_items(optimized)

    assert db_session.query(ItemRecord).count() == 0
    assert db_session.query(ItemName).count() == 0
    assert [t.item_type for t in db_session.query(ItemType)] == ["LEFTOVER"]


# =============================================================================
# MENU REPOSITORY TESTS
# =============================================================================


def test_insert_menu_writes_all_fact_rows(db_session: Session):
    """
    Test inserting a full menu.

    Verifies:
    - One menus row with the restaurant id
    - Entree, content group memberships and contents reference the new entree
    - Content group ids are the ranks from the catalog
    - Drinks, sides and non-food items reference the menu
    """
    menu = burrito_menu(2417)
    optimized = optimize_items([menu])
    CatalogRepository(db_session).insert_optimized_items(optimized)

    menu_id = MenuRepository(db_session).insert_menu(menu, optimized)

    menu_row = db_session.get(MenuRecord, menu_id)
    assert menu_row.restaurant_id == 2417

    entree = db_session.query(EntreeRecord).one()
    assert entree.menu_id == menu_id
    assert entree.item_id == "CMG-101"
    assert entree.unit_price == pytest.approx(10.95)
    assert entree.max_quantity == 25

    memberships = db_session.query(EntreeContentGroupRecord).order_by(EntreeContentGroupRecord.id).all()
    assert [(m.entree_id, m.content_group_id, m.max_quantity) for m in memberships] == [
        (entree.id, 1, 2),
        (entree.id, 2, 2),
    ]

    contents = db_session.query(ContentRecord).order_by(ContentRecord.id).all()
    assert [(c.item_id, c.content_group_id) for c in contents] == [("CMG-5001", 1), ("CMG-5002", 2)]
    assert all(c.entree_id == entree.id for c in contents)

    assert db_session.query(SideRecord).one().menu_id == menu_id
    assert db_session.query(DrinkRecord).one().item_id == "CMG-3001"
    assert db_session.query(NonFoodItemRecord).one().item_id == "CMG-9001"


def test_insert_menu_creates_unseen_content_group(db_session: Session):
    """
    Test that a content group only referenced by a content gets a row on demand.

    The normalizer registers group names from entree content groups; a content
    may point at a name that was never listed there.
    """
    menu = make_menu(
        5,
        entrees=[
            make_entree(
                "E1",
                groups=["Fillings"],
                contents=[
                    make_content("C1", "TOPPING", "Rice", "Fillings"),
                    make_content("C2", "TOPPING", "Queso", "Extras"),
                    make_content("C3", "TOPPING", "Lime", None),
                ],
            )
        ],
    )
    optimized = optimize_items([menu])
    CatalogRepository(db_session).insert_optimized_items(optimized)

    MenuRepository(db_session).insert_menu(menu, optimized)

    groups = {g.content_group_name: g.id for g in db_session.query(ContentGroupName)}
    assert groups == {"Fillings": 1, "Extras": 2}
    assert optimized.content_groups.rank("Extras") == 2

    by_item = {c.item_id: c.content_group_id for c in db_session.query(ContentRecord)}
    assert by_item == {"C1": 1, "C2": 2, "C3": None}


def test_failed_menu_does_not_undo_earlier_menus(db_session: Session):
    """Test that each menu is its own transaction"""
    first = burrito_menu(1)
    second = make_menu(
        2,
        entrees=[
            make_entree("E9", contents=[make_content("C9", "TOPPING", "Corn", "Salsas")]),
        ],
    )
    optimized = optimize_items([first, second])
    CatalogRepository(db_session).insert_optimized_items(optimized)

    repo = MenuRepository(db_session)
    repo.insert_menu(first, optimized)

    # Occupy the id the lazily created "Salsas" group would get
    db_session.add(ContentGroupName(id=len(optimized.content_groups) + 1, content_group_name="Occupied"))
    db_session.commit()

    with pytest.raises(PersistenceError):
        repo.insert_menu(second, optimized)

    assert repo.count() == 1
    assert db_session.query(MenuRecord).one().restaurant_id == 1
    assert db_session.query(EntreeRecord).count() == 1
