"""
Restaurant location models.
Nested blocks of the search document are flattened into prefixed columns.
"""

from sqlalchemy import Column, Integer, Text, Float, Boolean, ForeignKey
from sqlalchemy.orm import relationship

from domain.models.database import Base


class RestaurantRecord(Base):
    """One searched restaurant location"""

    __tablename__ = "restaurants"

    id = Column(Integer, primary_key=True, autoincrement=True)
    restaurant_number = Column(Integer, index=True)
    restaurant_name = Column(Text)
    restaurant_location_type = Column(Text)
    restaurant_status = Column(Text)
    open_date = Column(Text)
    real_estate_category = Column(Text)
    operational_region = Column(Text)
    operational_sub_region = Column(Text)
    operational_patch = Column(Text)
    designated_market_area_name = Column(Text)
    distance = Column(Float)
    directions_landmark = Column(Text)
    directions_cross_street1 = Column(Text)
    directions_cross_street2 = Column(Text)
    directions_pickup_instructions = Column(Text)
    timezone_current_timezone_offset = Column(Integer)
    timezone_timezone_offset = Column(Integer)
    timezone_timezone = Column(Text)
    timezone_timezone_id = Column(Text)
    timezone_observe_daylight_savings = Column(Text)
    timezone_daylight_savings_offset = Column(Integer)
    marketing_operations_market = Column(Text)
    marketing_special_menu_panel_instructions = Column(Text)
    marketing_feature_menu_panel = Column(Text)
    marketing_kids_menu_panel = Column(Text)
    marketing_calories_on_menu_panel = Column(Text)
    marketing_food_with_integrity_menu_board_width_id = Column(Text)
    marketing_menu_board_panel_height_id = Column(Text)
    marketing_menu_panel_type_id = Column(Text)
    marketing_alcohol_category = Column(Text)
    marketing_alcohol_category_description = Column(Text)
    marketing_marketing_alcohol_description = Column(Text)
    catering_enabled = Column(Boolean)
    chipotlane_pickup_enabled = Column(Boolean)
    experience_curbside_pickup_enabled = Column(Boolean)
    experience_dining_room_open = Column(Boolean)
    experience_digital_kitchen = Column(Boolean)
    experience_walkup_window_enabled = Column(Boolean)
    experience_pickup_inside_enabled = Column(Boolean)
    experience_crew_tip_pickup_enabled = Column(Boolean)
    experience_crew_tip_delivery_enabled = Column(Boolean)
    experience_context_rest_exp_enabled = Column(Boolean)
    sustainability_utensils_default_state = Column(Text)
    planned_subs_compl_date = Column(Text)
    actual_subs_compl_date = Column(Text)
    online_ordering_enabled = Column(Boolean)
    online_ordering_dot_com_search_enabled = Column(Text)
    online_ordering_credit_cards_accepted = Column(Boolean)
    online_ordering_gift_cards_accepted = Column(Boolean)
    online_ordering_bulk_orders_accepted = Column(Boolean)
    online_ordering_tax_assessed = Column(Boolean)
    restaurant_terminal_site_id = Column(Integer)

    # Relationships
    addresses = relationship(
        "AddressRecord", back_populates="restaurant", cascade="all, delete-orphan"
    )
    real_hours = relationship(
        "RealHoursRecord", back_populates="restaurant", cascade="all, delete-orphan"
    )


class AddressRecord(Base):
    __tablename__ = "addresses"

    id = Column(Integer, primary_key=True, autoincrement=True)
    restaurant_id = Column(Integer, ForeignKey("restaurants.id"))
    address_type = Column(Text)
    address_line1 = Column(Text)
    address_line2 = Column(Text)
    locality = Column(Text)
    administrative_area = Column(Text)
    postal_code = Column(Text)
    sub_administrative_area = Column(Text)
    country_code = Column(Text)
    latitude = Column(Float)
    longitude = Column(Float)
    accuracy_determination = Column(Text)

    restaurant = relationship("RestaurantRecord", back_populates="addresses")


class RealHoursRecord(Base):
    """Weekly opening hours entry"""

    __tablename__ = "real_hours"

    id = Column(Integer, primary_key=True, autoincrement=True)
    restaurant_id = Column(Integer, ForeignKey("restaurants.id"))
    day_of_week = Column(Text)
    open_date_time = Column(Text)
    close_date_time = Column(Text)

    restaurant = relationship("RestaurantRecord", back_populates="real_hours")
