"""
Restaurant records as returned by the search endpoint.
Nested blocks are only present when the matching embed was requested.
"""

from pydantic import Field
from typing import Optional, List

from domain.schemas.base import WireModel


class Address(WireModel):
    address_type: Optional[str] = None
    address_line1: Optional[str] = None
    address_line2: Optional[str] = None
    locality: Optional[str] = None
    administrative_area: Optional[str] = None
    postal_code: Optional[str] = None
    sub_administrative_area: Optional[str] = None
    country_code: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    accuracy_determination: Optional[str] = None


class Directions(WireModel):
    landmark: Optional[str] = None
    cross_street1: Optional[str] = None
    cross_street2: Optional[str] = None
    pickup_instructions: Optional[str] = None


class Timezone(WireModel):
    current_timezone_offset: Optional[int] = None
    timezone_offset: Optional[int] = None
    timezone: Optional[str] = None
    timezone_id: Optional[str] = None
    observe_daylight_savings: Optional[str] = None
    daylight_savings_offset: Optional[int] = None


class Marketing(WireModel):
    operations_market: Optional[str] = None
    special_menu_panel_instructions: Optional[str] = None
    feature_menu_panel: Optional[str] = None
    kids_menu_panel: Optional[str] = None
    calories_on_menu_panel: Optional[str] = None
    food_with_integrity_menu_board_width_id: Optional[str] = None
    menu_board_panel_height_id: Optional[str] = None
    menu_panel_type_id: Optional[str] = None
    alcohol_category: Optional[str] = None
    alcohol_category_description: Optional[str] = None
    marketing_alcohol_description: Optional[str] = None


class RealHours(WireModel):
    """Opening hours for one day of the week"""

    day_of_week: Optional[str] = None
    open_date_time: Optional[str] = None
    close_date_time: Optional[str] = None


class OnlineOrdering(WireModel):
    online_ordering_enabled: Optional[bool] = None
    online_ordering_dot_com_search_enabled: Optional[str] = None
    online_ordering_credit_cards_accepted: Optional[bool] = None
    online_ordering_gift_cards_accepted: Optional[bool] = None
    online_ordering_bulk_orders_accepted: Optional[bool] = None
    online_ordering_tax_assessed: Optional[bool] = None
    restaurant_terminal_site_id: Optional[int] = None


class Catering(WireModel):
    catering_enabled: Optional[bool] = None


class Chipotlane(WireModel):
    chipotlane_pickup_enabled: Optional[bool] = None


class Experience(WireModel):
    curbside_pickup_enabled: Optional[bool] = None
    dining_room_open: Optional[bool] = None
    digital_kitchen: Optional[bool] = None
    walkup_window_enabled: Optional[bool] = None
    pickup_inside_enabled: Optional[bool] = None
    crew_tip_pickup_enabled: Optional[bool] = None
    crew_tip_delivery_enabled: Optional[bool] = None
    context_rest_exp_enabled: Optional[bool] = None


class Sustainability(WireModel):
    utensils_default_state: Optional[str] = None


class Restaurant(WireModel):
    """A restaurant location, identified by restaurant_number"""

    restaurant_number: int
    restaurant_name: Optional[str] = None
    restaurant_location_type: Optional[str] = None
    restaurant_status: Optional[str] = None
    open_date: Optional[str] = None
    real_estate_category: Optional[str] = None
    operational_region: Optional[str] = None
    operational_sub_region: Optional[str] = None
    operational_patch: Optional[str] = None
    designated_market_area_name: Optional[str] = None
    distance: Optional[float] = None
    addresses: List[Address] = Field(default_factory=list)
    directions: Directions = Field(default_factory=Directions)
    timezone: Timezone = Field(default_factory=Timezone)
    marketing: Marketing = Field(default_factory=Marketing)
    real_hours: List[RealHours] = Field(default_factory=list)
    online_ordering: OnlineOrdering = Field(default_factory=OnlineOrdering)
    catering: Catering = Field(default_factory=Catering)
    chipotlane: Chipotlane = Field(default_factory=Chipotlane)
    experience: Experience = Field(default_factory=Experience)
    sustainability: Sustainability = Field(default_factory=Sustainability)
    planned_subs_compl_date: Optional[str] = None
    actual_subs_compl_date: Optional[str] = None

    @property
    def display_name(self) -> str:
        return self.restaurant_name or f"#{self.restaurant_number}"
