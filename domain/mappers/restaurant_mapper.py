"""
Restaurant mappers.
Flattens the nested search document into a restaurants row and its child rows.
"""

from domain.models import RestaurantRecord, AddressRecord, RealHoursRecord
from domain.schemas.restaurant_schemas import Restaurant, Address, RealHours


class RestaurantMapper:
    """Mapper for restaurant-related transformations."""

    @staticmethod
    def to_record(restaurant: Restaurant) -> RestaurantRecord:
        """
        Convert a Restaurant document to a RestaurantRecord ORM instance.

        Addresses and weekly hours become child rows attached through the
        relationships, so they are written with the parent.

        Args:
            restaurant: Restaurant as returned by the search endpoint

        Returns:
            Unsaved RestaurantRecord
        """
        directions = restaurant.directions
        timezone = restaurant.timezone
        marketing = restaurant.marketing
        experience = restaurant.experience
        ordering = restaurant.online_ordering

        return RestaurantRecord(
            restaurant_number=restaurant.restaurant_number,
            restaurant_name=restaurant.restaurant_name,
            restaurant_location_type=restaurant.restaurant_location_type,
            restaurant_status=restaurant.restaurant_status,
            open_date=restaurant.open_date,
            real_estate_category=restaurant.real_estate_category,
            operational_region=restaurant.operational_region,
            operational_sub_region=restaurant.operational_sub_region,
            operational_patch=restaurant.operational_patch,
            designated_market_area_name=restaurant.designated_market_area_name,
            distance=restaurant.distance,
            directions_landmark=directions.landmark,
            directions_cross_street1=directions.cross_street1,
            directions_cross_street2=directions.cross_street2,
            directions_pickup_instructions=directions.pickup_instructions,
            timezone_current_timezone_offset=timezone.current_timezone_offset,
            timezone_timezone_offset=timezone.timezone_offset,
            timezone_timezone=timezone.timezone,
            timezone_timezone_id=timezone.timezone_id,
            timezone_observe_daylight_savings=timezone.observe_daylight_savings,
            timezone_daylight_savings_offset=timezone.daylight_savings_offset,
            marketing_operations_market=marketing.operations_market,
            marketing_special_menu_panel_instructions=marketing.special_menu_panel_instructions,
            marketing_feature_menu_panel=marketing.feature_menu_panel,
            marketing_kids_menu_panel=marketing.kids_menu_panel,
            marketing_calories_on_menu_panel=marketing.calories_on_menu_panel,
            marketing_food_with_integrity_menu_board_width_id=marketing.food_with_integrity_menu_board_width_id,
            marketing_menu_board_panel_height_id=marketing.menu_board_panel_height_id,
            marketing_menu_panel_type_id=marketing.menu_panel_type_id,
            marketing_alcohol_category=marketing.alcohol_category,
            marketing_alcohol_category_description=marketing.alcohol_category_description,
            marketing_marketing_alcohol_description=marketing.marketing_alcohol_description,
            catering_enabled=restaurant.catering.catering_enabled,
            chipotlane_pickup_enabled=restaurant.chipotlane.chipotlane_pickup_enabled,
            experience_curbside_pickup_enabled=experience.curbside_pickup_enabled,
            experience_dining_room_open=experience.dining_room_open,
            experience_digital_kitchen=experience.digital_kitchen,
            experience_walkup_window_enabled=experience.walkup_window_enabled,
            experience_pickup_inside_enabled=experience.pickup_inside_enabled,
            experience_crew_tip_pickup_enabled=experience.crew_tip_pickup_enabled,
            experience_crew_tip_delivery_enabled=experience.crew_tip_delivery_enabled,
            experience_context_rest_exp_enabled=experience.context_rest_exp_enabled,
            sustainability_utensils_default_state=restaurant.sustainability.utensils_default_state,
            planned_subs_compl_date=restaurant.planned_subs_compl_date,
            actual_subs_compl_date=restaurant.actual_subs_compl_date,
            online_ordering_enabled=ordering.online_ordering_enabled,
            online_ordering_dot_com_search_enabled=ordering.online_ordering_dot_com_search_enabled,
            online_ordering_credit_cards_accepted=ordering.online_ordering_credit_cards_accepted,
            online_ordering_gift_cards_accepted=ordering.online_ordering_gift_cards_accepted,
            online_ordering_bulk_orders_accepted=ordering.online_ordering_bulk_orders_accepted,
            online_ordering_tax_assessed=ordering.online_ordering_tax_assessed,
            restaurant_terminal_site_id=ordering.restaurant_terminal_site_id,
            addresses=[RestaurantMapper.address_to_record(a) for a in restaurant.addresses],
            real_hours=[RestaurantMapper.hours_to_record(h) for h in restaurant.real_hours],
        )

    @staticmethod
    def address_to_record(address: Address) -> AddressRecord:
        return AddressRecord(**address.model_dump())

    @staticmethod
    def hours_to_record(hours: RealHours) -> RealHoursRecord:
        return RealHoursRecord(**hours.model_dump())
