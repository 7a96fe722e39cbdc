"""
Restaurant Repository - Data access layer for restaurant locations
"""

from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.mappers import RestaurantMapper
from domain.models import RestaurantRecord
from domain.schemas.restaurant_schemas import Restaurant


class RestaurantRepository(BaseRepository[RestaurantRecord]):
    """Repository for restaurant rows and their addresses and hours"""

    def __init__(self, db: Session):
        super().__init__(db, RestaurantRecord)

    def insert_restaurant(self, restaurant: Restaurant) -> int:
        """
        Insert one restaurant with its address and real-hours rows.

        Committed immediately, outside any larger transaction.

        Returns:
            Generated restaurant id

        Raises:
            PersistenceError: If any row is rejected
        """
        record = RestaurantMapper.to_record(restaurant)
        self.db.add(record)
        self.flush("inserting restaurant")
        restaurant_id = record.id
        self.commit("inserting restaurant")
        return restaurant_id
