from pydantic import Field
from typing import Optional, List

from domain.schemas.base import WireModel
from domain.schemas.restaurant_schemas import Restaurant


class SearchEmbeds(WireModel):
    """Optional blocks the search endpoint should embed in each restaurant"""

    address_types: Optional[List[str]] = None
    real_hours: Optional[bool] = None
    directions: Optional[bool] = None
    catering: Optional[bool] = None
    online_ordering: Optional[bool] = None
    timezone: Optional[bool] = None
    marketing: Optional[bool] = None
    chipotlane: Optional[bool] = None
    sustainability: Optional[bool] = None
    experience: Optional[bool] = None


class SearchQuery(WireModel):
    """Body of the restaurant search request"""

    latitude: Optional[float] = None
    longitude: Optional[float] = None
    radius: Optional[int] = Field(None, description="Radius in meters")
    restaurant_statuses: Optional[List[str]] = None
    concept_ids: Optional[List[str]] = None
    order_by: Optional[str] = None
    order_by_descending: Optional[bool] = None
    page_size: Optional[int] = None
    page_index: int = 0
    embeds: Optional[SearchEmbeds] = None

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class PagingInfo(WireModel):
    current_page: int = 0
    total_pages: int = 0
    items_per_page: Optional[int] = None
    total_items: Optional[int] = None


class SearchResult(WireModel):
    """One page of search results"""

    restaurants: List[Restaurant] = Field(default_factory=list, alias="data")
    paging_info: PagingInfo = Field(default_factory=PagingInfo)
