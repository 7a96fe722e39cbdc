"""HTTP client for the Chipotle restaurant and menu services.

Every request carries the subscription key and a JSON content type through
the client's default headers. The underlying httpx.Client is shared by the
menu fetch workers.
"""

import logging
from typing import List, Optional

import httpx
from pydantic import ValidationError

from app.exceptions import ApiDecodeError, ApiRequestError
from domain.schemas import Menu, Restaurant, SearchQuery, SearchResult

logger = logging.getLogger("chipotle.client")

DEFAULT_BASE_URL = "https://services.chipotle.com"
SEARCH_PATH = "/restaurant/v3/restaurant"
MENU_PATH = "/menuinnovation/v1/restaurants/{restaurant_number}/onlinemenu"
MENU_PARAMS = {"channelId": "web", "includeUnavailableItems": "true"}


class ChipotleClient:
    """Sync HTTP client for restaurant search and online menus.

    Example:
        >>> with ChipotleClient(api_key="...") as client:
        ...     restaurants = client.search(query)
        ...     menu = client.get_menu(restaurants[0].restaurant_number)
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """Initialize the client.

        Args:
            api_key: Subscription key sent as Ocp-Apim-Subscription-Key
            base_url: API base URL
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests inject a MockTransport)
        """
        self.base_url = base_url
        self.timeout = timeout
        self._client = httpx.Client(
            base_url=base_url,
            timeout=timeout,
            transport=transport,
            headers={
                "Content-Type": "application/json",
                "Ocp-Apim-Subscription-Key": api_key,
            },
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "ChipotleClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # -------------------------------------------------------------------------
    # Search
    # -------------------------------------------------------------------------

    def search(self, query: SearchQuery) -> List[Restaurant]:
        """Search restaurants, following pagination to the last page.

        While the reported current page is below the total page count, the
        next request asks for page_index = current_page + 1. Restaurants are
        returned in server order, page after page. Paging also stops when the
        reported current page does not advance. The caller's query is not
        modified.

        Raises:
            ApiRequestError: On transport failure or non-success status of any page
            ApiDecodeError: If any page cannot be decoded
        """
        restaurants: List[Restaurant] = []
        page_query = query.model_copy()
        last_page: Optional[int] = None

        while True:
            response = self._send("POST", SEARCH_PATH, json=page_query.to_payload())
            result = self._decode(response, SearchResult)
            restaurants.extend(result.restaurants)

            paging = result.paging_info
            logger.debug(
                "Fetched search page %d/%d (%d restaurants)",
                paging.current_page,
                paging.total_pages,
                len(result.restaurants),
            )
            if paging.current_page >= paging.total_pages:
                break
            if paging.current_page == last_page:
                logger.warning(
                    "Search paging stuck at page %d of %d, stopping",
                    paging.current_page,
                    paging.total_pages,
                )
                break
            last_page = paging.current_page
            page_query = page_query.model_copy(
                update={"page_index": paging.current_page + 1}
            )

        return restaurants

    # -------------------------------------------------------------------------
    # Menus
    # -------------------------------------------------------------------------

    def get_menu(self, restaurant_number: int) -> Menu:
        """Fetch the online menu of one restaurant, unavailable items included.

        Raises:
            ApiRequestError: On transport failure or non-success status
            ApiDecodeError: If the menu document cannot be decoded
        """
        response = self._send(
            "GET",
            MENU_PATH.format(restaurant_number=restaurant_number),
            params=MENU_PARAMS,
        )
        return self._decode(response, Menu)

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _send(self, method: str, path: str, **kwargs) -> httpx.Response:
        try:
            response = self._client.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            raise ApiRequestError(
                f"failed to execute request: {exc}",
                details={"method": method, "url": path},
            ) from exc

        if not response.is_success:
            raise ApiRequestError(
                f"unexpected status code: {response.status_code}, {response.text}",
                details={
                    "method": method,
                    "url": str(response.request.url),
                    "status_code": response.status_code,
                    "body": response.text,
                },
            )
        return response

    @staticmethod
    def _decode(response: httpx.Response, model):
        try:
            return model.model_validate_json(response.content)
        except ValidationError as exc:
            raise ApiDecodeError(
                f"failed to decode response: {exc}",
                details={"url": str(response.request.url)},
            ) from exc
