"""
Tests for the HTTP client of the restaurant and menu services.

Requests are answered by an httpx.MockTransport so the real wire format is
exercised end to end:
- Search pagination (page order, request count, query left untouched)
- Authentication and content type headers
- Menu request path and query parameters
- Error mapping (transport failures, non-success statuses, bad bodies)
"""

import httpx
import pytest

from test_fixtures import TEST_API_KEY, json_body, mock_api_client, restaurant_json
from app.exceptions import ApiDecodeError, ApiError, ApiRequestError
from domain.schemas import SearchQuery


def paged_search_handler(pages, seen):
    """
    Search service that numbers pages from 1 and treats page index 0 as page 1.

    Args:
        pages: list of restaurant lists, one per page
        seen: list collecting every decoded request body
    """

    def handler(request: httpx.Request) -> httpx.Response:
        body = json_body(request)
        seen.append(body)
        page = max(body["pageIndex"], 1)
        return httpx.Response(
            200,
            json={
                "data": pages[page - 1],
                "pagingInfo": {"currentPage": page, "totalPages": len(pages)},
            },
        )

    return handler


# =============================================================================
# SEARCH TESTS
# =============================================================================


def test_search_follows_every_page_in_order():
    """
    Test that search walks all pages and concatenates results in server order.

    Verifies:
    - One request per page
    - page_index of each follow-up request is current_page + 1
    - Restaurants keep their order across page boundaries
    """
    pages = [
        [restaurant_json(1, "Davis"), restaurant_json(2, "Woodland")],
        [restaurant_json(3, "Folsom")],
        [restaurant_json(4, "Roseville"), restaurant_json(5, "Elk Grove")],
    ]
    seen = []

    with mock_api_client(paged_search_handler(pages, seen)) as client:
        restaurants = client.search(SearchQuery(page_size=2, page_index=0))

    assert len(seen) == 3
    # Follow-ups ask for current_page + 1 (see the pagination decision in DESIGN.md)
    assert [body["pageIndex"] for body in seen] == [0, 2, 3]
    assert [r.restaurant_number for r in restaurants] == [1, 2, 3, 4, 5]
    assert restaurants[2].restaurant_name == "Folsom"


def test_search_single_page_makes_one_request():
    """Test that a result reporting current_page == total_pages stops immediately"""
    seen = []

    with mock_api_client(paged_search_handler([[restaurant_json(7, "Dixon")]], seen)) as client:
        restaurants = client.search(SearchQuery())

    assert len(seen) == 1
    assert [r.restaurant_number for r in restaurants] == [7]


def test_search_stops_when_current_page_does_not_advance():
    """
    Test that a service repeating the same page number cannot loop forever.

    Verifies:
    - Paging stops after the first response that repeats current_page
    - Restaurants from every response received are kept
    """
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(json_body(request))
        number = len(seen)
        return httpx.Response(
            200,
            json={
                "data": [restaurant_json(number, f"Store {number}")],
                "pagingInfo": {"currentPage": 1, "totalPages": 3},
            },
        )

    with mock_api_client(handler) as client:
        restaurants = client.search(SearchQuery())

    assert len(seen) == 2
    assert [body["pageIndex"] for body in seen] == [0, 2]
    assert [r.restaurant_number for r in restaurants] == [1, 2]


def test_search_does_not_modify_caller_query():
    """Test that paging works on a copy of the caller's query"""
    pages = [[restaurant_json(1, "A")], [restaurant_json(2, "B")]]
    query = SearchQuery(latitude=38.5, longitude=-121.2, radius=1000, page_index=0)

    with mock_api_client(paged_search_handler(pages, [])) as client:
        client.search(query)

    assert query.page_index == 0


def test_search_payload_uses_camel_case_and_omits_unset_fields():
    """
    Test the JSON body of a search request.

    Verifies:
    - Field names are camelCase on the wire
    - Unset optional fields are not sent
    """
    seen = []
    query = SearchQuery(
        latitude=38.5,
        longitude=-121.2,
        radius=9046700,
        restaurant_statuses=["OPEN", "LAB"],
        page_size=4000,
    )

    with mock_api_client(paged_search_handler([[]], seen)) as client:
        assert client.search(query) == []

    body = seen[0]
    assert body["restaurantStatuses"] == ["OPEN", "LAB"]
    assert body["pageSize"] == 4000
    assert "orderBy" not in body
    assert "embeds" not in body


def test_requests_carry_subscription_key_and_content_type():
    """Test that every request carries the API key and JSON content type headers"""
    captured = []

    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        if request.method == "POST":
            return httpx.Response(
                200, json={"data": [], "pagingInfo": {"currentPage": 1, "totalPages": 1}}
            )
        return httpx.Response(200, json={"restaurantId": 42})

    with mock_api_client(handler) as client:
        client.search(SearchQuery())
        client.get_menu(42)

    assert len(captured) == 2
    for request in captured:
        assert request.headers["Ocp-Apim-Subscription-Key"] == TEST_API_KEY
        assert request.headers["Content-Type"] == "application/json"


def test_search_error_on_later_page_aborts():
    """Test that a failing follow-up page fails the whole search"""

    def handler(request: httpx.Request) -> httpx.Response:
        if json_body(request)["pageIndex"] == 0:
            return httpx.Response(
                200,
                json={
                    "data": [restaurant_json(1, "A")],
                    "pagingInfo": {"currentPage": 1, "totalPages": 2},
                },
            )
        return httpx.Response(503, text="service unavailable")

    with mock_api_client(handler) as client:
        with pytest.raises(ApiRequestError) as exc_info:
            client.search(SearchQuery())

    assert exc_info.value.status_code == 503
    assert "service unavailable" in str(exc_info.value)


# =============================================================================
# MENU TESTS
# =============================================================================


def test_get_menu_request_and_decoding():
    """
    Test menu retrieval for one restaurant.

    Verifies:
    - GET on the online menu path of the restaurant
    - channelId=web and includeUnavailableItems=true query parameters
    - Nested entrees, contents and groups are decoded
    """
    captured = []
    menu_json = {
        "restaurantId": 42,
        "entrees": [
            {
                "itemId": "CMG-101",
                "itemType": "ENTREE",
                "itemCategory": "BURRITO",
                "itemName": "Burrito",
                "primaryFillingName": "Chicken",
                "unitPrice": 10.95,
                "contentGroups": [{"contentGroupName": "Fillings", "minQuantity": 0, "maxQuantity": 2}],
                "contents": [
                    {
                        "itemId": "CMG-5001",
                        "itemType": "TOPPING",
                        "itemName": "White Rice",
                        "contentGroupName": "Fillings",
                        "customizations": [{"type": "LIGHT"}],
                    }
                ],
            }
        ],
        "sides": [{"itemId": "CMG-2001", "itemName": "Chips"}],
        "drinks": [],
        "nonFoodItems": None,
    }

    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        return httpx.Response(200, json=menu_json)

    with mock_api_client(handler) as client:
        menu = client.get_menu(42)

    request = captured[0]
    assert request.method == "GET"
    assert request.url.path == "/menuinnovation/v1/restaurants/42/onlinemenu"
    assert request.url.params["channelId"] == "web"
    assert request.url.params["includeUnavailableItems"] == "true"

    assert menu.restaurant_id == 42
    entree = menu.entrees[0]
    assert entree.primary_filling_name == "Chicken"
    assert entree.content_groups[0].content_group_name == "Fillings"
    assert entree.contents[0].item_name == "White Rice"
    assert menu.sides[0].item_id == "CMG-2001"
    assert menu.non_food_items == []


def test_get_menu_non_success_status_keeps_body():
    """Test that a non-2xx response raises ApiRequestError carrying status and body"""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, text="menu backend timeout")

    with mock_api_client(handler) as client:
        with pytest.raises(ApiRequestError) as exc_info:
            client.get_menu(42)

    err = exc_info.value
    assert isinstance(err, ApiError)
    assert err.status_code == 500
    assert err.details["body"] == "menu backend timeout"
    assert "500" in str(err)
    assert "menu backend timeout" in str(err)


def test_get_menu_invalid_json_raises_decode_error():
    """Test that an undecodable body raises ApiDecodeError"""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"<html>maintenance</html>")

    with mock_api_client(handler) as client:
        with pytest.raises(ApiDecodeError):
            client.get_menu(42)


def test_get_menu_missing_required_field_raises_decode_error():
    """Test that a menu without restaurantId is rejected"""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"entrees": []})

    with mock_api_client(handler) as client:
        with pytest.raises(ApiDecodeError):
            client.get_menu(42)


def test_transport_failure_raises_request_error():
    """Test that connection failures surface as ApiRequestError"""

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with mock_api_client(handler) as client:
        with pytest.raises(ApiRequestError) as exc_info:
            client.get_menu(42)

    assert "connection refused" in str(exc_info.value)
    assert exc_info.value.status_code is None
