"""API tests for the response cache and invalidation filters.

Covers:
- Miss: handler runs, camelCase body stored under the request key
- Hit: stored bytes returned verbatim, handler not called
- Query parameters are part of the key
- Failures are never cached
- Mutations clear the listings they affect (and only after success)
- Disabled cache: every request reaches the handler
"""

import pytest
from fastapi import status
from uuid_extensions import uuid7

from src.core.container import (
    get_create_product_handler,
    get_get_all_products_handler,
    get_get_user_profile_by_id_handler,
    get_update_user_profile_handler,
)
from src.core.enums import ErrorCode
from src.core.errors import InternalError, ValidationError
from src.core.result import Failure, Success
from tests.api.conftest import StubHandler, make_product_result, make_user_profile_result

LIST_URL = "/api/v1/Products/GetAllProducts"


@pytest.mark.api
class TestResponseCacheRead:
    """Test cached GET routes."""

    def test_miss_stores_camel_case_body(
        self, client, authenticate_as, override_handler, response_cache
    ):
        # Arrange
        authenticate_as()
        override_handler(
            get_get_all_products_handler,
            StubHandler(Success(value=[make_product_result()])),
        )

        # Act
        response = client.get(LIST_URL)

        # Assert
        assert response.status_code == status.HTTP_200_OK
        assert response.headers["content-type"] == "application/json"
        assert response_cache.entries[LIST_URL] == response.text
        assert '"createdBy"' in response.text

    def test_hit_returns_stored_bytes_without_calling_handler(
        self, client, authenticate_as, override_handler, response_cache
    ):
        # Arrange
        authenticate_as()
        stored = '{"data":[],"isError":false,"errors":[],"marker":"from-cache"}'
        response_cache.entries[LIST_URL] = stored
        stub = override_handler(
            get_get_all_products_handler,
            StubHandler(Success(value=[make_product_result()])),
        )

        # Act
        response = client.get(LIST_URL)

        # Assert
        assert response.status_code == status.HTTP_200_OK
        assert response.text == stored
        assert stub.call_count == 0

    def test_second_request_is_served_from_cache(
        self, client, authenticate_as, override_handler
    ):
        authenticate_as()
        stub = override_handler(
            get_get_all_products_handler,
            StubHandler(Success(value=[make_product_result()])),
        )

        first = client.get(LIST_URL)
        second = client.get(LIST_URL)

        assert first.content == second.content
        assert stub.call_count == 1

    def test_query_parameters_are_part_of_key(
        self, client, authenticate_as, override_handler, response_cache
    ):
        authenticate_as()
        override_handler(get_get_all_products_handler, StubHandler(Success(value=[])))

        client.get(LIST_URL, params={"page": "2", "limit": "10"})

        assert f"{LIST_URL}|limit-10|page-2" in response_cache.entries

    def test_failures_are_not_cached(
        self, client, authenticate_as, override_handler, response_cache
    ):
        authenticate_as()
        override_handler(
            get_get_all_products_handler, StubHandler(Failure(error=[InternalError()]))
        )

        response = client.get(LIST_URL)

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json()["errors"] == ["An error occurred and try again"]
        assert response_cache.entries == {}

    def test_disabled_cache_always_calls_handler(
        self, client, authenticate_as, override_handler, response_cache
    ):
        authenticate_as()
        response_cache.is_enabled = False
        stub = override_handler(
            get_get_all_products_handler, StubHandler(Success(value=[]))
        )

        client.get(LIST_URL)
        client.get(LIST_URL)

        assert stub.call_count == 2
        assert response_cache.entries == {}

    def test_unauthorized_request_never_reads_cache(self, client, response_cache):
        response_cache.entries[LIST_URL] = '{"data":[]}'

        response = client.get(LIST_URL)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.api
class TestCacheInvalidation:
    """Test mutation routes clearing cached listings."""

    def test_create_product_clears_product_listing(
        self, client, authenticate_as, override_handler, response_cache
    ):
        # Arrange
        authenticate_as()
        response_cache.entries[LIST_URL] = "stale"
        response_cache.entries[f"{LIST_URL}|page-2"] = "stale"
        response_cache.entries["/api/v1/UserProfiles/GetAllUserProfiles"] = "kept"
        override_handler(
            get_create_product_handler, StubHandler(Success(value="Create product success"))
        )

        # Act
        client.post(
            "/api/v1/Products/CreateProduct",
            json={"name": "iphone", "price": 1, "description": "d"},
        )

        # Assert
        assert response_cache.removed_patterns == [LIST_URL]
        assert list(response_cache.entries) == ["/api/v1/UserProfiles/GetAllUserProfiles"]

    def test_failed_mutation_keeps_cache(
        self, client, authenticate_as, override_handler, response_cache
    ):
        authenticate_as()
        response_cache.entries[LIST_URL] = "cached"
        override_handler(
            get_create_product_handler,
            StubHandler(
                Failure(
                    error=[
                        ValidationError(
                            code=ErrorCode.VALIDATION_FAILED,
                            message="Price cannot be empty",
                            field="price",
                        )
                    ]
                )
            ),
        )

        response = client.post(
            "/api/v1/Products/CreateProduct",
            json={"name": "iphone", "price": 0, "description": "d"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response_cache.removed_patterns == []
        assert response_cache.entries[LIST_URL] == "cached"

    def test_profile_update_clears_list_and_detail(
        self, client, authenticate_as, override_handler, response_cache
    ):
        authenticate_as("Admin")
        override_handler(
            get_update_user_profile_handler,
            StubHandler(Success(value="Update account success")),
        )

        client.put(
            f"/api/v1/UserProfiles/UpdateUserProfileById/{uuid7()}",
            json={"fullName": "Jane", "phoneNumber": "0123456789", "dateOfBirth": None},
        )

        assert response_cache.removed_patterns == [
            "/api/v1/UserProfiles/GetAllUserProfiles",
            "/api/v1/UserProfiles/GetUserProfileById",
        ]

    def test_updated_profile_detail_is_refetched(
        self, client, authenticate_as, override_handler
    ):
        """A cached detail is dropped by the update and rebuilt on next read."""
        # Arrange
        authenticate_as("Admin")
        profile = make_user_profile_result()
        reader = override_handler(
            get_get_user_profile_by_id_handler, StubHandler(Success(value=profile))
        )
        override_handler(
            get_update_user_profile_handler,
            StubHandler(Success(value="Update account success")),
        )
        detail_url = f"/api/v1/UserProfiles/GetUserProfileById/{profile.id}"

        # Act
        client.get(detail_url)
        client.put(
            f"/api/v1/UserProfiles/UpdateUserProfileById/{profile.id}",
            json={"fullName": "Jane", "phoneNumber": "0123456789"},
        )
        client.get(detail_url)

        # Assert
        assert reader.call_count == 2
