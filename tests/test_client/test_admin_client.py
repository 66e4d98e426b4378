"""
Admin REST client tests
"""

import json

import httpx
import pytest
import respx
from httpx import Response
from pydantic import ValidationError

from pricing_admin.client import AdminAPIClient, AdminAPIError
from pricing_admin.models.cost import CostCategory, CostRecord, CostValueType
from pricing_admin.models.custom_field import ModuleType
from pricing_admin.models.marketplace import MarketplaceWriteRequest

BASE_URL = "http://admin.test/api"


class TestCustomFields:
    @respx.mock
    async def test_list_unwraps_envelope(self, admin_client: AdminAPIClient):
        route = respx.get(url__regex=rf"{BASE_URL}/admin/custom-fields\?.*").mock(
            return_value=Response(
                200,
                json={
                    "success": True,
                    "message": "ok",
                    "customFields": [
                        {"id": 1, "clientId": 9, "name": "Color", "fieldType": "text", "module": "c", "enabled": True},
                        {"id": 2, "clientId": 9, "name": "Size", "fieldType": "dropdown", "module": "c",
                         "enabled": False, "dropdownOptions": "S,M,L"},
                    ],
                    "count": 2,
                },
            )
        )

        fields = await admin_client.list_custom_fields(ModuleType.CATEGORY)

        assert [f.name for f in fields] == ["Color", "Size"]
        assert fields[1].dropdown_options == "S,M,L"
        assert route.calls.last.request.url.params["module"] == "c"
        assert route.calls.last.request.headers["Authorization"] == "Bearer test-token"

    @respx.mock
    async def test_values_accept_bare_list(self, admin_client: AdminAPIClient):
        route = respx.get(url__regex=rf"{BASE_URL}/admin/custom-fields/values\?.*").mock(
            return_value=Response(
                200,
                json=[{"id": 5, "customFieldId": 1, "module": "p", "moduleId": 42, "value": "Red"}],
            )
        )

        values = await admin_client.get_custom_field_values("product", 42)

        assert values[0].custom_field_id == 1
        assert values[0].value == "Red"
        params = route.calls.last.request.url.params
        assert (params["module"], params["moduleId"]) == ("p", "42")

    @respx.mock
    async def test_values_envelope(self, admin_client: AdminAPIClient):
        respx.get(url__regex=rf"{BASE_URL}/admin/custom-fields/values\?.*").mock(
            return_value=Response(200, json={"success": True, "values": [], "count": 0})
        )

        assert await admin_client.get_custom_field_values("c", 1) == []


class TestMarketplaces:
    @respx.mock
    async def test_get_marketplace(self, admin_client: AdminAPIClient):
        respx.get(f"{BASE_URL}/admin/marketplaces/3").mock(
            return_value=Response(
                200,
                json={
                    "success": True,
                    "marketplace": {
                        "id": 3,
                        "name": "Amazon",
                        "description": "Primary",
                        "enabled": True,
                        "costs": [
                            {"id": 11, "costCategory": "COMMISSION", "costValueType": "P",
                             "costValue": 12.5, "costProductRange": "All"},
                        ],
                    },
                },
            )
        )

        marketplace = await admin_client.get_marketplace(3)

        assert marketplace.name == "Amazon"
        assert marketplace.costs[0]["costValueType"] == "P"
        assert marketplace.costs[0]["costProductRange"] == "All"

    @respx.mock
    async def test_update_sends_wire_body(self, admin_client: AdminAPIClient):
        route = respx.put(f"{BASE_URL}/admin/marketplaces/3").mock(
            return_value=Response(200, json={"success": True, "marketplace": {"id": 3, "name": "Amazon"}})
        )
        request = MarketplaceWriteRequest(
            name="Amazon",
            description="",
            enabled=True,
            costs=[
                CostRecord(
                    cost_category=CostCategory.SHIPPING,
                    cost_value_type=CostValueType.ABSOLUTE,
                    cost_value=60,
                    cost_product_range="0-500",
                )
            ],
        )

        await admin_client.update_marketplace(3, request)

        body = json.loads(route.calls.last.request.content)
        assert body == {
            "name": "Amazon",
            "description": "",
            "enabled": True,
            "costs": [
                {"costCategory": "SHIPPING", "costValueType": "A", "costValue": 60.0, "costProductRange": "0-500"}
            ],
        }

    @respx.mock
    async def test_unsuccessful_envelope_raises(self, admin_client: AdminAPIClient):
        respx.post(f"{BASE_URL}/admin/marketplaces").mock(
            return_value=Response(200, json={"success": False, "message": "Marketplace name already exists"})
        )

        with pytest.raises(AdminAPIError) as exc_info:
            await admin_client.create_marketplace(MarketplaceWriteRequest(name="Amazon"))

        assert exc_info.value.message == "Marketplace name already exists"
        assert exc_info.value.retryable is False

    @respx.mock
    async def test_paged_list(self, admin_client: AdminAPIClient):
        respx.get(url__regex=rf"{BASE_URL}/admin/marketplaces\?.*").mock(
            return_value=Response(
                200,
                json={
                    "success": True,
                    "marketplaces": {
                        "content": [{"id": 1, "name": "Amazon"}, {"id": 2, "name": "Flipkart"}],
                        "pageNumber": 0,
                        "pageSize": 10,
                        "totalElements": 2,
                        "totalPages": 1,
                        "first": True,
                        "last": True,
                    },
                },
            )
        )

        page = await admin_client.list_marketplaces()

        assert page.total_elements == 2
        assert [m.name for m in page.content] == ["Amazon", "Flipkart"]


class TestCategories:
    @respx.mock
    async def test_list_categories(self, admin_client: AdminAPIClient):
        respx.get(f"{BASE_URL}/admin/categories").mock(
            return_value=Response(
                200,
                json={
                    "success": True,
                    "categories": [
                        {"id": 1, "name": "Apparel", "parentCategoryId": None, "enabled": True},
                        {"id": 2, "name": "Men", "parentCategoryId": 1, "enabled": False},
                    ],
                    "count": 2,
                },
            )
        )

        categories = await admin_client.list_categories()

        assert [c.is_root for c in categories] == [True, False]
        assert categories[1].enabled is False

    @respx.mock
    async def test_disable_and_delete(self, admin_client: AdminAPIClient):
        disable = respx.patch(f"{BASE_URL}/admin/categories/2/disable").mock(
            return_value=Response(
                200, json={"success": True, "category": {"id": 2, "name": "Men", "enabled": False}}
            )
        )
        delete = respx.delete(f"{BASE_URL}/admin/categories/2").mock(return_value=Response(204))

        category = await admin_client.disable_category(2)
        await admin_client.delete_category(2)

        assert category.enabled is False
        assert disable.called and delete.called


class TestErrors:
    @respx.mock
    async def test_http_error_maps_to_admin_error(self, admin_client: AdminAPIClient):
        respx.get(f"{BASE_URL}/admin/categories/9").mock(
            return_value=Response(404, json={"success": False, "message": "Category not found"})
        )

        with pytest.raises(AdminAPIError) as exc_info:
            await admin_client.get_category(9)

        assert exc_info.value.status_code == 404
        assert exc_info.value.message == "Category not found"
        assert exc_info.value.retryable is False

    @respx.mock
    async def test_server_error_is_retryable(self, admin_client: AdminAPIClient):
        respx.get(f"{BASE_URL}/admin/categories").mock(return_value=Response(503, text="unavailable"))

        with pytest.raises(AdminAPIError) as exc_info:
            await admin_client.list_categories()

        assert exc_info.value.status_code == 503
        assert exc_info.value.retryable is True

    @respx.mock
    async def test_transport_error(self, admin_client: AdminAPIClient):
        respx.get(f"{BASE_URL}/admin/categories").mock(side_effect=httpx.ConnectError("refused"))

        with pytest.raises(AdminAPIError) as exc_info:
            await admin_client.list_categories()

        assert exc_info.value.status_code is None
        assert exc_info.value.retryable is True
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


class TestCatalog:
    @respx.mock
    async def test_product_list_and_label(self, admin_client: AdminAPIClient):
        respx.get(url__regex=rf"{BASE_URL}/products\?.*").mock(
            return_value=Response(
                200,
                json={
                    "content": [{"id": 1, "name": "Tee", "skuCode": "T-1", "currentType": "T"}],
                    "pageNumber": 0,
                    "pageSize": 20,
                    "totalElements": 1,
                    "totalPages": 1,
                    "first": True,
                    "last": True,
                },
            )
        )

        page = await admin_client.list_products()

        assert page.content[0].status_label == "Trade"

    @respx.mock
    async def test_brands(self, admin_client: AdminAPIClient):
        respx.get(f"{BASE_URL}/admin/brands").mock(
            return_value=Response(200, json={"success": True, "brands": [{"id": 1, "name": "Acme"}]})
        )

        brands = await admin_client.list_brands()

        assert brands[0].name == "Acme"


class TestPayloadShape:
    """Responses that do not match the expected models"""

    @respx.mock
    async def test_null_costs_read_as_empty(self, admin_client: AdminAPIClient):
        respx.get(f"{BASE_URL}/admin/marketplaces/3").mock(
            return_value=Response(
                200, json={"success": True, "marketplace": {"id": 3, "name": "Amazon", "costs": None}}
            )
        )

        marketplace = await admin_client.get_marketplace(3)

        assert marketplace.costs == []

    @respx.mock
    async def test_unreadable_cost_record_is_kept_raw(self, admin_client: AdminAPIClient):
        respx.get(f"{BASE_URL}/admin/marketplaces/3").mock(
            return_value=Response(
                200,
                json={
                    "id": 3,
                    "name": "Amazon",
                    "costs": [
                        {"costCategory": "BOGUS", "costValueType": "P", "costValue": 1, "costProductRange": "All"},
                        {"costCategory": "COMMISSION", "costValueType": "A", "costValue": 500,
                         "costProductRange": "0-500"},
                    ],
                },
            )
        )

        marketplace = await admin_client.get_marketplace(3)

        assert [record["costCategory"] for record in marketplace.costs] == ["BOGUS", "COMMISSION"]

    @respx.mock
    async def test_malformed_definition_raises_admin_error(self, admin_client: AdminAPIClient):
        respx.get(url__regex=rf"{BASE_URL}/admin/custom-fields(\?.*)?$").mock(
            return_value=Response(
                200, json={"success": True, "customFields": [{"id": "one", "module": "c"}]}
            )
        )

        with pytest.raises(AdminAPIError) as exc_info:
            await admin_client.list_custom_fields(ModuleType.CATEGORY)

        assert exc_info.value.retryable is False
        assert exc_info.value.status_code is None
        assert isinstance(exc_info.value.__cause__, ValidationError)

    @respx.mock
    async def test_non_list_payload_raises_admin_error(self, admin_client: AdminAPIClient):
        respx.get(f"{BASE_URL}/admin/categories").mock(
            return_value=Response(200, json={"success": True, "categories": {"id": 1}})
        )

        with pytest.raises(AdminAPIError) as exc_info:
            await admin_client.list_categories()

        assert exc_info.value.retryable is False

    @respx.mock
    async def test_malformed_page_raises_admin_error(self, admin_client: AdminAPIClient):
        respx.get(url__regex=rf"{BASE_URL}/products\?.*").mock(
            return_value=Response(200, json={"content": [{"id": 1}], "pageNumber": 0})
        )

        with pytest.raises(AdminAPIError):
            await admin_client.list_products()
