"""
Admin REST API client
Async httpx client for the pricing platform admin backend
"""

from typing import Any, Dict, List, Optional, Type, TypeVar, Union

import httpx
from loguru import logger
from pydantic import BaseModel, ValidationError

from pricing_admin.config import AdminAPIConfig, settings
from pricing_admin.models.base import APIModel
from pricing_admin.models.catalog import (
    Brand,
    BrandRequest,
    PagedResponse,
    Product,
    ProductRequest,
    ProductStats,
    User,
    UserRequest,
)
from pricing_admin.models.category import Category
from pricing_admin.models.cost import CostRecord
from pricing_admin.models.custom_field import (
    CreateCustomFieldRequest,
    CustomFieldDefinition,
    CustomFieldValue,
    ModuleType,
    SaveCustomFieldValueRequest,
    UpdateCustomFieldRequest,
)
from pricing_admin.models.marketplace import Marketplace, MarketplaceWriteRequest

M = TypeVar("M", bound=BaseModel)


class AdminAPIError(Exception):
    """Admin backend request failure"""

    def __init__(self, message: str, status_code: Optional[int] = None, retryable: bool = True):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.retryable = retryable

    def to_dict(self) -> Dict[str, Any]:
        return {"message": self.message, "status_code": self.status_code, "retryable": self.retryable}


def _module_code(module: Union[ModuleType, str]) -> str:
    return module.value if isinstance(module, ModuleType) else ModuleType.parse(module).value


def _payload(body: Union[APIModel, Dict[str, Any]]) -> Dict[str, Any]:
    if isinstance(body, APIModel):
        return body.to_payload(exclude_none=True)
    return body


class AdminAPIClient:
    """Admin backend client"""

    def __init__(
        self,
        config: Optional[AdminAPIConfig] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Args:
            config: backend settings (application settings when omitted)
            http_client: preconfigured httpx client (built from config when omitted)
        """
        self.config = config or settings.admin_api
        self.base_url = self.config.base_url

        headers = {"Content-Type": "application/json", "Accept": "application/json"}
        if self.config.token:
            headers["Authorization"] = f"Bearer {self.config.token}"

        self.client = http_client or httpx.AsyncClient(
            base_url=self.base_url, headers=headers, timeout=self.config.timeout
        )

    async def __aenter__(self) -> "AdminAPIClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def close(self) -> None:
        await self.client.aclose()

    async def _request(
        self,
        method: str,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Common request path; every failure becomes AdminAPIError"""
        try:
            response = await self.client.request(method, endpoint, params=params, json=json)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            message = self._error_message(e.response)
            logger.error(f"Admin API {method} {endpoint} failed ({e.response.status_code}): {message}")
            raise AdminAPIError(
                message,
                status_code=e.response.status_code,
                retryable=e.response.status_code >= 500,
            ) from e
        except httpx.RequestError as e:
            logger.error(f"Admin API {method} {endpoint} request error: {e}")
            raise AdminAPIError(f"Request failed: {e}") from e

        if not response.content:
            return None
        try:
            data = response.json()
        except ValueError as e:
            raise AdminAPIError(f"Invalid JSON from {endpoint}", status_code=response.status_code) from e

        if isinstance(data, dict) and data.get("success") is False:
            raise AdminAPIError(
                data.get("message") or "Request was not successful",
                status_code=response.status_code,
                retryable=False,
            )
        return data

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return response.text or response.reason_phrase
        if isinstance(body, dict):
            return body.get("message") or body.get("error") or response.reason_phrase
        return response.reason_phrase

    @staticmethod
    def _unwrap(data: Any, key: str) -> Any:
        """Accept both bare payloads and {"success": ..., key: payload} envelopes"""
        if isinstance(data, dict) and key in data:
            return data[key]
        return data

    @staticmethod
    def _validate(model: Type[M], payload: Any) -> M:
        """Parse a response payload; a shape mismatch is a backend error, not a crash"""
        try:
            return model.model_validate(payload)
        except ValidationError as e:
            logger.error(f"Unexpected {model.__name__} payload: {e.error_count()} errors")
            raise AdminAPIError(f"Unexpected {model.__name__} payload from backend", retryable=False) from e

    @classmethod
    def _model(cls, model: Type[M], data: Any, key: str) -> M:
        return cls._validate(model, cls._unwrap(data, key))

    @classmethod
    def _models(cls, model: Type[M], data: Any, key: str) -> List[M]:
        items = cls._unwrap(data, key) or []
        if not isinstance(items, list):
            raise AdminAPIError(f"Expected a {model.__name__} list from backend", retryable=False)
        return [cls._validate(model, item) for item in items]

    # --- custom fields -------------------------------------------------------

    async def list_custom_fields(
        self, module: Optional[Union[ModuleType, str]] = None, enabled_only: bool = False
    ) -> List[CustomFieldDefinition]:
        """Custom field definitions, optionally for one module"""
        params: Dict[str, Any] = {}
        if module is not None:
            params["module"] = _module_code(module)
        if enabled_only:
            params["enabledOnly"] = "true"
        data = await self._request("GET", "admin/custom-fields", params=params or None)
        return self._models(CustomFieldDefinition, data, "customFields")

    async def get_custom_field(self, field_id: int) -> CustomFieldDefinition:
        data = await self._request("GET", f"admin/custom-fields/{field_id}")
        return self._model(CustomFieldDefinition, data, "customField")

    async def create_custom_field(self, request: CreateCustomFieldRequest) -> CustomFieldDefinition:
        data = await self._request("POST", "admin/custom-fields", json=_payload(request))
        return self._model(CustomFieldDefinition, data, "customField")

    async def update_custom_field(
        self, field_id: int, request: UpdateCustomFieldRequest
    ) -> CustomFieldDefinition:
        data = await self._request("PUT", f"admin/custom-fields/{field_id}", json=_payload(request))
        return self._model(CustomFieldDefinition, data, "customField")

    async def toggle_custom_field(self, field_id: int, enabled: bool) -> CustomFieldDefinition:
        data = await self._request(
            "PATCH", f"admin/custom-fields/{field_id}/enable", params={"enabled": str(enabled).lower()}
        )
        return self._model(CustomFieldDefinition, data, "customField")

    async def delete_custom_field(self, field_id: int) -> None:
        await self._request("DELETE", f"admin/custom-fields/{field_id}")

    async def save_custom_field_value(self, request: SaveCustomFieldValueRequest) -> CustomFieldValue:
        data = await self._request("POST", "admin/custom-fields/values", json=_payload(request))
        return self._model(CustomFieldValue, data, "value")

    async def get_custom_field_values(
        self, module: Union[ModuleType, str], module_id: Optional[int] = None
    ) -> List[CustomFieldValue]:
        """Values for one entity, or for every entity of the module when module_id is omitted"""
        params: Dict[str, Any] = {"module": _module_code(module)}
        if module_id is not None:
            params["moduleId"] = module_id
        data = await self._request("GET", "admin/custom-fields/values", params=params)
        return self._models(CustomFieldValue, data, "values")

    async def get_brand_custom_fields(self) -> List[CustomFieldDefinition]:
        data = await self._request("GET", "admin/custom-fields/brands")
        return self._models(CustomFieldDefinition, data, "customFields")

    async def get_brand_custom_field_values(self, brand_id: int) -> List[CustomFieldValue]:
        data = await self._request("GET", f"admin/custom-fields/brands/{brand_id}/values")
        return self._models(CustomFieldValue, data, "values")

    # --- marketplaces --------------------------------------------------------

    async def list_marketplaces(self, page: int = 0, size: int = 10) -> PagedResponse[Marketplace]:
        data = await self._request("GET", "admin/marketplaces", params={"page": page, "size": size})
        return self._model(PagedResponse[Marketplace], data, "marketplaces")

    async def get_marketplace(self, marketplace_id: int) -> Marketplace:
        data = await self._request("GET", f"admin/marketplaces/{marketplace_id}")
        return self._model(Marketplace, data, "marketplace")

    async def create_marketplace(self, request: MarketplaceWriteRequest) -> Marketplace:
        data = await self._request("POST", "admin/marketplaces", json=_payload(request))
        return self._model(Marketplace, data, "marketplace")

    async def update_marketplace(self, marketplace_id: int, request: MarketplaceWriteRequest) -> Marketplace:
        data = await self._request("PUT", f"admin/marketplaces/{marketplace_id}", json=_payload(request))
        return self._model(Marketplace, data, "marketplace")

    async def set_marketplace_enabled(self, marketplace_id: int, enabled: bool) -> None:
        await self._request(
            "PATCH",
            f"admin/marketplaces/{marketplace_id}/enable",
            params={"enabled": str(enabled).lower()},
        )

    async def get_marketplace_costs(self, marketplace_id: int) -> List[CostRecord]:
        data = await self._request("GET", f"admin/marketplaces/{marketplace_id}/costs")
        return self._models(CostRecord, data, "costs")

    # --- categories ----------------------------------------------------------

    async def list_categories(self) -> List[Category]:
        data = await self._request("GET", "admin/categories")
        return self._models(Category, data, "categories")

    async def get_category(self, category_id: int) -> Category:
        data = await self._request("GET", f"admin/categories/{category_id}")
        return self._model(Category, data, "category")

    async def create_category(self, name: str, parent_category_id: Optional[int] = None) -> Category:
        body = {"name": name, "parentCategoryId": parent_category_id}
        data = await self._request("POST", "admin/categories", json=body)
        return self._model(Category, data, "category")

    async def update_category(
        self, category_id: int, name: str, parent_category_id: Optional[int] = None
    ) -> Category:
        body = {"name": name, "parentCategoryId": parent_category_id}
        data = await self._request("PUT", f"admin/categories/{category_id}", json=body)
        return self._model(Category, data, "category")

    async def enable_category(self, category_id: int) -> Category:
        data = await self._request("PATCH", f"admin/categories/{category_id}/enable")
        return self._model(Category, data, "category")

    async def disable_category(self, category_id: int) -> Category:
        data = await self._request("PATCH", f"admin/categories/{category_id}/disable")
        return self._model(Category, data, "category")

    async def delete_category(self, category_id: int) -> None:
        await self._request("DELETE", f"admin/categories/{category_id}")

    # --- brands --------------------------------------------------------------

    async def list_brands(self) -> List[Brand]:
        data = await self._request("GET", "admin/brands")
        return self._models(Brand, data, "brands")

    async def get_brand(self, brand_id: int) -> Brand:
        data = await self._request("GET", f"admin/brands/{brand_id}")
        return self._model(Brand, data, "brand")

    async def create_brand(self, request: BrandRequest) -> Brand:
        data = await self._request("POST", "admin/brands", json=_payload(request))
        return self._model(Brand, data, "brand")

    async def update_brand(self, brand_id: int, request: BrandRequest) -> Brand:
        data = await self._request("PUT", f"admin/brands/{brand_id}", json=_payload(request))
        return self._model(Brand, data, "brand")

    async def delete_brand(self, brand_id: int) -> None:
        await self._request("DELETE", f"admin/brands/{brand_id}")

    # --- products ------------------------------------------------------------

    async def list_products(
        self, page: int = 0, size: int = 20, include_disabled: bool = False
    ) -> PagedResponse[Product]:
        endpoint = "products/all" if include_disabled else "products"
        data = await self._request("GET", endpoint, params={"page": page, "size": size})
        return self._validate(PagedResponse[Product], data)

    async def filter_products(
        self,
        status: Optional[str] = None,
        brand_id: Optional[int] = None,
        category_id: Optional[int] = None,
        search: Optional[str] = None,
        page: int = 0,
        size: int = 20,
        sort_by: str = "createDateTime",
        direction: str = "desc",
    ) -> PagedResponse[Product]:
        params: Dict[str, Any] = {}
        if status:
            params["status"] = status
        if brand_id:
            params["brandId"] = brand_id
        if category_id:
            params["categoryId"] = category_id
        if search:
            params["search"] = search
        params.update({"page": page, "size": size, "sortBy": sort_by, "direction": direction})

        data = await self._request("GET", "products/filter", params=params)
        return self._validate(PagedResponse[Product], data)

    async def get_product(self, product_id: int) -> Product:
        data = await self._request("GET", f"products/{product_id}")
        return self._model(Product, data, "product")

    async def create_product(self, request: ProductRequest) -> Product:
        data = await self._request("POST", "products", json=_payload(request))
        return self._model(Product, data, "product")

    async def update_product(self, product_id: int, request: ProductRequest) -> Product:
        data = await self._request("PUT", f"products/{product_id}", json=_payload(request))
        return self._model(Product, data, "product")

    async def set_product_enabled(self, product_id: int, enabled: bool) -> Product:
        data = await self._request(
            "PATCH", f"products/{product_id}/enable", params={"enabled": str(enabled).lower()}
        )
        return self._model(Product, data, "product")

    async def get_product_stats(self) -> ProductStats:
        data = await self._request("GET", "products/stats")
        return self._model(ProductStats, data, "stats")

    # --- users ---------------------------------------------------------------

    async def list_users(self, client_id: int) -> List[User]:
        data = await self._request("GET", "admin/users", params={"clientId": client_id})
        return self._models(User, data, "users")

    async def get_user(self, user_id: int) -> User:
        data = await self._request("GET", f"admin/users/{user_id}")
        return self._model(User, data, "user")

    async def create_user(self, request: UserRequest, client_id: int) -> User:
        data = await self._request(
            "POST", "admin/users", params={"clientId": client_id}, json=_payload(request)
        )
        return self._model(User, data, "user")

    async def update_user(self, user_id: int, request: UserRequest) -> User:
        data = await self._request("PUT", f"admin/users/{user_id}", json=_payload(request))
        return self._model(User, data, "user")

    async def enable_user(self, user_id: int) -> None:
        await self._request("PATCH", f"admin/users/{user_id}/enable")

    async def disable_user(self, user_id: int) -> None:
        await self._request("PATCH", f"admin/users/{user_id}/disable")

    async def delete_user(self, user_id: int) -> None:
        await self._request("DELETE", f"admin/users/{user_id}")
