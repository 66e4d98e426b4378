"""
Data models shared between the REST client, the domain logic and the view API
"""

from pricing_admin.models.catalog import (
    Brand,
    BrandRequest,
    PagedResponse,
    Product,
    ProductRequest,
    ProductStats,
    ProductType,
    User,
    UserRequest,
)
from pricing_admin.models.category import Category, CategoryDisplay, CategoryStatus
from pricing_admin.models.cost import (
    ALL_PRODUCTS,
    CommissionBreakdown,
    CostCategory,
    CostEditorState,
    CostRecord,
    CostValueType,
    ProductCostSlab,
    ShippingCostSlab,
)
from pricing_admin.models.custom_field import (
    CustomFieldDefinition,
    CustomFieldValue,
    FieldType,
    ModuleType,
)
from pricing_admin.models.marketplace import Marketplace, MarketplaceForm, MarketplaceWriteRequest

__all__ = [
    "ALL_PRODUCTS",
    "Brand",
    "BrandRequest",
    "Category",
    "CategoryDisplay",
    "CategoryStatus",
    "CommissionBreakdown",
    "CostCategory",
    "CostEditorState",
    "CostRecord",
    "CostValueType",
    "CustomFieldDefinition",
    "CustomFieldValue",
    "FieldType",
    "Marketplace",
    "MarketplaceForm",
    "MarketplaceWriteRequest",
    "ModuleType",
    "PagedResponse",
    "Product",
    "ProductCostSlab",
    "ProductRequest",
    "ProductStats",
    "ProductType",
    "ShippingCostSlab",
    "User",
    "UserRequest",
]
