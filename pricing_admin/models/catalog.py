"""
Catalog models
Brands, products, users and paging envelopes
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Generic, List, Optional, TypeVar

from pydantic import Field

from pricing_admin.models.base import APIModel

T = TypeVar("T")


class Brand(APIModel):
    id: int
    client_id: Optional[int] = None
    name: str
    description: Optional[str] = None
    logo_url: Optional[str] = None
    enabled: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class BrandRequest(APIModel):
    name: Optional[str] = None
    description: Optional[str] = None
    logo_url: Optional[str] = None
    enabled: Optional[bool] = None


class ProductType(str, Enum):
    """Product pricing state"""

    TRADE = "T"
    ACTIVE = "A"
    NON_ACTIVE = "N"

    @property
    def label(self) -> str:
        return {"T": "Trade", "A": "Active", "N": "Non-active"}[self.value]


def product_status_label(current_type: Optional[str]) -> str:
    """Display label for a product currentType code"""
    try:
        return ProductType(current_type).label
    except ValueError:
        return "Unknown"


class Product(APIModel):
    id: int
    client_id: Optional[int] = None
    name: str
    brand_id: Optional[int] = None
    sku_code: str = ""
    category_id: Optional[int] = None
    mrp: float = 0
    product_cost: float = 0
    proposed_selling_price_sales: float = 0
    proposed_selling_price_non_sales: float = 0
    current_type: str = ProductType.ACTIVE.value
    enabled: bool = True
    create_date_time: Optional[datetime] = None
    updated_by: Optional[int] = None

    @property
    def status_label(self) -> str:
        return product_status_label(self.current_type)


class ProductRequest(APIModel):
    name: str
    brand_id: int
    sku_code: str
    category_id: int
    mrp: float
    product_cost: float
    proposed_selling_price_sales: float
    proposed_selling_price_non_sales: float
    current_type: ProductType


class ProductStats(APIModel):
    enabled_count: int = 0
    total_count: int = 0


class PagedResponse(APIModel, Generic[T]):
    """Paged listing envelope"""

    content: List[T] = Field(default_factory=list)
    page_number: int = 0
    page_size: int = 0
    total_elements: int = 0
    total_pages: int = 0
    first: bool = True
    last: bool = True


class User(APIModel):
    id: int
    username: str
    name: str
    email_id: Optional[str] = None
    phone_number: Optional[str] = None
    employee_designation: Optional[str] = None
    role: str
    enabled: bool = True
    client_id: Optional[int] = None


class UserRequest(APIModel):
    username: Optional[str] = None
    password: Optional[str] = None
    name: Optional[str] = None
    email_id: Optional[str] = None
    phone_number: Optional[str] = None
    employee_designation: Optional[str] = None
    role: Optional[str] = None
    enabled: Optional[bool] = None
