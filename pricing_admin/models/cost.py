"""
Marketplace cost models
Flat persisted cost records and the structured editor view built from them
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple, Union

from pydantic import Field

from pricing_admin.models.base import APIModel

# costProductRange sentinel: the record applies to every product
ALL_PRODUCTS = "All"


class CostCategory(str, Enum):
    """Cost category"""

    COMMISSION = "COMMISSION"
    SHIPPING = "SHIPPING"
    MARKETING = "MARKETING"


class CostValueType(str, Enum):
    """Whether a rate is a percentage or an absolute amount"""

    PERCENT = "P"
    ABSOLUTE = "A"

    @classmethod
    def _missing_(cls, value):
        # the long names ("PERCENT"/"ABSOLUTE") are accepted as input as well
        if isinstance(value, str):
            return cls.__members__.get(value.strip().upper())
        return None


@dataclass(frozen=True)
class AllProducts:
    """Range covering every product"""

    def __str__(self) -> str:
        return ALL_PRODUCTS


@dataclass(frozen=True)
class TierRange:
    """A "<from>-<to>" product tier, kept verbatim"""

    raw: str

    def bounds(self) -> Tuple[str, str]:
        """Split on the first '-'; a missing upper bound is empty"""
        lower, _, upper = self.raw.partition("-")
        return lower, upper

    def __str__(self) -> str:
        return self.raw


ProductRange = Union[AllProducts, TierRange]


def parse_product_range(raw: Optional[str]) -> ProductRange:
    """Decode a costProductRange string once at the REST boundary"""
    if raw == ALL_PRODUCTS:
        return AllProducts()
    return TierRange(raw or "")


class CostRecord(APIModel):
    """Persisted cost record"""

    id: Optional[int] = None
    cost_category: CostCategory
    cost_value_type: CostValueType
    cost_value: Optional[float] = 0
    cost_product_range: Optional[str] = ""

    @property
    def product_range(self) -> ProductRange:
        return parse_product_range(self.cost_product_range)

    @property
    def applies_to_all(self) -> bool:
        return isinstance(self.product_range, AllProducts)


class ProductCostSlab(APIModel):
    """Tiered product-cost slab row"""

    from_: str = Field(default="", alias="from")
    to: str = ""
    value_type: CostValueType = CostValueType.ABSOLUTE

    @property
    def is_complete(self) -> bool:
        return bool(self.from_ and self.to)


class CommissionBreakdown(APIModel):
    """Flat-rate cost component row"""

    category: CostCategory = CostCategory.COMMISSION
    value: str = ""
    value_type: CostValueType = CostValueType.PERCENT

    @property
    def is_complete(self) -> bool:
        return bool(self.value)


class ShippingCostSlab(APIModel):
    """Range-keyed shipping cost row"""

    range: str = ""
    cost: str = ""

    @property
    def is_complete(self) -> bool:
        return bool(self.cost and self.range)


class CostEditorState(APIModel):
    """Editable cost sections of one marketplace"""

    product_cost_slabs: List[ProductCostSlab] = Field(default_factory=list)
    product_cost_value_type: CostValueType = CostValueType.ABSOLUTE
    commission_breakdowns: List[CommissionBreakdown] = Field(default_factory=list)
    shipping_costs: List[ShippingCostSlab] = Field(default_factory=list)
