"""
Marketplace cost codec
Flat persisted cost records <-> product-cost slabs, commission breakdowns
and shipping slabs edited in the marketplace form
"""

import math
import re
from typing import Any, Dict, Iterable, List, Optional, Union

from loguru import logger
from pydantic import ValidationError

from pricing_admin.domain.partition import Bucket, partition, reconstruct
from pricing_admin.models.cost import (
    ALL_PRODUCTS,
    CommissionBreakdown,
    CostCategory,
    CostEditorState,
    CostRecord,
    CostValueType,
    ProductCostSlab,
    ShippingCostSlab,
    TierRange,
)

DEFAULT_SHIPPING_RANGE = "1-500rs"

# leading numeric prefix, the way a form field is read as a number
_NUMBER_PREFIX = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

FLAT_RATE_CATEGORIES = frozenset(
    {CostCategory.COMMISSION, CostCategory.SHIPPING, CostCategory.MARKETING}
)


def parse_number(text: Optional[str]) -> float:
    """
    Read the numeric prefix of a form value.

    "500" -> 500.0, "500rs" -> 500.0, "" / "abc" / None -> 0.0

    Overflowing or infinite input ("1e999", "Infinity") also reads as 0.0.
    The browser form's parseFloat keeps Infinity there, but Infinity has no
    JSON encoding and the backend could not store it.
    """
    if not text:
        return 0.0
    match = _NUMBER_PREFIX.match(text)
    if not match:
        return 0.0
    value = float(match.group(0))
    if math.isnan(value) or math.isinf(value):
        return 0.0
    return value


def format_number(value: Optional[float]) -> str:
    """Render a stored value for a form field; zero and missing render empty"""
    if not value:
        return ""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def default_product_cost_slabs() -> List[ProductCostSlab]:
    return [ProductCostSlab(from_="", to="", value_type=CostValueType.ABSOLUTE)]


def default_commission_breakdowns() -> List[CommissionBreakdown]:
    return [
        CommissionBreakdown(category=CostCategory.COMMISSION, value="", value_type=CostValueType.PERCENT),
        CommissionBreakdown(category=CostCategory.SHIPPING, value="", value_type=CostValueType.PERCENT),
    ]


def default_shipping_costs() -> List[ShippingCostSlab]:
    return [ShippingCostSlab(range=DEFAULT_SHIPPING_RANGE, cost="")]


def default_cost_state() -> CostEditorState:
    """Editor state for a marketplace without stored costs"""
    return CostEditorState(
        product_cost_slabs=default_product_cost_slabs(),
        product_cost_value_type=CostValueType.ABSOLUTE,
        commission_breakdowns=default_commission_breakdowns(),
        shipping_costs=default_shipping_costs(),
    )


# --- discriminators ---------------------------------------------------------


def is_product_cost_slab(record: CostRecord) -> bool:
    return record.cost_category == CostCategory.COMMISSION and not record.applies_to_all


def is_commission_breakdown(record: CostRecord) -> bool:
    return record.cost_category in FLAT_RATE_CATEGORIES and record.applies_to_all


def is_shipping_slab(record: CostRecord) -> bool:
    return record.cost_category == CostCategory.SHIPPING and not record.applies_to_all


# --- decode -----------------------------------------------------------------


def _decode_product_slab(record: CostRecord) -> ProductCostSlab:
    product_range = record.product_range
    lower, upper = product_range.bounds() if isinstance(product_range, TierRange) else ("", "")
    return ProductCostSlab(from_=lower, to=upper, value_type=record.cost_value_type)


def _decode_breakdown(record: CostRecord) -> CommissionBreakdown:
    return CommissionBreakdown(
        category=record.cost_category,
        value=format_number(record.cost_value),
        value_type=record.cost_value_type,
    )


def _decode_shipping(record: CostRecord) -> ShippingCostSlab:
    return ShippingCostSlab(range=record.cost_product_range or "", cost=format_number(record.cost_value))


def _copier(rows: List[Any]):
    return lambda: [row.model_copy() for row in rows]


def _parse_records(records: Iterable[Union[CostRecord, Dict[str, Any]]]) -> List[CostRecord]:
    parsed = []
    for record in records:
        if isinstance(record, CostRecord):
            parsed.append(record)
            continue
        try:
            parsed.append(CostRecord.model_validate(record))
        except ValidationError as e:
            logger.warning(f"Skipping unreadable cost record {record!r}: {e.error_count()} errors")
    return parsed


def decode_costs(
    records: Iterable[Union[CostRecord, Dict[str, Any]]],
    defaults: Optional[CostEditorState] = None,
) -> CostEditorState:
    """
    Decode a marketplace's flat cost list into editor sections.

    Args:
        records: persisted cost records (models or wire dicts)
        defaults: rows kept for sections without records (standard defaults when omitted)

    Returns:
        CostEditorState with at least one row per section
    """
    defaults = defaults or default_cost_state()
    parsed = _parse_records(records)

    sections = partition(
        parsed,
        [
            Bucket("product", is_product_cost_slab, _decode_product_slab, _copier(defaults.product_cost_slabs)),
            Bucket("commission", is_commission_breakdown, _decode_breakdown, _copier(defaults.commission_breakdowns)),
            Bucket("shipping", is_shipping_slab, _decode_shipping, _copier(defaults.shipping_costs)),
        ],
    )

    product_records = [record for record in parsed if is_product_cost_slab(record)]
    value_type = (
        product_records[0].cost_value_type if product_records else defaults.product_cost_value_type
    )

    logger.debug(
        f"Decoded {len(parsed)} cost records: "
        f"{len(sections['product'])} product slabs, "
        f"{len(sections['commission'])} breakdowns, "
        f"{len(sections['shipping'])} shipping slabs"
    )

    return CostEditorState(
        product_cost_slabs=sections["product"],
        product_cost_value_type=value_type,
        commission_breakdowns=sections["commission"],
        shipping_costs=sections["shipping"],
    )


# --- encode -----------------------------------------------------------------


def _encode_product_slab(slab: ProductCostSlab) -> Optional[CostRecord]:
    if not slab.is_complete:
        return None
    # only the upper bound is stored as the value; the range string carries both
    return CostRecord(
        cost_category=CostCategory.COMMISSION,
        cost_value_type=slab.value_type,
        cost_value=parse_number(slab.to),
        cost_product_range=f"{slab.from_}-{slab.to}",
    )


def _encode_breakdown(breakdown: CommissionBreakdown) -> Optional[CostRecord]:
    if not breakdown.is_complete:
        return None
    return CostRecord(
        cost_category=breakdown.category,
        cost_value_type=breakdown.value_type,
        cost_value=parse_number(breakdown.value),
        cost_product_range=ALL_PRODUCTS,
    )


def _encode_shipping(slab: ShippingCostSlab) -> Optional[CostRecord]:
    if not slab.is_complete:
        return None
    return CostRecord(
        cost_category=CostCategory.SHIPPING,
        cost_value_type=CostValueType.ABSOLUTE,
        cost_value=parse_number(slab.cost),
        cost_product_range=slab.range,
    )


def encode_costs(state: CostEditorState) -> List[CostRecord]:
    """
    Encode editor sections back into the flat persisted list.

    Incomplete rows are dropped silently; unparseable numbers become 0.
    Order: product slabs, breakdowns, shipping slabs.
    """
    records = reconstruct(
        [state.product_cost_slabs, state.commission_breakdowns, state.shipping_costs],
        [_encode_product_slab, _encode_breakdown, _encode_shipping],
    )

    total_rows = (
        len(state.product_cost_slabs) + len(state.commission_breakdowns) + len(state.shipping_costs)
    )
    if len(records) < total_rows:
        logger.debug(f"Skipped {total_rows - len(records)} incomplete cost rows")

    return records
