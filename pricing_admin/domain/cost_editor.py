"""
Cost editor operations
Every operation returns a new CostEditorState; the given state is never mutated
"""

from typing import Any, List

from pricing_admin.models.cost import (
    CommissionBreakdown,
    CostCategory,
    CostEditorState,
    CostValueType,
    ProductCostSlab,
    ShippingCostSlab,
)

SECTIONS = {
    "product": "product_cost_slabs",
    "commission": "commission_breakdowns",
    "shipping": "shipping_costs",
}

# form field names accepted per row type
_FIELD_ALIASES = {"from": "from_", "valueType": "value_type"}


def _section_attr(section: str) -> str:
    try:
        return SECTIONS[section]
    except KeyError:
        raise ValueError(f"Unknown cost section: {section}") from None


def _rows(state: CostEditorState, section: str) -> List[Any]:
    return [row.model_copy() for row in getattr(state, _section_attr(section))]


def _replace(state: CostEditorState, section: str, rows: List[Any]) -> CostEditorState:
    return state.model_copy(update={_section_attr(section): rows})


def add_row(state: CostEditorState, section: str) -> CostEditorState:
    """Append an empty row; new product slabs inherit the section value type"""
    rows = _rows(state, section)
    if section == "product":
        rows.append(ProductCostSlab(from_="", to="", value_type=state.product_cost_value_type))
    elif section == "commission":
        rows.append(
            CommissionBreakdown(category=CostCategory.COMMISSION, value="", value_type=CostValueType.PERCENT)
        )
    else:
        rows.append(ShippingCostSlab(range="", cost=""))
    return _replace(state, section, rows)


def update_row(state: CostEditorState, section: str, index: int, field: str, value: Any) -> CostEditorState:
    """Set one field of one row"""
    rows = _rows(state, section)
    if not 0 <= index < len(rows):
        raise IndexError(f"{section} row {index} out of range")

    row = rows[index]
    attr = _FIELD_ALIASES.get(field, field)
    if attr not in type(row).model_fields:
        raise ValueError(f"Unknown field for {section} row: {field}")

    data = row.model_dump()
    data[attr] = value
    rows[index] = type(row).model_validate(data)
    return _replace(state, section, rows)


def remove_row(state: CostEditorState, section: str, index: int) -> CostEditorState:
    """Remove a row; the last remaining row of a section is kept"""
    rows = _rows(state, section)
    if len(rows) <= 1 or not 0 <= index < len(rows):
        return state
    del rows[index]
    return _replace(state, section, rows)


def set_product_value_type(state: CostEditorState, value_type: CostValueType) -> CostEditorState:
    """Switch the product-cost section between percent and absolute"""
    value_type = CostValueType(value_type)
    slabs = [slab.model_copy(update={"value_type": value_type}) for slab in state.product_cost_slabs]
    return state.model_copy(
        update={"product_cost_slabs": slabs, "product_cost_value_type": value_type}
    )
