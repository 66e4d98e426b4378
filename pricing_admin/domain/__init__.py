"""
Domain logic
Pure transforms between backend records and the console's view models
"""

from pricing_admin.domain.category import flatten_categories
from pricing_admin.domain.cost_codec import decode_costs, default_cost_state, encode_costs
from pricing_admin.domain.cost_editor import add_row, remove_row, set_product_value_type, update_row
from pricing_admin.domain.custom_fields import (
    CustomFieldAggregator,
    fetch_values_for_entities,
    lookup_value,
    summarize,
)
from pricing_admin.domain.validator import MarketplaceValidationError, validate_marketplace_form

__all__ = [
    "CustomFieldAggregator",
    "MarketplaceValidationError",
    "add_row",
    "decode_costs",
    "default_cost_state",
    "encode_costs",
    "fetch_values_for_entities",
    "flatten_categories",
    "lookup_value",
    "remove_row",
    "set_product_value_type",
    "summarize",
    "update_row",
    "validate_marketplace_form",
]
