"""
Marketplace models
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Literal, Optional

from pydantic import Field, field_validator

from pricing_admin.models.base import APIModel
from pricing_admin.models.cost import CostEditorState, CostRecord


class Marketplace(APIModel):
    """
    Marketplace with its flat cost list

    Cost records stay as wire dicts here; decode_costs parses them one by one
    and skips the unreadable ones, so a single bad record never fails the load.
    """

    id: Optional[int] = None
    name: str = ""
    description: Optional[str] = None
    enabled: bool = False
    create_date_time: Optional[datetime] = None
    costs: List[Dict[str, Any]] = Field(default_factory=list)

    @field_validator("costs", mode="before")
    @classmethod
    def _raw_costs(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, list):
            return [
                item.to_payload(exclude_none=True) if isinstance(item, CostRecord) else item
                for item in value
            ]
        return value


class MarketplaceWriteRequest(APIModel):
    """Create/update request body"""

    name: str
    description: str = ""
    enabled: bool = False
    costs: List[CostRecord] = Field(default_factory=list)


class MarketplaceForm(APIModel):
    """Editor form: top-level fields plus the decoded cost sections"""

    name: str = ""
    description: str = ""
    enabled: bool = False
    costs: CostEditorState = Field(default_factory=CostEditorState)


class CostEditAction(APIModel):
    """One row operation on the editor's cost sections"""

    action: Literal["add", "update", "remove", "set_value_type"]
    section: str = "product"
    index: int = 0
    field: Optional[str] = None
    value: Any = None


class CostEditRequest(APIModel):
    """Current form plus the row operation to apply to it"""

    form: MarketplaceForm
    edit: CostEditAction
