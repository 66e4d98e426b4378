"""
Category models
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional

from pricing_admin.models.base import APIModel


class CategoryStatus(str, Enum):
    """Status label shown in the category list"""

    ACTIVE = "Active"
    INACTIVE = "Inactive"

    @classmethod
    def from_enabled(cls, enabled: bool) -> "CategoryStatus":
        return cls.ACTIVE if enabled else cls.INACTIVE


class Category(APIModel):
    """Category as returned by the admin backend"""

    id: int
    client_id: Optional[int] = None
    name: str
    parent_category_id: Optional[int] = None
    enabled: bool = True
    create_date_time: Optional[datetime] = None
    update_date_time: Optional[datetime] = None

    @property
    def is_root(self) -> bool:
        return self.parent_category_id is None


class CategoryDisplay(APIModel):
    """One row of the category list"""

    id: int
    parent_category: str
    category: str
    sub_category: str
    custom_fields: str = "None"
    status: CategoryStatus
