"""
Custom field models
Dynamic per-entity attributes scoped per client and per module
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pricing_admin.models.base import APIModel


class ModuleType(str, Enum):
    """Entity kind a custom field applies to (wire code)"""

    PRODUCT = "p"
    MARKETPLACE = "m"
    BRAND = "b"
    CATEGORY = "c"

    @classmethod
    def parse(cls, value: str) -> "ModuleType":
        """Accept either the wire code or the module name"""
        normalized = value.strip().lower()
        for module in cls:
            if normalized in (module.value, module.name.lower()):
                return module
        raise ValueError(f"Unknown module: {value}")


class FieldType(str, Enum):
    """Custom field input type"""

    TEXT = "text"
    NUMERIC = "numeric"
    DROPDOWN = "dropdown"
    DATE = "date"
    FILE = "file"


class CustomFieldDefinition(APIModel):
    """Custom field configuration"""

    id: int
    client_id: Optional[int] = None
    name: str
    field_type: str = FieldType.TEXT.value
    module: str
    required: bool = False
    enabled: bool = True
    dropdown_options: Optional[str] = None


class CustomFieldValue(APIModel):
    """Value of one custom field for one entity"""

    id: Optional[int] = None
    custom_field_id: int
    client_id: Optional[int] = None
    module: str
    module_id: int
    value: Optional[str] = None


class CreateCustomFieldRequest(APIModel):
    name: str
    field_type: FieldType
    module: ModuleType
    required: bool = False
    enabled: bool = True
    dropdown_options: Optional[str] = None


class UpdateCustomFieldRequest(APIModel):
    name: str
    field_type: FieldType
    required: bool = False
    dropdown_options: Optional[str] = None


class SaveCustomFieldValueRequest(APIModel):
    custom_field_id: int
    module: ModuleType
    module_id: int
    value: str
