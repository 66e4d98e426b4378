"""
Marketplace form validation
Top-level form fields are checked before any request reaches the backend
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

NAME_MAX_LENGTH = 255
DESCRIPTION_MAX_LENGTH = 500


class MarketplaceValidationError(Exception):
    """Field-level validation failure"""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message

    def to_dict(self) -> Dict[str, str]:
        return {"field": self.field, "message": self.message}


@dataclass
class ValidationResult:
    """Validation result"""

    errors: List[Dict[str, str]] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def add_error(self, field: str, message: str):
        self.errors.append({"field": field, "message": message})

    def raise_first(self):
        """Raise the first error as MarketplaceValidationError"""
        if self.errors:
            first = self.errors[0]
            raise MarketplaceValidationError(first["field"], first["message"])


def check_marketplace_form(name: Optional[str], description: Optional[str]) -> ValidationResult:
    """Collect every violation of the marketplace form"""
    result = ValidationResult()
    name = (name or "").strip()
    description = (description or "").strip()

    if not name:
        result.add_error("name", "Marketplace name is required")
    elif len(name) > NAME_MAX_LENGTH:
        result.add_error("name", f"Marketplace name must not exceed {NAME_MAX_LENGTH} characters")

    if len(description) > DESCRIPTION_MAX_LENGTH:
        result.add_error(
            "description", f"Description must not exceed {DESCRIPTION_MAX_LENGTH} characters"
        )

    return result


def validate_marketplace_form(name: Optional[str], description: Optional[str]) -> None:
    """
    Validate the top-level marketplace fields.

    Raises:
        MarketplaceValidationError: first violated field
    """
    check_marketplace_form(name, description).raise_first()
