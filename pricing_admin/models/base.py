"""
Shared model base
Snake_case attributes in Python, camelCase field names on the wire
"""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class APIModel(BaseModel):
    """Base for every model exchanged with the admin backend"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    def to_payload(self, **kwargs) -> Dict[str, Any]:
        """JSON-ready dict with wire field names"""
        return self.model_dump(mode="json", by_alias=True, **kwargs)
