"""
Custom field column endpoints
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status

from pricing_admin.api.dependencies import get_aggregator
from pricing_admin.domain.custom_fields import CustomFieldAggregator
from pricing_admin.models.custom_field import ModuleType
from pricing_admin.monitoring import get_logger

logger = get_logger(__name__)

router = APIRouter()


@router.get("/{module}/rows")
async def custom_field_rows(
    module: str,
    ids: List[int] = Query(default=[]),
    aggregator: CustomFieldAggregator = Depends(get_aggregator),
):
    """Summary and per-field cells for each requested entity"""
    try:
        module_type = ModuleType.parse(module)
    except ValueError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Unknown module: {module}")

    rows = await aggregator.build_rows(module_type, ids)
    logger.debug(f"Built {len(rows)} custom field rows for module {module_type.value}")

    return {"module": module_type.value, "rows": [row.to_dict() for row in rows]}
