"""
Category list endpoints
"""

from fastapi import APIRouter, Depends, status

from pricing_admin.api.dependencies import Pagination, get_category_service
from pricing_admin.monitoring import get_logger
from pricing_admin.services import CategoryListService

logger = get_logger(__name__)

router = APIRouter()


@router.get("")
async def list_categories(
    pagination: Pagination = Depends(),
    service: CategoryListService = Depends(get_category_service),
):
    """Level-1 category rows with parent, sub-categories and custom field summary"""
    rows = await service.load()
    return pagination.paginate([row.to_payload() for row in rows])


@router.patch("/{category_id}/toggle")
async def toggle_category(
    category_id: int, service: CategoryListService = Depends(get_category_service)
):
    """Flip the enabled flag of a category"""
    category = await service.toggle_status(category_id)
    return {"category": category.to_payload()}


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(
    category_id: int, service: CategoryListService = Depends(get_category_service)
):
    await service.delete(category_id)
    logger.info(f"Category {category_id} deleted via API")
