"""
API dependency injection
"""

from fastapi import Depends, Query, Request

from pricing_admin.client import AdminAPIClient
from pricing_admin.config import settings
from pricing_admin.domain.custom_fields import CustomFieldAggregator
from pricing_admin.services import CategoryListService, MarketplaceEditor


async def get_admin_client(request: Request) -> AdminAPIClient:
    """Shared admin backend client created in the app lifespan"""
    return request.app.state.admin_client


async def get_marketplace_editor(
    client: AdminAPIClient = Depends(get_admin_client),
) -> MarketplaceEditor:
    return MarketplaceEditor(client)


async def get_category_service(
    client: AdminAPIClient = Depends(get_admin_client),
) -> CategoryListService:
    return CategoryListService(client, settings.admin_api.max_concurrency)


async def get_aggregator(
    client: AdminAPIClient = Depends(get_admin_client),
) -> CustomFieldAggregator:
    return CustomFieldAggregator(client, settings.admin_api.max_concurrency)


class Pagination:
    """Pagination parameters"""

    max_page_size = 100

    def __init__(self, page: int = Query(1, ge=1), page_size: int = Query(8, ge=1)):
        self.page = page
        self.page_size = min(page_size, self.max_page_size)
        self.offset = (self.page - 1) * self.page_size

    def paginate(self, items: list) -> dict:
        """Slice items into one page response"""
        total = len(items)
        total_pages = (total + self.page_size - 1) // self.page_size

        return {
            "items": items[self.offset : self.offset + self.page_size],
            "pagination": {
                "page": self.page,
                "page_size": self.page_size,
                "total": total,
                "total_pages": total_pages,
                "has_next": self.page < total_pages,
                "has_prev": self.page > 1,
            },
        }
