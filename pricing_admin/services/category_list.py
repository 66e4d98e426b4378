"""
Category list service
Flattened category rows with their custom field summary
"""

from typing import List, Optional

from loguru import logger

from pricing_admin.client import AdminAPIClient, AdminAPIError
from pricing_admin.config import settings
from pricing_admin.domain.category import flatten_categories
from pricing_admin.domain.custom_fields import fetch_values_for_entities, summarize
from pricing_admin.models.category import Category, CategoryDisplay
from pricing_admin.models.custom_field import CustomFieldDefinition, ModuleType


class CategoryListService:
    """Category list page"""

    def __init__(self, client: AdminAPIClient, max_concurrency: Optional[int] = None):
        self.client = client
        self.max_concurrency = max_concurrency or settings.admin_api.max_concurrency

    async def _category_fields(self) -> List[CustomFieldDefinition]:
        # the summary column is optional; the list still renders without it
        try:
            return await self.client.list_custom_fields(ModuleType.CATEGORY)
        except AdminAPIError as e:
            logger.warning(f"Category custom fields unavailable: {e.message}")
            return []

    async def load(self) -> List[CategoryDisplay]:
        """
        Build the category list rows

        Returns:
            One row per level-1 category with its custom field summary
        """
        categories = await self.client.list_categories()
        rows = flatten_categories(categories)
        if not rows:
            return rows

        field_defs = await self._category_fields()
        values_by_category = await fetch_values_for_entities(
            self.client, ModuleType.CATEGORY, [row.id for row in rows], self.max_concurrency
        )

        logger.info(f"Loaded {len(categories)} categories, {len(rows)} list rows")

        return [
            row.model_copy(
                update={"custom_fields": summarize(field_defs, values_by_category.get(row.id, []))}
            )
            for row in rows
        ]

    async def toggle_status(self, category_id: int) -> Category:
        """Enable a disabled category or disable an enabled one"""
        category = await self.client.get_category(category_id)
        if category.enabled:
            updated = await self.client.disable_category(category_id)
        else:
            updated = await self.client.enable_category(category_id)

        logger.info(f"Category {category_id} {'enabled' if updated.enabled else 'disabled'}")
        return updated

    async def delete(self, category_id: int) -> None:
        await self.client.delete_category(category_id)
        logger.info(f"Deleted category {category_id}")
