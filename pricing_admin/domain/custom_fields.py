"""
Custom field aggregation
Per-entity summary strings, cell lookups and the fan-out value fetch
"""

import asyncio
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Union

from loguru import logger

from pricing_admin.models.custom_field import CustomFieldDefinition, CustomFieldValue, ModuleType

NO_FIELDS_LABEL = "None"
SUMMARY_NAME_LIMIT = 3


def summarize_names(names: Sequence[str], limit: int = SUMMARY_NAME_LIMIT) -> str:
    """
    Join names for display, truncating after `limit`.

    ["Color", "Size", "Fabric", "Season", "Fit"] -> "Color, Size, Fabric +2"
    """
    if not names:
        return NO_FIELDS_LABEL
    if len(names) <= limit:
        return ", ".join(names)
    return f"{', '.join(names[:limit])} +{len(names) - limit}"


def summarize(
    field_defs: Sequence[CustomFieldDefinition], values_for_entity: Sequence[CustomFieldValue]
) -> str:
    """
    Summary of the custom fields attached to one entity.

    Args:
        field_defs: definitions of the entity's module
        values_for_entity: values stored for the entity

    Returns:
        Names of the fields with values; the enabled field names when the
        entity has no values; "None" otherwise
    """
    if values_for_entity:
        names_by_id = {definition.id: definition.name for definition in field_defs}
        names = [
            names_by_id[value.custom_field_id]
            for value in values_for_entity
            if value.custom_field_id in names_by_id
        ]
        return summarize_names(names)

    enabled = [definition.name for definition in field_defs if definition.enabled]
    return summarize_names(enabled)


def lookup_value(values: Iterable[CustomFieldValue], field_id: int) -> Optional[str]:
    """Value stored for field_id, None when the entity has none"""
    for value in values:
        if value.custom_field_id == field_id:
            return value.value
    return None


async def fetch_values_for_entities(
    client,
    module: Union[ModuleType, str],
    entity_ids: Sequence[int],
    max_concurrency: int = 10,
) -> Dict[int, List[CustomFieldValue]]:
    """
    Fetch custom field values for every entity concurrently.

    A failed fetch yields an empty list for that entity; the other
    requests are neither cancelled nor affected.

    Args:
        client: AdminAPIClient (anything with get_custom_field_values)
        module: module of the entities
        entity_ids: entity ids, duplicates fetched once
        max_concurrency: maximum requests in flight

    Returns:
        entity id -> values
    """
    semaphore = asyncio.Semaphore(max(1, max_concurrency))
    unique_ids = list(dict.fromkeys(entity_ids))

    async def fetch_one(entity_id: int) -> List[CustomFieldValue]:
        async with semaphore:
            try:
                return await client.get_custom_field_values(module, entity_id)
            except Exception as e:
                logger.warning(f"Custom field values unavailable for {module} {entity_id}: {e}")
                return []

    results = await asyncio.gather(*[fetch_one(entity_id) for entity_id in unique_ids])

    empty = sum(1 for values in results if not values)
    logger.debug(f"Fetched custom field values for {len(unique_ids)} entities ({empty} empty)")

    return dict(zip(unique_ids, results))


@dataclass
class CustomFieldRow:
    """Custom field columns of one entity row"""

    entity_id: int
    summary: str
    cells: Dict[int, Optional[str]] = field(default_factory=dict)

    def to_dict(self) -> Dict:
        return {
            "entityId": self.entity_id,
            "summary": self.summary,
            "cells": {str(field_id): value for field_id, value in self.cells.items()},
        }


class CustomFieldAggregator:
    """Builds custom field columns for a list of entities of one module"""

    def __init__(self, client, max_concurrency: int = 10):
        self.client = client
        self.max_concurrency = max_concurrency

    async def build_rows(
        self, module: Union[ModuleType, str], entity_ids: Sequence[int]
    ) -> List[CustomFieldRow]:
        """
        Definitions are fetched once per module; a failure there propagates.
        Values are fetched per entity with independent failure.
        """
        field_defs = await self.client.list_custom_fields(module)
        values_by_entity = await fetch_values_for_entities(
            self.client, module, entity_ids, self.max_concurrency
        )
        return self.rows_from(field_defs, values_by_entity, entity_ids)

    @staticmethod
    def rows_from(
        field_defs: Sequence[CustomFieldDefinition],
        values_by_entity: Dict[int, List[CustomFieldValue]],
        entity_ids: Sequence[int],
    ) -> List[CustomFieldRow]:
        enabled = [definition for definition in field_defs if definition.enabled]
        rows = []
        for entity_id in entity_ids:
            values = values_by_entity.get(entity_id, [])
            rows.append(
                CustomFieldRow(
                    entity_id=entity_id,
                    summary=summarize(field_defs, values),
                    cells={definition.id: lookup_value(values, definition.id) for definition in enabled},
                )
            )
        return rows
