"""
Marketplace editor service
Loads a marketplace into the editable form and saves the form back
"""

from loguru import logger

from pricing_admin.client import AdminAPIClient
from pricing_admin.domain.cost_codec import decode_costs, default_cost_state, encode_costs
from pricing_admin.domain.cost_editor import add_row, remove_row, set_product_value_type, update_row
from pricing_admin.domain.validator import MarketplaceValidationError, validate_marketplace_form
from pricing_admin.models.marketplace import (
    CostEditAction,
    Marketplace,
    MarketplaceForm,
    MarketplaceWriteRequest,
)


class MarketplaceEditor:
    """Marketplace create/edit page"""

    def __init__(self, client: AdminAPIClient):
        self.client = client

    async def load(self, marketplace_id: int) -> MarketplaceForm:
        """
        Fetch a marketplace and decode its costs into editor sections

        Args:
            marketplace_id: marketplace id

        Returns:
            Form with every cost section holding at least one row
        """
        marketplace = await self.client.get_marketplace(marketplace_id)
        logger.info(f"Loaded marketplace {marketplace_id} with {len(marketplace.costs)} cost records")

        return MarketplaceForm(
            name=marketplace.name,
            description=marketplace.description or "",
            enabled=marketplace.enabled,
            costs=decode_costs(marketplace.costs),
        )

    @staticmethod
    def new_form() -> MarketplaceForm:
        """Empty form for the create page"""
        return MarketplaceForm(costs=default_cost_state())

    @staticmethod
    def apply_edit(form: MarketplaceForm, edit: CostEditAction) -> MarketplaceForm:
        """
        Apply one row operation to the form's cost sections

        Raises:
            MarketplaceValidationError: the operation does not fit the current rows
        """
        try:
            if edit.action == "add":
                costs = add_row(form.costs, edit.section)
            elif edit.action == "update":
                if not edit.field:
                    raise ValueError("A field name is required to update a row")
                costs = update_row(form.costs, edit.section, edit.index, edit.field, edit.value)
            elif edit.action == "remove":
                costs = remove_row(form.costs, edit.section, edit.index)
            else:
                costs = set_product_value_type(form.costs, edit.value)
        except (IndexError, ValueError) as e:
            raise MarketplaceValidationError("costs", str(e)) from e

        logger.debug(f"Cost editor {edit.action} on {edit.section} row {edit.index}")
        return form.model_copy(update={"costs": costs})

    @staticmethod
    def build_request(form: MarketplaceForm) -> MarketplaceWriteRequest:
        """Validate the form and encode it into the write body"""
        validate_marketplace_form(form.name, form.description)
        return MarketplaceWriteRequest(
            name=form.name.strip(),
            description=(form.description or "").strip(),
            enabled=form.enabled,
            costs=encode_costs(form.costs),
        )

    async def submit(self, marketplace_id: int, form: MarketplaceForm) -> Marketplace:
        """Save an existing marketplace; validation runs before any request"""
        request = self.build_request(form)
        marketplace = await self.client.update_marketplace(marketplace_id, request)
        logger.info(f"Updated marketplace {marketplace_id} ({len(request.costs)} cost records)")
        return marketplace

    async def create(self, form: MarketplaceForm) -> Marketplace:
        """Create a marketplace from the form"""
        request = self.build_request(form)
        marketplace = await self.client.create_marketplace(request)
        logger.info(f"Created marketplace {marketplace.id}: {marketplace.name}")
        return marketplace

    async def set_enabled(self, marketplace_id: int, enabled: bool) -> None:
        await self.client.set_marketplace_enabled(marketplace_id, enabled)
        logger.info(f"Marketplace {marketplace_id} {'enabled' if enabled else 'disabled'}")
