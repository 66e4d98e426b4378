"""
Marketplace editor endpoints
"""

from fastapi import APIRouter, Depends, status

from pricing_admin.api.dependencies import get_marketplace_editor
from pricing_admin.models.marketplace import CostEditRequest, MarketplaceForm
from pricing_admin.monitoring import get_logger
from pricing_admin.services import MarketplaceEditor

logger = get_logger(__name__)

router = APIRouter()


@router.get("/new/editor")
async def new_marketplace_form(editor: MarketplaceEditor = Depends(get_marketplace_editor)):
    """Empty editor form with default cost rows"""
    return editor.new_form().to_payload()


@router.post("/editor/rows")
async def edit_cost_rows(
    body: CostEditRequest, editor: MarketplaceEditor = Depends(get_marketplace_editor)
):
    """Apply one add/update/remove row operation and return the updated form"""
    form = editor.apply_edit(body.form, body.edit)
    return form.to_payload()


@router.get("/{marketplace_id}/editor")
async def get_marketplace_form(
    marketplace_id: int, editor: MarketplaceEditor = Depends(get_marketplace_editor)
):
    """Marketplace decoded into the editor form"""
    form = await editor.load(marketplace_id)
    return form.to_payload()


@router.put("/{marketplace_id}")
async def update_marketplace(
    marketplace_id: int,
    form: MarketplaceForm,
    editor: MarketplaceEditor = Depends(get_marketplace_editor),
):
    """Validate, encode and save the editor form"""
    marketplace = await editor.submit(marketplace_id, form)
    logger.info(f"Marketplace {marketplace_id} saved from editor")
    return {"marketplace": marketplace.to_payload()}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_marketplace(
    form: MarketplaceForm, editor: MarketplaceEditor = Depends(get_marketplace_editor)
):
    """Create a marketplace from the editor form"""
    marketplace = await editor.create(form)
    return {"marketplace": marketplace.to_payload()}


@router.patch("/{marketplace_id}/enable")
async def set_marketplace_enabled(
    marketplace_id: int,
    enabled: bool,
    editor: MarketplaceEditor = Depends(get_marketplace_editor),
):
    await editor.set_enabled(marketplace_id, enabled)
    return {"id": marketplace_id, "enabled": enabled}
