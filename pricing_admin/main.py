#!/usr/bin/env python3
"""
Pricing admin console CLI
"""

import asyncio
import json
import sys

import click
from loguru import logger

from pricing_admin.client import AdminAPIClient, AdminAPIError
from pricing_admin.config import settings
from pricing_admin.domain.custom_fields import CustomFieldAggregator
from pricing_admin.models.custom_field import ModuleType
from pricing_admin.monitoring import setup_logging
from pricing_admin.services import CategoryListService, MarketplaceEditor


def _run(coro_factory):
    """Run one command against a fresh client; backend errors exit with status 1"""

    async def runner():
        async with AdminAPIClient(settings.admin_api) as client:
            return await coro_factory(client)

    try:
        return asyncio.run(runner())
    except AdminAPIError as e:
        logger.error(f"Admin backend error: {e.message}")
        sys.exit(1)


def _echo_json(data) -> None:
    click.echo(json.dumps(data, indent=2, ensure_ascii=False))


@click.group()
@click.option("--log-level", default=None, help="Log level (defaults to LOG_LEVEL)")
def cli(log_level):
    """Pricing admin console CLI"""
    setup_logging(log_level=log_level or settings.log_level, log_file=settings.log_file)


@cli.group()
def marketplace():
    """Marketplace commands"""


@marketplace.command("show")
@click.argument("marketplace_id", type=int)
def show_marketplace(marketplace_id: int):
    """Print a marketplace decoded into the cost editor form"""

    async def load(client):
        return await MarketplaceEditor(client).load(marketplace_id)

    form = _run(load)
    _echo_json(form.to_payload())


@cli.command()
def categories():
    """Print the category list rows"""

    async def load(client):
        return await CategoryListService(client, settings.admin_api.max_concurrency).load()

    rows = _run(load)
    for row in rows:
        click.echo(
            f"{row.id}\t{row.parent_category}\t{row.category}\t"
            f"{row.sub_category}\t{row.custom_fields}\t{row.status.value}"
        )
    logger.info(f"{len(rows)} category rows")


@cli.command("custom-fields")
@click.argument("module")
@click.option("--id", "entity_ids", type=int, multiple=True, required=True, help="Entity id (repeatable)")
def custom_fields(module: str, entity_ids):
    """Print custom field summaries for entities of MODULE (p, m, b, c or the module name)"""
    try:
        module_type = ModuleType.parse(module)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="MODULE")

    async def build(client):
        aggregator = CustomFieldAggregator(client, settings.admin_api.max_concurrency)
        return await aggregator.build_rows(module_type, list(entity_ids))

    rows = _run(build)
    _echo_json([row.to_dict() for row in rows])


@cli.command()
def serve():
    """Run the console view API"""
    from pricing_admin.api.main import run

    run()


if __name__ == "__main__":
    cli()
