"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from storefront.domain.model.product import Product
from storefront.infrastructure.cli.runtime import run, truncate
from storefront.infrastructure.config import settings


def _print_products(products: list[Product], describe: bool = False) -> None:
    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<4} {'Name':<32} {'Category':<12} {'Price':>10} {'Rating':>7}")
    click.echo("-" * 69)
    for p in products:
        click.echo(
            f"{p.id:<4} {p.name:<32} {p.category:<12} {str(p.price):>10} {p.rating:>7.1f}"
        )
        if describe:
            click.echo(f"     {truncate(p.description, 60)}")


@click.command("list")
@click.option("--category", default=None, help="Only products in this category.")
@click.pass_context
def catalog_list(ctx: click.Context, category: str | None) -> None:
    """List products in the catalog."""

    async def work(c):
        if category:
            return c.catalog.get_products_by_category(category)
        return c.catalog.get_products()

    _print_products(run(ctx, work))


@click.command("search")
@click.argument("term")
@click.pass_context
def catalog_search(ctx: click.Context, term: str) -> None:
    """Search product names and descriptions."""

    async def work(c):
        return c.catalog.search_products(term)

    _print_products(run(ctx, work), describe=True)


@click.command("featured")
@click.pass_context
def catalog_featured(ctx: click.Context) -> None:
    """Show the highest-rated products."""

    async def work(c):
        return c.catalog.get_featured_products(settings.FEATURED_LIMIT)

    _print_products(run(ctx, work))


@click.command("categories")
@click.pass_context
def catalog_categories(ctx: click.Context) -> None:
    """List product categories."""

    async def work(c):
        return c.catalog.get_categories()

    for category in run(ctx, work):
        click.echo(category)
