"""CLI commands for the shopping cart."""

from __future__ import annotations

import click

from storefront.infrastructure.cli.runtime import run


def _parse_items(raw: str) -> list[tuple[int, int]]:
    """Parse '1:3,4:5' into (product_id, quantity) pairs."""
    specs: list[tuple[int, int]] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductId:Quantity'."
            )
        id_str, qty_str = pair.rsplit(":", 1)
        try:
            specs.append((int(id_str), int(qty_str)))
        except ValueError:
            raise click.BadParameter(f"Invalid item '{pair}'.")
    return specs


@click.command("quote")
@click.option("--items", required=True, help="Items as 'ProductId:Qty,ProductId:Qty'.")
@click.pass_context
def cart_quote(ctx: click.Context, items: str) -> None:
    """Build a cart from the given items and print its totals."""
    specs = _parse_items(items)

    async def work(c):
        for product_id, quantity in specs:
            product = c.catalog.get_product_by_id(product_id)
            if product is None:
                raise click.ClickException(f"Product #{product_id} not found")
            if quantity > 0:
                c.cart.add_to_cart(product, quantity)
        return c.cart

    cart = run(ctx, work)

    if cart.is_empty:
        click.echo("Cart is empty.")
        return

    click.echo(f"  {'Product':<32} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*59}")
    for item in cart.items:
        click.echo(
            f"  {item.product.name:<32} {item.quantity:>5} "
            f"{str(item.product.price):>10} {str(item.line_total):>10}"
        )
    click.echo(f"  {'-'*59}")
    click.echo(f"  {'Items':<32} {cart.item_count:>5}")
    click.echo(f"  {'Cart Total':<32} {str(cart.total_price):>27}")
