"""CLI commands for the admin orders panel."""

from __future__ import annotations

import click

from storefront.application.show_order import ShowOrderHandler
from storefront.domain.model.order import OrderStatus
from storefront.domain.service.order_queries import ALL
from storefront.infrastructure.cli.runtime import run

STATUS_CHOICES = [ALL] + [s.value for s in OrderStatus]


async def _load_orders(c) -> None:
    await c.orders.load_orders()
    if c.orders.error:
        raise click.ClickException(c.orders.error)


def _display_order(dto) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"{dto.order_number}  (status={dto.status})")
    click.echo(f"Customer: {dto.customer_name} <{dto.email}>")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()
    click.echo(f"  {'Product':<32} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*59}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<32} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*59}")
    click.echo(f"  {'Order Total':<39} {dto.total:>20}")
    if dto.next_statuses:
        click.echo(f"Next: {', '.join(dto.next_statuses)}")


@click.command("list")
@click.option("--status", "status_filter", type=click.Choice(STATUS_CHOICES), default=ALL)
@click.option("--search", "search_term", default="", help="Order number, email or name.")
@click.pass_context
def order_list(ctx: click.Context, status_filter: str, search_term: str) -> None:
    """List orders, optionally filtered."""

    async def work(c):
        await _load_orders(c)
        c.orders.status_filter = status_filter
        c.orders.search_term = search_term
        c.orders.apply_filter()
        return ShowOrderHandler(c.orders).list_filtered()

    dtos = run(ctx, work)
    if not dtos:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<4} {'Number':<10} {'Customer':<20} {'Status':<11} {'Total':>10}")
    click.echo("-" * 59)
    for dto in dtos:
        click.echo(
            f"{dto.id:<4} {dto.order_number:<10} {dto.customer_name:<20} "
            f"{dto.status:<11} {dto.total:>10}"
        )


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
@click.pass_context
def order_show(ctx: click.Context, order_id: int) -> None:
    """Show details of an order."""

    async def work(c):
        await _load_orders(c)
        return ShowOrderHandler(c.orders).handle(order_id)

    _display_order(run(ctx, work))


@click.command("next")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to inspect.")
@click.pass_context
def order_next(ctx: click.Context, order_id: int) -> None:
    """List the statuses an order can move to."""

    async def work(c):
        await _load_orders(c)
        order = c.orders.get_order(order_id)
        return order, c.orders.get_next_statuses(order.status)

    order, statuses = run(ctx, work)
    allowed = ", ".join(s.value for s in statuses) or "none"
    click.echo(f"{order.order_number} ({order.status.value}) -> {allowed}")


@click.command("stats")
@click.pass_context
def order_stats(ctx: click.Context) -> None:
    """Show order counts and revenue."""

    async def work(c):
        await _load_orders(c)
        return c.orders.stats

    stats = run(ctx, work)
    click.echo(f"Orders:   {stats.total_orders}")
    click.echo(f"Revenue:  {stats.total_revenue}")
    click.echo(f"Pending:  {stats.pending_count}")
    click.echo(f"Shipped:  {stats.shipped_count}")


@click.command("update-status")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to update.")
@click.option(
    "--status",
    "new_status",
    required=True,
    type=click.Choice([s.value for s in OrderStatus]),
    help="Status to move the order to.",
)
@click.pass_context
def order_update_status(ctx: click.Context, order_id: int, new_status: str) -> None:
    """Move an order to its next workflow status."""

    async def work(c):
        await _load_orders(c)
        updated = await c.orders.update_status(order_id, OrderStatus(new_status))
        if updated is None:
            raise click.ClickException(c.orders.error)
        return updated

    updated = run(ctx, work)
    click.echo(f"{updated.order_number} is now {updated.status.value}.")
