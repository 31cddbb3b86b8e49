"""CLI commands for the admin users panel."""

from __future__ import annotations

import click

from storefront.domain.model.account import UserRole
from storefront.domain.model.session import SessionUser
from storefront.domain.service.account_queries import ALL
from storefront.infrastructure.cli.runtime import run

ROLE_CHOICES = [ALL] + [r.value for r in UserRole]


async def _load_accounts(c, as_user: int | None = None) -> None:
    """Load accounts and, if asked, sign in as one of them."""
    await c.accounts.load_users()
    if c.accounts.error:
        raise click.ClickException(c.accounts.error)
    if as_user is not None:
        user = c.accounts.get_user(as_user)
        c.session.login(SessionUser(id=user.id, email=user.email, role=user.role))


@click.command("list")
@click.option("--role", "role_filter", type=click.Choice(ROLE_CHOICES), default=ALL)
@click.option("--search", "search_term", default="", help="Email or name.")
@click.pass_context
def user_list(ctx: click.Context, role_filter: str, search_term: str) -> None:
    """List user accounts, newest first."""

    async def work(c):
        await _load_accounts(c)
        c.accounts.role_filter = role_filter
        c.accounts.search_term = search_term
        c.accounts.apply_filter()
        return c.accounts.filtered_users

    users = run(ctx, work)
    if not users:
        click.echo("No users found.")
        return

    click.echo(f"{'ID':<5} {'Email':<30} {'Name':<18} {'Role':<6} {'Status':<10}")
    click.echo("-" * 72)
    for u in users:
        click.echo(
            f"{u.id:<5} {u.email:<30} {u.full_name:<18} {u.role.value:<6} {u.status.value:<10}"
        )


@click.command("stats")
@click.pass_context
def user_stats(ctx: click.Context) -> None:
    """Show account counts."""

    async def work(c):
        await _load_accounts(c)
        return c.accounts.stats

    stats = run(ctx, work)
    click.echo(f"Users:   {stats.total_users}")
    click.echo(f"Active:  {stats.active_users}")
    click.echo(f"Admins:  {stats.admin_count}")


@click.command("show")
@click.option("--id", "user_id", required=True, type=int, help="User ID to display.")
@click.option("--as-user", "as_user", type=int, default=None, help="Signed-in user ID.")
@click.pass_context
def user_show(ctx: click.Context, user_id: int, as_user: int | None) -> None:
    """Show an account with its shipping address."""

    async def work(c):
        await _load_accounts(c, as_user)
        return c.admin_users.get_user_detail(user_id)

    dto = run(ctx, work)
    click.echo(f"#{dto.id} {dto.first_name} {dto.last_name} <{dto.email}>")
    click.echo(f"Role:       {dto.role}{'  (you)' if dto.is_self else ''}")
    click.echo(f"Status:     {dto.status}")
    click.echo(f"Registered: {dto.registered_at}")
    click.echo(f"Orders:     {dto.order_count}  ({dto.total_spent})")
    if dto.shipping is None:
        click.echo("Shipping:   no saved address")
    else:
        s = dto.shipping
        click.echo(f"Shipping:   {s.address}, {s.city}, {s.state} {s.zip_code}")


@click.command("toggle")
@click.option("--id", "user_id", required=True, type=int, help="User ID to toggle.")
@click.option("--as-user", "as_user", type=int, default=None, help="Signed-in user ID.")
@click.pass_context
def user_toggle(ctx: click.Context, user_id: int, as_user: int | None) -> None:
    """Suspend or reactivate an account."""

    async def work(c):
        await _load_accounts(c, as_user)
        updated = await c.accounts.toggle_user_status(user_id)
        if updated is None:
            raise click.ClickException(c.accounts.error)
        return updated

    updated = run(ctx, work)
    click.echo(f"User #{updated.id} is now {updated.status.value}.")
