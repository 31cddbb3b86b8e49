"""CLI commands for the signed-in user's profile."""

from __future__ import annotations

import click

from storefront.domain.model.session import SessionUser
from storefront.infrastructure.cli.runtime import run


@click.command("show")
@click.option("--user-id", required=True, type=int, help="User to sign in as.")
@click.pass_context
def profile_show(ctx: click.Context, user_id: int) -> None:
    """Sign in as a user and show their checkout profile."""

    async def work(c):
        await c.accounts.load_users()
        if c.accounts.error:
            raise click.ClickException(c.accounts.error)
        user = c.accounts.get_user(user_id)
        c.session.login(SessionUser(id=user.id, email=user.email, role=user.role))
        return c.profiles.profile

    profile = run(ctx, work)
    if profile is None:
        click.echo("No saved profile.")
        return

    click.echo(f"{profile.first_name} {profile.last_name} <{profile.email}>")
    click.echo(
        f"Ship to: {profile.shipping_address}, {profile.shipping_city}, "
        f"{profile.shipping_state} {profile.shipping_zip}"
    )
    if profile.card_number:
        click.echo(f"Card:    **** {profile.card_number[-4:]} (exp {profile.card_expiry})")
