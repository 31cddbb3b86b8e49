from pathlib import Path

import click

from storefront.infrastructure.cli.cart_commands import cart_quote
from storefront.infrastructure.cli.catalog_commands import (
    catalog_categories,
    catalog_featured,
    catalog_list,
    catalog_search,
)
from storefront.infrastructure.cli.order_commands import (
    order_list,
    order_next,
    order_show,
    order_stats,
    order_update_status,
)
from storefront.infrastructure.cli.profile_commands import profile_show
from storefront.infrastructure.cli.user_commands import (
    user_list,
    user_show,
    user_stats,
    user_toggle,
)
from storefront.infrastructure.config import settings
from storefront.infrastructure.logging_config import configure_logging


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory holding orders, users and profile storage.",
)
@click.option("--log-level", default=None, help="Logging level (e.g. INFO).")
@click.pass_context
def cli(ctx: click.Context, data_dir: Path | None, log_level: str | None) -> None:
    """Storefront catalog, cart and admin panel."""
    configure_logging((log_level or settings.LOG_LEVEL).upper())
    ctx.ensure_object(dict)
    ctx.obj["data_dir"] = data_dir or settings.DATA_DIR


@cli.group()
def catalog() -> None:
    """Browse products."""


@cli.group()
def cart() -> None:
    """Price a shopping cart."""


@cli.group()
def orders() -> None:
    """Manage orders."""


@cli.group()
def users() -> None:
    """Manage user accounts."""


@cli.group()
def profile() -> None:
    """Checkout profiles."""


# Register subcommands
catalog.add_command(catalog_categories)
catalog.add_command(catalog_featured)
catalog.add_command(catalog_list)
catalog.add_command(catalog_search)
cart.add_command(cart_quote)
orders.add_command(order_list)
orders.add_command(order_next)
orders.add_command(order_show)
orders.add_command(order_stats)
orders.add_command(order_update_status)
users.add_command(user_list)
users.add_command(user_show)
users.add_command(user_stats)
users.add_command(user_toggle)
profile.add_command(profile_show)
