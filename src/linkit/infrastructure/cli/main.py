import click

from linkit.domain.model.actor import Actor, Role
from linkit.infrastructure.bootstrap import (
    addon_repository,
    city_repository,
    country_repository,
    package_repository,
    product_repository,
)
from linkit.infrastructure.cli.catalog_commands import (
    addon_add,
    addon_list,
    city_add,
    city_list,
    city_toggle,
    country_add,
    country_list,
    lifecycle_commands,
    package_add,
    package_list,
    package_toggle,
    product_add,
    product_add_design,
    product_list,
    product_update,
)
from linkit.infrastructure.cli.custom_order_commands import (
    custom_order_assign_package,
    custom_order_create,
    custom_order_delete,
    custom_order_list,
    custom_order_price,
    custom_order_purge,
    custom_order_quote_email,
    custom_order_respond,
    custom_order_restore,
    custom_order_show,
    custom_order_stats,
    custom_order_status,
)
from linkit.infrastructure.cli.order_commands import (
    order_create,
    order_delete,
    order_list,
    order_purge,
    order_restore,
    order_show,
    order_stats,
    order_status,
    order_update,
)
from linkit.infrastructure.cli.pricing_commands import pricing_package, pricing_tier
from linkit.infrastructure.logging_setup import configure_logging
from linkit.infrastructure.settings import get_settings


@click.group()
@click.option("--actor", "actor_id", envvar="LINKIT_ACTOR", default="cli", help="Acting user ID.")
@click.option(
    "--role",
    envvar="LINKIT_ROLE",
    type=click.Choice([r.value for r in Role]),
    default=Role.USER.value,
    help="Acting user's role.",
)
@click.pass_context
def cli(ctx: click.Context, actor_id: str, role: str) -> None:
    """LinkIt NFC card ordering"""
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_json)
    ctx.obj = Actor(id=actor_id, role=Role(role))


@cli.group()
def order() -> None:
    """Manage standard card orders."""


@cli.group("custom-order")
def custom_order() -> None:
    """Manage bulk / custom quote orders."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def addon() -> None:
    """Manage addons."""


@cli.group()
def country() -> None:
    """Manage delivery countries."""


@cli.group()
def city() -> None:
    """Manage delivery cities."""


@cli.group()
def package() -> None:
    """Manage quantity packages."""


@cli.group()
def pricing() -> None:
    """Pricing lookups."""


# Register subcommands
order.add_command(order_create)
order.add_command(order_show)
order.add_command(order_list)
order.add_command(order_update)
order.add_command(order_status)
order.add_command(order_stats)
order.add_command(order_delete)
order.add_command(order_restore)
order.add_command(order_purge)
custom_order.add_command(custom_order_create)
custom_order.add_command(custom_order_show)
custom_order.add_command(custom_order_list)
custom_order.add_command(custom_order_status)
custom_order.add_command(custom_order_price)
custom_order.add_command(custom_order_assign_package)
custom_order.add_command(custom_order_respond)
custom_order.add_command(custom_order_quote_email)
custom_order.add_command(custom_order_stats)
custom_order.add_command(custom_order_delete)
custom_order.add_command(custom_order_restore)
custom_order.add_command(custom_order_purge)
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_update)
product.add_command(product_add_design)
addon.add_command(addon_add)
addon.add_command(addon_list)
country.add_command(country_add)
country.add_command(country_list)
city.add_command(city_add)
city.add_command(city_list)
city.add_command(city_toggle)
package.add_command(package_add)
package.add_command(package_list)
package.add_command(package_toggle)
pricing.add_command(pricing_tier)
pricing.add_command(pricing_package)

for group, label, factory in (
    (product, "Product", product_repository),
    (addon, "Addon", addon_repository),
    (country, "Country", country_repository),
    (city, "City", city_repository),
    (package, "Package", package_repository),
):
    for command in lifecycle_commands(label, factory):
        group.add_command(command)
